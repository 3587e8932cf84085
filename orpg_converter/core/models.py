"""Pydantic models describing the ORPG export document.

WHY: The export is loosely structured JSON written by another program.
Typed models give the rest of the converter named, optional fields
instead of nested dict probing, and map the camelCase wire names
(characterId, updatedAt, modelInfo) onto Python attribute names.

HOW: Each record is a BaseModel with aliases for the wire names. Every
field has a neutral default, and "before" validators reduce values of
the wrong type to something the fallback rules understand, so a badly
shaped export degrades instead of failing validation.

RULES:
- Only ``version``, ``characters`` and ``messages`` are read at the top level
- content / updatedAt: null → "", booleans → "true"/"false", numbers →
  their text, lists and objects → compact JSON text
- characterId: strings and numbers kept as text, anything else → None
- version, short_name, name: anything but a string → None
- modelInfo or a character entry that is not an object → None (→ "AI")
- characters / messages that are not objects → empty; message entries
  that are not objects are dropped
- The "USER" sentinel is turned into UserSpeaker by Message.speaker,
  so no other module compares characterId against the sentinel
- A top-level value that is not a JSON object fails validation
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from orpg_converter.config import USER_SPEAKER_ID
from orpg_converter.core.ir import CharacterSpeaker, Speaker, UserSpeaker

_LENIENT = ConfigDict(
    populate_by_name=True,
    coerce_numbers_to_str=True,
    extra="ignore",
    protected_namespaces=(),
)


def _as_text(value: Any) -> str:
    """Render any JSON value as message text."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def _str_or_none(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _dict_or_none(value: Any) -> Optional[dict]:
    return value if isinstance(value, dict) else None


class ModelInfo(BaseModel):
    """Display-name hints for an AI persona."""

    model_config = _LENIENT

    short_name: Optional[str] = None
    name: Optional[str] = None

    @field_validator("short_name", "name", mode="before")
    @classmethod
    def _names_must_be_text(cls, value: Any) -> Any:
        return _str_or_none(value)


class Character(BaseModel):
    """A non-user participant. Its id is the key it is stored under."""

    model_config = _LENIENT

    model_info: Optional[ModelInfo] = Field(default=None, alias="modelInfo")

    @field_validator("model_info", mode="before")
    @classmethod
    def _model_info_must_be_object(cls, value: Any) -> Any:
        return _dict_or_none(value)


class Message(BaseModel):
    """A single chat message as exported.

    RULES:
    - character_id: "USER" for the human, otherwise a key into characters
    - content: raw body rendered as text; null or missing becomes ""
    - updated_at: ISO-8601-like timestamp as text; null or missing becomes ""
    """

    model_config = _LENIENT

    character_id: Optional[str] = Field(default=None, alias="characterId")
    content: str = ""
    updated_at: str = Field(default="", alias="updatedAt")

    @field_validator("character_id", mode="before")
    @classmethod
    def _id_to_text(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return _str_or_none(value)

    @field_validator("content", "updated_at", mode="before")
    @classmethod
    def _value_to_text(cls, value: Any) -> Any:
        return _as_text(value)

    @property
    def speaker(self) -> Speaker:
        if self.character_id == USER_SPEAKER_ID:
            return UserSpeaker()
        return CharacterSpeaker(character_id=self.character_id)


class Document(BaseModel):
    """The top-level ORPG export.

    The keys of ``messages`` only guarantee uniqueness; ordering comes
    from each message's ``updated_at``.
    """

    model_config = _LENIENT

    version: Optional[str] = None
    characters: Dict[str, Optional[Character]] = Field(default_factory=dict)
    messages: Dict[str, Message] = Field(default_factory=dict)

    @field_validator("version", mode="before")
    @classmethod
    def _version_must_be_text(cls, value: Any) -> Any:
        return _str_or_none(value)

    @field_validator("characters", mode="before")
    @classmethod
    def _non_object_characters_absent(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return {}
        return {key: _dict_or_none(entry) for key, entry in value.items()}

    @field_validator("messages", mode="before")
    @classmethod
    def _drop_non_object_messages(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return {}
        return {key: entry for key, entry in value.items() if isinstance(entry, dict)}
