"""Intermediate representation dataclasses for a rebuilt chat transcript.

WHY: An ORPG export keeps messages in an unordered map and names speakers
only by id. Formatters need the opposite: an ordered list of messages,
each already carrying a human-readable speaker name. The IR is that
ordered, resolved form, decoupling export parsing from output formatting.

HOW: A small speaker union plus two containers:
  UserSpeaker       — the human participant (the "USER" sentinel)
  CharacterSpeaker  — an AI persona, referenced by character id
  TranscriptEntry   — one message with its resolved display name
  Transcript        — the full ordered conversation

RULES:
- Entries are in chronological order (ascending updated_at)
- display_name is final; formatters never resolve names themselves
- content is the raw message body, never re-escaped or re-flowed
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class UserSpeaker:
    """The human side of the conversation."""


@dataclass(frozen=True)
class CharacterSpeaker:
    """A non-user participant, identified by its key in ``characters``.

    character_id is None when the message carried no characterId at all;
    such a speaker always resolves to the fallback name.
    """

    character_id: str | None


Speaker = Union[UserSpeaker, CharacterSpeaker]


@dataclass
class TranscriptEntry:
    """One message of the transcript, ready to render.

    RULES:
    - display_name: "You" for the user, otherwise the persona's name or "AI"
    - content: message body exactly as exported
    - updated_at: the timestamp string the entry was ordered by
    """

    display_name: str
    content: str
    updated_at: str = ""
    speaker: Speaker = field(default_factory=UserSpeaker)


@dataclass
class Transcript:
    """The complete ordered conversation handed to formatters.

    RULES:
    - entries: one per exported message, earliest first (may be empty)
    - version: the export's version string, or None when absent
    - source_filename: input file name, informational only
    """

    entries: list[TranscriptEntry] = field(default_factory=list)
    version: str | None = None
    source_filename: str = ""
