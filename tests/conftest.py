"""Shared test fixtures for the orpg_converter test suite.

WHY: Most test modules need the same small ORPG exports — a plain
user/persona exchange, a multi-persona chat, and a wrong-version file.
Centralizing them here keeps every test working from the same data.

HOW: Module-level dicts hold the raw export JSON. Fixtures return fresh
deep copies, and write_export writes any dict into tmp_path as JSON.

RULES:
- Message map keys are deliberately NOT in chronological order
- The haiku/strawberry sample mirrors a real exported chat
"""

import copy
import json
from typing import Any, Dict

import pytest

# ---------------------------------------------------------------------------
# Sample exports
# ---------------------------------------------------------------------------

STRAWBERRY_EXPORT: Dict[str, Any] = {
    "version": "orpg.1.0",
    "characters": {
        "char-1735038715-DS8UZX2WvLJWGqaEBiot": {
            "id": "char-1735038715-DS8UZX2WvLJWGqaEBiot",
            "modelInfo": {
                "short_name": "Claude 3.5 Haiku (2024-10-22) (self-moderated)",
            },
        },
    },
    "messages": {
        "msg-1735169826-37r5gAcrK8YyOLIQvWRp": {
            "characterId": "char-1735038715-DS8UZX2WvLJWGqaEBiot",
            "content": "Let me help you count the r's in \"strawberry\":\n\n"
                       "st*r*awbe*r*y\n\nThere are 2 r's in the word \"strawberry\".",
            "updatedAt": "2024-12-25T23:37:07.790Z",
        },
        "msg-1735169826-GQZrG3EaTJqjOkJ1mIVE": {
            "characterId": "USER",
            "content": "How many r's are in the word strawberry?",
            "updatedAt": "2024-12-25T23:37:06.203Z",
        },
    },
}

MULTI_PERSONA_EXPORT: Dict[str, Any] = {
    "version": "orpg.1.0",
    "characters": {
        "char-1": {"id": "char-1", "modelInfo": {"short_name": "Claude 3.5 Haiku (2024-10-22) (self-moderated)"}},
        "char-2": {"id": "char-2", "modelInfo": {"short_name": "GPT-4 (2024-03)"}},
    },
    "messages": {
        "msg-3": {"characterId": "char-2", "content": "Hi from GPT",    "updatedAt": "2024-01-01T00:00:02Z"},
        "msg-1": {"characterId": "USER",   "content": "Hello",          "updatedAt": "2024-01-01T00:00:00Z"},
        "msg-2": {"characterId": "char-1", "content": "Hi from Claude", "updatedAt": "2024-01-01T00:00:01Z"},
    },
}


@pytest.fixture
def strawberry_export():
    """A two-message export, persona reply stored before the user question."""
    return copy.deepcopy(STRAWBERRY_EXPORT)


@pytest.fixture
def multi_persona_export():
    """A user and two personas, message map keys shuffled."""
    return copy.deepcopy(MULTI_PERSONA_EXPORT)


@pytest.fixture
def write_export(tmp_path):
    """Write an export dict (or raw text) to tmp_path and return the path."""

    def _write(data, name="chat.json"):
        path = tmp_path / name
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
