"""Build the ordered Transcript IR from a parsed Document.

WHY: The export stores messages in a map whose keys carry no order, and
names speakers only by id. Formatters need chronological entries that
already know who is speaking.

HOW: order_messages() sorts the map's values by their updated_at string.
resolve_display_name() walks the fallback chain for each speaker.
build_transcript() combines both into a Transcript.

RULES:
- Ordering is plain lexicographic string comparison on updated_at,
  ascending. This matches chronological order only for fixed-width,
  zero-padded ISO-8601 timestamps in one timezone notation.
- Ties keep their map iteration order (sorted() is stable)
- User → "You"; persona → short_name, then name, then "AI"
- Unknown character ids and characters without modelInfo → "AI"
"""

from __future__ import annotations

import logging
from typing import List, Mapping, Optional

from orpg_converter.config import FALLBACK_AI_NAME, USER_DISPLAY_NAME
from orpg_converter.core.ir import Speaker, Transcript, TranscriptEntry, UserSpeaker
from orpg_converter.core.models import Character, Document, Message

logger = logging.getLogger(__name__)


def _updated_at_key(message: Message) -> str:
    return message.updated_at


def order_messages(messages: Mapping[str, Message]) -> List[Message]:
    """Return the messages earliest first, discarding their map keys."""
    return sorted(messages.values(), key=_updated_at_key)


def resolve_display_name(
    speaker: Speaker,
    characters: Mapping[str, Optional[Character]],
) -> str:
    """Resolve the heading name for a message's speaker.

    Args:
        speaker: The message's parsed speaker.
        characters: The document's character map.

    Returns:
        "You" for the user; otherwise the first non-empty of the
        character's short_name and name, else "AI".
    """
    if isinstance(speaker, UserSpeaker):
        return USER_DISPLAY_NAME

    character = None
    if speaker.character_id is not None:
        character = characters.get(speaker.character_id)
    if character is None or character.model_info is None:
        return FALLBACK_AI_NAME

    info = character.model_info
    return info.short_name or info.name or FALLBACK_AI_NAME


def build_transcript(document: Document, source_filename: str = "") -> Transcript:
    """Order a document's messages and resolve every speaker name.

    Args:
        document: The parsed ORPG export.
        source_filename: Name of the input file, carried for reference.

    Returns:
        A Transcript with one entry per message, earliest first.
    """
    entries: List[TranscriptEntry] = []
    for message in order_messages(document.messages):
        speaker = message.speaker
        entries.append(
            TranscriptEntry(
                display_name=resolve_display_name(speaker, document.characters),
                content=message.content,
                updated_at=message.updated_at,
                speaker=speaker,
            )
        )

    logger.debug("Built transcript with %d entries", len(entries))
    return Transcript(
        entries=entries,
        version=document.version,
        source_filename=source_filename,
    )
