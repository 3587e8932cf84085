"""Load an ORPG export file into a Document.

WHY: Reading the export is the only step that can fail in a way the user
should be told about in plain words (the file is not JSON). It is also
where the soft version check happens, since the version is known as soon
as the document is parsed.

HOW: parse_document() turns text into a Document and converts JSON
syntax errors into MalformedInputError. load_document() reads the file,
parses it, runs check_version(), and reports a mismatch through the
optional on_status callback instead of printing directly.

RULES:
- Files are read as UTF-8; undecodable bytes become U+FFFD
- Only json.JSONDecodeError is translated (into MalformedInputError)
- OSError from reading the file propagates unmodified
- A version mismatch is reported, never raised: through on_status when
  given, otherwise through logger.warning
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Callable, Optional

from orpg_converter.config import EXPECTED_VERSION
from orpg_converter.core.models import Document
from orpg_converter.errors import MalformedInputError, VersionMismatchWarning

logger = logging.getLogger(__name__)


def parse_document(text: str) -> Document:
    """Parse export text into a Document.

    Raises:
        MalformedInputError: If ``text`` is not valid JSON.
        pydantic.ValidationError: If the JSON is not an object.
    """
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedInputError(str(exc)) from exc
    return Document.model_validate(raw)


def check_version(document: Document) -> Optional[VersionMismatchWarning]:
    """Return a warning when the document is not a supported ORPG export.

    RULES:
    - Absent or empty version counts as a mismatch (reported as "none")
    - Any version other than exactly EXPECTED_VERSION is a mismatch
    """
    if document.version and document.version == EXPECTED_VERSION:
        return None
    return VersionMismatchWarning(actual=document.version)


def load_document(
    path: str | Path,
    on_status: Optional[Callable[[str], None]] = None,
) -> Document:
    """Read and parse an ORPG export from disk.

    Args:
        path: Path to the JSON export.
        on_status: Called with the warning text if the version check
                   fails. Without a callback the warning is logged
                   at WARNING level instead.

    Returns:
        The parsed Document.

    Raises:
        OSError: If the file does not exist or cannot be read.
        MalformedInputError: If the file content is not valid JSON.
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8", errors="replace")
    logger.debug("Read %d characters from %s", len(text), path)

    document = parse_document(text)
    logger.debug(
        "Parsed document: version=%r, %d characters, %d messages",
        document.version,
        len(document.characters),
        len(document.messages),
    )

    warning = check_version(document)
    if warning is not None:
        if on_status is not None:
            on_status(str(warning))
        else:
            logger.warning("%s", warning)

    return document
