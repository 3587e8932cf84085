"""Configuration constants for the ORPG converter.

WHY: Centralizes the literals the converter depends on (export version,
speaker sentinel, fallback names, user-facing messages) so they are easy
to find and are not buried in logic. Tests import them too, so a change
here is a change everywhere.

HOW: Plain module-level strings. The converter reads no environment
variables and no config files; everything else comes from CLI flags.

RULES:
- EXPECTED_VERSION is the only export version accepted without warning
- USER_SPEAKER_ID is the characterId sentinel for the human participant
- Messages printed to stderr/stdout are defined here verbatim
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Export format
# ---------------------------------------------------------------------------

EXPECTED_VERSION = "orpg.1.0"
"""The ``version`` value written by the supported ORPG exporter."""

USER_SPEAKER_ID = "USER"
"""characterId sentinel marking a message written by the human user."""

MISSING_VERSION_LABEL = "none"

# ---------------------------------------------------------------------------
# Display names
# ---------------------------------------------------------------------------

USER_DISPLAY_NAME = "You"
FALLBACK_AI_NAME = "AI"

# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

MARKDOWN_SUFFIX = ".md"
MARKDOWN_MEDIA_TYPE = "text/markdown"

# ---------------------------------------------------------------------------
# User-facing messages
# ---------------------------------------------------------------------------

MISSING_INPUT_MESSAGE = "Please provide an input file"
INVALID_JSON_MESSAGE = "Error: File doesn't appear to be a valid JSON file"
VERSION_WARNING_TEMPLATE = (
    'Warning: File may not be a valid ORPG export '
    '(expected version "{expected}", got "{actual}")'
)
SUCCESS_TEMPLATE = "Converted {input_file} to {output_file}"

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
