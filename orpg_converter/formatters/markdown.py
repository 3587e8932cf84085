"""Markdown transcript formatter.

WHY: A Markdown transcript is readable as plain text and renders nicely
in any viewer, which is all anyone needs to revisit an old chat.

HOW: Each transcript entry becomes a level-4 heading naming the speaker,
a blank line, the raw message body, and a blank line. The fragments are
concatenated in transcript order.

RULES:
- Fragment: "#### <display_name>:\n\n<content>\n\n"
- One heading per entry, so N entries → N "####" markers
- Content is written verbatim (no escaping, no re-wrapping)
- No trailing-newline normalization; an empty transcript is ""
- Output suffix: ".md", media type "text/markdown"
"""

from __future__ import annotations

from typing import List

from orpg_converter.config import MARKDOWN_MEDIA_TYPE, MARKDOWN_SUFFIX
from orpg_converter.core.ir import Transcript, TranscriptEntry
from orpg_converter.formatters.base import BaseFormatter, FormatterOutput

_FRAGMENT = "#### {name}:\n\n{content}\n\n"


def render_entry(entry: TranscriptEntry) -> str:
    """Render one transcript entry as a Markdown fragment."""
    return _FRAGMENT.format(name=entry.display_name, content=entry.content)


def render_markdown(transcript: Transcript) -> str:
    """Render the whole transcript as one Markdown string."""
    return "".join(render_entry(entry) for entry in transcript.entries)


class MarkdownFormatter(BaseFormatter):
    """Formatter that produces a speaker-headed Markdown transcript."""

    @property
    def name(self) -> str:
        return "Markdown"

    def format(self, transcript: Transcript) -> List[FormatterOutput]:
        return [
            FormatterOutput(
                suffix=MARKDOWN_SUFFIX,
                content=render_markdown(transcript),
                media_type=MARKDOWN_MEDIA_TYPE,
            )
        ]
