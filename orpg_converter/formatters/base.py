"""Abstract base formatter and output container.

WHY: The CLI should not care how a transcript becomes text. A formatter
interface keeps rendering separate from file handling, and lets tests
check rendered content without touching the filesystem.

HOW: BaseFormatter is an ABC with two requirements — a ``name`` property
and a ``format()`` method. FormatterOutput is a plain dataclass that
bundles a file suffix with its content and MIME type.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``format()`` returns a list of outputs; Markdown returns exactly one
- ``suffix`` is the extension that replaces the input file's own
- The caller decides where the content is written
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from orpg_converter.core.ir import Transcript


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        suffix: Extension for a derived output path, e.g. ``".md"``.
        content: The complete file content.
        media_type: MIME type for the content, e.g. ``"text/markdown"``.
    """

    suffix: str
    content: str
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for transcript formatters."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Markdown'."""

    @abstractmethod
    def format(self, transcript: Transcript) -> list[FormatterOutput]:
        """Convert the Transcript IR into output files.

        Args:
            transcript: The ordered conversation with resolved speaker names.

        Returns:
            List of FormatterOutput objects.
        """
