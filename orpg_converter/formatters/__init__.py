"""Output formatters for the Transcript IR.

Markdown is the only output format; MarkdownFormatter is re-exported
here so callers need a single import.
"""

from orpg_converter.formatters.markdown import MarkdownFormatter

__all__ = ["MarkdownFormatter"]
