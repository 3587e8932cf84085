"""Error and warning types raised by the converter.

WHY: The CLI must tell "this file is not JSON" apart from every other
failure, because that is the one case reported with a friendly message.
A dedicated exception type makes the distinction explicit instead of
guessing from a generic ValueError.

RULES:
- MalformedInputError is raised only for JSON syntax errors
- Filesystem failures stay as the built-in OSError and are never wrapped
- VersionMismatchWarning is informational; it is reported, not raised
"""

from __future__ import annotations

from orpg_converter.config import (
    EXPECTED_VERSION,
    MISSING_VERSION_LABEL,
    VERSION_WARNING_TEMPLATE,
)


class ConverterError(Exception):
    """Base class for errors the converter reports itself."""


class UsageError(ConverterError):
    """The command line is missing the required input file."""


class MalformedInputError(ConverterError, ValueError):
    """The input file content could not be parsed as JSON."""


class VersionMismatchWarning(UserWarning):
    """The export's ``version`` is absent or not the supported one.

    Attributes:
        expected: The supported version string.
        actual: The version found in the document, or None when absent
                or empty.
    """

    def __init__(self, actual: str | None, expected: str = EXPECTED_VERSION) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            VERSION_WARNING_TEMPLATE.format(
                expected=expected,
                actual=actual or MISSING_VERSION_LABEL,
            )
        )
