"""Command-line interface for the ORPG to Markdown converter.

WHY: Users have an exported chat file and want a readable transcript
next to it. The CLI wires the whole pipeline — load, build, format,
save — behind a single ``convert <inputFile> [outputFile]`` command.

HOW: Uses argparse for the two positional paths plus --verbose and
--version. The input path is declared optional so a missing argument can
be reported with our own message and exit code instead of argparse's.
Status and error messages go to stderr; the success line goes to stdout.

RULES:
- No input file → "Please provide an input file" on stderr, exit 1,
  before any file access
- Invalid JSON → "Error: File doesn't appear to be a valid JSON file"
  on stderr, exit 1, no output file written
- Version mismatch → warning on stderr, conversion continues
- Output path defaults to the input path with its extension replaced
  by ".md" (appended when there is no extension)
- An existing output file is overwritten without asking
- Any other failure (unreadable input, unwritable output) propagates
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Callable, List, Optional

from orpg_converter import __version__
from orpg_converter.config import (
    INVALID_JSON_MESSAGE,
    LOG_FORMAT,
    MARKDOWN_SUFFIX,
    MISSING_INPUT_MESSAGE,
    SUCCESS_TEMPLATE,
)
from orpg_converter.core.loader import load_document
from orpg_converter.core.transcript import build_transcript
from orpg_converter.errors import MalformedInputError, UsageError
from orpg_converter.formatters import MarkdownFormatter

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: Warnings and errors must not end up in stdout, which only
    carries the success line.
    """
    print(msg, file=sys.stderr, flush=True)


def derive_output_path(input_file: str | Path, suffix: str = MARKDOWN_SUFFIX) -> str:
    """Derive the default output path from the input path text.

    RULES:
    - The path text is kept as given: ./chat.json → ./chat.md
    - The last extension is replaced: chat.json → chat.md,
      chat.tar.gz → chat.tar.md
    - A trailing dot counts as an empty extension: chat. → chat.md
    - No extension → suffix appended: chat → chat.md
    - Dots in directory names are never touched
    - A leading-dot name has no extension: .export → .export.md
    """
    root, _ext = os.path.splitext(str(input_file))
    return root + suffix


def convert_file(
    input_file: str | Path,
    output_file: str | Path | None = None,
    on_status: Optional[Callable[[str], None]] = None,
) -> str:
    """Convert one ORPG export into a Markdown transcript on disk.

    WHY: This is the whole conversion as a callable, so it can be used
    and tested without going through argument parsing or sys.exit().

    HOW: load_document → build_transcript → MarkdownFormatter → write.
    The output is written only after the input parsed successfully.

    Args:
        input_file: Path to the ORPG JSON export.
        output_file: Destination path. Empty or None derives it from
                     input_file.
        on_status: Receives the version-mismatch warning, if any.

    Returns:
        The path the Markdown was written to, as text. An explicit
        output_file is returned exactly as passed.

    Raises:
        MalformedInputError: If the input is not valid JSON.
        OSError: If the input cannot be read or the output written.
    """
    input_path = Path(input_file)
    document = load_document(input_path, on_status=on_status)
    transcript = build_transcript(document, source_filename=input_path.name)

    output = MarkdownFormatter().format(transcript)[0]
    if output_file:
        output_path = str(output_file)
    else:
        output_path = derive_output_path(input_file, output.suffix)

    Path(output_path).write_text(output.content, encoding="utf-8")
    logger.debug("Wrote %d characters to %s", len(output.content), output_path)
    return output_path


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() lets tests inspect
    the parser without running a conversion.
    """
    parser = argparse.ArgumentParser(
        prog="convert",
        description="Convert an ORPG chat export (JSON) into a Markdown transcript.",
    )

    parser.add_argument(
        "input_file",
        nargs="?",
        default=None,
        help="Path to the ORPG JSON export.",
    )

    parser.add_argument(
        "output_file",
        nargs="?",
        default=None,
        help="Path for the Markdown transcript "
             "(default: input path with its extension replaced by .md).",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log diagnostic details to stderr.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    return parser


def _require_input(args: argparse.Namespace) -> str:
    if not args.input_file:
        raise UsageError(MISSING_INPUT_MESSAGE)
    return args.input_file


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``convert`` command and ``python -m orpg_converter``.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    args = build_parser().parse_args(argv)

    try:
        input_file = _require_input(args)
    except UsageError as e:
        _status(str(e))
        sys.exit(1)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)

    try:
        output_path = convert_file(input_file, args.output_file, on_status=_status)
    except MalformedInputError as e:
        logger.debug("JSON parse error in %s: %s", input_file, e)
        _status(INVALID_JSON_MESSAGE)
        sys.exit(1)

    print(SUCCESS_TEMPLATE.format(input_file=input_file, output_file=output_path))


if __name__ == "__main__":
    main()
