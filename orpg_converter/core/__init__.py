"""Core loading, data model, and transcript-building modules.

WHY: The core package holds the format-agnostic heart of the converter:
the pydantic Document model of an ORPG export, the Transcript IR, and the
logic that turns one into the other. Formatters only ever see the IR.

HOW: models.py defines the export's shape, loader.py reads and parses a
file into it, transcript.py orders messages and resolves speaker names
into ir.py's dataclasses.

RULES:
- IR dataclasses are the contract — change with care
- No output-format logic here
"""
