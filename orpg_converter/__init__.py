"""ORPG chat export to Markdown converter.

WHY: ORPG exports store a conversation as two unordered JSON maps
(characters and messages). Nothing renders that directly, so reading a
past chat means digging through raw JSON. This package turns one export
into a readable Markdown transcript.

HOW: Three-stage pipeline — load (JSON → pydantic Document), build
(Document → ordered Transcript IR with resolved speaker names), format
(Transcript → Markdown). Each stage is independently testable.

RULES:
- One input file per conversion, no state kept between runs
- The Transcript IR is the contract between building and formatting
- Only invalid JSON is reported as a friendly error; everything else
  either degrades to a fallback or propagates
"""

__version__ = "0.1.0"
