"""Output tokens, lines and the write buffer."""

from jsemit.output.buffer import Mark, OutputBuffer
from jsemit.output.line import SWITCH_LABELS, Line
from jsemit.output.tokens import (
    CLOSING_BRACKETS,
    LINE_COMMENT,
    OPENING_BRACKETS,
    SourceRef,
    Token,
)

__all__ = [
    "CLOSING_BRACKETS",
    "LINE_COMMENT",
    "OPENING_BRACKETS",
    "SWITCH_LABELS",
    "Line",
    "Mark",
    "OutputBuffer",
    "SourceRef",
    "Token",
]
