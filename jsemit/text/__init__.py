"""Source text coordinates."""

from jsemit.text.text import (
    LineCol,
    SourceBuffer,
    TextRange,
    TextSize,
    line_col_at,
)

__all__ = [
    "LineCol",
    "SourceBuffer",
    "TextRange",
    "TextSize",
    "line_col_at",
]
