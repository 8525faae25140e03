"""Layout passes, options and statement heuristics."""

from jsemit.format.heuristics import COMPACT_SLACK, compact, wrap
from jsemit.format.layout import (
    indent_after,
    layout_lines,
    reindent_lines,
    render_lines,
    respace_lines,
)
from jsemit.format.options import DEFAULT_WIDTH, FormatOptions, LayoutMode

__all__ = [
    "COMPACT_SLACK",
    "DEFAULT_WIDTH",
    "FormatOptions",
    "LayoutMode",
    "compact",
    "indent_after",
    "layout_lines",
    "reindent_lines",
    "render_lines",
    "respace_lines",
    "wrap",
]
