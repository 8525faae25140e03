"""Statement-level layout heuristics: brace wrapping and expression compaction."""

from __future__ import annotations

from collections.abc import Callable

from jsemit.format.options import DEFAULT_WIDTH
from jsemit.output import Line, OutputBuffer, Token

# compacted expressions leave this much room for whatever follows them
COMPACT_SLACK = 10


def wrap(buffer: OutputBuffer, action: Callable[[], object], *, width: int = DEFAULT_WIDTH) -> None:
    """Emit `action` as a braced block, kept on the brace line when it fits.

    `if (x) ` + wrap(`y();`) gives `if (x) { y(); }`; a body spanning several
    lines, or one too wide for the budget, gets the closing brace on its own
    line.
    """
    buffer.append_and_break("{")
    mark = buffer.position()
    action()
    buffer.check_mark(mark)

    lines = buffer.lines
    if len(lines) > mark.line_index + 1 or lines[mark.line_index - 1].width + buffer.current.width >= width:
        buffer.break_and_append("}")
        return

    (body,) = buffer.truncate(mark.line_index)
    if body.is_blank():
        buffer.append(" }")
        return
    buffer.append(" ")
    buffer.extend(body.tokens)
    buffer.append(" }")


def compact(buffer: OutputBuffer, action: Callable[[], object], *, width: int = DEFAULT_WIDTH) -> None:
    """Join the lines `action` emits into one when the result is short."""
    mark = buffer.position()
    action()
    buffer.check_mark(mark)

    lines = buffer.lines[mark.line_index :]
    if len(lines) <= 1:
        return
    if any(line.is_comment() for line in lines):
        return

    last = len(lines) - 1
    # rendered width of the joined line, separator spaces included
    length = sum(line.width for line in lines) + max(0, last - 2)
    if length >= width - COMPACT_SLACK:
        return

    merged = Line()
    for index, line in enumerate(lines):
        # no space right after the opener or before the closer
        if 1 < index < last:
            merged.tokens.append(Token(" "))
        merged.tokens.extend(line.tokens)
    buffer.replace_from(mark.line_index, merged)
