"""Indentation and vertical whitespace passes over output lines."""

from __future__ import annotations

from jsemit.format.options import FormatOptions
from jsemit.output import Line


def indent_after(line: Line, unit: int) -> int:
    """Indent the next line inherits once `line` has been assigned its own."""
    last = line.last_token()
    if last is not None and last.opens_block():
        return line.indent + unit
    return line.indent


def reindent_lines(lines: list[Line], unit: int) -> int:
    """Assign indents from bracket nesting; returns the final running indent."""
    indent = 0
    for line in lines:
        first = line.first_token()
        if first is None:
            line.indent = indent
            continue
        if first.closes_block():
            indent -= unit
        line.indent = indent
        indent = indent_after(line, unit)
    return indent


def respace_lines(lines: list[Line], unit: int) -> None:
    """Add horizontal (indentation) and vertical (blank lines) whitespace.

    Walks from the end of the list toward the start, inserting and deleting in
    place; indices are re-read on every step.
    """
    reindent_lines(lines, unit)

    for i in range(len(lines) - 3, -1, -1):
        if lines[i].is_blank():
            del lines[i]
        elif lines[i + 1].is_comment() and not lines[i].is_comment():
            # before a comment
            lines.insert(i + 1, _blank_after(lines[i], unit))
        elif (
            lines[i].indent == lines[i + 1].indent
            and lines[i + 1].indent < lines[i + 2].indent
            and not lines[i].is_comment()
        ):
            # start of indented block
            lines.insert(i + 1, _blank_after(lines[i], unit))
        elif (
            lines[i].indent > lines[i + 1].indent
            and lines[i + 1].indent == lines[i + 2].indent
            and not lines[i + 2].is_blank()
        ):
            # end of indented block
            lines.insert(i + 2, _blank_after(lines[i + 1], unit))


def layout_lines(lines: list[Line], options: FormatOptions) -> None:
    """Run the final layout passes the options call for."""
    if options.uses_indentation:
        respace_lines(lines, options.indent)


def render_lines(lines: list[Line], options: FormatOptions) -> str:
    """Join already laid-out lines; see `layout_lines`."""
    return options.newline.join(line.render(options.indent) for line in lines)


def _blank_after(line: Line, unit: int) -> Line:
    return Line(indent=indent_after(line, unit))
