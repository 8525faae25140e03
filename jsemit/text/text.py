from dataclasses import dataclass
from typing import NamedTuple


@dataclass(frozen=True, slots=True, order=True)
class TextSize:
    """Opaque measure of text length / offset into a source buffer."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError("TextSize cannot be negative")

    def __repr__(self) -> str:
        return f"TextSize({self.value})"


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) in source text.

    Invariant:
    - 0 <= start <= end
    """

    _start: int
    _end: int

    def __post_init__(self):
        if self._start < 0 or self._end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self._start > self._end:
            raise ValueError("TextRange invariant violated: start > end")

    @property
    def start(self) -> TextSize:
        return TextSize(self._start)

    def __repr__(self) -> str:
        return f"TextRange({self._start}, {self._end})"


class LineCol(NamedTuple):
    """Zero-based line/column position, the coordinate system of source maps."""

    line: int
    column: int


@dataclass(frozen=True, slots=True, eq=False)
class SourceBuffer:
    """A named source text that tokens point back into.

    Buffers compare and hash by identity: two buffers holding the same text are
    still two distinct sources in a source map.
    """

    name: str
    text: str

    def line_col(self, offset: TextSize) -> LineCol:
        return line_col_at(self.text, offset.value)

    def __repr__(self) -> str:
        return f"SourceBuffer({self.name!r})"


def line_col_at(text: str, offset: int) -> LineCol:
    """Resolve an offset into a (line, column) pair by counting preceding newlines."""
    if offset < 0 or offset > len(text):
        raise ValueError(f"Offset {offset} outside text of length {len(text)}")
    line = text.count("\n", 0, offset)
    line_start = text.rfind("\n", 0, offset) + 1
    return LineCol(line, offset - line_start)
