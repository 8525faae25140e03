"""Output tokens."""

from dataclasses import dataclass
from typing import Final

from jsemit.text import LineCol, SourceBuffer, TextRange

LINE_COMMENT: Final[str] = "//"
OPENING_BRACKETS: Final[str] = "({["
CLOSING_BRACKETS: Final[str] = ")}]"


@dataclass(frozen=True, slots=True)
class SourceRef:
    """Read-only back-reference to the source node that produced a token.

    Only ever used to look up where the node starts in its buffer.
    """

    buffer: SourceBuffer
    range: TextRange

    @staticmethod
    def at(buffer: SourceBuffer, start: int, end: int | None = None) -> "SourceRef":
        return SourceRef(buffer, TextRange(start, start if end is None else end))

    def line_col(self) -> LineCol:
        return self.buffer.line_col(self.range.start)


@dataclass(frozen=True, slots=True)
class Token:
    """A single piece of output text, optionally tied to a source node."""

    text: str
    source: SourceRef | None = None

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text

    @property
    def is_empty(self) -> bool:
        return not self.text

    @property
    def is_whitespace(self) -> bool:
        return not self.text.strip()

    def opens_block(self) -> bool:
        return bool(self.text) and self.text[-1] in OPENING_BRACKETS

    def closes_block(self) -> bool:
        return bool(self.text) and self.text[0] in CLOSING_BRACKETS
