"""Line-oriented output buffer driven by the AST walker."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from jsemit.output.line import Line
from jsemit.output.tokens import SourceRef, Token


@dataclass(frozen=True, slots=True)
class Mark:
    """Snapshot of a buffer position: [line index, token index]."""

    line_index: int
    token_index: int


class OutputBuffer:
    """Ordered lines with a write cursor on the last one.

    Every token created by the buffer is stamped with the current source ref,
    which the walker keeps pointed at the node it is visiting.
    """

    def __init__(self, *, newline: str = "\n", space: str = "\n") -> None:
        self._newline = newline
        self._space = space
        self._lines: list[Line] = [Line()]
        self._line = self._lines[-1]
        self.source: SourceRef | None = None

    @property
    def lines(self) -> list[Line]:
        return self._lines

    @property
    def current(self) -> Line:
        return self._line

    def __len__(self) -> int:
        return len(self._lines)

    @contextmanager
    def located(self, source: SourceRef | None) -> Iterator[None]:
        """Attribute tokens appended inside the block to `source`."""
        previous = self.source
        self.source = source
        try:
            yield
        finally:
            self.source = previous

    def token(self, text: str) -> Token:
        return Token(text, self.source)

    # -------------------------
    # Primitives
    # -------------------------

    def append(self, text: str) -> None:
        """Add a token to the current line, opening new lines at embedded newlines."""
        if "\n" not in text:
            self._line.tokens.append(self.token(text))
            return

        first, *rest = text.split("\n")
        trailing_newline = text.endswith("\n")
        if trailing_newline:
            rest.pop()

        self._line.tokens.append(self.token(first))
        for part in rest:
            self._lines.append(Line([self.token(part)]))
        if trailing_newline:
            self._lines.append(Line())
        self._line = self._lines[-1]

    def append_and_break(self, text: str) -> None:
        self.append(text)
        self.new_line()

    def break_and_append(self, text: str) -> None:
        self.new_line()
        self.append(text)

    def new_line(self) -> Line:
        return self.push_line(Line())

    def position(self) -> Mark:
        return Mark(len(self._lines) - 1, len(self._line.tokens))

    def insert_at(self, mark: Mark, text: str) -> None:
        """Patch text in at an earlier mark, e.g. a hoisted declaration."""
        self.check_mark(mark)
        if mark.token_index == 0:
            parts = text.removesuffix("\n").split("\n")
            self._lines[mark.line_index : mark.line_index] = [Line([self.token(part)]) for part in parts]
            return
        if "\n" in text:
            raise ValueError("Text inserted inside a line must not contain newlines")
        self._lines[mark.line_index].tokens.insert(mark.token_index, self.token(text))

    def capture(self, action: Callable[[], object]) -> str:
        """Run `action` and take back (as text) everything it emitted."""
        mark = self.position()
        action()
        self.check_mark(mark)

        captured = self.truncate(mark.line_index + 1)
        tail = self._line.tokens[mark.token_index :]
        del self._line.tokens[mark.token_index :]

        tail_text = "".join(token.text for token in tail)
        if not captured:
            return tail_text

        rest = self._newline.join(line.text for line in captured)
        if not tail:
            return rest
        return tail_text + self._space + rest

    # -------------------------
    # Line surgery for the layout heuristics
    # -------------------------

    def truncate(self, line_index: int) -> list[Line]:
        """Remove and return the lines from `line_index` on; the cursor moves to the last line left."""
        removed = self._lines[line_index:]
        del self._lines[line_index:]
        if not self._lines:
            self._lines.append(Line())
        self._line = self._lines[-1]
        return removed

    def replace_from(self, line_index: int, line: Line) -> None:
        """Replace every line from `line_index` on with `line`, which becomes current."""
        del self._lines[line_index:]
        self.push_line(line)

    def push_line(self, line: Line) -> Line:
        self._lines.append(line)
        self._line = line
        return line

    def extend(self, tokens: Iterable[Token]) -> None:
        self._line.tokens.extend(tokens)

    def check_mark(self, mark: Mark) -> None:
        if not 0 <= mark.line_index < len(self._lines):
            raise ValueError(f"Mark {mark} is outside the buffer ({len(self._lines)} lines)")
        if not 0 <= mark.token_index <= len(self._lines[mark.line_index].tokens):
            raise ValueError(f"Mark {mark} is outside line {mark.line_index}")
