"""Output lines."""

from dataclasses import dataclass, field
from typing import Final

from jsemit.output.tokens import LINE_COMMENT, Token

SWITCH_LABELS: Final[tuple[str, ...]] = ("case ", "default:")


@dataclass(slots=True)
class Line:
    """An ordered run of tokens plus the indent assigned by the layout pass."""

    tokens: list[Token] = field(default_factory=list)
    indent: int = 0

    @staticmethod
    def of(*texts: str) -> "Line":
        return Line([Token(text) for text in texts])

    def __len__(self) -> int:
        return len(self.tokens)

    @property
    def text(self) -> str:
        return "".join(token.text for token in self.tokens)

    @property
    def width(self) -> int:
        return sum(len(token) for token in self.tokens)

    def first_token(self) -> Token | None:
        """First token with non-empty text."""
        return next((token for token in self.tokens if not token.is_empty), None)

    def last_token(self) -> Token | None:
        """Last token with non-empty text."""
        return next((token for token in reversed(self.tokens) if not token.is_empty), None)

    def is_blank(self) -> bool:
        return all(token.is_empty for token in self.tokens)

    def is_comment(self) -> bool:
        first = self.first_token()
        return first is not None and first.text.startswith(LINE_COMMENT)

    def is_switch_label(self) -> bool:
        return bool(self.tokens) and self.tokens[0].text in SWITCH_LABELS

    def rendered_indent(self, unit: int) -> int:
        # switch labels sit one level left of the statements they guard
        if self.is_switch_label():
            return max(0, self.indent - unit)
        return max(0, self.indent)

    def render(self, unit: int) -> str:
        if self.is_blank():
            return ""
        return " " * self.rendered_indent(unit) + self.text
