"""Layout modes and formatting options."""

from dataclasses import dataclass
from enum import StrEnum

DEFAULT_WIDTH = 80


class LayoutMode(StrEnum):
    """Top-level output profile."""

    COMPACT = "compact"
    PRETTY = "pretty"


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Separators, indent unit and width budget used by layout and heuristics."""

    mode: LayoutMode = LayoutMode.PRETTY
    width: int = DEFAULT_WIDTH
    indent: int = 2
    statement_separator: str = ";\n"
    newline: str = "\n"
    space: str = "\n"

    def __post_init__(self):
        if self.width <= 0:
            raise ValueError("Width budget must be positive")
        if self.indent < 0:
            raise ValueError("Indent unit cannot be negative")

    @property
    def uses_indentation(self) -> bool:
        return self.indent > 0

    @staticmethod
    def for_mode(mode: LayoutMode, *, width: int = DEFAULT_WIDTH) -> "FormatOptions":
        if mode == LayoutMode.COMPACT:
            return FormatOptions(
                mode=mode,
                width=width,
                indent=0,
                statement_separator="; ",
                newline="",
                space=" ",
            )

        return FormatOptions(
            mode=mode,
            width=width,
            indent=2,
            statement_separator=";\n",
            newline="\n",
            space="\n",
        )
