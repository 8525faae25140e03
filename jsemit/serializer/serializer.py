"""Serializer: the write surface an AST walker drives, plus text and source map output."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
import logging
from typing import Any

from jsemit.format import FormatOptions, compact, layout_lines, render_lines, wrap
from jsemit.output import Line, Mark, OutputBuffer, SourceRef
from jsemit.sourcemap import SourceMapDocument, TimestampRegistry, build_source_map

logger = logging.getLogger(__name__)


class Serializer:
    """One output unit: buffered lines, layout options and the sources they came from.

    Mutations go through the buffer primitives; `render` and `build_map` run the
    final layout passes once and read the result.
    """

    def __init__(self, options: FormatOptions | None = None) -> None:
        self.options = options if options is not None else FormatOptions()
        self.buffer = OutputBuffer(newline=self.options.newline, space=self.options.space)
        self.timestamps = TimestampRegistry()
        self._laid_out = False

    @property
    def lines(self) -> list[Line]:
        return self.buffer.lines

    @property
    def source(self) -> SourceRef | None:
        return self.buffer.source

    @source.setter
    def source(self, value: SourceRef | None) -> None:
        self.buffer.source = value

    @contextmanager
    def located(self, source: SourceRef | None) -> Iterator[None]:
        with self.buffer.located(source):
            yield

    # -------------------------
    # Buffer primitives
    # -------------------------

    def append(self, text: str) -> None:
        self._touch()
        self.buffer.append(text)

    def append_and_break(self, text: str) -> None:
        self._touch()
        self.buffer.append_and_break(text)

    def break_and_append(self, text: str) -> None:
        self._touch()
        self.buffer.break_and_append(text)

    def position(self) -> Mark:
        return self.buffer.position()

    def insert_at(self, mark: Mark, text: str) -> None:
        self._touch()
        self.buffer.insert_at(mark, text)

    def capture(self, action: Callable[[], object]) -> str:
        self._touch()
        return self.buffer.capture(action)

    def separator(self) -> None:
        """End a statement with the mode's statement separator."""
        self._touch()
        self.buffer.append(self.options.statement_separator)

    # -------------------------
    # Heuristics
    # -------------------------

    def wrap(self, action: Callable[[], object]) -> None:
        self._touch()
        wrap(self.buffer, action, width=self.options.width)

    def compact(self, action: Callable[[], object]) -> None:
        self._touch()
        compact(self.buffer, action, width=self.options.width)

    # -------------------------
    # Output
    # -------------------------

    def render(self) -> str:
        self._layout()
        return render_lines(self.buffer.lines, self.options)

    def build_map(self, file: str | None = None) -> dict[str, Any]:
        return self.source_map(file).to_dict()

    def source_map(self, file: str | None = None) -> SourceMapDocument:
        self._layout()
        return build_source_map(
            self.buffer.lines,
            indent_unit=self.options.indent,
            timestamps=self.timestamps,
            file=file,
        )

    def is_up_to_date(self) -> bool:
        return self.timestamps.is_up_to_date()

    def latest_modification(self) -> float:
        return self.timestamps.latest_modification()

    def __str__(self) -> str:
        return self.render()

    def __add__(self, other: str) -> str:
        return self.render() + other

    def _layout(self) -> None:
        if self._laid_out:
            return
        layout_lines(self.buffer.lines, self.options)
        self._laid_out = True
        logger.debug("Laid out %d lines (%s)", len(self.buffer.lines), self.options.mode)

    def _touch(self) -> None:
        self._laid_out = False
