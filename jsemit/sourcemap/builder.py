"""Source Map v3 documents built from laid-out output lines."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
import json
import logging
from typing import Any

from jsemit.output import Line
from jsemit.sourcemap.encoder import MappingEncoder
from jsemit.sourcemap.timestamps import TimestampRegistry
from jsemit.text import SourceBuffer

logger = logging.getLogger(__name__)

SOURCE_MAP_VERSION = 3


@dataclass(frozen=True, slots=True)
class SourceMapDocument:
    file: str
    sources: tuple[str, ...]
    mappings: str
    version: int = SOURCE_MAP_VERSION

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "file": self.file,
            "sources": list(self.sources),
            "mappings": self.mappings,
        }

    def to_json(self, *, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)


@dataclass(slots=True)
class SourceTable:
    """Distinct source buffers in order of first sight, deduplicated by identity."""

    buffers: list[SourceBuffer] = field(default_factory=list)

    def index(self, buffer: SourceBuffer) -> int | None:
        for index, known in enumerate(self.buffers):
            if known is buffer:
                return index
        return None

    def register(self, buffer: SourceBuffer) -> tuple[int, bool]:
        """Index of `buffer`, and whether this call added it."""
        index = self.index(buffer)
        if index is not None:
            return index, False
        self.buffers.append(buffer)
        return len(self.buffers) - 1, True

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(buffer.name for buffer in self.buffers)


def build_source_map(
    lines: Iterable[Line],
    *,
    indent_unit: int,
    timestamps: TimestampRegistry | None = None,
    file: str | None = None,
) -> SourceMapDocument:
    """Map every sourced token of already laid-out `lines` back to its origin."""
    encoder = MappingEncoder()
    sources = SourceTable()

    for row, line in enumerate(lines):
        if line.is_blank():
            continue
        column = line.rendered_indent(indent_unit)
        for token in line.tokens:
            if token.source is not None and not token.is_whitespace:
                buffer = token.source.buffer
                source_index, added = sources.register(buffer)
                if added and timestamps is not None:
                    timestamps.capture(buffer.name)
                original = token.source.line_col()
                encoder.record(row, column, source_index, original.line, original.column)
            column += len(token)

    if file is None:
        file = sources.buffers[0].name if sources.buffers else ""

    logger.debug("Built source map for %s: %d sources", file, len(sources.buffers))
    return SourceMapDocument(file=file, sources=sources.names, mappings=encoder.mappings)
