"""Delta encoding of mapping tuples into a Source Map v3 `mappings` string."""

from __future__ import annotations

from typing import TypeAlias

from dataclasses import dataclass

from jsemit.sourcemap.vlq import decode_vlq, encode_vlq

Mapping: TypeAlias = tuple[int, int, int, int, int]
"""(generated line, generated column, source index, original line, original column)"""

SEGMENT_SEPARATOR = ","
LINE_SEPARATOR = ";"


@dataclass(slots=True)
class MappingState:
    """Running counters every segment is delta-encoded against."""

    generated_line: int = 0
    generated_column: int = 0
    source_index: int = 0
    original_line: int = 0
    original_column: int = 0

    def as_tuple(self) -> Mapping:
        return (
            self.generated_line,
            self.generated_column,
            self.source_index,
            self.original_line,
            self.original_column,
        )


class MappingEncoder:
    def __init__(self) -> None:
        self.state = MappingState()
        self._parts: list[str] = []
        self._emitted = False

    @property
    def mappings(self) -> str:
        return "".join(self._parts)

    def record(
        self,
        generated_line: int,
        generated_column: int,
        source_index: int,
        original_line: int,
        original_column: int,
    ) -> None:
        mapping = (generated_line, generated_column, source_index, original_line, original_column)
        state = self.state
        if generated_line < state.generated_line:
            raise ValueError(f"Mapping for line {generated_line} recorded after line {state.generated_line}")

        if state.generated_line == generated_line:
            # state always holds the last recorded tuple
            if self._emitted and mapping == state.as_tuple():
                return
            if self._emitted:
                self._parts.append(SEGMENT_SEPARATOR)

        while state.generated_line < generated_line:
            self._parts.append(LINE_SEPARATOR)
            state.generated_line += 1
            state.generated_column = 0

        deltas = (
            generated_column - state.generated_column,
            source_index - state.source_index,
            original_line - state.original_line,
            original_column - state.original_column,
        )
        state.generated_column = generated_column
        state.source_index = source_index
        state.original_line = original_line
        state.original_column = original_column
        self._emitted = True

        self._parts.extend(encode_vlq(delta) for delta in deltas)


def decode_mappings(mappings: str) -> list[Mapping]:
    """Expand a `mappings` string back into absolute tuples, in order.

    Only four- and five-field segments carry a source position; one-field
    segments are skipped.
    """
    decoded: list[Mapping] = []
    column = source = line = original_column = 0

    for generated_line, group in enumerate(mappings.split(LINE_SEPARATOR)):
        column = 0
        for segment in group.split(SEGMENT_SEPARATOR):
            if not segment:
                continue
            fields: list[int] = []
            pos = 0
            while pos < len(segment):
                value, pos = decode_vlq(segment, pos)
                fields.append(value)

            column += fields[0]
            if len(fields) < 4:
                continue
            source += fields[1]
            line += fields[2]
            original_column += fields[3]
            decoded.append((generated_line, column, source, line, original_column))

    return decoded
