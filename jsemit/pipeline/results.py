"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class SerializeRunResult:
    """Text, and optionally the source map, from one finalized serializer."""

    text: str
    source_map: dict[str, Any] | None
    up_to_date: bool

    @property
    def has_source_map(self) -> bool:
        return self.source_map is not None
