"""Entrypoint that finalizes a serializer into text and an optional source map."""

from __future__ import annotations

import logging

from jsemit.pipeline.results import SerializeRunResult
from jsemit.serializer import Serializer

logger = logging.getLogger(__name__)


def run_serialize(
    serializer: Serializer,
    *,
    file: str | None = None,
    source_map: bool = False,
) -> SerializeRunResult:
    """Render a serializer once, building its source map when asked."""
    if file is not None and not source_map:
        raise ValueError("Pass file only when requesting a source map")

    text = serializer.render()
    document = serializer.build_map(file) if source_map else None
    up_to_date = serializer.is_up_to_date()
    logger.debug(
        "Serialized %d chars (source map: %s, up to date: %s)",
        len(text),
        document is not None,
        up_to_date,
    )
    return SerializeRunResult(text=text, source_map=document, up_to_date=up_to_date)
