"""Serialization entrypoints."""

from jsemit.pipeline.entrypoints import run_serialize
from jsemit.pipeline.results import SerializeRunResult

__all__ = ["SerializeRunResult", "run_serialize"]
