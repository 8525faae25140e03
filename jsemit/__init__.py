"""Token/line output engine with layout heuristics and Source Map v3 encoding."""

from jsemit.format import FormatOptions, LayoutMode
from jsemit.output import Line, Mark, OutputBuffer, SourceRef, Token
from jsemit.pipeline import SerializeRunResult, run_serialize
from jsemit.serializer import Serializer
from jsemit.sourcemap import SourceMapDocument, TimestampRegistry
from jsemit.text import SourceBuffer, TextRange, TextSize

__all__ = [
    "FormatOptions",
    "LayoutMode",
    "Line",
    "Mark",
    "OutputBuffer",
    "SerializeRunResult",
    "Serializer",
    "SourceBuffer",
    "SourceMapDocument",
    "SourceRef",
    "TextRange",
    "TextSize",
    "TimestampRegistry",
    "Token",
    "run_serialize",
]
