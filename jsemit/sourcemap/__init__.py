"""Source Map v3 encoding."""

from jsemit.sourcemap.builder import (
    SOURCE_MAP_VERSION,
    SourceMapDocument,
    SourceTable,
    build_source_map,
)
from jsemit.sourcemap.encoder import Mapping, MappingEncoder, MappingState, decode_mappings
from jsemit.sourcemap.timestamps import TimestampRegistry
from jsemit.sourcemap.vlq import BASE64, decode_vlq, encode_vlq

__all__ = [
    "BASE64",
    "SOURCE_MAP_VERSION",
    "Mapping",
    "MappingEncoder",
    "MappingState",
    "SourceMapDocument",
    "SourceTable",
    "TimestampRegistry",
    "build_source_map",
    "decode_mappings",
    "decode_vlq",
    "encode_vlq",
]
