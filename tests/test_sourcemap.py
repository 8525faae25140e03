import json
from pathlib import Path

from jsemit import Serializer, SourceBuffer, SourceRef
from jsemit.sourcemap import decode_mappings
from tests._debug import debug_dump_map
from tests._shared_cases import ref

SOURCE = "x = 1\ny = 2\n"


def test_build_map_maps_statements_to_source_lines() -> None:
    buffer = SourceBuffer("a.rb", SOURCE)
    out = Serializer()

    with out.located(ref(buffer, "x = 1")):
        out.append("let x = 1")
    out.separator()
    with out.located(ref(buffer, "y = 2")):
        out.append("let y = 2")
    out.separator()

    source_map = out.build_map()
    debug_dump_map("statements", out)

    assert source_map == {
        "version": 3,
        "file": "a.rb",
        "sources": ["a.rb"],
        "mappings": "AAAA;AACA",
    }
    assert decode_mappings(source_map["mappings"]) == [(0, 0, 0, 0, 0), (1, 0, 0, 1, 0)]


def test_build_map_columns_include_indentation() -> None:
    buffer = SourceBuffer("a.rb", SOURCE)
    out = Serializer()

    out.append_and_break("{")
    with out.located(ref(buffer, "y = 2")):
        out.append("y();")
    out.break_and_append("}")

    assert out.render() == "{\n  y();\n}"
    assert decode_mappings(out.build_map()["mappings"]) == [(1, 2, 0, 1, 0)]


def test_build_map_columns_advance_over_unsourced_tokens() -> None:
    buffer = SourceBuffer("a.rb", SOURCE)
    out = Serializer()

    out.append("foo(")
    with out.located(SourceRef.at(buffer, 4, 5)):
        out.append("1")
    out.append(")")

    assert decode_mappings(out.build_map()["mappings"]) == [(0, 4, 0, 0, 4)]


def test_build_map_skips_whitespace_tokens() -> None:
    buffer = SourceBuffer("a.rb", SOURCE)
    out = Serializer()

    with out.located(SourceRef.at(buffer, 6)):
        out.append(" ")
        out.append("y")

    assert decode_mappings(out.build_map()["mappings"]) == [(0, 1, 0, 1, 0)]


def test_sources_are_deduplicated_by_identity() -> None:
    first = SourceBuffer("a.rb", SOURCE)
    second = SourceBuffer("a.rb", SOURCE)
    out = Serializer()

    with out.located(SourceRef.at(first, 0)):
        out.append("a")
    with out.located(SourceRef.at(second, 0)):
        out.append("b")
    with out.located(SourceRef.at(first, 6)):
        out.append("c")

    source_map = out.build_map()

    assert source_map["sources"] == ["a.rb", "a.rb"]
    assert decode_mappings(source_map["mappings"]) == [
        (0, 0, 0, 0, 0),
        (0, 1, 1, 0, 0),
        (0, 2, 0, 1, 0),
    ]


def test_build_map_file_name_override_and_empty_map() -> None:
    buffer = SourceBuffer("a.rb", SOURCE)
    out = Serializer()
    with out.located(SourceRef.at(buffer, 0)):
        out.append("x")

    assert out.build_map("a.js")["file"] == "a.js"
    assert Serializer().build_map() == {"version": 3, "file": "", "sources": [], "mappings": ""}


def test_source_map_document_serializes_to_json() -> None:
    buffer = SourceBuffer("a.rb", SOURCE)
    out = Serializer()
    with out.located(SourceRef.at(buffer, 0)):
        out.append("x")

    document = out.source_map("a.js")

    assert json.loads(document.to_json()) == out.build_map("a.js")


def test_build_map_captures_source_timestamps(tmp_path: Path) -> None:
    path = tmp_path / "a.rb"
    path.write_text(SOURCE, encoding="utf-8")
    buffer = SourceBuffer(str(path), SOURCE)
    out = Serializer()

    assert out.is_up_to_date() is False

    with out.located(SourceRef.at(buffer, 0)):
        out.append("x")
    out.build_map()

    assert path in out.timestamps
    assert out.is_up_to_date() is True
    assert out.latest_modification() == path.stat().st_mtime


def test_build_map_skips_source_nested_under_a_regular_file(tmp_path: Path) -> None:
    parent = tmp_path / "a.rb"
    parent.write_text(SOURCE, encoding="utf-8")
    name = str(parent / "inner.rb")
    buffer = SourceBuffer(name, SOURCE)
    out = Serializer()

    with out.located(ref(buffer, "x = 1")):
        out.append("let x = 1")
    out.separator()

    assert out.build_map()["sources"] == [name]
    assert out.is_up_to_date() is False
