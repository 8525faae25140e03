import pytest

from jsemit.format import reindent_lines
from jsemit.output import Mark, OutputBuffer, SourceRef
from jsemit.text import SourceBuffer


def texts(buffer: OutputBuffer) -> list[str]:
    return [line.text for line in buffer.lines]


def test_new_buffer_has_one_empty_current_line() -> None:
    buffer = OutputBuffer()

    assert len(buffer) == 1
    assert buffer.current is buffer.lines[-1]
    assert buffer.current.is_blank()


def test_append_adds_tokens_to_current_line() -> None:
    buffer = OutputBuffer()
    buffer.append("let ")
    buffer.append("x")

    assert texts(buffer) == ["let x"]
    assert [token.text for token in buffer.current.tokens] == ["let ", "x"]


def test_append_splits_embedded_newlines() -> None:
    buffer = OutputBuffer()
    buffer.append("a")
    buffer.append("b\nc\nd")

    assert texts(buffer) == ["ab", "c", "d"]
    assert buffer.current is buffer.lines[-1]


def test_append_with_trailing_newline_opens_fresh_line() -> None:
    buffer = OutputBuffer()
    buffer.append("a;\n")

    assert texts(buffer) == ["a;", ""]
    assert buffer.current.tokens == []


def test_append_and_break_starts_new_line() -> None:
    buffer = OutputBuffer()
    buffer.append_and_break("x;")
    buffer.append("y")

    assert texts(buffer) == ["x;", "y"]


def test_break_and_append_starts_line_first() -> None:
    buffer = OutputBuffer()
    buffer.append("a")
    buffer.break_and_append("}")

    assert texts(buffer) == ["a", "}"]
    assert buffer.current.text == "}"


def test_position_points_after_last_token() -> None:
    buffer = OutputBuffer()
    buffer.append_and_break("x;")
    buffer.append("a")
    buffer.append("b")

    assert buffer.position() == Mark(1, 2)


def test_insert_at_token_index_patches_existing_line() -> None:
    buffer = OutputBuffer()
    buffer.append("a")
    mark = buffer.position()
    buffer.append("c")

    buffer.insert_at(mark, "b")

    assert texts(buffer) == ["abc"]


def test_insert_at_line_start_adds_line_before_mark() -> None:
    buffer = OutputBuffer()
    mark = buffer.position()
    buffer.append_and_break("x = 1;")

    buffer.insert_at(mark, "let x;\n")

    assert texts(buffer) == ["let x;", "x = 1;", ""]
    assert buffer.current is buffer.lines[-1]


def test_insert_at_line_start_splits_multi_line_text() -> None:
    buffer = OutputBuffer()
    buffer.append_and_break("{")
    mark = buffer.position()
    buffer.append_and_break("x = a + b;")
    buffer.append("}")

    buffer.insert_at(mark, "let a;\nlet b;\n")
    reindent_lines(buffer.lines, 2)

    assert texts(buffer) == ["{", "let a;", "let b;", "x = a + b;", "}"]
    assert [line.render(2) for line in buffer.lines] == ["{", "  let a;", "  let b;", "  x = a + b;", "}"]
    assert buffer.current is buffer.lines[-1]


def test_insert_at_inside_line_rejects_newlines() -> None:
    buffer = OutputBuffer()
    buffer.append("a")
    mark = buffer.position()
    buffer.append("c")

    with pytest.raises(ValueError):
        buffer.insert_at(mark, "b\nb")
    assert texts(buffer) == ["ac"]


def test_insert_at_rejects_marks_outside_buffer() -> None:
    buffer = OutputBuffer()

    with pytest.raises(ValueError):
        buffer.insert_at(Mark(3, 0), "x")
    with pytest.raises(ValueError):
        buffer.insert_at(Mark(0, 2), "x")


def test_capture_on_same_line_returns_tail() -> None:
    buffer = OutputBuffer()
    buffer.append("f(")

    captured = buffer.capture(lambda: buffer.append("x"))

    assert captured == "x"
    assert texts(buffer) == ["f("]


def test_capture_across_lines_removes_them() -> None:
    buffer = OutputBuffer()
    buffer.append("a = ")

    def emit() -> None:
        buffer.append("[")
        buffer.break_and_append("1")
        buffer.break_and_append("]")

    captured = buffer.capture(emit)

    assert captured == "[\n1\n]"
    assert texts(buffer) == ["a = "]
    assert buffer.current is buffer.lines[0]


def test_capture_without_tail_returns_following_lines() -> None:
    buffer = OutputBuffer()
    buffer.append("a = ")

    def emit() -> None:
        buffer.break_and_append("b")
        buffer.break_and_append("c")

    assert buffer.capture(emit) == "b\nc"
    assert texts(buffer) == ["a = "]


def test_capture_uses_configured_separators() -> None:
    buffer = OutputBuffer(newline="", space=" ")
    buffer.append("a = ")

    def emit() -> None:
        buffer.append("[")
        buffer.break_and_append("1")
        buffer.break_and_append("]")

    assert buffer.capture(emit) == "[ 1]"


def test_located_stamps_and_restores_source() -> None:
    source_buffer = SourceBuffer("a.rb", "x = 1\n")
    source = SourceRef.at(source_buffer, 0, 5)
    buffer = OutputBuffer()

    with buffer.located(source):
        buffer.append("let x = 1")
    buffer.append(";")

    first, second = buffer.current.tokens
    assert first.source is source
    assert second.source is None
    assert buffer.source is None


def test_truncate_keeps_at_least_one_line() -> None:
    buffer = OutputBuffer()
    buffer.append_and_break("a;")
    buffer.append("b")

    removed = buffer.truncate(0)

    assert [line.text for line in removed] == ["a;", "b"]
    assert len(buffer) == 1
    assert buffer.current.is_blank()
