"""Synthetic walker used by the scripts: emits a small program through a Serializer."""

from __future__ import annotations

from jsemit import FormatOptions, Serializer, SourceBuffer, SourceRef

DEMO_SOURCE = """\
# compute totals
def total(items)
  sum = 0
  items.each { |item| sum += item.price }
  sum
end

if ready then start(total([1, 2, 3])) end
"""


def _ref(buffer: SourceBuffer, needle: str) -> SourceRef:
    start = buffer.text.index(needle)
    return SourceRef.at(buffer, start, start + len(needle))


def emit_demo(buffer: SourceBuffer, options: FormatOptions | None = None) -> Serializer:
    out = Serializer(options)

    with out.located(_ref(buffer, "# compute totals")):
        out.append_and_break("// compute totals")

    with out.located(_ref(buffer, "def total")):
        out.append("function total(items) ")

    def body() -> None:
        with out.located(_ref(buffer, "sum = 0")):
            out.append("let sum = 0")
            out.separator()
        with out.located(_ref(buffer, "items.each")):
            out.append("for (let item of items) ")
            with out.located(_ref(buffer, "sum += item.price")):
                out.wrap(lambda: out.append("sum += item.price;"))
        with out.located(_ref(buffer, "sum\nend")):
            out.break_and_append("return sum")

    out.append_and_break("{")
    body()
    out.break_and_append("}")

    with out.located(_ref(buffer, "if ready")):
        out.break_and_append("if (ready) ")

        def call() -> None:
            with out.located(_ref(buffer, "start(")):
                out.append("start(total(")

                def array() -> None:
                    out.append_and_break("[")
                    out.append_and_break("1,")
                    out.append_and_break("2,")
                    out.append("3")
                    out.break_and_append("]")

                out.compact(array)
                out.append("))")

        out.wrap(call)

    return out


def demo_buffer(name: str = "demo.rb") -> SourceBuffer:
    return SourceBuffer(name, DEMO_SOURCE)
