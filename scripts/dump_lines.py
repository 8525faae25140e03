#!/usr/bin/env python
from pathlib import Path

from _demo import demo_buffer, emit_demo

from jsemit import Line, Token


def format_token(token: Token) -> str:
    if token.source is None:
        return repr(token.text)
    pos = token.source.line_col()
    return f"{token.text!r}@{pos.line}:{pos.column}"


def format_line(idx: int, line: Line) -> str:
    kind = "blank" if line.is_blank() else "comment" if line.is_comment() else "code"
    tokens = ", ".join(format_token(token) for token in line.tokens)
    return f"[{idx}] indent={line.indent} kind={kind} tokens=[{tokens}]"


def main() -> None:
    output_path = Path("out/demo_lines.txt")

    serializer = emit_demo(demo_buffer())
    text = serializer.render()

    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w", encoding="utf-8") as f:
        for idx, line in enumerate(serializer.lines):
            f.write(format_line(idx, line) + "\n")
        f.write("\n" + text + "\n")
        f.write("\n" + serializer.source_map().to_json(indent=2) + "\n")

    print(f"Wrote {len(serializer.lines)} lines to {output_path}")


if __name__ == "__main__":
    main()
