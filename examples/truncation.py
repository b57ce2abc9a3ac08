#!/usr/bin/env python3
"""
Truncation Example

Only the last column is shortened to fit the target width. Rows that lost
text get an ellipsis in place of their right pad; rows that fit are left
alone. Wide glyphs are never split in half.

Run:
    uv run python examples/truncation.py
"""

import io

from widthtable import Table

COMMITS = [
    ("a1b2c3d", "Fix race condition in file watcher initialization"),
    ("e4f5a6b", "Add support for custom key bindings " * 3),
    ("c7d8e9f", "日本語のコミットメッセージ、" * 6),
]


def main() -> None:
    table = Table("commit", "message")
    table.config.gutter = " "
    table.config.begin_row = lambda out: out.write("│")
    table.config.end_row = lambda out: out.write("│")
    for sha, message in COMMITS:
        table.append(sha, message)

    buf = io.StringIO()
    table.render(buf)
    print(buf.getvalue(), end="")


if __name__ == "__main__":
    main()
