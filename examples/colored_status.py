#!/usr/bin/env python3
"""
Colored Cells Example

Cells wrapped in ANSI color codes are longer than what the terminal shows.
``Styled`` carries the visible width so the columns still line up, and wide
glyphs (emoji, CJK) are measured by display width.

Run:
    uv run python examples/colored_status.py
"""

import sys

from widthtable import ColumnAlign, Styled, Table

GREEN = 32
RED = 31
BOLD = 1

JOBS = [
    ("lint", "passed", "12s"),
    ("unit tests 🧪", "passed", "1m04s"),
    ("ビルド", "failed", "3m27s"),
    ("deploy", "skipped", "-"),
]


def status(value: str) -> Styled:
    if value == "passed":
        return Styled.ansi(value, GREEN)
    if value == "failed":
        return Styled.ansi(value, BOLD, RED)
    return Styled(value, len(value))


def main() -> None:
    table = Table(Styled.ansi("job", BOLD), Styled.ansi("status", BOLD), "duration")
    table.config.gutter = "│"
    table.align[2] = ColumnAlign.RIGHT
    for job, result, duration in JOBS:
        table.append(job, status(result), duration)

    table.render(sys.stdout)


if __name__ == "__main__":
    main()
