#!/usr/bin/env python3
"""
Basic Table Example

Prints ISO 3166 country codes twice: once as a plain terminal table and once
as a GitHub-flavoured markdown table.

Run:
    uv run python examples/basic_table.py
"""

import sys

from widthtable import ColumnAlign, Rule, Table

COUNTRIES = [
    ("004", "AF", "Afghanistan", "Kabul"),
    ("248", "AX", "Åland Islands", "Mariehamn"),
    ("008", "AL", "Albania", "Tirana"),
    ("012", "DZ", "Algeria", "Algiers"),
    ("016", "AS", "American Samoa", "Pago Pago"),
    ("020", "AD", "Andorra", "Andorra la Vella"),
    ("024", "AO", "Angola", "Luanda"),
]


def terminal_table() -> None:
    """Plain table with a ruled header."""
    print("=== Terminal ===\n")

    table = Table("numeric", "alpha-2", "name", "capital")
    table.config.gutter = " "
    table.config.rule = Rule(fill="─", gutter=" ")
    table.align[0] = ColumnAlign.RIGHT
    for row in COUNTRIES:
        table.append(*row)

    table.render(sys.stdout)


def markdown_table() -> None:
    """Same data, ready to paste into a README."""
    print("\n=== Markdown ===\n")

    table = Table.markdown("numeric", "alpha-2", "name", "capital")
    table.align[0] = ColumnAlign.RIGHT
    for row in COUNTRIES:
        table.append(*row)

    print(table, end="")


if __name__ == "__main__":
    terminal_table()
    markdown_table()
