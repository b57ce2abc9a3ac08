"""Shared fixtures for widthtable unit tests."""

import pytest

from widthtable import ColumnAlign, Rule, Table


@pytest.fixture
def rules_table() -> Table:
    """Four-column table exercising every formatting option."""
    table = Table("foo", "bar", "baz", "meh")
    config = table.config
    config.gutter = "|"
    config.rule = Rule(fill="-", gutter="+")
    config.indent = ">"
    config.outdent = "<"
    config.fill_char = "_"
    config.pad_char = "#"
    config.max_width = 80
    table.align = [ColumnAlign.RIGHT, ColumnAlign.LEFT, ColumnAlign.LEFT, ColumnAlign.RIGHT]
    table.append("a", "b", "c", "d")
    table.append("1", "2", "3", "4")
    return table


@pytest.fixture
def long_table() -> Table:
    """Two-column table whose last column needs truncating at 80 columns."""
    table = Table("id", "description")
    table.append("1", "x" * 100)
    table.append("2", "short")
    return table
