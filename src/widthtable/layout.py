"""
Line layout for tables.

Every printed line, rule included, has the same shape::

    indent (pad cell pad gutter)* pad cell pad outdent

where ``cell`` is exactly as wide as its column. Lines are returned without a
terminator; the caller owns the newline and the row hooks.
"""

from __future__ import annotations

from collections.abc import Sequence

from .exceptions import ConfigurationError, UnsupportedAlignmentError
from .models import ColumnAlign, TableConfig
from .truncation import OVERFLOW_MARKER


def check_alignments(config: TableConfig, columns: int) -> None:
    """
    Make sure every column has an alignment that can be rendered.

    Raises:
        ConfigurationError: If there is not one alignment per column
        UnsupportedAlignmentError: If any column is center-aligned
    """
    if len(config.align) != columns:
        raise ConfigurationError(
            f"Table has {columns} column(s) but {len(config.align)} alignment(s)"
        )
    for j, align in enumerate(config.align):
        if align not in (ColumnAlign.LEFT, ColumnAlign.RIGHT):
            raise UnsupportedAlignmentError(j, align)


def _fill(text: str, width: int, column_width: int, fill: str, align: ColumnAlign) -> str:
    space = fill * (column_width - width)
    if align is ColumnAlign.RIGHT:
        return space + text
    return text + space


def assemble_row(
    config: TableConfig,
    max_widths: Sequence[int],
    cells: Sequence[tuple[str, int]],
    overflow: bool = False,
) -> str:
    """
    Lay out one header or data line.

    Args:
        config: Formatting options
        max_widths: Width of each column
        cells: (text, display width) for each column
        overflow: Put the overflow marker in the last column's right pad

    Returns:
        The line, without a newline
    """
    last = len(max_widths) - 1
    parts = [config.indent]
    for j, (text, width) in enumerate(cells):
        align = config.align[j]
        if align not in (ColumnAlign.LEFT, ColumnAlign.RIGHT):
            raise UnsupportedAlignmentError(j, align)
        parts.append(config.pad_char)
        parts.append(_fill(text, width, max_widths[j], config.fill_char, align))
        if j == last:
            parts.append(OVERFLOW_MARKER if overflow else config.pad_char)
        else:
            parts.append(config.pad_char)
            parts.append(config.gutter)
    parts.append(config.outdent)
    return "".join(parts)


def render_rule(config: TableConfig, max_widths: Sequence[int]) -> str:
    """
    Lay out the rule line drawn under the header.

    Raises:
        ConfigurationError: If the config has no rule set
        UnsupportedAlignmentError: If any column is center-aligned
    """
    rule = config.rule
    if rule is None or not rule.is_set:
        raise ConfigurationError("No rule configured")
    fill = rule.fill or ""
    gutter = rule.gutter or config.gutter
    last = len(max_widths) - 1
    parts = [config.indent]
    for j, width in enumerate(max_widths):
        align = config.align[j]
        if align not in (ColumnAlign.LEFT, ColumnAlign.RIGHT):
            raise UnsupportedAlignmentError(j, align)
        left, right = rule.pads(align)
        parts.append(left)
        parts.append(fill * width)
        parts.append(right)
        if j != last:
            parts.append(gutter)
    parts.append(config.outdent)
    return "".join(parts)
