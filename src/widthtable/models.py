"""Configuration models for widthtable."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TextIO

NBSP = "\u00a0"

RowHook = Callable[[TextIO], None]


class ColumnAlign(Enum):
    """How a cell's content sits inside its column."""

    RIGHT = -1
    CENTER = 0  # not implemented; rendering raises
    LEFT = 1

    @classmethod
    def parse(cls, value: str) -> ColumnAlign:
        """Parse ``l``/``r``/``c`` or a full name, case-insensitively."""
        key = value.strip().lower()
        for member in cls:
            if key in (member.name.lower(), member.name[0].lower()):
                return member
        raise ValueError(f"Unknown alignment: {value!r}")


def nop_row_hook(out: TextIO) -> None:
    """Default begin/end row hook."""


@dataclass
class Rule:
    """
    Horizontal rule drawn between the header and the data.

    All characters must have display width 1.

    Attributes:
        fill: Character the rule is drawn with; no rule is drawn when unset
        gutter: Separator between columns on the rule line. Must be as wide
            as the table gutter. Falls back to the table gutter.
        right_aligned_left_pad: Left pad of right-aligned columns
        right_aligned_right_pad: Right pad of right-aligned columns
        left_aligned_left_pad: Left pad of left-aligned columns
        left_aligned_right_pad: Right pad of left-aligned columns

    Every pad falls back to ``fill``.
    """

    fill: str | None = None
    gutter: str | None = None
    right_aligned_left_pad: str | None = None
    right_aligned_right_pad: str | None = None
    left_aligned_left_pad: str | None = None
    left_aligned_right_pad: str | None = None

    @property
    def is_set(self) -> bool:
        return bool(self.fill)

    def pads(self, align: ColumnAlign) -> tuple[str, str]:
        """Left and right pad for a column with the given alignment."""
        fill = self.fill or ""
        if align is ColumnAlign.RIGHT:
            return (
                self.right_aligned_left_pad or fill,
                self.right_aligned_right_pad or fill,
            )
        return (
            self.left_aligned_left_pad or fill,
            self.left_aligned_right_pad or fill,
        )


@dataclass
class TableConfig:
    """
    Formatting options for a table, read at render time.

    Attributes:
        gutter: String printed between adjacent columns
        indent: Added to the beginning of every line
        outdent: Added to the end of every line
        fill_char: Fills a cell up to its column width (width 1)
        pad_char: Printed on both sides of every cell (width 1)
        max_width: Target total line width; the last column is truncated to
            fit. Values below 80 are treated as 80.
        rule: Optional rule between header and data
        align: Alignment of each column, headers included; a table given an
            empty list left-aligns every column
        begin_row: Called with the output stream before each line
        end_row: Called with the output stream after each line, before the
            newline
    """

    gutter: str = ""
    indent: str = ""
    outdent: str = ""
    fill_char: str = " "
    pad_char: str = " "
    max_width: int = 80
    rule: Rule | None = None
    align: list[ColumnAlign] = field(default_factory=list)
    begin_row: RowHook = nop_row_hook
    end_row: RowHook = nop_row_hook

    @classmethod
    def default(cls, columns: int) -> TableConfig:
        """Plain terminal profile: left-aligned, space padded, no gutter."""
        return cls(align=[ColumnAlign.LEFT] * columns)

    @classmethod
    def markdown(cls, columns: int) -> TableConfig:
        """GitHub-flavoured markdown profile."""
        return cls(
            gutter="|",
            fill_char=NBSP,
            pad_char=NBSP,
            max_width=200,
            rule=Rule(fill="-", right_aligned_right_pad=":"),
            align=[ColumnAlign.LEFT] * columns,
        )

    def copy(self) -> TableConfig:
        """Independent copy; alignment list and rule are not shared."""
        return replace(
            self,
            align=list(self.align),
            rule=replace(self.rule) if self.rule is not None else None,
        )
