"""Column width accounting."""

from __future__ import annotations

from collections.abc import Sequence

from .exceptions import CellIndexError, RowLengthError
from .width import string_and_width


class ColumnModel:
    """
    Headers and rows of a table, with the widest value seen per column.

    Every cell is stored as rendered text plus display width. ``max_widths``
    only ever grows through ``append`` and ``set``; ``reset_column`` is the
    single way to shrink a column and is reserved for last-column truncation.
    """

    def __init__(self, headers: Sequence[object]) -> None:
        self.headers: list[str] = []
        self.header_widths: list[int] = []
        for header in headers:
            text, w = string_and_width(header)
            self.headers.append(text)
            self.header_widths.append(w)
        self.max_widths: list[int] = list(self.header_widths)
        self.rows: list[list[str]] = []
        self.widths: list[list[int]] = []
        self.overflow: list[bool] = []

    @property
    def column_count(self) -> int:
        return len(self.headers)

    def row_count(self) -> int:
        """Number of data rows stored."""
        return len(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def append(self, row: Sequence[object]) -> None:
        """
        Add a row of data.

        Raises:
            RowLengthError: If the row does not have one cell per column
            UnsupportedValueError: If a cell is not ``str`` or ``StringWidther``
        """
        if len(row) != self.column_count:
            raise RowLengthError(self.column_count, len(row))
        # Measure everything first so a bad cell leaves the model untouched.
        measured = [string_and_width(cell) for cell in row]
        self.rows.append([text for text, _ in measured])
        self.widths.append([0] * self.column_count)
        self.overflow.append(False)
        i = len(self.rows) - 1
        for j, (_, w) in enumerate(measured):
            self._grow(i, j, w)

    def set(self, i: int, j: int, value: object) -> None:
        """
        Overwrite the cell at row ``i``, column ``j``.

        Never shrinks the column. Overwriting the last column clears the
        row's overflow mark.

        Raises:
            CellIndexError: If either index is out of range
            UnsupportedValueError: If the value is not ``str`` or ``StringWidther``
        """
        if not (0 <= i < len(self.rows) and 0 <= j < self.column_count):
            raise CellIndexError(i, j, len(self.rows), self.column_count)
        text, w = string_and_width(value)
        self.rows[i][j] = text
        self._grow(i, j, w)
        if j == self.column_count - 1:
            self.overflow[i] = False

    def reset_column(self, j: int) -> None:
        """Shrink column ``j`` back to its header width."""
        self.max_widths[j] = self.header_widths[j]

    def regrow_column(self, j: int) -> None:
        """Grow column ``j`` to fit every stored value."""
        for i, row_widths in enumerate(self.widths):
            self._grow(i, j, row_widths[j])

    def _grow(self, i: int, j: int, w: int) -> None:
        # TODO: shrink the column when its widest value is overwritten
        self.widths[i][j] = w
        if self.max_widths[j] < w:
            self.max_widths[j] = w
