"""
Width-aware text tables.

A Table prints tabular data to a terminal or a flat-text document. Each column
has a header, there is a fixed gutter between columns (which can be empty),
and all columns except the last are expected to be short enough that only
the last one ever needs truncating to fit the target width.

Cells can contain escape sequences or wide glyphs without breaking the
layout, as long as they are given as ``StringWidther`` values (see
``widthtable.width.Styled``) or plain strings whose width ``wcwidth`` knows.

Example:
    from widthtable import ColumnAlign, Table

    table = Table("numeric", "alpha-2", "name")
    table.align[0] = ColumnAlign.RIGHT
    table.append("004", "AF", "Afghanistan")
    table.append("248", "AX", "Åland Islands")
    print(table, end="")
"""

from __future__ import annotations

import io
import logging
from collections.abc import Sequence
from typing import TextIO

from .columns import ColumnModel
from .layout import assemble_row, check_alignments, render_rule
from .models import ColumnAlign, TableConfig
from .truncation import truncate_last_column

logger = logging.getLogger(__name__)


class Table:
    """
    A table of text cells with per-column width tracking.

    Formatting lives in ``self.config`` and can be changed at any point
    before rendering.
    """

    def __init__(self, *headers: object, config: TableConfig | None = None) -> None:
        """
        Create a table with one column per header.

        Args:
            *headers: Header values, ``str`` or ``StringWidther``
            config: Formatting options (default profile if omitted). The
                table keeps its own copy.

        Raises:
            UnsupportedValueError: If a header has an unsupported type
        """
        self._model = ColumnModel(headers)
        if config is None:
            config = TableConfig.default(len(headers))
        self.config = config.copy()
        if not self.config.align:
            self.config.align = [ColumnAlign.LEFT] * len(headers)

    @classmethod
    def markdown(cls, *headers: object) -> Table:
        """Create a table formatted for GitHub-flavoured markdown."""
        return cls(*headers, config=TableConfig.markdown(len(headers)))

    @property
    def align(self) -> list[ColumnAlign]:
        """Alignment of each column; mutate in place to change it."""
        return self.config.align

    @align.setter
    def align(self, value: Sequence[ColumnAlign]) -> None:
        self.config.align = list(value)

    @property
    def columns(self) -> ColumnModel:
        return self._model

    def row_count(self) -> int:
        """Number of rows of data in the table."""
        return self._model.row_count()

    def __len__(self) -> int:
        return self._model.row_count()

    def append(self, *row: object) -> None:
        """
        Add a row of data.

        The row must have as many entries as there are headers. Entries can
        be ``str`` or ``StringWidther``.

        Raises:
            RowLengthError: If the row has the wrong number of entries
            UnsupportedValueError: If an entry has an unsupported type
        """
        self._model.append(row)

    def set(self, i: int, j: int, value: object) -> None:
        """
        Assign a value to the cell at row ``i``, column ``j``.

        Raises:
            CellIndexError: If the cell does not exist
            UnsupportedValueError: If the value has an unsupported type
        """
        self._model.set(i, j, value)

    def render(self, out: TextIO) -> None:
        """
        Write the table to ``out``.

        The last column is truncated so every line fits in
        ``config.max_width`` (never less than 80). This may not be possible
        if the other columns already overflow. Errors raised by ``out`` are
        not caught.

        Raises:
            UnsupportedAlignmentError: If a column is center-aligned
            ConfigurationError: If alignments don't match the columns
        """
        model = self._model
        config = self.config
        check_alignments(config, model.column_count)
        if model.column_count == 0:
            return

        truncate_last_column(config, model)
        logger.debug(
            "Rendering %d row(s) with column widths %s",
            model.row_count(),
            model.max_widths,
        )

        header = list(zip(model.headers, model.header_widths))
        self._write_line(out, assemble_row(config, model.max_widths, header))
        if config.rule is not None and config.rule.is_set:
            self._write_line(out, render_rule(config, model.max_widths))
        for i, row in enumerate(model.rows):
            cells = list(zip(row, model.widths[i]))
            line = assemble_row(config, model.max_widths, cells, overflow=model.overflow[i])
            self._write_line(out, line)

    def render_to_string(self) -> str:
        """Render the table into a string."""
        buf = io.StringIO()
        self.render(buf)
        return buf.getvalue()

    def __str__(self) -> str:
        return self.render_to_string()

    def _write_line(self, out: TextIO, line: str) -> None:
        self.config.begin_row(out)
        out.write(line)
        self.config.end_row(out)
        out.write("\n")
