"""
Last-column truncation.

Only the final column of a table is ever shortened. All other columns are
assumed short enough to fit; when they are not, the last column is cut down
to nothing and the lines still overflow.
"""

from __future__ import annotations

import logging

from .columns import ColumnModel
from .models import TableConfig
from .width import Styled, display_width, truncate

logger = logging.getLogger(__name__)

# Narrower targets usually mean width discovery failed (e.g. not a tty),
# so fall back to a standard terminal.
MIN_WIDTH = 80

OVERFLOW_MARKER = "…"


def available_width(config: TableConfig, model: ColumnModel) -> int:
    """
    Columns left for the last cell once everything else on the line is placed.

    Each cell takes one pad character on either side; gutters sit between
    cells. The result can be negative.
    """
    last = model.column_count - 1
    width = max(config.max_width, MIN_WIDTH)
    width -= (
        display_width(config.indent)
        + last * (2 + display_width(config.gutter))
        + 2
        + display_width(config.outdent)
    )
    width -= sum(model.max_widths[:last])
    return width


def truncate_last_column(config: TableConfig, model: ColumnModel) -> int:
    """
    Shorten the last column so lines fit in ``config.max_width``.

    Shortened rows are marked in ``model.overflow``. A table that already
    fits is left alone, which makes a second call a no-op.

    Returns:
        Number of rows shortened by this call
    """
    if model.column_count == 0:
        return 0
    last = model.column_count - 1
    width = available_width(config, model)
    if width >= model.max_widths[last]:
        return 0

    logger.debug(
        "Truncating last column from %d to %d columns",
        model.max_widths[last],
        width,
    )
    model.reset_column(last)
    shortened = 0
    for i, row in enumerate(model.rows):
        if model.widths[i][last] <= width:
            continue
        original = row[last]
        text, w = truncate(original, width)
        # Goes through set() so the column re-grows like on any insertion.
        model.set(i, last, Styled(text, w))
        if text != original:
            model.overflow[i] = True
            shortened += 1
    model.regrow_column(last)
    logger.debug("Shortened %d of %d row(s)", shortened, model.row_count())
    return shortened
