"""
widthtable: width-aware text tables for terminals and markdown.

Columns are sized by display width rather than character count, so cells
can hold emoji, East-Asian text or ANSI color codes without breaking the
layout. Only the last column is ever truncated to fit the target width.

Example:
    from widthtable import ColumnAlign, Styled, Table

    table = Table("name", "status")
    table.align[1] = ColumnAlign.RIGHT
    table.append("build", Styled.ansi("passed", 32))
    table.append("deploy", Styled.ansi("failed", 1, 31))
    table.render(sys.stdout)

Markdown:
    table = Table.markdown("numeric", "name")
    table.append("004", "Afghanistan")
    print(table, end="")
"""

from .exceptions import (
    CellIndexError,
    ConfigurationError,
    RowLengthError,
    UnsupportedAlignmentError,
    UnsupportedValueError,
    WidthTableError,
)
from .models import ColumnAlign, Rule, TableConfig
from .table import Table
from .truncation import MIN_WIDTH, OVERFLOW_MARKER
from .width import StringWidther, Styled, display_width, string_and_width, truncate

try:
    from ._version import __version__  # type: ignore[import-not-found]
except ImportError:
    __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Main classes
    "Table",
    "TableConfig",
    "Rule",
    "ColumnAlign",
    # Width measurement
    "StringWidther",
    "Styled",
    "display_width",
    "string_and_width",
    "truncate",
    # Constants
    "MIN_WIDTH",
    "OVERFLOW_MARKER",
    # Exceptions - Base
    "WidthTableError",
    # Exceptions - Data
    "RowLengthError",
    "CellIndexError",
    "UnsupportedValueError",
    # Exceptions - Rendering
    "UnsupportedAlignmentError",
    "ConfigurationError",
]
