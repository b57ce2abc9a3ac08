"""Exceptions for widthtable."""


# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class WidthTableError(Exception):
    """
    Base exception for all widthtable errors.

    Every error raised by this library is a caller contract violation;
    none of them is meant to be retried. They all inherit from this class
    so callers can catch library errors with a single except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Data Exceptions
# ---------------------------------------------------------------------------


class RowLengthError(WidthTableError, ValueError):
    """
    Raised when a row does not have exactly one cell per column.

    Attributes:
        expected: Number of columns in the table
        actual: Number of cells in the rejected row
    """

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Row has wrong number of items: expected {expected}, got {actual}")


class CellIndexError(WidthTableError, IndexError):
    """Raised when a cell is addressed outside the table's rows or columns."""

    def __init__(self, row: int, column: int, rows: int, columns: int) -> None:
        self.row = row
        self.column = column
        super().__init__(
            f"Cell ({row}, {column}) out of range for table with "
            f"{rows} row(s) and {columns} column(s)"
        )


class UnsupportedValueError(WidthTableError, TypeError):
    """
    Raised when a value's display width cannot be determined.

    Only ``str`` and objects implementing ``StringWidther`` are accepted.
    """

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Can't determine width from {type(value).__name__}")


# ---------------------------------------------------------------------------
# Rendering Exceptions
# ---------------------------------------------------------------------------


class UnsupportedAlignmentError(WidthTableError, NotImplementedError):
    """Raised at render time when a column asks for an unimplemented alignment."""

    def __init__(self, column: int, alignment: object) -> None:
        self.column = column
        self.alignment = alignment
        super().__init__(
            f"Column {column}: only left- and right-align are implemented (got {alignment})"
        )


class ConfigurationError(WidthTableError, ValueError):
    """Raised when the table configuration does not fit the table's columns."""

    pass
