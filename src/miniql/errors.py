"""Exceptions raised by miniql.

Each error also derives from the built-in exception a caller would expect
(``SyntaxError`` for parse failures, ``IndexError`` for bad row/column
indices and so on), so existing ``except`` clauses keep working.
"""

from __future__ import annotations


class MiniqlError(Exception):
    """Base class for all miniql errors."""


class FileOpenError(MiniqlError, OSError):
    """The database file could not be read."""


class AllocationError(MiniqlError, MemoryError):
    """The row buffer could not be grown."""


class SchemaSyntaxError(MiniqlError, SyntaxError):
    """The table name or column definition line is malformed."""


class CapacityError(MiniqlError, ValueError):
    """A schema exceeds a fixed limit (column count or name length)."""


class RowFormatError(MiniqlError, ValueError):
    """A data line does not match the column layout."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class CommandSyntaxError(MiniqlError, SyntaxError):
    """A command string does not match the command grammar."""

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


class CommandArityError(CommandSyntaxError):
    """APPEND ROW supplied a different number of values than columns."""


class FieldValueError(MiniqlError, ValueError):
    """A value cannot be stored in (or written out from) its column."""


class BoundsError(MiniqlError, IndexError):
    """A row or column index is out of range."""


class ColumnTypeError(MiniqlError, TypeError):
    """A typed accessor was used on a column of another type."""
