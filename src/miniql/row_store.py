"""Packed, fixed-width row storage."""

from __future__ import annotations

import struct
from collections.abc import Sequence
from typing import Any

from miniql.errors import AllocationError, BoundsError, ColumnTypeError, FieldValueError
from miniql.types import INT_MAX, INT_MIN, Column, ColumnType

# Packed layout of an INT field
INT_FORMAT = "<i"


def field_offset(row: int, row_byte_size: int, column: Column) -> int:
    """Get the byte offset of a column within the packed buffer."""
    return row * row_byte_size + column.byte_offset


class RowStore:
    """Owns a single contiguous buffer of fixed-size rows.

    Every row occupies exactly ``row_byte_size`` bytes and every field is
    addressed through :func:`field_offset`. The buffer only ever grows, one
    row at a time, and growth keeps all existing bytes in place.
    """

    # Filler for freshly appended rows and for text shorter than its column
    FILL_BYTE = b"\x00"

    def __init__(
        self,
        columns: Sequence[Column],
        row_byte_size: int,
        fill_byte: bytes | None = None,
    ) -> None:
        self.columns = list(columns)
        self.row_byte_size = row_byte_size
        self.fill_byte = fill_byte if fill_byte is not None else self.FILL_BYTE
        if len(self.fill_byte) != 1:
            raise ValueError(f"Fill byte must be a single byte, got {self.fill_byte!r}")
        self._buffer = bytearray()
        self._count = 0

    @property
    def row_count(self) -> int:
        """Return the number of rows in the store."""
        return self._count

    @property
    def buffer(self) -> bytes:
        """Return a copy of the packed row buffer."""
        return bytes(self._buffer)

    def __len__(self) -> int:
        return self._count

    def append_row(self) -> int:
        """Grow the buffer by one row and return the new row's index."""
        try:
            self._buffer.extend(self.fill_byte * self.row_byte_size)
        except MemoryError as e:
            raise AllocationError(
                f"Cannot grow row buffer past {len(self._buffer)} bytes"
            ) from e
        index = self._count
        self._count += 1
        return index

    def _check_row(self, row: int) -> None:
        if row < 0 or row >= self._count:
            raise BoundsError(f"Row {row} out of range [0, {self._count})")

    def _column(self, col: int) -> Column:
        if col < 0 or col >= len(self.columns):
            raise BoundsError(f"Column {col} out of range [0, {len(self.columns)})")
        return self.columns[col]

    def _locate(self, row: int, col: int, expected: ColumnType) -> tuple[Column, int]:
        """Bounds-check a field and return its column and byte offset."""
        self._check_row(row)
        column = self._column(col)
        if column.type is not expected:
            raise ColumnTypeError(
                f"Column '{column.name}' is {column.type.value}, not {expected.value}"
            )
        return column, field_offset(row, self.row_byte_size, column)

    def get_int(self, row: int, col: int) -> int:
        """Read an INT field."""
        _, offset = self._locate(row, col, ColumnType.INTEGER)
        return struct.unpack_from(INT_FORMAT, self._buffer, offset)[0]

    def set_int(self, row: int, col: int, value: int) -> None:
        """Write an INT field."""
        column, offset = self._locate(row, col, ColumnType.INTEGER)
        if value < INT_MIN or value > INT_MAX:
            raise FieldValueError(
                f"Value {value} out of range for INT column '{column.name}'"
            )
        struct.pack_into(INT_FORMAT, self._buffer, offset, value)

    def get_text(self, row: int, col: int) -> bytes:
        """Read the raw bytes of a CHAR field.

        The result is always exactly ``repeat_count`` bytes long; it is not
        terminated and may contain NUL bytes.
        """
        column, offset = self._locate(row, col, ColumnType.FIXED_TEXT)
        return bytes(self._buffer[offset : offset + column.repeat_count])

    def set_text(self, row: int, col: int, data: bytes) -> None:
        """Copy up to ``repeat_count`` bytes into a CHAR field.

        Shorter input is padded with the fill byte.
        """
        column, offset = self._locate(row, col, ColumnType.FIXED_TEXT)
        width = column.repeat_count
        chunk = bytes(data[:width])
        chunk += self.fill_byte * (width - len(chunk))
        self._buffer[offset : offset + width] = chunk

    def get_value(self, row: int, col: int) -> int | bytes | None:
        """Read any field; INVALID columns read as None."""
        self._check_row(row)
        column = self._column(col)
        if column.type is ColumnType.INTEGER:
            return self.get_int(row, col)
        elif column.type is ColumnType.FIXED_TEXT:
            return self.get_text(row, col)
        elif column.type is ColumnType.INVALID:
            return None
        else:
            raise TypeError(f"Cannot read column type: {column.type}")

    def set_value(self, row: int, col: int, value: Any) -> None:
        """Write any field; writes to INVALID columns are ignored."""
        self._check_row(row)
        column = self._column(col)
        if column.type is ColumnType.INTEGER:
            self.set_int(row, col, value)
        elif column.type is ColumnType.FIXED_TEXT:
            self.set_text(row, col, value)
        elif column.type is ColumnType.INVALID:
            return
        else:
            raise TypeError(f"Cannot write column type: {column.type}")

    def get_row(self, row: int) -> list[int | bytes | None]:
        """Read every field of a row."""
        return [self.get_value(row, col) for col in range(len(self.columns))]
