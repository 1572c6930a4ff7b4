"""In-memory table: a schema plus its packed rows."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any

from miniql.errors import FieldValueError
from miniql.row_store import RowStore
from miniql.types import INT_MAX, INT_MIN, Column, ColumnType, TableSchema

# Bytes that would break the line/field structure of the file format
_RESERVED_TEXT_BYTES = (b"|", b"\n", b"\r")


class Table:
    """A named table with a fixed column layout and growable rows."""

    def __init__(self, schema: TableSchema, fill_byte: bytes | None = None) -> None:
        self.schema = schema
        self.rows = RowStore(schema.columns, schema.row_byte_size, fill_byte)

    @property
    def name(self) -> str:
        return self.schema.name

    @property
    def columns(self) -> list[Column]:
        return self.schema.columns

    @property
    def row_byte_size(self) -> int:
        return self.rows.row_byte_size

    @property
    def row_count(self) -> int:
        return self.rows.row_count

    def __len__(self) -> int:
        return self.rows.row_count

    def check_values(self, values: Sequence[Any]) -> None:
        """Validate a full row of decoded values without storing it.

        Raises:
            FieldValueError: If the count is wrong or a value does not fit.
        """
        if len(values) != len(self.columns):
            raise FieldValueError(
                f"Expected {len(self.columns)} values, got {len(values)}"
            )
        for column, value in zip(self.columns, values):
            self._check_value(column, value)

    def _check_value(self, column: Column, value: Any) -> None:
        if column.type is ColumnType.INTEGER:
            if not isinstance(value, int) or isinstance(value, bool):
                raise FieldValueError(
                    f"Column '{column.name}' expects an integer, got {type(value).__name__}"
                )
            if value < INT_MIN or value > INT_MAX:
                raise FieldValueError(
                    f"Value {value} out of range for INT column '{column.name}'"
                )
        elif column.type is ColumnType.FIXED_TEXT:
            if not isinstance(value, (bytes, bytearray)):
                raise FieldValueError(
                    f"Column '{column.name}' expects bytes, got {type(value).__name__}"
                )
            stored = bytes(value[: column.repeat_count])
            for reserved in _RESERVED_TEXT_BYTES:
                if reserved in stored:
                    raise FieldValueError(
                        f"Column '{column.name}' cannot store {reserved!r}"
                    )

    def append(self, values: Sequence[Any]) -> int:
        """Append a row of decoded values and return its index.

        Values are checked before the row is allocated, so a rejected row
        leaves the table unchanged.
        """
        self.check_values(values)
        index = self.rows.append_row()
        for col, value in enumerate(values):
            self.rows.set_value(index, col, value)
        return index

    def get_value(self, row: int, col: int) -> int | bytes | None:
        return self.rows.get_value(row, col)

    def get_row(self, row: int) -> list[int | bytes | None]:
        return self.rows.get_row(row)

    def iter_rows(self) -> Iterator[list[int | bytes | None]]:
        """Yield every row in insertion order."""
        for row in range(self.row_count):
            yield self.rows.get_row(row)
