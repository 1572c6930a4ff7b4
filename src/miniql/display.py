"""Console rendering of tables and schemas."""

from __future__ import annotations

from typing import Any

from miniql.table import Table
from miniql.types import Column, ColumnType, TableSchema

# Width of every rendered cell
DEFAULT_WIDTH = 25


def format_value(column: Column, value: Any, encoding: str = "utf-8") -> str:
    """Format a stored value for display.

    Text is shown up to its first NUL byte; INVALID columns render empty.
    """
    if column.type is ColumnType.INTEGER:
        return str(value)
    elif column.type is ColumnType.FIXED_TEXT:
        return value.split(b"\x00", 1)[0].decode(encoding, errors="replace")
    return ""


def render_schema(schema: TableSchema) -> str:
    """Render the table name and column layout, one column per line."""
    lines = [f"table {schema.name}"]
    for column in schema.columns:
        lines.append(
            f"column {column.name} type {column.type.value} "
            f"count {column.repeat_count} offset {column.byte_offset}"
        )
    return "\n".join(lines)


def render_table(table: Table, width: int = DEFAULT_WIDTH) -> str:
    """Render all columns and rows as right-aligned fixed-width cells."""
    lines = [" ".join(column.name.rjust(width) for column in table.columns)]

    for row in table.iter_rows():
        cells = [
            format_value(column, value).rjust(width)
            for column, value in zip(table.columns, row)
        ]
        lines.append(" ".join(cells))

    count = table.row_count
    lines.append(f"\n({count} row{'s' if count != 1 else ''})")
    return "\n".join(lines)
