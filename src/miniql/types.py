"""Column and schema definitions for miniql tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# Width of a packed INT field (signed 32-bit, little-endian)
INT_SIZE = 4
INT_MIN = -(1 << 31)
INT_MAX = (1 << 31) - 1

# Longest accepted table, column or type name
MAX_NAME_LENGTH = 63

# Most columns a single table may declare
MAX_COLUMNS = 10


class ColumnType(Enum):
    """Storage types a column can have."""

    INTEGER = "INT"
    FIXED_TEXT = "CHAR"
    INVALID = "INVALID"

    @property
    def element_size(self) -> int:
        """Return the size in bytes of one element of this type."""
        sizes = {
            ColumnType.INTEGER: INT_SIZE,
            ColumnType.FIXED_TEXT: 1,
            ColumnType.INVALID: 0,  # Unknown types take no space
        }
        return sizes[self]

    @classmethod
    def from_name(cls, type_name: str) -> ColumnType:
        """Resolve a schema type name; unknown names map to INVALID."""
        if type_name == cls.INTEGER.value:
            return cls.INTEGER
        if type_name == cls.FIXED_TEXT.value:
            return cls.FIXED_TEXT
        return cls.INVALID


@dataclass
class Column:
    """A single field of a table row."""

    name: str
    type: ColumnType
    repeat_count: int = 1
    byte_offset: int = 0
    type_name: str = ""  # As written in the schema line

    def __post_init__(self) -> None:
        if not self.type_name:
            self.type_name = self.type.value

    @property
    def size_bytes(self) -> int:
        """Return the number of bytes this column occupies in a row."""
        return self.type.element_size * self.repeat_count

    @property
    def is_integer(self) -> bool:
        return self.type is ColumnType.INTEGER

    @property
    def is_text(self) -> bool:
        return self.type is ColumnType.FIXED_TEXT

    @property
    def is_invalid(self) -> bool:
        return self.type is ColumnType.INVALID


@dataclass
class TableSchema:
    """Table name plus its packed column layout."""

    name: str
    columns: list[Column] = field(default_factory=list)

    @property
    def row_byte_size(self) -> int:
        """Return the packed size of one row."""
        return sum(column.size_bytes for column in self.columns)

    @property
    def column_count(self) -> int:
        return len(self.columns)

    def column_index(self, name: str) -> int:
        """Return the position of a column by name.

        Raises:
            KeyError: If no column has that name.
        """
        for i, column in enumerate(self.columns):
            if column.name == name:
                return i
        raise KeyError(f"Unknown column: {name}")
