"""miniql - A flat-file table engine with a tiny command language."""

from miniql.codec import ValueCodec
from miniql.errors import (
    AllocationError,
    BoundsError,
    CapacityError,
    ColumnTypeError,
    CommandArityError,
    CommandSyntaxError,
    FieldValueError,
    FileOpenError,
    MiniqlError,
    RowFormatError,
    SchemaSyntaxError,
)
from miniql.interpreter import CommandInterpreter
from miniql.parsing import CommandParser, SchemaParser
from miniql.persistence import dump_table, load_table, parse_table, save_table
from miniql.row_store import RowStore
from miniql.table import Table
from miniql.types import Column, ColumnType, TableSchema

__all__ = [
    # Main API
    "Table",
    "load_table",
    "parse_table",
    "dump_table",
    "save_table",
    "CommandInterpreter",
    # Components
    "SchemaParser",
    "CommandParser",
    "RowStore",
    "ValueCodec",
    # Schema definitions
    "Column",
    "ColumnType",
    "TableSchema",
    # Errors
    "MiniqlError",
    "FileOpenError",
    "AllocationError",
    "SchemaSyntaxError",
    "CapacityError",
    "RowFormatError",
    "CommandSyntaxError",
    "CommandArityError",
    "FieldValueError",
    "BoundsError",
    "ColumnTypeError",
]

__version__ = "0.1.0"
