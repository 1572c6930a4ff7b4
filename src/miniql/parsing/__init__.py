"""Parsing module for the schema lines and the command language."""

from miniql.parsing.schema_parser import SchemaParser
from miniql.parsing.command_parser import (
    AppendRowCommand,
    CommandParser,
    CommandValue,
    PrintCommand,
)

__all__ = [
    "AppendRowCommand",
    "CommandParser",
    "CommandValue",
    "PrintCommand",
    "SchemaParser",
]
