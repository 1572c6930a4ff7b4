"""Parser for the table name and column definition lines."""

from __future__ import annotations

import re

from miniql.errors import CapacityError, SchemaSyntaxError
from miniql.parsing.schema_lexer import SchemaLexer
from miniql.types import MAX_COLUMNS, MAX_NAME_LENGTH, Column, ColumnType, TableSchema

_NAME_RUN = re.compile(r"[A-Za-z]+")

# Column line states
_NAME = 0
_TYPE = 1


class SchemaParser:
    """Turns the first two lines of a database file into a TableSchema.

    The column line is read by a two-state machine. In the *name* state the
    first word becomes the column name; after that the parser is in the
    *type* state, where words are collected as the type name and ``(n)``
    sets the repeat count. ``|`` and end of line close the current column.
    """

    def __init__(
        self,
        max_columns: int = MAX_COLUMNS,
        max_name_length: int = MAX_NAME_LENGTH,
    ) -> None:
        self.lexer = SchemaLexer()
        self.lexer.build()
        self.max_columns = max_columns
        self.max_name_length = max_name_length

    def parse(self, header_line: str, column_line: str) -> TableSchema:
        """Parse both schema lines."""
        name = self.parse_table_name(header_line)
        columns = self.parse_columns(column_line)
        return TableSchema(name=name, columns=columns)

    def parse_table_name(self, line: str) -> str:
        """Return the first alphabetic run of the header line.

        Everything else on the line, such as the trailing pipes written by
        :func:`miniql.persistence.dump_table`, is ignored.
        """
        match = _NAME_RUN.search(line)
        if match is None:
            raise SchemaSyntaxError("Table name line contains no name")
        name = match.group(0)
        self._check_length(name, "Table name")
        return name

    def parse_columns(self, line: str) -> list[Column]:
        """Parse the column definition line into a packed column layout."""
        if not line.strip():
            raise SchemaSyntaxError("Column definition line is empty")

        columns: list[Column] = []
        name = ""
        type_name = ""
        repeat_count = 1
        state = _NAME
        offset = 0

        self.lexer.input(line)
        while True:
            tok = self.lexer.token()

            if tok is None or tok.type == "PIPE":
                if len(columns) >= self.max_columns:
                    raise CapacityError(
                        f"Table has more than {self.max_columns} columns"
                    )
                column = Column(
                    name=name,
                    type=ColumnType.from_name(type_name),
                    repeat_count=repeat_count,
                    byte_offset=offset,
                    type_name=type_name,
                )
                columns.append(column)
                offset += column.size_bytes
                if tok is None:
                    break
                name = ""
                type_name = ""
                repeat_count = 1
                state = _NAME
            elif tok.type == "WORD":
                if state == _NAME:
                    self._check_length(tok.value, "Column name")
                    name = tok.value
                    state = _TYPE
                else:
                    self._check_length(tok.value, "Type name")
                    type_name = tok.value
            elif tok.type == "LPAREN":
                if state == _TYPE:
                    repeat_count = self._parse_repeat_count(tok.lexpos)
                else:
                    # A count with no column before it is skipped
                    self.lexer.skip_count()
            else:
                raise SchemaSyntaxError(
                    f"Unexpected '{tok.value}' at position {tok.lexpos}"
                )

        return columns

    def _parse_repeat_count(self, lparen_pos: int) -> int:
        """Consume ``digits )`` after an opening parenthesis."""
        tok = self.lexer.token()
        if tok is None:
            raise SchemaSyntaxError(f"Unterminated repeat count at position {lparen_pos}")
        if tok.type != "INTEGER":
            raise SchemaSyntaxError(
                f"Unexpected character '{tok.value}' in repeat count at position {tok.lexpos}"
            )
        count = tok.value

        tok = self.lexer.token()
        if tok is None or tok.type != "RPAREN":
            raise SchemaSyntaxError(
                f"Expected ')' to close repeat count at position {lparen_pos}"
            )
        if count <= 0:
            raise SchemaSyntaxError(
                f"Repeat count must be positive, got {count} at position {lparen_pos}"
            )
        return count

    def _check_length(self, name: str, what: str) -> None:
        if len(name) > self.max_name_length:
            raise CapacityError(
                f"{what} '{name[:16]}...' is longer than {self.max_name_length} characters"
            )
