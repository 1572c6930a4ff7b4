"""Reading and writing pipe-delimited database files.

File layout::

    books||
    id INT|name CHAR(25)|author CHAR(25)
    0|The Great Quest|Arnold
    1|Purple Sea|Christine

Line 1 carries the table name (the pipes after it are not significant),
line 2 the column definitions and every further line one row.
"""

from __future__ import annotations

from pathlib import Path

from miniql.codec import ValueCodec
from miniql.errors import FieldValueError, FileOpenError, RowFormatError, SchemaSyntaxError
from miniql.parsing.schema_parser import SchemaParser
from miniql.table import Table

# Encoding of the two schema lines; names are plain ASCII letters
SCHEMA_ENCODING = "latin-1"


def _strip_line_end(line: bytes) -> bytes:
    if line.endswith(b"\r"):
        return line[:-1]
    return line


def parse_table(
    data: bytes,
    parser: SchemaParser | None = None,
    codec: ValueCodec | None = None,
    fill_byte: bytes | None = None,
) -> Table:
    """Build a table from the raw contents of a database file.

    Raises:
        SchemaSyntaxError: If the name or column line is malformed.
        CapacityError: If the schema exceeds the column or name limits.
        RowFormatError: If a data line does not fit the columns.
    """
    parser = parser or SchemaParser()
    codec = codec or ValueCodec()

    lines = data.split(b"\n")
    if len(lines) < 2:
        raise SchemaSyntaxError("Missing column definition line")

    header = _strip_line_end(lines[0]).decode(SCHEMA_ENCODING)
    column_line = _strip_line_end(lines[1]).decode(SCHEMA_ENCODING)
    table = Table(parser.parse(header, column_line), fill_byte)

    columns = table.columns
    # A lone column of unknown type writes every row as an empty line
    blank_is_row = len(columns) == 1 and columns[0].is_invalid

    row_lines = lines[2:]
    if row_lines and not row_lines[-1]:
        # Terminator of the last line
        row_lines.pop()

    for line_number, raw_line in enumerate(row_lines, start=3):
        line = _strip_line_end(raw_line)
        if not line and not blank_is_row:
            continue

        fields = line.split(b"|")
        if len(fields) != len(columns):
            raise RowFormatError(
                f"expected {len(columns)} fields, got {len(fields)}", line_number
            )

        values = [codec.decode_field(column, token) for column, token in zip(columns, fields)]
        try:
            table.append(values)
        except FieldValueError as e:
            raise RowFormatError(str(e), line_number) from e

    return table


def load_table(
    path: Path | str,
    parser: SchemaParser | None = None,
    codec: ValueCodec | None = None,
    fill_byte: bytes | None = None,
) -> Table:
    """Load a table from a database file.

    Raises:
        FileOpenError: If the file cannot be read.
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise FileOpenError(f"Could not open {path}: {e.strerror or e}") from e
    return parse_table(data, parser, codec, fill_byte)


def dump_schema_lines(table: Table) -> list[bytes]:
    """Render the table name line and the column definition line."""
    header = table.name + "|" * (len(table.columns) - 1)

    definitions = []
    for column in table.columns:
        definition = f"{column.name} {column.type_name}"
        if column.repeat_count > 1:
            definition += f"({column.repeat_count})"
        definitions.append(definition)

    return [
        header.encode(SCHEMA_ENCODING),
        "|".join(definitions).encode(SCHEMA_ENCODING),
    ]


def dump_table(table: Table, codec: ValueCodec | None = None) -> bytes:
    """Serialize a table in the same format :func:`parse_table` reads."""
    codec = codec or ValueCodec()
    lines = dump_schema_lines(table)

    for row in table.iter_rows():
        lines.append(
            b"|".join(
                codec.encode_field(column, value)
                for column, value in zip(table.columns, row)
            )
        )

    return b"".join(line + b"\n" for line in lines)


def save_table(table: Table, path: Path | str, codec: ValueCodec | None = None) -> None:
    """Write a table to ``path``, replacing any existing file."""
    Path(path).write_bytes(dump_table(table, codec))
