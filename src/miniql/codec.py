"""Conversion between textual field tokens and packed field values."""

from __future__ import annotations

import re
from typing import Any

from miniql.types import Column, ColumnType

# Leading whitespace, optional sign, then a run of decimal digits
_INT_PREFIX = re.compile(rb"\s*([+-]?[0-9]+)")


class ValueCodec:
    """Decodes field tokens into storable values and encodes them back."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def _to_bytes(self, token: bytes | str) -> bytes:
        if isinstance(token, str):
            return token.encode(self.encoding)
        return bytes(token)

    def decode_int(self, token: bytes | str) -> int:
        """Parse the leading integer of a token.

        Parsing stops at the first non-digit. A token without digits is 0.
        """
        match = _INT_PREFIX.match(self._to_bytes(token))
        if match is None:
            return 0
        return int(match.group(1))

    def decode_text(self, token: bytes | str, width: int) -> bytes:
        """Return the raw token bytes, truncated to ``width``."""
        return self._to_bytes(token)[:width]

    def encode_int(self, value: int) -> bytes:
        """Render an integer as decimal text."""
        return str(int(value)).encode("ascii")

    def encode_text(self, raw: bytes) -> bytes:
        """Render stored text verbatim, embedded NULs included."""
        return bytes(raw)

    def decode_field(self, column: Column, token: bytes | str) -> Any:
        """Decode a token for the given column."""
        if column.type is ColumnType.INTEGER:
            return self.decode_int(token)
        elif column.type is ColumnType.FIXED_TEXT:
            return self.decode_text(token, column.repeat_count)
        elif column.type is ColumnType.INVALID:
            return None
        else:
            raise TypeError(f"Cannot decode column type: {column.type}")

    def encode_field(self, column: Column, value: Any) -> bytes:
        """Encode a stored value for the given column."""
        if column.type is ColumnType.INTEGER:
            return self.encode_int(value)
        elif column.type is ColumnType.FIXED_TEXT:
            return self.encode_text(value)
        elif column.type is ColumnType.INVALID:
            return b""
        else:
            raise TypeError(f"Cannot encode column type: {column.type}")
