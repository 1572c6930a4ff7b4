"""Tests for the value codec."""

from miniql.codec import ValueCodec
from miniql.types import Column, ColumnType


class TestDecodeInt:
    """Tests for integer decoding."""

    def test_plain_and_signed(self):
        """Test plain, signed and space-prefixed numbers."""
        codec = ValueCodec()
        assert codec.decode_int(b"42") == 42
        assert codec.decode_int(b"  17") == 17
        assert codec.decode_int(b"\t-8") == -8
        assert codec.decode_int(b"+5") == 5
        assert codec.decode_int(b"007") == 7

    def test_stops_at_non_digit(self):
        """Test that decoding stops at the first non-digit."""
        codec = ValueCodec()
        assert codec.decode_int(b"12abc") == 12
        assert codec.decode_int(b"3 4") == 3

    def test_no_digits_is_zero(self):
        """Test tokens without any digits."""
        codec = ValueCodec()
        assert codec.decode_int(b"abc") == 0
        assert codec.decode_int(b"") == 0
        assert codec.decode_int(b"-") == 0
        assert codec.decode_int(b"+x") == 0

    def test_str_token(self):
        """Test that str tokens are accepted."""
        assert ValueCodec().decode_int(" 99 bottles") == 99


class TestDecodeText:
    """Tests for text decoding."""

    def test_verbatim(self):
        """Test that text is kept byte for byte."""
        assert ValueCodec().decode_text(b" Purple Sea ", 25) == b" Purple Sea "

    def test_truncated(self):
        """Test truncation to the column width."""
        assert ValueCodec().decode_text(b"Road to Victory", 4) == b"Road"

    def test_str_is_encoded(self):
        """Test that str tokens use the codec's encoding."""
        assert ValueCodec().decode_text("café", 10) == b"caf\xc3\xa9"
        assert ValueCodec(encoding="latin-1").decode_text("café", 10) == b"caf\xe9"


class TestEncode:
    """Tests for encoding stored values."""

    def test_encode_int(self):
        """Test decimal rendering."""
        codec = ValueCodec()
        assert codec.encode_int(0) == b"0"
        assert codec.encode_int(-1234) == b"-1234"
        assert codec.encode_int(2147483647) == b"2147483647"

    def test_encode_text_keeps_nuls(self):
        """Test that stored text is not cut at a NUL byte."""
        raw = b"ab\x00cd\x00"
        assert ValueCodec().encode_text(raw) == raw


class TestFieldDispatch:
    """Tests for the column-typed entry points."""

    def test_decode_field(self):
        """Test decoding for each column type."""
        codec = ValueCodec()
        assert codec.decode_field(Column("id", ColumnType.INTEGER), b"7") == 7
        assert (
            codec.decode_field(Column("n", ColumnType.FIXED_TEXT, repeat_count=3), b"Arnold")
            == b"Arn"
        )
        assert codec.decode_field(Column("p", ColumnType.INVALID), b"1.5") is None

    def test_encode_field(self):
        """Test encoding for each column type."""
        codec = ValueCodec()
        assert codec.encode_field(Column("id", ColumnType.INTEGER), 7) == b"7"
        assert codec.encode_field(Column("n", ColumnType.FIXED_TEXT), b"x") == b"x"
        assert codec.encode_field(Column("p", ColumnType.INVALID), None) == b""
