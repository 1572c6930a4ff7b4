"""Shared fixtures for miniql tests."""

from pathlib import Path

import pytest

from miniql.persistence import parse_table
from miniql.table import Table

BOOKS = (
    b"books||\n"
    b"id INT|name CHAR(25)|author CHAR(25)\n"
    b"0|The Great Quest|Arnold\n"
    b"1|Purple Sea|Christine\n"
    b"2|Into the Moon|Arnold\n"
    b"3|Road to Victory|blueberry\n"
)


@pytest.fixture
def books_data() -> bytes:
    """Raw contents of the example books database."""
    return BOOKS


@pytest.fixture
def books_file(tmp_path: Path) -> Path:
    """The books database written to a temporary file."""
    path = tmp_path / "books.db"
    path.write_bytes(BOOKS)
    return path


@pytest.fixture
def books_table() -> Table:
    """The books database loaded into memory."""
    return parse_table(BOOKS)
