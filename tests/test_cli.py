"""Tests for the miniql command-line entry point."""

from pathlib import Path

from miniql.cli import main, run_command, run_repl
from miniql.interpreter import CommandInterpreter
from miniql.persistence import load_table


def feed_input(monkeypatch, lines):
    """Make input() return the given lines, then raise EOFError."""
    remaining = list(lines)

    def fake_input(prompt=""):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    monkeypatch.setattr("builtins.input", fake_input)


class TestMain:
    """Tests for main()."""

    def test_append_and_write(self, books_file: Path, tmp_path: Path, capsys):
        """Test the books example end to end."""
        out = tmp_path / "db.csv"
        status = main([str(books_file), 'APPEND ROW (4, "New Book", Someone)', "-o", str(out)])

        assert status == 0
        captured = capsys.readouterr()
        assert "New Book" in captured.out
        assert "(5 rows)" in captured.out

        data = out.read_bytes()
        lines = data.split(b"\n")
        assert lines[0] == b"books||"
        assert lines[1] == b"id INT|name CHAR(25)|author CHAR(25)"
        assert lines[6] == (
            b"4|New Book" + b"\x00" * 17 + b"|Someone" + b"\x00" * 18
        )
        assert data.endswith(b"\n")

        reloaded = load_table(out)
        assert reloaded.row_count == 5

    def test_print_command(self, books_file: Path, tmp_path: Path, capsys):
        """Test running PRINT from the command line."""
        status = main([str(books_file), "PRINT", "-o", str(tmp_path / "db.csv")])

        assert status == 0
        captured = capsys.readouterr()
        assert "Road to Victory" in captured.out
        assert captured.out.rstrip().endswith("(4 rows)")

    def test_no_command_shows_schema(self, books_file: Path, tmp_path: Path, capsys):
        """Test that running without a command prints schema and rows."""
        out = tmp_path / "db.csv"
        status = main([str(books_file), "-o", str(out)])

        assert status == 0
        captured = capsys.readouterr()
        assert captured.out.startswith("table books\ncolumn id type INT count 1 offset 0\n")
        assert "(4 rows)" in captured.out
        assert out.exists()

    def test_width_option(self, books_file: Path, tmp_path: Path, capsys):
        """Test the -w option."""
        main([str(books_file), "PRINT", "-w", "6", "-o", str(tmp_path / "db.csv")])
        captured = capsys.readouterr()
        assert captured.out.split("\n")[0] == "    id   name author"

    def test_verbose_flag(self, books_file: Path, tmp_path: Path, capsys):
        """Test that -v echoes the command."""
        main([str(books_file), "PRINT", "-v", "-o", str(tmp_path / "db.csv")])
        captured = capsys.readouterr()
        assert ">>> PRINT" in captured.out

    def test_missing_database(self, tmp_path: Path, capsys):
        """Test that an unreadable database fails without writing output."""
        out = tmp_path / "db.csv"
        status = main([str(tmp_path / "nope.db"), "PRINT", "-o", str(out)])

        assert status == 1
        assert "Error loading database" in capsys.readouterr().err
        assert not out.exists()

    def test_bad_schema(self, tmp_path: Path, capsys):
        """Test that a malformed column line aborts the run."""
        db = tmp_path / "bad.db"
        db.write_bytes(b"t|\nid INT|name CHAR(x)\n")
        out = tmp_path / "db.csv"

        status = main([str(db), "PRINT", "-o", str(out)])

        assert status == 1
        assert "Schema error" in capsys.readouterr().err
        assert not out.exists()

    def test_bad_row(self, tmp_path: Path, capsys):
        """Test that a data line with the wrong field count aborts the run."""
        db = tmp_path / "bad.db"
        db.write_bytes(b"t|\nid INT|name CHAR(4)\n1\n")

        status = main([str(db), "PRINT", "-o", str(tmp_path / "db.csv")])

        assert status == 1
        assert "line 3" in capsys.readouterr().err

    def test_syntax_error_still_writes(self, books_file: Path, tmp_path: Path, capsys):
        """Test that a rejected command exits 1 but the table is still written."""
        out = tmp_path / "db.csv"
        status = main([str(books_file), 'APPEND ROW (1, "X"', "-o", str(out)])

        assert status == 1
        assert "Syntax error" in capsys.readouterr().err
        assert out.read_bytes() == (
            b"books||\n"
            b"id INT|name CHAR(25)|author CHAR(25)\n"
            + b"".join(
                f"{i}|{name}".encode() + b"\x00" * (25 - len(name))
                + f"|{author}".encode() + b"\x00" * (25 - len(author)) + b"\n"
                for i, name, author in [
                    (0, "The Great Quest", "Arnold"),
                    (1, "Purple Sea", "Christine"),
                    (2, "Into the Moon", "Arnold"),
                    (3, "Road to Victory", "blueberry"),
                ]
            )
        )

    def test_arity_error(self, books_file: Path, tmp_path: Path, capsys):
        """Test that a wrong number of values is reported."""
        out = tmp_path / "db.csv"
        status = main([str(books_file), "APPEND ROW (4, only)", "-o", str(out)])

        assert status == 1
        assert "expects 3 values" in capsys.readouterr().err
        assert load_table(out).row_count == 4

    def test_unwritable_output(self, books_file: Path, tmp_path: Path, capsys):
        """Test that a failed write is reported."""
        out = tmp_path / "missing_dir" / "db.csv"
        status = main([str(books_file), "PRINT", "-o", str(out)])

        assert status == 1
        assert "Error writing" in capsys.readouterr().err


class TestRunCommand:
    """Tests for run_command()."""

    def test_success(self, books_table, capsys):
        """Test a successful command."""
        interpreter = CommandInterpreter(books_table)
        assert run_command(interpreter, "PRINT") == 0
        assert "(4 rows)" in capsys.readouterr().out

    def test_value_error(self, books_table, capsys):
        """Test that value errors are reported on stderr."""
        interpreter = CommandInterpreter(books_table)
        assert run_command(interpreter, 'APPEND ROW (1, "a|b", c)') == 1
        assert capsys.readouterr().err.startswith("Error:")


class TestRepl:
    """Tests for the interactive prompt."""

    def test_repl_commands(self, books_table, monkeypatch, capsys):
        """Test running commands at the prompt."""
        feed_input(monkeypatch, ["", "help", "APPEND ROW (4, a, b)", "PRINT", "exit"])
        interpreter = CommandInterpreter(books_table)

        status = run_repl(interpreter)

        assert status == 0
        assert books_table.row_count == 5
        captured = capsys.readouterr()
        assert "COMMANDS:" in captured.out
        assert "(5 rows)" in captured.out

    def test_repl_reports_errors(self, books_table, monkeypatch, capsys):
        """Test that a bad command is reported and the prompt continues."""
        feed_input(monkeypatch, ["APPEND ROW (", "APPEND ROW (4, a, b)"])
        interpreter = CommandInterpreter(books_table)

        status = run_repl(interpreter)

        assert status == 1
        assert books_table.row_count == 5
        assert "Syntax error" in capsys.readouterr().err

    def test_interactive_main(self, books_file: Path, tmp_path: Path, monkeypatch):
        """Test that -i writes the table after the prompt ends."""
        feed_input(monkeypatch, ['APPEND ROW (4, "From Prompt", me)', "quit"])
        out = tmp_path / "db.csv"

        status = main([str(books_file), "-i", "-o", str(out)])

        assert status == 0
        assert load_table(out).get_value(4, 1).rstrip(b"\x00") == b"From Prompt"
