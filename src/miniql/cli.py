"""Command-line entry point and interactive prompt for miniql."""

from __future__ import annotations

import argparse
import readline  # noqa: F401 - enables line editing in input()
import sys
from pathlib import Path

from miniql.display import DEFAULT_WIDTH, render_schema, render_table
from miniql.errors import MiniqlError
from miniql.interpreter import AppendResult, CommandInterpreter, CommandResult, PrintResult
from miniql.persistence import load_table, save_table

# Where the table is written after every run
DEFAULT_OUTPUT = "db.csv"


def print_result(interpreter: CommandInterpreter, result: CommandResult) -> None:
    """Print the outcome of a command."""
    if isinstance(result, PrintResult):
        print(result.output)
    elif isinstance(result, AppendResult):
        print(render_table(interpreter.table, interpreter.width))


def run_command(interpreter: CommandInterpreter, source: str, verbose: bool = False) -> int:
    """Execute one command string and print its result.

    Returns:
        0 on success, 1 if the command was rejected
    """
    if verbose:
        print(f">>> {source}")

    try:
        result = interpreter.execute(source)
    except SyntaxError as e:
        print(f"Syntax error: {e}", file=sys.stderr)
        return 1
    except MiniqlError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print_result(interpreter, result)
    return 0


def print_help() -> None:
    """Print the command reference."""
    print("""
COMMANDS:
  PRINT                          Show every row of the table
  APPEND ROW (v1, v2, ...)       Append a row; one value per column, in order

VALUES:
  42, -7                         Numbers
  Arnold                         Bare words
  "Into the Moon"                Double-quoted text (no escapes)

OTHER:
  help                           Show this help
  exit, quit                     Leave the prompt and write the output file
""")


def run_repl(interpreter: CommandInterpreter, verbose: bool = False) -> int:
    """Read commands from the prompt until exit.

    Rejected commands are reported and leave the table as it was.

    Returns:
        0 if every command succeeded, 1 otherwise
    """
    table = interpreter.table
    print(f"miniql - table {table.name} ({table.row_count} rows)")
    print("Type 'help' for commands, 'exit' to quit.\n")

    status = 0
    while True:
        try:
            line = input("miniql> ")
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print()
            continue

        stripped = line.strip()
        if not stripped:
            continue
        if stripped.lower() in ("exit", "quit"):
            break
        if stripped.lower() == "help":
            print_help()
            continue

        if run_command(interpreter, stripped, verbose) != 0:
            status = 1

    return status


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    arg_parser = argparse.ArgumentParser(
        description="Inspect and edit a pipe-delimited miniql table"
    )
    arg_parser.add_argument(
        "database",
        type=Path,
        help="Path to the database file",
    )
    arg_parser.add_argument(
        "command",
        nargs="?",
        default=None,
        help='Command to run: "PRINT" or "APPEND ROW (v1, v2, ...)"',
    )
    arg_parser.add_argument(
        "-o", "--output",
        type=Path,
        default=Path(DEFAULT_OUTPUT),
        help=f"File the table is written to afterwards (default: {DEFAULT_OUTPUT})",
    )
    arg_parser.add_argument(
        "-w", "--width",
        type=int,
        default=DEFAULT_WIDTH,
        help=f"Width of each printed cell (default: {DEFAULT_WIDTH})",
    )
    arg_parser.add_argument(
        "-i", "--interactive",
        action="store_true",
        help="Read further commands from a prompt",
    )
    arg_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print each command before executing it",
    )

    args = arg_parser.parse_args(argv)

    try:
        table = load_table(args.database)
    except SyntaxError as e:
        print(f"Schema error: {e}", file=sys.stderr)
        return 1
    except MiniqlError as e:
        print(f"Error loading database: {e}", file=sys.stderr)
        return 1

    interpreter = CommandInterpreter(table, width=args.width)
    status = 0

    if args.command is None and not args.interactive:
        print(render_schema(table.schema))
        print()
        print(render_table(table, args.width))

    if args.command is not None:
        status = run_command(interpreter, args.command, args.verbose)

    if args.interactive:
        status = run_repl(interpreter, args.verbose) or status

    try:
        save_table(table, args.output)
    except OSError as e:
        print(f"Error writing to {args.output}: {e}", file=sys.stderr)
        return 1

    return status


if __name__ == "__main__":
    sys.exit(main())
