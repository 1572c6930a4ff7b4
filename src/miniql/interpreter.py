"""Command interpreter for PRINT and APPEND ROW."""

from __future__ import annotations

from dataclasses import dataclass

from miniql.codec import ValueCodec
from miniql.display import DEFAULT_WIDTH, render_table
from miniql.errors import CommandArityError
from miniql.parsing.command_parser import AppendRowCommand, Command, CommandParser, PrintCommand
from miniql.table import Table


@dataclass
class CommandResult:
    """Result of a command execution."""

    message: str | None = None


@dataclass
class PrintResult(CommandResult):
    """Result of PRINT: the rendered table."""

    output: str = ""


@dataclass
class AppendResult(CommandResult):
    """Result of APPEND ROW."""

    row_index: int = 0


class CommandInterpreter:
    """Parses command strings and runs them against a table."""

    def __init__(
        self,
        table: Table,
        codec: ValueCodec | None = None,
        width: int = DEFAULT_WIDTH,
    ) -> None:
        self.table = table
        self.codec = codec or ValueCodec()
        self.width = width
        self.parser = CommandParser()

    def execute(self, source: str) -> CommandResult:
        """Parse and execute a command string.

        Raises:
            CommandSyntaxError: If the command is malformed. The table is
                left untouched.
        """
        command = self.parser.parse(source)
        return self.execute_command(command)

    def execute_command(self, command: Command) -> CommandResult:
        """Execute an already parsed command."""
        if isinstance(command, PrintCommand):
            return self._execute_print(command)
        elif isinstance(command, AppendRowCommand):
            return self._execute_append_row(command)
        else:
            raise ValueError(f"Unknown command type: {type(command)}")

    def _execute_print(self, command: PrintCommand) -> PrintResult:
        return PrintResult(output=render_table(self.table, self.width))

    def _execute_append_row(self, command: AppendRowCommand) -> AppendResult:
        """Decode the values by position and store them as a new row.

        Every value is decoded and checked before the row is allocated.
        """
        columns = self.table.columns
        if len(command.values) != len(columns):
            position = command.values[-1].position if command.values else None
            raise CommandArityError(
                f"APPEND ROW expects {len(columns)} values for table "
                f"'{self.table.name}', got {len(command.values)}",
                position,
            )

        values = [
            self.codec.decode_field(column, value.text)
            for column, value in zip(columns, command.values)
        ]
        index = self.table.append(values)
        return AppendResult(message=f"Appended row {index}", row_index=index)
