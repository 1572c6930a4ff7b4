"""Parser for the miniql command language."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import ply.yacc as yacc

from miniql.errors import CommandSyntaxError
from miniql.parsing.command_lexer import CommandLexer


@dataclass
class CommandValue:
    """A literal value inside ``APPEND ROW (...)``."""

    kind: str  # IDENTIFIER, NUMBER or STRING
    text: str
    position: int = 0


@dataclass
class PrintCommand:
    """A PRINT command."""

    pass


@dataclass
class AppendRowCommand:
    """An APPEND ROW command."""

    values: list[CommandValue] = field(default_factory=list)


Command = PrintCommand | AppendRowCommand


class CommandParser:
    """Parser for command strings.

    Grammar::

        command : PRINT
                | APPEND ROW '(' value (',' value)* ')'
        value   : identifier | number | quoted-string
    """

    tokens = CommandLexer.tokens

    def __init__(self) -> None:
        self.lexer = CommandLexer()
        self.lexer.build()
        self.parser: yacc.LRParser = None  # type: ignore

    def p_command_print(self, p: yacc.YaccProduction) -> None:
        """command : PRINT"""
        p[0] = PrintCommand()

    def p_command_append_row(self, p: yacc.YaccProduction) -> None:
        """command : APPEND ROW LPAREN value_list RPAREN"""
        p[0] = AppendRowCommand(values=p[4])

    def p_value_list_single(self, p: yacc.YaccProduction) -> None:
        """value_list : value"""
        p[0] = [p[1]]

    def p_value_list_multiple(self, p: yacc.YaccProduction) -> None:
        """value_list : value_list COMMA value"""
        p[0] = p[1] + [p[3]]

    def p_value(self, p: yacc.YaccProduction) -> None:
        """value : IDENTIFIER
                 | NUMBER
                 | STRING"""
        p[0] = CommandValue(kind=p.slice[1].type, text=p[1], position=p.lexpos(1))

    def p_value_keyword(self, p: yacc.YaccProduction) -> None:
        """value : PRINT
                 | APPEND
                 | ROW"""
        # Keywords are plain words when used as values
        p[0] = CommandValue(kind="IDENTIFIER", text=p[1], position=p.lexpos(1))

    def p_error(self, p: yacc.YaccProduction) -> None:
        if p:
            raise CommandSyntaxError(
                f"Syntax error at '{p.value}' (position {p.lexpos})", p.lexpos
            )
        else:
            raise CommandSyntaxError("Syntax error at end of input")

    def build(self, **kwargs: Any) -> None:
        """Build the parser."""
        self.parser = yacc.yacc(module=self, start="command", **kwargs)

    def parse(self, data: str) -> Command:
        """Parse a command string."""
        if self.parser is None:
            self.build(debug=False, write_tables=False)

        return self.parser.parse(data, lexer=self.lexer.lexer)
