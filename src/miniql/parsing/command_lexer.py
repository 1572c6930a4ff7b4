"""Lexer for the miniql command language."""

import ply.lex as lex

from miniql.errors import CommandSyntaxError


class CommandLexer:
    """Lexer for tokenizing ``PRINT`` and ``APPEND ROW (...)`` commands."""

    # Reserved keywords (exact case)
    reserved = {
        "PRINT": "PRINT",
        "APPEND": "APPEND",
        "ROW": "ROW",
    }

    # Token list
    tokens = [
        "IDENTIFIER",
        "NUMBER",
        "STRING",
        "LPAREN",
        "RPAREN",
        "COMMA",
    ] + list(reserved.values())

    # Simple tokens
    t_LPAREN = r"\("
    t_RPAREN = r"\)"
    t_COMMA = r","

    # Ignored characters
    t_ignore = " \t\r\n\f\v"

    def __init__(self) -> None:
        self.lexer: lex.LexToken = None  # type: ignore

    def t_IDENTIFIER(self, t: lex.LexToken) -> lex.LexToken:
        r"[A-Za-z]+"
        t.type = self.reserved.get(t.value, "IDENTIFIER")
        return t

    def t_NUMBER(self, t: lex.LexToken) -> lex.LexToken:
        r"-?[0-9]+"
        return t

    def t_STRING(self, t: lex.LexToken) -> lex.LexToken:
        r'"[^"]*"'
        # Quotes removed, no escape processing
        t.value = t.value[1:-1]
        return t

    def t_error(self, t: lex.LexToken) -> None:
        if t.value[0] == '"':
            raise CommandSyntaxError(
                f"Unterminated string at position {t.lexpos}", t.lexpos
            )
        raise CommandSyntaxError(
            f"Illegal character '{t.value[0]}' at position {t.lexpos}", t.lexpos
        )

    # --- Lexer methods ---

    def build(self, **kwargs) -> None:  # type: ignore
        """Build the lexer."""
        self.lexer = lex.lex(module=self, **kwargs)

    def input(self, data: str) -> None:
        """Set the input string to tokenize."""
        self.lexer.input(data)

    def token(self) -> lex.LexToken | None:
        """Return the next token."""
        return self.lexer.token()

    def next_token(self, data: str, position: int = 0) -> tuple[lex.LexToken | None, int]:
        """Scan one token of ``data`` starting at ``position``.

        Returns the token (None at end of input) and the position just past it.
        """
        self.lexer.input(data)
        self.lexer.lexpos = position
        tok = self.lexer.token()
        return tok, self.lexer.lexpos

    def tokenize(self, data: str) -> list[lex.LexToken]:
        """Tokenize the input and return all tokens."""
        self.input(data)
        tokens = []
        while True:
            tok = self.token()
            if tok is None:
                break
            tokens.append(tok)
        return tokens
