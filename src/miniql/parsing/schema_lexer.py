"""Lexer for the column definition line."""

import ply.lex as lex

from miniql.errors import SchemaSyntaxError


class SchemaLexer:
    """Lexer for tokenizing ``name TYPE[(count)]|...`` column lines."""

    # Token list
    tokens = [
        "WORD",
        "INTEGER",
        "PIPE",
        "LPAREN",
        "RPAREN",
    ]

    # Repeat counts are lexed in their own state so no whitespace is allowed
    # between the parentheses
    states = (("count", "exclusive"),)

    t_PIPE = r"\|"

    # Ignored characters (INITIAL state)
    t_ignore = " \t\r\n\f\v"

    # Anything else outside a repeat count, such as "_" or digits, is skipped
    t_ignore_OTHER = r"[^A-Za-z|(\s]"

    def __init__(self) -> None:
        self.lexer: lex.LexToken = None  # type: ignore

    def t_WORD(self, t: lex.LexToken) -> lex.LexToken:
        r"[A-Za-z]+"
        return t

    def t_LPAREN(self, t: lex.LexToken) -> lex.LexToken:
        r"\("
        t.lexer.begin("count")
        return t

    def t_error(self, t: lex.LexToken) -> None:
        raise SchemaSyntaxError(
            f"Unexpected character '{t.value[0]}' at position {t.lexpos}"
        )

    # --- Exclusive count state tokens ---

    t_count_ignore = ""

    def t_count_INTEGER(self, t: lex.LexToken) -> lex.LexToken:
        r"[0-9]+"
        t.value = int(t.value)
        return t

    def t_count_RPAREN(self, t: lex.LexToken) -> lex.LexToken:
        r"\)"
        t.lexer.begin("INITIAL")
        return t

    def t_count_error(self, t: lex.LexToken) -> None:
        t.lexer.begin("INITIAL")
        raise SchemaSyntaxError(
            f"Unexpected character {t.value[0]!r} in repeat count at position {t.lexpos}"
        )

    # --- Lexer methods ---

    def build(self, **kwargs) -> None:  # type: ignore
        """Build the lexer."""
        self.lexer = lex.lex(module=self, **kwargs)

    def input(self, data: str) -> None:
        """Set the input string to tokenize."""
        self.lexer.begin("INITIAL")
        self.lexer.input(data)

    def token(self) -> lex.LexToken | None:
        """Return the next token."""
        return self.lexer.token()

    def skip_count(self) -> None:
        """Leave the repeat count state without reading the count."""
        self.lexer.begin("INITIAL")

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
