"""RON recursive-descent parser.

Converts a flat list of ``Token`` objects into plain Python values.
COMMENT tokens are skipped transparently, so the grammar below is
stated in terms of meaningful tokens only::

    value   := struct | tuple | list | map | option | literal
    struct  := IDENT? '(' field (',' field)* ','? ')'
    field   := IDENT ':' value
    tuple   := IDENT? '(' value (',' value)* ','? ')'
    unit    := '(' ')'
    list    := '[' (value (',' value)* ','?)? ']'
    map     := '{' (value ':' value (',' value ':' value)* ','?)? '}'
    option  := 'Some' '(' value ')' | 'None'
    literal := STRING | CHAR | INTEGER | FLOAT | BOOL

Value mapping
-------------
struct → ``dict[str, Any]`` (the struct name, if any, is dropped),
tuple → ``tuple``, unit → ``None``, list → ``list``, map → ``dict``,
``Some(v)`` → ``v``, ``None`` → ``None``, STRING/CHAR → ``str``,
INTEGER → ``int``, FLOAT → ``float``, BOOL → ``bool``.

Unlike a source-code parser, a data file has nothing to gain from
error recovery: the first problem raises ``ParseError``.
"""
from __future__ import annotations

from typing import Any

from todo.ron.errors import ParseError
from todo.ron.lexer import tokenize
from todo.ron.tokens import Token, TokenType

_RADIX_PREFIXES: dict[str, int] = {"0x": 16, "0o": 8, "0b": 2}


class Parser:
    """Recursive descent parser that produces a Python value from tokens.

    Parameters
    ----------
    tokens:
        The flat token list produced by the lexer.  Must include the
        terminal ``EOF`` token.
    """

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens: list[Token] = [t for t in tokens if t.type is not TokenType.COMMENT]
        self._pos: int = 0

    # ------------------------------------------------------------------
    # Navigation helpers
    # ------------------------------------------------------------------

    def _current(self) -> Token:
        """Return the current token without consuming it."""
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return self._tokens[-1]  # EOF

    def _peek(self, offset: int = 1) -> Token:
        """Return the token ``offset`` positions ahead without consuming."""
        idx = self._pos + offset
        if idx < len(self._tokens):
            return self._tokens[idx]
        return self._tokens[-1]

    def _advance(self) -> Token:
        """Consume and return the current token."""
        tok = self._current()
        if tok.type is not TokenType.EOF:
            self._pos += 1
        return tok

    def _check(self, *types: TokenType) -> bool:
        """Return True if the current token matches any of the given types."""
        return self._current().type in types

    def _match(self, *types: TokenType) -> Token | None:
        """Consume and return the current token if it matches; else None."""
        if self._check(*types):
            return self._advance()
        return None

    def _expect(self, token_type: TokenType, message: str | None = None) -> Token:
        """Consume the current token if it matches, else raise ``ParseError``."""
        if self._check(token_type):
            return self._advance()
        raise self._error(message or f"Expected {token_type.name}", (token_type,))

    def _error(self, message: str, expected: tuple[TokenType, ...] = ()) -> ParseError:
        tok = self._current()
        return ParseError(message=message, line=tok.line, col=tok.col, expected=expected, found=tok)

    def _separator(self, closing: TokenType) -> bool:
        """Consume a ``,`` between items; return False once ``closing`` is next."""
        if self._match(TokenType.COMMA):
            return not self._check(closing)
        if self._check(closing):
            return False
        raise self._error(f"Expected ',' or {closing.name}", (TokenType.COMMA, closing))

    # ------------------------------------------------------------------
    # Top-level parse
    # ------------------------------------------------------------------

    def parse(self) -> Any:
        """Parse the token stream and return the single top-level value.

        Raises
        ------
        ParseError
            On the first syntax error, or if tokens remain after the value.
        """
        value = self._parse_value()
        self._expect(TokenType.EOF, "Expected end of input after value")
        return value

    def _parse_value(self) -> Any:
        tok = self._current()
        if tok.type is TokenType.LPAREN:
            return self._parse_parenthesized()
        if tok.type is TokenType.LBRACKET:
            return self._parse_list()
        if tok.type is TokenType.LBRACE:
            return self._parse_map()
        if tok.type is TokenType.IDENT:
            return self._parse_named()
        if tok.is_literal:
            return self._parse_literal()
        raise self._error(
            "Expected a value",
            (TokenType.LPAREN, TokenType.LBRACKET, TokenType.LBRACE, TokenType.STRING),
        )

    # ------------------------------------------------------------------
    # Compound values
    # ------------------------------------------------------------------

    def _parse_named(self) -> Any:
        """Parse ``None``, ``Some(v)`` or a named struct/tuple."""
        name_tok = self._current()
        if name_tok.value == "None":
            self._advance()
            return None
        if self._peek().type is not TokenType.LPAREN:
            raise self._error(f"Unexpected identifier {name_tok.value!r}")
        self._advance()  # consume name
        if name_tok.value == "Some":
            self._advance()  # (
            value = self._parse_value()
            self._match(TokenType.COMMA)
            self._expect(TokenType.RPAREN, "Expected ')' to close Some(...)")
            return value
        return self._parse_parenthesized()

    def _parse_parenthesized(self) -> Any:
        """Parse ``'(' ... ')'`` as a struct, tuple or unit."""
        self._expect(TokenType.LPAREN, "Expected '('")
        if self._match(TokenType.RPAREN):
            return None
        if self._check(TokenType.IDENT) and self._peek().type is TokenType.COLON:
            return self._parse_struct_body()
        return self._parse_tuple_body()

    def _parse_struct_body(self) -> dict[str, Any]:
        fields: dict[str, Any] = {}
        while True:
            name_tok = self._expect(TokenType.IDENT, "Expected field name")
            if name_tok.value in fields:
                raise ParseError(
                    message=f"Duplicate field {name_tok.value!r}",
                    line=name_tok.line,
                    col=name_tok.col,
                    found=name_tok,
                )
            self._expect(TokenType.COLON, f"Expected ':' after field {name_tok.value!r}")
            fields[name_tok.value] = self._parse_value()
            if not self._separator(TokenType.RPAREN):
                break
        self._expect(TokenType.RPAREN, "Expected ')' to close struct")
        return fields

    def _parse_tuple_body(self) -> tuple[Any, ...]:
        items: list[Any] = []
        while True:
            items.append(self._parse_value())
            if not self._separator(TokenType.RPAREN):
                break
        self._expect(TokenType.RPAREN, "Expected ')' to close tuple")
        return tuple(items)

    def _parse_list(self) -> list[Any]:
        self._advance()  # [
        items: list[Any] = []
        while not self._check(TokenType.RBRACKET):
            items.append(self._parse_value())
            if not self._separator(TokenType.RBRACKET):
                break
        self._expect(TokenType.RBRACKET, "Expected ']' to close list")
        return items

    def _parse_map(self) -> dict[Any, Any]:
        self._advance()  # {
        entries: dict[Any, Any] = {}
        while not self._check(TokenType.RBRACE):
            key_tok = self._current()
            key = self._parse_value()
            if isinstance(key, (list, dict)):
                raise ParseError(
                    message="Map keys must be scalar values",
                    line=key_tok.line,
                    col=key_tok.col,
                    found=key_tok,
                )
            self._expect(TokenType.COLON, "Expected ':' after map key")
            entries[key] = self._parse_value()
            if not self._separator(TokenType.RBRACE):
                break
        self._expect(TokenType.RBRACE, "Expected '}' to close map")
        return entries

    # ------------------------------------------------------------------
    # Literals
    # ------------------------------------------------------------------

    def _parse_literal(self) -> str | int | float | bool:
        tok = self._advance()
        if tok.type in (TokenType.STRING, TokenType.CHAR):
            return tok.value
        if tok.type is TokenType.BOOL:
            return tok.value == "true"
        if tok.type is TokenType.FLOAT:
            return float(tok.value.replace("_", ""))
        return self._integer_value(tok)

    @staticmethod
    def _integer_value(tok: Token) -> int:
        """Convert an INTEGER token's source text to ``int``."""
        text = tok.value.replace("_", "")
        sign = -1 if text.startswith("-") else 1
        text = text.lstrip("+-")
        base = _RADIX_PREFIXES.get(text[:2].lower(), 10)
        if base != 10:
            text = text[2:]
        try:
            return sign * int(text, base)
        except ValueError:
            raise ParseError(
                message=f"Invalid integer literal {tok.value!r}",
                line=tok.line,
                col=tok.col,
                found=tok,
            ) from None


# ---------------------------------------------------------------------------
# Module-level convenience function
# ---------------------------------------------------------------------------


def loads(source: str) -> Any:
    """Parse RON source text into a Python value.

    Parameters
    ----------
    source:
        Complete RON source text holding exactly one value.

    Returns
    -------
    Any
        The decoded value (see the module docstring for the mapping).

    Raises
    ------
    LexError
        If the source contains invalid characters.
    ParseError
        If the source is syntactically invalid.
    """
    return Parser(tokenize(source)).parse()
