"""Token definitions for Rusty Object Notation (RON).

Defines the token vocabulary produced by the RON lexer.  Every
punctuation mark and literal kind is a member of the ``TokenType``
enum, and every scanned token is a ``Token`` dataclass that carries its
type, decoded value, and source position.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Exhaustive enumeration of all RON token types."""

    # -----------------------------------------------------------------
    # Punctuation
    # -----------------------------------------------------------------
    LPAREN = auto()
    RPAREN = auto()
    LBRACKET = auto()
    RBRACKET = auto()
    LBRACE = auto()
    RBRACE = auto()
    COLON = auto()
    COMMA = auto()

    # -----------------------------------------------------------------
    # Literals
    # -----------------------------------------------------------------
    STRING = auto()
    CHAR = auto()
    INTEGER = auto()
    FLOAT = auto()
    BOOL = auto()

    # -----------------------------------------------------------------
    # Identifiers (struct names, field names, Some/None)
    # -----------------------------------------------------------------
    IDENT = auto()

    # -----------------------------------------------------------------
    # Structure
    # -----------------------------------------------------------------
    COMMENT = auto()
    EOF = auto()


# Mapping from literal keyword text to its TokenType.
KEYWORDS: dict[str, TokenType] = {
    "true": TokenType.BOOL,
    "false": TokenType.BOOL,
}

PUNCTUATION: dict[str, TokenType] = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    ":": TokenType.COLON,
    ",": TokenType.COMMA,
}


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanned token with source-location metadata.

    Parameters
    ----------
    type:
        The ``TokenType`` variant for this token.
    value:
        The token text.  For STRING and CHAR tokens this is the decoded
        content with escapes resolved; for everything else it is the raw
        source text.
    line:
        1-based line number in the source.
    col:
        1-based column number of the first character of the token.
    offset:
        0-based offset from the start of the source string.
    """

    type: TokenType
    value: str
    line: int
    col: int
    offset: int

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.col})"

    @property
    def is_literal(self) -> bool:
        """Return True if this token carries a scalar value."""
        return self.type in (
            TokenType.STRING,
            TokenType.CHAR,
            TokenType.INTEGER,
            TokenType.FLOAT,
            TokenType.BOOL,
        )
