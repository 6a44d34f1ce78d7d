"""Error types for the RON codec.

All codec errors carry source-location information so that callers can
point the user at the offending part of a save file.
"""
from __future__ import annotations

from dataclasses import dataclass

from todo.ron.tokens import Token, TokenType


class RonError(Exception):
    """Base class for every error raised by ``todo.ron``."""


class LexError(RonError):
    """Raised when the lexer encounters invalid input.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    line:
        1-based line number where the error occurred.
    col:
        1-based column number where the error occurred.
    offset:
        0-based offset in the source where the error occurred.
    """

    def __init__(self, message: str, line: int, col: int, offset: int) -> None:
        super().__init__(f"LexError at {line}:{col}: {message}")
        self.lex_message = message
        self.line = line
        self.col = col
        self.offset = offset


@dataclass(frozen=True)
class ParseError(RonError):
    """A parse error with location and the token that triggered it.

    Parameters
    ----------
    message:
        Human-readable description of the error.
    line:
        1-based line of the offending token.
    col:
        1-based column of the offending token.
    expected:
        What token types were expected at this position.
    found:
        The actual token that was encountered, if available.
    """

    message: str
    line: int
    col: int
    expected: tuple[TokenType, ...] = ()
    found: Token | None = None

    def __str__(self) -> str:
        loc = f"{self.line}:{self.col}"
        if self.found is not None:
            return (
                f"ParseError at {loc}: {self.message} "
                f"(found {self.found.type.name} {self.found.value!r})"
            )
        return f"ParseError at {loc}: {self.message}"

    # dataclass(frozen=True) doesn't call Exception.__init__ automatically
    def __post_init__(self) -> None:
        object.__setattr__(self, "args", (str(self),))


class EncodeError(RonError):
    """Raised when a Python value has no RON representation."""
