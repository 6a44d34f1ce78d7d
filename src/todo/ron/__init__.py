"""RON (Rusty Object Notation) codec.

Exports the lexer, the parser, the pretty formatter and their error
types, plus the ``loads`` / ``dumps`` convenience functions.
"""
from __future__ import annotations

from todo.ron.errors import EncodeError, LexError, ParseError, RonError
from todo.ron.formatter import RonFormatter, dumps
from todo.ron.lexer import Lexer, tokenize
from todo.ron.parser import Parser, loads
from todo.ron.tokens import Token, TokenType

__all__ = [
    "Lexer",
    "tokenize",
    "Parser",
    "loads",
    "RonFormatter",
    "dumps",
    "Token",
    "TokenType",
    "RonError",
    "LexError",
    "ParseError",
    "EncodeError",
]
