"""RON lexer: converts raw source text into a flat list of tokens.

The lexer is a single-pass character scanner that produces a
``list[Token]`` from a RON source string.  It tracks line and column
numbers for every token so the parser can produce precise error
messages.

Comment styles supported:
    - ``//`` single-line comments (run to end of line)
    - ``/* ... */`` block comments (may span multiple lines)

String literals are double-quoted and support the backslash escapes
``\\n``, ``\\t``, ``\\r``, ``\\0``, ``\\\\``, ``\\"``, ``\\'``,
``\\xHH`` and ``\\u{HHHH}``.  Raw strings (``r"..."``, ``r#"..."#``)
are taken verbatim.  Unlike Rust, a plain string may span lines.

Numbers keep their source text (sign, radix prefix and ``_``
separators included); conversion happens in the parser.
"""
from __future__ import annotations

import re
from typing import Final

from todo.ron.errors import LexError
from todo.ron.tokens import KEYWORDS, PUNCTUATION, Token, TokenType

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_IDENT_START: Final[re.Pattern[str]] = re.compile(r"[A-Za-z_]")
_IDENT_CONT: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9_]")
_DIGIT: Final[re.Pattern[str]] = re.compile(r"[0-9]")
_RADIX_DIGIT: Final[re.Pattern[str]] = re.compile(r"[0-9A-Fa-f_]")

_ESCAPE_MAP: Final[dict[str, str]] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "\\": "\\",
    '"': '"',
    "'": "'",
    "0": "\0",
}


class Lexer:
    """Single-pass RON lexer.

    Parameters
    ----------
    source:
        The complete RON source text to tokenize.
    """

    __slots__ = ("_source", "_pos", "_line", "_col", "_tokens", "_token_line", "_token_col")

    def __init__(self, source: str) -> None:
        self._source: str = source
        self._pos: int = 0
        self._line: int = 1
        self._col: int = 1
        self._tokens: list[Token] = []
        self._token_line: int = 1
        self._token_col: int = 1

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def tokenize(self) -> list[Token]:
        """Scan the entire source and return the complete token list.

        The list always ends with an ``EOF`` token.

        Returns
        -------
        list[Token]
            Ordered list of tokens (COMMENT tokens are included).

        Raises
        ------
        LexError
            On any character that cannot begin a valid token, or on an
            unterminated string, char or block comment.
        """
        while self._pos < len(self._source):
            self._scan_one()
        self._token_line = self._line
        self._token_col = self._col
        self._emit(TokenType.EOF, "", self._pos)
        return self._tokens

    # ------------------------------------------------------------------
    # Internal scanner
    # ------------------------------------------------------------------

    def _current(self) -> str:
        """Return the character at the current position without advancing."""
        return self._source[self._pos] if self._pos < len(self._source) else ""

    def _peek(self, offset: int = 1) -> str:
        """Return the character at ``pos + offset`` without advancing."""
        idx = self._pos + offset
        return self._source[idx] if idx < len(self._source) else ""

    def _advance(self) -> str:
        """Consume and return the current character, updating line/col."""
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch

    def _emit(self, token_type: TokenType, value: str, start_offset: int) -> None:
        """Append a token using the position recorded when scanning began."""
        self._tokens.append(
            Token(
                type=token_type,
                value=value,
                line=self._token_line,
                col=self._token_col,
                offset=start_offset,
            )
        )

    def _error(self, message: str, start: int) -> LexError:
        return LexError(message, self._token_line, self._token_col, start)

    def _scan_one(self) -> None:
        """Scan exactly one token (or skip whitespace)."""
        self._token_line = self._line
        self._token_col = self._col
        start = self._pos
        ch = self._current()

        if ch.isspace():
            self._advance()
            return

        if ch == "/" and self._peek() == "/":
            self._scan_line_comment(start)
            return
        if ch == "/" and self._peek() == "*":
            self._scan_block_comment(start)
            return

        if ch == '"':
            self._scan_string(start)
            return
        if ch == "r" and self._peek() in ('"', "#"):
            self._scan_raw_string(start)
            return
        if ch == "'":
            self._scan_char(start)
            return

        if _DIGIT.match(ch) or (ch in ("-", "+") and _DIGIT.match(self._peek())):
            self._scan_number(start)
            return

        if _IDENT_START.match(ch):
            self._scan_ident_or_keyword(start)
            return

        if ch in PUNCTUATION:
            self._advance()
            self._emit(PUNCTUATION[ch], ch, start)
            return

        raise self._error(f"Unexpected character {ch!r}", start)

    # ------------------------------------------------------------------
    # Token-specific scanners
    # ------------------------------------------------------------------

    def _scan_line_comment(self, start: int) -> None:
        """Consume a ``//`` comment through the end of the line."""
        while self._pos < len(self._source) and self._current() != "\n":
            self._advance()
        self._emit(TokenType.COMMENT, self._source[start : self._pos], start)

    def _scan_block_comment(self, start: int) -> None:
        """Consume a ``/* ... */`` block comment."""
        self._advance()  # /
        self._advance()  # *
        while self._pos < len(self._source):
            if self._current() == "*" and self._peek() == "/":
                self._advance()
                self._advance()
                self._emit(TokenType.COMMENT, self._source[start : self._pos], start)
                return
            self._advance()
        raise self._error("Unterminated block comment", start)

    def _scan_escape(self, start: int) -> str:
        """Decode one escape sequence; the backslash is already consumed."""
        if self._pos >= len(self._source):
            raise self._error("Unterminated escape sequence", start)
        esc = self._advance()
        if esc in _ESCAPE_MAP:
            return _ESCAPE_MAP[esc]
        if esc == "x":
            digits = self._source[self._pos : self._pos + 2]
            if len(digits) != 2 or not all(c in "0123456789abcdefABCDEF" for c in digits):
                raise self._error("Invalid \\x escape", start)
            self._advance()
            self._advance()
            return chr(int(digits, 16))
        if esc == "u":
            if self._current() != "{":
                raise self._error("Expected '{' after \\u", start)
            self._advance()
            buf: list[str] = []
            while self._pos < len(self._source) and self._current() != "}":
                buf.append(self._advance())
            if self._current() != "}":
                raise self._error("Unterminated \\u{...} escape", start)
            self._advance()
            try:
                return chr(int("".join(buf).replace("_", ""), 16))
            except ValueError:
                raise self._error(f"Invalid unicode escape \\u{{{''.join(buf)}}}", start) from None
        raise self._error(f"Unknown escape sequence \\{esc}", start)

    def _scan_string(self, start: int) -> None:
        """Consume a double-quoted string literal with escape support."""
        self._advance()  # opening "
        buf: list[str] = []
        while self._pos < len(self._source):
            ch = self._current()
            if ch == '"':
                self._advance()
                self._emit(TokenType.STRING, "".join(buf), start)
                return
            if ch == "\\":
                self._advance()
                buf.append(self._scan_escape(start))
            else:
                buf.append(self._advance())
        raise self._error("Unterminated string literal (EOF)", start)

    def _scan_raw_string(self, start: int) -> None:
        """Consume ``r"..."`` or ``r#"..."#`` verbatim."""
        self._advance()  # r
        hashes = 0
        while self._current() == "#":
            self._advance()
            hashes += 1
        if self._current() != '"':
            raise self._error("Expected '\"' to open raw string", start)
        self._advance()
        terminator = '"' + "#" * hashes
        end = self._source.find(terminator, self._pos)
        if end < 0:
            raise self._error("Unterminated raw string literal (EOF)", start)
        value = self._source[self._pos : end]
        while self._pos < end + len(terminator):
            self._advance()
        self._emit(TokenType.STRING, value, start)

    def _scan_char(self, start: int) -> None:
        """Consume a single-quoted char literal."""
        self._advance()  # opening '
        if self._pos >= len(self._source):
            raise self._error("Unterminated char literal (EOF)", start)
        if self._current() == "\\":
            self._advance()
            value = self._scan_escape(start)
        else:
            value = self._advance()
        if self._current() != "'":
            raise self._error("Char literal must contain exactly one character", start)
        self._advance()
        self._emit(TokenType.CHAR, value, start)

    def _scan_number(self, start: int) -> None:
        """Consume an integer or float literal, keeping its source text."""
        buf: list[str] = []
        if self._current() in ("-", "+"):
            buf.append(self._advance())

        if self._current() == "0" and self._peek() in ("x", "o", "b"):
            buf.append(self._advance())
            buf.append(self._advance())
            while self._pos < len(self._source) and _RADIX_DIGIT.match(self._current()):
                buf.append(self._advance())
            self._emit(TokenType.INTEGER, "".join(buf), start)
            return

        is_float = False
        while self._pos < len(self._source) and (_DIGIT.match(self._current()) or self._current() == "_"):
            buf.append(self._advance())
        if self._current() == "." and _DIGIT.match(self._peek()):
            is_float = True
            buf.append(self._advance())
            while self._pos < len(self._source) and (_DIGIT.match(self._current()) or self._current() == "_"):
                buf.append(self._advance())
        if self._current() in ("e", "E"):
            sign = self._peek() if self._peek() in ("-", "+") else ""
            if _DIGIT.match(self._peek(1 + len(sign))):
                is_float = True
                buf.append(self._advance())
                if sign:
                    buf.append(self._advance())
                while self._pos < len(self._source) and _DIGIT.match(self._current()):
                    buf.append(self._advance())
        self._emit(TokenType.FLOAT if is_float else TokenType.INTEGER, "".join(buf), start)

    def _scan_ident_or_keyword(self, start: int) -> None:
        """Consume an identifier, then classify it as keyword or IDENT."""
        buf: list[str] = []
        while self._pos < len(self._source) and _IDENT_CONT.match(self._current()):
            buf.append(self._advance())
        word = "".join(buf)
        self._emit(KEYWORDS.get(word, TokenType.IDENT), word, start)


# ---------------------------------------------------------------------------
# Module-level convenience function
# ---------------------------------------------------------------------------


def tokenize(source: str) -> list[Token]:
    """Tokenize a RON source string and return the complete token list.

    Parameters
    ----------
    source:
        RON source text.

    Returns
    -------
    list[Token]
        All tokens including COMMENT tokens, terminated by EOF.

    Raises
    ------
    LexError
        If the source contains invalid characters or unterminated literals.

    Example
    -------
    ::

        from todo.ron.lexer import tokenize
        tokens = tokenize('(name: "groceries", done: false)')
    """
    return Lexer(source).tokenize()
