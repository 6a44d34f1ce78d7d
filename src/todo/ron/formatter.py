"""RON pretty formatter: Python value → human-readable RON text.

The ``RonFormatter`` renders plain Python values with:

- 4-space indentation
- one struct field, list item or map entry per line
- a trailing comma after every multi-line item
- tuples kept on a single line

This is the layout ``state.ron`` files are written in, so a saved todo
list stays readable and diff-friendly.

Usage
-----
::

    from todo.ron.formatter import dumps

    text = dumps({"entries": [], "exit": False, "manifest_version": 1})
"""
from __future__ import annotations

import math
import re
from typing import Any

from todo.ron.errors import EncodeError

_INDENT = "    "  # 4 spaces per level
_FIELD_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*\Z")
_KEYWORD_NAMES = frozenset({"true", "false", "Some", "None"})

_STRING_ESCAPES: dict[str, str] = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\0": "\\0",
}


class RonFormatter:
    """Produces pretty RON text from plain Python values.

    ``dict`` values whose keys are all identifiers become anonymous
    structs; other dicts become maps.  ``list`` becomes a sequence,
    ``tuple`` a tuple, ``None`` the ``None`` option.
    """

    def format(self, value: Any) -> str:
        """Render ``value`` as RON text, always ending with a newline.

        Raises
        ------
        EncodeError
            If ``value`` (or anything nested in it) has no RON form.
        """
        return "\n".join(self._format_value(value, 0)) + "\n"

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _format_value(self, value: Any, depth: int) -> list[str]:
        """Return the lines for ``value``; the first line is not indented."""
        if isinstance(value, dict):
            if value and all(self._is_field_name(k) for k in value):
                return self._format_block("(", ")", [(f"{k}: ", v) for k, v in value.items()], depth)
            if not value:
                return ["{}"]
            return self._format_block(
                "{", "}", [(f"{self._format_scalar(k)}: ", v) for k, v in value.items()], depth
            )
        if isinstance(value, list):
            if not value:
                return ["[]"]
            return self._format_block("[", "]", [("", v) for v in value], depth)
        if isinstance(value, tuple):
            return [self._format_tuple(value)]
        return [self._format_scalar(value)]

    def _format_block(
        self,
        opening: str,
        closing: str,
        items: list[tuple[str, Any]],
        depth: int,
    ) -> list[str]:
        inner = _INDENT * (depth + 1)
        lines = [opening]
        for prefix, item in items:
            rendered = self._format_value(item, depth + 1)
            lines.append(f"{inner}{prefix}{rendered[0]}")
            lines.extend(rendered[1:])
            lines[-1] += ","
        lines.append(f"{_INDENT * depth}{closing}")
        return lines

    def _format_tuple(self, value: tuple[Any, ...]) -> str:
        if not value:
            return "()"
        parts = []
        for item in value:
            if isinstance(item, (dict, list)):
                raise EncodeError("Tuples may only hold scalar or tuple values")
            parts.append(self._format_tuple(item) if isinstance(item, tuple) else self._format_scalar(item))
        trailing = "," if len(parts) == 1 else ""
        return f"({', '.join(parts)}{trailing})"

    # ------------------------------------------------------------------
    # Scalars
    # ------------------------------------------------------------------

    def _format_scalar(self, value: Any) -> str:
        if value is None:
            return "None"
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, int):
            return str(value)
        if isinstance(value, float):
            if not math.isfinite(value):
                raise EncodeError(f"Cannot encode non-finite float {value!r}")
            return repr(value)
        if isinstance(value, str):
            return self._format_string(value)
        raise EncodeError(f"Cannot encode value of type {type(value).__name__}")

    @staticmethod
    def _is_field_name(key: Any) -> bool:
        return isinstance(key, str) and bool(_FIELD_NAME.match(key)) and key not in _KEYWORD_NAMES

    @staticmethod
    def _format_string(value: str) -> str:
        """Render a Python string as a RON double-quoted string literal."""
        out: list[str] = []
        for ch in value:
            if ch in _STRING_ESCAPES:
                out.append(_STRING_ESCAPES[ch])
            elif ord(ch) < 0x20 or ord(ch) == 0x7F:
                out.append(f"\\u{{{ord(ch):x}}}")
            else:
                out.append(ch)
        return '"' + "".join(out) + '"'


def dumps(value: Any) -> str:
    """Convenience function: render ``value`` as pretty RON text.

    Parameters
    ----------
    value:
        A dict, list, tuple, str, int, float, bool or ``None`` tree.

    Returns
    -------
    str
        RON text ending with a newline.
    """
    return RonFormatter().format(value)
