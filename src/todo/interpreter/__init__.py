"""Interpreter module.

Exports the ``Interpreter`` REPL and the ``parse_index`` helper.
"""
from __future__ import annotations

from todo.interpreter.interpreter import Interpreter, parse_index

__all__ = ["Interpreter", "parse_index"]
