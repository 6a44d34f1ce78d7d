"""Interpreter commands.

Exports the ``Command`` enum, the ``parse_command`` function, the
``CommandState`` carrier and the ``CommandContext`` handlers run in.
"""
from __future__ import annotations

from todo.commands.command import Command, parse_command
from todo.commands.command_state import CommandState
from todo.commands.context import CommandContext

__all__ = [
    "Command",
    "parse_command",
    "CommandState",
    "CommandContext",
]
