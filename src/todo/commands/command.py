"""The closed set of interpreter commands.

``Command`` holds exactly the eight real commands, in the order the
``help`` command lists them.  Text that matches none of them parses to
``None``; there is no "unknown" member.
"""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from todo.commands.command_state import CommandState
    from todo.commands.context import CommandContext
    from todo.state.models import State


class Command(Enum):
    """A todo-tracker command with its keyword and help text."""

    HELP = ("help", "Displays a help message")
    LIST = ("list", "Lists all todo entries")
    ADD = ("add", "Adds a new todo entry")
    REMOVE = ("remove", "Removes a todo entry by its index")
    CLEAR = ("clear", "Clears all todo entries")
    SAVE = ("save", "Saves the current todo entries to a file")
    LOAD = ("load", "Loads the todo entries from a file")
    EXIT = ("exit", "Exits the program")

    def __init__(self, key: str, description: str) -> None:
        self.key = key
        self.description = description

    @property
    def title(self) -> str:
        """Display name, e.g. ``Remove``."""
        return self.key.title()

    def __str__(self) -> str:
        return self.title

    def execute(self, context: "CommandContext", state: "State", command_state: "CommandState") -> None:
        """Apply this command to ``state``.

        Parameters
        ----------
        context:
            Console, line reader and save-file store to use.
        state:
            The interpreter's state; mutated in place.
        command_state:
            Extra input collected for this command (see ``CommandState``).

        Raises
        ------
        CommandStateError
            If ``command_state`` lacks a field this command requires.
        """
        from todo.commands.handlers import HANDLERS

        HANDLERS[self](context, state, command_state)


_BY_TEXT: dict[str, Command] = {
    form: command
    for command in Command
    for form in (command.key, command.key.title(), command.key.upper())
}


def parse_command(text: str) -> Command | None:
    """Map a line of input to a ``Command``.

    Only the lowercase, Titlecase and UPPERCASE spellings of a keyword
    match: ``add``, ``Add`` and ``ADD`` give ``Command.ADD``; ``aDD``
    gives ``None``.

    Parameters
    ----------
    text:
        The input line with its trailing newline removed.

    Returns
    -------
    Command | None
        The matching command, or ``None`` if nothing matches.
    """
    return _BY_TEXT.get(text)
