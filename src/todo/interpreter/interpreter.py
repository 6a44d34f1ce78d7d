"""The read-eval-print loop.

Each iteration prints ``Enter a command:``, reads one line, maps it to a
``Command``, prompts for whatever extra input the command needs, and
executes it.  The loop ends when a command sets ``state.exit`` or when
the line reader runs out of input.
"""
from __future__ import annotations

import logging

from todo.commands.command import Command, parse_command
from todo.commands.command_state import CommandState
from todo.commands.context import CommandContext
from todo.errors import CommandStateError
from todo.state.models import State

logger = logging.getLogger(__name__)


def parse_index(text: str) -> int | None:
    """Parse a list position typed by the user.

    Returns ``None`` unless ``text`` is a plain non-negative decimal
    integer, optionally prefixed with ``+`` (surrounding whitespace
    allowed).
    """
    text = text.strip()
    if text.startswith("+"):
        text = text[1:]
    if not text.isdecimal() or not text.isascii():
        return None
    return int(text)


class Interpreter:
    """Runs commands against a ``State`` until told to stop.

    Parameters
    ----------
    context:
        Consoles, line reader and save-file store.
    state:
        Starting state; a fresh empty ``State`` if omitted.
    """

    def __init__(self, context: CommandContext | None = None, state: State | None = None) -> None:
        self._context = context or CommandContext()
        self._state = state if state is not None else State()

    @property
    def state(self) -> State:
        return self._state

    def run(self) -> State:
        """Loop until ``exit`` is set, input ends or the user presses Ctrl-C.

        Returns the final state.
        """
        self._context.say("Todo Tracker")
        while not self._state.exit:
            try:
                line = self._context.prompt("Enter a command:")
                self.handle_line(line)
            except (EOFError, KeyboardInterrupt) as exc:
                logger.debug("Input ended (%s), leaving the command loop", type(exc).__name__)
                break
        return self._state

    def handle_line(self, line: str) -> None:
        """Interpret a single command line, prompting for extra input.

        Raises
        ------
        EOFError
            If input ends while a follow-up prompt is waiting.
        """
        command = parse_command(line)
        if command is None:
            logger.debug("No command matches %r", line)
            self._context.error("Unknown command")
            return

        try:
            command_state = self._collect(command)
            if command_state is None:
                return
            logger.debug("Executing %s", command.key)
            command.execute(self._context, self._state, command_state)
        except CommandStateError as exc:
            self._context.error(str(exc))

    def _collect(self, command: Command) -> CommandState | None:
        """Prompt for the fields ``command`` needs.

        Returns ``None`` if the user's answer cannot be used.
        """
        if command is Command.ADD:
            name = self._context.prompt("Name of todo entry:")
            description = self._context.prompt("Description of todo entry:")
            return CommandState.add(name, description)
        if command is Command.REMOVE:
            text = self._context.prompt("Index of entry to remove:")
            index = parse_index(text)
            if index is None:
                self._context.error(f"Invalid index {text!r}: expected a non-negative integer")
                return None
            return CommandState.remove(index)
        return CommandState.empty()
