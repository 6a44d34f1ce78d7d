"""todo-tracker — an interactive todo list saved as RON.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import todo

    state = todo.State()
    todo.run_line(state, "list")          # prints "Nothing to list"

    text = todo.dumps(state)              # pretty RON
    assert todo.loads(text) == state

    todo.__version__
    '0.1.0'
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from todo.state.models import STATE_MANIFEST_VERSION, Entry, State

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from todo.commands.context import CommandContext


def loads(text: str) -> State:
    """Decode a ``State`` from RON text.

    Raises
    ------
    todo.errors.StateFormatError
        If the text is not valid RON or does not describe a state.
    """
    from todo.state.serializer import StateSerializer

    return StateSerializer().from_ron(text)


def dumps(state: State) -> str:
    """Encode a ``State`` as pretty RON text, as written to ``state.ron``."""
    from todo.state.serializer import StateSerializer

    return StateSerializer().to_ron(state)


def run_line(state: State, line: str, context: "CommandContext | None" = None) -> State:
    """Interpret one command line against ``state`` and return it.

    Follow-up prompts (``add``, ``remove``, confirmations) read from
    ``context.read_line``.

    Parameters
    ----------
    state:
        The state to act on; mutated in place.
    line:
        A command keyword such as ``"list"``.
    context:
        I/O collaborators; defaults to the terminal and ``state.ron``.
    """
    from todo.interpreter.interpreter import Interpreter

    Interpreter(context, state).handle_line(line)
    return state


__all__ = [
    "__version__",
    "STATE_MANIFEST_VERSION",
    "Entry",
    "State",
    "loads",
    "dumps",
    "run_line",
]
