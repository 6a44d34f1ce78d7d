"""Command implementations.

One function per ``Command`` member, all with the same signature::

    handler(context, state, command_state) -> None

``HANDLERS`` maps each member to its function; ``Command.execute``
dispatches through it.  Handlers print through ``context`` and mutate
only ``state``.
"""
from __future__ import annotations

import logging
from bisect import bisect_left
from collections.abc import Callable
from typing import Final

from todo.commands.command import Command
from todo.commands.command_state import CommandState
from todo.commands.context import CommandContext
from todo.errors import StateFileError, StateFormatError, StateReadError, StateWriteError
from todo.state.models import Entry, State

logger = logging.getLogger(__name__)

Handler = Callable[[CommandContext, State, CommandState], None]

MISSING_RANK: Final[int] = -1


# ---------------------------------------------------------------------------
# help
# ---------------------------------------------------------------------------


def help_command(context: CommandContext, state: State, command_state: CommandState) -> None:
    for command in Command:
        context.say(f"{command.title} ({command.key}) : {command.description}")


# ---------------------------------------------------------------------------
# list
# ---------------------------------------------------------------------------


def sorted_rank(ranked: list[Entry], entry: Entry) -> int | None:
    """Binary-search ``entry`` in the already sorted ``ranked`` list.

    Returns the index of the first equal entry, or ``None`` if absent.
    """
    index = bisect_left(ranked, entry)
    if index < len(ranked) and ranked[index] == entry:
        return index
    return None


def list_command(context: CommandContext, state: State, command_state: CommandState) -> None:
    """Print every entry in list order, labelled with its sorted rank.

    The label is the entry's position under (name, description) order,
    not its list position, so it is not the index ``remove`` expects
    unless the list happens to be sorted.
    """
    if state.is_empty:
        context.say("Nothing to list")
        return

    ranked = sorted(state.entries)
    for entry in state.entries:
        rank = sorted_rank(ranked, entry)
        if rank is None:
            context.error("Failed to get index of entry!")
            rank = MISSING_RANK
        context.say(f"{rank} - {entry.name}: {entry.description}")


# ---------------------------------------------------------------------------
# add / remove / clear
# ---------------------------------------------------------------------------


def add_command(context: CommandContext, state: State, command_state: CommandState) -> None:
    name, description = command_state.require(Command.ADD.key, "name", "description")
    state.entries.append(Entry(name=name, description=description))
    logger.debug("Added entry %r at position %d", name, len(state.entries) - 1)


def remove_command(context: CommandContext, state: State, command_state: CommandState) -> None:
    (index,) = command_state.require(Command.REMOVE.key, "index")
    if index >= len(state.entries):
        context.error(f"No todo entry found at index {index}")
        return
    removed = state.entries.pop(index)
    context.say(f"Removed entry {removed.name}")


def clear_command(context: CommandContext, state: State, command_state: CommandState) -> None:
    if state.is_empty:
        context.say("Nothing to clear")
        return
    count = len(state.entries)
    state.entries.clear()
    context.say(f"{count} {'entry' if count == 1 else 'entries'} cleared")


# ---------------------------------------------------------------------------
# save / load
# ---------------------------------------------------------------------------


def save_command(context: CommandContext, state: State, command_state: CommandState) -> None:
    if state.is_empty:
        context.say("Nothing to save")
        return

    store = context.store
    try:
        store.write(state)
    except StateFormatError as exc:
        logger.debug("Encoding failed: %s", exc)
        context.error("Failed to save state to a file!")
        return
    except StateWriteError as exc:
        logger.debug("Write failed: %s", exc)
        context.error("Failed to write state data to file!")

    if store.exists():
        context.say(f"Saved state data to {store.path}")


def load_command(context: CommandContext, state: State, command_state: CommandState) -> None:
    """Replace the in-memory entries with the saved ones.

    A read or parse failure does not stop the routine straight away: an
    empty state stands in for the file, the user may still be asked to
    confirm, and only then is the load refused.
    """
    store = context.store
    if not store.exists():
        context.error("No state data file found at that location")
        return

    should_abort = False
    try:
        saved = store.read()
    except StateReadError as exc:
        logger.debug("Load read failed: %s", exc)
        context.error("Failed to read state data from file. Are you sure it exists?")
        should_abort = True
        saved = State()
    except StateFormatError as exc:
        logger.debug("Load parse failed: %s", exc)
        context.error("Failed to parse state data from file!")
        should_abort = True
        saved = State()

    if saved.manifest_version < state.manifest_version:
        context.warn("This save file has an old manifest version, and may not load correctly")
    elif saved.manifest_version > state.manifest_version:
        context.warn("This save file has been created with a newer version, and may not load correctly")

    if saved.entries != state.entries and not state.is_empty:
        if not context.confirm("Override current entries? (y/n)"):
            return

    if should_abort:
        context.error("Due to one or more previous errors, no changes will be made")
        return

    state.entries = list(saved.entries)
    context.say(f"Loaded {len(state.entries)} entries from state file")


# ---------------------------------------------------------------------------
# exit
# ---------------------------------------------------------------------------


def exit_command(context: CommandContext, state: State, command_state: CommandState) -> None:
    """Set the exit flag, asking first if memory differs from the save file.

    An unreadable save file is compared as if it were empty, without
    telling the user.
    """
    store = context.store
    if store.exists():
        try:
            saved = store.read()
        except StateFileError as exc:
            logger.debug("Ignoring unreadable save file on exit: %s", exc)
            saved = State()
        if state.entries != saved.entries and not context.confirm(
            "A save file exists, but you have unsaved data. Are you sure you want to quit? (y/n)"
        ):
            return
    state.exit = True


HANDLERS: Final[dict[Command, Handler]] = {
    Command.HELP: help_command,
    Command.LIST: list_command,
    Command.ADD: add_command,
    Command.REMOVE: remove_command,
    Command.CLEAR: clear_command,
    Command.SAVE: save_command,
    Command.LOAD: load_command,
    Command.EXIT: exit_command,
}
