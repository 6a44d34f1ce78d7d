"""In-memory model of a todo list.

``Entry`` is a frozen, ordered dataclass: entries compare by ``name``
first and ``description`` second, which is the order the ``list``
command ranks them by.  ``State`` is the single mutable object the
interpreter loop owns.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

STATE_MANIFEST_VERSION: Final[int] = 1


@dataclass(frozen=True, order=True, slots=True)
class Entry:
    """A named todo item with a free-text description."""

    name: str
    description: str


@dataclass(slots=True)
class State:
    """The complete program state, as kept in memory and written to disk.

    Parameters
    ----------
    entries:
        Todo entries in insertion order.
    exit:
        Set to ``True`` to stop the interpreter loop.
    manifest_version:
        Save-format tag; ``STATE_MANIFEST_VERSION`` for every state this
        program creates.
    """

    entries: list[Entry] = field(default_factory=list)
    exit: bool = False
    manifest_version: int = STATE_MANIFEST_VERSION

    @property
    def is_empty(self) -> bool:
        """Return True if there are no entries."""
        return not self.entries
