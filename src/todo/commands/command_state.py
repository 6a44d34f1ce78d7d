"""Auxiliary input gathered for a command before it runs."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from todo.errors import CommandStateError


@dataclass(frozen=True, slots=True)
class CommandState:
    """Optional extra fields some commands need beyond their keyword.

    Build instances with ``empty()``, ``add()`` or ``remove()``; the
    factories reject values the matching command could not use.
    """

    name: str | None = None
    description: str | None = None
    index: int | None = None

    @classmethod
    def empty(cls) -> "CommandState":
        return cls()

    @classmethod
    def add(cls, name: str, description: str) -> "CommandState":
        """Input for ``add``: the new entry's name and description."""
        for field_name, value in (("name", name), ("description", description)):
            if not isinstance(value, str):
                raise CommandStateError(
                    f"add requires a string {field_name}, got {type(value).__name__}"
                )
        return cls(name=name, description=description)

    @classmethod
    def remove(cls, index: int) -> "CommandState":
        """Input for ``remove``: the list position to delete."""
        if isinstance(index, bool) or not isinstance(index, int) or index < 0:
            raise CommandStateError(f"remove requires a non-negative integer index, got {index!r}")
        return cls(index=index)

    def require(self, command_key: str, *fields: str) -> tuple[Any, ...]:
        """Return the values of ``fields``, in order.

        Raises
        ------
        CommandStateError
            Naming every requested field that is missing.
        """
        missing = [f for f in fields if getattr(self, f) is None]
        if missing:
            raise CommandStateError(f"{command_key} requires {', '.join(missing)}")
        return tuple(getattr(self, f) for f in fields)
