"""Exception hierarchy for todo-tracker.

Every error the interpreter knows how to report derives from
``TodoError``.  The RON codec keeps its own ``RonError`` hierarchy;
the state serializer wraps those into ``StateFormatError``.
"""
from __future__ import annotations

from pathlib import Path


class TodoError(Exception):
    """Base class for all todo-tracker errors."""


class StateFileError(TodoError):
    """Raised when the save file cannot be read, written or decoded.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    path:
        The save file involved, if the error came from a file.
    """

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        super().__init__(f"{path}: {message}" if path is not None else message)
        self.path = Path(path) if path is not None else None
        self.file_message = message


class StateReadError(StateFileError):
    """The save file exists but could not be read."""


class StateWriteError(StateFileError):
    """The save file could not be written."""


class StateFormatError(StateFileError):
    """The save file (or a state dict) does not hold a valid state."""


class CommandStateError(TodoError):
    """Raised when a command is given auxiliary input it cannot use.

    Covers both construction with invalid values and execution with a
    required field missing.
    """
