"""Whole-file access to the ``state.ron`` save file.

``StateStore`` is the only code that touches the file system.  It reads
and writes complete files, never streams, and takes no locks.  Every
failure is raised as a ``StateFileError`` subclass so callers can pick
their own wording for the user.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

from todo.errors import StateFormatError, StateReadError, StateWriteError
from todo.state.models import State
from todo.state.serializer import StateSerializer

logger = logging.getLogger(__name__)

STATE_FILE_NAME: Final[str] = "state.ron"


class StateStore:
    """Reads and writes ``State`` snapshots at a fixed path.

    Parameters
    ----------
    path:
        Location of the save file.  Defaults to ``state.ron`` relative
        to the current working directory, resolved at each access.
    serializer:
        Serializer used for the RON encoding.
    """

    def __init__(
        self,
        path: Path | str = STATE_FILE_NAME,
        serializer: StateSerializer | None = None,
    ) -> None:
        self._path = Path(path)
        self._serializer = serializer or StateSerializer()

    @property
    def path(self) -> Path:
        """Return the save file path."""
        return self._path

    def exists(self) -> bool:
        """Return True if a save file is present."""
        return self._path.exists()

    def read(self) -> State:
        """Read and decode the save file.

        Raises
        ------
        StateReadError
            If the file cannot be read.
        StateFormatError
            If the file does not hold a valid RON state.
        """
        logger.debug("Reading state from %s", self._path)
        try:
            text = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StateReadError(f"Cannot read state file: {exc}", self._path) from exc
        try:
            state = self._serializer.from_ron(text)
        except StateFormatError as exc:
            raise StateFormatError(exc.file_message, self._path) from exc
        logger.debug(
            "Read %d entries (manifest version %d) from %s",
            len(state.entries),
            state.manifest_version,
            self._path,
        )
        return state

    def write(self, state: State) -> None:
        """Encode ``state`` and replace the save file with it.

        Raises
        ------
        StateFormatError
            If the state cannot be encoded (including text that is not
            valid UTF-8, such as lone surrogates); nothing is written.
        StateWriteError
            If the file cannot be written.
        """
        text = self._serializer.to_ron(state)
        # Encode before opening the file so a failure cannot truncate it.
        try:
            data = text.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise StateFormatError(f"Cannot encode state as UTF-8: {exc}", self._path) from exc
        try:
            self._path.write_bytes(data)
        except OSError as exc:
            raise StateWriteError(f"Cannot write state file: {exc}", self._path) from exc
        logger.debug("Wrote %d entries to %s", len(state.entries), self._path)
