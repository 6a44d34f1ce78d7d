"""Save-file storage module.

Exports ``StateStore`` and the fixed save file name.
"""
from __future__ import annotations

from todo.storage.store import STATE_FILE_NAME, StateStore

__all__ = ["StateStore", "STATE_FILE_NAME"]
