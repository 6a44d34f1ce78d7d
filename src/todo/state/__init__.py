"""Todo state module.

Exports the in-memory model types and the serializer for converting
state to and from RON, JSON and YAML.
"""
from __future__ import annotations

from todo.state.models import STATE_MANIFEST_VERSION, Entry, State
from todo.state.serializer import StateSerializer

__all__ = [
    "STATE_MANIFEST_VERSION",
    "Entry",
    "State",
    "StateSerializer",
]
