"""State serialization and deserialization.

Provides round-trip conversion of ``State`` objects to and from RON
(the on-disk save format), plus JSON and YAML renderings for the
``show`` command.  All formats share a plain dict/list structure::

    {
        "entries": [{"name": ..., "description": ...}, ...],
        "exit": False,
        "manifest_version": 1,
    }

Usage
-----
::

    from todo.state.serializer import StateSerializer

    serializer = StateSerializer()
    text = serializer.to_ron(state)
    assert serializer.from_ron(text) == state
"""
from __future__ import annotations

import json
from typing import Any

import yaml

from todo.errors import StateFormatError
from todo.ron import RonError, dumps, loads
from todo.state.models import Entry, State


class StateSerializer:
    """Converts between ``State`` objects and their serialized forms.

    Unknown fields are ignored on input; missing or mistyped fields
    raise ``StateFormatError``.
    """

    # ------------------------------------------------------------------
    # Serialization (State → dict)
    # ------------------------------------------------------------------

    def to_dict(self, state: State) -> dict[str, Any]:
        """Serialize a ``State`` to a JSON-compatible dict."""
        return {
            "entries": [self._entry_to_dict(e) for e in state.entries],
            "exit": state.exit,
            "manifest_version": state.manifest_version,
        }

    def _entry_to_dict(self, entry: Entry) -> dict[str, str]:
        return {"name": entry.name, "description": entry.description}

    # ------------------------------------------------------------------
    # Deserialization (dict → State)
    # ------------------------------------------------------------------

    def from_dict(self, data: Any) -> State:
        """Deserialize a ``State`` from a dict produced by ``to_dict``.

        Raises
        ------
        StateFormatError
            If a required field is missing or has the wrong type.
        """
        if not isinstance(data, dict):
            raise StateFormatError(f"Expected a state record, got {type(data).__name__}")
        entries = self._require(data, "entries", list)
        exit_flag = self._require(data, "exit", bool)
        manifest_version = self._require(data, "manifest_version", int)
        if isinstance(manifest_version, bool) or manifest_version < 0:
            raise StateFormatError(
                f"Field 'manifest_version' must be a non-negative integer, got {manifest_version!r}"
            )
        return State(
            entries=[self._entry_from_dict(item, i) for i, item in enumerate(entries)],
            exit=exit_flag,
            manifest_version=manifest_version,
        )

    def _entry_from_dict(self, data: Any, index: int) -> Entry:
        if not isinstance(data, dict):
            raise StateFormatError(f"Entry {index} must be a record, got {type(data).__name__}")
        return Entry(
            name=self._require(data, "name", str, where=f"entry {index}"),
            description=self._require(data, "description", str, where=f"entry {index}"),
        )

    @staticmethod
    def _require(data: dict[str, Any], key: str, kind: type, where: str = "state") -> Any:
        if key not in data:
            raise StateFormatError(f"Missing field {key!r} in {where}")
        value = data[key]
        if not isinstance(value, kind):
            raise StateFormatError(
                f"Field {key!r} in {where} must be {kind.__name__}, got {type(value).__name__}"
            )
        return value

    # ------------------------------------------------------------------
    # RON helpers
    # ------------------------------------------------------------------

    def to_ron(self, state: State) -> str:
        """Serialize a ``State`` to pretty RON text."""
        try:
            return dumps(self.to_dict(state))
        except RonError as exc:
            raise StateFormatError(f"Cannot encode state: {exc}") from exc

    def from_ron(self, text: str) -> State:
        """Deserialize a ``State`` from RON text."""
        try:
            data = loads(text)
        except RonError as exc:
            raise StateFormatError(str(exc)) from exc
        return self.from_dict(data)

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, state: State, indent: int = 2) -> str:
        """Serialize a ``State`` to a JSON string."""
        return json.dumps(self.to_dict(state), indent=indent, ensure_ascii=False)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, state: State) -> str:
        """Serialize a ``State`` to a YAML string."""
        return yaml.dump(self.to_dict(state), default_flow_style=False, allow_unicode=True, sort_keys=False)
