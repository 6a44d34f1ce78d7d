"""Test that the quickstart API works for todo-tracker."""
from __future__ import annotations

import importlib


def test_quickstart_import(package_name: str, expected_version: str) -> None:
    module = importlib.import_module(package_name)
    assert module.__version__ == expected_version
    assert callable(module.loads)
    assert callable(module.dumps)
    assert callable(module.run_line)


def test_quickstart_dumps_and_loads() -> None:
    import todo

    state = todo.State(entries=[todo.Entry("milk", "2 litres")])
    text = todo.dumps(state)
    assert text.startswith("(\n")
    assert todo.loads(text) == state


def test_quickstart_run_line(session) -> None:
    import todo

    session.feed("milk", "2 litres")
    state = todo.run_line(todo.State(), "add", session.context)
    todo.run_line(state, "list", session.context)
    assert state.entries == [todo.Entry("milk", "2 litres")]
    assert "0 - milk: 2 litres" in session.out


def test_quickstart_unknown_line(session) -> None:
    import todo

    state = todo.run_line(todo.State(), "jump", session.context)
    assert state.is_empty
    assert "Unknown command" in session.err


def test_quickstart_manifest_version() -> None:
    import todo

    assert todo.STATE_MANIFEST_VERSION == 1
    assert todo.State().manifest_version == todo.STATE_MANIFEST_VERSION
