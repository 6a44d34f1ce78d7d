"""Shared test fixtures for todo-tracker.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import io
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

import pytest
from rich.console import Console

from todo.commands.context import CommandContext
from todo.storage.store import StateStore


class ScriptedInput:
    """Line reader that replays queued lines, then raises ``EOFError``."""

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._lines: list[str] = list(lines)

    def __call__(self) -> str:
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)

    def feed(self, *lines: str) -> None:
        self._lines.extend(lines)

    @property
    def remaining(self) -> list[str]:
        return list(self._lines)


def make_console() -> Console:
    return Console(file=io.StringIO(), width=200, emoji=False, color_system=None)


@dataclass
class Session:
    """A ``CommandContext`` wired to in-memory consoles and scripted input."""

    context: CommandContext
    input: ScriptedInput

    @property
    def out(self) -> str:
        return self.context.console.file.getvalue()

    @property
    def err(self) -> str:
        return self.context.err_console.file.getvalue()

    @property
    def store(self) -> StateStore:
        return self.context.store

    def feed(self, *lines: str) -> None:
        self.input.feed(*lines)


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "todo"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test inside an empty temporary working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture()
def session(workdir: Path) -> Session:
    """A fresh session whose save file is ``state.ron`` in ``workdir``."""
    reader = ScriptedInput()
    context = CommandContext(
        store=StateStore(),
        console=make_console(),
        err_console=make_console(),
        read_line=reader,
    )
    return Session(context=context, input=reader)
