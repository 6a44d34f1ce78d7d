"""Integration tests for the todo-tracker CLI.

Each test runs the click group through ``CliRunner`` inside an empty
working directory, so ``state.ron`` is created next to the test only.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from todo.cli.main import cli
from todo.state.models import Entry, State
from todo.storage.store import StateStore


def _make_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def saved(workdir: Path) -> StateStore:
    store = StateStore()
    store.write(State(entries=[Entry("milk", "2 litres"), Entry("bread", "wholemeal")]))
    return store


@pytest.fixture()
def restore_logging() -> Iterator[None]:
    package_logger = logging.getLogger("todo")
    handlers, level = list(package_logger.handlers), package_logger.level
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)


# ===========================================================================
# run
# ===========================================================================


class TestRunCommand:
    def setup_method(self) -> None:
        self.runner = _make_runner()

    def test_runs_by_default(self, workdir: Path) -> None:
        result = self.runner.invoke(cli, [], input="help\nexit\n")
        assert result.exit_code == 0
        assert "Todo Tracker" in result.output
        assert "Add (add) : Adds a new todo entry" in result.output

    def test_explicit_run_subcommand(self, workdir: Path) -> None:
        result = self.runner.invoke(cli, ["run"], input="list\nexit\n")
        assert result.exit_code == 0
        assert "Nothing to list" in result.output

    def test_end_of_input_exits_cleanly(self, workdir: Path) -> None:
        result = self.runner.invoke(cli, ["run"], input="add\nmilk\n")
        assert result.exit_code == 0
        assert not (workdir / "state.ron").exists()

    def test_save_writes_state_file(self, workdir: Path) -> None:
        result = self.runner.invoke(
            cli, [], input="add\nmilk\n2 litres\nsave\nexit\n"
        )
        assert result.exit_code == 0
        assert "Saved state data to state.ron" in result.output
        assert StateStore().read().entries == [Entry("milk", "2 litres")]

    def test_load_from_previous_run(self, saved: StateStore) -> None:
        result = self.runner.invoke(cli, [], input="load\nlist\nexit\n")
        assert result.exit_code == 0
        assert "Loaded 2 entries from state file" in result.output
        assert "1 - milk: 2 litres" in result.output
        assert "0 - bread: wholemeal" in result.output

    def test_list_prints_long_entries_on_one_line(self, workdir: Path) -> None:
        name, description = "n" * 50, "d" * 60
        result = self.runner.invoke(
            cli, [], input=f"add\n{name}\n{description}\nlist\nexit\n"
        )
        assert result.exit_code == 0
        assert f"0 - {name}: {description}\n" in result.output

    def test_list_keeps_tabs(self, workdir: Path) -> None:
        result = self.runner.invoke(cli, [], input="add\na\tb\nc\td\nlist\nexit\n")
        assert result.exit_code == 0
        assert "0 - a\tb: c\td\n" in result.output

    def test_errors_are_reported(self, workdir: Path) -> None:
        result = self.runner.invoke(cli, [], input="bogus\nexit\n")
        assert result.exit_code == 0
        assert "Error: Unknown command" in result.output

    def test_help_text_available(self) -> None:
        result = self.runner.invoke(cli, ["run", "--help"])
        assert result.exit_code == 0
        assert "interactive" in result.output.lower()


# ===========================================================================
# show
# ===========================================================================


class TestShowCommand:
    def setup_method(self) -> None:
        self.runner = _make_runner()

    def test_missing_file(self, workdir: Path) -> None:
        result = self.runner.invoke(cli, ["show"])
        assert result.exit_code == 1
        assert "No state data file found at state.ron" in result.output

    def test_unreadable_file(self, workdir: Path) -> None:
        (workdir / "state.ron").write_text("(entries: [", encoding="utf-8")
        result = self.runner.invoke(cli, ["show"])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "state.ron" in result.output

    def test_ron_by_default(self, saved: StateStore) -> None:
        result = self.runner.invoke(cli, ["show"])
        assert result.exit_code == 0
        assert 'name: "milk"' in result.output
        assert "manifest_version: 1" in result.output
        assert "2 entries" in result.output

    def test_json(self, saved: StateStore) -> None:
        result = self.runner.invoke(cli, ["show", "--format", "json"])
        assert result.exit_code == 0
        assert '"name": "bread"' in result.output

    def test_yaml(self, saved: StateStore) -> None:
        result = self.runner.invoke(cli, ["show", "--format", "YAML"])
        assert result.exit_code == 0
        assert "name: milk" in result.output

    def test_single_entry_wording(self, workdir: Path) -> None:
        StateStore().write(State(entries=[Entry("a", "b")]))
        result = self.runner.invoke(cli, ["show"])
        assert "1 entry" in result.output
        assert "1 entries" not in result.output

    def test_invalid_format(self, saved: StateStore) -> None:
        result = self.runner.invoke(cli, ["show", "--format", "toml"])
        assert result.exit_code != 0

    def test_does_not_modify_file(self, saved: StateStore) -> None:
        before = saved.path.read_text(encoding="utf-8")
        self.runner.invoke(cli, ["show", "--format", "json"])
        assert saved.path.read_text(encoding="utf-8") == before


# ===========================================================================
# version / --verbose
# ===========================================================================


class TestVersionCommand:
    def test_version_table(self) -> None:
        result = _make_runner().invoke(cli, ["version"])
        assert result.exit_code == 0
        assert "todo-tracker" in result.output
        assert "v0.1.0" in result.output
        assert "Manifest version" in result.output


class TestVerbose:
    def test_debug_records_reach_stderr(self, workdir: Path, restore_logging: None) -> None:
        result = _make_runner().invoke(cli, ["--verbose", "run"], input="nope\n")
        assert result.exit_code == 0
        assert "No command matches" in result.output

    def test_quiet_by_default(self, workdir: Path, restore_logging: None) -> None:
        result = _make_runner().invoke(cli, ["run"], input="nope\n")
        assert "No command matches" not in result.output

    def test_handler_added_once(self, workdir: Path, restore_logging: None) -> None:
        runner = _make_runner()
        before = len(logging.getLogger("todo").handlers)
        runner.invoke(cli, ["-v", "version"])
        runner.invoke(cli, ["-v", "version"])
        assert len(logging.getLogger("todo").handlers) == before + 1


def test_yaml_output_parses(saved: StateStore) -> None:
    from todo.state.serializer import StateSerializer

    text = StateSerializer().to_yaml(saved.read())
    assert yaml.safe_load(text)["entries"][0] == {"name": "milk", "description": "2 litres"}
