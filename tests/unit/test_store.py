"""Unit tests for todo.storage.store — StateStore file access."""
from __future__ import annotations

import logging
from pathlib import Path

import pytest

from todo.errors import StateFileError, StateFormatError, StateReadError, StateWriteError
from todo.state.models import Entry, State
from todo.storage.store import STATE_FILE_NAME, StateStore


@pytest.fixture()
def store(tmp_path: Path) -> StateStore:
    return StateStore(tmp_path / STATE_FILE_NAME)


class TestDefaults:
    def test_default_path_is_relative_state_ron(self) -> None:
        assert StateStore().path == Path("state.ron")

    def test_default_path_follows_working_directory(self, workdir: Path) -> None:
        store = StateStore()
        assert not store.exists()
        (workdir / "state.ron").write_text("()", encoding="utf-8")
        assert store.exists()


class TestReadWrite:
    def test_missing_file(self, store: StateStore) -> None:
        assert not store.exists()

    def test_write_then_read(self, store: StateStore) -> None:
        state = State(entries=[Entry("milk", "2 litres"), Entry("bread", "wholemeal")])
        store.write(state)
        assert store.exists()
        assert store.read() == state

    def test_write_replaces_previous_file(self, store: StateStore) -> None:
        store.write(State(entries=[Entry("a", "1"), Entry("b", "2")]))
        store.write(State(entries=[Entry("c", "3")]))
        assert store.read().entries == [Entry("c", "3")]

    def test_written_text_is_pretty_ron(self, store: StateStore) -> None:
        store.write(State(entries=[Entry("a", "b")]))
        text = store.path.read_text(encoding="utf-8")
        assert text.startswith("(\n    entries: [\n")
        assert "    manifest_version: 1,\n" in text


class TestFailures:
    def test_unparseable_file(self, store: StateStore) -> None:
        store.path.write_text("(entries: oops)", encoding="utf-8")
        with pytest.raises(StateFormatError) as exc_info:
            store.read()
        assert exc_info.value.path == store.path
        assert str(exc_info.value).startswith(str(store.path))

    def test_undecodable_bytes(self, store: StateStore) -> None:
        store.path.write_bytes(b"\xff\xfe\x00(")
        with pytest.raises(StateReadError):
            store.read()

    def test_directory_in_place_of_file(self, store: StateStore) -> None:
        store.path.mkdir()
        with pytest.raises(StateReadError):
            store.read()

    def test_write_into_missing_directory(self, tmp_path: Path) -> None:
        store = StateStore(tmp_path / "nowhere" / "state.ron")
        with pytest.raises(StateWriteError) as exc_info:
            store.write(State(entries=[Entry("a", "b")]))
        assert isinstance(exc_info.value, StateFileError)

    def test_encoding_failure_writes_nothing(self, store: StateStore) -> None:
        state = State(entries=[Entry(name=float("inf"), description="x")])  # type: ignore[arg-type]
        with pytest.raises(StateFormatError):
            store.write(state)
        assert not store.exists()


    def test_lone_surrogate_keeps_previous_file(self, store: StateStore) -> None:
        store.write(State(entries=[Entry("milk", "2 litres")]))
        before = store.path.read_bytes()
        with pytest.raises(StateFormatError) as exc_info:
            store.write(State(entries=[Entry("\udcff", "x")]))
        assert exc_info.value.path == store.path
        assert store.path.read_bytes() == before

    def test_lone_surrogate_creates_no_file(self, store: StateStore) -> None:
        with pytest.raises(StateFormatError):
            store.write(State(entries=[Entry("mi\udcffk", "x")]))
        assert not store.exists()


class TestLogging:
    def test_debug_records(self, store: StateStore, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="todo.storage.store"):
            store.write(State(entries=[Entry("a", "b")]))
            store.read()
        assert "Wrote 1 entries" in caplog.text
        assert "Read 1 entries (manifest version 1)" in caplog.text
