"""Tests for the JSON state file store."""

import json
import os
from unittest.mock import patch

import pytest

from yap_app.errors import MalformedDataError, PersistenceError
from yap_app.persistence.state_store import StateFileStore
from yap_app.state.models import Phase, TimerState


class TestStateFileStore:
    """Test StateFileStore class."""

    def test_read_missing_file(self, store):
        assert store.exists() is False
        assert store.read() is None

    def test_write_then_read(self, store, state_path):
        state = TimerState(session_counter=2, phase=Phase.BREAK, start=10, end=300_010)

        store.write(state)

        assert store.exists() is True
        assert store.read() == state
        assert json.loads(state_path.read_text())["phase"] == "BREAK"

    def test_write_creates_parent_directories(self, tmp_path):
        store = StateFileStore(tmp_path / "nested" / "dir" / "state.json")

        store.write(TimerState())

        assert store.read() == TimerState()

    def test_write_replaces_existing(self, store):
        store.write(TimerState(session_counter=5))
        store.write(TimerState(session_counter=6))

        assert store.read().session_counter == 6

    def test_write_leaves_no_temporary_files(self, store, state_path):
        store.write(TimerState())

        assert sorted(os.listdir(state_path.parent)) == [state_path.name]

    def test_expands_user(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))

        store = StateFileStore("~/.yap")

        assert store.path == tmp_path / ".yap"

    def test_read_malformed(self, store, state_path):
        state_path.write_text("[1, 2, 3]")

        with pytest.raises(MalformedDataError):
            store.read()

    def test_read_directory_fails(self, tmp_path):
        store = StateFileStore(tmp_path)

        with pytest.raises(PersistenceError) as exc_info:
            store.read()

        assert exc_info.value.operation == "read"

    def test_read_os_error(self, store, state_path):
        state_path.write_text("{}")

        with patch("pathlib.Path.read_text", side_effect=PermissionError("denied")):
            with pytest.raises(PersistenceError) as exc_info:
                store.read()

        assert exc_info.value.target == str(state_path)

    def test_unreachable_path_is_read_error(self, store, state_path):
        with patch("pathlib.Path.is_file", side_effect=PermissionError("denied")):
            with pytest.raises(PersistenceError) as exc_info:
                store.read()

        assert exc_info.value.operation == "read"
        assert exc_info.value.target == str(state_path)
        assert "denied" in str(exc_info.value)

    def test_failed_write_keeps_old_record(self, store, state_path):
        store.write(TimerState(session_counter=3))

        with patch("yap_app.persistence.state_store.os.replace", side_effect=OSError("disk full")):
            with pytest.raises(PersistenceError) as exc_info:
                store.write(TimerState(session_counter=4))

        assert exc_info.value.operation == "write"
        assert store.read().session_counter == 3
        assert sorted(os.listdir(state_path.parent)) == [state_path.name]

    def test_locked_creates_sidecar(self, store, state_path):
        with store.locked():
            store.write(TimerState())

        assert (state_path.parent / (state_path.name + ".lock")).exists()

    def test_lock_released_after_block(self, store):
        with store.locked():
            pass
        with store.locked():
            pass
