"""Pytest configuration and shared fixtures."""

import json
from pathlib import Path
from typing import Any, Dict

import pytest

from yap_app.logging.config import configure_logging
from yap_app.persistence.state_store import StateFileStore
from yap_app.state.models import Phase, TimerState

WORK_MS = 25 * 60 * 1000
SHORT_BREAK_MS = 5 * 60 * 1000


@pytest.fixture(autouse=True)
def reset_logging():
    """Point log handlers back at the real stderr after each test."""
    yield
    configure_logging()


@pytest.fixture
def state_path(tmp_path: Path) -> Path:
    """Location of a state file that does not exist yet."""
    return tmp_path / ".yap"


@pytest.fixture
def store(state_path: Path) -> StateFileStore:
    return StateFileStore(state_path)


@pytest.fixture
def running_work() -> TimerState:
    """Work interval scheduled from 1000 to 1,501,000."""
    return TimerState(session_counter=1, phase=Phase.WORK, start=1000, end=1000 + WORK_MS)


@pytest.fixture
def running_break() -> TimerState:
    """Short break scheduled from 1000 to 301,000."""
    return TimerState(session_counter=3, phase=Phase.BREAK, start=1000, end=1000 + SHORT_BREAK_MS)


@pytest.fixture
def write_record(state_path: Path):
    """Write a raw JSON record to the state file."""
    def _write(record: Dict[str, Any]) -> Path:
        state_path.write_text(json.dumps(record))
        return state_path
    return _write
