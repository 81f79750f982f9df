"""Tests for logging configuration and helpers."""

import logging
import sys
from unittest.mock import Mock

import pytest

from yap_app.logging.config import (
    configure_logging,
    get_state_logger,
    log_refusal,
    log_state_transition,
)


@pytest.fixture
def mock_logger():
    logger = Mock()
    logger.bind.return_value = logger
    return logger


class TestConfigureLogging:
    def test_sets_root_level(self):
        configure_logging(level="debug", format_json=True)

        assert logging.getLogger().level == logging.DEBUG

    def test_logs_go_to_stderr(self, capsys):
        configure_logging(level="INFO", format_json=True)

        handlers = logging.getLogger().handlers

        assert any(getattr(h, "stream", None) is sys.stderr for h in handlers)

    def test_invalid_level(self):
        with pytest.raises(AttributeError):
            configure_logging(level="LOUD")


class TestHelpers:
    def test_state_logger_follows_later_configuration(self, capsys):
        logger = get_state_logger("yap_app.tests.quiet")

        configure_logging(level="WARNING")
        log_state_transition(logger, from_state="WORK/idle", to_state="WORK/running",
                             trigger="start")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_state_logger_writes_to_stderr(self, capsys):
        logger = get_state_logger("yap_app.tests.verbose")

        configure_logging(level="INFO")
        log_state_transition(logger, from_state="WORK/idle", to_state="WORK/running",
                             trigger="start")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "State transition" in captured.err
        assert "subsystem=timer" in captured.err

    def test_log_state_transition(self, mock_logger):
        log_state_transition(
            mock_logger,
            from_state="WORK/idle",
            to_state="WORK/running",
            trigger="start",
            context={"duration_ms": 1_500_000}
        )

        first_bind = mock_logger.bind.call_args_list[0].kwargs
        assert first_bind == {"from_state": "WORK/idle", "to_state": "WORK/running",
                              "trigger": "start"}
        assert mock_logger.bind.call_args_list[1].kwargs == {"context": {"duration_ms": 1_500_000}}
        mock_logger.info.assert_called_once_with("State transition")

    def test_log_state_transition_without_context(self, mock_logger):
        log_state_transition(mock_logger, from_state="a", to_state="b", trigger="stop")

        assert mock_logger.bind.call_count == 1

    def test_log_refusal(self, mock_logger):
        log_refusal(mock_logger, state="WORK/running", trigger="next", reason="work_in_progress")

        assert mock_logger.bind.call_args.kwargs["reason"] == "work_in_progress"
        mock_logger.info.assert_called_once_with("Command refused")
