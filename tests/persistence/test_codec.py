"""Tests for timer record encoding and decoding."""

import json

import pytest

from yap_app.errors import MalformedDataError
from yap_app.persistence.codec import decode_record, dumps, encode_record, loads
from yap_app.state.models import Phase, TimerState


class TestEncodeRecord:
    """Test record encoding."""

    def test_exact_fields(self):
        state = TimerState(session_counter=8, phase=Phase.BREAK, start=500, end=900_500)

        assert encode_record(state) == {
            "sessionCounter": 8,
            "phase": "BREAK",
            "start": 500,
            "end": 900_500,
        }

    def test_dumps_is_json_object(self):
        text = dumps(TimerState())

        assert json.loads(text) == {"sessionCounter": 1, "phase": "WORK", "start": 0, "end": 0}


class TestDecodeRecord:
    """Test record decoding and validation."""

    def test_valid_record(self):
        record = {"sessionCounter": 3, "phase": "WORK", "start": 10, "end": 20}

        assert decode_record(record) == TimerState(session_counter=3, phase=Phase.WORK,
                                                   start=10, end=20)

    def test_legacy_record(self):
        """Test files written by earlier releases."""
        record = {"sessionCounter": 2, "state": "POMODORO", "start": None, "end": None}

        assert decode_record(record) == TimerState(session_counter=2, phase=Phase.WORK)

    def test_legacy_break_token(self):
        record = {"sessionCounter": 2, "state": "BREAK", "start": 1, "end": 2}

        assert decode_record(record).phase == Phase.BREAK

    @pytest.mark.parametrize("record, fragment", [
        ([], "JSON object"),
        ({"phase": "WORK", "start": 0, "end": 0}, "sessionCounter"),
        ({"sessionCounter": 0, "phase": "WORK", "start": 0, "end": 0}, ">= 1"),
        ({"sessionCounter": True, "phase": "WORK", "start": 0, "end": 0}, ">= 1"),
        ({"sessionCounter": 1, "phase": "NAP", "start": 0, "end": 0}, "Unknown phase"),
        ({"sessionCounter": 1, "phase": ["WORK"], "start": 0, "end": 0}, "Unknown phase"),
        ({"sessionCounter": 1, "phase": "WORK", "start": "soon", "end": 0}, "start"),
        ({"sessionCounter": 1, "phase": "WORK", "start": 1.5, "end": 2}, "start"),
        ({"sessionCounter": 1, "phase": "WORK", "start": 0, "end": -1}, "end"),
        ({"sessionCounter": 1, "phase": "WORK", "start": 10, "end": 0}, "together"),
    ])
    def test_malformed_records(self, record, fragment):
        with pytest.raises(MalformedDataError) as exc_info:
            decode_record(record)

        assert fragment in str(exc_info.value)
        assert exc_info.value.expected_format is not None


class TestLoads:
    """Test text parsing."""

    def test_round_trip(self):
        state = TimerState(session_counter=4, phase=Phase.BREAK, start=1, end=300_001)

        assert loads(dumps(state)) == state

    def test_empty_text_is_no_record(self):
        assert loads("") is None
        assert loads("  \n") is None

    def test_invalid_json(self):
        with pytest.raises(MalformedDataError) as exc_info:
            loads("{not json")

        assert exc_info.value.raw_data == "{not json"
