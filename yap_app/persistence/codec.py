"""Conversion between timer records and their JSON representation."""

import json
from typing import Any, Optional

from ..errors import MalformedDataError
from ..state.models import Phase, TimerState

RECORD_FIELDS = ("sessionCounter", "phase", "start", "end")
EXPECTED_FORMAT = '{"sessionCounter": int >= 1, "phase": "WORK"|"BREAK", "start": int, "end": int}'

# Files written by the first releases used "state" and "POMODORO"
_LEGACY_PHASE_KEY = "state"
_LEGACY_PHASE_TOKENS = {"POMODORO": Phase.WORK}


def encode_record(state: TimerState) -> dict[str, Any]:
    """Persisted fields only; derived status never reaches the file."""
    return {
        "sessionCounter": state.session_counter,
        "phase": state.phase.value,
        "start": state.start,
        "end": state.end,
    }


def decode_record(record: Any) -> TimerState:
    """
    Build a TimerState from a decoded JSON object.

    Raises:
        MalformedDataError: If any field is missing or has the wrong type
    """
    if not isinstance(record, dict):
        raise _malformed("State record must be a JSON object", record)

    if "phase" not in record and _LEGACY_PHASE_KEY in record:
        record = {**record, "phase": record[_LEGACY_PHASE_KEY]}

    missing = [name for name in RECORD_FIELDS if name not in record]
    if missing:
        raise _malformed(f"State record is missing fields: {', '.join(missing)}", record)

    counter = record["sessionCounter"]
    if not _is_int(counter) or counter < 1:
        raise _malformed(f"sessionCounter must be an integer >= 1, got {counter!r}", record)

    phase = _decode_phase(record["phase"], record)
    start = _decode_timestamp("start", record["start"], record)
    end = _decode_timestamp("end", record["end"], record)

    if (start == 0) != (end == 0):
        raise _malformed("start and end must be set or cleared together", record)

    return TimerState(session_counter=counter, phase=phase, start=start, end=end)


def dumps(state: TimerState) -> str:
    """Serialize a record to JSON text."""
    return json.dumps(encode_record(state), indent=1)


def loads(text: str) -> Optional[TimerState]:
    """
    Parse JSON text into a record.

    Empty text means no record, like a missing file.
    """
    if not text.strip():
        return None

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedDataError(
            f"State file is not valid JSON: {e}",
            raw_data=text,
            expected_format=EXPECTED_FORMAT
        ) from e

    return decode_record(data)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _decode_phase(value: Any, record: dict) -> Phase:
    if isinstance(value, str) and value in _LEGACY_PHASE_TOKENS:
        return _LEGACY_PHASE_TOKENS[value]
    try:
        return Phase(value)
    except ValueError:
        raise _malformed(f"Unknown phase {value!r}", record) from None


def _decode_timestamp(name: str, value: Any, record: dict) -> int:
    # Older writers stored null for an unscheduled interval
    if value is None:
        return 0
    if not _is_int(value) or value < 0:
        raise _malformed(f"{name} must be a non-negative integer, got {value!r}", record)
    return value


def _malformed(message: str, record: Any) -> MalformedDataError:
    return MalformedDataError(
        message,
        raw_data=repr(record),
        expected_format=EXPECTED_FORMAT
    )
