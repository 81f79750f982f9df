"""
Core pomodoro state machine logic.

Every function here is pure: it takes the record, the configured interval
lengths and a single ``now`` (epoch ms) and returns new immutable values.
Reading and writing the state file is the runtime's job.
"""

from typing import Optional

from ..config.defaults import TimerParams
from ..logging.config import get_state_logger, log_refusal, log_state_transition
from ..utils.time import format_remaining
from .models import (
    LoadedTimer,
    Phase,
    TimerState,
    TimerStatus,
    TransitionReason,
    TransitionResult,
)

state_logger = get_state_logger(__name__)

COFFEE_EMOJI = "☕"
WAITING_PREFIX = "WAITING_FOR_"

SKIP_REFUSED_MESSAGE = "you cant just skip during a pomodoro"
START_REFUSED_MESSAGE = "already started"

DEFAULT_TIMER_PARAMS = TimerParams()


def default_state() -> TimerState:
    """Record used when no state file exists yet."""
    return TimerState(session_counter=1, phase=Phase.WORK, start=0, end=0)


def load(record: Optional[TimerState], now: int) -> LoadedTimer:
    """
    Derive status for ``now`` and roll over a finished interval.

    Args:
        record: Previously persisted record, or None for a fresh timer
        now: Reference timestamp in epoch milliseconds

    Returns:
        LoadedTimer whose status is never ``finished``
    """
    state = record if record is not None else default_state()
    status = TimerStatus.derive(state, now)

    if not status.finished:
        return LoadedTimer(state=state, status=status, now=now)

    rolled = state.rolled_over()
    log_state_transition(
        state_logger,
        from_state=f"{state.phase.value}/finished",
        to_state=f"{rolled.phase.value}/idle",
        trigger="rollover",
        context={
            "session_counter": rolled.session_counter,
            "ended_at": state.end,
            "now": now
        }
    )
    return LoadedTimer(
        state=rolled,
        status=TimerStatus.derive(rolled, now),
        now=now,
        rolled_over=True
    )


def duration_for(state: TimerState, params: TimerParams = DEFAULT_TIMER_PARAMS) -> int:
    """Interval length in milliseconds for the record's phase and counter."""
    if state.phase == Phase.WORK:
        return params.work_ms

    if state.session_counter % params.long_break_every == 0:
        return params.long_break_ms

    return params.short_break_ms


def advance(
    timer: LoadedTimer,
    now: int,
    params: TimerParams = DEFAULT_TIMER_PARAMS,
    action: str = "next"
) -> TransitionResult:
    """
    Schedule the next interval starting at ``now``.

    A running work interval cannot be skipped. Skipping a running break
    goes straight to work without counting the break.
    """
    state = timer.state

    if state.phase == Phase.WORK and timer.status.in_progress:
        log_refusal(
            state_logger,
            state=timer.label,
            trigger=action,
            reason=TransitionReason.WORK_IN_PROGRESS.value
        )
        return TransitionResult(
            action=action,
            accepted=False,
            reason=TransitionReason.WORK_IN_PROGRESS,
            timer=timer,
            message=SKIP_REFUSED_MESSAGE
        )

    if timer.status.in_progress:
        state = state.with_phase(Phase.WORK)

    duration = duration_for(state, params)
    scheduled = timer.replace_state(state.with_schedule(now, now + duration), now)

    log_state_transition(
        state_logger,
        from_state=timer.label,
        to_state=scheduled.label,
        trigger=action,
        context={
            "session_counter": scheduled.state.session_counter,
            "start": scheduled.state.start,
            "end": scheduled.state.end,
            "duration_ms": duration
        }
    )
    return TransitionResult(
        action=action,
        accepted=True,
        reason=TransitionReason.SCHEDULED,
        timer=scheduled
    )


def go_time(
    timer: LoadedTimer,
    now: int,
    params: TimerParams = DEFAULT_TIMER_PARAMS
) -> TransitionResult:
    """Begin the first work interval of an untouched session."""
    status = timer.status
    if timer.state.session_counter > 1 or status.in_progress or status.finished:
        log_refusal(
            state_logger,
            state=timer.label,
            trigger="start",
            reason=TransitionReason.ALREADY_STARTED.value
        )
        return TransitionResult(
            action="start",
            accepted=False,
            reason=TransitionReason.ALREADY_STARTED,
            timer=timer,
            message=START_REFUSED_MESSAGE
        )

    return advance(timer, now, params, action="start")


def stop(timer: LoadedTimer) -> TransitionResult:
    """Clear the scheduled interval. Phase and counter are kept."""
    stopped = timer.replace_state(timer.state.cleared())
    log_state_transition(
        state_logger,
        from_state=timer.label,
        to_state=stopped.label,
        trigger="stop"
    )
    return TransitionResult(
        action="stop",
        accepted=True,
        reason=TransitionReason.STOPPED,
        timer=stopped
    )


def reset(timer: LoadedTimer) -> TransitionResult:
    """Return to the initial record regardless of status."""
    fresh = timer.replace_state(default_state())
    log_state_transition(
        state_logger,
        from_state=timer.label,
        to_state=fresh.label,
        trigger="reset",
        context={"previous_session_counter": timer.state.session_counter}
    )
    return TransitionResult(
        action="reset",
        accepted=True,
        reason=TransitionReason.RESET,
        timer=fresh
    )


def is_in_active_work_phase(timer: LoadedTimer) -> bool:
    """True while a work interval is running."""
    return timer.state.phase == Phase.WORK and timer.status.in_progress


def describe(timer: LoadedTimer, now: int) -> str:
    """
    Render the one-line status shown by ``yap state``.

    Examples: ``WORK 24:59``, ``BREAK ☕4:12☕``, ``WAITING_FOR_WORK W3``,
    ``WAITING_FOR_BREAK ☕B3☕``.
    """
    state = timer.state
    in_progress = timer.status.in_progress

    prefix = "" if in_progress else WAITING_PREFIX
    decoration = COFFEE_EMOJI if state.phase == Phase.BREAK else ""

    if in_progress:
        # +1 ms keeps the countdown identical to earlier releases
        payload = f"{decoration}{format_remaining(state.end - now + 1)}{decoration}"
    else:
        payload = f"{decoration}{state.phase.initial}{state.session_counter}{decoration}"

    return f"{prefix}{state.phase.value} {payload}"
