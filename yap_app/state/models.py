"""
State data models for the pomodoro timer.

This module defines immutable data structures for the persisted timer
record, the status derived from it at a given instant, and the result of
applying a command.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Phase(str, Enum):
    """Interval kinds, stored on disk by value."""
    WORK = "WORK"
    BREAK = "BREAK"

    @property
    def initial(self) -> str:
        return self.value[0]


class TransitionReason(str, Enum):
    """Why a command was accepted or refused."""
    SCHEDULED = "scheduled"
    STOPPED = "stopped"
    RESET = "reset"
    WORK_IN_PROGRESS = "work_in_progress"
    ALREADY_STARTED = "already_started"


@dataclass(frozen=True)
class TimerState:
    """Persisted timer record. ``start``/``end`` are epoch ms, 0 when unset."""

    session_counter: int = 1
    phase: Phase = Phase.WORK
    start: int = 0
    end: int = 0

    @property
    def is_scheduled(self) -> bool:
        return self.start != 0

    def with_phase(self, phase: Phase) -> 'TimerState':
        """Switch interval kind, keeping counter and schedule."""
        return TimerState(
            session_counter=self.session_counter,
            phase=phase,
            start=self.start,
            end=self.end
        )

    def with_schedule(self, start: int, end: int) -> 'TimerState':
        """Schedule an interval of the current phase."""
        return TimerState(
            session_counter=self.session_counter,
            phase=self.phase,
            start=start,
            end=end
        )

    def cleared(self) -> 'TimerState':
        """Drop the scheduled interval."""
        return self.with_schedule(0, 0)

    def rolled_over(self) -> 'TimerState':
        """Book a finished interval: count it, return from break to work."""
        return TimerState(
            session_counter=self.session_counter + 1,
            phase=Phase.WORK,
            start=0,
            end=0
        )


@dataclass(frozen=True)
class TimerStatus:
    """Status flags derived for one instant. Never persisted."""

    not_started: bool
    in_progress: bool
    finished: bool

    @classmethod
    def derive(cls, state: TimerState, now: int) -> 'TimerStatus':
        scheduled = state.start != 0 and state.end != 0
        return cls(
            not_started=state.start == 0,
            in_progress=scheduled and state.end >= now,
            finished=scheduled and state.end < now,
        )

    @property
    def label(self) -> str:
        if self.in_progress:
            return "running"
        if self.finished:
            return "finished"
        return "idle"


@dataclass(frozen=True)
class LoadedTimer:
    """A timer record together with its status at ``now``."""

    state: TimerState
    status: TimerStatus
    now: int
    rolled_over: bool = False

    @property
    def label(self) -> str:
        """Compact description for logs, e.g. ``WORK/running``."""
        return f"{self.state.phase.value}/{self.status.label}"

    def replace_state(self, state: TimerState, now: Optional[int] = None) -> 'LoadedTimer':
        """Attach a new record and re-derive status, by default at the same instant."""
        if now is None:
            now = self.now
        return LoadedTimer(
            state=state,
            status=TimerStatus.derive(state, now),
            now=now,
            rolled_over=self.rolled_over
        )


@dataclass(frozen=True)
class TransitionResult:
    """Result envelope returned after applying a command."""

    action: str
    accepted: bool
    reason: TransitionReason
    timer: LoadedTimer
    message: str = ""

    @property
    def state(self) -> TimerState:
        return self.timer.state
