"""
Runtime orchestration for a single command invocation.

One invocation reads the state file once, derives status for a single
``now``, applies at most one transition and writes the record back.
"""

from contextlib import nullcontext
from enum import Enum
from typing import ContextManager

import structlog

from ..config.defaults import TimerParams
from ..persistence.state_store import StateFileStore
from . import machine
from .models import LoadedTimer, TransitionResult

logger = structlog.get_logger(__name__)


class Command(str, Enum):
    """Commands that change the stored timer."""
    NEXT = "next"
    START = "start"
    STOP = "stop"
    RESET = "reset"


class TimerRuntime:
    """Binds the state machine to a state file for one invocation."""

    def __init__(
        self,
        store: StateFileStore,
        params: TimerParams = machine.DEFAULT_TIMER_PARAMS,
        lock: bool = True
    ):
        self.store = store
        self.params = params
        self.lock = lock
        self.logger = logger.bind(path=str(store.path))

    def inspect(self, now: int) -> LoadedTimer:
        """Load the timer without writing anything back."""
        return machine.load(self.store.read(), now)

    def execute(self, command: Command, now: int) -> TransitionResult:
        """
        Apply ``command`` and persist the resulting record.

        Refused commands still write the record back so that a rollover
        observed while loading is kept.
        """
        with self._guard():
            timer = machine.load(self.store.read(), now)
            result = self.apply(timer, command, now)
            self.store.write(result.state)

        self.logger.info(
            "Command executed",
            command=command.value,
            accepted=result.accepted,
            reason=result.reason.value,
            rolled_over=timer.rolled_over,
            state=result.timer.label
        )
        return result

    def apply(self, timer: LoadedTimer, command: Command, now: int) -> TransitionResult:
        """Dispatch ``command`` to the matching transition."""
        if command == Command.NEXT:
            return machine.advance(timer, now, self.params)
        if command == Command.START:
            return machine.go_time(timer, now, self.params)
        if command == Command.STOP:
            return machine.stop(timer)
        if command == Command.RESET:
            return machine.reset(timer)
        raise ValueError(f"Unsupported command: {command!r}")

    def _guard(self) -> ContextManager[None]:
        if self.lock:
            return self.store.locked()
        return nullcontext()
