#!/usr/bin/env python3
"""
Session Demo - YAP pomodoro engine

Walks one simulated session through the state machine without touching
the real state file:
- start → running work → rollover → break → skipped break
- refusals for skipping a running pomodoro and starting twice
- the long break every 8th cycle

Run: python examples/session_demo.py
"""

from yap_app.state.machine import advance, describe, go_time, load, stop
from yap_app.state.models import Phase, TimerState

MINUTE = 60 * 1000


def show(label: str, timer, now: int) -> None:
    print(f"  {label:<28} {describe(timer, now)}")


def main():
    print("🍅 YAP SESSION DEMO")
    print("=" * 50)

    now = 1_000_000
    timer = load(None, now)
    show("fresh", timer, now)

    timer = go_time(timer, now).timer
    show("start", timer, now)

    refused = advance(load(timer.state, now + MINUTE), now + MINUTE)
    print(f"  next after 1 minute          -> {refused.message}")

    now += 26 * MINUTE
    timer = load(timer.state, now)
    show("26 minutes later (rollover)", timer, now)

    # Rollover keeps WORK; a break is a phase flip the caller makes
    timer = advance(timer.replace_state(timer.state.with_phase(Phase.BREAK)), now).timer
    show("break", timer, now)

    now += 2 * MINUTE
    timer = advance(load(timer.state, now), now).timer
    show("skip break after 2 minutes", timer, now)

    timer = stop(timer).timer
    show("stop", timer, now)

    print(f"  start again                  -> {go_time(timer, now).message}")

    for counter in (7, 8):
        state = TimerState(session_counter=counter, phase=Phase.BREAK)
        scheduled = advance(load(state, now), now).timer
        show(f"break at cycle {counter}", scheduled, now)


if __name__ == "__main__":
    main()
