"""
Clock and duration helpers.

The engine never reads the clock itself; the entry point calls
``now_ms`` once and threads the value through.
"""

import time
from typing import Optional


def now_ms(wall_clock_s: Optional[float] = None) -> int:
    """
    Get the current time as integer epoch milliseconds.

    Args:
        wall_clock_s: Optional epoch seconds to convert instead of reading the clock

    Returns:
        Epoch milliseconds, truncated to whole seconds like the state files
        written by earlier versions of the tool
    """
    if wall_clock_s is None:
        wall_clock_s = time.time()

    return int(wall_clock_s) * 1000


def format_remaining(remaining_ms: int) -> str:
    """
    Render a non-negative millisecond span as ``m:ss``.

    Minutes are not padded and may exceed 59; seconds are always two digits.
    """
    total_seconds = max(0, remaining_ms) // 1000
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes}:{seconds:02d}"
