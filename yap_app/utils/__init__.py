"""
Utility functions module.

Time Semantics:
- The clock is sampled exactly once per command invocation
- Every engine operation receives that single ``now`` explicitly
- All timestamps are integer epoch milliseconds
"""

from .time import format_remaining, now_ms

__all__ = ["format_remaining", "now_ms"]
