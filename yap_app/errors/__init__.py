"""
Error classification for the pomodoro timer.

Refusals (skipping a running pomodoro, starting twice) are not errors and
never raise. Everything here is fatal for a single command invocation.
"""

from .data_quality import (
    DataQualityError,
    MalformedDataError,
)
from .system_failures import (
    SystemFailureError,
    ConfigurationError,
    PersistenceError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MalformedDataError",
    # System Failures
    "SystemFailureError",
    "ConfigurationError",
    "PersistenceError",
]
