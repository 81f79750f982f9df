"""
Data quality error classifications for persisted timer records.

These exceptions describe state files that were read successfully but
do not contain a usable timer record.
"""

from typing import Optional, Dict, Any


class DataQualityError(Exception):
    """Base class for problems with the content of a persisted record."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class MalformedDataError(DataQualityError):
    """Record exists but is in incorrect format."""

    def __init__(self, message: str, raw_data: Optional[str] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.expected_format = expected_format
