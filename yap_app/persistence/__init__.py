"""
Timer state persistence.

A single JSON object per state file, written atomically.
"""

from .codec import decode_record, encode_record
from .state_store import StateFileStore

__all__ = ["StateFileStore", "decode_record", "encode_record"]
