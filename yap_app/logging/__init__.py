"""
Logging configuration and utilities for the pomodoro timer.
"""
from .config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
