"""
YAP - Yet Another Pomodoro

A command-line Pomodoro tracker. Work and break intervals are scheduled
against a small state file so that successive invocations share one timer.
"""

__version__ = "0.1.0"
__author__ = "YAP Team"
