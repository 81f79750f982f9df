"""
Configuration for the pomodoro timer.

Defaults live in frozen dataclasses; a YAML file and command-line flags
override them, in that order.
"""
