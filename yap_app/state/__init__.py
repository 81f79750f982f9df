"""
Timer state machine and runtime module.

Derives interval status from the persisted record, rolls over finished
intervals and applies the ``next``/``start``/``stop``/``reset`` transitions.
"""
