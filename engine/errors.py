"""
errors.py — Engine Error Taxonomy
==================================
    SortVizError
      ├── InvalidIndex       – recorder handed an out-of-range index
      └── InvalidTransition  – control op issued in a state that forbids it

An empty log (nothing recorded yet) is NOT an error: stepping and
scrubbing without a session are no-ops.
"""

from typing import Optional


class SortVizError(Exception):
    """Base class for every error raised by the engine."""


class InvalidIndex(SortVizError, IndexError):
    """An algorithm recorded an index outside [0, length)."""

    def __init__(self, index: int, length: int):
        self.index  = index
        self.length = length
        super().__init__(f"index {index} out of range for array of length {length}")


class InvalidTransition(SortVizError):
    """
    Raised when a playback control is used in a state that forbids it,
    e.g. a manual step while auto-play is running.
    """

    def __init__(self, operation: str, state: str, detail: Optional[str] = None):
        self.operation = operation
        self.state     = state
        msg = f"cannot {operation} while {state}"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)
