"""
engine/
-------
Recording & playback layer.

    from engine import PlaybackController, Timeline, record_run
"""

from engine.errors     import SortVizError, InvalidIndex, InvalidTransition
from engine.recorder   import ExchangeRecorder, Recording, RunMetrics, record_run
from engine.timeline   import Session, Timeline
from engine.clock      import AsyncioClock, CallTimeout, LoopThread
from engine.controller import PlaybackController, PlaybackState, SPEED_PRESETS, interval_for

__all__ = [
    "SortVizError",
    "InvalidIndex",
    "InvalidTransition",
    "ExchangeRecorder",
    "Recording",
    "RunMetrics",
    "record_run",
    "Session",
    "Timeline",
    "AsyncioClock",
    "CallTimeout",
    "LoopThread",
    "PlaybackController",
    "PlaybackState",
    "SPEED_PRESETS",
    "interval_for",
]
