import os
import sys
from typing import List, Optional, Sequence, Tuple

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from engine import PlaybackController


class _Handle:
    def __init__(self, due: float, delay: float, callback):
        self.due       = due
        self.delay     = delay
        self.callback  = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class ManualClock:
    """Clock whose callbacks only fire when the test says so."""

    def __init__(self):
        self.now = 0.0
        self.handles: List[_Handle] = []

    def call_later(self, delay, callback):
        h = _Handle(self.now + delay, delay, callback)
        self.handles.append(h)
        return h

    @property
    def pending(self) -> List[_Handle]:
        return [h for h in self.handles if not h.cancelled and h.callback is not None]

    def fire_next(self) -> bool:
        live = self.pending
        if not live:
            return False
        h = min(live, key=lambda x: x.due)
        self.now = h.due
        cb, h.callback = h.callback, None
        cb()
        return True

    def run_until_idle(self, limit: int = 100_000) -> int:
        fired = 0
        while fired < limit and self.fire_next():
            fired += 1
        return fired


class RecordingRenderer:
    def __init__(self):
        self.frames: List[Tuple[List[float], Optional[int]]] = []
        self.size: Tuple[int, int] = (0, 0)

    def render(self, values: Sequence[float], highlight: Optional[int] = None) -> None:
        self.frames.append((list(values), highlight))

    def resize(self, width: int, height: int) -> None:
        self.size = (width, height)

    @property
    def last(self):
        return self.frames[-1] if self.frames else None


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def controller(clock, renderer):
    return PlaybackController(clock=clock, renderer=renderer, canvas_height=400, seed=1234)
