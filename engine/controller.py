"""
controller.py — Playback Controller
====================================
The PlaybackController is the ONLY object the UI talks to.  It builds
sessions (array + recorded log), drives the Timeline forward under a
cancellable pacing loop, and gates manual stepping.

State machine:
    IDLE    →  start(algo)  →  RUNNING
    RUNNING →  pause()      →  PAUSED
    PAUSED  →  resume()     →  RUNNING      (continues from the cursor)
    RUNNING →  (log exhausted) → IDLE
    IDLE / PAUSED  →  step_forward / step_back / skip_to_start / skip_to_end
    PAUSED  →  (manual step reaches the end) → IDLE

Manual stepping while RUNNING raises InvalidTransition instead of racing
the auto-advance loop.  start() while RUNNING is a no-op.

Pacing:
  There is no sleeping here.  After each applied event the controller
  asks the Clock to call _advance() again after `interval` seconds and
  keeps the handle; pause() cancels it.  The interval is read on every
  tick, so set_speed() takes effect on the next step.

Thread safety:
  NOT thread-safe.  Call it from the thread that runs the clock (the web
  glue marshals every call through engine.clock.LoopThread).
"""

import random
from dataclasses import asdict
from enum import Enum
from typing import Any, Dict, List, Optional, Protocol, Sequence

import structlog

from algorithms import get_algorithm
from engine.clock import Cancellable, Clock
from engine.errors import InvalidTransition
from engine.recorder import RunMetrics, record_run
from engine.timeline import Session, Timeline

log = structlog.get_logger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class PlaybackState(Enum):
    IDLE    = "idle"
    RUNNING = "running"
    PAUSED  = "paused"


# ---------------------------------------------------------------------------
# Speed (slider units; interval = 105 - speed milliseconds)
# ---------------------------------------------------------------------------
SPEED_MIN = 1
SPEED_MAX = 100

SPEED_PRESETS = {
    "slow":   5,      # teaching mode, ~0.1 s per step
    "medium": 55,
    "fast":   90,
    "turbo":  100,    # demo mode, ~5 ms per step
}


def interval_for(speed: float) -> float:
    """Seconds to wait between two auto-advance steps at slider value `speed`."""
    return (105 - speed) / 1000.0


# ---------------------------------------------------------------------------
# Renderer capability
# ---------------------------------------------------------------------------
class Renderer(Protocol):
    def render(self, values: Sequence[float], highlight: Optional[int] = None) -> None: ...

    def resize(self, width: int, height: int) -> None: ...


# ---------------------------------------------------------------------------
# PlaybackController
# ---------------------------------------------------------------------------
class PlaybackController:
    """
    Attributes:
        timeline      : The Timeline holding the live Session.
        state         : Current PlaybackState.
        speed         : Slider value in [SPEED_MIN, SPEED_MAX].
        metrics       : RunMetrics of the last recorded run (or None).
        array_size    : Size used when start() has no array to sort yet.
        canvas_width  : Canvas width in pixels.
        canvas_height : Canvas height; generated values lie in [0, canvas_height).
    """

    def __init__(
        self,
        clock: Clock,
        renderer: Optional[Renderer] = None,
        canvas_width: int = 800,
        canvas_height: int = 400,
        speed: float = SPEED_PRESETS["medium"],
        array_size: int = 50,
        seed: Optional[int] = None,
    ):
        self.clock:         Clock              = clock
        self.renderer:      Optional[Renderer] = renderer
        self.timeline:      Timeline           = Timeline()
        self.state:         PlaybackState      = PlaybackState.IDLE
        self.speed:         float              = SPEED_PRESETS["medium"]
        self.metrics:       Optional[RunMetrics] = None
        self.canvas_width:  int                = canvas_width
        self.canvas_height: int                = canvas_height
        self.array_size:    int                = array_size

        self._rng = random.Random(seed)
        self._pending: Optional[Cancellable] = None

        self.set_speed(speed)

    # ------------------------------------------------------------------
    # Arrays & sessions
    # ------------------------------------------------------------------
    def generate(self, size: int, seed: Optional[int] = None) -> List[float]:
        """Replace the array with `size` random values and drop any session."""
        self._require_not_running("generate")
        if size < 0:
            raise ValueError(f"Array size must be >= 0, got {size}")

        rng = random.Random(seed) if seed is not None else self._rng
        values = [rng.randrange(self.canvas_height) for _ in range(size)]

        self.timeline.load(Session.fresh(values))
        self.metrics = None
        self.state   = PlaybackState.IDLE
        log.info("array_generated", size=size, seed=seed)
        self._render()
        return values

    def start(self, algo_key: str) -> bool:
        """
        Record `algo_key` on the current array and start auto-play.
        Returns False (and does nothing) if playback is already running.
        """
        if self.state is PlaybackState.RUNNING:
            log.debug("start_ignored", algo=algo_key, reason="already running")
            return False
        if get_algorithm(algo_key) is None:
            raise ValueError(f"Unknown algorithm: {algo_key}")

        self._cancel_pending()
        values = self._pre_sort_values()
        recording = record_run(algo_key, values)

        self.metrics = recording.metrics
        self.timeline.load(Session.fresh(values, recording.log, algo_key))
        self.state = PlaybackState.RUNNING
        log.info("playback_started", algo=algo_key, size=len(values), actions=len(recording.log))
        self._advance()
        return True

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def pause(self) -> None:
        if self.state is not PlaybackState.RUNNING:
            self._reject("pause")
        self._cancel_pending()
        self.state = PlaybackState.PAUSED
        log.info("playback_paused", cursor=self.timeline.cursor, total=self.timeline.total)

    def resume(self) -> None:
        if self.state is not PlaybackState.PAUSED:
            self._reject("resume")
        self.state = PlaybackState.RUNNING
        log.info("playback_resumed", cursor=self.timeline.cursor, total=self.timeline.total)
        self._advance()

    def toggle_pause(self) -> PlaybackState:
        """The single Pause/Resume button.  Returns the new state."""
        if self.state is PlaybackState.RUNNING:
            self.pause()
        elif self.state is PlaybackState.PAUSED:
            self.resume()
        else:
            self._reject("pause")
        return self.state

    # ------------------------------------------------------------------
    # Manual navigation (IDLE / PAUSED only)
    # ------------------------------------------------------------------
    def step_forward(self) -> Optional[int]:
        """Apply one event.  Returns the touched index, or None at the end."""
        self._require_not_running("step forward")
        touched = self.timeline.apply_forward()
        if touched is not None:
            self._render(touched)
            self._settle()
        return touched

    def step_back(self) -> bool:
        self._require_not_running("step back")
        moved = self.timeline.step_back()
        if moved:
            self._render()
        return moved

    def skip_to_start(self) -> bool:
        self._require_not_running("skip to start")
        if self.timeline.session is None:
            return False
        self.timeline.jump_to_start()
        self._render()
        return True

    def skip_to_end(self) -> int:
        """Apply every remaining event.  Returns how many were applied."""
        self._require_not_running("skip to end")
        applied = self.timeline.apply_all_forward()
        if self.timeline.session is not None and not self._settle():
            self._render()
        return applied

    def scrub_to(self, cursor: int) -> bool:
        self._require_not_running("scrub")
        moved = self.timeline.scrub_backward(cursor)
        if moved and not self._settle():
            self._render()
        return moved

    # ------------------------------------------------------------------
    # Speed & canvas
    # ------------------------------------------------------------------
    def set_speed(self, value: float) -> float:
        self.speed = min(SPEED_MAX, max(SPEED_MIN, float(value)))
        return self.speed

    def set_speed_preset(self, preset: str) -> float:
        if preset not in SPEED_PRESETS:
            raise ValueError(f"Unknown speed preset: {preset}")
        return self.set_speed(SPEED_PRESETS[preset])

    @property
    def interval(self) -> float:
        return interval_for(self.speed)

    def resize(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        self.canvas_width  = width
        self.canvas_height = height
        if self.renderer is not None:
            self.renderer.resize(width, height)
        self._render()

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def values(self) -> List[float]:
        return list(self.timeline.values)

    def snapshot(self) -> Dict[str, Any]:
        """Serialisable status for the web API."""
        session = self.timeline.session
        return {
            "state":       self.state.value,
            "algo":        session.algo_key if session else None,
            "cursor":      self.timeline.cursor,
            "total":       self.timeline.total,
            "size":        len(self.timeline.values),
            "values":      list(self.timeline.values),
            "speed":       self.speed,
            "interval_ms": round(self.interval * 1000, 3),
            "canvas":      {"width": self.canvas_width, "height": self.canvas_height},
            "metrics":     asdict(self.metrics) if self.metrics else None,
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _advance(self) -> None:
        """One tick of the auto-advance loop."""
        self._pending = None
        if self.state is not PlaybackState.RUNNING:
            return
        touched = self.timeline.apply_forward()
        if touched is None:
            self._finish()
            return
        self._render(touched)
        if self.timeline.at_end:
            self._finish()
            return
        self._pending = self.clock.call_later(self.interval, self._advance)

    def _finish(self) -> None:
        self.state = PlaybackState.IDLE
        log.info("playback_finished", algo=self.timeline.session.algo_key, total=self.timeline.total)
        self._render()

    def _settle(self) -> bool:
        """A paused run that manual steps carried to the end is finished."""
        if self.state is PlaybackState.PAUSED and self.timeline.at_end:
            self._finish()
            return True
        return False

    def _pre_sort_values(self) -> List[float]:
        """
        The array a new run sorts: the freshly generated one, or a new
        random array of the same size if a previous run already used it.
        """
        session = self.timeline.session
        if session is None:
            size = self.array_size
        elif len(session.log) == 0:
            return list(session.snapshot)
        else:
            size = len(session.snapshot)
        values = [self._rng.randrange(self.canvas_height) for _ in range(size)]
        log.info("array_generated", size=size, seed=None)
        return values

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _require_not_running(self, operation: str) -> None:
        if self.state is PlaybackState.RUNNING:
            self._reject(operation)

    def _reject(self, operation: str) -> None:
        log.warning("transition_rejected", operation=operation, state=self.state.value)
        raise InvalidTransition(operation, self.state.value)

    def _render(self, highlight: Optional[int] = None) -> None:
        if self.renderer is not None:
            self.renderer.render(list(self.timeline.values), highlight)
