"""
recorder.py — Exchange Recorder & Run Analytics
================================================
The Recorder is a passive sink: an algorithm writes exchange events
into it while sorting its private copy, then the engine seals it into
an immutable ActionLog.

Usage:
    rec = ExchangeRecorder(len(values))
    bubble_sort(list(values), rec)
    log = rec.build()

    # or, by registry key, with the analytics card:
    recording = record_run("quick", values)
    recording.log, recording.metrics
"""

import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import structlog

from algorithms import get_algorithm
from algorithms.action import Action, ActionKind, ActionLog
from engine.errors import InvalidIndex

log = structlog.get_logger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass — what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:      str   = ""
    algo_label:    str   = ""
    array_size:    int   = 0
    total_actions: int   = 0
    swaps:         int   = 0
    writes:        int   = 0          # SET events (merge sort)
    wall_time_ms:  float = 0.0        # time to record the whole log


@dataclass
class Recording:
    log:     ActionLog  = field(default_factory=ActionLog)
    metrics: RunMetrics = field(default_factory=RunMetrics)


# ---------------------------------------------------------------------------
# ExchangeRecorder
# ---------------------------------------------------------------------------
class ExchangeRecorder:
    """
    Attributes:
        length : Size of the array being sorted; every index must be below it.
        sealed : True once build() has been called.
    """

    def __init__(self, length: int):
        self.length:  int          = length
        self.sealed:  bool         = False
        self._actions: List[Action] = []

    def __len__(self) -> int:
        return len(self._actions)

    def record(self, kind: ActionKind, a: int, b: int, value: Optional[float] = None) -> None:
        if self.sealed:
            raise RuntimeError("Recorder already built; start a new one.")
        for idx in (a, b):
            if not 0 <= idx < self.length:
                raise InvalidIndex(idx, self.length)
        if kind is ActionKind.SET:
            if a != b:
                raise ValueError(f"SET must target a single index, got ({a}, {b})")
            if value is None:
                raise ValueError("SET requires the written value")
        self._actions.append(Action(kind, a, b, value))

    def swap(self, a: int, b: int) -> None:
        self.record(ActionKind.SWAP, a, b)

    def write(self, k: int, value: float) -> None:
        self.record(ActionKind.SET, k, k, value)

    def build(self) -> ActionLog:
        """Seal the recorder and return the finished log."""
        self.sealed = True
        return ActionLog(self._actions)


# ---------------------------------------------------------------------------
# Run helper
# ---------------------------------------------------------------------------
def record_run(algo_key: str, values: Sequence[float]) -> Recording:
    """Run a registered algorithm on a private copy of `values` and record it."""
    info = get_algorithm(algo_key)
    if info is None:
        raise ValueError(f"Unknown algorithm: {algo_key}")

    work = list(values)
    rec  = ExchangeRecorder(len(work))

    start = time.monotonic()
    info.fn(work, rec)
    wall_ms = (time.monotonic() - start) * 1000

    action_log = rec.build()
    metrics = RunMetrics(
        algo_key=info.key,
        algo_label=info.label,
        array_size=len(work),
        total_actions=len(action_log),
        swaps=action_log.count(ActionKind.SWAP),
        writes=action_log.count(ActionKind.SET),
        wall_time_ms=round(wall_ms, 2),
    )
    log.info(
        "run_recorded",
        algo=info.key,
        size=metrics.array_size,
        actions=metrics.total_actions,
        wall_time_ms=metrics.wall_time_ms,
    )
    return Recording(log=action_log, metrics=metrics)
