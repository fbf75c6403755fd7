"""
timeline.py — Action-Log Timeline
==================================
The Timeline owns the live Session: the pre-sort snapshot, the array
the renderer shows, the recorded log, and the cursor into that log.

Invariant (holds after every public call):

    session.values == session.log.replay(session.snapshot, stop=session.cursor)

Moving forward applies one event at a time.  Moving backward cannot
simply undo, because SET events (merge sort) overwrite a value without
remembering the old one.  So backward moves reset to the snapshot and
replay forward to the target cursor: O(target), not O(1).  The log is
immutable, so replaying the cached log gives exactly what re-running
the algorithm would.

Thread safety:
  Not thread-safe.  Only the PlaybackController (on its event loop)
  should call into it.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from algorithms.action import ActionLog


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------
@dataclass
class Session:
    """
    Attributes:
        snapshot : The pre-sort array, never mutated.
        values   : The array as of `cursor` (what the renderer draws).
        log      : Every event the algorithm recorded.
        cursor   : How many events of `log` have been applied to `values`.
        algo_key : Registry key of the algorithm that produced `log`.
    """

    snapshot: Tuple[float, ...]
    values:   List[float]  = field(default_factory=list)
    log:      ActionLog    = field(default_factory=ActionLog)
    cursor:   int          = 0
    algo_key: Optional[str] = None

    @classmethod
    def fresh(cls, values, log: Optional[ActionLog] = None, algo_key: Optional[str] = None) -> "Session":
        snap = tuple(values)
        return cls(snapshot=snap, values=list(snap), log=log or ActionLog(), algo_key=algo_key)

    @property
    def total(self) -> int:
        return len(self.log)


# ---------------------------------------------------------------------------
# Timeline
# ---------------------------------------------------------------------------
class Timeline:

    def __init__(self, session: Optional[Session] = None):
        self._session: Optional[Session] = session

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def load(self, session: Session) -> None:
        """Replace the live session.  The cursor is taken as-is."""
        self._session = session

    # ------------------------------------------------------------------
    # Forward
    # ------------------------------------------------------------------
    def apply_forward(self) -> Optional[int]:
        """
        Apply the event under the cursor and advance.  Returns the
        touched index for highlighting, or None when nothing remains.
        """
        s = self._session
        if s is None or s.cursor >= len(s.log):
            return None
        touched = s.log[s.cursor].apply(s.values)
        s.cursor += 1
        return touched

    def apply_all_forward(self) -> int:
        """Apply every remaining event.  Returns how many were applied."""
        applied = 0
        while self.apply_forward() is not None:
            applied += 1
        return applied

    # ------------------------------------------------------------------
    # Backward
    # ------------------------------------------------------------------
    def jump_to_start(self) -> None:
        s = self._session
        if s is None:
            return
        s.values[:] = s.snapshot
        s.cursor = 0

    def scrub_backward(self, target: int) -> bool:
        """
        Rebuild the state at cursor `target` from the snapshot.  Works
        for any 0 <= target <= len(log), forward or backward of the
        current cursor.  Returns False (and changes nothing) otherwise.
        """
        s = self._session
        if s is None or not 0 <= target <= len(s.log):
            return False
        self.jump_to_start()
        for act in s.log[:target]:
            act.apply(s.values)
        s.cursor = target
        return True

    def step_back(self) -> bool:
        """Move the cursor back by one.  Returns False if already at start."""
        if self._session is None or self._session.cursor == 0:
            return False
        return self.scrub_backward(self._session.cursor - 1)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def session(self) -> Optional[Session]:
        return self._session

    @property
    def values(self) -> List[float]:
        return self._session.values if self._session else []

    @property
    def cursor(self) -> int:
        return self._session.cursor if self._session else 0

    @property
    def total(self) -> int:
        return len(self._session.log) if self._session else 0

    @property
    def at_end(self) -> bool:
        return self.cursor >= self.total
