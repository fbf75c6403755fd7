"""
action.py — Exchange Events & the Action Log
=============================================
Every sorting algorithm writes Action records into a Recorder.
An Action is one positional operation on the array:

    • SWAP  – exchange the values at `a` and `b`
    • SET   – overwrite position `a` with `value` (a == b, a self swap)

Merge sort writes by value instead of exchanging two live positions,
so its SET events carry the written value.  That makes the whole log
replayable from the pre-sort snapshot, but SET is not invertible:
moving backward means replaying from the snapshot again.

Design decisions:
  - Action is a frozen dataclass.  The recorder is the only writer;
    the timeline and renderer are pure readers.
  - ActionLog is tuple-backed, so once built nobody can append to it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Sequence


# ---------------------------------------------------------------------------
# Event kinds
# ---------------------------------------------------------------------------
class ActionKind(Enum):
    SWAP = "swap"
    SET  = "set"


# ---------------------------------------------------------------------------
# Action
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Action:
    """
    Attributes:
        kind  : SWAP or SET.
        a     : First index (the one the renderer highlights).
        b     : Second index.  Equal to `a` for SET.
        value : Value written by a SET; None for SWAP.
    """

    kind:  ActionKind
    a:     int
    b:     int
    value: Optional[float] = None

    def apply(self, values: List[float]) -> int:
        """Apply this event to `values` in place.  Returns the touched index."""
        if self.kind is ActionKind.SWAP:
            values[self.a], values[self.b] = values[self.b], values[self.a]
        else:
            values[self.a] = self.value
        return self.a

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {"kind": self.kind.value, "a": self.a, "b": self.b}
        if self.kind is ActionKind.SET:
            d["value"] = self.value
        return d


# ---------------------------------------------------------------------------
# ActionLog
# ---------------------------------------------------------------------------
class ActionLog:
    """Immutable, ordered sequence of Actions produced by one algorithm run."""

    __slots__ = ("_actions",)

    def __init__(self, actions: Sequence[Action] = ()):
        self._actions = tuple(actions)

    def __len__(self) -> int:
        return len(self._actions)

    def __getitem__(self, idx):
        return self._actions[idx]

    def __iter__(self) -> Iterator[Action]:
        return iter(self._actions)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ActionLog):
            return NotImplemented
        return self._actions == other._actions

    def __hash__(self) -> int:
        return hash(self._actions)

    def __repr__(self) -> str:
        return f"ActionLog({len(self._actions)} actions)"

    def count(self, kind: ActionKind) -> int:
        return sum(1 for act in self._actions if act.kind is kind)

    def replay(self, values: Sequence[float], stop: Optional[int] = None) -> List[float]:
        """
        Return a copy of `values` with the first `stop` actions applied
        (all of them when `stop` is None).  `values` itself is untouched.
        """
        out = list(values)
        end = len(self._actions) if stop is None else stop
        for act in self._actions[:end]:
            act.apply(out)
        return out

    def to_list(self) -> List[Dict[str, Any]]:
        return [act.to_dict() for act in self._actions]
