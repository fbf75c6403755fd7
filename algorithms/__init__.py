"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every sorting algorithm the visualizer knows.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bubble": AlgoInfo(key, label, fn, pseudocode, tags, stable, …),
        …
    }

Every algorithm is a plain function `fn(values, recorder) -> None` that
sorts its working copy in place and records exchange events as it goes.
Adding a new one: write the function, add one entry here.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Dict, Optional

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.insertion import insertion_sort as _insertion, PSEUDOCODE as _ins_pc
from algorithms.selection import selection_sort as _selection, PSEUDOCODE as _sel_pc
from algorithms.bubble    import bubble_sort    as _bubble,    PSEUDOCODE as _bub_pc
from algorithms.quick     import quick_sort     as _quick,     PSEUDOCODE as _qck_pc
from algorithms.merge     import merge_sort     as _merge,     PSEUDOCODE as _mrg_pc
from algorithms.shell     import shell_sort     as _shell,     PSEUDOCODE as _shl_pc


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                    # registry key, e.g. "bubble"
    label:            str                    # human label, e.g. "Bubble Sort"
    fn:               Callable               # fn(values, recorder) -> None
    pseudocode:       List[str]              # lines for the side-panel
    tags:             List[str] = field(default_factory=list)   # e.g. ["comparison", "quadratic"]
    stable:           bool     = False       # equal keys keep their order?
    in_place:         bool     = True        # False for merge (writes from buffers)
    complexity_time:  str      = ""          # e.g. "O(n²)"
    complexity_space: str      = ""          # e.g. "O(1)"
    description:      str      = ""          # one-liner for the UI card


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "insertion": AlgoInfo(
        key="insertion", label="Insertion Sort", fn=_insertion, pseudocode=_ins_pc,
        tags=["comparison", "quadratic", "adaptive"],
        stable=True,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Walks each new element left until it fits. Fast on nearly sorted data.",
    ),

    "selection": AlgoInfo(
        key="selection", label="Selection Sort", fn=_selection, pseudocode=_sel_pc,
        tags=["comparison", "quadratic"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Picks the smallest remaining element each pass. At most n-1 swaps.",
    ),

    "bubble": AlgoInfo(
        key="bubble", label="Bubble Sort", fn=_bubble, pseudocode=_bub_pc,
        tags=["comparison", "quadratic"],
        stable=True,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Swaps adjacent inversions; the largest value bubbles to the end each pass.",
    ),

    "quick": AlgoInfo(
        key="quick", label="Quick Sort", fn=_quick, pseudocode=_qck_pc,
        tags=["comparison", "divide-and-conquer"],
        complexity_time="O(n log n) avg, O(n²) worst", complexity_space="O(log n)",
        description="Lomuto partition around the last element, then sorts each side.",
    ),

    "merge": AlgoInfo(
        key="merge", label="Merge Sort", fn=_merge, pseudocode=_mrg_pc,
        tags=["comparison", "divide-and-conquer"],
        stable=True, in_place=False,
        complexity_time="O(n log n)", complexity_space="O(n)",
        description="Splits in half, sorts both halves, merges them back by value.",
    ),

    "shell": AlgoInfo(
        key="shell", label="Shell Sort", fn=_shell, pseudocode=_shl_pc,
        tags=["comparison", "gapped"],
        complexity_time="O(n²) worst (halving gaps)", complexity_space="O(1)",
        description="Insertion sort over shrinking gaps. Moves far-away elements early.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
]
