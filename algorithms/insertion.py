"""
insertion.py — Insertion Sort
==============================
Grows a sorted prefix one element at a time.  The new element is
walked left, one adjacent SWAP per shift, while its left neighbour is
strictly greater (so equal keys never cross: stable).
"""

from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from engine.recorder import ExchangeRecorder


PSEUDOCODE: List[str] = [
    "def insertion_sort(a):",                       # 0
    "    for i in 1 .. n-1:",                       # 1
    "        j ← i",                                # 2
    "        while j > 0 and a[j] < a[j-1]:",       # 3
    "            swap(a[j], a[j-1])",               # 4
    "            j ← j - 1",                        # 5
]


def insertion_sort(values: List[float], rec: "ExchangeRecorder") -> None:
    """
    Sorts `values` in place, recording one SWAP(j, j-1) per shift.

    Args:
        values : Working copy of the array.
        rec    : Recorder that receives the exchange events.
    """
    for i in range(1, len(values)):
        j = i
        while j > 0 and values[j] < values[j - 1]:
            rec.swap(j, j - 1)
            values[j], values[j - 1] = values[j - 1], values[j]
            j -= 1
