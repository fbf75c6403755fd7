"""
bubble.py — Bubble Sort
========================
Classic adjacent-pair passes.  There is deliberately no early exit when
a pass makes no swaps: the outer loop always runs n-1 times, so the
number of comparisons is fixed for a given n.
"""

from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from engine.recorder import ExchangeRecorder


PSEUDOCODE: List[str] = [
    "def bubble_sort(a):",                          # 0
    "    for i in 0 .. n-2:",                       # 1
    "        for j in 0 .. n-i-2:",                 # 2
    "            if a[j] > a[j+1]:",                # 3
    "                swap(a[j], a[j+1])",           # 4
]


def bubble_sort(values: List[float], rec: "ExchangeRecorder") -> None:
    """Sorts `values` in place, recording one SWAP(j, j+1) per inversion found."""
    n = len(values)
    for i in range(n - 1):
        for j in range(n - i - 1):
            if values[j] > values[j + 1]:
                rec.swap(j, j + 1)
                values[j], values[j + 1] = values[j + 1], values[j]
