"""
selection.py — Selection Sort
==============================
For each position i, scan the unsorted suffix for its minimum and swap
it into place.  Comparison is strictly-less, so the first-seen minimum
wins ties.  No event is recorded when the minimum is already at i.
"""

from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from engine.recorder import ExchangeRecorder


PSEUDOCODE: List[str] = [
    "def selection_sort(a):",                       # 0
    "    for i in 0 .. n-1:",                       # 1
    "        min ← i",                              # 2
    "        for j in i+1 .. n-1:",                 # 3
    "            if a[j] < a[min]: min ← j",        # 4
    "        if min ≠ i:",                          # 5
    "            swap(a[i], a[min])",               # 6
]


def selection_sort(values: List[float], rec: "ExchangeRecorder") -> None:
    n = len(values)
    for i in range(n):
        smallest = i
        for j in range(i + 1, n):
            if values[j] < values[smallest]:
                smallest = j
        if smallest != i:
            rec.swap(i, smallest)
            values[i], values[smallest] = values[smallest], values[i]
