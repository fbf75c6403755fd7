"""
quick.py — Quick Sort (Lomuto partition)
=========================================
Pivot is the last element of the current subrange.  Every element that
is strictly less than the pivot is swapped into the low partition (the
swap is recorded even when it is a self swap, i == j), then one final
SWAP puts the pivot between the two partitions.

Subranges are processed left first, then right.  An explicit stack is
used instead of recursion; pushing the right half before the left one
keeps exactly the recursive visiting order, without tripping the
interpreter's recursion limit on already-sorted input.
"""

from typing import List, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from engine.recorder import ExchangeRecorder


PSEUDOCODE: List[str] = [
    "def quick_sort(a, low, high):",                # 0
    "    if low < high:",                           # 1
    "        p ← partition(a, low, high)",          # 2
    "        quick_sort(a, low, p - 1)",            # 3
    "        quick_sort(a, p + 1, high)",           # 4
    "def partition(a, low, high):",                 # 5
    "    pivot ← a[high]; i ← low - 1",             # 6
    "    for j in low .. high-1:",                  # 7
    "        if a[j] < pivot:",                     # 8
    "            i ← i + 1; swap(a[i], a[j])",      # 9
    "    swap(a[i+1], a[high])",                    # 10
    "    return i + 1",                             # 11
]


def quick_sort(values: List[float], rec: "ExchangeRecorder") -> None:
    """
    Sorts `values` in place.

    Args:
        values : Working copy of the array.
        rec    : Recorder that receives the exchange events.
    """
    stack: List[Tuple[int, int]] = [(0, len(values) - 1)]
    while stack:
        low, high = stack.pop()
        if low >= high:
            continue
        p = _partition(values, low, high, rec)
        # LIFO: left half is popped (and fully processed) first
        stack.append((p + 1, high))
        stack.append((low, p - 1))


def _partition(values: List[float], low: int, high: int, rec: "ExchangeRecorder") -> int:
    pivot = values[high]
    i = low - 1
    for j in range(low, high):
        if values[j] < pivot:
            i += 1
            rec.swap(i, j)
            values[i], values[j] = values[j], values[i]
    rec.swap(i + 1, high)
    values[i + 1], values[high] = values[high], values[i + 1]
    return i + 1
