"""
merge.py — Merge Sort (top-down)
=================================
Split at the midpoint, sort left then right, then merge the two sorted
halves.  The merge is stable: on ties the left element goes first.

Merge overwrites positions by value rather than exchanging two live
positions, so every written slot records a SET carrying the value
written.  That includes the drain phase, which means even an already
sorted array produces a non-empty log (for n >= 2).
"""

from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from engine.recorder import ExchangeRecorder


PSEUDOCODE: List[str] = [
    "def merge_sort(a, l, r):",                     # 0
    "    if l >= r: return",                        # 1
    "    m ← (l + r) / 2",                          # 2
    "    merge_sort(a, l, m)",                      # 3
    "    merge_sort(a, m + 1, r)",                  # 4
    "    merge(a, l, m, r)",                        # 5
    "def merge(a, l, m, r):",                       # 6
    "    left ← a[l..m]; right ← a[m+1..r]",        # 7
    "    while both non-empty:",                    # 8
    "        a[k++] ← smaller head (left on tie)",  # 9
    "    copy the remaining elements",              # 10
]


def merge_sort(values: List[float], rec: "ExchangeRecorder") -> None:
    _sort(values, 0, len(values) - 1, rec)


def _sort(values: List[float], l: int, r: int, rec: "ExchangeRecorder") -> None:
    if l >= r:
        return
    m = (l + r) // 2
    _sort(values, l, m, rec)
    _sort(values, m + 1, r, rec)
    _merge(values, l, m, r, rec)


def _merge(values: List[float], l: int, m: int, r: int, rec: "ExchangeRecorder") -> None:
    left  = values[l:m + 1]
    right = values[m + 1:r + 1]
    i = j = 0
    k = l

    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            values[k] = left[i]
            i += 1
        else:
            values[k] = right[j]
            j += 1
        rec.write(k, values[k])
        k += 1

    # drain
    while i < len(left):
        values[k] = left[i]
        rec.write(k, values[k])
        i += 1
        k += 1
    while j < len(right):
        values[k] = right[j]
        rec.write(k, values[k])
        j += 1
        k += 1
