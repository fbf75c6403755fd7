"""
shell.py — Shell Sort
======================
Gapped insertion sort with the halving gap sequence n//2, n//4, …, 1.
Each shift is recorded as one SWAP(j, j-gap), mirroring insertion sort:
carrying the element being placed down by swaps lands it exactly where
the shift-and-drop formulation would.
"""

from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from engine.recorder import ExchangeRecorder


PSEUDOCODE: List[str] = [
    "def shell_sort(a):",                           # 0
    "    gap ← n / 2",                              # 1
    "    while gap > 0:",                           # 2
    "        for i in gap .. n-1:",                 # 3
    "            j ← i",                            # 4
    "            while j ≥ gap and a[j-gap] > a[j]:",  # 5
    "                swap(a[j], a[j-gap])",         # 6
    "                j ← j - gap",                  # 7
    "        gap ← gap / 2",                        # 8
]


def shell_sort(values: List[float], rec: "ExchangeRecorder") -> None:
    n = len(values)
    gap = n // 2
    while gap > 0:
        for i in range(gap, n):
            j = i
            while j >= gap and values[j - gap] > values[j]:
                rec.swap(j, j - gap)
                values[j], values[j - gap] = values[j - gap], values[j]
                j -= gap
        gap //= 2
