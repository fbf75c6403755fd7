"""Sorting algorithms: exact logs on hand-traced inputs and sort/permutation properties."""
import random

import pytest

from algorithms import REGISTRY, get_algorithm, list_algorithms, algorithms_by_tag
from algorithms.action import Action, ActionKind
from engine.recorder import ExchangeRecorder

ALGOS = list(REGISTRY)


def S(a, b):
    return Action(ActionKind.SWAP, a, b)


def W(k, value):
    return Action(ActionKind.SET, k, k, value)


def run(key, values):
    work = list(values)
    rec = ExchangeRecorder(len(work))
    get_algorithm(key).fn(work, rec)
    return work, rec.build()


class TestHandTracedLogs:
    def test_bubble(self):
        work, log = run("bubble", [5, 3, 4, 1])
        assert list(log) == [S(0, 1), S(1, 2), S(2, 3), S(1, 2), S(0, 1)]
        assert work == [1, 3, 4, 5]
        assert log.replay([5, 3, 4, 1]) == [1, 3, 4, 5]

    def test_insertion(self):
        _, log = run("insertion", [5, 3, 4, 1])
        assert list(log) == [S(1, 0), S(2, 1), S(3, 2), S(2, 1), S(1, 0)]

    def test_selection_swaps_only_when_min_moves(self):
        _, log = run("selection", [5, 3, 4, 1])
        assert list(log) == [S(0, 3)]

    def test_selection_first_seen_minimum_on_ties(self):
        _, log = run("selection", [2, 1, 1])
        # index 1 is the first-seen minimum; then [1, 2, 1] → swap(1, 2)
        assert list(log) == [S(0, 1), S(1, 2)]

    def test_quick_records_self_swaps_and_pivot(self):
        _, log = run("quick", [5, 3, 4, 1])
        assert list(log) == [S(0, 3), S(1, 1), S(2, 2), S(3, 3), S(1, 1), S(2, 2)]

    def test_merge_writes_by_value(self):
        _, log = run("merge", [5, 3, 4, 1])
        assert list(log) == [
            W(0, 3), W(1, 5),
            W(2, 1), W(3, 4),
            W(0, 1), W(1, 3), W(2, 4), W(3, 5),
        ]
        assert all(act.a == act.b for act in log)

    def test_merge_is_stable_left_first(self):
        _, log = run("merge", [2, 2])
        assert list(log) == [W(0, 2), W(1, 2)]

    def test_shell(self):
        _, log = run("shell", [5, 3, 4, 1])
        assert list(log) == [S(2, 0), S(3, 1), S(1, 0), S(3, 2), S(2, 1)]


class TestProperties:
    @pytest.mark.parametrize("key", ALGOS)
    @pytest.mark.parametrize("seed", range(8))
    def test_log_sorts_and_preserves_multiset(self, key, seed):
        rng = random.Random(seed)
        values = [rng.randrange(50) for _ in range(rng.randrange(0, 40))]
        work, log = run(key, values)
        replayed = log.replay(values)
        assert replayed == sorted(values)
        assert sorted(replayed) == sorted(values)
        assert work == replayed

    @pytest.mark.parametrize("key", ALGOS)
    def test_empty_and_single(self, key):
        assert len(run(key, [])[1]) == 0
        assert len(run(key, [7])[1]) == 0

    @pytest.mark.parametrize("key", ["insertion", "selection", "bubble", "shell"])
    def test_sorted_input_has_no_swaps(self, key):
        _, log = run(key, list(range(20)))
        assert len(log) == 0

    @pytest.mark.parametrize("n,expected", [(2, 2), (4, 8), (8, 24), (5, 12)])
    def test_merge_always_rewrites(self, n, expected):
        _, log = run("merge", list(range(n)))
        assert len(log) == expected
        assert log.count(ActionKind.SWAP) == 0

    @pytest.mark.parametrize("key", ALGOS)
    def test_deterministic(self, key):
        values = [9, 1, 8, 2, 7, 3, 6, 4, 5, 5]
        assert run(key, values)[1] == run(key, values)[1]

    def test_quick_handles_long_sorted_input(self):
        values = list(range(1200))
        work, log = run("quick", values)
        assert work == values
        assert len(log) > 0


class TestRegistry:
    def test_all_six_registered(self):
        assert set(REGISTRY) == {"insertion", "selection", "bubble", "quick", "merge", "shell"}
        assert [a.key for a in list_algorithms()] == ALGOS

    def test_unknown(self):
        assert get_algorithm("bogo") is None

    def test_tags_and_flags(self):
        assert {a.key for a in algorithms_by_tag("divide-and-conquer")} == {"quick", "merge"}
        assert get_algorithm("merge").stable and not get_algorithm("merge").in_place
        assert all(a.pseudocode for a in list_algorithms())
