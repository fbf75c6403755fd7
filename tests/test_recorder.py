import pytest

from algorithms.action import Action, ActionKind, ActionLog
from engine import InvalidIndex, record_run
from engine.recorder import ExchangeRecorder


class TestExchangeRecorder:
    def test_records_in_order(self):
        rec = ExchangeRecorder(3)
        rec.swap(0, 2)
        rec.write(1, 42)
        rec.record(ActionKind.SWAP, 1, 0)
        log = rec.build()
        assert list(log) == [
            Action(ActionKind.SWAP, 0, 2),
            Action(ActionKind.SET, 1, 1, 42),
            Action(ActionKind.SWAP, 1, 0),
        ]

    @pytest.mark.parametrize("a,b", [(-1, 0), (0, 3), (3, 3)])
    def test_out_of_range(self, a, b):
        rec = ExchangeRecorder(3)
        with pytest.raises(InvalidIndex) as exc:
            rec.swap(a, b)
        assert isinstance(exc.value, IndexError)
        assert exc.value.length == 3

    def test_set_needs_single_index_and_value(self):
        rec = ExchangeRecorder(3)
        with pytest.raises(ValueError):
            rec.record(ActionKind.SET, 0, 1, 5)
        with pytest.raises(ValueError):
            rec.record(ActionKind.SET, 0, 0)

    def test_write_zero_is_allowed(self):
        rec = ExchangeRecorder(1)
        rec.write(0, 0)
        assert rec.build()[0].value == 0

    def test_sealed_after_build(self):
        rec = ExchangeRecorder(2)
        rec.swap(0, 1)
        log = rec.build()
        with pytest.raises(RuntimeError):
            rec.swap(0, 1)
        assert len(log) == 1


class TestActionLog:
    def test_swap_is_self_inverse(self):
        values = [1, 2, 3]
        act = Action(ActionKind.SWAP, 0, 2)
        act.apply(values)
        act.apply(values)
        assert values == [1, 2, 3]

    def test_replay_does_not_touch_input(self):
        log = ActionLog([Action(ActionKind.SWAP, 0, 1), Action(ActionKind.SET, 1, 1, 9)])
        src = [1, 2]
        assert log.replay(src, stop=1) == [2, 1]
        assert log.replay(src) == [2, 9]
        assert src == [1, 2]

    def test_to_list(self):
        log = ActionLog([Action(ActionKind.SWAP, 0, 1), Action(ActionKind.SET, 1, 1, 9)])
        assert log.to_list() == [
            {"kind": "swap", "a": 0, "b": 1},
            {"kind": "set", "a": 1, "b": 1, "value": 9},
        ]

    def test_immutable(self):
        log = ActionLog([Action(ActionKind.SWAP, 0, 1)])
        assert not hasattr(log, "append")
        with pytest.raises(TypeError):
            log[0] = Action(ActionKind.SWAP, 1, 0)  # type: ignore[index]


class TestRecordRun:
    def test_metrics(self):
        recording = record_run("merge", [5, 3, 4, 1])
        m = recording.metrics
        assert m.algo_key == "merge"
        assert m.algo_label == "Merge Sort"
        assert m.array_size == 4
        assert m.total_actions == 8
        assert m.writes == 8 and m.swaps == 0
        assert m.wall_time_ms >= 0

    def test_input_untouched(self):
        values = [3, 1, 2]
        record_run("bubble", values)
        assert values == [3, 1, 2]

    def test_unknown_algorithm(self):
        with pytest.raises(ValueError):
            record_run("bogo", [1])
