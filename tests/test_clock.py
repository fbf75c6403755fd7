"""LoopThread: calls marshalled onto a background asyncio loop."""
import threading

import pytest

from engine import CallTimeout, LoopThread


@pytest.fixture
def lt():
    lt = LoopThread(name="test-loop")
    lt.start()
    yield lt
    lt.stop()


class TestCall:
    def test_runs_on_loop_thread(self, lt):
        name = lt.call(lambda: threading.current_thread().name)
        assert name == "test-loop"

    def test_returns_result(self, lt):
        assert lt.call(sum, [1, 2, 3]) == 6

    def test_reraises(self, lt):
        def boom():
            raise ValueError("bad")

        with pytest.raises(ValueError, match="bad"):
            lt.call(boom)

    def test_timeout_drops_queued_call(self, lt):
        release = threading.Event()
        ran = []
        lt.loop.call_soon_threadsafe(release.wait, 2.0)

        with pytest.raises(CallTimeout):
            lt.call(ran.append, "late", timeout=0.05)

        release.set()
        lt.call(lambda: None)
        assert ran == []


class TestLifecycle:
    def test_stop_closes_loop(self):
        lt = LoopThread()
        lt.start()
        lt.stop()
        assert lt.loop.is_closed()
        lt.stop()
