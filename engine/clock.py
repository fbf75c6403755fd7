"""
clock.py — Pacing Clock
========================
The PlaybackController never sleeps.  Between two auto-advance steps it
asks a Clock to call it back later, and keeps the returned handle so
pause() can cancel the pending wait before the next frame renders.

    handle = clock.call_later(0.05, controller._advance)
    handle.cancel()              # the callback will not fire

AsyncioClock wraps an asyncio event loop (loop.call_later already
returns a cancellable TimerHandle).  LoopThread runs such a loop in a
daemon thread so a synchronous web server can hand calls to it; every
controller call goes through the loop, so the controller only ever
runs on one thread.
"""

import asyncio
import threading
from concurrent.futures import Future
from concurrent.futures import TimeoutError as CallTimeout
from typing import Any, Callable, Optional, Protocol


# ---------------------------------------------------------------------------
# Capability
# ---------------------------------------------------------------------------
class Cancellable(Protocol):
    def cancel(self) -> Any: ...


class Clock(Protocol):
    def call_later(self, delay: float, callback: Callable[[], None]) -> Cancellable: ...


# ---------------------------------------------------------------------------
# asyncio-backed clock
# ---------------------------------------------------------------------------
class AsyncioClock:
    """Clock backed by an asyncio event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop):
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return self._loop.call_later(max(0.0, delay), callback)


# ---------------------------------------------------------------------------
# Background event loop
# ---------------------------------------------------------------------------
class LoopThread:
    """
    Owns an asyncio loop running forever in a daemon thread.

    Usage:
        lt = LoopThread()
        lt.start()
        result = lt.call(controller.step_forward)   # runs on the loop thread
        lt.stop()
    """

    def __init__(self, name: str = "playback-loop"):
        self.loop: asyncio.AbstractEventLoop = asyncio.new_event_loop()
        self.clock = AsyncioClock(self.loop)
        self._name = name
        self._thread: Optional[threading.Thread] = None

    def start(self) -> None:
        if self._thread is not None:
            return
        self._thread = threading.Thread(target=self._run, name=self._name, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        if self._thread is None:
            return
        self.loop.call_soon_threadsafe(self.loop.stop)
        self._thread.join(timeout=2.0)
        if not self._thread.is_alive():
            self.loop.close()
        self._thread = None

    def call(self, fn: Callable[..., Any], *args, timeout: Optional[float] = 5.0) -> Any:
        """
        Run fn(*args) on the loop thread and return its result (or re-raise).
        Raises CallTimeout if the loop does not finish it within `timeout`
        seconds; a call that has not started by then is dropped.
        """
        fut: Future = Future()

        def runner():
            if not fut.set_running_or_notify_cancel():
                return
            try:
                fut.set_result(fn(*args))
            except Exception as exc:
                fut.set_exception(exc)

        self.loop.call_soon_threadsafe(runner)
        try:
            return fut.result(timeout=timeout)
        except CallTimeout:
            fut.cancel()
            raise

    def _run(self) -> None:
        asyncio.set_event_loop(self.loop)
        self.loop.run_forever()
