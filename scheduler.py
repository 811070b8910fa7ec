from __future__ import annotations

import threading
from typing import Callable, Protocol


class TimerHandle(Protocol):
    def cancel(self) -> None: ...

    @property
    def cancelled(self) -> bool: ...


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...


class ThreadTimerHandle:
    def __init__(self, timer: threading.Timer):
        self._timer = timer
        self._cancelled = False

    def cancel(self) -> None:
        # Idempotent; cancelling a timer that already fired is a no-op
        self._cancelled = True
        self._timer.cancel()

    @property
    def cancelled(self) -> bool:
        return self._cancelled


class ThreadingScheduler:
    """Runs callbacks on a daemon ``threading.Timer`` thread."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> ThreadTimerHandle:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        handle = ThreadTimerHandle(timer)
        timer.start()
        return handle
