from typing import Callable, Iterable, List

import pytest
from fastapi.testclient import TestClient

from main import app
from session import SessionStore, get_store


class ScriptedSampler:
    """Returns the given values in order, ignoring the requested range."""

    def __init__(self, values: Iterable[int]):
        self.values = list(values)
        self.calls: List[tuple] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        return self.values.pop(0)


class LowSampler:
    """Always draws the lowest value; keeps problems predictable in session tests."""

    def randint(self, a: int, b: int) -> int:
        return a


class ManualHandle:
    def __init__(self, scheduler: "ManualScheduler", delay: float, callback: Callable[[], None]):
        self.scheduler = scheduler
        self.delay = delay
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Collects deferred callbacks; tests fire them explicitly."""

    def __init__(self):
        self.handles: List[ManualHandle] = []

    def call_later(self, delay: float, callback: Callable[[], None]) -> ManualHandle:
        h = ManualHandle(self, delay, callback)
        self.handles.append(h)
        return h

    def pending(self) -> List[ManualHandle]:
        return [h for h in self.handles if not h.cancelled and not h.fired]

    def fire_all(self, include_cancelled: bool = False) -> int:
        # include_cancelled simulates a timer thread that raced past cancel()
        n = 0
        for h in list(self.handles):
            if h.fired or (h.cancelled and not include_cancelled):
                continue
            h.fired = True
            h.callback()
            n += 1
        return n


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def store(scheduler):
    s = SessionStore(scheduler=scheduler, sampler=LowSampler(), delay=2.0)
    yield s
    s.close_all()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_store, None)
