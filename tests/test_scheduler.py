import threading

from scheduler import ThreadingScheduler


def test_callback_runs_after_delay():
    fired = threading.Event()
    ThreadingScheduler().call_later(0.01, fired.set)
    assert fired.wait(timeout=2)


def test_cancelled_callback_never_runs():
    fired = threading.Event()
    handle = ThreadingScheduler().call_later(0.2, fired.set)
    handle.cancel()
    handle.cancel()
    assert handle.cancelled
    assert not fired.wait(timeout=0.4)
