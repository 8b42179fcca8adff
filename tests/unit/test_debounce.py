import threading
from screen_compare.services.debounce import Debouncer

class FakeTimer:
    created = []

    def __init__(self, interval, fn):
        self.interval = interval
        self.fn = fn
        self.started = False
        self.cancelled = False
        FakeTimer.created.append(self)

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

def _debouncer(calls, wait=0.05):
    FakeTimer.created = []
    return Debouncer(lambda: calls.append(1), wait, timer_factory=FakeTimer)

def test_burst_runs_once():
    calls = []
    d = _debouncer(calls)
    for _ in range(5):
        d.trigger()
    timers = FakeTimer.created
    assert len(timers) == 5 and all(t.cancelled for t in timers[:-1])
    assert timers[-1].interval == 0.05 and timers[-1].started
    timers[-1].fn()
    assert calls == [1] and not d.pending

def test_superseded_timer_is_ignored():
    calls = []
    d = _debouncer(calls)
    d.trigger()
    stale = FakeTimer.created[-1]
    d.trigger()
    stale.fn()  # fires even though it was cancelled
    assert calls == [] and d.pending
    FakeTimer.created[-1].fn()
    assert calls == [1]

def test_flush_runs_pending_once():
    calls = []
    d = _debouncer(calls)
    assert d.flush() is False
    d.trigger()
    d.trigger()
    assert d.flush() is True
    assert calls == [1]
    FakeTimer.created[-1].fn()
    assert calls == [1]

def test_cancel_drops_pending():
    calls = []
    d = _debouncer(calls)
    d.trigger()
    d.cancel()
    FakeTimer.created[-1].fn()
    assert calls == [] and not d.pending

def test_real_timer_fires():
    done = threading.Event()
    d = Debouncer(done.set, 0.01)
    d.trigger()
    assert done.wait(2.0)
