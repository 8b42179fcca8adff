from __future__ import annotations
import threading
from typing import Callable, Optional

from screen_compare.utils.logging import logger

TimerFactory = Callable[[float, Callable[[], None]], "threading.Timer"]


def _default_timer(interval: float, fn: Callable[[], None]) -> threading.Timer:
    timer = threading.Timer(interval, fn)
    timer.daemon = True
    return timer


class Debouncer:
    """
    Coalesce a burst of trigger() calls into one call of `fn`.
    - Each trigger supersedes the previously scheduled run.
    - A superseded timer that still fires is ignored (generation check).
    - flush() runs a pending call immediately.
    """

    def __init__(self, fn: Callable[[], None], wait_s: float,
                 timer_factory: Optional[TimerFactory] = None):
        self._fn = fn
        self.wait_s = max(0.0, wait_s)
        self._timer_factory = timer_factory or _default_timer
        self._lock = threading.Lock()
        self._timer = None
        self._generation = 0
        self._pending = False

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._pending

    def trigger(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            generation = self._generation
            self._pending = True
            self._timer = self._timer_factory(self.wait_s, lambda: self._fire(generation))
            self._timer.start()

    def _fire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation or not self._pending:
                return
            self._pending = False
            self._timer = None
        try:
            self._fn()
        except Exception as e:
            logger.error("debounced call failed: %s", e, exc_info=True)

    def flush(self) -> bool:
        """Run the pending call now. Returns False if nothing was pending."""
        with self._lock:
            if not self._pending:
                return False
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._generation += 1
            self._pending = False
        self._fn()
        return True

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._generation += 1
            self._pending = False
