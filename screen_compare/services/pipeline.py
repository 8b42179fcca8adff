"""
Validation and recompute pipeline.
Watches a ScreenCollection and publishes either the derived results for every entry
or an error message, never a partial list.
"""
from __future__ import annotations
import threading
from typing import Callable, Iterable, List, Optional

from screen_compare.services.collection import ScreenCollection
from screen_compare.services.debounce import Debouncer, TimerFactory
from screen_compare.services.geometry import derive
from screen_compare.utils.fields import presence_errors, value_errors
from screen_compare.utils.logging import logger
from screen_compare.utils.typing import (
    CollectionState, PipelineState, PipelineStatus, ScreenSpec, ValidationResult,
)

FIELD_ERRORS_MESSAGE = "Please fix the highlighted fields."
NON_POSITIVE_MESSAGE = "All screens must have positive diagonal and aspect ratio values."

DEFAULT_DEBOUNCE_S = 0.05

StateListener = Callable[[PipelineState], None]


def validate(entries: Iterable[ScreenSpec]) -> ValidationResult:
    """
    Collection-wide check. Missing or non-numeric fields win over non-positive values
    so the two messages are never mixed up.
    """
    has_field_errors = False
    has_value_errors = False
    for spec in entries:
        if presence_errors(spec):
            has_field_errors = True
        elif value_errors(spec):
            has_value_errors = True
    if has_field_errors:
        return ValidationResult.invalid(FIELD_ERRORS_MESSAGE)
    if has_value_errors:
        return ValidationResult.invalid(NON_POSITIVE_MESSAGE)
    return ValidationResult.ok()


class RecomputePipeline:
    """Keeps derived screens in step with a ScreenCollection."""

    def __init__(self, collection: ScreenCollection,
                 debounce_s: float = DEFAULT_DEBOUNCE_S,
                 timer_factory: Optional[TimerFactory] = None,
                 compute_now: bool = True):
        self.collection = collection
        self._lock = threading.RLock()
        self._state = PipelineState(PipelineStatus.PENDING)
        self._listeners: List[StateListener] = []
        self._debouncer = Debouncer(self.recompute, debounce_s, timer_factory)
        self._unsubscribe = collection.subscribe(self._on_change)
        if compute_now:
            self.recompute()

    @property
    def state(self) -> PipelineState:
        with self._lock:
            return self._state

    @property
    def pending(self) -> bool:
        return self._debouncer.pending

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        with self._lock:
            self._listeners.append(listener)

        def _unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)
        return _unsubscribe

    def _on_change(self, _state: CollectionState) -> None:
        self.schedule()

    def schedule(self) -> None:
        """Debounced recompute; a burst of calls runs once with the latest entries."""
        self._debouncer.trigger()

    def flush(self) -> bool:
        """Run a scheduled recompute right away (blur / submit)."""
        return self._debouncer.flush()

    def recompute(self) -> PipelineState:
        """Validate every entry and publish the outcome. Safe to call repeatedly."""
        with self._lock:
            entries = self.collection.snapshot().entries
            result = validate(entries)
            revision = self._state.revision + 1
            if result.valid:
                state = PipelineState(
                    PipelineStatus.VALID,
                    results=tuple(derive(spec) for spec in entries),
                    revision=revision,
                )
            else:
                state = PipelineState(PipelineStatus.INVALID, error=result.message, revision=revision)
            self._state = state
            listeners = list(self._listeners)

        if state.is_valid:
            logger.info("pipeline: published %d screens (rev %d)", len(state.results), revision)
        else:
            logger.info("pipeline: invalid (rev %d): %s", revision, state.error)
        for listener in listeners:
            try:
                listener(state)
            except Exception as e:
                logger.error("pipeline listener %r failed: %s", listener, e, exc_info=True)
        return state

    def close(self) -> None:
        self._debouncer.cancel()
        self._unsubscribe()
