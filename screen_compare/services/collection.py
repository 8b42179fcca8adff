"""
Ordered, capped collection of screen specifications.
Single source of truth for entry data; observers only ever see immutable snapshots.
"""
from __future__ import annotations
import itertools
import threading
from dataclasses import replace
from typing import Any, Callable, Dict, List, Mapping, Optional

from screen_compare.services.palette import color_for_index
from screen_compare.utils.errors import ErrorKind
from screen_compare.utils.fields import coerce, is_hex_color
from screen_compare.utils.logging import logger
from screen_compare.utils.typing import (
    EDITABLE_FIELDS, NUMERIC_FIELDS, CollectionState, ScreenSpec, StoreResult,
)

MAX_SCREENS = 6
MIN_SCREENS = 1

DEFAULT_DIAGONAL = 24.0
DEFAULT_ASPECT = (16.0, 9.0)

# (diagonal, aspect_x, aspect_y) for the entries restored by reset()
INITIAL_SCREENS = (
    (27.0, 16.0, 9.0),
    (34.0, 21.0, 9.0),
)

Listener = Callable[[CollectionState], None]


class ScreenCollection:
    """Editable list of ScreenSpec with stable ids and a 1..MAX_SCREENS size bound."""

    def __init__(self, max_screens: int = MAX_SCREENS):
        self.max_screens = max_screens
        self._ids = itertools.count(1)
        self._listeners: List[Listener] = []
        self._lock = threading.RLock()
        self._entries: List[ScreenSpec] = self._initial_entries()

    def _initial_entries(self) -> List[ScreenSpec]:
        return [
            ScreenSpec(
                id=next(self._ids),
                diagonal=diagonal,
                aspect_x=aspect_x,
                aspect_y=aspect_y,
                color=color_for_index(i),
            )
            for i, (diagonal, aspect_x, aspect_y) in enumerate(INITIAL_SCREENS)
        ]

    # --- reads ---

    @property
    def entries(self) -> CollectionState:
        return self.snapshot()

    def snapshot(self) -> CollectionState:
        with self._lock:
            return CollectionState(tuple(replace(e) for e in self._entries))

    def get(self, screen_id: int) -> Optional[ScreenSpec]:
        with self._lock:
            for e in self._entries:
                if e.id == screen_id:
                    return replace(e)
        return None

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    @property
    def can_add(self) -> bool:
        return len(self) < self.max_screens

    @property
    def can_remove(self) -> bool:
        return len(self) > MIN_SCREENS

    # --- observers ---

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener. Returns a function that unsubscribes it."""
        with self._lock:
            self._listeners.append(listener)

        def _unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)
        return _unsubscribe

    def _notify(self, state: CollectionState) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(state)
            except Exception as e:
                logger.error("collection listener %r failed: %s", listener, e, exc_info=True)

    def _commit(self, entries: List[ScreenSpec]) -> CollectionState:
        # caller holds the lock; listeners run after it is released
        self._entries = entries
        return CollectionState(tuple(replace(e) for e in entries))

    # --- mutations ---

    def add(self, spec: Optional[ScreenSpec] = None) -> StoreResult:
        """
        Append an entry. Without a spec the defaults are 24", 16:9 and the next palette color.
        A supplied spec keeps its fields but always gets a fresh id.
        """
        with self._lock:
            count = len(self._entries)
            if count >= self.max_screens:
                msg = f"You can compare at most {self.max_screens} screens."
                logger.info("collection.add rejected: %d/%d screens", count, self.max_screens)
                return StoreResult(False, error_kind=ErrorKind.CAPACITY_EXCEEDED, error=msg)

            if spec is None:
                entry = ScreenSpec(
                    id=next(self._ids),
                    diagonal=DEFAULT_DIAGONAL,
                    aspect_x=DEFAULT_ASPECT[0],
                    aspect_y=DEFAULT_ASPECT[1],
                    color=color_for_index(count),
                )
            else:
                if spec.color and not is_hex_color(spec.color):
                    logger.debug("collection.add: bad color %r", spec.color)
                    return StoreResult(False, error_kind=ErrorKind.FIELD_INVALID,
                                       error=f"Invalid color: {spec.color!r}")
                entry = ScreenSpec(
                    id=next(self._ids),
                    diagonal=coerce(spec.diagonal),
                    aspect_x=coerce(spec.aspect_x),
                    aspect_y=coerce(spec.aspect_y),
                    color=spec.color or color_for_index(count),
                )
            state = self._commit(self._entries + [entry])
        logger.info("collection.add: screen %d (%d total)", entry.id, len(state))
        self._notify(state)
        return StoreResult(True, entry=replace(entry))

    def remove(self, screen_id: int) -> StoreResult:
        """Delete an entry by id. The last remaining entry is never removed."""
        with self._lock:
            index = self._index_of(screen_id)
            if index is None:
                logger.debug("collection.remove: unknown id %s", screen_id)
                return StoreResult(False, error_kind=ErrorKind.NOT_FOUND,
                                   error=f"Screen {screen_id} not found.")
            if len(self._entries) <= MIN_SCREENS:
                logger.debug("collection.remove: refusing to remove the last screen")
                return StoreResult(False, error_kind=ErrorKind.MINIMUM_ENTRIES,
                                   error="At least one screen is required.")
            removed = self._entries[index]
            state = self._commit(self._entries[:index] + self._entries[index + 1:])
        logger.info("collection.remove: screen %d (%d left)", removed.id, len(state))
        self._notify(state)
        return StoreResult(True, entry=replace(removed))

    def update(self, screen_id: int, partial: Mapping[str, Any]) -> StoreResult:
        """Replace the named fields of one entry; the others are left as they are."""
        unknown = sorted(set(partial) - set(EDITABLE_FIELDS))
        if unknown:
            logger.debug("collection.update: unknown fields %s", unknown)
            return StoreResult(False, error_kind=ErrorKind.FIELD_INVALID,
                               error=f"Unknown field(s): {', '.join(unknown)}")

        if "color" in partial and not is_hex_color(partial["color"]):
            logger.debug("collection.update: bad color %r", partial["color"])
            return StoreResult(False, error_kind=ErrorKind.FIELD_INVALID,
                               error=f"Invalid color: {partial['color']!r}")

        changes: Dict[str, Any] = {}
        for name, raw in partial.items():
            changes[name] = coerce(raw) if name in NUMERIC_FIELDS else raw

        with self._lock:
            index = self._index_of(screen_id)
            if index is None:
                logger.debug("collection.update: unknown id %s", screen_id)
                return StoreResult(False, error_kind=ErrorKind.NOT_FOUND,
                                   error=f"Screen {screen_id} not found.")
            updated = replace(self._entries[index], **changes)
            entries = list(self._entries)
            entries[index] = updated
            state = self._commit(entries)
        logger.debug("collection.update: screen %d %s", screen_id, changes)
        self._notify(state)
        return StoreResult(True, entry=replace(updated))

    def update_field(self, screen_id: int, name: str, raw: Any) -> StoreResult:
        return self.update(screen_id, {name: raw})

    def reset(self) -> CollectionState:
        """Restore the default entries. Ids keep counting up and are never reused."""
        with self._lock:
            state = self._commit(self._initial_entries())
        logger.info("collection.reset: %d screens", len(state))
        self._notify(state)
        return state

    def _index_of(self, screen_id: int) -> Optional[int]:
        for i, e in enumerate(self._entries):
            if e.id == screen_id:
                return i
        return None
