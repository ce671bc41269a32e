"""In-memory reference implementation.

Provides an explicitly driven master reference and per-child value streams
that honour the ordering contract of the backend reference abstraction.
Used by the test suite and the demo driver.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..core.types import OrderingEvent, RecordKey

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MemorySnapshot:
    """Snapshot of one child's value."""

    key: RecordKey
    value: Any


class MemoryChildReference:
    """Value stream for a single child.

    Args:
        key: Child key
        path: Path of the child, used for display only
    """

    def __init__(self, key: RecordKey, path: str):
        self.key = key
        self.path = path
        self._watchers: list[Callable[[MemorySnapshot], None]] = []

    def __str__(self) -> str:
        return self.path

    @property
    def watcher_count(self) -> int:
        return len(self._watchers)

    def watch_value(self, callback: Callable[[MemorySnapshot], None]) -> None:
        self._watchers.append(callback)

    def unwatch_value(self, callback: Callable[[MemorySnapshot], None]) -> None:
        try:
            self._watchers.remove(callback)
        except ValueError:
            logger.debug(f"Unwatch of unknown callback on {self.path}")

    def push(self, value: Any) -> MemorySnapshot:
        """Publish a new value to every watcher and return its snapshot."""
        snap = MemorySnapshot(self.key, value)
        for callback in list(self._watchers):
            callback(snap)
        return snap


class MemoryReference:
    """Master ordering reference backed by plain Python containers.

    The caller drives it: emit_added / emit_removed / emit_moved publish
    ordering events, emit_loaded fires (and clears) the one-shot LOADED
    listeners, and child(key).push(value) publishes values.

    Args:
        path: Display path of the reference
    """

    def __init__(self, path: str = "/records"):
        self.path = path.rstrip("/") or "/"
        self._listeners: dict[OrderingEvent, list[Callable[..., None]]] = defaultdict(list)
        self._once: dict[OrderingEvent, list[Callable[..., None]]] = defaultdict(list)
        self._children: dict[RecordKey, MemoryChildReference] = {}

    def __str__(self) -> str:
        return self.path

    def subscribe(self, event: OrderingEvent, callback: Callable[..., None]) -> None:
        self._listeners[event].append(callback)

    def subscribe_once(self, event: OrderingEvent, callback: Callable[..., None]) -> None:
        self._once[event].append(callback)

    def unsubscribe(self, event: OrderingEvent, callback: Callable[..., None]) -> None:
        for registry in (self._listeners, self._once):
            if callback in registry.get(event, ()):
                registry[event].remove(callback)

    def listener_count(self, event: OrderingEvent) -> int:
        """Number of persistent plus one-shot listeners for event."""
        return len(self._listeners.get(event, ())) + len(self._once.get(event, ()))

    def child(self, key: RecordKey) -> MemoryChildReference:
        """Return the (cached) value stream for key."""
        ref = self._children.get(key)
        if ref is None:
            ref = MemoryChildReference(key, f"{self.path.rstrip('/')}/{key}")
            self._children[key] = ref
        return ref

    def emit_added(self, key: RecordKey, prev_key: RecordKey | None = None) -> None:
        self._emit(OrderingEvent.CHILD_ADDED, key, prev_key)

    def emit_removed(self, key: RecordKey, prev_key: RecordKey | None = None) -> None:
        self._emit(OrderingEvent.CHILD_REMOVED, key, prev_key)

    def emit_moved(self, key: RecordKey, prev_key: RecordKey | None = None) -> None:
        self._emit(OrderingEvent.CHILD_MOVED, key, prev_key)

    def emit_loaded(self) -> None:
        """Fire the one-shot LOADED listeners."""
        callbacks = self._once.pop(OrderingEvent.LOADED, [])
        for callback in callbacks:
            callback()
        for callback in list(self._listeners.get(OrderingEvent.LOADED, ())):
            callback()

    def _emit(self, event: OrderingEvent, *args: Any) -> None:
        for callback in list(self._listeners.get(event, ())):
            callback(*args)
