"""Callback registry that can serve as a record consumer."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable
from typing import Any

from ..core.types import EventKind

logger = logging.getLogger(__name__)


class ListenerRegistry:
    """Fans each record event out to the callbacks registered for its kind.

    Implements the RecordConsumer protocol, so it can be handed directly to
    a WatchSession.

    Invariants:
        - Callbacks run in registration order
        - A callback registered twice for one kind runs twice
    """

    def __init__(self):
        self._listeners: dict[EventKind, list[Callable[..., Any]]] = defaultdict(list)

    def on(self, kind: EventKind | str, callback: Callable[..., Any]) -> Callable[..., Any]:
        """Register callback for kind and return it."""
        self._listeners[EventKind(kind)].append(callback)
        return callback

    def off(self, kind: EventKind | str, callback: Callable[..., Any] | None = None) -> None:
        """Remove callback for kind, or every callback for kind if None."""
        kind = EventKind(kind)
        if callback is None:
            self._listeners.pop(kind, None)
            return
        try:
            self._listeners[kind].remove(callback)
        except ValueError:
            logger.debug(f"Callback {callback!r} was not registered for {kind.value}")

    def listener_count(self, kind: EventKind | str) -> int:
        return len(self._listeners.get(EventKind(kind), ()))

    def handler(self, kind: EventKind | str) -> Callable[..., None]:
        """Return a callable that invokes every listener of kind."""
        kind = EventKind(kind)

        def fire(*args: Any) -> None:
            # Copy so listeners may unregister themselves while firing
            for callback in list(self._listeners.get(kind, ())):
                callback(*args)

        return fire

    def child_added(self, key, snapshot, prev_key) -> None:
        self.handler(EventKind.CHILD_ADDED)(key, snapshot, prev_key)

    def child_changed(self, key, snapshot) -> None:
        self.handler(EventKind.CHILD_CHANGED)(key, snapshot)

    def child_removed(self, key, snapshot) -> None:
        self.handler(EventKind.CHILD_REMOVED)(key, snapshot)

    def child_moved(self, key, prev_key) -> None:
        self.handler(EventKind.CHILD_MOVED)(key, prev_key)

    def value(self, snapshots) -> None:
        self.handler(EventKind.VALUE)(snapshots)
