"""Event dispatch to the record consumer."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..core.errors import UnknownEventError
from ..core.types import EventKind

if TYPE_CHECKING:
    from ..core.types import RecordEvent
    from ..interfaces.consumer import RecordConsumer

logger = logging.getLogger(__name__)


def _child_added(consumer: RecordConsumer, event) -> None:
    consumer.child_added(event.key, event.snapshot, event.prev_key)


def _child_changed(consumer: RecordConsumer, event) -> None:
    consumer.child_changed(event.key, event.snapshot)


def _child_removed(consumer: RecordConsumer, event) -> None:
    consumer.child_removed(event.key, event.snapshot)


def _child_moved(consumer: RecordConsumer, event) -> None:
    consumer.child_moved(event.key, event.prev_key)


def _value(consumer: RecordConsumer, event) -> None:
    consumer.value(list(event.snapshots))


_ROUTES = {
    EventKind.CHILD_ADDED: _child_added,
    EventKind.CHILD_CHANGED: _child_changed,
    EventKind.CHILD_REMOVED: _child_removed,
    EventKind.CHILD_MOVED: _child_moved,
    EventKind.VALUE: _value,
}


class EventDispatcher:
    """Delivers derived events to a consumer, synchronously.

    Args:
        consumer: Receiver of the five event kinds
    """

    def __init__(self, consumer: RecordConsumer):
        self.consumer = consumer

    def notify(self, event: RecordEvent) -> None:
        """Route event to the consumer method for its kind.

        Raises:
            UnknownEventError: If event is not one of the record events
        """
        route = _ROUTES.get(getattr(event, "kind", None))
        if route is None:
            raise UnknownEventError(f"Invalid event {event!r}")  # noqa: TRY003

        logger.debug(f"Dispatching {event.kind.value}: {event!r}")
        route(self.consumer, event)
