"""Watch session - owns the subscription lifecycle of one record list.

Routes the master reference's ordering events into a RecordReconciler.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .reconciler import RecordReconciler
from .types import OrderingEvent

if TYPE_CHECKING:
    from ..interfaces.consumer import RecordConsumer
    from ..interfaces.reference import OrderingReference
    from .config import RecordListConfig

logger = logging.getLogger(__name__)


class WatchSession:
    """Start/stop watching a master reference.

    Args:
        reference: Master ordering reference
        consumer: Receiver of derived record events
        config: Optional record list configuration

    Public API:
        - start(): Subscribe to ordering events (idempotent)
        - stop(): Unsubscribe everything and reset the records (idempotent)

    Invariants:
        - After stop() returns no callback can mutate the records
    """

    def __init__(
        self,
        reference: OrderingReference,
        consumer: RecordConsumer,
        config: RecordListConfig | None = None,
    ):
        self.reference = reference
        self.records = RecordReconciler(reference, consumer, config)
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> WatchSession:
        """Begin loading records from the master reference."""
        if self._running:
            return self

        logger.info(f"Loading records from master reference {self.records.label}")
        self._running = True
        self.reference.subscribe(OrderingEvent.CHILD_ADDED, self._add)
        self.reference.subscribe(OrderingEvent.CHILD_REMOVED, self._remove)
        self.reference.subscribe(OrderingEvent.CHILD_MOVED, self._move)
        # All initial child_added events are delivered before LOADED fires
        self.reference.subscribe_once(OrderingEvent.LOADED, self.records.ordering_loaded)
        return self

    def stop(self) -> WatchSession:
        """Stop monitoring and drop every record."""
        if not self._running:
            return self

        logger.info(f"Stopped monitoring master reference {self.records.label}")
        self._running = False
        self.reference.unsubscribe(OrderingEvent.CHILD_ADDED, self._add)
        self.reference.unsubscribe(OrderingEvent.CHILD_REMOVED, self._remove)
        self.reference.unsubscribe(OrderingEvent.CHILD_MOVED, self._move)
        self.reference.unsubscribe(OrderingEvent.LOADED, self.records.ordering_loaded)
        self.records.reset()
        return self

    def _add(self, key, prev_key=None) -> None:
        self.records.add(key, prev_key)

    def _remove(self, key, prev_key=None) -> None:
        self.records.remove(key)

    def _move(self, key, prev_key=None) -> None:
        self.records.move(key, prev_key)

    def __enter__(self):
        return self.start()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()
        return False
