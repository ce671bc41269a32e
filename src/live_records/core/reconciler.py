"""Record reconciliation engine.

Merges the master ordering stream and the per-child value streams into one
ordered collection of snapshots and derives the consumer events.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import TYPE_CHECKING

from ..components.dispatch import EventDispatcher
from ..components.load_tracker import LoadTracker
from ..components.ordered_keys import OrderedKeySequence
from .config import RecordListConfig
from .errors import DuplicateKeyError
from .types import (
    ActiveRecord,
    ChildAdded,
    ChildChanged,
    ChildMoved,
    ChildRemoved,
    PendingRecord,
    RecordKey,
    ValueChanged,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..interfaces.consumer import RecordConsumer
    from ..interfaces.reference import OrderingReference, Snapshot

logger = logging.getLogger(__name__)


class RecordReconciler:
    """Ordered, live view of the children of one master reference.

    A key announced by the ordering stream stays pending until its own
    value stream delivers a first snapshot; only then is it placed in the
    sequence and announced to the consumer.

    Args:
        reference: Master reference whose children are tracked
        consumer: Receiver of derived events
        config: Optional configuration

    Public API:
        - add(key, after_key): Track a newly announced child
        - remove(key): Stop tracking a child
        - move(key, after_key): Reposition an active child
        - ordering_loaded(): Initial ordering batch delivered
        - reset(): Drop every record and start over

    Invariants:
        - A key is either pending or active, never both
        - Only active keys are in the sequence
        - The aggregate value event never fires before load is complete
    """

    def __init__(
        self,
        reference: OrderingReference,
        consumer: RecordConsumer,
        config: RecordListConfig | None = None,
    ):
        self.reference = reference
        self.config = config or RecordListConfig()
        self.label = self.config.label or str(reference)
        self._dispatcher = EventDispatcher(consumer)
        self._sequence = OrderedKeySequence()
        self._pending: dict[RecordKey, PendingRecord] = {}
        self._active: dict[RecordKey, ActiveRecord] = {}
        self._load = LoadTracker()
        self._tearing_down = False

    def __len__(self) -> int:
        return len(self._sequence)

    def __contains__(self, key: object) -> bool:
        return key in self._pending or key in self._active

    def __iter__(self) -> Iterator[Snapshot]:
        return iter(self.snapshots())

    @property
    def load_complete(self) -> bool:
        return self._load.complete

    @property
    def load_state(self) -> LoadTracker:
        return self._load

    def keys(self) -> list[RecordKey]:
        """Active keys in sequence order."""
        return list(self._sequence)

    def snapshots(self) -> list[Snapshot]:
        """Latest snapshot of every active key, in sequence order."""
        return [self._active[key].snapshot for key in self._sequence]

    def find_key(self, key: RecordKey) -> int:
        """Position of key in the sequence, or -1."""
        return self._sequence.index(key)

    def is_pending(self, key: RecordKey) -> bool:
        return key in self._pending

    def add(self, key: RecordKey, after_key: RecordKey | None) -> None:
        """Track key and start watching its value stream.

        Raises:
            DuplicateKeyError: If key is already pending or active
        """
        logger.debug(f"{self.label}: add key={key}, after={after_key}")
        if key in self:
            raise DuplicateKeyError(key)

        watch = self.reference.child(key)
        callback = partial(self._value_arrived, key)
        self._pending[key] = PendingRecord(watch=watch, callback=callback, after_key=after_key)
        self._load.expect(key)
        watch.watch_value(callback)

    def remove(self, key: RecordKey) -> None:
        """Stop tracking key; announce it if it had been delivered."""
        logger.debug(f"{self.label}: remove key={key}")
        pending = self._pending.pop(key, None)
        if pending is not None:
            pending.watch.unwatch_value(pending.callback)
            if self._load.resolve(key):
                self._notify_value()
            return

        record = self._active.pop(key, None)
        if record is None:
            logger.debug(f"{self.label}: remove of untracked key {key} ignored")
            return

        record.watch.unwatch_value(record.callback)
        self._sequence.remove(key)
        self._dispatcher.notify(ChildRemoved(key, record.snapshot))
        self._notify_value()

    def move(self, key: RecordKey, after_key: RecordKey | None) -> None:
        """Reposition an active key after after_key (None = first)."""
        if not self._sequence.move_after(key, after_key):
            logger.debug(f"{self.label}: move of untracked key {key} ignored")
            return
        self._dispatcher.notify(ChildMoved(key, self._sequence.prev_key(key)))

    def ordering_loaded(self) -> None:
        """The ordering stream has delivered its initial batch."""
        logger.debug(f"{self.label}: initial data loaded from master reference")
        if self._load.mark_ordering_loaded():
            self._notify_value()

    def reset(self) -> None:
        """Remove every record, announcing active ones, and clear load state."""
        self._tearing_down = True
        try:
            for key in list(self._active):
                self.remove(key)
            for pending in list(self._pending.values()):
                pending.watch.unwatch_value(pending.callback)
        finally:
            self._tearing_down = False
            self._pending.clear()
            self._active.clear()
            self._sequence.clear()
            self._load.reset()

    def _value_arrived(self, key: RecordKey, snap: Snapshot) -> None:
        pending = self._pending.pop(key, None)
        if pending is not None:
            self._active[key] = ActiveRecord(
                watch=pending.watch, callback=pending.callback, snapshot=snap
            )
            self._sequence.insert_after(key, pending.after_key)
            self._load.resolve(key)
            self._dispatcher.notify(ChildAdded(key, snap, self._sequence.prev_key(key)))
            self._notify_value()
            return

        record = self._active.get(key)
        if record is not None:
            record.snapshot = snap
            self._dispatcher.notify(ChildChanged(key, snap))
            self._notify_value()
            return

        logger.log(
            self.config.orphan_log_level,
            f"{self.label}: orphan key {key} ignored, "
            "probably removed locally and changed remotely at the same time",
        )

    def _notify_value(self) -> None:
        if not self._load.complete:
            return
        if self._tearing_down and not self.config.emit_values_on_teardown:
            return
        self._dispatcher.notify(ValueChanged(tuple(self.snapshots())))
