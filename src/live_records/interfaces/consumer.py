"""Protocol definition for the consumer of derived record events."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..core.types import RecordKey
    from .reference import Snapshot


class RecordConsumer(Protocol):
    """Receives normalized collection events, synchronously."""

    def child_added(self, key: RecordKey, snapshot: Snapshot, prev_key: RecordKey | None) -> None:
        ...

    def child_changed(self, key: RecordKey, snapshot: Snapshot) -> None:
        ...

    def child_removed(self, key: RecordKey, snapshot: Snapshot) -> None:
        ...

    def child_moved(self, key: RecordKey, prev_key: RecordKey | None) -> None:
        ...

    def value(self, snapshots: Sequence[Snapshot]) -> None:
        """Receive every active snapshot in sequence order."""
        ...
