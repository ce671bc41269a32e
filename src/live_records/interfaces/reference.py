"""Protocol definitions for the backend reference abstraction."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from ..core.types import OrderingEvent, RecordKey


class Snapshot(Protocol):
    """Immutable content of one record at one point in time."""

    @property
    def key(self) -> RecordKey:
        ...

    @property
    def value(self) -> Any:
        ...


class ValueStream(Protocol):
    """Reference scoped to one child, streaming its snapshots."""

    def watch_value(self, callback: Callable[[Snapshot], None]) -> None:
        """Deliver every snapshot of the child to callback."""
        ...

    def unwatch_value(self, callback: Callable[[Snapshot], None]) -> None:
        """Stop delivering snapshots to callback."""
        ...


class OrderingReference(Protocol):
    """Master reference announcing existence and order of child keys.

    Ordering callbacks receive (key, sibling_key_or_none). All child_added
    events for children existing at subscription time are delivered before
    the LOADED signal fires.
    """

    def subscribe(
        self, event: OrderingEvent, callback: Callable[[RecordKey, RecordKey | None], None]
    ) -> None:
        """Register callback for an ordering event."""
        ...

    def unsubscribe(self, event: OrderingEvent, callback: Callable[..., None]) -> None:
        """Remove a callback registered with subscribe or subscribe_once."""
        ...

    def subscribe_once(self, event: OrderingEvent, callback: Callable[[], None]) -> None:
        """Register callback to fire a single time (used for LOADED)."""
        ...

    def child(self, key: RecordKey) -> ValueStream:
        """Return the reference scoped to one child."""
        ...
