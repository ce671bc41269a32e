"""Common type definitions for the record list.

Defines keys, event kinds, the derived consumer events and the
per-key record bookkeeping shared by all components.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from ..interfaces.reference import Snapshot, ValueStream

# Core primitive types
RecordKey = str
ValueCallback = Callable[[Any], None]


class EventKind(Enum):
    """Kinds of events delivered to a record consumer."""

    CHILD_ADDED = "child_added"
    CHILD_CHANGED = "child_changed"
    CHILD_REMOVED = "child_removed"
    CHILD_MOVED = "child_moved"
    VALUE = "value"


class OrderingEvent(Enum):
    """Events published by the master ordering reference."""

    CHILD_ADDED = "child_added"
    CHILD_REMOVED = "child_removed"
    CHILD_MOVED = "child_moved"
    LOADED = "loaded"


@dataclass(frozen=True)
class ChildAdded:
    key: RecordKey
    snapshot: Snapshot
    prev_key: RecordKey | None
    kind: ClassVar[EventKind] = EventKind.CHILD_ADDED


@dataclass(frozen=True)
class ChildChanged:
    key: RecordKey
    snapshot: Snapshot
    kind: ClassVar[EventKind] = EventKind.CHILD_CHANGED


@dataclass(frozen=True)
class ChildRemoved:
    key: RecordKey
    snapshot: Snapshot
    kind: ClassVar[EventKind] = EventKind.CHILD_REMOVED


@dataclass(frozen=True)
class ChildMoved:
    key: RecordKey
    prev_key: RecordKey | None
    kind: ClassVar[EventKind] = EventKind.CHILD_MOVED


@dataclass(frozen=True)
class ValueChanged:
    """Every active snapshot, in current sequence order."""

    snapshots: tuple[Snapshot, ...] = field(default_factory=tuple)
    kind: ClassVar[EventKind] = EventKind.VALUE


RecordEvent = ChildAdded | ChildChanged | ChildRemoved | ChildMoved | ValueChanged


@dataclass
class PendingRecord:
    """A key announced by the ordering stream, waiting for its first value.

    Attributes:
        watch: Value stream of the child
        callback: Exact callable registered on the stream
        after_key: Sibling to insert after once the value arrives
    """

    watch: ValueStream
    callback: ValueCallback
    after_key: RecordKey | None


@dataclass
class ActiveRecord:
    """A key with at least one delivered snapshot."""

    watch: ValueStream
    callback: ValueCallback
    snapshot: Snapshot
