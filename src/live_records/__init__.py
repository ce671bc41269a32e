"""Live Records - ordered, eventually-consistent view of remote keyed records."""

from .components.listeners import ListenerRegistry
from .components.memory import MemoryChildReference, MemoryReference, MemorySnapshot
from .core.config import RecordListConfig
from .core.errors import (
    ContractViolationError,
    DuplicateKeyError,
    RecordListError,
    UnknownEventError,
)
from .core.reconciler import RecordReconciler
from .core.session import WatchSession
from .core.types import (
    ChildAdded,
    ChildChanged,
    ChildMoved,
    ChildRemoved,
    EventKind,
    OrderingEvent,
    RecordKey,
    ValueChanged,
)

__all__ = [
    "RecordListConfig",
    "RecordListError",
    "ContractViolationError",
    "DuplicateKeyError",
    "UnknownEventError",
    "RecordReconciler",
    "WatchSession",
    "ListenerRegistry",
    "MemoryReference",
    "MemoryChildReference",
    "MemorySnapshot",
    "RecordKey",
    "EventKind",
    "OrderingEvent",
    "ChildAdded",
    "ChildChanged",
    "ChildRemoved",
    "ChildMoved",
    "ValueChanged",
]
