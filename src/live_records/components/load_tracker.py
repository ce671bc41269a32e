"""Initial-load tracking.

Combines the two independently-timed completion conditions of a record
list: the ordering stream has delivered its initial batch, and every key of
that batch has delivered its first value.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.types import RecordKey


class LoadTracker:
    """Latching predicate: complete = ordering_loaded AND nothing outstanding.

    Invariants:
        - complete goes False -> True at most once between resets
        - Keys are only recorded as outstanding before the ordering stream loads
    """

    def __init__(self):
        self.ordering_loaded: bool = False
        self.complete: bool = False
        self._outstanding: set[RecordKey] = set()

    @property
    def pending_resolved(self) -> bool:
        """True when no key from the initial batch is still waiting for a value."""
        return not self._outstanding

    @property
    def outstanding(self) -> frozenset[RecordKey]:
        return frozenset(self._outstanding)

    def expect(self, key: RecordKey) -> None:
        """Record key as part of the initial batch if that batch is still arriving."""
        if not self.ordering_loaded:
            self._outstanding.add(key)

    def resolve(self, key: RecordKey) -> bool:
        """Drop key from the initial batch.

        Returns:
            True if this call completed the initial load
        """
        self._outstanding.discard(key)
        return self._evaluate()

    def mark_ordering_loaded(self) -> bool:
        """Note that the ordering stream delivered its initial batch.

        Returns:
            True if this call completed the initial load
        """
        self.ordering_loaded = True
        return self._evaluate()

    def reset(self) -> None:
        self.ordering_loaded = False
        self.complete = False
        self._outstanding.clear()

    def _evaluate(self) -> bool:
        if self.complete:
            return False
        if self.ordering_loaded and self.pending_resolved:
            self.complete = True
            return True
        return False
