"""Ordered key sequence implementation.

Uses sortedcontainers.SortedList keyed by exact fractional ranks, so that
sibling-relative inserts, moves and predecessor lookups stay logarithmic.
"""

from __future__ import annotations

from fractions import Fraction
from typing import TYPE_CHECKING

from sortedcontainers import SortedList

from ..core.errors import DuplicateKeyError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..core.types import RecordKey


class OrderedKeySequence:
    """Sequence of record keys whose order is set only by "insert after" calls.

    Every key carries a rank; a key inserted between two neighbours gets the
    midpoint of their ranks, so existing ranks never change.

    Invariants:
        - No duplicate keys
        - Iteration order is ascending rank order
        - A sibling that is not present means "end of sequence"
    """

    def __init__(self):
        """Initialize empty sequence."""
        self._order: SortedList = SortedList()
        self._ranks: dict[RecordKey, Fraction] = {}

    def __contains__(self, key: object) -> bool:
        return key in self._ranks

    def __len__(self) -> int:
        return len(self._ranks)

    def __iter__(self) -> Iterator[RecordKey]:
        for _rank, key in self._order:
            yield key

    def __repr__(self) -> str:
        return f"OrderedKeySequence({list(self)!r})"

    def index(self, key: RecordKey) -> int:
        """Return the position of key, or -1 if it is not in the sequence."""
        rank = self._ranks.get(key)
        if rank is None:
            return -1
        return self._order.index((rank, key))

    def prev_key(self, key: RecordKey) -> RecordKey | None:
        """Return the key preceding key, or None if key is first or absent."""
        pos = self.index(key)
        if pos <= 0:
            return None
        return self._order[pos - 1][1]

    def insert_after(self, key: RecordKey, after_key: RecordKey | None) -> int:
        """Insert key right after after_key and return its position.

        None inserts at the front; an unknown sibling appends at the end.

        Raises:
            DuplicateKeyError: If key is already in the sequence
        """
        if key in self._ranks:
            raise DuplicateKeyError(key)

        rank = self._rank_after(after_key)
        self._ranks[key] = rank
        self._order.add((rank, key))
        return self._order.index((rank, key))

    def remove(self, key: RecordKey) -> bool:
        """Remove key; return False if it was not present."""
        rank = self._ranks.pop(key, None)
        if rank is None:
            return False
        self._order.remove((rank, key))
        return True

    def move_after(self, key: RecordKey, after_key: RecordKey | None) -> bool:
        """Reposition key right after after_key; return False if key is absent."""
        if not self.remove(key):
            return False
        self.insert_after(key, after_key)
        return True

    def clear(self) -> None:
        """Remove every key."""
        self._order.clear()
        self._ranks.clear()

    def _rank_after(self, after_key: RecordKey | None) -> Fraction:
        """Compute a rank that sorts immediately after after_key."""
        if not self._order:
            return Fraction(0)

        if after_key is None:
            return self._order[0][0] - 1

        rank = self._ranks.get(after_key)
        if rank is None:
            # Sibling already gone, fall back to the end
            return self._order[-1][0] + 1

        pos = self._order.index((rank, after_key))
        if pos + 1 == len(self._order):
            return rank + 1

        next_rank = self._order[pos + 1][0]
        return (rank + next_rank) / 2
