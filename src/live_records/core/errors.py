"""Exception hierarchy for the record list.

Benign races (orphaned updates, moves of unknown keys) are never raised;
only caller bugs surface as exceptions.
"""

from __future__ import annotations


class RecordListError(Exception):
    """Base exception for all record list errors."""
    pass


class ContractViolationError(RecordListError):
    """Raised when a caller breaks the engine's usage contract."""
    pass


class DuplicateKeyError(ContractViolationError):
    """Raised when a key that is already tracked is added again."""

    def __init__(self, key: str):
        super().__init__(f"Key {key!r} is already tracked")
        self.key = key


class UnknownEventError(ContractViolationError):
    """Raised when the dispatcher is handed something that is not a record event."""
    pass
