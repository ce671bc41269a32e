"""Protocols for the collaborators around the record list."""

from .consumer import RecordConsumer
from .reference import OrderingReference, Snapshot, ValueStream

__all__ = ["OrderingReference", "RecordConsumer", "Snapshot", "ValueStream"]
