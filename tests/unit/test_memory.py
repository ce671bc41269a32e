"""Unit tests for the in-memory reference."""

from unittest.mock import MagicMock

import pytest

from live_records.components.memory import MemoryReference, MemorySnapshot
from live_records.core.types import OrderingEvent


@pytest.fixture
def ref():
    return MemoryReference("/lists/groceries/")


def test_paths(ref):
    assert str(ref) == "/lists/groceries"
    assert str(ref.child("milk")) == "/lists/groceries/milk"


def test_child_is_cached(ref):
    assert ref.child("a") is ref.child("a")


def test_ordering_events_reach_subscribers(ref):
    """Test that ordering events carry key and sibling."""
    added = MagicMock()
    ref.subscribe(OrderingEvent.CHILD_ADDED, added)

    ref.emit_added("a")
    ref.emit_added("b", "a")

    assert [c.args for c in added.call_args_list] == [("a", None), ("b", "a")]


def test_loaded_fires_once(ref):
    """Test one-shot listeners are dropped after firing."""
    loaded = MagicMock()
    ref.subscribe_once(OrderingEvent.LOADED, loaded)

    ref.emit_loaded()
    ref.emit_loaded()

    loaded.assert_called_once_with()
    assert ref.listener_count(OrderingEvent.LOADED) == 0


def test_unsubscribe(ref):
    """Test unsubscribe removes persistent and one-shot listeners."""
    cb = MagicMock()
    ref.subscribe(OrderingEvent.CHILD_MOVED, cb)
    ref.subscribe_once(OrderingEvent.LOADED, cb)

    ref.unsubscribe(OrderingEvent.CHILD_MOVED, cb)
    ref.unsubscribe(OrderingEvent.LOADED, cb)
    ref.emit_moved("a")
    ref.emit_loaded()

    cb.assert_not_called()


def test_push_delivers_snapshot(ref):
    """Test value pushes reach every watcher until unwatched."""
    child = ref.child("a")
    watcher = MagicMock()
    child.watch_value(watcher)

    snap = child.push({"qty": 2})
    child.unwatch_value(watcher)
    child.push({"qty": 3})

    assert snap == MemorySnapshot("a", {"qty": 2})
    watcher.assert_called_once_with(snap)
    assert child.watcher_count == 0
