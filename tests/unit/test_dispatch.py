"""Unit tests for EventDispatcher."""

from unittest.mock import MagicMock, call

import pytest

from live_records.components.dispatch import EventDispatcher
from live_records.components.memory import MemorySnapshot
from live_records.core.errors import ContractViolationError, UnknownEventError
from live_records.core.types import (
    ChildAdded,
    ChildChanged,
    ChildMoved,
    ChildRemoved,
    ValueChanged,
)


@pytest.fixture
def consumer():
    return MagicMock()


@pytest.fixture
def dispatcher(consumer):
    return EventDispatcher(consumer)


def test_each_kind_routes_to_its_method(dispatcher, consumer):
    """Test that every event kind reaches the matching consumer method."""
    a = MemorySnapshot("a", 1)
    b = MemorySnapshot("b", 2)

    dispatcher.notify(ChildAdded("a", a, None))
    dispatcher.notify(ChildChanged("a", a))
    dispatcher.notify(ChildMoved("a", "b"))
    dispatcher.notify(ChildRemoved("b", b))
    dispatcher.notify(ValueChanged((a,)))

    assert consumer.mock_calls == [
        call.child_added("a", a, None),
        call.child_changed("a", a),
        call.child_moved("a", "b"),
        call.child_removed("b", b),
        call.value([a]),
    ]


@pytest.mark.parametrize("event", ["child_added", None, object(), ("a", 1)])
def test_unknown_event_fails_fast(dispatcher, consumer, event):
    """Test that anything but a record event is a contract violation."""
    with pytest.raises(UnknownEventError):
        dispatcher.notify(event)

    assert consumer.mock_calls == []


def test_unknown_event_is_contract_violation():
    assert issubclass(UnknownEventError, ContractViolationError)
