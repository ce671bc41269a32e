"""Unit tests for OrderedKeySequence."""

import pytest

from live_records.components.ordered_keys import OrderedKeySequence
from live_records.core.errors import DuplicateKeyError


@pytest.fixture
def seq():
    """Create empty sequence for tests."""
    return OrderedKeySequence()


def test_insert_first_into_empty(seq):
    """Test inserting into an empty sequence."""
    assert seq.insert_after("a", None) == 0
    assert list(seq) == ["a"]
    assert len(seq) == 1
    assert "a" in seq


def test_insert_none_goes_first(seq):
    """Test that a None sibling inserts at the front."""
    seq.insert_after("a", None)
    seq.insert_after("b", "a")
    seq.insert_after("c", None)

    assert list(seq) == ["c", "a", "b"]


def test_insert_after_sibling_is_immediate(seq):
    """Test that a key lands immediately after its sibling."""
    seq.insert_after("a", None)
    seq.insert_after("c", "a")
    pos = seq.insert_after("b", "a")

    assert pos == 1
    assert list(seq) == ["a", "b", "c"]


def test_unknown_sibling_appends(seq):
    """Test that a missing sibling falls back to the end."""
    seq.insert_after("a", None)
    seq.insert_after("b", "a")
    seq.insert_after("z", "gone")

    assert list(seq) == ["a", "b", "z"]


def test_duplicate_insert_raises(seq):
    """Test that re-inserting a key is a contract violation."""
    seq.insert_after("a", None)

    with pytest.raises(DuplicateKeyError):
        seq.insert_after("a", None)

    assert list(seq) == ["a"]


def test_repeated_inserts_at_same_spot(seq):
    """Test ranks stay distinct when splitting the same gap many times."""
    seq.insert_after("head", None)
    seq.insert_after("tail", "head")
    for i in range(60):
        seq.insert_after(f"k{i}", "head")

    keys = list(seq)
    assert keys[0] == "head"
    assert keys[-1] == "tail"
    assert keys[1:-1] == [f"k{i}" for i in reversed(range(60))]
    assert len(set(keys)) == len(keys)


def test_index_and_prev_key(seq):
    """Test positional lookups."""
    for key, after in [("a", None), ("b", "a"), ("c", "b")]:
        seq.insert_after(key, after)

    assert seq.index("a") == 0
    assert seq.index("c") == 2
    assert seq.index("missing") == -1
    assert seq.prev_key("a") is None
    assert seq.prev_key("c") == "b"
    assert seq.prev_key("missing") is None


def test_remove(seq):
    """Test removal of present and absent keys."""
    seq.insert_after("a", None)
    seq.insert_after("b", "a")

    assert seq.remove("a") is True
    assert seq.remove("a") is False
    assert list(seq) == ["b"]
    assert "a" not in seq


def test_move_after(seq):
    """Test moving a key behind another one."""
    for key, after in [("a", None), ("b", "a"), ("c", "b")]:
        seq.insert_after(key, after)

    assert seq.move_after("c", "a") is True
    assert list(seq) == ["a", "c", "b"]

    assert seq.move_after("b", None) is True
    assert list(seq) == ["b", "a", "c"]


def test_move_missing_key(seq):
    """Test that moving an absent key changes nothing."""
    seq.insert_after("a", None)

    assert seq.move_after("x", "a") is False
    assert list(seq) == ["a"]


def test_clear(seq):
    """Test clearing the sequence."""
    seq.insert_after("a", None)
    seq.insert_after("b", "a")
    seq.clear()

    assert len(seq) == 0
    assert list(seq) == []
    assert seq.insert_after("a", None) == 0
