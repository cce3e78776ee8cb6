"""Tests for the bundled aggregates."""

import logging

import pytest

from sequent.domain import (
    Aggregate,
    LinkedAggregate,
    ListAggregate,
    NodeIterator,
    SequenceIterator,
)


def test_new_aggregate_is_empty(aggregate: Aggregate[str]):
    """Test that aggregates are created empty."""
    assert len(aggregate) == 0
    assert list(aggregate) == []


def test_append_grows_by_one(aggregate: Aggregate[str]):
    """Test that each append adds exactly one item to the end."""
    aggregate.append("A")
    assert len(aggregate) == 1
    aggregate.append("B")
    assert len(aggregate) == 2
    assert list(aggregate) == ["A", "B"]


def test_append_accepts_any_item(aggregate: Aggregate[object]):
    """Test that the item type is opaque, None included."""
    marker = object()
    aggregate.append(None)
    aggregate.append(marker)
    aggregate.append(None)

    assert list(aggregate) == [None, marker, None]


def test_duplicates_are_kept(aggregate: Aggregate[str]):
    """Test that equal items are stored and returned separately."""
    for item in ("A", "A", "B", "A"):
        aggregate.append(item)

    assert list(aggregate) == ["A", "A", "B", "A"]


@pytest.mark.parametrize("aggregate_type", [ListAggregate, LinkedAggregate])
def test_initial_items(aggregate_type: type[Aggregate]):
    """Test that initial items are appended in order."""
    aggregate = aggregate_type(iter(["x", "y", "z"]))

    assert len(aggregate) == 3
    assert list(aggregate) == ["x", "y", "z"]


def test_list_aggregate_returns_sequence_iterator():
    """Test that the list backing hands out tuple-snapshot iterators."""
    iterator = ListAggregate(["A"]).create_iterator()

    assert isinstance(iterator, SequenceIterator)
    assert iterator.length == 1


def test_linked_aggregate_returns_node_iterator():
    """Test that the linked backing hands out node-walking iterators."""
    iterator = LinkedAggregate(["A"]).create_iterator()

    assert isinstance(iterator, NodeIterator)
    assert iterator.length == 1


def test_backings_are_interchangeable():
    """Test that callers get the same results whatever the backing."""

    def walk(aggregate: Aggregate[str]) -> list[str]:
        iterator = aggregate.create_iterator()
        items = []
        while iterator.has_next():
            items.append(iterator.next())
        return items

    items = ["one", "two", "three"]
    assert walk(ListAggregate(items)) == walk(LinkedAggregate(items)) == items


def test_create_iterator_logs_creation(aggregate: Aggregate[str], caplog):
    """Test that iterator creation is logged with the aggregate type."""
    aggregate.append("A")

    with caplog.at_level(logging.DEBUG, logger="sequent.domain.aggregate"):
        iterator = aggregate.create_iterator()

    assert "Created iterator" in caplog.text
    record = caplog.records[-1]
    assert record.aggregate_type == type(aggregate).__name__
    assert record.iterator_id == str(iterator.iterator_id)
    assert record.length == 1


def test_repr_shows_length():
    """Test the debugging representation."""
    assert repr(ListAggregate(["A", "B"])) == "ListAggregate(length=2)"
    assert repr(LinkedAggregate(["A"])) == "LinkedAggregate(length=1)"


def test_aggregate_contract_cannot_be_instantiated():
    """Test that the abstract contract requires both operations."""
    with pytest.raises(TypeError):
        Aggregate()  # type: ignore[abstract]
