import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

from .iterator import Iterator, NodeIterator, SequenceIterator

LOGGER = logging.getLogger(__name__)
T = TypeVar("T")


class Aggregate(ABC, Generic[T]):
    """Base class for all aggregates.

    An aggregate owns an ordered collection of items and hands out iterators
    over it. Callers only ever see the two operations below, so the storage
    behind an aggregate can change without touching the code that walks it.

    Every iterator is bound to a snapshot of the contents present when
    ``create_iterator`` was called. Items appended afterwards are only seen by
    iterators created afterwards.

    Examples:
        Walk a playlist with an explicit iterator:

        >>> playlist = ListAggregate[str]()
        >>> playlist.append("Intro")
        >>> playlist.append("Outro")
        >>> tracks = playlist.create_iterator()
        >>> while tracks.has_next():
        ...     print(tracks.next())
        Intro
        Outro

        Or let Python drive the protocol:

        >>> [track for track in playlist]
        ['Intro', 'Outro']
    """

    @abstractmethod
    def append(self, item: T) -> None:
        """Add an item to the end of the aggregate.

        Args:
            item: The item to add.
        """
        ...

    @abstractmethod
    def create_iterator(self) -> Iterator[T]:
        """Create a new, independent iterator positioned at the first item.

        Returns:
            An iterator bound to the current contents. On an empty aggregate
            the iterator reports no items straight away.
        """
        ...

    def __iter__(self) -> Iterator[T]:
        return self.create_iterator()


class ListAggregate(Aggregate[T]):
    """Aggregate backed by a Python list.

    Iterators receive a tuple copy of the list, so they never observe later
    appends and never share state with one another.

    Args:
        items: Optional initial items, appended in order.
    """

    def __init__(self, items: Iterable[T] | None = None):
        self._items: list[T] = []
        for item in items or ():
            self.append(item)

    def append(self, item: T) -> None:
        self._items.append(item)

    def create_iterator(self) -> SequenceIterator[T]:
        iterator = SequenceIterator(tuple(self._items))
        _log_created(self, iterator.iterator_id, iterator.length)
        return iterator

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"ListAggregate(length={len(self._items)})"


@dataclass
class Node(Generic[T]):
    value: T
    next: "Node[T] | None" = None


class LinkedAggregate(Aggregate[T]):
    """Aggregate backed by a singly linked chain of nodes.

    Appending links a node onto the tail and never modifies the existing
    nodes' values, so an iterator can bind to the current head and length
    without copying anything.

    Args:
        items: Optional initial items, appended in order.
    """

    def __init__(self, items: Iterable[T] | None = None):
        self._head: Node[T] | None = None
        self._tail: Node[T] | None = None
        self._length = 0
        for item in items or ():
            self.append(item)

    def append(self, item: T) -> None:
        node = Node(item)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def create_iterator(self) -> NodeIterator[T]:
        iterator = NodeIterator(self._head, self._length)
        _log_created(self, iterator.iterator_id, iterator.length)
        return iterator

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"LinkedAggregate(length={self._length})"


def _log_created(aggregate: Aggregate, iterator_id: object, length: int) -> None:
    LOGGER.debug(
        "Created iterator",
        extra={
            "aggregate_type": type(aggregate).__name__,
            "iterator_id": str(iterator_id),
            "length": length,
        },
    )
