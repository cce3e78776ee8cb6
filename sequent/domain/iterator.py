import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar, cast

from typing_extensions import Self
from ulid import ULID

from .exceptions import ExhaustedIteratorError

if TYPE_CHECKING:
    from .aggregate import Node

LOGGER = logging.getLogger(__name__)
T = TypeVar("T")


class Iterator(ABC, Generic[T]):
    """Contract for one traversal over a previously obtained view of an aggregate.

    An iterator encapsulates a single traversal's position (its cursor). The
    cursor starts at zero and only ever moves forward, one step per successful
    call to ``next()``. Once every item has been returned the iterator is
    exhausted for good; create a new one from the aggregate to walk it again.

    Implementations only need ``has_next`` and ``next``. The Python iteration
    protocol is provided on top of them, so iterators can be used directly in
    ``for`` loops:

    Examples:
        >>> from sequent import ListAggregate
        >>> playlist = ListAggregate(["A", "B"])
        >>> tracks = playlist.create_iterator()
        >>> while tracks.has_next():
        ...     print(tracks.next())
        A
        B
        >>> tracks.has_next()
        False
    """

    @abstractmethod
    def has_next(self) -> bool:
        """Return True while at least one item remains. Has no side effects."""
        ...

    @abstractmethod
    def next(self) -> T:
        """Return the item under the cursor and advance the cursor by one.

        Raises:
            ExhaustedIteratorError: If no items remain. The cursor is not moved.
        """
        ...

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> T:
        try:
            return self.next()
        except ExhaustedIteratorError:
            raise StopIteration from None


class _CursorIterator(Iterator[T]):
    """Shared cursor bookkeeping for the bundled iterators."""

    def __init__(self, length: int):
        self._length = length
        self._cursor = 0
        self._iterator_id = ULID()

    @property
    def cursor(self) -> int:
        """Index of the next item to be returned."""
        return self._cursor

    @property
    def length(self) -> int:
        """Number of items this iterator was bound to."""
        return self._length

    @property
    def iterator_id(self) -> ULID:
        return self._iterator_id

    def has_next(self) -> bool:
        return self._cursor < self._length

    def next(self) -> T:
        if not self.has_next():
            LOGGER.warning(
                "next() called on exhausted iterator",
                extra=self._log_extra(),
            )
            raise ExhaustedIteratorError(self._cursor, self._length)

        item = self._take()
        self._cursor += 1
        LOGGER.debug("Iterator advanced", extra=self._log_extra())
        return item

    @abstractmethod
    def _take(self) -> T:
        """Return the item under the cursor. Only called while items remain."""
        ...

    def _log_extra(self) -> dict[str, object]:
        # Item values are never logged, only positions.
        return {
            "iterator_id": str(self._iterator_id),
            "iterator_type": type(self).__name__,
            "cursor": self._cursor,
            "length": self._length,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(cursor={self._cursor}, length={self._length})"


class SequenceIterator(_CursorIterator[T]):
    """Iterator over an immutable tuple snapshot.

    Used by ``ListAggregate``. The tuple is captured when the iterator is
    created, so items appended to the aggregate afterwards are not seen.
    """

    def __init__(self, items: tuple[T, ...]):
        super().__init__(len(items))
        self._items = items

    def _take(self) -> T:
        return self._items[self._cursor]


class NodeIterator(_CursorIterator[T]):
    """Iterator that follows a chain of nodes instead of indexing.

    Used by ``LinkedAggregate``. It is bound to the head node and the length
    of the chain at creation time and stops after that many nodes, even if
    more nodes are linked onto the tail later.
    """

    def __init__(self, head: "Node[T] | None", length: int):
        super().__init__(length)
        self._node = head

    def _take(self) -> T:
        # has_next() guarantees a node exists for every position below length
        node = cast("Node[T]", self._node)
        item = node.value
        self._node = node.next
        return item
