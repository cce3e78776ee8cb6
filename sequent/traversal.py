"""Traversal drivers built on the public iterator contract."""

import logging
from collections.abc import Callable
from typing import TypeVar

from .domain import Iterator

LOGGER = logging.getLogger(__name__)
T = TypeVar("T")


def drain(iterator: Iterator[T], sink: Callable[[T], object]) -> int:
    """Feed every remaining item of an iterator to a sink, in order.

    This is the plain ``has_next``/``next`` loop. It only relies on the two
    contract operations, so it works with any ``Iterator`` implementation.

    Args:
        iterator: The iterator to exhaust.
        sink: Called once per item. Its return value is ignored.

    Returns:
        The number of items delivered to the sink.

    Examples:
        >>> from sequent import ListAggregate
        >>> drain(ListAggregate(["A", "B"]).create_iterator(), print)
        A
        B
        2
    """
    delivered = 0
    while iterator.has_next():
        sink(iterator.next())
        delivered += 1

    LOGGER.debug(
        "Traversal drained",
        extra={"iterator_type": type(iterator).__name__, "delivered": delivered},
    )
    return delivered


def collect(iterator: Iterator[T]) -> list[T]:
    """Drain an iterator into a list."""
    items: list[T] = []
    drain(iterator, items.append)
    return items
