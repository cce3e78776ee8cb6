"""Domain primitives for sequential access.

This module contains the two contracts callers program against and the
bundled implementations of them:

- Aggregate: Owner of an ordered collection that hands out iterators
- Iterator: One traversal's cursor over an aggregate's items
- ListAggregate / LinkedAggregate: Array-backed and node-backed aggregates
- SequenceIterator / NodeIterator: Their matching iterators
- ExhaustedIteratorError: Raised by next() when no items remain
"""

from .aggregate import Aggregate, LinkedAggregate, ListAggregate
from .exceptions import ExhaustedIteratorError, SequentError
from .iterator import Iterator, NodeIterator, SequenceIterator

__all__ = [
    "Aggregate",
    "ListAggregate",
    "LinkedAggregate",
    "Iterator",
    "SequenceIterator",
    "NodeIterator",
    "ExhaustedIteratorError",
    "SequentError",
]
