"""Sequent - Sequential access over aggregates for Python.

This module provides the public API for walking ordered collections without
depending on how they are stored.
"""

from .domain import (
    Aggregate,
    ExhaustedIteratorError,
    Iterator,
    LinkedAggregate,
    ListAggregate,
    NodeIterator,
    SequenceIterator,
    SequentError,
)
from .traversal import collect, drain

__all__ = [
    # Contracts
    "Aggregate",
    "Iterator",
    # Implementations
    "ListAggregate",
    "LinkedAggregate",
    "SequenceIterator",
    "NodeIterator",
    # Errors
    "ExhaustedIteratorError",
    "SequentError",
    # Traversal
    "collect",
    "drain",
]
