"""Exceptions for the domain module."""


class SequentError(Exception):
    """Base class for all errors raised by sequent."""

    pass


class ExhaustedIteratorError(SequentError):
    """Raised when ``next()`` is called on an iterator with no items left.

    This exception indicates a caller-contract violation: ``next()`` must only
    be called while ``has_next()`` returns True. The iterator's cursor is left
    where it was.

    Attributes:
        cursor: The cursor position at the time of the call.
        length: The number of items the iterator was bound to.
    """

    def __init__(self, cursor: int, length: int):
        self.cursor = cursor
        self.length = length
        super().__init__(f"Iterator exhausted: cursor {cursor} has reached length {length}")
