"""Errors raised by LinkedList operations."""

from __future__ import annotations


class LinkedListError(Exception):
    """Base class for linked list errors."""


class OutOfBoundsError(LinkedListError, IndexError):
    """Index outside [0, length) passed to an indexed operation."""

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"index {index} out of bounds for list of length {length}")
        self.index = index
        self.length = length


class EmptyListError(LinkedListError, LookupError):
    """Head or tail accessed on an empty list."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation} on empty list")
        self.operation = operation
