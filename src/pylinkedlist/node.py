"""
Node - single element of a LinkedList.
"""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class Node(Generic[T]):
    """
    Holds a value and a forward link to the following node.

    The link is read-only from outside; only LinkedList relinks nodes.
    """

    __slots__ = ("value", "_next")

    def __init__(self, value: T) -> None:
        self.value = value
        self._next: Node[T] | None = None

    @property
    def next(self) -> Node[T] | None:
        """Return following node, or None if last."""
        return self._next

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


def make_node(value: T) -> Node[T]:
    """Create an unlinked node."""
    return Node(value)
