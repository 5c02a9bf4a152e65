"""
LinkedList - singly-linked list with cached tail.

Nodes are chained through forward links only. The list keeps a reference
to the first node, a non-owning shortcut to the last node, and a node
count. Every mutating operation keeps the three in sync:

- length == 0 iff head is None iff tail is None
- following next from head length - 1 times reaches tail
- tail.next is None
"""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, TypeVar

from pylinkedlist.exceptions import EmptyListError, OutOfBoundsError
from pylinkedlist.node import Node, make_node

T = TypeVar("T")


class LinkedList(Generic[T]):
    """
    Ordered sequence with O(1) insertion at both ends.

    Removal from the tail is O(n): there are no back-links, so pop()
    scans for the node before the tail.
    """

    def __init__(self, values: Iterable[T] | None = None) -> None:
        self._head: Node[T] | None = None
        self._tail: Node[T] | None = None
        self._length: int = 0

        if values is not None:
            for value in values:
                self.append(value)

    @property
    def head(self) -> Node[T] | None:
        """First node, or None if empty."""
        return self._head

    @property
    def tail(self) -> Node[T] | None:
        """Last node, or None if empty."""
        return self._tail

    def append(self, value: T) -> Node[T]:
        """Add value at end of list and return its node."""
        node = make_node(value)
        if self._tail is not None:
            self._tail._next = node
            self._tail = node
        else:
            self._head = self._tail = node
        self._length += 1
        return node

    def prepend(self, value: T) -> Node[T]:
        """Add value at start of list and return its node."""
        node = make_node(value)
        if self._head is not None:
            node._next = self._head
            self._head = node
        else:
            self._head = self._tail = node
        self._length += 1
        return node

    def pop(self) -> Node[T] | None:
        """
        Remove and return last node.

        Returns None if list is empty.
        """
        removed = self._tail
        if removed is None:
            return None

        if self._head is removed:
            self._head = self._tail = None
        else:
            current = self._head
            while current._next is not removed:
                current = current._next
            current._next = None
            self._tail = current

        self._length -= 1
        return removed

    def remove_head(self) -> Node[T] | None:
        """
        Remove and return first node.

        Returns None if list is empty.
        """
        removed = self._head
        if removed is None:
            return None

        self._head = removed._next
        if self._head is None:
            self._tail = None
        removed._next = None
        self._length -= 1
        return removed

    def insert_index(self, value: T, index: int) -> Node[T]:
        """
        Insert value so that it ends up at position index.

        Only existing positions are accepted; use append() to add past
        the last node.
        """
        self._check_index(index)
        if index == 0:
            return self.prepend(value)

        previous, current = self._walk(index)
        node = make_node(value)
        node._next = current
        previous._next = node
        self._length += 1
        return node

    def remove_index(self, index: int) -> Node[T]:
        """Remove and return node at position index."""
        self._check_index(index)
        if index == 0:
            return self.remove_head()

        previous, current = self._walk(index)
        previous._next = current._next
        if current is self._tail:
            self._tail = previous
        current._next = None
        self._length -= 1
        return current

    def size(self) -> int:
        """Return number of nodes."""
        return self._length

    def is_empty(self) -> bool:
        """Check if list is empty."""
        return self._head is None

    def return_head(self) -> T:
        """Return value of first node."""
        if self._head is None:
            raise EmptyListError("return_head")
        return self._head.value

    def return_tail(self) -> T:
        """Return value of last node."""
        if self._tail is None:
            raise EmptyListError("return_tail")
        return self._tail.value

    def at(self, index: int) -> Node[T]:
        """Return node at position index."""
        self._check_index(index)
        _, current = self._walk(index)
        return current

    def contains(self, value: T) -> bool:
        """Check if any node holds a value equal to value."""
        return self.find(value) is not None

    def find(self, value: T) -> int | None:
        """Return position of first node equal to value, or None."""
        for index, node in enumerate(self._scan()):
            if node.value == value:
                return index
        return None

    def to_string(self) -> str:
        """
        Render as "( v0 ) --> ( v1 ) --> null".

        An empty list renders as "null".
        """
        parts = [f"( {node.value} ) --> " for node in self._scan()]
        parts.append("null")
        return "".join(parts)

    def clear(self) -> None:
        """
        Remove all nodes from list.

        Links are broken one node at a time so that dropping a long
        chain never recurses.
        """
        current = self._head
        while current is not None:
            next_node = current._next
            current._next = None
            current = next_node

        self._head = None
        self._tail = None
        self._length = 0

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= self._length:
            raise OutOfBoundsError(index, self._length)

    def _walk(self, index: int) -> tuple[Node[T] | None, Node[T]]:
        """Internal: step index times from head, tracking the previous node."""
        previous = None
        current = self._head
        for _ in range(index):
            previous = current
            current = current._next
        return previous, current

    def _scan(self) -> Iterator[Node[T]]:
        current = self._head
        while current is not None:
            yield current
            current = current._next

    def __len__(self) -> int:
        """Python-style length."""
        return self._length

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        values = ", ".join(repr(node.value) for node in self._scan())
        return f"LinkedList([{values}])"
