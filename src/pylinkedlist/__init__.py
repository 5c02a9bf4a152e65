"""
PyLinkedList - singly-linked list with O(1) head and tail insertion.

Provides the LinkedList container, its Node elements and the errors
raised by indexed and head/tail access.
"""

from pylinkedlist.node import Node, make_node
from pylinkedlist.linked_list import LinkedList
from pylinkedlist.exceptions import EmptyListError, LinkedListError, OutOfBoundsError

__version__ = "0.1.0"
__all__ = [
    # Core
    "LinkedList",
    "Node",
    "make_node",
    # Errors
    "LinkedListError",
    "OutOfBoundsError",
    "EmptyListError",
]
