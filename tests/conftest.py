"""
Pytest configuration and fixtures for PyLinkedList tests.
"""

import importlib.util
from pathlib import Path
from types import ModuleType
from typing import Callable

import pytest
import simpy

from pylinkedlist import LinkedList

EXAMPLES_ROOT = Path(__file__).resolve().parent.parent / "examples"


@pytest.fixture
def load_example() -> Callable[[str], ModuleType]:
    """Import a program from examples/ by module name."""

    def _load(name: str) -> ModuleType:
        path = EXAMPLES_ROOT / f"{name}.py"
        if not path.exists():
            pytest.skip(f"Example not found: {path}")
        spec = importlib.util.spec_from_file_location(f"examples_{name}", path)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module

    return _load


@pytest.fixture
def env() -> simpy.Environment:
    """Create a fresh SimPy environment."""
    return simpy.Environment()


@pytest.fixture
def empty() -> LinkedList:
    return LinkedList()


@pytest.fixture
def four_to_nine() -> LinkedList:
    """List 4 -> 5 -> 6 -> 7 -> 8 -> 9 built by appends and one prepend."""
    lst = LinkedList()
    for value in range(5, 10):
        lst.append(value)
    lst.prepend(4)
    return lst


def _values_of(lst: LinkedList) -> list:
    """Collect values by following next links from head."""
    values = []
    node = lst.head
    while node is not None:
        values.append(node.value)
        node = node.next
    return values


def _assert_invariants(lst: LinkedList) -> None:
    """
    Check head/tail/length bookkeeping.

    Args:
        lst: List to check
    """
    length = lst.size()
    assert len(lst) == length

    if length == 0:
        assert lst.head is None
        assert lst.tail is None
        assert lst.is_empty()
        return

    assert lst.head is not None
    assert lst.tail is not None
    assert not lst.is_empty()

    # Tail is exactly length - 1 steps from head and terminates the chain
    node = lst.head
    for step in range(length - 1):
        assert node.next is not None, f"Chain ended after {step + 1} nodes, length is {length}"
        node = node.next
    assert node is lst.tail
    assert lst.tail.next is None


@pytest.fixture
def values_of() -> Callable[[LinkedList], list]:
    return _values_of


@pytest.fixture
def assert_invariants() -> Callable[[LinkedList], None]:
    return _assert_invariants
