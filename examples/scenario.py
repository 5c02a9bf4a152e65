"""
Basic LinkedList walkthrough.

Builds the list 4 -> 5 -> 6 -> 7 -> 8 -> 9 by appending 5..9 and
prepending 4, then prints the result of each query operation.

Expected output:
    4
    9
    6
    Node(6)
    True
    True
    False
    1
    5
    None
    ( 4 ) --> ( 5 ) --> ( 6 ) --> ( 7 ) --> ( 8 ) --> ( 9 ) --> null
"""

from __future__ import annotations

from pylinkedlist import LinkedList


def build() -> LinkedList[int]:
    lst: LinkedList[int] = LinkedList()
    for value in range(5, 10):
        lst.append(value)
    lst.prepend(4)
    return lst


def main() -> None:
    lst = build()

    print(lst.return_head())
    print(lst.return_tail())
    print(lst.size())
    print(repr(lst.at(2)))
    print(lst.contains(6))
    print(lst.contains(9))
    print(lst.contains(10))
    print(lst.find(5))
    print(lst.find(9))
    print(lst.find(10))
    print(lst.to_string())


if __name__ == "__main__":
    main()
