"""Singly linked list with a head sentinel and a circular doubly linked list."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator

SAMPLE_VALUES = (1, 2, 75, 4, 56, 31, 25, 65, 9, 4)


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: int, next_node: _Node | None = None) -> None:
        self.value = value
        self.next = next_node


class LinkedList:
    """Singly linked list of integers addressed by 1-based positions."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head = _Node(0)
        self._size = 0
        tail = self._head
        for value in values:
            tail.next = _Node(value)
            tail = tail.next
            self._size += 1

    def _nodes(self, start: _Node | None) -> Iterator[_Node]:
        node = start
        while node is not None:
            yield node
            node = node.next

    def insert(self, location: int, value: int) -> None:
        """Insert value so that it becomes the node at 1-based position location."""
        if not 1 <= location <= self._size + 1:
            raise IndexError(f"position {location} does not exist")
        previous = self._head
        for _ in range(location - 1):
            previous = previous.next
        previous.next = _Node(value, previous.next)
        self._size += 1

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes(self._head.next))

    def clear(self) -> None:
        """Remove every node."""
        self._head.next = None
        self._size = 0

    def sort(self) -> None:
        """Sort ascending in place by selection, swapping node values."""
        for node in self._nodes(self._head.next):
            smallest = min(self._nodes(node), key=lambda n: n.value)
            node.value, smallest.value = smallest.value, node.value

    def total(self) -> int:
        """Return the sum of the values."""
        return sum(self)

    def extremes(self) -> tuple[int, int]:
        """Return (maximum, minimum); raise ValueError when empty."""
        if not self._size:
            raise ValueError("list is empty")
        return max(self), min(self)


class _DNode:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: int) -> None:
        self.value = value
        self.prev: _DNode = self
        self.next: _DNode = self


class CircularDoublyLinkedList:
    """Circular doubly linked list built around a head sentinel."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head = _DNode(0)
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: int) -> None:
        """Add value after the last node."""
        node = _DNode(value)
        last = self._head.prev
        node.prev = last
        node.next = self._head
        last.next = node
        self._head.prev = node
        self._size += 1

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self._head.next
        while node is not self._head:
            yield node.value
            node = node.next

    def iter_from(self, location: int) -> Iterator[int]:
        """Yield every value once, starting at 1-based position location and wrapping round."""
        if not 1 <= location <= self._size:
            raise IndexError(f"position {location} does not exist")
        start = self._head
        for _ in range(location):
            start = start.next
        yield start.value
        node = start.next
        while node is not start:
            if node is not self._head:
                yield node.value
            node = node.next


def format_chain(values: Iterable[int]) -> str:
    """Render values as a chain such as [1]->[2]->[3]."""
    return "->".join(f"[{value}]" for value in values)


def main(argv: list[str] | None = None) -> int:
    """Demonstrate the lists on the sample values."""
    unsorted = LinkedList(SAMPLE_VALUES)
    largest, smallest = unsorted.extremes()
    print(f"L1:{format_chain(unsorted)}")
    print(f"max: {largest} ; min: {smallest}")

    ordered = LinkedList(SAMPLE_VALUES)
    ordered.sort()
    print(f"L2:{format_chain(ordered)}")
    print(f"sum: {ordered.total()}")

    ring = CircularDoublyLinkedList(SAMPLE_VALUES)
    values = list(ring.iter_from(2))
    print(f"double list start value: {values[0]}")
    print("traversal: " + "".join(f"[{value}]" for value in values))
    return 0


if __name__ == "__main__":
    sys.exit(main())