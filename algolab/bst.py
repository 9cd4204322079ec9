"""Binary search tree of distinct integers that records each node's depth."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, Iterator

SAMPLE_VALUES = (8, 3, 10, 1, 6, 14, 4, 7, 13)


@dataclass
class _Node:
    value: int
    level: int
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree:
    """Binary search tree; the root sits on level 1 and duplicates are ignored."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: _Node | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> bool:
        """Insert value; return False if it was already present."""
        if self._root is None:
            self._root = _Node(value, 1)
            return True
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = _Node(value, node.level + 1)
                    return True
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = _Node(value, node.level + 1)
                    return True
                node = node.right
            else:
                return False

    def _find(self, value: int) -> _Node | None:
        node = self._root
        while node is not None and node.value != value:
            node = node.left if value < node.value else node.right
        return node

    def level_of(self, value: int) -> int:
        """Return the level of value's node; raise KeyError if absent."""
        node = self._find(value)
        if node is None:
            raise KeyError(value)
        return node.level

    def inorder(self) -> Iterator[int]:
        """Yield the stored values in ascending order."""
        stack: list[_Node] = []
        node = self._root
        while node is not None or stack:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self._find(value) is not None


def main(argv: list[str] | None = None) -> int:
    """Build the sample tree, insert a number read from input and print in order."""
    tree = BinarySearchTree(SAMPLE_VALUES)
    print("Binary search tree built")
    try:
        value = int(input("Number to insert:\n"))
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    if not tree.insert(value):
        print(f"Node already exists value: {value}; level: {tree.level_of(value)}")
    print("\nIn-order traversal:")
    print(" ".join(f"[{v}]" for v in tree.inorder()))
    return 0


if __name__ == "__main__":
    sys.exit(main())