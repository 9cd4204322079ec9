"""Binary tree built from a preorder description with '#' marking empty subtrees."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from itertools import islice
from typing import Iterator

EMPTY = "#"
SAMPLE_PREORDER = "124##5##3#67###"


@dataclass
class TreeNode:
    """A node holding one character."""

    data: str
    left: TreeNode | None = None
    right: TreeNode | None = None


def build_preorder(text: str) -> TreeNode | None:
    """Build a tree from its preorder description; characters after the tree are ignored."""
    chars = iter(text)

    def build() -> TreeNode | None:
        ch = next(chars, None)
        if ch is None:
            raise ValueError("preorder description ends before the tree is complete")
        if ch == EMPTY:
            return None
        node = TreeNode(ch)
        node.left = build()
        node.right = build()
        return node

    return build()


def preorder(root: TreeNode | None) -> Iterator[str]:
    """Yield node data in preorder, using an explicit stack."""
    stack: list[TreeNode] = []
    node = root
    while node is not None or stack:
        while node is not None:
            yield node.data
            stack.append(node)
            node = node.left
        node = stack.pop().right


def preorder_prefix(root: TreeNode | None, length: int) -> list[str]:
    """Return the first length nodes of the preorder traversal."""
    if length < 0:
        raise ValueError("length must not be negative")
    return list(islice(preorder(root), length))


def main(argv: list[str] | None = None) -> int:
    """Print every preorder path prefix of the tree given (or of the sample tree)."""
    args = sys.argv[1:] if argv is None else argv
    text = args[0] if args else SAMPLE_PREORDER
    try:
        root = build_preorder(text)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    total = sum(1 for _ in preorder(root))
    for length in range(1, total + 1):
        path = "".join(f"{c} " for c in preorder_prefix(root, length))
        print(f"path: {path} length: {length}")
    return 0


if __name__ == "__main__":
    sys.exit(main())