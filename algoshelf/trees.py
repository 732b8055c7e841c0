"""Binary trees: a binary search tree and the classic traversals."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = [
    "BinarySearchTree",
    "Node",
    "from_level_values",
    "height",
    "inorder",
    "iterative_inorder",
    "level_order",
    "main",
    "postorder",
    "preorder",
    "render",
    "zigzag_level_order",
]


@dataclass(eq=False)
class Node:
    """A binary tree node."""

    value: Any
    left: Node | None = None
    right: Node | None = None


def inorder(root: Node | None) -> Iterator[Any]:
    """Yield values left subtree, node, right subtree."""
    if root is None:
        return
    yield from inorder(root.left)
    yield root.value
    yield from inorder(root.right)


def preorder(root: Node | None) -> Iterator[Any]:
    """Yield values node, left subtree, right subtree."""
    if root is None:
        return
    yield root.value
    yield from preorder(root.left)
    yield from preorder(root.right)


def postorder(root: Node | None) -> Iterator[Any]:
    """Yield values left subtree, right subtree, node."""
    if root is None:
        return
    yield from postorder(root.left)
    yield from postorder(root.right)
    yield root.value


def level_order(root: Node | None) -> Iterator[Any]:
    """Yield values level by level, left to right."""
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        yield node.value
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)


def iterative_inorder(root: Node | None) -> Iterator[Any]:
    """In-order traversal driven by an explicit stack instead of recursion."""
    stack: list[Node] = []
    current = root
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        yield current.value
        current = current.right


def height(root: Node | None) -> int:
    """Number of nodes on the longest path from ``root`` down to a leaf."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def zigzag_level_order(root: Node | None) -> Iterator[Any]:
    """Yield values level by level; odd levels (counting from 1) run right to left."""
    level = [root] if root is not None else []
    depth = 1
    while level:
        values = [node.value for node in level]
        yield from (reversed(values) if depth % 2 else values)
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
        depth += 1


def from_level_values(values: Iterable[Any]) -> Node | None:
    """Build a tree from values in level order, heap style.

    The children of position i are at 2i+1 and 2i+2. None marks an absent
    node; values placed below an absent node are dropped.
    """
    nodes = [None if value is None else Node(value) for value in values]
    for index, node in enumerate(nodes):
        if node is None:
            continue
        left = 2 * index + 1
        if left < len(nodes):
            node.left = nodes[left]
        if left + 1 < len(nodes):
            node.right = nodes[left + 1]
    return nodes[0] if nodes else None


def render(values: Iterable[Any]) -> str:
    """Concatenate values, showing the placeholder ``-`` as a space."""
    return "".join(" " if value == "-" else str(value) for value in values)


class BinarySearchTree:
    """Unbalanced binary search tree; equal values go to the right."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return self._size

    def insert(self, value: Any) -> None:
        """Add ``value`` to the tree."""
        node = Node(value)
        self._size += 1
        if self.root is None:
            self.root = node
            return
        current = self.root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def __contains__(self, value: Any) -> bool:
        current = self.root
        while current is not None:
            if current.value == value:
                return True
            current = current.left if value < current.value else current.right
        return False

    def inorder(self) -> list[Any]:
        """Values in ascending order."""
        return list(iterative_inorder(self.root))

    def preorder(self) -> list[Any]:
        """Values in pre-order."""
        return list(preorder(self.root))

    def postorder(self) -> list[Any]:
        """Values in post-order."""
        return list(postorder(self.root))


def main(argv: list[str] | None = None) -> int:
    """Build a tree from level-order values and print its three depth-first traversals."""
    parser = argparse.ArgumentParser(
        prog="algoshelf-tree",
        description="Print the in-order, pre-order and post-order traversals of a tree "
        "given in level order; '-' is shown as a space.",
    )
    parser.add_argument("values", nargs="+", help="node values in level order")
    args = parser.parse_args(argv)
    root = from_level_values(args.values)
    for traversal in (inorder, preorder, postorder):
        print(render(traversal(root)))
    return 0