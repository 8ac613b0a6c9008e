"""Binary search trees and iterative traversals of binary trees."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import pairwise
from typing import Any


@dataclass(eq=False)
class Node:
    """A binary tree node."""

    data: Any
    left: Node | None = None
    right: Node | None = None


def inorder_iterative(root: Node | None) -> Iterator[Any]:
    """Yield node values left, root, right without recursion."""
    stack: list[Node] = []
    current = root
    while current is not None or stack:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        yield current.data
        current = current.right


def preorder_iterative(root: Node | None) -> Iterator[Any]:
    """Yield node values root, left, right without recursion."""
    if root is None:
        return
    stack = [root]
    while stack:
        current = stack.pop()
        yield current.data
        if current.right is not None:
            stack.append(current.right)
        if current.left is not None:
            stack.append(current.left)


def postorder_iterative(root: Node | None) -> Iterator[Any]:
    """Yield node values left, right, root without recursion."""
    stack: list[Node] = []
    current = root
    last_visited: Node | None = None
    while current is not None or stack:
        while current is not None:
            stack.append(current)
            current = current.left
        top = stack[-1]
        if top.right is None or top.right is last_visited:
            yield top.data
            stack.pop()
            last_visited = top
        else:
            current = top.right


def is_bst(root: Node | None) -> bool:
    """Return True if the in-order values of the tree strictly increase."""
    return all(a < b for a, b in pairwise(inorder_iterative(root)))


class BinarySearchTree:
    """A binary search tree holding distinct values."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Node | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Insert *value*; a value already present is ignored."""
        if self.root is None:
            self.root = Node(value)
            return
        node = self.root
        while True:
            if value < node.data:
                if node.left is None:
                    node.left = Node(value)
                    return
                node = node.left
            elif value > node.data:
                if node.right is None:
                    node.right = Node(value)
                    return
                node = node.right
            else:
                return

    def delete(self, value: Any) -> None:
        """Remove *value* if present, using the in-order successor for two children."""
        parent: Node | None = None
        node = self.root
        while node is not None and node.data != value:
            parent = node
            node = node.left if value < node.data else node.right
        if node is None:
            return
        if node.left is not None and node.right is not None:
            successor_parent, successor = node, node.right
            while successor.left is not None:
                successor_parent, successor = successor, successor.left
            node.data = successor.data
            parent, node = successor_parent, successor
        child = node.left if node.left is not None else node.right
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def __contains__(self, value: Any) -> bool:
        node = self.root
        while node is not None:
            if value < node.data:
                node = node.left
            elif value > node.data:
                node = node.right
            else:
                return True
        return False

    def min_value(self) -> Any:
        """Return the smallest value in the tree."""
        if self.root is None:
            raise ValueError("tree is empty")
        node = self.root
        while node.left is not None:
            node = node.left
        return node.data

    def inorder(self) -> list[Any]:
        """Return the values in sorted (in-order) order."""
        return list(inorder_iterative(self.root))

    def preorder(self) -> list[Any]:
        """Return the values in pre-order."""
        return list(preorder_iterative(self.root))

    def postorder(self) -> list[Any]:
        """Return the values in post-order."""
        return list(postorder_iterative(self.root))


_DEMO_VALUES = [50, 30, 20, 40, 70, 60, 80]
_DEMO_DELETIONS = [20, 30, 50]


def _show(values: Iterable[Any]) -> str:
    return " ".join(str(value) for value in values)


def main(argv: list[str] | None = None) -> int:
    """Build a tree, print its traversals, then delete values one by one."""
    parser = argparse.ArgumentParser(description="Build and edit a binary search tree.")
    parser.add_argument("values", nargs="*", type=int, help="values to insert")
    parser.add_argument(
        "-d", "--delete", action="append", type=int, default=None, help="value to delete"
    )
    args = parser.parse_args(argv)

    values = args.values or _DEMO_VALUES
    deletions = args.delete if args.delete is not None else (
        [] if args.values else _DEMO_DELETIONS
    )

    tree = BinarySearchTree(values)
    print(f"Preorder Traversal: {_show(tree.preorder())}")
    print(f"Postorder Traversal: {_show(tree.postorder())}")
    print("In-order traversal of the given tree:")
    print(_show(tree.inorder()))
    for value in deletions:
        print()
        print(f"Delete {value}")
        tree.delete(value)
        print("In-order traversal after deletion:")
        print(_show(tree.inorder()))
    print("This is a bst" if is_bst(tree.root) else "This is not a bst")
    return 0