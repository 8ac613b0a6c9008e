"""Singly and doubly linked lists."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class _SinglyNode:
    data: Any
    next: _SinglyNode | None = None


class SinglyLinkedList:
    """A singly linked list with positional insertion and deletion."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _SinglyNode | None = None
        self._size = 0
        for value in reversed(list(values)):
            self.push_front(value)

    def push_front(self, value: Any) -> None:
        """Insert *value* at the start of the list."""
        self._head = _SinglyNode(value, self._head)
        self._size += 1

    def _node_at(self, index: int) -> _SinglyNode:
        node = self._head
        for _ in range(index):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def insert_at(self, index: int, value: Any) -> None:
        """Insert *value* so that it ends up at position *index*."""
        if not 0 <= index <= self._size:
            raise IndexError(f"invalid position {index} for list of {self._size} nodes")
        if index == 0:
            self.push_front(value)
            return
        previous = self._node_at(index - 1)
        previous.next = _SinglyNode(value, previous.next)
        self._size += 1

    def delete_at(self, index: int) -> Any:
        """Remove the node at position *index* and return its value."""
        if not 0 <= index < self._size:
            raise IndexError(f"invalid position {index} for list of {self._size} nodes")
        if index == 0:
            assert self._head is not None
            removed = self._head
            self._head = removed.next
        else:
            previous = self._node_at(index - 1)
            removed = previous.next
            assert removed is not None
            previous.next = removed.next
        self._size -= 1
        return removed.data

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next


@dataclass(eq=False)
class DoublyNode:
    """A node of a doubly linked list."""

    data: Any
    prev: DoublyNode | None = None
    next: DoublyNode | None = None


class DoublyLinkedList:
    """A doubly linked list whose nodes are handed out to callers."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: DoublyNode | None = None
        self.tail: DoublyNode | None = None
        for value in values:
            self.append(value)

    def append(self, value: Any) -> DoublyNode:
        """Add *value* at the end and return its node."""
        node = DoublyNode(value, prev=self.tail)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        return node

    def insert_after(self, node: DoublyNode | None, value: Any) -> DoublyNode:
        """Insert *value* right after *node* and return the new node."""
        if node is None:
            raise ValueError("previous node cannot be None")
        new = DoublyNode(value, prev=node, next=node.next)
        if node.next is None:
            self.tail = new
        else:
            node.next.prev = new
        node.next = new
        return new

    def remove(self, node: DoublyNode | None) -> None:
        """Unlink *node* from the list; None or an empty list is a no-op."""
        if self.head is None or node is None:
            return
        if self.head is node:
            self.head = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self.tail = node.prev
        if node.prev is not None:
            node.prev.next = node.next
        node.prev = node.next = None

    def search(self, key: Any) -> DoublyNode | None:
        """Return the first node holding *key*, or None."""
        node = self.head
        while node is not None:
            if node.data == key:
                return node
            node = node.next
        return None

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.data
            node = node.next


def _print_elements(values: Iterable[Any]) -> None:
    for value in values:
        print(f"Element:{value}")


def _show(values: Iterable[Any]) -> str:
    return " ".join(str(value) for value in values)


def _doubly_demo() -> None:
    items = DoublyLinkedList([10, 20, 30, 40])
    print(f"Doubly Linked List: {_show(items)}")
    second = items.search(20)
    items.insert_after(second, 25)
    print(f"After inserting 25 after 20: {_show(items)}")
    items.remove(second)
    print(f"After deleting node 20: {_show(items)}")
    key = 30
    if items.search(key) is not None:
        print(f"Element {key} found in the list.")
    else:
        print(f"Element {key} not found in the list.")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Work with linked lists.")
    commands = parser.add_subparsers(dest="command", required=True)

    push = commands.add_parser("push-front", help="insert a value at the start")
    push.add_argument("value", type=int)
    push.add_argument("values", nargs="*", type=int)

    insert = commands.add_parser("insert", help="insert a value at a position")
    insert.add_argument("index", type=int)
    insert.add_argument("value", type=int)
    insert.add_argument("values", nargs="*", type=int)

    delete = commands.add_parser("delete", help="delete the node at a position")
    delete.add_argument("index", type=int)
    delete.add_argument("values", nargs="*", type=int)

    count = commands.add_parser("count", help="count the nodes")
    count.add_argument("values", nargs="*", type=int)

    commands.add_parser("doubly", help="run the doubly linked list demonstration")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one linked list operation chosen on the command line."""
    args = _build_parser().parse_args(argv)
    if args.command == "doubly":
        _doubly_demo()
        return 0

    items = SinglyLinkedList()
    for value in args.values:
        items.push_front(value)

    if args.command == "count":
        print(f"The number of nodes in the linked list are:-{len(items)}")
        return 0

    print("The entered linked list is:-")
    _print_elements(items)
    if args.command == "push-front":
        print("Inserting element at first:-")
        items.push_front(args.value)
    else:
        try:
            if args.command == "insert":
                items.insert_at(args.index, args.value)
                print("after inserting in-between:-")
            else:
                items.delete_at(args.index)
                print("After deletion:-")
        except IndexError:
            print("Please enter a valid location")
            return 1
    _print_elements(items)
    return 0