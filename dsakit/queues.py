"""A bounded first-in first-out queue."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterator
from typing import Any


class QueueFullError(Exception):
    """Raised when enqueueing into a full queue."""


class QueueEmptyError(Exception):
    """Raised when dequeueing from an empty queue."""


class CircularQueue:
    """A FIFO queue holding at most *capacity* items."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        """Add *value* at the rear."""
        if self.is_full():
            raise QueueFullError(f"Queue is full. Cannot insert {value}.")
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self.is_empty():
            raise QueueEmptyError("Queue is empty. Cannot dequeue.")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)


_DEMO = ["10", "20", "30", "40", "50", "show", "dequeue", "dequeue", "show", "60", "70", "show"]


def _display(queue: CircularQueue) -> None:
    if queue.is_empty():
        print("Queue is empty.")
    else:
        print("Queue: " + " ".join(str(value) for value in queue))


def main(argv: list[str] | None = None) -> int:
    """Apply queue operations given on the command line, printing each result."""
    parser = argparse.ArgumentParser(description="Exercise a bounded queue.")
    parser.add_argument("-c", "--capacity", type=int, default=5)
    parser.add_argument(
        "operations",
        nargs="*",
        help="an integer to enqueue, 'dequeue' or 'show'",
    )
    args = parser.parse_args(argv)
    if args.capacity < 1:
        parser.error("capacity must be at least 1")

    queue = CircularQueue(args.capacity)
    for operation in args.operations or _DEMO:
        if operation in ("dequeue", "d"):
            try:
                print(f"Deleted {queue.dequeue()} from the queue.")
            except QueueEmptyError as error:
                print(error)
        elif operation in ("show", "s"):
            _display(queue)
        else:
            try:
                value = int(operation)
            except ValueError:
                parser.error(f"unknown operation {operation!r}")
            try:
                queue.enqueue(value)
                print(f"Inserted {value} into the queue.")
            except QueueFullError as error:
                print(error)
    return 0