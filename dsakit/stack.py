"""A bounded stack and bracket matching built on it."""

from __future__ import annotations

import argparse
from typing import Any


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(Exception):
    """Raised when popping from an empty stack."""


class Stack:
    """A last-in first-out stack holding at most *size* items."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Push *value* onto the stack."""
        if self.is_full():
            raise StackOverflowError("Stack is full - overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self.is_empty():
            raise StackUnderflowError("Stack is empty - underflow")
        return self._items.pop()

    def peek(self, position: int) -> Any:
        """Return the value *position* places from the top; 1 is the top."""
        if not 1 <= position <= len(self._items):
            raise IndexError(f"invalid position {position}")
        return self._items[-position]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.size

    def __len__(self) -> int:
        return len(self._items)


_PAIRS = {")": "(", "}": "{", "]": "["}


def _balanced(expression: str, pairs: dict[str, str]) -> bool:
    openers = set(pairs.values())
    pending: list[str] = []
    for ch in expression:
        if ch in openers:
            pending.append(ch)
        elif ch in pairs:
            if not pending or pending.pop() != pairs[ch]:
                return False
    return not pending


def parentheses_balanced(expression: str) -> bool:
    """Return True if round parentheses in *expression* are balanced."""
    return _balanced(expression, {")": "("})


def brackets_balanced(expression: str) -> bool:
    """Return True if (), {} and [] in *expression* are balanced and nested."""
    return _balanced(expression, _PAIRS)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Stack operations and bracket matching.")
    commands = parser.add_subparsers(dest="command", required=True)

    stack = commands.add_parser("stack", help="push, pop and peek")
    stack.add_argument("size", type=int)
    stack.add_argument("values", nargs="*", type=int)
    stack.add_argument("-p", "--pop", type=int, default=0, help="number of pops")
    stack.add_argument("-k", "--peek", type=int, default=None, help="position to peek")

    match = commands.add_parser("match", help="check bracket matching")
    match.add_argument("expression", nargs="?", default="8*(9)")
    match.add_argument(
        "-a", "--all-brackets", action="store_true", help="check (), {} and []"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run a stack session or a bracket check chosen on the command line."""
    args = _build_parser().parse_args(argv)

    if args.command == "match":
        check = brackets_balanced if args.all_brackets else parentheses_balanced
        if check(args.expression):
            print("Parenthesis matching")
            return 0
        print("Parenthesis not matching")
        return 1

    if args.size < 0:
        print("size must not be negative")
        return 1
    stack = Stack(args.size)
    for value in args.values:
        try:
            stack.push(value)
            print(f"pushed {value} to stack")
        except StackOverflowError as error:
            print(error)
    for _ in range(args.pop):
        try:
            print(f"popped {stack.pop()} from stack")
        except StackUnderflowError as error:
            print(error)
    if args.peek is not None:
        try:
            print(f"value at index {args.peek} is {stack.peek(args.peek)}")
        except IndexError:
            print("invalid position")
    return 0