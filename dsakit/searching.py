"""Linear and binary search over integer sequences."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Any


def linear_search(values: Sequence[Any], target: Any) -> list[int]:
    """Return every index at which *target* occurs, in ascending order."""
    return [index for index, value in enumerate(values) if value == target]


def binary_search(values: Sequence[Any], target: Any) -> list[int]:
    """Search a sorted sequence, returning each index where *target* was probed.

    The search keeps narrowing to the left after a hit, so the last index
    returned is the leftmost occurrence. An empty list means not found.
    """
    hits: list[int] = []
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            hits.append(mid)
        if values[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return hits


def report(hits: list[int], target: Any) -> list[str]:
    """Render search hits as the lines printed by the command."""
    if not hits:
        return ["Element not found"]
    return [f"element {target} found at index {index}" for index in hits]


def main(argv: list[str] | None = None) -> int:
    """Search an integer array with both linear and binary search."""
    parser = argparse.ArgumentParser(description="Search an array of integers.")
    parser.add_argument("target", type=int, help="element to search for")
    parser.add_argument("values", nargs="*", type=int, help="array elements")
    args = parser.parse_args(argv)

    print("\t".join(str(value) for value in args.values))
    print("with linear search")
    print("\n".join(report(linear_search(args.values, args.target), args.target)))
    print("with binary search")
    print("\n".join(report(binary_search(args.values, args.target), args.target)))
    return 0