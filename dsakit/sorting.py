"""Classic comparison sorts and merging of sorted sequences."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterable, Sequence
from typing import Any


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of *values* using bubble sort."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for i in range(end):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if not swapped:
            break
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of *values* using insertion sort."""
    items: list[Any] = []
    for key in values:
        j = len(items)
        items.append(key)
        while j > 0 and items[j - 1] > key:
            items[j] = items[j - 1]
            j -= 1
        items[j] = key
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of *values* using selection sort."""
    items = list(values)
    for i in range(len(items) - 1):
        min_index = min(range(i, len(items)), key=items.__getitem__)
        if min_index != i:
            items[i], items[min_index] = items[min_index], items[i]
    return items


def _merge_stable(left: Sequence[Any], right: Sequence[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of *values* using a stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge_stable(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[Any], low: int, high: int) -> int:
    pivot = items[high]
    i = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            i += 1
            items[i], items[j] = items[j], items[i]
    items[i + 1], items[high] = items[high], items[i + 1]
    return i + 1


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of *values* using quicksort with a last-element pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = _partition(items, low, high)
            pending.append((low, pivot_index - 1))
            pending.append((pivot_index + 1, high))
    return items


def _sift_down(items: list[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of *values* using heap sort."""
    items = list(values)
    size = len(items)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, root)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def merge_sorted(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Merge two already sorted sequences into one sorted list.

    On ties the element of *second* is taken first.
    """
    left, right = list(first), list(second)
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


ALGORITHMS: dict[str, Callable[[Iterable[Any]], list[Any]]] = {
    "bubble": bubble_sort,
    "insertion": insertion_sort,
    "selection": selection_sort,
    "merge": merge_sort,
    "quick": quick_sort,
    "heap": heap_sort,
}


def _show(values: Iterable[Any]) -> str:
    return "\t".join(str(value) for value in values)


def main(argv: list[str] | None = None) -> int:
    """Sort integers given on the command line and print both arrays."""
    parser = argparse.ArgumentParser(description="Sort a list of integers.")
    parser.add_argument(
        "-a",
        "--algorithm",
        choices=sorted(ALGORITHMS),
        default="bubble",
        help="sorting algorithm to use",
    )
    parser.add_argument("values", nargs="*", type=int, help="integers to sort")
    args = parser.parse_args(argv)

    print(f"Entered array:- {_show(args.values)}")
    print(f"Sorted array is:- {_show(ALGORITHMS[args.algorithm](args.values))}")
    return 0