"""Summary statistics and reversal of integer arrays."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def smallest_and_largest(values: Iterable[Any]) -> tuple[Any, Any]:
    """Return the smallest and largest value as a pair."""
    items = list(values)
    if not items:
        raise ValueError("no values given")
    return min(items), max(items)


def reversed_values(values: Iterable[Any]) -> list[Any]:
    """Return the values in reverse order."""
    return list(values)[::-1]


def sum_and_average(values: Iterable[int]) -> tuple[int, int]:
    """Return the sum and the integer average, truncated toward zero."""
    items = list(values)
    if not items:
        raise ValueError("no values given")
    total = sum(items)
    average = abs(total) // len(items)
    return total, -average if total < 0 else average