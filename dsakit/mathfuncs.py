"""Small number-theory helpers: factorials, Fibonacci numbers, primes and more."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator


def _digits(number: int) -> Iterator[int]:
    number = abs(number)
    while number:
        number, digit = divmod(number, 10)
        yield digit


def is_armstrong(number: int) -> bool:
    """Return True if *number* equals the sum of the cubes of its digits.

    Negative numbers are handled by their sign: -153 counts like 153.
    """
    sign = -1 if number < 0 else 1
    return number == sign * sum(digit**3 for digit in _digits(number))


def factorial(n: int) -> int:
    """Return the product 1 * 2 * ... * n; an empty product (n < 1) is 1."""
    return math.prod(range(1, n + 1))


def fibonacci(n: int) -> int:
    """Return the *n*-th Fibonacci number, with fibonacci(0) == 0 and fibonacci(1) == 1."""
    if n < 0:
        raise ValueError("n must not be negative")
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return previous


def fibonacci_series(n: int) -> list[int]:
    """Return the first *n* Fibonacci numbers, starting 0, 1."""
    if n < 0:
        raise ValueError("n must not be negative")
    series: list[int] = []
    previous, current = 0, 1
    for _ in range(n):
        series.append(previous)
        previous, current = current, previous + current
    return series


def power(base: int, exponent: int) -> int:
    """Return *base* raised to a non-negative integer *exponent*."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    result = 1
    for _ in range(exponent):
        result *= base
    return result


def is_prime(n: int) -> bool:
    """Return True if *n* is a prime number."""
    if n < 2:
        return False
    return all(n % divisor for divisor in range(2, math.isqrt(n) + 1))


def multiplication_row(factor: int, count: int = 10) -> list[int]:
    """Return the multiples factor * 1 up to factor * count."""
    if count < 0:
        raise ValueError("count must not be negative")
    return [factor * i for i in range(1, count + 1)]


def odd_elements(values: Iterable[int]) -> list[int]:
    """Return the odd values, in their original order."""
    return [value for value in values if value % 2 != 0]