"""Integer arithmetic chosen by menu number, and value swapping."""

from __future__ import annotations

import argparse
from enum import IntEnum


class Operation(IntEnum):
    """The menu choices of the calculator."""

    ADD = 1
    SUBTRACT = 2
    MULTIPLY = 3
    DIVIDE = 4
    MODULO = 5


def _truncating_divmod(a: int, b: int) -> tuple[int, int]:
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - b * quotient


def calculate(a: int, b: int, choice: int | Operation) -> int:
    """Apply the operation numbered *choice* to *a* and *b*.

    Division truncates toward zero and the remainder takes the sign of *a*.
    """
    try:
        operation = Operation(choice)
    except ValueError:
        raise ValueError(f"invalid choice {choice}") from None
    if operation is Operation.ADD:
        return a + b
    if operation is Operation.SUBTRACT:
        return a - b
    if operation is Operation.MULTIPLY:
        return a * b
    if b == 0:
        raise ZeroDivisionError("division by zero")
    quotient, remainder = _truncating_divmod(a, b)
    return quotient if operation is Operation.DIVIDE else remainder


def swap(a, b):
    """Return the two values in exchanged order."""
    return b, a


def main(argv: list[str] | None = None) -> int:
    """Run a calculation or a swap given on the command line."""
    parser = argparse.ArgumentParser(description="Menu calculator and swap.")
    commands = parser.add_subparsers(dest="command", required=True)

    calc = commands.add_parser("calc", help="apply an operation to two integers")
    calc.add_argument("a", type=int)
    calc.add_argument("b", type=int)
    calc.add_argument(
        "choice", type=int, help="1 add, 2 subtract, 3 multiply, 4 divide, 5 modulo"
    )

    exchange = commands.add_parser("swap", help="swap two integers")
    exchange.add_argument("a", type=int)
    exchange.add_argument("b", type=int)

    args = parser.parse_args(argv)

    if args.command == "swap":
        print(f"before swap:{args.a},{args.b}")
        x, y = swap(args.a, args.b)
        print(f"after swap:{x},{y}")
        return 0

    try:
        answer = calculate(args.a, args.b, args.choice)
    except ValueError:
        print("enter valid choice")
        print("thank you")
        return 1
    except ZeroDivisionError as error:
        print(error)
        print("thank you")
        return 1
    print(f"answer={answer}")
    print("thank you")
    return 0