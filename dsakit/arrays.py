"""Index- and value-based editing of integer arrays."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Any

from dsakit.searching import binary_search, linear_search, report


def _check_index(values: Sequence[Any], index: int) -> None:
    if not 0 <= index <= len(values) - 1:
        raise IndexError(f"invalid index {index} for array of size {len(values)}")


def replace_at(values: Sequence[Any], index: int, element: Any) -> list[Any]:
    """Return a copy of *values* with the item at *index* replaced."""
    _check_index(values, index)
    result = list(values)
    result[index] = element
    return result


def insert_at(values: Sequence[Any], index: int, element: Any) -> list[Any]:
    """Return a copy of *values* with *element* inserted before *index*.

    The index must name an existing position.
    """
    _check_index(values, index)
    result = list(values)
    result.insert(index, element)
    return result


def delete_at(values: Sequence[Any], index: int) -> list[Any]:
    """Return a copy of *values* without the item at *index*."""
    _check_index(values, index)
    result = list(values)
    del result[index]
    return result


def delete_value(values: Sequence[Any], element: Any) -> list[Any]:
    """Return a copy of *values* with every occurrence of *element* removed."""
    result = [value for value in values if value != element]
    if len(result) == len(values):
        raise ValueError(f"element {element} not found")
    return result


def _show(values: Sequence[Any]) -> str:
    return "\t".join(str(value) for value in values)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Edit or search an array of integers.")
    commands = parser.add_subparsers(dest="command", required=True)

    replace = commands.add_parser("replace", help="replace the element at an index")
    replace.add_argument("index", type=int)
    replace.add_argument("element", type=int)
    replace.add_argument("values", nargs="*", type=int)

    insert = commands.add_parser("insert", help="insert an element at an index")
    insert.add_argument("index", type=int)
    insert.add_argument("element", type=int)
    insert.add_argument("values", nargs="*", type=int)

    delete = commands.add_parser("delete", help="delete the element at an index")
    delete.add_argument("index", type=int)
    delete.add_argument("values", nargs="*", type=int)

    delete_val = commands.add_parser("delete-value", help="delete an element by value")
    delete_val.add_argument("element", type=int)
    delete_val.add_argument("values", nargs="*", type=int)

    search = commands.add_parser("search", help="search for an element")
    search.add_argument("element", type=int)
    search.add_argument("values", nargs="*", type=int)

    show = commands.add_parser("show", help="display the array")
    show.add_argument("values", nargs="*", type=int)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one array operation chosen on the command line."""
    args = _build_parser().parse_args(argv)
    values: list[int] = args.values

    if args.command == "show":
        print("The entered array is:-")
        print(_show(values))
        return 0

    if args.command == "search":
        print("The entered array is:-")
        print(_show(values))
        print("with linear search")
        print("\n".join(report(linear_search(values, args.element), args.element)))
        print("with binary search")
        print("\n".join(report(binary_search(values, args.element), args.element)))
        return 0

    if args.command == "delete-value":
        print(f"Before deletion:-{_show(values)}")
        try:
            result = delete_value(values, args.element)
        except ValueError:
            print("Element not found")
            return 1
        print(f"after deletion:-{_show(result)}")
        return 0

    labels = {
        "replace": ("replacing", lambda: replace_at(values, args.index, args.element)),
        "insert": ("insertion", lambda: insert_at(values, args.index, args.element)),
        "delete": ("deletion", lambda: delete_at(values, args.index)),
    }
    label, operation = labels[args.command]
    print(f"Before {label}:-{_show(values)}")
    try:
        result = operation()
    except IndexError:
        print("Please enter a valid index")
        return 1
    print(f"after {label}:-{_show(result)}")
    return 0