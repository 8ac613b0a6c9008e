"""Classic data structures and algorithms: sorting, searching, trees, graphs,
linked lists, queues, stacks and small arithmetic and text helpers."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "arraystats",
    "bst",
    "calculator",
    "graph",
    "linkedlist",
    "mathfuncs",
    "queues",
    "searching",
    "sorting",
    "stack",
    "text",
]