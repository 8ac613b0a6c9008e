"""Undirected graphs with breadth-first and depth-first traversal."""

from __future__ import annotations

import argparse
from collections import deque


class Graph:
    """An undirected graph over vertices numbered from 0."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self.vertices = vertices
        self._adjacent: list[set[int]] = [set() for _ in range(vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertices:
            raise IndexError(f"vertex {vertex} out of range 0..{self.vertices - 1}")

    def _neighbours(self, vertex: int) -> list[int]:
        return sorted(self._adjacent[vertex])

    def add_edge(self, v1: int, v2: int) -> None:
        """Connect *v1* and *v2* in both directions."""
        self._check(v1)
        self._check(v2)
        self._adjacent[v1].add(v2)
        self._adjacent[v2].add(v1)

    def bfs(self, start: int) -> list[int]:
        """Return vertices in breadth-first order, neighbours by ascending number."""
        self._check(start)
        visited = {start}
        order: list[int] = []
        pending = deque([start])
        while pending:
            vertex = pending.popleft()
            order.append(vertex)
            for neighbour in self._neighbours(vertex):
                if neighbour not in visited:
                    visited.add(neighbour)
                    pending.append(neighbour)
        return order

    def dfs(self, start: int) -> list[int]:
        """Return vertices in depth-first order, neighbours by ascending number."""
        self._check(start)
        visited = {start}
        order = [start]
        stack = [iter(self._neighbours(start))]
        while stack:
            for neighbour in stack[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    stack.append(iter(self._neighbours(neighbour)))
                    break
            else:
                stack.pop()
        return order


def main(argv: list[str] | None = None) -> int:
    """Traverse a graph described on the command line."""
    parser = argparse.ArgumentParser(description="Traverse an undirected graph.")
    parser.add_argument("vertices", type=int, help="number of vertices")
    parser.add_argument("start", type=int, help="starting vertex")
    parser.add_argument(
        "-e",
        "--edge",
        nargs=2,
        type=int,
        action="append",
        default=[],
        metavar=("V1", "V2"),
        help="an edge between two vertices",
    )
    parser.add_argument(
        "-t", "--traversal", choices=("bfs", "dfs", "both"), default="both"
    )
    args = parser.parse_args(argv)

    try:
        graph = Graph(args.vertices)
        for v1, v2 in args.edge:
            graph.add_edge(v1, v2)
        results = []
        if args.traversal in ("bfs", "both"):
            results.append(("BFS", graph.bfs(args.start)))
        if args.traversal in ("dfs", "both"):
            results.append(("DFS", graph.dfs(args.start)))
    except (IndexError, ValueError) as error:
        print(error)
        return 1

    for name, order in results:
        print(f"{name} Traversal: {' '.join(str(v) for v in order)}")
    return 0