"""Directed graph stored as adjacency lists, traversed depth-first and breadth-first."""

from __future__ import annotations

import sys
from collections import deque
from typing import Iterable

MAX_VERTICES = 100


class Graph:
    """Directed graph whose vertices carry an integer value each.

    Successors of a vertex are kept newest first: every added edge is put
    at the front of its source vertex's list.
    """

    def __init__(self, data: Iterable[int]) -> None:
        self.data = list(data)
        if len(self.data) > MAX_VERTICES:
            raise ValueError(f"a graph holds at most {MAX_VERTICES} vertices")
        self._adjacency: list[list[int]] = [[] for _ in self.data]

    def __len__(self) -> int:
        return len(self.data)

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self.data):
            raise IndexError(f"vertex {index} out of range")

    def add_edge(self, i: int, j: int) -> None:
        """Add the directed edge i -> j."""
        self._check(i)
        self._check(j)
        self._adjacency[i].insert(0, j)

    def neighbors(self, i: int) -> list[int]:
        """Return the successors of vertex i, most recently added first."""
        self._check(i)
        return list(self._adjacency[i])

    def format(self) -> str:
        """Render the adjacency lists as text."""
        lines = ["------------------adjacency list-----------------"]
        for index, value in enumerate(self.data):
            lines.append("")
            lines.append(f"start vertex: {index}; data: {value}")
            chain = "".join(f"->[{j}]" for j in self._adjacency[index])
            lines.append(f"[{value}]{chain}")
        lines.append("-----------------------------------------")
        return "\n".join(lines)


def dfs(graph: Graph, start: int) -> list[int]:
    """Depth-first traversal with an explicit stack; returns the visited values."""
    graph._check(start)
    stack = [start]
    visited: set[int] = set()
    order: list[int] = []
    while stack:
        node = stack.pop()
        if node in visited:
            continue
        visited.add(node)
        order.append(graph.data[node])
        stack.extend(n for n in graph.neighbors(node) if n not in visited)
    return order


def bfs(graph: Graph, start: int) -> list[int]:
    """Breadth-first traversal with a queue; returns the visited values."""
    graph._check(start)
    visited = {start}
    order = [graph.data[start]]
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for neighbor in graph.neighbors(node):
            if neighbor not in visited:
                visited.add(neighbor)
                order.append(graph.data[neighbor])
                queue.append(neighbor)
    return order


def _read_pair(prompt: str) -> tuple[int, int]:
    first, second = input(prompt).split(",")
    return int(first), int(second)


def _format_visit(values: list[int]) -> str:
    return "".join(f"[{value}]" for value in values)


def main(argv: list[str] | None = None) -> int:
    """Read a graph interactively, print it and traverse it from a chosen vertex."""
    try:
        vertex_count, edge_count = _read_pair("Vertex count and edge count, separated by ',': ")
        data = [int(input(f"Data of vertex {i}: ")) for i in range(vertex_count)]
        graph = Graph(data)
        for _ in range(edge_count):
            i, j = _read_pair("Vertices of edge (vi,vj):\n")
            graph.add_edge(i, j)
        print(f"Graph created. Vertex count: {len(graph)}")
        print(graph.format())
        start = int(input("Start vertex: "))
        print(_format_visit(dfs(graph, start)))
        print("DFS finish")
        print(_format_visit(bfs(graph, start)))
        print("BFS finish")
    except (ValueError, IndexError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())