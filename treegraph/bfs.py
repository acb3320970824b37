"""Breadth-first search over an undirected graph held as an adjacency matrix."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterator

_VERTICES_PROMPT = "Enter the number of vertices:"
_EDGE_PROMPT = "Enter two vertices which are adjacent to each other:"
_START_PROMPT = "Enter a start vertex for BFS:"


class Graph:
    """Undirected graph whose vertices are labelled 1 to ``vertices``."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError(f"number of vertices must not be negative: {vertices}")
        self.vertices = vertices
        self.edges = 0
        self.matrix = [[0] * vertices for _ in range(vertices)]

    def _check_vertex(self, vertex: int) -> None:
        if not 1 <= vertex <= self.vertices:
            raise ValueError(f"vertex {vertex} is not between 1 and {self.vertices}")

    def add_edge(self, v1: int, v2: int) -> None:
        """Connect two vertices; both must be labels of this graph."""
        self._check_vertex(v1)
        self._check_vertex(v2)
        self.matrix[v1 - 1][v2 - 1] = 1
        self.matrix[v2 - 1][v1 - 1] = 1
        self.edges += 1

    def format_matrix(self) -> str:
        """Return the adjacency matrix, each entry followed by a tab."""
        return "".join(
            "".join(f"{cell}\t" for cell in row) + "\n" for row in self.matrix
        )

    def bfs(self, start: int) -> list[int]:
        """Return vertices in the order a breadth-first search from ``start`` visits them.

        Neighbours are visited in ascending order of their labels.
        """
        self._check_vertex(start)
        visited = {start}
        order = [start]
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for neighbour, linked in enumerate(self.matrix[current - 1], start=1):
                if linked and neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    queue.append(neighbour)
        return order


def _as_int(token: str | None) -> int | None:
    if token is None:
        return None
    try:
        return int(token)
    except ValueError:
        return None


def _read_graph(tokens: Iterator[str]) -> Graph:
    vertices = _as_int(next(tokens, None))
    if vertices is None:
        raise ValueError("number of vertices is missing")
    graph = Graph(vertices)
    print(_EDGE_PROMPT)
    while True:
        first = _as_int(next(tokens, None))
        if first is None:
            break
        second = _as_int(next(tokens, None))
        if second is None:
            break
        try:
            graph.add_edge(first, second)
        except ValueError:
            break
        print(_EDGE_PROMPT)
    return graph


def main(argv: list[str] | None = None) -> int:
    """Read a graph and a start vertex from standard input and print the BFS order."""
    parser = argparse.ArgumentParser(
        prog="treegraph-bfs",
        description="Breadth-first search of a graph read from standard input.",
    )
    parser.parse_args(argv)

    tokens = iter(sys.stdin.read().split())
    print(_VERTICES_PROMPT)
    try:
        graph = _read_graph(tokens)
        print(_START_PROMPT)
        start = _as_int(next(tokens, None))
        if start is None:
            raise ValueError("start vertex is missing")
        sys.stdout.write(graph.format_matrix())
        order = graph.bfs(start)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print("".join(f"{vertex} " for vertex in order), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())