"""Backtracking m-colouring of a graph given as an adjacency matrix."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

DEFAULT_GRAPH: tuple[tuple[int, ...], ...] = (
    (0, 1, 1, 1),
    (1, 0, 1, 0),
    (1, 1, 0, 1),
    (1, 0, 1, 0),
)
DEFAULT_COLOURS = 3


def is_safe(
    graph: Sequence[Sequence[int]], colours: Sequence[int], vertex: int, colour: int
) -> bool:
    """Return True if no neighbour of ``vertex`` already holds ``colour``."""
    return not any(
        linked and assigned == colour
        for linked, assigned in zip(graph[vertex], colours)
    )


def colour_graph(
    graph: Sequence[Sequence[int]], colours_available: int
) -> list[int] | None:
    """Colour vertices with colours 1..colours_available, or return None if that fails.

    Vertices are coloured in index order, each with the lowest colour that works.
    A vertex keeps its last tried colour when the search backs out past it.
    """
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("adjacency matrix must be square")
    colours = [0] * size

    def assign(vertex: int) -> bool:
        if vertex == size:
            return True
        for colour in range(1, colours_available + 1):
            if is_safe(graph, colours, vertex, colour):
                colours[vertex] = colour
                if assign(vertex + 1):
                    return True
        return False

    return colours if assign(0) else None


def format_solution(colours: Sequence[int]) -> str:
    """Return the report printed for a found colouring."""
    return (
        "Solution Exists: Following are the assigned colors \n"
        + "".join(f" {colour} " for colour in colours)
        + "\n"
    )


def main(argv: list[str] | None = None) -> int:
    """Colour the built-in four-vertex graph with three colours and print the result."""
    parser = argparse.ArgumentParser(
        prog="treegraph-colouring",
        description="Find a 3-colouring of a fixed four-vertex graph.",
    )
    parser.parse_args(argv)

    colours = colour_graph(DEFAULT_GRAPH, DEFAULT_COLOURS)
    if colours is None:
        print("Solution does not exist", end="")
    else:
        print(format_solution(colours), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())