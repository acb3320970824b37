import pytest

from treegraph.colouring import (
    DEFAULT_COLOURS,
    DEFAULT_GRAPH,
    colour_graph,
    format_solution,
    is_safe,
    main,
)


def _edges(graph):
    size = len(graph)
    return [(a, b) for a in range(size) for b in range(size) if graph[a][b]]


TRIANGLE = ((0, 1, 1), (1, 0, 1), (1, 1, 0))
SQUARE_CYCLE = ((0, 1, 0, 1), (1, 0, 1, 0), (0, 1, 0, 1), (1, 0, 1, 0))


def test_default_graph_solution():
    assert colour_graph(DEFAULT_GRAPH, DEFAULT_COLOURS) == [1, 2, 3, 2]


def test_default_graph_solution_is_proper():
    colours = colour_graph(DEFAULT_GRAPH, DEFAULT_COLOURS)
    assert len(colours) == len(DEFAULT_GRAPH)
    assert min(colours) >= 1
    assert max(colours) <= DEFAULT_COLOURS
    clashes = [(a, b) for a, b in _edges(DEFAULT_GRAPH) if colours[a] == colours[b]]
    assert clashes == []


def test_triangle_needs_three_colours():
    assert colour_graph(TRIANGLE, 2) is None
    colours = colour_graph(TRIANGLE, 3)
    assert sorted(colours) == [1, 2, 3]


def test_even_cycle_two_colours():
    colours = colour_graph(SQUARE_CYCLE, 2)
    assert colours == [1, 2, 1, 2]
    clashes = [(a, b) for a, b in _edges(SQUARE_CYCLE) if colours[a] == colours[b]]
    assert clashes == []


def test_no_colours_fails_for_nonempty_graph():
    assert colour_graph(((0,),), 0) is None


def test_empty_graph_trivially_coloured():
    assert colour_graph((), 3) == []


def test_non_square_matrix_rejected():
    with pytest.raises(ValueError):
        colour_graph(((0, 1), (1, 0, 0)), 2)


def test_is_safe_checks_neighbours():
    colours = [1, 0, 0, 0]
    assert is_safe(DEFAULT_GRAPH, colours, 1, 1) is False
    assert is_safe(DEFAULT_GRAPH, colours, 1, 2) is True


def test_is_safe_ignores_non_neighbours():
    colours = [0, 2, 0, 0]
    assert is_safe(DEFAULT_GRAPH, colours, 3, 2) is True


def test_format_solution():
    assert format_solution([1, 2]) == (
        "Solution Exists: Following are the assigned colors \n 1  2 \n"
    )


def test_main_prints_solution(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == format_solution(colour_graph(DEFAULT_GRAPH, DEFAULT_COLOURS))