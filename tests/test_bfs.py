import io
import sys

import pytest

from treegraph.bfs import Graph, main


def _graph(vertices, edges):
    graph = Graph(vertices)
    for v1, v2 in edges:
        graph.add_edge(v1, v2)
    return graph


def test_format_matrix_single_edge():
    graph = _graph(2, [(1, 2)])
    assert graph.format_matrix() == "0\t1\t\n1\t0\t\n"


def test_matrix_is_symmetric_and_edges_counted():
    edges = [(1, 2), (2, 3), (4, 1)]
    graph = _graph(4, edges)
    assert graph.edges == len(edges)
    for row in range(4):
        for col in range(4):
            assert graph.matrix[row][col] == graph.matrix[col][row]
    for v1, v2 in edges:
        assert graph.matrix[v1 - 1][v2 - 1] == 1


def test_neighbours_visited_in_ascending_order():
    graph = _graph(4, [(1, 4), (1, 2), (1, 3)])
    assert graph.bfs(1) == [1, 2, 3, 4]


def test_bfs_stays_in_component():
    graph = _graph(5, [(1, 2), (3, 4), (4, 5)])
    order = graph.bfs(4)
    assert order[0] == 4
    assert sorted(order) == [3, 4, 5]
    assert len(set(order)) == len(order)


def test_each_vertex_reached_from_an_earlier_one():
    graph = _graph(6, [(1, 2), (2, 3), (3, 4), (4, 5), (5, 6), (2, 6)])
    order = graph.bfs(3)
    assert len(order) == graph.vertices
    for index, vertex in enumerate(order[1:], start=1):
        earlier = order[:index]
        assert any(graph.matrix[vertex - 1][prev - 1] for prev in earlier)


def test_bfs_can_be_repeated():
    graph = _graph(3, [(1, 2), (2, 3)])
    assert graph.bfs(1) == graph.bfs(1)
    assert sorted(graph.bfs(2)) == sorted(graph.bfs(3))


@pytest.mark.parametrize("pair", [(0, 1), (1, 4), (-1, 2)])
def test_add_edge_rejects_unknown_vertex(pair):
    graph = Graph(3)
    with pytest.raises(ValueError):
        graph.add_edge(*pair)
    assert graph.edges == 0


def test_bfs_rejects_unknown_start():
    with pytest.raises(ValueError):
        Graph(3).bfs(4)


def test_negative_vertex_count_rejected():
    with pytest.raises(ValueError):
        Graph(-2)


def test_main_prints_matrix_and_order(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("4\n1 2\n1 3\n3 4\n0 0\n1\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    expected = _graph(4, [(1, 2), (1, 3), (3, 4)])
    assert out.startswith("Enter the number of vertices:\n")
    assert expected.format_matrix() in out
    assert out.endswith("".join(f"{v} " for v in expected.bfs(1)))
    assert out.count("Enter two vertices which are adjacent to each other:") == 4


def test_main_stops_edges_at_non_number(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("3\n1 2\nq\n2\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    expected = _graph(3, [(1, 2)])
    assert out.endswith(expected.format_matrix() + "".join(f"{v} " for v in expected.bfs(2)))


def test_main_missing_start_fails(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("3\n1 2\n0 0\n"))
    assert main([]) == 1
    assert "start vertex" in capsys.readouterr().err