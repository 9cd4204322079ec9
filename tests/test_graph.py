import io

import pytest

from algolab.graph import MAX_VERTICES, Graph, bfs, dfs, main


def make_graph(data, edges):
    graph = Graph(data)
    for i, j in edges:
        graph.add_edge(i, j)
    return graph


def test_neighbors_are_newest_first():
    graph = make_graph([0, 0, 0, 0], [(0, 1), (0, 2), (0, 3)])
    assert graph.neighbors(0) == list(reversed([1, 2, 3]))
    assert graph.neighbors(1) == []


def test_worked_example_orders():
    graph = make_graph([10, 20, 30, 40], [(0, 1), (0, 2), (1, 3)])
    assert dfs(graph, 0) == [10, 20, 40, 30]
    assert bfs(graph, 0) == [10, 30, 20, 40]


@pytest.mark.parametrize("traverse", [dfs, bfs])
def test_each_reachable_vertex_once(traverse):
    data = [5, 6, 7, 8, 9]
    graph = make_graph(data, [(0, 1), (1, 2), (2, 0), (0, 2), (2, 3)])
    order = traverse(graph, 0)
    assert order[0] == 5
    assert len(order) == len(set(order))
    assert set(order) == {5, 6, 7, 8}


@pytest.mark.parametrize("traverse", [dfs, bfs])
def test_isolated_start(traverse):
    graph = make_graph([1, 2, 3], [(0, 1)])
    assert traverse(graph, 2) == [3]


def test_cycle_terminates():
    graph = make_graph([1, 2], [(0, 1), (1, 0)])
    assert sorted(dfs(graph, 1)) == [1, 2]
    assert sorted(bfs(graph, 1)) == [1, 2]


def test_edge_out_of_range():
    graph = Graph([1, 2])
    with pytest.raises(IndexError):
        graph.add_edge(0, 2)
    with pytest.raises(IndexError):
        graph.add_edge(-1, 0)


def test_start_out_of_range():
    graph = Graph([1, 2])
    with pytest.raises(IndexError):
        dfs(graph, 5)
    with pytest.raises(IndexError):
        bfs(graph, 5)


def test_too_many_vertices():
    with pytest.raises(ValueError):
        Graph(range(MAX_VERTICES + 1))


def test_format_lists_edges():
    graph = make_graph([11, 22], [(0, 1)])
    text = graph.format()
    assert "[11]->[1]" in text
    assert "[22]" in text


def test_main_runs_traversals(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3,2\n10\n20\n30\n0,1\n0,2\n0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "DFS finish" in out
    assert "BFS finish" in out
    assert "[10]->[2]->[1]" in out