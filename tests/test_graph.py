import pytest

from dsakit.graph import Graph, main


def _diamond():
    graph = Graph(4)
    graph.add_edge(0, 1)
    graph.add_edge(0, 2)
    graph.add_edge(1, 3)
    graph.add_edge(2, 3)
    return graph


def test_bfs_diamond():
    assert _diamond().bfs(0) == [0, 1, 2, 3]


def test_dfs_diamond():
    assert _diamond().dfs(0) == [0, 1, 3, 2]


def test_path_graph_orders_match():
    graph = Graph(5)
    for v in range(4):
        graph.add_edge(v, v + 1)
    assert graph.bfs(0) == list(range(5))
    assert graph.dfs(0) == list(range(5))
    assert graph.bfs(4) == list(range(4, -1, -1))


def test_traversals_start_with_start_and_visit_each_once():
    graph = Graph(6)
    for v1, v2 in [(0, 3), (3, 5), (5, 1), (1, 0), (2, 4)]:
        graph.add_edge(v1, v2)
    for order in (graph.bfs(3), graph.dfs(3)):
        assert order[0] == 3
        assert len(order) == len(set(order))
        assert set(order) == {0, 1, 3, 5}


def test_unreachable_vertices_are_skipped():
    graph = Graph(3)
    graph.add_edge(0, 1)
    assert graph.bfs(2) == [2]
    assert graph.dfs(2) == [2]


def test_edges_are_undirected():
    graph = Graph(2)
    graph.add_edge(1, 0)
    assert graph.bfs(0) == [0, 1]
    assert graph.dfs(1) == [1, 0]


def test_self_loop_and_duplicate_edge():
    graph = Graph(2)
    graph.add_edge(0, 0)
    graph.add_edge(0, 1)
    graph.add_edge(0, 1)
    assert graph.bfs(0) == [0, 1]


def test_add_edge_out_of_range():
    with pytest.raises(IndexError):
        Graph(3).add_edge(0, 3)


def test_start_out_of_range():
    with pytest.raises(IndexError):
        Graph(3).bfs(-1)
    with pytest.raises(IndexError):
        Graph(3).dfs(5)


def test_negative_vertex_count():
    with pytest.raises(ValueError):
        Graph(-1)


def test_deep_dfs_does_not_overflow():
    size = 3000
    graph = Graph(size)
    for v in range(size - 1):
        graph.add_edge(v, v + 1)
    assert graph.dfs(0) == list(range(size))


def test_main_prints_both(capsys):
    code = main(["4", "0", "-e", "0", "1", "-e", "0", "2", "-e", "1", "3", "-e", "2", "3"])
    assert code == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["BFS Traversal: 0 1 2 3", "DFS Traversal: 0 1 3 2"]


def test_main_bad_edge(capsys):
    assert main(["2", "0", "-e", "0", "7"]) == 1
    assert "out of range" in capsys.readouterr().out