import math

import pytest

from algopack.graphs import (
    CycleError,
    WeightedGraph,
    bfs_levels,
    dfs_subtree_sizes,
    topological_sort,
)

SAMPLE_EDGES = [
    (0, 1, 4), (0, 7, 8), (1, 2, 8), (1, 7, 11), (2, 3, 7), (2, 8, 2), (2, 5, 4),
    (3, 4, 9), (3, 5, 14), (4, 5, 10), (5, 6, 2), (6, 7, 1), (6, 8, 6), (7, 8, 7),
]


def _sample_graph():
    graph = WeightedGraph(9)
    for u, v, w in SAMPLE_EDGES:
        graph.add_edge(u, v, w)
    return graph


def test_topological_sort_documented_example():
    edges = [(6, 3), (6, 1), (5, 1), (5, 2), (3, 4), (4, 2)]
    assert topological_sort(6, edges) == [5, 6, 3, 1, 4, 2]


def test_topological_sort_respects_every_edge():
    edges = [(1, 4), (2, 4), (4, 7), (3, 7), (7, 5), (6, 5), (2, 6)]
    order = topological_sort(7, edges)
    position = {node: i for i, node in enumerate(order)}
    assert sorted(order) == list(range(1, 8))
    assert all(position[u] < position[v] for u, v in edges)


def test_topological_sort_without_edges_keeps_node_order():
    assert topological_sort(3, []) == [1, 2, 3]


def test_topological_sort_detects_cycle():
    with pytest.raises(CycleError):
        topological_sort(3, [(1, 2), (2, 3), (3, 1)])


def test_topological_sort_rejects_unknown_node():
    with pytest.raises(ValueError):
        topological_sort(2, [(1, 5)])


def test_shortest_paths_source_is_zero():
    assert _sample_graph().shortest_paths(0)[0] == 0


def test_shortest_paths_are_consistent_with_edges():
    dist = _sample_graph().shortest_paths(0)
    for u, v, w in SAMPLE_EDGES:
        assert dist[v] <= dist[u] + w
        assert dist[u] <= dist[v] + w
    for vertex in range(1, 9):
        assert any(
            (v == vertex and dist[u] + w == dist[v]) or (u == vertex and dist[v] + w == dist[u])
            for u, v, w in SAMPLE_EDGES
        )


def test_shortest_paths_symmetric_between_sources():
    graph = _sample_graph()
    assert graph.shortest_paths(3)[8] == graph.shortest_paths(8)[3]


def test_unreachable_vertex_is_infinite():
    graph = WeightedGraph(3)
    graph.add_edge(0, 1, 5)
    dist = graph.shortest_paths(0)
    assert dist[1] == 5
    assert math.isinf(dist[2])


def test_negative_weight_rejected():
    with pytest.raises(ValueError):
        WeightedGraph(2).add_edge(0, 1, -1)


def test_vertex_out_of_range_rejected():
    graph = WeightedGraph(2)
    with pytest.raises(ValueError):
        graph.add_edge(0, 2, 1)
    with pytest.raises(ValueError):
        graph.shortest_paths(5)


def test_bfs_levels_invariants():
    adjacency = [[1, 2], [0, 3], [0, 3, 4], [1, 2, 5], [2], [3], []]
    levels = bfs_levels(adjacency, 0)
    assert levels[0] == 0
    assert 6 not in levels
    for node, level in levels.items():
        for neighbour in adjacency[node]:
            assert abs(levels[neighbour] - level) <= 1
        if node != 0:
            assert any(levels[n] == level - 1 for n in adjacency[node])


def test_bfs_levels_with_mapping():
    adjacency = {"a": ["b"], "b": ["c"]}
    levels = bfs_levels(adjacency, "a")
    assert set(levels) == {"a", "b", "c"}
    assert levels["c"] == levels["b"] + 1 == levels["a"] + 2


def test_dfs_subtree_sizes_on_path():
    adjacency = [[1], [0, 2], [1]]
    assert dfs_subtree_sizes(adjacency, 0) == {0: 3, 1: 2, 2: 1}


def test_dfs_subtree_sizes_tree_invariants():
    adjacency = {1: [2, 3], 2: [1, 4, 5], 3: [1], 4: [2], 5: [2], 6: []}
    sizes = dfs_subtree_sizes(adjacency, 1)
    assert sizes[1] == 5
    assert 6 not in sizes
    assert sizes[2] == 1 + sizes[4] + sizes[5]
    assert sizes[1] == 1 + sizes[2] + sizes[3]