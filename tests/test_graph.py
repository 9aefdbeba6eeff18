import math

import pytest
from hypothesis import given, strategies as st

from algokit.graph import MAX_VERTICES, Graph


def _chain(labels, directed=False):
    graph = Graph(directed=directed)
    for label in labels:
        graph.add_vertex(label)
    for i in range(len(labels) - 1):
        graph.add_edge(i, i + 1)
    return graph


def _tree_graph():
    graph = Graph()
    for label in "ABCD":
        graph.add_vertex(label)
    graph.add_edge(0, 1)
    graph.add_edge(0, 2)
    graph.add_edge(1, 3)
    return graph


def test_chain_traversals_follow_chain():
    graph = _chain(["A", "B", "C"])
    assert graph.dfs() == ["A", "B", "C"]
    assert graph.bfs() == ["A", "B", "C"]


def test_dfs_goes_deep_first():
    assert _tree_graph().dfs() == ["A", "B", "D", "C"]


def test_bfs_goes_wide_first():
    assert _tree_graph().bfs() == ["A", "B", "C", "D"]


def test_empty_graph_traversals():
    graph = Graph()
    assert graph.dfs() == []
    assert graph.bfs() == []
    assert graph.mst() == []
    assert graph.topological_sort() == []


def test_mst_spans_connected_graph():
    graph = _tree_graph()
    graph.add_edge(2, 3)
    edges = graph.mst()
    assert len(edges) == len(graph) - 1
    reached = {"A"} | {target for _, target in edges}
    assert reached == set("ABCD")


def test_traversal_skips_unreachable():
    graph = _chain(["A", "B"])
    graph.add_vertex("Z")
    assert "Z" not in graph.dfs()
    assert "Z" not in graph.bfs()


def test_topological_sort_directed_chain():
    graph = _chain(["A", "B", "C", "D"], directed=True)
    assert graph.topological_sort() == ["A", "B", "C", "D"]


def test_topological_sort_detects_cycle():
    graph = _chain(["A", "B", "C"], directed=True)
    graph.add_edge(2, 0)
    with pytest.raises(ValueError):
        graph.topological_sort()


def test_undirected_edge_is_a_cycle_for_ordering():
    with pytest.raises(ValueError):
        _chain(["A", "B"]).topological_sort()


def test_add_edge_rejects_unknown_vertex():
    graph = _chain(["A"])
    with pytest.raises(IndexError):
        graph.add_edge(0, 5)


def test_capacity_limit():
    graph = Graph()
    for index in range(MAX_VERTICES):
        assert graph.add_vertex(index) == index
    with pytest.raises(OverflowError):
        graph.add_vertex("extra")


def test_shortest_paths_on_chain():
    graph = _chain(["A", "B", "C", "D"])
    graph.add_vertex("E")
    distance, predecessor = graph.shortest_paths()
    assert distance[0][3] == 3
    assert predecessor[0][3] == 2
    assert distance[0][4] == math.inf
    assert predecessor[0][4] == -1
    assert all(distance[i][i] == 0 for i in range(len(graph)))


@given(
    st.integers(1, 8).flatmap(
        lambda n: st.tuples(
            st.just(n),
            st.lists(st.tuples(st.integers(0, n - 1), st.integers(0, n - 1)), max_size=20),
        )
    )
)
def test_random_graph_invariants(data):
    count, edges = data
    graph = Graph()
    for index in range(count):
        graph.add_vertex(index)
    for start, end in edges:
        graph.add_edge(start, end)
    dfs_order = graph.dfs()
    bfs_order = graph.bfs()
    assert dfs_order[0] == 0 and bfs_order[0] == 0
    assert sorted(dfs_order) == sorted(bfs_order)
    assert len(set(dfs_order)) == len(dfs_order)
    assert len(graph.mst()) == len(dfs_order) - 1
    distance, _ = graph.shortest_paths()
    for i in range(count):
        for j in range(count):
            assert distance[i][j] == distance[j][i]
    reachable = {j for j in range(count) if distance[0][j] != math.inf}
    assert reachable == set(dfs_order)


@given(st.lists(st.tuples(st.integers(0, 6), st.integers(0, 6)), max_size=15))
def test_topological_order_respects_forward_edges(pairs):
    graph = Graph(directed=True)
    for index in range(7):
        graph.add_vertex(index)
    forward = [(a, b) for a, b in pairs if a < b]
    for a, b in forward:
        graph.add_edge(a, b)
    order = graph.topological_sort()
    position = {label: index for index, label in enumerate(order)}
    assert sorted(order) == list(range(7))
    assert all(position[a] < position[b] for a, b in forward)