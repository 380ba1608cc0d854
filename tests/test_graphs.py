import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from algolab.graphs import (
    NegativeCycleError,
    bellman_ford,
    bfs,
    dfs,
    dijkstra,
    floyd_warshall,
    kruskal_mst,
    prim_mst,
)


@st.composite
def weighted_graphs(draw, connected=False):
    size = draw(st.integers(min_value=1, max_value=6))
    matrix = [[0] * size for _ in range(size)]
    for i in range(size):
        for j in range(i + 1, size):
            weight = draw(st.integers(min_value=0, max_value=9))
            matrix[i][j] = matrix[j][i] = weight
    if connected:
        for i in range(size - 1):
            if matrix[i][i + 1] == 0:
                weight = draw(st.integers(min_value=1, max_value=9))
                matrix[i][i + 1] = matrix[i + 1][i] = weight
    return matrix


def undirected_edges(matrix):
    return [
        (i, j, w)
        for i, row in enumerate(matrix)
        for j, w in enumerate(row)
        if j > i and w
    ]


def adjacency_from_edges(size, edges):
    matrix = [[0] * size for _ in range(size)]
    for u, v, *_ in edges:
        matrix[u][v] = matrix[v][u] = 1
    return matrix


def test_traversal_orders_on_small_tree():
    adjacency = adjacency_from_edges(4, [(0, 1), (0, 2), (1, 3)])
    assert dfs(adjacency, 0) == [0, 1, 3, 2]
    assert bfs(adjacency, 0) == [0, 1, 2, 3]


@settings(max_examples=60)
@given(weighted_graphs(), st.data())
def test_traversals_visit_the_same_component(matrix, data):
    start = data.draw(st.integers(min_value=0, max_value=len(matrix) - 1))
    depth = dfs(matrix, start)
    breadth = bfs(matrix, start)
    assert depth[0] == start
    assert breadth[0] == start
    assert len(set(depth)) == len(depth)
    assert set(depth) == set(breadth)
    reachable = {v for v, d in enumerate(floyd_warshall(matrix)[start]) if d < math.inf}
    assert set(depth) == reachable


@settings(max_examples=60)
@given(weighted_graphs(), st.data())
def test_each_visited_vertex_joins_an_earlier_one(matrix, data):
    start = data.draw(st.integers(min_value=0, max_value=len(matrix) - 1))
    for order in (dfs(matrix, start), bfs(matrix, start)):
        for position, vertex in enumerate(order[1:], start=1):
            assert any(matrix[earlier][vertex] for earlier in order[:position])


@settings(max_examples=60)
@given(weighted_graphs(), st.data())
def test_bfs_visits_by_nondecreasing_hop_count(matrix, data):
    start = data.draw(st.integers(min_value=0, max_value=len(matrix) - 1))
    hops_matrix = [[1 if w else 0 for w in row] for row in matrix]
    hops = floyd_warshall(hops_matrix)[start]
    levels = [hops[v] for v in bfs(hops_matrix, start)]
    assert levels == sorted(levels)


def test_traversal_rejects_unknown_start():
    adjacency = adjacency_from_edges(3, [(0, 1)])
    with pytest.raises(ValueError):
        dfs(adjacency, 3)
    with pytest.raises(ValueError):
        bfs(adjacency, -1)


@settings(max_examples=60)
@given(weighted_graphs(connected=True))
def test_prim_and_kruskal_agree_on_cost(matrix):
    size = len(matrix)
    prim_edges, prim_total = prim_mst(matrix)
    kruskal_edges, kruskal_total = kruskal_mst(size, undirected_edges(matrix))
    assert prim_total == kruskal_total
    assert len(prim_edges) == size - 1
    assert len(kruskal_edges) == size - 1
    assert prim_total == sum(w for _, _, w in prim_edges)
    for u, v, w in prim_edges:
        assert matrix[u][v] == w


@settings(max_examples=60)
@given(weighted_graphs(connected=True))
def test_spanning_trees_reach_every_vertex(matrix):
    size = len(matrix)
    for edges in (prim_mst(matrix)[0], kruskal_mst(size, undirected_edges(matrix))[0]):
        tree = adjacency_from_edges(size, edges)
        assert sorted(bfs(tree, 0)) == list(range(size))


def test_prim_rejects_disconnected_graph():
    with pytest.raises(ValueError):
        prim_mst([[0, 0], [0, 0]])


def test_prim_on_single_vertex_is_empty():
    assert prim_mst([[0]]) == ([], 0)


def test_kruskal_builds_forest_when_disconnected():
    assert kruskal_mst(4, [(0, 1, 5)]) == ([(0, 1, 5)], 5)


def test_kruskal_rejects_vertex_out_of_range():
    with pytest.raises(ValueError):
        kruskal_mst(2, [(0, 2, 1)])


@settings(max_examples=60)
@given(weighted_graphs())
def test_kruskal_takes_edges_in_weight_order(matrix):
    edges, _ = kruskal_mst(len(matrix), undirected_edges(matrix))
    weights = [w for _, _, w in edges]
    assert weights == sorted(weights)


@settings(max_examples=60)
@given(weighted_graphs(), st.data())
def test_dijkstra_matches_floyd_warshall(matrix, data):
    source = data.draw(st.integers(min_value=0, max_value=len(matrix) - 1))
    assert dijkstra(matrix, source) == floyd_warshall(matrix)[source]


@settings(max_examples=60)
@given(weighted_graphs(), st.data())
def test_bellman_ford_matches_dijkstra_without_negative_edges(matrix, data):
    source = data.draw(st.integers(min_value=0, max_value=len(matrix) - 1))
    edges = undirected_edges(matrix)
    both_ways = edges + [(v, u, w) for u, v, w in edges]
    assert bellman_ford(len(matrix), both_ways, source) == dijkstra(matrix, source)


def test_bellman_ford_handles_negative_edge():
    edges = [(0, 1, 4), (0, 2, 5), (2, 1, -3), (1, 3, 2)]
    matrix = [[0] * 4 for _ in range(4)]
    for u, v, w in edges:
        matrix[u][v] = w
    result = bellman_ford(4, edges, 0)
    assert result == floyd_warshall(matrix)[0]
    assert result[1] < 4


def test_bellman_ford_detects_negative_cycle():
    edges = [(0, 1, 1), (1, 2, -2), (2, 1, 1)]
    with pytest.raises(NegativeCycleError):
        bellman_ford(3, edges, 0)
    with pytest.raises(ValueError):
        bellman_ford(3, edges, 0)


def test_unreachable_cycle_is_not_reported():
    edges = [(1, 2, -2), (2, 1, 1)]
    assert bellman_ford(3, edges, 0) == [0, math.inf, math.inf]


def test_unreachable_vertices_are_infinite():
    matrix = [[0, 3, 0], [3, 0, 0], [0, 0, 0]]
    assert dijkstra(matrix, 0)[2] == math.inf
    assert floyd_warshall(matrix)[0][2] == math.inf


@settings(max_examples=60)
@given(weighted_graphs())
def test_floyd_warshall_obeys_triangle_inequality(matrix):
    dist = floyd_warshall(matrix)
    size = len(matrix)
    for i in range(size):
        assert dist[i][i] == 0
        for j in range(size):
            assert dist[i][j] == dist[j][i]
            for k in range(size):
                assert dist[i][j] <= dist[i][k] + dist[k][j]


def test_floyd_warshall_rejects_non_square_matrix():
    with pytest.raises(ValueError):
        floyd_warshall([[0, 1], [1]])