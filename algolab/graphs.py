"""Graph traversal, minimum spanning trees and shortest paths.

Graphs given as matrices are dense: ``matrix[u][v]`` holds the weight of the
edge from ``u`` to ``v``, and 0 or None off the diagonal means there is no
edge. Distances to vertices that cannot be reached are ``math.inf``.
"""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Iterator, Sequence

Edge = tuple[int, int, int]


class NegativeCycleError(ValueError):
    """Raised when a cycle of negative total weight is reachable from the source."""


def _check_square(matrix: Sequence[Sequence[object]]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("graph matrix must be square")
    return size


def _check_vertex(vertex: int, size: int) -> None:
    if not 0 <= vertex < size:
        raise ValueError(f"vertex {vertex} is outside the graph of {size} vertices")


def _is_missing(weight: object) -> bool:
    return weight is None or weight == 0


def _distance_matrix(matrix: Sequence[Sequence[int | None]]) -> list[list[float]]:
    """Turn a weight matrix into distances, with math.inf where there is no edge."""
    return [
        [
            (0 if weight is None else weight)
            if i == j
            else (math.inf if _is_missing(weight) else weight)
            for j, weight in enumerate(row)
        ]
        for i, row in enumerate(matrix)
    ]


def _neighbours(adjacency: Sequence[Sequence[object]], vertex: int) -> Iterator[int]:
    return (other for other, linked in enumerate(adjacency[vertex]) if linked)


def dfs(adjacency: Sequence[Sequence[object]], start: int) -> list[int]:
    """Return the vertices in depth-first order from ``start``.

    Neighbours are explored in increasing index order.
    """
    size = _check_square(adjacency)
    _check_vertex(start, size)
    visited = {start}
    order = [start]
    stack = [_neighbours(adjacency, start)]
    while stack:
        for following in stack[-1]:
            if following not in visited:
                visited.add(following)
                order.append(following)
                stack.append(_neighbours(adjacency, following))
                break
        else:
            stack.pop()
    return order


def bfs(adjacency: Sequence[Sequence[object]], start: int) -> list[int]:
    """Return the vertices in breadth-first order from ``start``.

    Neighbours are queued in increasing index order.
    """
    size = _check_square(adjacency)
    _check_vertex(start, size)
    visited = {start}
    order = []
    queue = deque([start])
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for following in _neighbours(adjacency, vertex):
            if following not in visited:
                visited.add(following)
                queue.append(following)
    return order


def prim_mst(cost: Sequence[Sequence[int | None]]) -> tuple[list[Edge], int]:
    """Grow a minimum spanning tree from vertex 0 and return its edges and total cost.

    Raises ValueError when the graph is not connected.
    """
    size = _check_square(cost)
    weights = [[None if _is_missing(w) else w for w in row] for row in cost]
    selected = [False] * size
    if size:
        selected[0] = True
    edges: list[Edge] = []
    for _ in range(size - 1):
        candidates = (
            (weight, source, target)
            for source, row in enumerate(weights)
            if selected[source]
            for target, weight in enumerate(row)
            if not selected[target] and weight is not None
        )
        best = min(candidates, key=lambda candidate: candidate[0], default=None)
        if best is None:
            raise ValueError("graph is not connected")
        weight, source, target = best
        edges.append((source, target, weight))
        selected[target] = True
    return edges, sum(weight for _, _, weight in edges)


def kruskal_mst(n: int, edges: Iterable[Edge]) -> tuple[list[Edge], int]:
    """Pick the cheapest edges that join separate trees; return them and their total.

    ``edges`` holds ``(u, v, weight)`` triples over vertices ``0 .. n - 1``.
    A disconnected graph yields a spanning forest.
    """
    if n < 0:
        raise ValueError(f"vertex count must not be negative, got {n}")
    edge_list = [tuple(edge) for edge in edges]
    for u, v, _ in edge_list:
        _check_vertex(u, n)
        _check_vertex(v, n)

    parent = list(range(n))

    def find(vertex: int) -> int:
        while parent[vertex] != vertex:
            parent[vertex] = parent[parent[vertex]]
            vertex = parent[vertex]
        return vertex

    chosen: list[Edge] = []
    for u, v, weight in sorted(edge_list, key=lambda edge: edge[2]):
        if len(chosen) >= n - 1:
            break
        root_u, root_v = find(u), find(v)
        if root_u != root_v:
            parent[root_u] = root_v
            chosen.append((u, v, weight))
    return chosen, sum(weight for _, _, weight in chosen)


def dijkstra(cost: Sequence[Sequence[int | None]], source: int) -> list[float]:
    """Return the shortest distance from ``source`` to every vertex."""
    size = _check_square(cost)
    _check_vertex(source, size)
    graph = _distance_matrix(cost)
    dist = list(graph[source])
    dist[source] = 0
    visited = [False] * size
    visited[source] = True
    for _ in range(size - 1):
        candidates = [
            (distance, vertex)
            for vertex, distance in enumerate(dist)
            if not visited[vertex] and distance < math.inf
        ]
        if not candidates:
            break
        nearest, vertex = min(candidates)
        visited[vertex] = True
        for other, weight in enumerate(graph[vertex]):
            if not visited[other] and nearest + weight < dist[other]:
                dist[other] = nearest + weight
    return dist


def bellman_ford(n: int, edges: Iterable[Edge], source: int) -> list[float]:
    """Return shortest distances from ``source`` over directed, possibly negative edges.

    Raises NegativeCycleError when a negative cycle is reachable from ``source``.
    """
    if n < 0:
        raise ValueError(f"vertex count must not be negative, got {n}")
    _check_vertex(source, n)
    edge_list = [tuple(edge) for edge in edges]
    for u, v, _ in edge_list:
        _check_vertex(u, n)
        _check_vertex(v, n)
    dist: list[float] = [math.inf] * n
    dist[source] = 0
    for _ in range(n - 1):
        for u, v, weight in edge_list:
            if dist[u] != math.inf and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    if any(
        dist[u] != math.inf and dist[u] + weight < dist[v]
        for u, v, weight in edge_list
    ):
        raise NegativeCycleError("graph contains a negative weight cycle")
    return dist


def floyd_warshall(matrix: Sequence[Sequence[int | None]]) -> list[list[float]]:
    """Return the matrix of shortest distances between every pair of vertices."""
    _check_square(matrix)
    dist = _distance_matrix(matrix)
    for k, via in enumerate(dist):
        for row in dist:
            through = row[k]
            if through == math.inf:
                continue
            for j, onward in enumerate(via):
                if through + onward < row[j]:
                    row[j] = through + onward
    return dist