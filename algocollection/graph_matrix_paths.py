"""Shortest paths and spanning trees over graphs given as adjacency matrices.

A vertex ``u`` has an edge to ``v`` of weight ``matrix[u][v]`` when that
entry is non-zero. Single-source searches start at vertex 0.
"""

import heapq
import math
from collections.abc import Iterable
from dataclasses import dataclass

from algocollection import graph_list
from algocollection.graph_list import ShortestPaths

Matrix = Iterable[Iterable[int]]
WeightedEdge = tuple[int, int, int]


@dataclass(frozen=True)
class AllPairs:
    """Shortest distances between every pair of vertices.

    ``distance[u][v]`` is ``None`` when ``v`` cannot be reached from ``u``;
    ``next_hop[u][v]`` is the vertex after ``u`` on a shortest path to ``v``.
    """

    distance: list[list[int | None]]
    next_hop: list[list[int | None]]

    def path(self, u: int, v: int) -> list[int] | None:
        """Vertices of a shortest path from ``u`` to ``v``, or None if there is none."""
        size = len(self.distance)
        if not (0 <= u < size and 0 <= v < size):
            raise ValueError(f"({u}, {v}) is not a pair of vertices of the graph")
        if u == v:
            return [u]
        if self.next_hop[u][v] is None:
            return None
        route = [u]
        current = u
        while current != v:
            step = self.next_hop[current][v]
            if step is None or len(route) > size:
                raise ValueError("no simple shortest path: the graph has a negative cycle")
            route.append(step)
            current = step
        return route


@dataclass(frozen=True)
class SpanningTree:
    """Edges ``(u, v, weight)`` of a spanning tree and their total weight."""

    edges: list[WeightedEdge]
    total: int


def _square(matrix: Matrix, *, need_source: bool = True) -> list[list[int]]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("matrix must be square")
    if need_source and not rows:
        raise ValueError("graph must have at least one vertex")
    return rows


def _edges(rows: list[list[int]]) -> list[WeightedEdge]:
    return [
        (u, v, weight)
        for u, row in enumerate(rows)
        for v, weight in enumerate(row)
        if weight
    ]


def bellman_ford(matrix: Matrix) -> ShortestPaths:
    """Shortest paths from vertex 0; reports whether a negative cycle is reachable."""
    rows = _square(matrix)
    return graph_list.bellman_ford(len(rows), _edges(rows))


def dijkstra(matrix: Matrix) -> ShortestPaths:
    """Shortest paths from vertex 0 over non-negative weights."""
    rows = _square(matrix)
    return graph_list.dijkstra(len(rows), _edges(rows))


def floyd_warshall(matrix: Matrix) -> AllPairs:
    """Shortest paths between all pairs of vertices.

    Off-diagonal zero entries mean no edge; a diagonal entry is taken as the
    starting distance from a vertex to itself.
    """
    rows = _square(matrix, need_source=False)
    size = len(rows)
    dist: list[list[float]] = [
        [weight if (weight or i == j) else math.inf for j, weight in enumerate(row)]
        for i, row in enumerate(rows)
    ]
    nxt: list[list[int | None]] = [
        [None if i == j or dist[i][j] == math.inf else j for j in range(size)]
        for i in range(size)
    ]
    for k in range(size):
        for j in range(size):
            for i in range(size):
                via = dist[i][k] + dist[k][j]
                if dist[i][j] > via:
                    dist[i][j] = via
                    nxt[i][j] = nxt[i][k]
    distance = [
        [None if value == math.inf else int(value) for value in row] for row in dist
    ]
    return AllPairs(distance, nxt)


def kruskal(vertex_count: int, edges: Iterable[WeightedEdge]) -> SpanningTree:
    """Minimum spanning forest by Kruskal's method, edges in the order chosen."""
    chosen = graph_list.kruskal(vertex_count, edges)
    return SpanningTree(chosen, sum(weight for _, _, weight in chosen))


def _tree(parent: list[int | None], key: list[int | None]) -> SpanningTree:
    edges = [(parent[v], v, key[v]) for v in range(1, len(key))]
    return SpanningTree(edges, sum(weight for _, _, weight in edges))  # type: ignore[arg-type]


def _relax_from(
    rows: list[list[int]],
    u: int,
    key: list[int | None],
    parent: list[int | None],
    in_tree: list[bool],
) -> list[int]:
    improved = []
    for v, weight in enumerate(rows[u]):
        if weight and not in_tree[v]:
            current = key[v]
            if current is None or weight < current:
                key[v] = weight
                parent[v] = u
                improved.append(v)
    return improved


def prim(matrix: Matrix) -> SpanningTree:
    """Minimum spanning tree grown from vertex 0, scanning for the cheapest vertex.

    Edges are ``(parent, vertex, weight)`` for every vertex except 0, in
    vertex order. Raises ValueError if the graph is not connected.
    """
    rows = _square(matrix)
    size = len(rows)
    key: list[int | None] = [None] * size
    parent: list[int | None] = [None] * size
    in_tree = [False] * size
    key[0] = 0
    in_tree[0] = True
    u = 0
    for _ in range(size - 1):
        _relax_from(rows, u, key, parent, in_tree)
        candidates = [v for v in range(size) if not in_tree[v] and key[v] is not None]
        if not candidates:
            raise ValueError("graph is not connected")
        u = min(candidates, key=key.__getitem__)  # type: ignore[arg-type]
        in_tree[u] = True
    return _tree(parent, key)


def prim_heap(matrix: Matrix) -> SpanningTree:
    """Minimum spanning tree grown from vertex 0, using a priority queue.

    Gives the same tree as :func:`prim`.
    """
    rows = _square(matrix)
    size = len(rows)
    key: list[int | None] = [None] * size
    parent: list[int | None] = [None] * size
    in_tree = [False] * size
    key[0] = 0
    in_tree[0] = True
    queue: list[tuple[int, int]] = []
    u = 0
    for _ in range(size - 1):
        for v in _relax_from(rows, u, key, parent, in_tree):
            heapq.heappush(queue, (key[v], v))  # type: ignore[arg-type]
        while queue and in_tree[queue[0][1]]:
            heapq.heappop(queue)
        if not queue:
            raise ValueError("graph is not connected")
        _, u = heapq.heappop(queue)
        in_tree[u] = True
    return _tree(parent, key)