"""Graph algorithms over edge lists: searches, shortest paths and spanning trees.

Vertices are numbered ``0 .. vertex_count - 1``; searches and single-source
shortest paths start at vertex 0.
"""

import heapq
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass

Edge = tuple[int, int]
WeightedEdge = tuple[int, int, int]


@dataclass(frozen=True)
class BfsResult:
    """Breadth-first search from vertex 0 over an undirected graph.

    ``distance`` and ``previous`` are ``None`` for the source's missing
    predecessor and for vertices that cannot be reached.
    """

    distance: list[int | None]
    previous: list[int | None]
    has_cycle: bool


@dataclass(frozen=True)
class DfsResult:
    """Depth-first search over a directed graph with discovery and finish times."""

    previous: list[int | None]
    discovered: list[int]
    finished: list[int]


@dataclass(frozen=True)
class ShortestPaths:
    """Single-source shortest paths from vertex 0.

    ``distance`` is ``None`` for unreachable vertices; ``previous`` is ``None``
    for the source and for unreachable vertices.
    """

    distance: list[int | None]
    previous: list[int | None]
    has_negative_cycle: bool = False


def _require_vertices(vertex_count: int, *, need_source: bool) -> None:
    if vertex_count < 0:
        raise ValueError("vertex_count must not be negative")
    if need_source and vertex_count == 0:
        raise ValueError("graph must have at least one vertex")


def _check_endpoints(vertex_count: int, u: int, v: int) -> None:
    if not (0 <= u < vertex_count and 0 <= v < vertex_count):
        raise ValueError(f"edge ({u}, {v}) refers to a vertex outside 0..{vertex_count - 1}")


def _unweighted_edges(vertex_count: int, edges: Iterable[Edge]) -> list[Edge]:
    pairs = [(int(u), int(v)) for u, v in edges]
    for u, v in pairs:
        _check_endpoints(vertex_count, u, v)
    return pairs


def _weighted_edges(vertex_count: int, edges: Iterable[WeightedEdge]) -> list[WeightedEdge]:
    triples = [(int(u), int(v), int(w)) for u, v, w in edges]
    for u, v, _ in triples:
        _check_endpoints(vertex_count, u, v)
    return triples


def _weighted_adjacency(
    vertex_count: int, edges: Iterable[WeightedEdge], *, undirected: bool = False
) -> list[list[tuple[int, int]]]:
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]
    for u, v, w in _weighted_edges(vertex_count, edges):
        adjacency[u].append((v, w))
        if undirected:
            adjacency[v].append((u, w))
    return adjacency


def _depth_first(
    adjacency: list[list[int]],
) -> tuple[list[int | None], list[int], list[int], list[int]]:
    """Visit every vertex; return predecessors, times and the finishing order."""
    size = len(adjacency)
    previous: list[int | None] = [None] * size
    discovered: list[int | None] = [None] * size
    finished: list[int] = [0] * size
    order: list[int] = []
    clock = 0

    for root in range(size):
        if discovered[root] is not None:
            continue
        clock += 1
        discovered[root] = clock
        stack = [(root, iter(adjacency[root]))]
        while stack:
            u, neighbours = stack[-1]
            for v in neighbours:
                if discovered[v] is None:
                    previous[v] = u
                    clock += 1
                    discovered[v] = clock
                    stack.append((v, iter(adjacency[v])))
                    break
            else:
                stack.pop()
                clock += 1
                finished[u] = clock
                order.append(u)

    return previous, [time for time in discovered if time is not None], finished, order


def bfs(vertex_count: int, edges: Iterable[Edge]) -> BfsResult:
    """Breadth-first search from vertex 0 over undirected ``edges``.

    ``has_cycle`` is set when the search meets an edge that is not part of
    the search tree, within the part of the graph reachable from vertex 0.
    """
    _require_vertices(vertex_count, need_source=True)
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for u, v in _unweighted_edges(vertex_count, edges):
        adjacency[u].append(v)
        adjacency[v].append(u)

    distance: list[int | None] = [None] * vertex_count
    previous: list[int | None] = [None] * vertex_count
    distance[0] = 0
    has_cycle = False
    queue = deque([0])
    while queue:
        u = queue.popleft()
        parent_edge_seen = False
        for v in adjacency[u]:
            if distance[v] is None:
                distance[v] = distance[u] + 1  # type: ignore[operator]
                previous[v] = u
                queue.append(v)
            elif v == previous[u] and not parent_edge_seen:
                parent_edge_seen = True
            else:
                has_cycle = True
    return BfsResult(distance, previous, has_cycle)


def dfs(vertex_count: int, edges: Iterable[Edge]) -> DfsResult:
    """Depth-first search over directed ``edges``, starting roots in vertex order.

    Times start at 1 and each vertex receives a discovery and a finish time.
    """
    _require_vertices(vertex_count, need_source=False)
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for u, v in _unweighted_edges(vertex_count, edges):
        adjacency[u].append(v)
    previous, discovered, finished, _ = _depth_first(adjacency)
    return DfsResult(previous, discovered, finished)


def _relax(
    distance: list[int | None], previous: list[int | None], u: int, v: int, weight: int
) -> bool:
    base = distance[u]
    if base is None:
        return False
    candidate = base + weight
    current = distance[v]
    if current is None or candidate < current:
        distance[v] = candidate
        previous[v] = u
        return True
    return False


def _improvable(adjacency: list[list[tuple[int, int]]], distance: list[int | None]) -> bool:
    for u, outgoing in enumerate(adjacency):
        base = distance[u]
        if base is None:
            continue
        for v, weight in outgoing:
            current = distance[v]
            if current is None or base + weight < current:
                return True
    return False


def _fresh(vertex_count: int) -> tuple[list[int | None], list[int | None]]:
    distance: list[int | None] = [None] * vertex_count
    previous: list[int | None] = [None] * vertex_count
    distance[0] = 0
    return distance, previous


def bellman_ford(vertex_count: int, edges: Iterable[WeightedEdge]) -> ShortestPaths:
    """Shortest paths over directed weighted ``edges``; detects negative cycles."""
    _require_vertices(vertex_count, need_source=True)
    adjacency = _weighted_adjacency(vertex_count, edges)
    distance, previous = _fresh(vertex_count)
    for _ in range(vertex_count - 1):
        for u, outgoing in enumerate(adjacency):
            for v, weight in outgoing:
                _relax(distance, previous, u, v, weight)
    return ShortestPaths(distance, previous, _improvable(adjacency, distance))


def dag_shortest_paths(vertex_count: int, edges: Iterable[WeightedEdge]) -> ShortestPaths:
    """Shortest paths by relaxing edges once in topological order.

    ``has_negative_cycle`` is set when some edge could still be relaxed
    afterwards, which happens only when the graph is not acyclic.
    """
    _require_vertices(vertex_count, need_source=True)
    adjacency = _weighted_adjacency(vertex_count, edges)
    _, _, _, finish_order = _depth_first([[v for v, _ in outgoing] for outgoing in adjacency])
    distance, previous = _fresh(vertex_count)
    for u in reversed(finish_order):
        for v, weight in adjacency[u]:
            _relax(distance, previous, u, v, weight)
    return ShortestPaths(distance, previous, _improvable(adjacency, distance))


def dijkstra(vertex_count: int, edges: Iterable[WeightedEdge]) -> ShortestPaths:
    """Shortest paths over directed ``edges`` with non-negative weights."""
    _require_vertices(vertex_count, need_source=True)
    adjacency = _weighted_adjacency(vertex_count, edges)
    if any(weight < 0 for outgoing in adjacency for _, weight in outgoing):
        raise ValueError("dijkstra requires non-negative edge weights")
    distance, previous = _fresh(vertex_count)
    queue = [(0, 0)]
    while queue:
        reached, u = heapq.heappop(queue)
        if reached != distance[u]:
            continue
        for v, weight in adjacency[u]:
            if _relax(distance, previous, u, v, weight):
                heapq.heappush(queue, (distance[v], v))
    return ShortestPaths(distance, previous)


def kruskal(vertex_count: int, edges: Iterable[WeightedEdge]) -> list[WeightedEdge]:
    """Minimum spanning forest; edges are returned in the order they are chosen."""
    _require_vertices(vertex_count, need_source=False)
    parent = list(range(vertex_count))

    def find(x: int) -> int:
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    chosen = []
    for u, v, weight in sorted(_weighted_edges(vertex_count, edges), key=lambda e: e[2]):
        root_u, root_v = find(u), find(v)
        if root_u != root_v:
            parent[root_v] = root_u
            chosen.append((u, v, weight))
    return chosen


def prim(vertex_count: int, edges: Iterable[WeightedEdge]) -> list[WeightedEdge]:
    """Minimum spanning tree grown from vertex 0 over undirected ``edges``.

    Returns ``(parent, vertex, weight)`` for every vertex except 0, in vertex
    order. Raises ValueError if the graph is not connected.
    """
    _require_vertices(vertex_count, need_source=True)
    adjacency = _weighted_adjacency(vertex_count, edges, undirected=True)
    key: list[int | None] = [None] * vertex_count
    parent: list[int] = [-1] * vertex_count
    in_tree = [False] * vertex_count
    in_tree[0] = True
    queue: list[tuple[int, int]] = []
    u = 0
    for _ in range(vertex_count - 1):
        for v, weight in adjacency[u]:
            current = key[v]
            if not in_tree[v] and (current is None or current > weight):
                key[v] = weight
                parent[v] = u
                heapq.heappush(queue, (weight, v))
        while queue and in_tree[queue[0][1]]:
            heapq.heappop(queue)
        if not queue:
            raise ValueError("graph is not connected")
        _, u = heapq.heappop(queue)
        in_tree[u] = True
    return [(parent[v], v, key[v]) for v in range(1, vertex_count)]  # type: ignore[misc]