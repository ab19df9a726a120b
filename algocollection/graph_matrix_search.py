"""Searches over graphs given as adjacency matrices.

A vertex ``u`` has an edge to ``v`` when ``matrix[u][v]`` is non-zero.
Functions that name vertices by letter call vertex 0 ``A``, vertex 1 ``B``
and so on, so they accept at most 26 vertices.
"""

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from string import ascii_uppercase

from algocollection.graph_list import dfs

Matrix = Iterable[Iterable[int]]

_WHITE, _GRAY, _BLACK = 0, 1, 2


@dataclass(frozen=True)
class BfsTree:
    """Breadth-first search tree from one source vertex.

    ``distance`` and ``previous`` are ``None`` for unreached vertices, and
    ``previous`` is ``None`` for the source. ``has_cycle`` is set when an
    edge leads to a vertex still waiting in the queue.
    """

    distance: list[int | None]
    previous: list[int | None]
    has_cycle: bool


@dataclass(frozen=True)
class DfsTimes:
    """Depth-first search predecessors with discovery and finish times."""

    previous: list[int | None]
    discovered: list[int]
    finished: list[int]


def _square(matrix: Matrix) -> list[list[int]]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("matrix must be square")
    return rows


def _lettered(matrix: Matrix, *, need_source: bool) -> list[list[int]]:
    rows = _square(matrix)
    if need_source and not rows:
        raise ValueError("graph must have at least one vertex")
    if len(rows) > len(ascii_uppercase):
        raise ValueError(f"at most {len(ascii_uppercase)} vertices can be named by letter")
    return rows


def _neighbours(rows: list[list[int]], u: int) -> list[int]:
    return [v for v, weight in enumerate(rows[u]) if weight]


def letter_bfs(matrix: Matrix) -> list[str]:
    """Letters of the vertices in the order a breadth-first search from A visits them."""
    rows = _lettered(matrix, need_source=True)
    order: list[int] = []
    seen: set[int] = set()
    queue = deque([0])
    while queue:
        u = queue.popleft()
        if u in seen:
            continue
        seen.add(u)
        order.append(u)
        queue.extend(v for v in _neighbours(rows, u) if v not in seen)
    return [ascii_uppercase[u] for u in order]


def letter_dfs(matrix: Matrix) -> list[str]:
    """Letters of the vertices in the order a stack-based depth-first search from A visits them.

    Neighbours are pushed in vertex order, so the highest-numbered one is
    explored first.
    """
    rows = _lettered(matrix, need_source=True)
    order: list[int] = []
    seen: set[int] = set()
    stack = [0]
    while stack:
        u = stack.pop()
        if u in seen:
            continue
        seen.add(u)
        order.append(u)
        stack.extend(v for v in _neighbours(rows, u) if v not in seen)
    return [ascii_uppercase[u] for u in order]


def bfs_tree(matrix: Matrix, source: int) -> BfsTree:
    """Breadth-first search from ``source`` recording distances and predecessors."""
    rows = _square(matrix)
    size = len(rows)
    if not 0 <= source < size:
        raise ValueError(f"source {source} is not a vertex of the graph")

    distance: list[int | None] = [None] * size
    previous: list[int | None] = [None] * size
    distance[source] = 0
    queued = {source}
    queue = deque([source])
    has_cycle = False
    while queue:
        u = queue.popleft()
        queued.discard(u)
        for v in _neighbours(rows, u):
            if distance[v] is None:
                distance[v] = distance[u] + 1  # type: ignore[operator]
                previous[v] = u
                queued.add(v)
                queue.append(v)
            elif v in queued:
                has_cycle = True
    return BfsTree(distance, previous, has_cycle)


def dfs_times(matrix: Matrix) -> DfsTimes:
    """Depth-first search over every vertex, roots taken in vertex order."""
    rows = _square(matrix)
    edges = [(u, v) for u in range(len(rows)) for v in _neighbours(rows, u)]
    result = dfs(len(rows), edges)
    return DfsTimes(result.previous, result.discovered, result.finished)


def adjacency_listing(matrix: Matrix) -> dict[str, list[str]]:
    """Map each vertex letter to the letters of its neighbours, in vertex order."""
    rows = _lettered(matrix, need_source=False)
    return {
        ascii_uppercase[u]: [ascii_uppercase[v] for v in _neighbours(rows, u)]
        for u in range(len(rows))
    }


def cut_edges(matrix: Matrix) -> list[tuple[int, int]]:
    """Entries ``(u, v)`` whose removal alone leaves some vertex unreachable from vertex 0.

    Each non-zero matrix entry is tried on its own, so an undirected edge is
    tried once in each direction.
    """
    rows = _square(matrix)
    size = len(rows)

    def reaches_all(removed: tuple[int, int]) -> bool:
        seen = {0}
        stack = [0]
        while stack:
            u = stack.pop()
            for v in _neighbours(rows, u):
                if (u, v) != removed and v not in seen:
                    seen.add(v)
                    stack.append(v)
        return len(seen) == size

    return [
        (u, v)
        for u in range(size)
        for v in _neighbours(rows, u)
        if not reaches_all((u, v))
    ]


def find_cycle(matrix: Matrix) -> list[int] | None:
    """Return the vertices of the first directed cycle met by depth-first search.

    The cycle is listed from the vertex it closes on, along the search path,
    to the vertex whose edge closes it. Returns None if there is no cycle.
    """
    rows = _square(matrix)
    state = [_WHITE] * len(rows)
    for root in range(len(rows)):
        if state[root] != _WHITE:
            continue
        state[root] = _GRAY
        path = [root]
        pending = [iter(_neighbours(rows, root))]
        while path:
            for v in pending[-1]:
                if state[v] == _GRAY:
                    return path[path.index(v):]
                if state[v] == _WHITE:
                    state[v] = _GRAY
                    path.append(v)
                    pending.append(iter(_neighbours(rows, v)))
                    break
            else:
                state[path.pop()] = _BLACK
                pending.pop()
    return None