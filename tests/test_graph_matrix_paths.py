import pytest

from algocollection.graph_matrix_paths import (
    bellman_ford,
    dijkstra,
    floyd_warshall,
    kruskal,
    prim,
    prim_heap,
)

UNDIRECTED = [
    [0, 2, 0, 6, 0],
    [2, 0, 3, 8, 5],
    [0, 3, 0, 0, 7],
    [6, 8, 0, 0, 9],
    [0, 5, 7, 9, 0],
]

DIRECTED = [
    [0, 4, 1, 0],
    [0, 0, 0, 1],
    [0, 2, 0, 5],
    [0, 0, 0, 0],
]

TRIANGLE = [[0, 1, 4], [1, 0, 2], [4, 2, 0]]


def _matrix_edges(matrix):
    return [
        (u, v, w)
        for u, row in enumerate(matrix)
        for v, w in enumerate(row)
        if w and u < v
    ]


@pytest.mark.parametrize("matrix", [UNDIRECTED, DIRECTED, TRIANGLE])
def test_bellman_ford_agrees_with_dijkstra(matrix):
    bf = bellman_ford(matrix)
    dj = dijkstra(matrix)
    assert bf.distance == dj.distance
    assert bf.has_negative_cycle is False


def test_bellman_ford_detects_negative_cycle():
    matrix = [[0, 1, 0], [0, 0, -3], [1, 0, 0]]
    assert bellman_ford(matrix).has_negative_cycle is True


def test_bellman_ford_negative_edge_without_cycle():
    matrix = [[0, 5, 2], [0, 0, 0], [0, -4, 0]]
    result = bellman_ford(matrix)
    assert result.has_negative_cycle is False
    assert result.distance[1] == result.distance[2] + matrix[2][1]
    assert result.previous[1] == 2


def test_dijkstra_unreachable_vertex():
    matrix = [[0, 3, 0], [0, 0, 0], [0, 1, 0]]
    result = dijkstra(matrix)
    assert result.distance[2] is None
    assert result.distance[1] == matrix[0][1]
    assert result.previous[0] is None


def test_dijkstra_rejects_negative_weights():
    with pytest.raises(ValueError):
        dijkstra([[0, -1], [0, 0]])


def test_non_square_matrix_rejected():
    with pytest.raises(ValueError):
        bellman_ford([[0, 1], [1]])
    with pytest.raises(ValueError):
        floyd_warshall([[0, 1, 2], [1, 0, 2]])


def test_floyd_warshall_triangle():
    result = floyd_warshall(TRIANGLE)
    assert result.distance[0][2] == 3
    assert result.path(0, 2) == [0, 1, 2]


@pytest.mark.parametrize("matrix", [UNDIRECTED, DIRECTED])
def test_floyd_warshall_row_zero_matches_bellman_ford(matrix):
    assert floyd_warshall(matrix).distance[0] == bellman_ford(matrix).distance


@pytest.mark.parametrize("matrix", [UNDIRECTED, DIRECTED])
def test_floyd_warshall_triangle_inequality(matrix):
    dist = floyd_warshall(matrix).distance
    n = len(matrix)
    for i in range(n):
        assert dist[i][i] == 0
        for j in range(n):
            for k in range(n):
                if None not in (dist[i][j], dist[i][k], dist[k][j]):
                    assert dist[i][j] <= dist[i][k] + dist[k][j]


@pytest.mark.parametrize("matrix", [UNDIRECTED, DIRECTED])
def test_paths_sum_to_distances(matrix):
    result = floyd_warshall(matrix)
    n = len(matrix)
    for u in range(n):
        for v in range(n):
            route = result.path(u, v)
            if result.distance[u][v] is None:
                assert route is None
                continue
            assert route[0] == u and route[-1] == v
            total = sum(matrix[a][b] for a, b in zip(route, route[1:]))
            assert total == result.distance[u][v]


def test_path_to_self_and_bad_vertex():
    result = floyd_warshall(DIRECTED)
    assert result.path(3, 3) == [3]
    assert result.path(3, 0) is None
    with pytest.raises(ValueError):
        result.path(0, 9)


def test_kruskal_matches_prim_total():
    tree = kruskal(len(UNDIRECTED), _matrix_edges(UNDIRECTED))
    assert len(tree.edges) == len(UNDIRECTED) - 1
    assert tree.total == prim(UNDIRECTED).total
    assert tree.total == sum(w for _, _, w in tree.edges)


def test_kruskal_picks_lightest_edge_first():
    edges = [(0, 1, 7), (1, 2, 3), (0, 2, 5)]
    tree = kruskal(3, edges)
    assert tree.edges == [(1, 2, 3), (0, 2, 5)]
    assert tree.total == 3 + 5


@pytest.mark.parametrize("matrix", [UNDIRECTED, TRIANGLE])
def test_prim_and_prim_heap_agree(matrix):
    assert prim(matrix) == prim_heap(matrix)


def test_prim_edges_come_from_matrix():
    tree = prim(UNDIRECTED)
    assert [v for _, v, _ in tree.edges] == list(range(1, len(UNDIRECTED)))
    for parent, v, weight in tree.edges:
        assert UNDIRECTED[parent][v] == weight
    assert tree.total == sum(w for _, _, w in tree.edges)


def test_prim_triangle_uses_cheap_edges():
    tree = prim(TRIANGLE)
    assert tree.edges == [(0, 1, 1), (1, 2, 2)]


@pytest.mark.parametrize("builder", [prim, prim_heap])
def test_prim_disconnected_raises(builder):
    with pytest.raises(ValueError):
        builder([[0, 1, 0], [1, 0, 0], [0, 0, 0]])


@pytest.mark.parametrize("builder", [prim, prim_heap])
def test_prim_empty_raises(builder):
    with pytest.raises(ValueError):
        builder([])