import pytest

from cpalgos.traversal import (
    bfs,
    dfs_iterative,
    dfs_recursive,
    grid_bfs_distances,
    grid_dfs,
    has_cycle,
    is_bipartite,
    is_connected,
)

GRAPH1 = [[1], [2, 5], [3, 4], [], [], []]
GRAPH2 = [[], [2, 5, 4], [3, 4], [], [1], []]
GRAPH3 = [[], [2, 4], [3], [5], [], [2]]
GRAPH4 = [[], [2, 4], [3], [5], [], []]
GRID = [
    [1, 2, 3, 4],
    [5, 6, 7, 8],
    [9, 10, 11, 12],
    [13, 14, 15, 16],
]


def test_dfs_recursive_order():
    assert dfs_recursive(GRAPH1, 0) == [0, 1, 2, 3, 4, 5]


def test_dfs_iterative_matches_recursive():
    for start in range(len(GRAPH2)):
        assert dfs_iterative(GRAPH2, start) == dfs_recursive(GRAPH2, start)


def test_bfs_order():
    assert bfs(GRAPH1, 0) == [0, 1, 2, 5, 3, 4]


def test_bfs_visits_same_nodes_as_dfs():
    assert sorted(bfs(GRAPH2, 1)) == sorted(dfs_iterative(GRAPH2, 1))
    assert bfs(GRAPH2, 1)[0] == 1


def test_grid_dfs_visits_every_cell_once():
    values = grid_dfs(GRID, (0, 0))
    assert values[0] == 1
    assert sorted(values) == list(range(1, 17))


def test_grid_dfs_from_inner_cell_reaches_everything():
    values = grid_dfs(GRID, (2, 1))
    assert values[0] == GRID[2][1]
    assert sorted(values) == list(range(1, 17))


def test_grid_bfs_distances_are_manhattan():
    start = (1, 2)
    dist = grid_bfs_distances(GRID, start)
    for r, row in enumerate(dist):
        for c, d in enumerate(row):
            assert d == abs(r - start[0]) + abs(c - start[1])


def test_grid_start_outside_raises():
    with pytest.raises(ValueError):
        grid_dfs(GRID, (4, 0))
    with pytest.raises(ValueError):
        grid_bfs_distances([], (0, 0))


def test_connectivity():
    assert is_connected(GRAPH1, 0) is True
    assert is_connected(GRAPH2, 0) is False


def test_cycle_detection():
    assert has_cycle(GRAPH1, 1) is False
    assert has_cycle(GRAPH2, 1) is True


def test_bipartite():
    assert is_bipartite(GRAPH3, 1) is False
    assert is_bipartite(GRAPH4, 1) is True