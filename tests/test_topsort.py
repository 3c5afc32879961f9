import pytest

from cpalgos.topsort import CycleError, topological_sort


def _graph():
    return [[], [2], [3], [6], [1, 5], [2, 3], []]


def test_example_order():
    assert topological_sort(_graph(), 6) == [4, 5, 1, 2, 3, 6]


def test_edges_point_forward():
    adj = _graph()
    order = topological_sort(adj, 6)
    assert sorted(order) == list(range(1, 7))
    position = {v: i for i, v in enumerate(order)}
    for a in range(1, 7):
        for b in adj[a]:
            assert position[a] < position[b]


def test_cycle_raises():
    adj = _graph()
    adj[3].append(5)
    with pytest.raises(CycleError):
        topological_sort(adj, 6)


def test_cycle_error_is_value_error():
    with pytest.raises(ValueError):
        topological_sort([[], [1]], 1)


def test_isolated_vertices_all_present():
    order = topological_sort([[], [], [], []], 3)
    assert sorted(order) == [1, 2, 3]