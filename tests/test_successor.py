import pytest

from cpalgos.successor import cycle_length, successor, successor_table

SGRAPH1 = [0, 3, 5, 7, 6, 2, 2, 1, 6, 3]
SGRAPH2 = [0, 2, 3, 4, 5, 6, 3]


def test_successor_example():
    assert successor(SGRAPH1, 4, 11) == 5


def test_successor_single_and_zero_steps():
    for v in range(1, 10):
        assert successor(SGRAPH1, v, 1) == SGRAPH1[v]
        assert successor(SGRAPH1, v, 0) == v


@pytest.mark.parametrize("a,b", [(1, 1), (3, 5), (7, 9), (16, 4), (13, 13)])
def test_successor_composes(a, b):
    for v in range(1, 10):
        assert successor(SGRAPH1, v, a + b) == successor(
            SGRAPH1, successor(SGRAPH1, v, a), b
        )


def test_successor_negative_raises():
    with pytest.raises(ValueError):
        successor(SGRAPH1, 1, -1)


def test_successor_table_rows():
    table = successor_table(SGRAPH1, 4)
    assert len(table) == 5
    assert table[0] == SGRAPH1
    for j, row in enumerate(table):
        for v in range(1, 10):
            assert row[v] == successor(SGRAPH1, v, 2**j)


def test_cycle_length_examples():
    assert cycle_length(SGRAPH1, 2) == 2
    assert cycle_length(SGRAPH2, 6) == 4


@pytest.mark.parametrize("graph", [SGRAPH1, SGRAPH2])
def test_cycle_length_returns_to_node(graph):
    for x in range(1, len(graph)):
        length = cycle_length(graph, x)
        on_cycle = successor(graph, x, 3 * len(graph))
        assert successor(graph, on_cycle, length) == on_cycle
        for shorter in range(1, length):
            assert successor(graph, on_cycle, shorter) != on_cycle