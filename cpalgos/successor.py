"""Successor graphs: binary lifting and cycle length."""

from collections.abc import Sequence


def successor_table(graph: Sequence[int], levels: int) -> list[list[int]]:
    """Rows 0..levels where row j maps each node to its 2**j-th successor."""
    if levels < 0:
        raise ValueError("levels must be non-negative")
    table = [list(graph)]
    for _ in range(levels):
        previous = table[-1]
        table.append([previous[v] for v in previous])
    return table


def successor(graph: Sequence[int], x: int, k: int) -> int:
    """The node reached from x after k steps."""
    if k < 0:
        raise ValueError("k must be non-negative")
    if k == 0:
        return x
    table = successor_table(graph, k.bit_length() - 1)
    node = x
    for exp in range(len(table) - 1, -1, -1):
        if k >> exp & 1:
            node = table[exp][node]
    return node


def cycle_length(graph: Sequence[int], x: int) -> int:
    """Length of the cycle eventually reached from x (Floyd's algorithm)."""
    a = graph[x]
    b = graph[a]
    while a != b:
        a = graph[a]
        b = graph[graph[b]]
    a = x
    while a != b:
        a = graph[a]
        b = graph[b]
    b = graph[a]
    length = 1
    while a != b:
        b = graph[b]
        length += 1
    return length