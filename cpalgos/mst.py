"""Minimum spanning trees with Kruskal's and Prim's algorithms."""

import heapq
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge."""

    u: int
    v: int
    weight: int


class DisjointSet:
    """Union-find over the elements 0..size-1, with union by size."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self._parent = list(range(size))
        self._size = [1] * size

    def find(self, v: int) -> int:
        """Return the representative of v's set."""
        root = v
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[v] != root:
            self._parent[v], v = root, self._parent[v]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of a and b; return False if they were already one."""
        a, b = self.find(a), self.find(b)
        if a == b:
            return False
        if self._size[a] < self._size[b]:
            a, b = b, a
        self._parent[b] = a
        self._size[a] += self._size[b]
        return True

    def size_of(self, v: int) -> int:
        """Number of elements in v's set."""
        return self._size[self.find(v)]


def kruskal(
    edges: Iterable[Union[Edge, tuple[int, int, int]]], n: int
) -> list[Edge]:
    """Minimum spanning forest of nodes 1..n, edges in the order they were taken."""
    ordered = sorted(
        (e if isinstance(e, Edge) else Edge(*e) for e in edges),
        key=lambda e: e.weight,
    )
    components = DisjointSet(n + 1)
    return [edge for edge in ordered if components.union(edge.u, edge.v)]


def prim(
    adj: Sequence[Sequence[tuple[int, int]]], n: int, start: int = 1
) -> list[list[tuple[int, int]]]:
    """Minimum spanning tree grown from start.

    Returns lists indexed 0..n: entry u holds (child, weight) for each tree
    edge that joined child through u.
    """
    if not 0 <= start <= n:
        raise ValueError(f"start {start} is not a node")
    selected: set[int] = set()
    min_weight: list[float] = [math.inf] * (n + 1)
    min_edge: list[int] = [-1] * (n + 1)
    min_weight[start] = 0
    queue: list[tuple[float, int]] = [(0, start)]
    while queue:
        _, u = heapq.heappop(queue)
        if u in selected:
            continue
        selected.add(u)
        for v, w in adj[u]:
            if v in selected:
                continue
            if w < min_weight[v]:
                min_weight[v] = w
                min_edge[v] = u
                heapq.heappush(queue, (w, v))

    tree: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for u in range(1, n + 1):
        parent = min_edge[u]
        if parent != -1:
            tree[parent].append((u, min_weight[u]))
    return tree