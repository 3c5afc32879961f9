"""Single-source and all-pairs shortest paths."""

import heapq
import math
from collections.abc import Iterable, Sequence
from typing import Optional

WeightedAdjacency = Sequence[Sequence[tuple[int, float]]]
Cell = tuple[int, int]

_DIRECTIONS: tuple[Cell, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))


def bellman_ford(
    edges: Iterable[tuple[int, int, float]], vertices: int, source: int = 1
) -> tuple[list[float], list[Optional[int]]]:
    """Relax the directed edges vertices-1 times from source.

    Returns (dist, pred) indexed 0..vertices. Unreachable nodes have an
    infinite distance and no predecessor.
    """
    if not 0 <= source <= vertices:
        raise ValueError(f"source {source} is not a vertex")
    edge_list = list(edges)
    dist: list[float] = [math.inf] * (vertices + 1)
    pred: list[Optional[int]] = [None] * (vertices + 1)
    dist[source] = 0
    for _ in range(vertices - 1):
        changed = False
        for a, b, w in edge_list:
            if dist[a] + w < dist[b]:
                dist[b] = dist[a] + w
                pred[b] = a
                changed = True
        if not changed:
            break
    return dist, pred


def dijkstra(adj: WeightedAdjacency, n: int, origin: int) -> list[float]:
    """Distances from origin to nodes 0..n over (neighbour, weight) lists."""
    if not 0 <= origin <= n:
        raise ValueError(f"origin {origin} is not a node")
    dist: list[float] = [math.inf] * (n + 1)
    dist[origin] = 0
    done: set[int] = set()
    queue: list[tuple[float, int]] = [(0, origin)]
    while queue:
        _, a = heapq.heappop(queue)
        if a in done:
            continue
        done.add(a)
        for b, w in adj[a]:
            candidate = dist[a] + w
            if candidate < dist[b]:
                dist[b] = candidate
                heapq.heappush(queue, (candidate, b))
    return dist


def dijkstra_grid(
    matrix: Sequence[Sequence[float]], start: Cell = (0, 0)
) -> list[list[float]]:
    """Cheapest cost from start to every cell; entering a cell costs its value."""
    if not matrix or not matrix[0]:
        raise ValueError("grid must not be empty")
    rows, cols = len(matrix), len(matrix[0])
    sr, sc = start
    if not (0 <= sr < rows and 0 <= sc < cols):
        raise ValueError(f"start cell {start} is outside the grid")

    dist = [[math.inf] * cols for _ in range(rows)]
    dist[sr][sc] = 0
    done: set[Cell] = set()
    queue: list[tuple[float, int, int]] = [(0, sr, sc)]
    while queue:
        _, r, c = heapq.heappop(queue)
        if (r, c) in done:
            continue
        done.add((r, c))
        for dr, dc in _DIRECTIONS:
            nr, nc = r + dr, c + dc
            if not (0 <= nr < rows and 0 <= nc < cols):
                continue
            candidate = dist[r][c] + matrix[nr][nc]
            if candidate < dist[nr][nc]:
                dist[nr][nc] = candidate
                heapq.heappush(queue, (candidate, nr, nc))
    return dist


def floyd_warshall(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    """All-pairs distances from an adjacency matrix where 0 means no edge."""
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("adjacency matrix must be square")
    dist: list[list[float]] = [
        [0 if r == c else (w if w else math.inf) for c, w in enumerate(row)]
        for r, row in enumerate(matrix)
    ]
    for k in range(n):
        through = dist[k]
        for row in dist:
            via = row[k]
            if via == math.inf:
                continue
            for c, rest in enumerate(through):
                if via + rest < row[c]:
                    row[c] = via + rest
    return dist