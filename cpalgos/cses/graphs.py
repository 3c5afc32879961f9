"""Graph problems: rooms, labyrinths, roads, routes, teams and cycles."""

import heapq
import math
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from typing import Optional

from cpalgos.mst import DisjointSet

Cell = tuple[int, int]

# right, down, left, up
_MOVES: tuple[tuple[int, int, str], ...] = (
    (0, 1, "R"),
    (1, 0, "D"),
    (0, -1, "L"),
    (-1, 0, "U"),
)


def _steps(grid: Sequence[str], r: int, c: int) -> Iterator[tuple[int, int, str]]:
    """Open neighbours of (r, c) in right, down, left, up order."""
    for dr, dc, letter in _MOVES:
        nr, nc = r + dr, c + dc
        if 0 <= nr < len(grid) and 0 <= nc < len(grid[nr]) and grid[nr][nc] != "#":
            yield nr, nc, letter


def _grid_bfs(
    grid: Sequence[str], sources: Iterable[Cell]
) -> tuple[dict[Cell, int], dict[Cell, tuple[Cell, str]]]:
    """Breadth-first distances from the sources and the move that reached each cell."""
    starts = list(sources)
    dist = {cell: 0 for cell in starts}
    parents: dict[Cell, tuple[Cell, str]] = {}
    queue = deque(starts)
    while queue:
        cell = queue.popleft()
        for nr, nc, letter in _steps(grid, *cell):
            if (nr, nc) in dist:
                continue
            dist[nr, nc] = dist[cell] + 1
            parents[nr, nc] = (cell, letter)
            queue.append((nr, nc))
    return dist, parents


def _trace(parents: dict[Cell, tuple[Cell, str]], start: Cell, end: Cell) -> str:
    letters = []
    pos = end
    while pos != start:
        pos, letter = parents[pos]
        letters.append(letter)
    return "".join(reversed(letters))


def _find(grid: Sequence[str], symbol: str) -> Cell:
    for r, row in enumerate(grid):
        c = row.find(symbol)
        if c != -1:
            return r, c
    raise ValueError(f"grid has no {symbol!r} cell")


def _adjacency(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        adj[a].append(b)
        adj[b].append(a)
    return adj


def counting_rooms(grid: Sequence[str]) -> int:
    """Number of rooms: connected groups of '.' cells."""
    seen: set[Cell] = set()
    rooms = 0
    for r, row in enumerate(grid):
        for c, ch in enumerate(row):
            if ch != "." or (r, c) in seen:
                continue
            rooms += 1
            seen.add((r, c))
            stack = [(r, c)]
            while stack:
                cr, cc = stack.pop()
                for dr, dc, _ in _MOVES:
                    nr, nc = cr + dr, cc + dc
                    if (
                        0 <= nr < len(grid)
                        and 0 <= nc < len(grid[nr])
                        and grid[nr][nc] == "."
                        and (nr, nc) not in seen
                    ):
                        seen.add((nr, nc))
                        stack.append((nr, nc))
    return rooms


def labyrinth(grid: Sequence[str]) -> str:
    """Shortest path from 'A' to 'B' as a string of R, D, L and U moves.

    Raises ValueError when 'B' cannot be reached.
    """
    start, end = _find(grid, "A"), _find(grid, "B")
    dist, parents = _grid_bfs(grid, [start])
    if end not in dist:
        raise ValueError("no path")
    return _trace(parents, start, end)


def monsters(grid: Sequence[str]) -> str:
    """Moves that take 'A' to the border, always ahead of every 'M'.

    Among safe border cells the nearest is chosen, the first in row order on
    ties. Raises ValueError when there is no safe way out.
    """
    start = _find(grid, "A")
    monster_cells = [
        (r, c) for r, row in enumerate(grid) for c, ch in enumerate(row) if ch == "M"
    ]
    monster_dist, _ = _grid_bfs(grid, monster_cells)
    person_dist, parents = _grid_bfs(grid, [start])

    rows = len(grid)
    best: Optional[Cell] = None
    best_dist = math.inf
    for r, row in enumerate(grid):
        for c, ch in enumerate(row):
            if ch not in ".A":
                continue
            if not (r == 0 or c == 0 or r == rows - 1 or c == len(row) - 1):
                continue
            mine = person_dist.get((r, c), math.inf)
            if mine < monster_dist.get((r, c), math.inf) and mine < best_dist:
                best, best_dist = (r, c), mine
    if best is None:
        raise ValueError("no escape")
    return _trace(parents, start, best)


def building_roads(n: int, roads: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """New roads joining the cities 1..n, linking the first city of each component."""
    adj = _adjacency(n, roads)
    visited: set[int] = set()
    roots: list[int] = []
    for v in range(1, n + 1):
        if v in visited:
            continue
        roots.append(v)
        visited.add(v)
        stack = [v]
        while stack:
            a = stack.pop()
            for b in adj[a]:
                if b not in visited:
                    visited.add(b)
                    stack.append(b)
    return list(zip(roots, roots[1:]))


def message_route(n: int, connections: Iterable[tuple[int, int]]) -> list[int]:
    """Fewest-hop route of computers from 1 to n.

    Raises ValueError when n cannot be reached.
    """
    if n < 1:
        raise ValueError("n must be positive")
    adj = _adjacency(n, connections)
    dist = {1: 0}
    pred: dict[int, int] = {}
    done: set[int] = set()
    queue = [(0, -1)]
    while queue:
        d, neg = heapq.heappop(queue)
        a = -neg
        if a in done:
            continue
        done.add(a)
        for b in adj[a]:
            if b in done:
                continue
            if b not in dist or d + 1 < dist[b]:
                dist[b] = d + 1
                pred[b] = a
                heapq.heappush(queue, (d + 1, -b))
    if n not in dist:
        raise ValueError("impossible")
    path = [n]
    while path[-1] != 1:
        path.append(pred[path[-1]])
    path.reverse()
    return path


def building_teams(n: int, friendships: Iterable[tuple[int, int]]) -> list[int]:
    """Team 1 or 2 for each pupil 1..n so that no friends share a team.

    Raises ValueError when no such split exists.
    """
    adj = _adjacency(n, friendships)
    teams = [-1] * (n + 1)
    for v in range(1, n + 1):
        if teams[v] != -1:
            continue
        stack = [(v, 0)]
        while stack:
            a, team = stack.pop()
            if teams[a] != -1:
                continue
            teams[a] = team
            for b in adj[a]:
                if teams[b] == team:
                    raise ValueError("impossible")
                stack.append((b, 1 - team))
    return [team + 1 for team in teams[1:]]


def round_trip(n: int, roads: Iterable[tuple[int, int]]) -> list[int]:
    """A route that starts and ends in the same city and uses no road twice.

    Raises ValueError when the road network has no cycle.
    """
    adj = _adjacency(n, roads)
    done = [False] * (n + 1)
    pred: list[Optional[int]] = [None] * (n + 1)
    for root in range(1, n + 1):
        stack = [root]
        while stack:
            a = stack.pop()
            if done[a]:
                continue
            done[a] = True
            for b in reversed(adj[a]):
                if pred[a] == b:
                    continue
                if done[b]:
                    cycle = [b]
                    v: Optional[int] = a
                    while v != b:
                        if v is None:
                            raise ValueError("impossible")
                        cycle.append(v)
                        v = pred[v]
                    cycle.append(b)
                    return cycle
                pred[b] = a
                stack.append(b)
    raise ValueError("impossible")


def shortest_routes(n: int, flights: Iterable[tuple[int, int, int]]) -> list[float]:
    """Cheapest cost from city 1 to each city 1..n over directed flights.

    Unreachable cities get an infinite cost.
    """
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for a, b, w in flights:
        adj[a].append((b, w))
    dist: list[float] = [math.inf] * (n + 1)
    dist[1] = 0
    done: set[int] = set()
    queue: list[tuple[float, int]] = [(0, 1)]
    while queue:
        d, u = heapq.heappop(queue)
        if u in done:
            continue
        done.add(u)
        for v, w in adj[u]:
            if v == u or v in done:
                continue
            if d + w < dist[v]:
                dist[v] = d + w
                heapq.heappush(queue, (dist[v], v))
    return dist[1:]


def road_construction(
    n: int, roads: Iterable[tuple[int, int]]
) -> list[tuple[int, int]]:
    """After each new road: (number of components, size of the largest one)."""
    components = DisjointSet(n + 1)
    count, largest = n, 1
    result = []
    for a, b in roads:
        if components.union(a, b):
            count -= 1
            largest = max(largest, components.size_of(a))
        result.append((count, largest))
    return result