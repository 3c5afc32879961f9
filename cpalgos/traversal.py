"""Depth-first and breadth-first traversal of adjacency lists and grids."""

from collections import deque
from collections.abc import Sequence
from typing import Any

Adjacency = Sequence[Sequence[int]]
Cell = tuple[int, int]

_DIRECTIONS: tuple[Cell, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))


def dfs_recursive(adj: Adjacency, start: int) -> list[int]:
    """Return the nodes reachable from start in recursive depth-first order."""
    visited: set[int] = set()
    order: list[int] = []

    def visit(node: int) -> None:
        visited.add(node)
        order.append(node)
        for neighbour in adj[node]:
            if neighbour not in visited:
                visit(neighbour)

    visit(start)
    return order


def dfs_iterative(adj: Adjacency, start: int) -> list[int]:
    """Depth-first order using an explicit stack, matching the recursive order."""
    visited: set[int] = set()
    order: list[int] = []
    stack = [start]
    while stack:
        node = stack.pop()
        if node in visited:
            continue
        visited.add(node)
        order.append(node)
        stack.extend(b for b in reversed(adj[node]) if b not in visited)
    return order


def bfs(adj: Adjacency, start: int) -> list[int]:
    """Return the nodes reachable from start in breadth-first order."""
    visited: set[int] = set()
    order: list[int] = []
    queue = deque([start])
    while queue:
        node = queue.popleft()
        if node in visited:
            continue
        visited.add(node)
        order.append(node)
        queue.extend(b for b in adj[node] if b not in visited)
    return order


def _check_cell(grid: Sequence[Sequence[Any]], cell: Cell) -> tuple[int, int]:
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    rows, cols = len(grid), len(grid[0])
    r, c = cell
    if not (0 <= r < rows and 0 <= c < cols):
        raise ValueError(f"start cell {cell} is outside the grid")
    return rows, cols


def _neighbours(cell: Cell, rows: int, cols: int):
    r, c = cell
    for dr, dc in _DIRECTIONS:
        nr, nc = r + dr, c + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            yield nr, nc


def grid_dfs(grid: Sequence[Sequence[Any]], start: Cell) -> list[Any]:
    """Visit every cell reachable from start depth-first; return the cell values."""
    rows, cols = _check_cell(grid, start)
    visited: set[Cell] = set()
    values: list[Any] = []
    stack = [start]
    while stack:
        cell = stack.pop()
        if cell in visited:
            continue
        visited.add(cell)
        values.append(grid[cell[0]][cell[1]])
        stack.extend(_neighbours(cell, rows, cols))
    return values


def grid_bfs_distances(grid: Sequence[Sequence[Any]], start: Cell) -> list[list[int]]:
    """Number of steps from start to every cell of the grid, found breadth-first."""
    rows, cols = _check_cell(grid, start)
    distance = [[0] * cols for _ in range(rows)]
    seen = {start}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        for nr, nc in _neighbours(cell, rows, cols):
            if (nr, nc) in seen:
                continue
            seen.add((nr, nc))
            distance[nr][nc] = distance[cell[0]][cell[1]] + 1
            queue.append((nr, nc))
    return distance


def is_connected(adj: Adjacency, start: int) -> bool:
    """Whether every node of the adjacency list is reachable from start."""
    return len(set(dfs_iterative(adj, start))) == len(adj)


def has_cycle(adj: Adjacency, start: int) -> bool:
    """Whether a depth-first search from start runs into an already visited node."""
    visited: set[int] = set()
    stack = [start]
    while stack:
        node = stack.pop()
        if node in visited:
            continue
        visited.add(node)
        for neighbour in adj[node]:
            if neighbour in visited:
                return True
            stack.append(neighbour)
    return False


def is_bipartite(adj: Adjacency, start: int) -> bool:
    """Whether the nodes reachable from start can be two-coloured."""
    colours: dict[int, int] = {}
    stack = [(start, 0)]
    while stack:
        node, colour = stack.pop()
        if node in colours:
            continue
        colours[node] = colour
        for neighbour in adj[node]:
            if colours.get(neighbour) == colour:
                return False
            stack.append((neighbour, 1 - colour))
    return True