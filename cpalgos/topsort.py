"""Topological sorting of directed graphs with cycle detection."""

from collections.abc import Sequence
from enum import Enum, auto


class CycleError(ValueError):
    """Raised when a graph that must be acyclic contains a cycle."""


class _Status(Enum):
    PENDING = auto()
    IN_PROGRESS = auto()
    DONE = auto()


def topological_sort(adj: Sequence[Sequence[int]], vertices: int) -> list[int]:
    """Order vertices 1..vertices so every edge points forward.

    Raises CycleError if the graph has a cycle.
    """
    status = [_Status.PENDING] * (vertices + 1)
    finished: list[int] = []

    for root in range(1, vertices + 1):
        if status[root] is _Status.DONE:
            continue
        stack = [root]
        while stack:
            a = stack[-1]
            if status[a] is _Status.DONE:
                stack.pop()
                continue
            if status[a] is _Status.IN_PROGRESS:
                stack.pop()
                status[a] = _Status.DONE
                finished.append(a)
                continue
            status[a] = _Status.IN_PROGRESS
            for b in adj[a]:
                if status[b] is _Status.DONE:
                    continue
                if status[b] is _Status.IN_PROGRESS:
                    raise CycleError(f"cycle through vertex {b}")
                stack.append(b)

    finished.reverse()
    return finished