"""Dynamic programming on graphs: path counting, shortest-path DAGs, coin graphs."""

import heapq
from collections import defaultdict, deque
from collections.abc import Iterable, Sequence
from typing import Optional

Adjacency = Sequence[Sequence[int]]
WeightedAdjacency = Sequence[Sequence[tuple[int, int]]]


def _postorder(adj: Adjacency, start: int) -> list[int]:
    """Nodes reachable from start in depth-first post-order; raise on cycles."""
    finished: set[int] = set()
    active = {start}
    order: list[int] = []
    stack = [(start, iter(adj[start]))]
    while stack:
        node, neighbours = stack[-1]
        for nxt in neighbours:
            if nxt in active:
                raise ValueError("graph has a cycle")
            if nxt not in finished:
                active.add(nxt)
                stack.append((nxt, iter(adj[nxt])))
                break
        else:
            stack.pop()
            active.discard(node)
            finished.add(node)
            order.append(node)
    return order


def path_count(adj: Adjacency, start: int, end: int) -> int:
    """Count the distinct paths from start to end in a directed acyclic graph.

    Raises ValueError if a cycle is reachable from start.
    """
    paths: defaultdict[int, int] = defaultdict(int)
    paths[start] = 1
    for node in reversed(_postorder(adj, start)):
        for nxt in adj[node]:
            paths[nxt] += paths[node]
    return paths[end]


def shortest_path_predecessors(
    adj: WeightedAdjacency, origin: int
) -> list[Optional[int]]:
    """Dijkstra from origin; return each node's predecessor on a shortest path."""
    dist: dict[int, int] = {origin: 0}
    pred: list[Optional[int]] = [None] * len(adj)
    done: set[int] = set()
    queue = [(0, -origin)]
    while queue:
        _, neg = heapq.heappop(queue)
        a = -neg
        if a in done:
            continue
        done.add(a)
        for b, w in adj[a]:
            candidate = dist[a] + w
            if b not in dist or candidate < dist[b]:
                dist[b] = candidate
                pred[b] = a
                heapq.heappush(queue, (candidate, -b))
    return pred


def path_to(pred: Sequence[Optional[int]], node: int) -> list[int]:
    """Follow predecessors from node back to the origin, node first."""
    chain = [node]
    previous = pred[node]
    while previous is not None:
        chain.append(previous)
        previous = pred[previous]
    return chain


def weighted_adjacency(
    edges: Iterable[tuple[int, int, int]], n: int, bidirectional: bool = True
) -> list[list[tuple[int, int]]]:
    """Build adjacency lists of (neighbour, weight) for nodes 0..n."""
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for a, b, w in edges:
        adj[a].append((b, w))
        if bidirectional:
            adj[b].append((a, w))
    return adj


def coin_graph(coins: Iterable[int], n: int) -> list[list[int]]:
    """Graph over sums 0..n with an edge x-c -> x for every coin c."""
    coin_list = list(coins)
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for x in range(1, n + 1):
        for c in coin_list:
            if x - c >= 0:
                adj[x - c].append(x)
    return adj


def coin_distance(adj: Adjacency, n: int) -> int:
    """Fewest edges from sum 0 to sum n in a coin graph.

    Raises ValueError when n cannot be reached.
    """
    dist = {0: 0}
    queue = deque([0])
    while queue:
        v = queue.popleft()
        for u in adj[v]:
            if u not in dist:
                dist[u] = dist[v] + 1
                queue.append(u)
    if n not in dist:
        raise ValueError(f"sum {n} cannot be formed")
    return dist[n]