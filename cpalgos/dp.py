"""Dynamic programming examples: coins, LIS, grid paths, knapsack, elevator."""

from collections.abc import Iterable, Sequence


def _coin_tables(coins: Iterable[int], target: int):
    coin_list = list(coins)
    if any(c <= 0 for c in coin_list):
        raise ValueError("coin values must be positive")
    if target < 0:
        raise ValueError("target must be non-negative")

    fewest: list[float] = [0] + [float("inf")] * target
    first_coin = [0] * (target + 1)
    ways = [1] + [0] * target
    for k in range(1, target + 1):
        for coin in coin_list:
            rest = k - coin
            if rest < 0:
                continue
            if fewest[rest] + 1 < fewest[k]:
                fewest[k] = fewest[rest] + 1
                first_coin[k] = coin
            ways[k] += ways[rest]
    return fewest, first_coin, ways


def min_coins(coins: Iterable[int], target: int) -> list[int]:
    """Return a shortest list of coins summing to target.

    Raises ValueError when the target cannot be formed.
    """
    fewest, first_coin, _ = _coin_tables(coins, target)
    if fewest[target] == float("inf"):
        raise ValueError(f"sum {target} cannot be formed")
    used = []
    remaining = target
    while remaining > 0:
        used.append(first_coin[remaining])
        remaining -= first_coin[remaining]
    return used


def count_coin_ways(coins: Iterable[int], target: int) -> int:
    """Count ordered sequences of coins that sum to target."""
    _, _, ways = _coin_tables(coins, target)
    return ways[target]


def lis_lengths(values: Sequence[int]) -> list[int]:
    """For each position, the length of the longest increasing subsequence ending there."""
    lengths: list[int] = []
    for k, value in enumerate(values):
        best = 1
        for earlier, length in zip(values[:k], lengths):
            if earlier < value:
                best = max(best, length + 1)
        lengths.append(best)
    return lengths


def max_path_sums(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    """Best sums of right/down paths from the top-left corner to every cell."""
    if not grid:
        return []
    previous = [0] * len(grid[0])
    sums = []
    for row in grid:
        current = []
        left = 0
        for above, value in zip(previous, row):
            left = max(left, above) + value
            current.append(left)
        sums.append(current)
        previous = current
    return sums


def knapsack_table(weights: Iterable[int]) -> list[list[bool]]:
    """table[k][s] tells whether sum s can be formed from the first k weights."""
    weight_list = list(weights)
    if any(w < 0 for w in weight_list):
        raise ValueError("weights must be non-negative")
    total = sum(weight_list)
    table = [[s == 0 for s in range(total + 1)]]
    for w in weight_list:
        previous = table[-1]
        table.append(
            [previous[s] or (s >= w and previous[s - w]) for s in range(total + 1)]
        )
    return table


def knapsack(weights: Iterable[int], target: int) -> bool:
    """Whether some subset of weights sums exactly to target."""
    table = knapsack_table(weights)
    last = table[-1]
    return 0 <= target < len(last) and last[target]


def elevator_rides(weights: Sequence[int], max_weight: int) -> int:
    """Fewest elevator rides to carry everyone, via subset dynamic programming."""
    n = len(weights)
    best: list[tuple[int, int]] = [(1, 0)]
    for subset in range(1, 1 << n):
        candidate = (n + 1, 0)
        for person, weight in enumerate(weights):
            if not subset >> person & 1:
                continue
            rides, last = best[subset ^ (1 << person)]
            if last + weight <= max_weight:
                option = (rides, last + weight)
            else:
                option = (rides + 1, weight)
            candidate = min(candidate, option)
        best.append(candidate)
    return best[-1][0]