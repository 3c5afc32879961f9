"""Dynamic programming problems: books, coins, digits, grids and arrays."""

from collections.abc import Iterable, Sequence

from cpalgos.cses.introductory import MOD
from cpalgos.dp import elevator_rides as _elevator_rides
from cpalgos.dp import knapsack_table


def book_shop(costs: Sequence[int], pages: Sequence[int], budget: int) -> int:
    """Most pages buyable within budget, each book bought at most once."""
    if len(costs) != len(pages):
        raise ValueError("costs and pages must have the same length")
    if budget < 0:
        raise ValueError("budget must be non-negative")
    if any(cost < 0 for cost in costs):
        raise ValueError("costs must be non-negative")
    best = [0] * (budget + 1)
    for cost, page_count in zip(costs, pages):
        for amount in range(budget, max(cost, 1) - 1, -1):
            best[amount] = max(best[amount], best[amount - cost] + page_count)
    return best[budget]


def coin_combinations(coins: Iterable[int], target: int) -> int:
    """Ordered ways to reach target with the coins, modulo 10**9 + 7."""
    coin_list = list(coins)
    if any(c <= 0 for c in coin_list):
        raise ValueError("coin values must be positive")
    if target < 0:
        raise ValueError("target must be non-negative")
    ways = [1] + [0] * target
    for k in range(1, target + 1):
        ways[k] = sum(ways[k - c] for c in coin_list if c <= k) % MOD
    return ways[target]


def removing_digits(n: int) -> int:
    """Steps to reach zero, each time subtracting the largest digit."""
    if n < 0:
        raise ValueError("n must be non-negative")
    steps = 0
    while n:
        n -= int(max(str(n)))
        steps += 1
    return steps


def grid_paths(grid: Sequence[str]) -> int:
    """Right/down paths through '.' cells from corner to corner, modulo 10**9 + 7."""
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("grid rows must have equal length")
    previous = [0] * width
    for r, row in enumerate(grid):
        current: list[int] = []
        for c, cell in enumerate(row):
            if cell != ".":
                current.append(0)
            elif r == 0 and c == 0:
                current.append(1)
            else:
                left = current[c - 1] if c else 0
                current.append((left + previous[c]) % MOD)
        previous = current
    return previous[-1]


def elevator_rides(weights: Iterable[int], limit: int) -> int:
    """Fewest elevator rides with at most limit total weight per ride."""
    return _elevator_rides(list(weights), limit)


def money_sums(coins: Iterable[int]) -> list[int]:
    """All positive sums formable from the coins, ascending."""
    reachable = knapsack_table(coins)[-1]
    return [total for total, ok in enumerate(reachable) if total and ok]


def array_description(values: Sequence[int], m: int) -> int:
    """Arrays over 1..m matching values (0 = unknown) with adjacent gaps at most 1.

    The count is taken modulo 10**9 + 7.
    """
    if not values:
        raise ValueError("values must not be empty")
    if m < 1:
        raise ValueError("m must be positive")
    if any(not 0 <= x <= m for x in values):
        raise ValueError(f"values must lie in 0..{m}")

    first, *rest = values
    previous = [0] * (m + 2)
    if first == 0:
        previous[1 : m + 1] = [1] * m
    else:
        previous[first] = 1
    for x in rest:
        current = [0] * (m + 2)
        for j in range(1, m + 1) if x == 0 else (x,):
            current[j] = (previous[j - 1] + previous[j] + previous[j + 1]) % MOD
        previous = current
    return sum(previous) % MOD