"""Command-line front end that solves problems from judge-style text input."""

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence
from typing import Optional

from cpalgos.cses.dynamic import book_shop
from cpalgos.cses.graphs import (
    building_roads,
    counting_rooms,
    labyrinth,
    road_construction,
)
from cpalgos.cses.introductory import longest_repetition
from cpalgos.cses.sorting import towers


class _Input:
    """Whitespace-separated tokens read one at a time."""

    def __init__(self, text: str) -> None:
        self._tokens: Iterator[str] = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def integer(self) -> int:
        return _to_int(self.word())

    def integers(self, count: int) -> list[int]:
        return [self.integer() for _ in range(count)]

    def rest(self) -> list[str]:
        return list(self._tokens)


def _to_int(token: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"expected an integer, got {token!r}") from None


def _read_pairs(data: _Input, n: int, m: int) -> list[tuple[int, int]]:
    pairs = []
    for _ in range(m):
        a, b = data.integers(2)
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"node out of range 1..{n}: {a} {b}")
        pairs.append((a, b))
    return pairs


def _repetitions(text: str) -> str:
    return str(longest_repetition(text))


def _towers(text: str) -> str:
    data = _Input(text)
    data.integer()
    return str(towers(_to_int(token) for token in data.rest()))


def _book_shop(text: str) -> str:
    data = _Input(text)
    n, budget = data.integers(2)
    costs = data.integers(n)
    pages = data.integers(n)
    return str(book_shop(costs, pages, budget))


def _counting_rooms(text: str) -> str:
    data = _Input(text)
    n, m = data.integers(2)
    cells = "".join(data.rest())
    if len(cells) < n * m:
        raise ValueError("unexpected end of input")
    rows = [cells[r * m : (r + 1) * m] for r in range(n)]
    return str(counting_rooms(rows))


def _labyrinth(text: str) -> str:
    data = _Input(text)
    n, _ = data.integers(2)
    rows = [data.word() for _ in range(n)]
    for symbol in "AB":
        if not any(symbol in row for row in rows):
            raise ValueError(f"grid has no {symbol!r} cell")
    try:
        path = labyrinth(rows)
    except ValueError:
        return "NO"
    return f"YES\n{len(path)}\n{path}"


def _building_roads(text: str) -> str:
    data = _Input(text)
    n, m = data.integers(2)
    new_roads = building_roads(n, _read_pairs(data, n, m))
    lines = [str(len(new_roads))]
    lines.extend(f"{a} {b}" for a, b in new_roads)
    return "\n".join(lines)


def _road_construction(text: str) -> str:
    data = _Input(text)
    n, m = data.integers(2)
    states = road_construction(n, _read_pairs(data, n, m))
    return "\n".join(f"{count} {largest}" for count, largest in states)


_SOLVERS: dict[str, Callable[[str], str]] = {
    "repetitions": _repetitions,
    "towers": _towers,
    "book-shop": _book_shop,
    "counting-rooms": _counting_rooms,
    "labyrinth": _labyrinth,
    "building-roads": _building_roads,
    "road-construction": _road_construction,
}

_IDS: dict[str, str] = {
    "1069": "repetitions",
    "1073": "towers",
    "1158": "book-shop",
    "1192": "counting-rooms",
    "1193": "labyrinth",
    "1666": "building-roads",
    "1676": "road-construction",
}


def solve(problem: str, text: str) -> str:
    """Solve a problem, given by name or number, from its input text.

    Returns the answer text without a trailing newline. Raises ValueError
    for an unknown problem or malformed input.
    """
    name = _IDS.get(problem, problem)
    try:
        solver = _SOLVERS[name]
    except KeyError:
        raise ValueError(f"unknown problem {problem!r}") from None
    return solver(text)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a problem's input from a file or standard input and print the answer."""
    parser = argparse.ArgumentParser(
        prog="cses", description="Solve a problem from judge-style input."
    )
    parser.add_argument(
        "problem", choices=sorted(_SOLVERS) + sorted(_IDS), help="problem name or number"
    )
    parser.add_argument("input", nargs="?", help="input file (default: standard input)")
    args = parser.parse_args(argv)

    try:
        if args.input:
            with open(args.input, encoding="utf-8") as handle:
                text = handle.read()
        else:
            text = sys.stdin.read()
        answer = solve(args.problem, text)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(answer)
    return 0