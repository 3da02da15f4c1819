"""Shortest-path style puzzles solved on small dense graphs."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

_UNREACHABLE = 10000
_EPS = 1e-9
_DIJKSTRA_INF = 1_000_000_000.0

Point = tuple[float, float]


def _cmp(x: float, y: float) -> int:
    """Compare two floats with a small tolerance: -1, 0 or 1."""
    if abs(x - y) < _EPS:
        return 0
    return 1 if x - y > 0 else -1


def best_broker(contacts: Sequence[Sequence[tuple[int, int]]]) -> tuple[int, int] | None:
    """Pick the broker who spreads a rumour to everyone fastest.

    ``contacts[i]`` lists ``(target, minutes)`` pairs for broker ``i + 1``;
    targets are numbered from 1. Returns ``(broker, minutes)`` or ``None``
    when no broker reaches everyone.
    """
    n = len(contacts)
    dist = [[_UNREACHABLE] * n for _ in range(n)]
    reached = [len(own) for own in contacts]
    for row, own in zip(dist, contacts):
        for target, minutes in own:
            if not 1 <= target <= n:
                raise ValueError(f"contact {target} is not a broker")
            row[target - 1] = minutes

    for k, row_k in enumerate(dist):
        for i, row_i in enumerate(dist):
            via = row_i[k]
            for j, through in enumerate(row_k):
                if i != j and via + through < row_i[j]:
                    if row_i[j] == _UNREACHABLE:
                        reached[i] += 1
                    row_i[j] = via + through

    best: tuple[int, int] | None = None
    best_time = _UNREACHABLE
    for i, row in enumerate(dist):
        if reached[i] != n - 1:
            continue
        worst = max([-1, *(d for j, d in enumerate(row) if j != i)])
        if best_time > worst:
            best_time = worst
            best = (i + 1, worst)
    return best


def arbitrage_possible(
    currencies: Sequence[str], rates: Iterable[tuple[str, float, str]]
) -> bool:
    """Tell whether some cycle of exchanges turns one unit into more than one."""
    index: dict[str, int] = {}
    for position, name in enumerate(currencies):
        index.setdefault(name, position)
    n = len(currencies)
    exch = [[0.0] * n for _ in range(n)]
    for source, rate, target in rates:
        try:
            exch[index[source]][index[target]] = rate
        except KeyError as err:
            raise KeyError(f"unknown currency {err.args[0]!r}") from None

    for k, row_k in enumerate(exch):
        for row_i in exch:
            via = row_i[k]
            for j, through in enumerate(row_k):
                product = via * through
                if _cmp(row_i[j], product) == -1:
                    row_i[j] = product

    return any(_cmp(row[i], 1.0) == 1 for i, row in enumerate(exch))


def frog_distance(stones: Sequence[Point]) -> float:
    """Smallest possible longest jump on a path from the first stone to the second."""
    if len(stones) < 2:
        raise ValueError("at least two stones are needed")
    dist = [[math.dist(a, b) for b in stones] for a in stones]
    n = len(stones)
    for k in range(n):
        for i in range(n):
            for j in range(n):
                if _cmp(dist[i][j], dist[i][k]) == 1 and _cmp(dist[i][j], dist[k][j]) == 1:
                    longer = dist[i][k] if _cmp(dist[i][k], dist[k][j]) == 1 else dist[k][j]
                    dist[i][j] = longer
                    dist[j][i] = longer
    return dist[0][1]


def _dijkstra(matrix: Sequence[Sequence[float]], source: int) -> list[float]:
    n = len(matrix)
    best = [_DIJKSTRA_INF] * n
    best[source] = 0.0
    unvisited = set(range(n))
    while unvisited:
        k = min(sorted(unvisited), key=best.__getitem__)
        unvisited.remove(k)
        row = matrix[k]
        for i in unvisited:
            if best[k] + row[i] < best[i]:
                best[i] = best[k] + row[i]
    return best


def subway_minutes(home: Point, school: Point, lines: Iterable[Sequence[Point]]) -> int:
    """Minutes to get from home to school walking at 10 km/h or riding at 40 km/h.

    Coordinates are in metres; each line is the ordered list of its stops.
    """
    points: list[Point] = [home, school]
    rail: set[tuple[int, int]] = set()
    for line in lines:
        for stop_number, stop in enumerate(line):
            points.append(stop)
            if stop_number:
                here = len(points) - 1
                rail.add((here - 1, here))
                rail.add((here, here - 1))

    matrix = [
        [
            math.dist(a, b) / (40 if (i, j) in rail else 10)
            for j, b in enumerate(points)
        ]
        for i, a in enumerate(points)
    ]
    best = _dijkstra(matrix, 0)
    return round(best[1] * 3 / 50)