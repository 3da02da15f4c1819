"""Warm-up contest problems: relay solving, order matching, hulls and more."""

from __future__ import annotations

import math
import struct
from bisect import bisect_left
from collections.abc import Iterable, Sequence

_TIME_LIMIT = 280
_MAX_PROBLEMS = 14
_SOLVERS = 3
_BUY = "buy"

Point = tuple[float, float]


def _single(value: float) -> float:
    """Round a float to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def max_problems(times: Sequence[Sequence[int]]) -> int:
    """Most problems three solvers finish within 280 minutes, taking turns.

    ``times[k][p]`` is how long solver ``k`` needs for problem ``p``. Problems
    are solved one after another and no solver takes two in a row.
    """
    if len(times) != _SOLVERS:
        raise ValueError("times are needed for exactly three solvers")
    count = len(times[0])
    if any(len(row) != count for row in times):
        raise ValueError("every solver needs a time for every problem")
    if count > _MAX_PROBLEMS:
        raise ValueError(f"at most {_MAX_PROBLEMS} problems are supported")
    if any(t < 0 for row in times for t in row):
        raise ValueError("times must not be negative")

    # A state is (set of solved problems, last solver); 0 means nobody yet.
    frontier: dict[tuple[int, int], int] = {(0, 0): 0}
    levels = 0
    while frontier:
        following: dict[tuple[int, int], int] = {}
        for (solved, last), elapsed in frontier.items():
            for problem in range(count):
                bit = 1 << problem
                if solved & bit:
                    continue
                for solver in range(1, _SOLVERS + 1):
                    if solver == last:
                        continue
                    finish = elapsed + times[solver - 1][problem]
                    key = (solved | bit, solver)
                    known = following.get(key)
                    if known is None:
                        if finish <= _TIME_LIMIT:
                            following[key] = finish
                    elif finish < known:
                        following[key] = finish
        if following:
            levels += 1
        frontier = following
    return levels


def stock_matches(orders: Iterable[tuple[str, str, float]]) -> list[tuple[str, list[str]]]:
    """For each ``(user, side, price)`` order, the users it can trade with.

    A side of ``"buy"`` is a bid; anything else is an offer. A bid matches
    offers at or below its price, an offer matches bids at or above it.
    """
    book = [(user, side == _BUY, price) for user, side, price in orders]
    result = []
    for position, (user, buying, price) in enumerate(book):
        partners = [
            other
            for other_position, (other, other_buying, other_price) in enumerate(book)
            if other_position != position
            and buying != other_buying
            and (price >= other_price if buying else price <= other_price)
        ]
        result.append((user, partners))
    return result


def _turns_left(a: Point, b: Point, c: Point) -> bool:
    return (b[0] - a[0]) * (c[1] - b[1]) - (b[1] - a[1]) * (c[0] - b[0]) > 0


def convex_hull(points: Iterable[Point]) -> list[Point]:
    """Corners of the convex hull, counter-clockwise from the lowest point.

    Points lying on an edge are left out.
    """
    ordered = sorted(points, key=lambda p: (p[1], p[0]))
    if not ordered:
        return []
    stack = [ordered[0]]
    i = 1
    while i < len(ordered):
        if len(stack) == 1 or _turns_left(stack[-2], stack[-1], ordered[i]):
            stack.append(ordered[i])
            i += 1
        else:
            stack.pop()
    lower = len(stack)
    i = len(ordered) - 2
    while i >= 0:
        if len(stack) == lower or _turns_left(stack[-2], stack[-1], ordered[i]):
            stack.append(ordered[i])
            i -= 1
        else:
            stack.pop()
    return stack[:-1]


def bst_orderings(values: Sequence[int]) -> int:
    """Number of insertion orders giving the same binary search tree.

    Values not below a node go to its right subtree.
    """
    if not values:
        raise ValueError("at least one value is needed")
    total = 1
    pending = [list(values)]
    while pending:
        sequence = pending.pop()
        if len(sequence) <= 1:
            continue
        root, rest = sequence[0], sequence[1:]
        left = [v for v in rest if v < root]
        right = [v for v in rest if v >= root]
        total *= math.comb(len(left) + len(right), len(left))
        pending.append(left)
        pending.append(right)
    return total


def lis_length(values: Iterable[int]) -> int:
    """Length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in values:
        spot = bisect_left(tails, value)
        if spot == len(tails):
            tails.append(value)
        else:
            tails[spot] = value
    return len(tails)


def _trapezoid(x1: float, y1: float, x2: float, y2: float) -> float:
    if x1 == x2 or y1 < 0 or y2 < 0:
        return 0.0
    return _single(_single(_single(y1 + y2) * _single(x2 - x1)) / 2)


def polygon_area(points: Sequence[Point]) -> int:
    """Area of a simple polygon given by its corners, rounded to an integer.

    Fewer than three corners enclose no area.
    """
    corners = [(_single(x), _single(y)) for x, y in points]
    if len(corners) < 3:
        return 0
    low = min(y for _, y in corners)
    shifted = [(x, _single(y - low)) for x, y in corners]
    total = 0.0
    for (x1, y1), (x2, y2) in zip(shifted, shifted[1:] + shifted[:1]):
        total += _trapezoid(x1, y1, x2, y2)
    return math.floor(abs(total) + 0.5)