"""Search, counting and dynamic-programming puzzles."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_MODULUS = 2006
_SUBMATRIX_FLOOR = 100 * 100 * (-127)
_DIGITS = "0123456789abcdef"

Tile = tuple[int, int, int, int]


def balloon_winner(a: int, b: int) -> int:
    """Score declared the winner of a balloon-crashing dispute.

    The higher claim wins unless the lower claim is valid and the two
    claims cannot both be made from distinct balloons numbered up to 100.
    """
    if a < 1 or b < 1:
        raise ValueError("scores must be positive")
    low, high = sorted((a, b))
    found_both = False
    found_low = False
    seen: set[tuple[int, int, int]] = set()

    def search(m: int, n: int, p: int) -> None:
        nonlocal found_both, found_low
        state = (m, n, p)
        if state in seen:
            return
        seen.add(state)
        if m == 1 and n == 1:
            found_both = True
        if m == 1:
            found_low = True
        if p == 1 or found_both:
            return
        if m % p == 0:
            search(m // p, n, p - 1)
        if n % p == 0:
            search(m, n // p, p - 1)
        search(m, n, p - 1)

    search(low, high, min(100, low))
    return high if found_both or not found_low else low


def tetravex_possible(n: int, tiles: Iterable[Sequence[int]]) -> bool:
    """Whether the tiles fit an n by n square with matching edges.

    Each tile is ``(top, right, bottom, left)``.
    """
    if n < 1:
        raise ValueError("the board needs at least one cell")
    counts: dict[Tile, int] = {}
    total = 0
    for tile in tiles:
        if len(tile) != 4:
            raise ValueError("a tile has exactly four edges")
        key = (tile[0], tile[1], tile[2], tile[3])
        counts[key] = counts.get(key, 0) + 1
        total += 1
    if total != n * n:
        raise ValueError(f"{n * n} tiles are needed, got {total}")

    kinds = list(counts)
    remaining = [counts[kind] for kind in kinds]
    placed: list[Tile] = []
    last = n * n - 1

    def fill(x: int) -> bool:
        for idx, tile in enumerate(kinds):
            if not remaining[idx]:
                continue
            if x % n and tile[3] != placed[x - 1][1]:
                continue
            if x >= n and tile[0] != placed[x - n][2]:
                continue
            remaining[idx] -= 1
            placed.append(tile)
            if x == last or fill(x + 1):
                return True
            placed.pop()
            remaining[idx] += 1
        return False

    return fill(0)


def game_scores(a: Sequence[int], b: Sequence[int]) -> tuple[int, int]:
    """Points of players A and B in a game of Undercut."""
    if len(a) != len(b):
        raise ValueError("both players must play the same number of rounds")
    score_a = score_b = 0
    for x, y in zip(a, b):
        if x == y:
            continue
        if abs(x - y) == 1:
            if x > y:
                score_b += 6 if (x == 2 and y == 1) else x + y
            else:
                score_a += 6 if (y == 2 and x == 1) else x + y
        elif x > y:
            score_a += x
        else:
            score_b += y
    return score_a, score_b


def max_submatrix(grid: Sequence[Sequence[int]]) -> int:
    """Largest sum of any rectangular block of the grid."""
    if not grid or not grid[0]:
        raise ValueError("the grid must not be empty")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("all rows must have the same length")

    prefix = [[0] * (width + 1)]
    for row in grid:
        above = prefix[-1]
        line = [0]
        for j, value in enumerate(row):
            line.append(line[j] + above[j + 1] - above[j] + value)
        prefix.append(line)

    height = len(grid)
    best = _SUBMATRIX_FLOOR
    for top in range(height):
        for left in range(width):
            for bottom in range(top + 1, height + 1):
                for right in range(left + 1, width + 1):
                    block = (
                        prefix[bottom][right]
                        - prefix[top][right]
                        - prefix[bottom][left]
                        + prefix[top][left]
                    )
                    best = max(best, block)
    return best


def _digits(n: int, base: int) -> str:
    digits = []
    while n >= base:
        n, rest = divmod(n, base)
        digits.append(_DIGITS[rest])
    digits.append(_DIGITS[n])
    return "".join(reversed(digits))


def palindrome_bases(n: int) -> list[int]:
    """Bases from 2 to 16 in which ``n`` reads the same both ways."""
    if n < 0:
        raise ValueError("the number must not be negative")
    return [base for base in range(2, 17) if (text := _digits(n, base)) == text[::-1]]


def knapsack(items: Iterable[tuple[int, int]], capacity: int) -> int:
    """Best total value of ``(size, value)`` items that fit in the capacity."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    best = [0] * (capacity + 1)
    for size, value in items:
        if size < 0:
            raise ValueError("item sizes must not be negative")
        for j in range(capacity, size - 1, -1):
            best[j] = max(best[j], best[j - size] + value)
    return best[capacity]


def max_times_power(values: Sequence[int]) -> int:
    """Largest value times two to the power of ``len(values) - 1``, modulo 2006."""
    if not values:
        raise ValueError("at least one value is needed")
    return pow(2, len(values) - 1, _MODULUS) * max(values) % _MODULUS