"""Contest problems: wildcard counting, a turning maze, range sums and more."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Sequence

_WILD = "?"
_WALL = "X"
_START = "S"
_FINISH = "F"
_FLAG = "F"

# Row and column change for up, right, down and left.
_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def wildcard_count(pattern: str, number: str) -> int:
    """Count the numbers matching ``pattern`` that are greater than ``number``.

    Each ``?`` in the pattern stands for any digit; both strings have the
    same length.
    """
    if len(pattern) != len(number):
        raise ValueError("pattern and number must have the same length")
    if not number.isdigit() and number:
        raise ValueError(f"{number!r} is not a number")
    if any(ch != _WILD and not ch.isdigit() for ch in pattern):
        raise ValueError(f"{pattern!r} holds characters other than digits and '?'")

    total = 0
    for position, (wild, digit) in enumerate(zip(pattern, number)):
        later_marks = pattern.count(_WILD, position + 1)
        if wild == _WILD:
            total += (9 - int(digit)) * 10**later_marks
            continue
        if wild < digit:
            break
        if wild > digit:
            total += 10**later_marks
            break
    return total


def _locate(rows: Sequence[str], mark: str) -> tuple[int, int]:
    for x, row in enumerate(rows):
        y = row.find(mark)
        if y >= 0:
            return x, y
    raise ValueError(f"the maze has no {mark!r} cell")


def maze_turns(grid: Iterable[str]) -> int | None:
    """Fewest steps from ``S`` to ``F`` when only straight moves and right turns are allowed.

    ``X`` marks a wall; leaving the grid counts as hitting a wall. The first
    step may go in any direction. Returns ``None`` when ``F`` cannot be reached.
    """
    rows = [str(row) for row in grid]
    start = _locate(rows, _START)
    finish = _locate(rows, _FINISH)

    def is_open(x: int, y: int) -> bool:
        return 0 <= x < len(rows) and 0 <= y < len(rows[x]) and rows[x][y] != _WALL

    seen: set[tuple[int, int, int]] = set()
    queue: deque[tuple[int, int, int, int]] = deque()
    for direction, (dx, dy) in enumerate(_STEPS):
        x, y = start[0] + dx, start[1] + dy
        if not is_open(x, y):
            continue
        if (x, y) == finish:
            return 1
        seen.add((x, y, direction))
        queue.append((x, y, direction, 1))

    while queue:
        x, y, direction, distance = queue.popleft()
        for turn in (direction, (direction + 1) % 4):
            dx, dy = _STEPS[turn]
            nx, ny = x + dx, y + dy
            if not is_open(nx, ny) or (nx, ny, turn) in seen:
                continue
            if (nx, ny) == finish:
                return distance + 1
            seen.add((nx, ny, turn))
            queue.append((nx, ny, turn, distance + 1))
    return None


class SumTree:
    """Point updates and inclusive range sums over positions ``0 .. size - 1``."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = size
        self._tree = [0] * (size + 1)

    def __len__(self) -> int:
        return self._size

    def _check(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise IndexError(f"position {index} is outside 0..{self._size - 1}")

    def add(self, index: int, delta: int) -> None:
        """Add ``delta`` to the value at ``index``."""
        self._check(index)
        i = index + 1
        while i <= self._size:
            self._tree[i] += delta
            i += i & -i

    def _prefix(self, count: int) -> int:
        total = 0
        while count > 0:
            total += self._tree[count]
            count -= count & -count
        return total

    def query(self, left: int, right: int) -> int:
        """Sum of the values from ``left`` to ``right`` inclusive."""
        self._check(left)
        self._check(right)
        if left > right:
            raise ValueError("left must not exceed right")
        return self._prefix(right + 1) - self._prefix(left)


def run_commands(
    values: Sequence[int], commands: Iterable[tuple[str, int, int]]
) -> list[int]:
    """Apply set and sum commands to a sequence and collect the sums.

    ``("S", i, v)`` sets position ``i`` to ``v``; ``("M", a, b)`` reports the
    sum of positions ``a`` to ``b``. Positions count from 1; commands whose
    name starts with any other letter are ignored.
    """
    current = list(values)
    tree = SumTree(len(current))
    for index, value in enumerate(current):
        tree.add(index, value)

    results = []
    for name, first, second in commands:
        op = name[:1]
        if op == "S":
            index = first - 1
            tree.add(index, second - current[index])
            current[index] = second
        elif op == "M":
            results.append(tree.query(first - 1, second - 1))
    return results


def minesweeper_ok(board: Sequence[str]) -> bool:
    """Whether every numbered cell matches the count of flags around it.

    ``F`` marks a flag. A board made only of flags is not accepted.
    """
    rows = [str(row) for row in board]
    width = len(rows[0]) if rows else 0
    if any(len(row) != width for row in rows):
        raise ValueError("all rows must have the same length")

    def flag_at(x: int, y: int) -> bool:
        return 0 <= x < len(rows) and 0 <= y < width and rows[x][y] == _FLAG

    flags = 0
    for x, row in enumerate(rows):
        for y, cell in enumerate(row):
            if cell == _FLAG:
                flags += 1
                continue
            around = sum(
                flag_at(x + dx, y + dy)
                for dx in (-1, 0, 1)
                for dy in (-1, 0, 1)
                if dx or dy
            )
            if around != ord(cell) - ord("0"):
                return False
    return flags != len(rows) * width


def common_divisor(rows: Iterable[Sequence[int]]) -> int | None:
    """Largest modulus explaining every row's checksum error, or ``None``.

    Each row holds nine numbers and the checksum claimed for them; the error
    is the distance between their sum and the claim.
    """
    diffs = []
    for row in rows:
        if len(row) != 10:
            raise ValueError("each row needs nine numbers and a checksum")
        diffs.append(abs(sum(row[:9]) - row[9]))

    first, second = (diffs + [0, 0])[:2]
    divisor = math.gcd(first, second)
    for diff in diffs[2:]:
        if divisor <= 1:
            break
        divisor = 0 if diff == 0 else math.gcd(diff, divisor)

    if divisor > 1 and all(diff == divisor for diff in diffs):
        divisor = 0
    return divisor if divisor > 1 else None


def walkovers(rounds: int, absent: Iterable[int]) -> int:
    """Walkovers in a knockout of ``2 ** rounds`` players with some absent.

    Players are numbered from 1. A match where exactly one side turns up is
    a walkover; the winner goes on, and a match with nobody sends nobody on.
    """
    if rounds < 1:
        raise ValueError("at least one round is needed")
    players = 1 << rounds
    missing = set(absent)
    for player in missing:
        if not 1 <= player <= players:
            raise ValueError(f"player {player} is not in the draw")

    present = [number not in missing for number in range(1, players + 1)]
    count = 0
    while len(present) > 1:
        pairs = list(zip(present[0::2], present[1::2]))
        count += sum(1 for a, b in pairs if a != b)
        present = [a or b for a, b in pairs]
    return count