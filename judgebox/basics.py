"""Short exercises: arithmetic, counting and simple greedy or DP problems."""

from __future__ import annotations

import math
import re
import struct
from collections.abc import Iterable, Sequence


def _f32(value: float) -> float:
    """Round a float to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _overhang_table(size: int = 300) -> tuple[float, ...]:
    table = [0.5]
    for i in range(1, size):
        table.append(_f32(_f32(1 / float(i + 2)) + table[-1]))
    return tuple(table)


_OVERHANG = _overhang_table()


def cards_needed(length: float) -> int:
    """Fewest cards stacked over a table edge to reach the given overhang."""
    target = _f32(length)
    if target > _OVERHANG[-1]:
        raise ValueError(f"overhang {length} needs more than {len(_OVERHANG)} cards")
    return next(i for i, reach in enumerate(_OVERHANG) if not target > reach) + 1


def monthly_average(balances: Sequence[float]) -> float:
    """Average of twelve monthly balances, kept in single precision."""
    if len(balances) != 12:
        raise ValueError("exactly twelve balances are needed")
    total = 0.0
    for balance in balances:
        total = _f32(total + _f32(balance))
    return _f32(total / 12)


def erosion_year(x: float, y: float) -> int:
    """Year in which a semicircle eroding 50 square miles a year reaches (x, y)."""
    x, y = _f32(x), _f32(y)
    radius = _f32(math.sqrt(x * x + y * y))
    area = _f32(math.acos(-1) * radius * radius / 2)
    return math.ceil(area / 50)


def rc_voltages(vs: float, r: float, c: float, frequencies: Iterable[float]) -> list[float]:
    """Amplitude across the resistor of an RC circuit for each angular frequency."""
    result = []
    for w in frequencies:
        reactance = 1 / (w * c)
        impedance = math.sqrt(reactance * reactance + r * r)
        result.append(vs * r / impedance)
    return result


def balanced_game(bits: Sequence[int]) -> bool:
    """Whether the flip game on these bits can end with equal scores."""
    if len(bits) % 2 == 1:
        return True
    even = sum(1 for bit in bits[0::2] if bit == 1)
    odd = sum(1 for bit in bits[1::2] if bit == 1)
    return abs(even - odd) <= 1


def tex_quotes(text: str) -> str:
    """Replace double quotes alternately with ``opening`` and closing'' marks."""
    pieces = []
    opening = True
    for char in text:
        if char == '"':
            pieces.append("``" if opening else "''")
            opening = not opening
        else:
            pieces.append(char)
    return "".join(pieces)


def flower_arrangement(values: Sequence[Sequence[int]]) -> int:
    """Best aesthetic value placing flowers in order into vases.

    ``values[i][j]`` is the value of flower ``i`` in vase ``j``.
    """
    if not values:
        raise ValueError("at least one flower is needed")
    vases = len(values[0])
    if any(len(row) != vases for row in values):
        raise ValueError("every flower needs a value for every vase")
    if vases == 0:
        raise ValueError("at least one vase is needed")

    best = [0] * (vases + 1)
    best[1] = values[0][0]
    for j in range(2, vases + 1):
        best[j] = max(best[j - 1], values[0][j - 1])
    for row in values[1:]:
        for j in range(vases, 0, -1):
            best[j] = max(best[j], best[j - 1] + row[j - 1])
    return best[vases]


def wooden_sticks(sticks: Iterable[tuple[int, int]]) -> int:
    """Minimum setup count to process sticks given as ``(length, weight)`` pairs."""
    ordered = sorted(sticks)
    if any(length < 1 or weight < 1 for length, weight in ordered):
        raise ValueError("lengths and weights must be positive")
    used = [False] * len(ordered)
    left = len(ordered)
    setups = 0
    while left > 0:
        last_length, last_weight = 1, 1
        setups += 1
        for position, (length, weight) in enumerate(ordered):
            if not used[position] and weight >= last_weight and length >= last_length:
                used[position] = True
                last_length, last_weight = length, weight
                left -= 1
    return setups


_WORD = re.compile(r"[A-Za-z]+")


def worst_excuses(keywords: Iterable[str], excuses: Sequence[str]) -> list[str]:
    """Excuses that mention keywords the most times, in their original order."""
    wanted = set(keywords)
    counts = [
        sum(1 for word in _WORD.findall(excuse) if word.lower() in wanted)
        for excuse in excuses
    ]
    top = max([0, *counts])
    return [excuse for excuse, count in zip(excuses, counts) if count == top]