"""Small dense matrices with arithmetic, minors and determinants."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_MAX_SIZE = 8


class Matrix:
    """An immutable matrix of at most 8 rows and 8 columns."""

    def __init__(self, rows: Iterable[Sequence[float]]) -> None:
        data = tuple(tuple(row) for row in rows)
        width = len(data[0]) if data else 0
        if any(len(row) != width for row in data):
            raise ValueError("all rows must have the same length")
        if len(data) > _MAX_SIZE or width > _MAX_SIZE:
            raise ValueError(f"matrices are limited to {_MAX_SIZE} by {_MAX_SIZE}")
        self._rows = data
        self._width = width

    @property
    def rows(self) -> tuple[tuple[float, ...], ...]:
        return self._rows

    @property
    def shape(self) -> tuple[int, int]:
        return len(self._rows), self._width

    def is_square(self) -> bool:
        height, width = self.shape
        return height == width

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._rows == other._rows

    def __hash__(self) -> int:
        return hash((self.shape, self._rows))

    def __repr__(self) -> str:
        return f"Matrix({[list(row) for row in self._rows]!r})"

    def _require_same_shape(self, other: Matrix) -> None:
        if self.shape != other.shape:
            raise ValueError(f"shapes {self.shape} and {other.shape} differ")

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_shape(other)
        return Matrix(
            [a + b for a, b in zip(mine, theirs)]
            for mine, theirs in zip(self._rows, other._rows)
        )

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_shape(other)
        return Matrix(
            [a - b for a, b in zip(mine, theirs)]
            for mine, theirs in zip(self._rows, other._rows)
        )

    def __mul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._width != len(other._rows):
            raise ValueError(f"cannot multiply {self.shape} by {other.shape}")
        columns = list(zip(*other._rows)) if other._rows else []
        if not columns:
            return Matrix([] for _ in self._rows)
        return Matrix(
            [sum(a * b for a, b in zip(row, column)) for column in columns]
            for row in self._rows
        )

    def minor(self, row: int, col: int) -> Matrix:
        """The matrix left after removing one row and one column."""
        height, width = self.shape
        if not (0 <= row < height and 0 <= col < width):
            raise IndexError(f"element ({row}, {col}) is outside {self.shape}")
        return Matrix(
            [value for j, value in enumerate(line) if j != col]
            for i, line in enumerate(self._rows)
            if i != row
        )

    def determinant(self) -> float:
        """Determinant by cofactor expansion along the first row."""
        if not self.is_square():
            raise ValueError("only a square matrix has a determinant")
        size = len(self._rows)
        if size == 0:
            return 0
        if size == 1:
            return self._rows[0][0]
        if size == 2:
            (a, b), (c, d) = self._rows
            return a * d - b * c
        total = 0
        sign = 1
        for col, value in enumerate(self._rows[0]):
            total += sign * value * self.minor(0, col).determinant()
            sign = -sign
        return total