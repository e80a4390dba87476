"""Small dense square matrices of floats."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Iterable, Iterator

DEFAULT_SIZE = 3


@dataclass(frozen=True)
class Matrix:
    """An immutable square matrix stored as a tuple of row tuples."""

    rows: tuple[tuple[float, ...], ...]

    def __init__(self, rows: Iterable[Iterable[float]]) -> None:
        data = tuple(tuple(float(value) for value in row) for row in rows)
        if not data:
            raise ValueError("a matrix needs at least one row")
        if any(len(row) != len(data) for row in data):
            raise ValueError("matrix must be square")
        object.__setattr__(self, "rows", data)

    @classmethod
    def zeros(cls, size: int = DEFAULT_SIZE) -> Matrix:
        """Return a size x size matrix of zeros."""
        return cls.filled(0.0, size)

    @classmethod
    def filled(cls, value: float, size: int = DEFAULT_SIZE) -> Matrix:
        """Return a size x size matrix with every entry set to value."""
        if size < 1:
            raise ValueError("matrix size must be at least 1")
        return cls([[value] * size for _ in range(size)])

    @classmethod
    def identity(cls, size: int = DEFAULT_SIZE) -> Matrix:
        """Return the size x size identity matrix."""
        if size < 1:
            raise ValueError("matrix size must be at least 1")
        return cls(
            [[1.0 if i == j else 0.0 for j in range(size)] for i in range(size)]
        )

    @property
    def size(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[tuple[float, ...]]:
        return iter(self.rows)

    def __getitem__(self, index: int) -> tuple[float, ...]:
        return self.rows[index]

    def _check_size(self, other: Matrix) -> None:
        if other.size != self.size:
            raise ValueError(
                f"size mismatch: {self.size}x{self.size} and {other.size}x{other.size}"
            )

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_size(other)
        return Matrix(
            [a + b for a, b in zip(row, other_row)]
            for row, other_row in zip(self.rows, other.rows)
        )

    def __mul__(self, other: object) -> Matrix:
        """Matrix product with another matrix, or scaling by a number."""
        if isinstance(other, Matrix):
            self._check_size(other)
            columns = list(zip(*other.rows))
            return Matrix(
                [sum(a * b for a, b in zip(row, column)) for column in columns]
                for row in self.rows
            )
        if isinstance(other, Real):
            scalar = float(other)
            return Matrix([value * scalar for value in row] for row in self.rows)
        return NotImplemented

    def __rmul__(self, other: object) -> Matrix:
        if isinstance(other, Real):
            return self * other
        return NotImplemented

    def format(self, label: str) -> str:
        """Render with a size header and bracketed rows."""
        lines = [f"{label} ({self.size}x{self.size}):"]
        for row in self.rows:
            lines.append("[ " + "".join(f"{value:8.4f} " for value in row) + "]")
        return "\n".join(lines) + "\n"

    def format_plain(self, label: str) -> str:
        """Render as a label line, unbracketed rows and a trailing blank line."""
        lines = [f"{label}:"]
        for row in self.rows:
            lines.append("".join(f"{value:8.4f} " for value in row))
        return "\n".join(lines) + "\n\n"