"""A 4x4 float matrix with element-wise and matrix arithmetic."""

from __future__ import annotations

from collections.abc import Iterator
from numbers import Real
from typing import ClassVar

MAT_SIZE = 4


def _is_scalar(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


class Matrix:
    """A 4x4 matrix of floats stored row by row.

    Elements are given in row-major order; missing trailing elements are zero.
    Elements are addressed as ``m[row, column]``.
    """

    size: ClassVar[int] = MAT_SIZE
    __slots__ = ("_rows",)

    def __init__(self, *elements: float) -> None:
        count = MAT_SIZE * MAT_SIZE
        if len(elements) > count:
            raise ValueError(
                f"Matrix takes at most {count} elements, got {len(elements)}"
            )
        values = [float(e) for e in elements]
        values.extend([0.0] * (count - len(values)))
        self._rows = [values[r * MAT_SIZE:(r + 1) * MAT_SIZE] for r in range(MAT_SIZE)]

    @classmethod
    def zero(cls) -> Matrix:
        """Return the zero matrix."""
        return cls()

    @classmethod
    def identity(cls) -> Matrix:
        """Return the identity matrix."""
        return cls._from_rows(
            [1.0 if r == c else 0.0 for c in range(MAT_SIZE)] for r in range(MAT_SIZE)
        )

    def transpose(self) -> Matrix:
        """Return the transposed matrix."""
        return self._from_rows(zip(*self._rows))

    @property
    def T(self) -> Matrix:  # noqa: N802
        """The transposed matrix."""
        return self.transpose()

    def rows(self) -> list[list[float]]:
        """Return the elements as a list of row lists (a copy)."""
        return [list(row) for row in self._rows]

    def __iter__(self) -> Iterator[float]:
        for row in self._rows:
            yield from row

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = self._split_index(index)
        return self._rows[row][col]

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        row, col = self._split_index(index)
        self._rows[row][col] = float(value)

    def __neg__(self) -> Matrix:
        return self._map(lambda a: -a)

    def __add__(self, other: Matrix | float) -> Matrix:
        if isinstance(other, Matrix):
            return self._zip(other, lambda a, b: a + b)
        if _is_scalar(other):
            return self._map(lambda a: a + other)
        return NotImplemented

    def __radd__(self, other: float) -> Matrix:
        if not _is_scalar(other):
            return NotImplemented
        return self._map(lambda a: other + a)

    def __sub__(self, other: Matrix | float) -> Matrix:
        if isinstance(other, Matrix):
            return self._zip(other, lambda a, b: a - b)
        if _is_scalar(other):
            return self._map(lambda a: a - other)
        return NotImplemented

    def __rsub__(self, other: float) -> Matrix:
        if not _is_scalar(other):
            return NotImplemented
        return self._map(lambda a: -a + other)

    def __mul__(self, other: Matrix | float) -> Matrix:
        if isinstance(other, Matrix):
            columns = list(zip(*other._rows))
            return self._from_rows(
                [sum(a * b for a, b in zip(row, col)) for col in columns]
                for row in self._rows
            )
        if _is_scalar(other):
            return self._map(lambda a: a * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Matrix:
        if not _is_scalar(other):
            return NotImplemented
        return self._map(lambda a: a * other)

    def __truediv__(self, other: float) -> Matrix:
        if not _is_scalar(other):
            return NotImplemented
        return self._map(lambda a: a / other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({', '.join(repr(e) for e in self)})"

    @classmethod
    def _from_rows(cls, rows) -> Matrix:
        result = cls.__new__(cls)
        result._rows = [[float(v) for v in row] for row in rows]
        return result

    def _map(self, func) -> Matrix:
        return self._from_rows([func(a) for a in row] for row in self._rows)

    def _zip(self, other: Matrix, func) -> Matrix:
        return self._from_rows(
            [func(a, b) for a, b in zip(ra, rb)]
            for ra, rb in zip(self._rows, other._rows)
        )

    @staticmethod
    def _split_index(index: object) -> tuple[int, int]:
        if not (isinstance(index, tuple) and len(index) == 2):
            raise TypeError("matrix index must be a (row, column) pair")
        row, col = index
        if not (0 <= row < MAT_SIZE and 0 <= col < MAT_SIZE):
            raise IndexError(f"matrix index out of range: {index}")
        return row, col