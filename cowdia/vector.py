"""Small fixed-size float vectors with element-wise arithmetic."""

from __future__ import annotations

import math
import operator
from collections.abc import Iterator
from numbers import Real
from typing import ClassVar, TypeVar

_V = TypeVar("_V", bound="VectorBase")


class VectorBase:
    """A vector of floats with a fixed number of components.

    Subclasses fix the dimension through ``dim``; the base class takes its
    dimension from the number of components it is given. Missing trailing
    components default to zero.
    """

    dim: ClassVar[int | None] = None
    __slots__ = ("_components",)

    def __init__(self, *components: float) -> None:
        size = self.dim if self.dim is not None else len(components)
        if len(components) > size:
            raise ValueError(
                f"{type(self).__name__} takes at most {size} components, "
                f"got {len(components)}"
            )
        values = [float(c) for c in components]
        values.extend([0.0] * (size - len(values)))
        self._components = values

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(sum(c * c for c in self._components))

    def dot(self, other: VectorBase) -> float:
        """Return the inner product with ``other``."""
        return sum(a * b for a, b in zip(self._components, self._vector_values(other)))

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[float]:
        return iter(self._components)

    def __getitem__(self, index: int) -> float:
        return self._components[operator.index(index)]

    def __setitem__(self, index: int, value: float) -> None:
        self._components[operator.index(index)] = float(value)

    def __add__(self: _V, other: VectorBase | float) -> _V:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self._with(a + b for a, b in zip(self._components, operand))

    def __sub__(self: _V, other: VectorBase | float) -> _V:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self._with(a - b for a, b in zip(self._components, operand))

    def __mul__(self: _V, value: float) -> _V:
        if not _is_scalar(value):
            return NotImplemented
        return self._with(c * value for c in self._components)

    def __truediv__(self: _V, value: float) -> _V:
        if not _is_scalar(value):
            return NotImplemented
        return self._with(c / value for c in self._components)

    def __iadd__(self: _V, other: VectorBase | float) -> _V:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        self._components = [a + b for a, b in zip(self._components, operand)]
        return self

    def __isub__(self: _V, other: VectorBase | float) -> _V:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        self._components = [a - b for a, b in zip(self._components, operand)]
        return self

    def __imul__(self: _V, value: float) -> _V:
        if not _is_scalar(value):
            return NotImplemented
        self._components = [c * value for c in self._components]
        return self

    def __itruediv__(self: _V, value: float) -> _V:
        if not _is_scalar(value):
            return NotImplemented
        self._components = [c / value for c in self._components]
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VectorBase):
            return NotImplemented
        return self._components == other._components

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        inner = ", ".join(repr(c) for c in self._components)
        return f"{type(self).__name__}({inner})"

    def _with(self: _V, values) -> _V:
        return type(self)(*values)

    def _vector_values(self, other: VectorBase) -> list[float]:
        if len(other) != len(self):
            raise ValueError(
                f"dimension mismatch: {len(self)} and {len(other)}"
            )
        return other._components

    def _operand(self, other: object) -> list[float] | None:
        if isinstance(other, VectorBase):
            return self._vector_values(other)
        if _is_scalar(other):
            return [float(other)] * len(self)  # type: ignore[arg-type]
        return None


def _is_scalar(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


class Vector2(VectorBase):
    """Two-component vector."""

    dim = 2
    __slots__ = ()

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        super().__init__(x, y)

    @property
    def x(self) -> float:
        return self._components[0]

    @x.setter
    def x(self, value: float) -> None:
        self._components[0] = float(value)

    @property
    def y(self) -> float:
        return self._components[1]

    @y.setter
    def y(self, value: float) -> None:
        self._components[1] = float(value)


class Vector3(VectorBase):
    """Three-component vector."""

    dim = 3
    __slots__ = ()

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        super().__init__(x, y, z)

    def cross(self, other: Vector3) -> Vector3:
        """Return the cross product with ``other``."""
        ax, ay, az = self._components
        bx, by, bz = self._vector_values(other)
        return Vector3(ay * bz - az * by, az * bx - ax * bz, ax * by - ay * bx)

    @property
    def x(self) -> float:
        return self._components[0]

    @x.setter
    def x(self, value: float) -> None:
        self._components[0] = float(value)

    @property
    def y(self) -> float:
        return self._components[1]

    @y.setter
    def y(self, value: float) -> None:
        self._components[1] = float(value)

    @property
    def z(self) -> float:
        return self._components[2]

    @z.setter
    def z(self, value: float) -> None:
        self._components[2] = float(value)


class Vector4(VectorBase):
    """Four-component vector."""

    dim = 4
    __slots__ = ()

    def __init__(
        self, x: float = 0.0, y: float = 0.0, z: float = 0.0, w: float = 0.0
    ) -> None:
        super().__init__(x, y, z, w)

    @property
    def x(self) -> float:
        return self._components[0]

    @x.setter
    def x(self, value: float) -> None:
        self._components[0] = float(value)

    @property
    def y(self) -> float:
        return self._components[1]

    @y.setter
    def y(self, value: float) -> None:
        self._components[1] = float(value)

    @property
    def z(self) -> float:
        return self._components[2]

    @z.setter
    def z(self, value: float) -> None:
        self._components[2] = float(value)

    @property
    def w(self) -> float:
        return self._components[3]

    @w.setter
    def w(self, value: float) -> None:
        self._components[3] = float(value)