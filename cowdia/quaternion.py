"""Quaternions built on a vector part and a scalar part."""

from __future__ import annotations

import math
from numbers import Real

from cowdia.vector import Vector3


class Quaternion:
    """A quaternion ``x*i + y*j + z*k + w``."""

    __slots__ = ("_vector", "_w")

    def __init__(
        self, x: float = 0.0, y: float = 0.0, z: float = 0.0, w: float = 0.0
    ) -> None:
        self._vector = Vector3(x, y, z)
        self._w = float(w)

    @classmethod
    def identity(cls) -> Quaternion:
        """Return the identity quaternion."""
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def euler(cls, x: float, y: float, z: float) -> Quaternion:
        """Return the quaternion for the Euler angles ``x``, ``y``, ``z`` (radians)."""
        cosx, sinx = math.cos(x / 2.0), math.sin(x / 2.0)
        cosy, siny = math.cos(y / 2.0), math.sin(y / 2.0)
        cosz, sinz = math.cos(z / 2.0), math.sin(z / 2.0)

        return cls(
            sinx * cosy * cosz - cosx * siny * sinz,
            cosx * siny * cosz + sinx * cosy * sinz,
            cosx * cosy * sinz - sinx * siny * cosz,
            cosx * cosy * cosz + sinx * siny * sinz,
        )

    @property
    def vector(self) -> Vector3:
        """The vector part, as a copy."""
        return Vector3(*self._vector)

    @property
    def scalar(self) -> float:
        """The scalar part."""
        return self._w

    def length(self) -> float:
        """Return the norm."""
        vector_length = self._vector.length()
        return math.sqrt(self._w * self._w + vector_length * vector_length)

    def dot(self, other: Quaternion) -> float:
        """Return the four-component inner product."""
        return self._w * other._w + self._vector.dot(other._vector)

    def __add__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        result = self._copy()
        result += other
        return result

    def __sub__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        result = self._copy()
        result -= other
        return result

    def __mul__(self, other: Quaternion | float) -> Quaternion:
        if not (isinstance(other, Quaternion) or _is_scalar(other)):
            return NotImplemented
        result = self._copy()
        result *= other
        return result

    def __iadd__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        self._vector += other._vector
        self._w += other._w
        return self

    def __isub__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        self._vector -= other._vector
        self._w -= other._w
        return self

    def __imul__(self, other: Quaternion | float) -> Quaternion:
        if isinstance(other, Quaternion):
            vec_dot = self._vector.dot(other._vector)
            vec_cross = self._vector.cross(other._vector)
            self._vector = self._vector * other._w + other._vector * self._w + vec_cross
            self._w = self._w * other._w - vec_dot
            return self
        if _is_scalar(other):
            self._vector *= other
            self._w *= other
            return self
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return self._vector == other._vector and self._w == other._w

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self):
        yield from self._vector
        yield self._w

    def __repr__(self) -> str:
        x, y, z = self._vector
        return f"Quaternion({x!r}, {y!r}, {z!r}, {self._w!r})"

    def _copy(self) -> Quaternion:
        x, y, z = self._vector
        return Quaternion(x, y, z, self._w)


def _is_scalar(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)