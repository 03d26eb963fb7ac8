"""Immutable three-component vectors and the usual vector algebra."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator


@dataclass(frozen=True, slots=True)
class Vector3D:
    """A point or direction in three-dimensional space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __pos__(self) -> Vector3D:
        return self

    def __neg__(self) -> Vector3D:
        return Vector3D(-self.x, -self.y, -self.z)

    def __add__(self, other: object) -> Vector3D:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> Vector3D:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: object) -> Vector3D:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector3D(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> Vector3D:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector3D(self.x / scalar, self.y / scalar, self.z / scalar)

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.squared_length())

    def squared_length(self) -> float:
        """Square of the Euclidean length."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalized(self) -> Vector3D:
        """Vector of unit length in the same direction.

        Raises ZeroDivisionError for the zero vector.
        """
        return self / self.length()


def unit_vector(v: Vector3D) -> Vector3D:
    """Return *v* scaled to unit length."""
    return v / v.length()


def cross_product(v1: Vector3D, v2: Vector3D) -> Vector3D:
    """Cross product v1 x v2."""
    return Vector3D(
        v1.y * v2.z - v1.z * v2.y,
        v1.z * v2.x - v1.x * v2.z,
        v1.x * v2.y - v1.y * v2.x,
    )


def dot_product(v1: Vector3D, v2: Vector3D) -> float:
    """Scalar product of two vectors."""
    return v1.x * v2.x + v1.y * v2.y + v1.z * v2.z


def triple_product(v1: Vector3D, v2: Vector3D, v3: Vector3D) -> float:
    """Scalar triple product (v1 x v2) . v3."""
    return dot_product(cross_product(v1, v2), v3)