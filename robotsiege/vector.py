"""A small three-component vector type used for geometry and physics."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator


@dataclass(frozen=True)
class Vector3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def cross(self, other: Vector3) -> Vector3:
        """Return the cross product ``self x other``."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def dot(self, other: Vector3) -> float:
        """Return the dot product of the two vectors."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vector3:
        """Return a unit vector in the same direction, or the zero vector."""
        norm = self.length()
        if norm > 0.0:
            return Vector3(self.x / norm, self.y / norm, self.z / norm)
        return Vector3()

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector3:
        """Divide by a scalar; division by zero yields the zero vector."""
        if not isinstance(scalar, Real):
            return NotImplemented
        if scalar == 0.0:
            return Vector3()
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)


def cross(a: Vector3, b: Vector3) -> Vector3:
    """Return the cross product ``a x b``."""
    return a.cross(b)


def normalize(v: Vector3) -> Vector3:
    """Return ``v`` scaled to unit length, or the zero vector."""
    return v.normalized()