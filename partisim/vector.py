"""Two-dimensional vector type and the small set of vector helpers used by the simulation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, TypeVar

_EPSILON = 1e-8

T = TypeVar("T", int, float)


@dataclass(frozen=True, slots=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


def rotate(v: Vec2, angle: float) -> Vec2:
    """Rotate ``v`` counter-clockwise by ``angle`` radians."""
    s = math.sin(angle)
    c = math.cos(angle)
    return Vec2(v.x * c - v.y * s, v.x * s + v.y * c)


def length(v: Vec2) -> float:
    """Return the Euclidean length of ``v``."""
    return math.sqrt(v.x * v.x + v.y * v.y)


def normalize(v: Vec2) -> Vec2:
    """Return ``v`` scaled to unit length, or the zero vector if ``v`` is (nearly) zero."""
    magnitude = length(v)
    if magnitude < _EPSILON:
        return Vec2(0.0, 0.0)
    return Vec2(v.x / magnitude, v.y / magnitude)


def dot(a: Vec2, b: Vec2) -> float:
    """Return the dot product of ``a`` and ``b``."""
    return a.x * b.x + a.y * b.y


def clamp(value: T, minimum: T, maximum: T) -> T:
    """Limit ``value`` to the closed range [minimum, maximum]."""
    return max(minimum, min(value, maximum))