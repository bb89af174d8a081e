"""Integer 2D vectors with Gaussian-integer arithmetic and Bezier sampling."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

Number = Union[int, float]


@dataclass(frozen=True)
class Vector2:
    """An immutable vector with integer components.

    Vector-by-vector multiplication, division and remainder treat the vector
    as the Gaussian integer ``x + y*i``.
    """

    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", int(self.x))
        object.__setattr__(self, "y", int(self.y))

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Union[Vector2, Number]) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(
                self.x * other.x - self.y * other.y,
                self.y * other.x + self.x * other.y,
            )
        if isinstance(other, (int, float)):
            # Components are truncated toward zero, as integer storage demands.
            return Vector2(int(other * self.x), int(other * self.y))
        return NotImplemented

    def __rmul__(self, other: Number) -> Vector2:
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return Vector2(int(other * self.x), int(other * self.y))
        return NotImplemented

    def __truediv__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        norm = length_squared(other)
        if norm == 0:
            raise ZeroDivisionError("division by the zero vector")
        return Vector2(dv(dot(self, other), norm), dv(cross(self, other), norm))

    def __mod__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self - (self / other) * other


def cross(a: Vector2, b: Vector2) -> int:
    """Return ``a.y*b.x - a.x*b.y``."""
    return a.y * b.x - a.x * b.y


def dot(a: Vector2, b: Vector2) -> int:
    """Return the dot product of two vectors."""
    return a.x * b.x + a.y * b.y


def dv(a: int, b: int) -> int:
    """Divide integers, rounding halves away from zero."""
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    if b < 0:
        a, b = -a, -b
    if a < 0:
        return -((-a + b // 2) // b)
    return (a + b // 2) // b


def length_squared(v: Vector2) -> int:
    """Return the squared length of a vector."""
    return v.x * v.x + v.y * v.y


def dis(v: Vector2) -> int:
    """Return the length of a vector, truncated to an integer."""
    return math.isqrt(length_squared(v))


def gcd(a: Vector2, b: Vector2) -> Vector2:
    """Return a greatest common divisor of two Gaussian integers."""
    while length_squared(b):
        a, b = b, a % b
    return a


def calc_bezier_point(
    t: float, p0: Vector2, p1: Vector2, p2: Vector2, p3: Vector2
) -> Vector2:
    """Sample the cubic Bezier curve through the four control points at ``t``."""
    u = 1 - t
    tt = t * t
    uu = u * u
    uuu = uu * u
    ttt = tt * t

    p = uuu * p0
    p = p + 3 * uu * t * p1
    p = p + 3 * u * tt * p2
    p = p + ttt * p3
    return p