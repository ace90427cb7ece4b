"""Planar vectors and the linear maps between QR and XY space."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

SQRT3 = math.sqrt(3.0)
# One sixth of a full rotation, in radians.
SEXTANT = math.pi / 3.0


@dataclass(frozen=True, slots=True)
class Vec2:
    """Immutable two-component float vector.

    Used both for Cartesian ``(x, y)`` positions and for fractional
    ``(q, r)`` vectors; the caller decides which space a value lives in.
    """

    x: float
    y: float

    @classmethod
    def of(cls, value: Vec2 | Sequence[float]) -> Vec2:
        """Coerce a ``Vec2`` or an ``(x, y)`` pair into a ``Vec2``."""

        if isinstance(value, Vec2):
            return value
        if isinstance(value, Sequence) and not isinstance(value, str | bytes | bytearray):
            if len(value) != 2:
                raise ValueError("vector must have exactly two components")
            return cls(float(value[0]), float(value[1]))
        raise TypeError("vector must be a Vec2 or an (x, y) pair")

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vec2:
        return Vec2(scalar * self.x, scalar * self.y)

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vec2) -> float:
        """Z component of the 3D cross product of two planar vectors."""

        return self.x * other.y - self.y * other.x

    @property
    def sqr_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y


# Bases for QR -> XY (hex side length is one unit, y axis up).
Q_XY = Vec2(SQRT3, 0.0)
R_XY = Vec2(SQRT3 / 2.0, 1.5)
# Bases for XY -> QR.
X_QR = Vec2(SQRT3 / 3.0, 0.0)
Y_QR = Vec2(-1.0 / 3.0, 2.0 / 3.0)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero.

    Python's built-in ``round`` rounds ties to even, which would make
    ``2.5`` and ``3.5`` snap in different directions.
    """

    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return -whole if value < 0 else whole


def vector_xy_to_qr(xy: Vec2 | Sequence[float]) -> Vec2:
    v = Vec2.of(xy)
    return v.x * X_QR + v.y * Y_QR


def vector_qr_to_xy(qr: Vec2 | Sequence[float]) -> Vec2:
    v = Vec2.of(qr)
    return v.x * Q_XY + v.y * R_XY


__all__ = [
    "Q_XY",
    "R_XY",
    "SEXTANT",
    "SQRT3",
    "Vec2",
    "X_QR",
    "Y_QR",
    "round_half_away",
    "vector_qr_to_xy",
    "vector_xy_to_qr",
]
