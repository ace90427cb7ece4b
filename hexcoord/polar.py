"""Ring and angular geometry around the origin.

Every function here splits the q-r plane into sextants by the signs of ``q``
and ``r``. Hexes lying on a sextant edge belong to exactly one side, and the
comparisons below decide which; they are deliberately not re-derived from
trigonometry.
"""

from __future__ import annotations

import math

from .adjacency import corner
from .conversions import position
from .coords import ORIGIN, HexCoord, normalize_index
from .vectors import Vec2, round_half_away


def axial_length(h: HexCoord) -> int:
    """Maximum absolute cubic coordinate: the ring radius, or distance from 0,0."""

    return max(abs(h.q), abs(h.r), abs(h.z))


def axial_skew(h: HexCoord) -> int:
    """Minimum absolute cubic coordinate: steps not taken along the major axis."""

    return min(abs(h.q), abs(h.r), abs(h.z))


def polar_angle(h: HexCoord) -> float:
    pos = position(h)
    return math.atan2(pos.y, pos.x)


def corner_polar_angle(h: HexCoord, index: int) -> float:
    """Angle from the center of 0,0 to a corner of ``h``."""

    pos = corner(h, index)
    return math.atan2(pos.y, pos.x)


def polar_index(h: HexCoord) -> int:
    """Counterclockwise position of ``h`` within its ring, starting at ``(n, 0)``."""

    q, r = h.q, h.r
    if q == 0 and r == 0:
        return 0
    if q > 0 and r >= 0:
        return r
    if q <= 0 and r > 0:
        return r - q if -q < r else -3 * q - r
    if q < 0:
        return -4 * (q + r) + q
    return -4 * r + q if -r > q else 6 * q + r


def polar_bounding_corner_index(h: HexCoord, ccw: bool = False) -> int:
    """Index of the clockwise (or counterclockwise) polar bounding corner.

    The two bounding corners are the pair whose polar angles span the widest
    arc as seen from the origin.
    """

    q, r = h.q, h.r
    if q == 0 and r == 0:
        return 0
    if q > 0 and r >= 0:
        if ccw:
            return 1 if q > r else 2
        return 5 if q < r else 4
    if q <= 0 and r > 0:
        if -q < r:
            if ccw:
                return 2 if r > -2 * q else 3
            return 0 if r < -2 * q else 5
        if ccw:
            return 3 if q > -2 * r else 4
        return 1 if q < -2 * r else 0
    if q < 0:
        if ccw:
            return 4 if q < r else 5
        return 2 if q > r else 1
    if -r > q:
        if ccw:
            return 5 if r < -2 * q else 0
        return 3 if r > -2 * q else 2
    if ccw:
        return 0 if q < -2 * r else 1
    return 4 if q > -2 * r else 3


def polar_bounding_angle(h: HexCoord, ccw: bool = False) -> float:
    return corner_polar_angle(h, polar_bounding_corner_index(h, ccw))


def polar_bounding_corner(h: HexCoord, ccw: bool = False) -> Vec2:
    return corner(h, polar_bounding_corner_index(h, ccw))


def half_sextant(h: HexCoord) -> int:
    """Which twelfth of the plane around 0,0 contains ``h``.

    ``corner_sextant`` is ``half_sextant // 2``; away from the origin
    ``neighbor_sextant`` is ``(half_sextant + 1) // 2`` modulo 6.
    """

    q, r = h.q, h.r
    if q > 0 and r >= 0 or q == 0 and r == 0:
        return 0 if q > r else 1
    if q <= 0 and r > 0:
        if -q < r:
            return 2 if r > -2 * q else 3
        return 4 if q > -2 * r else 5
    if q < 0:
        return 6 if q < r else 7
    if -r > q:
        return 8 if r < -2 * q else 9
    return 10 if q < -2 * r else 11


def corner_sextant(h: HexCoord) -> int:
    """Corner index of 0,0 closest to the polar vector of ``h``."""

    q, r = h.q, h.r
    if q > 0 and r >= 0 or q == 0 and r == 0:
        return 0
    if q <= 0 and r > 0:
        return 1 if -q < r else 2
    if q < 0:
        return 3
    return 4 if -r > q else 5


def neighbor_sextant(h: HexCoord) -> int:
    """Neighbor index of 0,0 through which the polar vector of ``h`` passes."""

    q, r = h.q, h.r
    if q == 0 and r == 0:
        return 0
    if q > 0 and r >= 0:
        return 1 if q <= r else 0
    if q <= 0 and r > 0:
        if -q <= r:
            return 2 if r <= -2 * q else 1
        return 3 if q <= -2 * r else 2
    if q < 0:
        return 4 if q >= r else 3
    if -r > q:
        return 5 if r >= -2 * q else 4
    return 0 if q >= -2 * r else 5


def at_polar(radius: int, index: int) -> HexCoord:
    """Hex at hexagonal polar coordinates.

    Hexagonal polar coordinates approximate a circle with a hexagonal ring:
    ``radius`` is the ring and ``index`` counts counterclockwise from
    ``(radius, 0)``. A negative radius is treated as positive.
    """

    if radius == 0:
        return ORIGIN
    if radius < 0:
        radius = -radius
    index = normalize_index(index, radius * 6)
    sextant = index // radius
    step = index % radius
    if sextant == 0:
        return HexCoord(radius - step, step)
    if sextant == 1:
        return HexCoord(-step, radius)
    if sextant == 2:
        return HexCoord(-radius, radius - step)
    if sextant == 3:
        return HexCoord(step - radius, -step)
    if sextant == 4:
        return HexCoord(step, -radius)
    return HexCoord(radius, step - radius)


def find_polar_index(radius: int, angle: float) -> int:
    """Polar index at ``radius`` closest to ``angle`` (radians)."""

    if radius == 0:
        return 0
    return round_half_away(angle * radius * 3 / math.pi)
