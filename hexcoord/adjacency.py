from __future__ import annotations

import math
from collections.abc import Iterator

from .conversions import position
from .coords import HexCoord, normalize_index
from .vectors import SEXTANT, SQRT3, Vec2, round_half_away

NEIGHBOR_VECTORS: tuple[HexCoord, ...] = (
    HexCoord(+1, 0),
    HexCoord(0, +1),
    HexCoord(-1, +1),
    HexCoord(-1, 0),
    HexCoord(0, -1),
    HexCoord(+1, -1),
)

# Corner offsets in XY space, starting at the upper right.
CORNER_VECTORS: tuple[Vec2, ...] = (
    Vec2(SQRT3 / 2.0, 0.5),
    Vec2(0.0, 1.0),
    Vec2(-SQRT3 / 2.0, 0.5),
    Vec2(-SQRT3 / 2.0, -0.5),
    Vec2(0.0, -1.0),
    Vec2(SQRT3 / 2.0, -0.5),
)


def _rotated(table: tuple, first: int) -> Iterator:
    first = normalize_index(first, 6)
    for i in range(6):
        yield table[(first + i) % 6]


def neighbor_vector(index: int) -> HexCoord:
    return NEIGHBOR_VECTORS[normalize_index(index, 6)]


def neighbor_vectors(first: int = 0) -> Iterator[HexCoord]:
    return _rotated(NEIGHBOR_VECTORS, first)


def neighbor(h: HexCoord, index: int) -> HexCoord:
    return h + neighbor_vector(index)


def neighbors(h: HexCoord, first: int = 0) -> Iterator[HexCoord]:
    for d in neighbor_vectors(first):
        yield h + d


def corner_vector(index: int) -> Vec2:
    return CORNER_VECTORS[normalize_index(index, 6)]


def corner_vectors(first: int = 0) -> Iterator[Vec2]:
    return _rotated(CORNER_VECTORS, first)


def corner(h: HexCoord, index: int) -> Vec2:
    return corner_vector(index) + position(h)


def corners(h: HexCoord, first: int = 0) -> Iterator[Vec2]:
    pos = position(h)
    for v in corner_vectors(first):
        yield v + pos


def angle_to_neighbor_index(angle: float) -> int:
    """Neighbor of the origin through which a polar angle passes."""

    return round_half_away(angle / SEXTANT)


def neighbor_index_to_angle(index: int) -> float:
    return index * SEXTANT


def angle_to_corner_index(angle: float) -> int:
    return math.floor(angle / SEXTANT)


def corner_index_to_angle(index: int) -> float:
    return (index + 0.5) * SEXTANT
