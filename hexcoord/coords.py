"""Axial hexagon coordinates.

Pointy-topped hexagons addressed by ``(q, r)``. The q axis points right and
the r axis points up-right; the implied cubic axis is ``z = -q - r``. When
converting to and from Cartesian space the side of a hexagon is one unit.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .vectors import Vec2


def normalize_index(index: int, cycle: int = 6) -> int:
    """Fold ``index`` into ``[0, cycle)``; the result takes the sign of ``cycle``."""

    return index % cycle


def is_same_rotation_index(a: int, b: int, cycle: int = 6) -> bool:
    return normalize_index(a - b, cycle) == 0


def _zigzag(value: int) -> int:
    # 0, -1, 1, -2, 2 ... -> 0, 1, 2, 3, 4 ...
    return value << 1 if value >= 0 else ((-value) << 1) - 1


def interleave_hash(q: int, r: int) -> int:
    """Interleave the bits of zig-zag encoded ``q`` and ``r``.

    Bit ``i`` of ``q`` lands on bit ``2i`` and bit ``i`` of ``r`` on
    ``2i + 1``, so distinct coordinates never share a code.
    """

    zq, zr = _zigzag(q), _zigzag(r)
    code = 0
    bit = 0
    while zq or zr:
        code |= (zq & 1) << (2 * bit) | (zr & 1) << (2 * bit + 1)
        zq >>= 1
        zr >>= 1
        bit += 1
    return code


@dataclass(frozen=True, slots=True)
class HexCoord:
    """Immutable hex grid coordinate, doubling as a displacement vector."""

    q: int = 0
    r: int = 0

    # --- Algebra --------------------------------------------------------------

    @property
    def z(self) -> int:
        """Position on the cubic z axis, so that ``q + r + z == 0``."""

        return -self.q - self.r

    @property
    def o(self) -> int:
        """Offset x coordinate, ``q + r/2`` rounded toward negative infinity."""

        return self.q + (self.r >> 1)

    def __add__(self, other: HexCoord) -> HexCoord:
        if not isinstance(other, HexCoord):
            return NotImplemented
        return HexCoord(self.q + other.q, self.r + other.r)

    def __sub__(self, other: HexCoord) -> HexCoord:
        if not isinstance(other, HexCoord):
            return NotImplemented
        return HexCoord(self.q - other.q, self.r - other.r)

    def __neg__(self) -> HexCoord:
        return HexCoord(-self.q, -self.r)

    def hash_code(self) -> int:
        return interleave_hash(self.q, self.r)

    def __hash__(self) -> int:
        return self.hash_code()

    def __str__(self) -> str:
        return f"({self.q},{self.r})"

    # --- Adjacency ------------------------------------------------------------

    def neighbor(self, index: int) -> HexCoord:
        """Neighbor 0 is to the right, others proceed counterclockwise."""

        from .adjacency import neighbor

        return neighbor(self, index)

    def neighbors(self, first: int = 0) -> Iterator[HexCoord]:
        from .adjacency import neighbors

        return neighbors(self, first)

    def corner(self, index: int) -> Vec2:
        """Corner 0 is at the upper right, others proceed counterclockwise."""

        from .adjacency import corner

        return corner(self, index)

    def corners(self, first: int = 0) -> Iterator[Vec2]:
        from .adjacency import corners

        return corners(self, first)

    # --- Polar geometry -------------------------------------------------------

    def axial_length(self) -> int:
        from .polar import axial_length

        return axial_length(self)

    def axial_skew(self) -> int:
        from .polar import axial_skew

        return axial_skew(self)

    def polar_angle(self) -> float:
        from .polar import polar_angle

        return polar_angle(self)

    def polar_index(self) -> int:
        from .polar import polar_index

        return polar_index(self)

    def corner_polar_angle(self, index: int) -> float:
        from .polar import corner_polar_angle

        return corner_polar_angle(self, index)

    def polar_bounding_corner_index(self, ccw: bool = False) -> int:
        from .polar import polar_bounding_corner_index

        return polar_bounding_corner_index(self, ccw)

    def polar_bounding_angle(self, ccw: bool = False) -> float:
        from .polar import polar_bounding_angle

        return polar_bounding_angle(self, ccw)

    def polar_bounding_corner(self, ccw: bool = False) -> Vec2:
        from .polar import polar_bounding_corner

        return polar_bounding_corner(self, ccw)

    def half_sextant(self) -> int:
        from .polar import half_sextant

        return half_sextant(self)

    def corner_sextant(self) -> int:
        from .polar import corner_sextant

        return corner_sextant(self)

    def neighbor_sextant(self) -> int:
        from .polar import neighbor_sextant

        return neighbor_sextant(self)

    # --- Transforms -----------------------------------------------------------

    def sextant_rotation(self, sextants: int) -> HexCoord:
        from .transforms import sextant_rotation

        return sextant_rotation(self, sextants)

    def mirror(self, axis: int = 1) -> HexCoord:
        from .transforms import mirror

        return mirror(self, axis)

    def scale(self, factor: float) -> HexCoord:
        from .transforms import scale

        return scale(self, factor)

    def scale_to_vector(self, factor: float) -> Vec2:
        from .transforms import scale_to_vector

        return scale_to_vector(self, factor)

    # --- Regions --------------------------------------------------------------

    def is_within_rectangle(self, corner_a: HexCoord, corner_b: HexCoord) -> bool:
        from .regions import is_within_rectangle

        return is_within_rectangle(self, corner_a, corner_b)

    def is_on_cartesian_line(self, a: Vec2 | Sequence[float], b: Vec2 | Sequence[float]) -> bool:
        from .regions import is_on_cartesian_line

        return is_on_cartesian_line(self, a, b)

    def is_on_cartesian_line_segment(
        self, a: Vec2 | Sequence[float], b: Vec2 | Sequence[float]
    ) -> bool:
        from .regions import is_on_cartesian_line_segment

        return is_on_cartesian_line_segment(self, a, b)

    # --- Cartesian ------------------------------------------------------------

    def position(self) -> Vec2:
        """Cartesian position of this hex's center."""

        from .conversions import position

        return position(self)

    def to_qr_vector(self) -> Vec2:
        from .conversions import to_qr_vector

        return to_qr_vector(self)

    def distance(self, other: HexCoord) -> int:
        from .heuristics import hex_distance

        return hex_distance(self, other)


ORIGIN = HexCoord(0, 0)


__all__ = [
    "HexCoord",
    "ORIGIN",
    "interleave_hash",
    "is_same_rotation_index",
    "normalize_index",
]
