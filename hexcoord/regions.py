"""Containment tests against offset rectangles and Cartesian lines."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .adjacency import CORNER_VECTORS, NEIGHBOR_VECTORS, corner
from .conversions import at_position, position
from .coords import HexCoord
from .vectors import Vec2

logger = logging.getLogger(__name__)


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def is_within_rectangle(h: HexCoord, corner_a: HexCoord, corner_b: HexCoord) -> bool:
    """Whether ``h`` lies in the offset-coordinate rectangle spanned by two hexes.

    Alternate rows are shifted by half a hex, so the rectangle's width and
    the tested column are corrected by one depending on scan direction and
    row parity. The two corners may be given in either order.
    """

    if h.r > corner_a.r and h.r > corner_b.r or h.r < corner_a.r and h.r < corner_b.r:
        return False
    reverse = corner_a.o > corner_b.o  # scan right to left
    offset = corner_a.r % 2 != 0  # starts on an odd row
    trim = abs(corner_a.r - corner_b.r) % 2 == 0  # odd number of rows
    odd = (h.r - corner_a.r) % 2 != 0  # alternate row
    width = abs(corner_a.o - corner_b.o)
    has_width = width != 0
    if (
        reverse
        and (odd and (trim or not offset) or not (trim or offset or odd))
        or not reverse
        and (trim and odd or offset and not trim and has_width)
    ):
        width -= 1
    x = (h.o - corner_a.o) * (-1 if reverse else 1)
    if reverse and odd and not offset or not reverse and offset and odd and has_width:
        x -= 1
    return 0 <= x <= width


def is_on_cartesian_line(
    h: HexCoord, a: Vec2 | Sequence[float], b: Vec2 | Sequence[float]
) -> bool:
    """Whether the infinite line through ``a`` and ``b`` crosses ``h``."""

    a, b = Vec2.of(a), Vec2.of(b)
    ab = b - a
    bias = ab.cross(corner(h, 0) - a) > 0
    for i in range(1, 6):
        if bias != (ab.cross(corner(h, i) - a) > 0):
            return True
    return False


def is_on_cartesian_line_segment(
    h: HexCoord, a: Vec2 | Sequence[float], b: Vec2 | Sequence[float]
) -> bool:
    """Whether the segment from ``a`` to ``b`` crosses ``h``.

    A side change between consecutive corners only counts when at least one
    of the two corners projects inside the segment's extent. Touching counts.
    """

    a, b = Vec2.of(a), Vec2.of(b)
    ab = b - a
    mag = ab.sqr_magnitude
    ac = corner(h, 0) - a
    within = ac.sqr_magnitude <= mag and ab.dot(ac) >= 0
    sign = _sign(ab.cross(ac))
    for i in range(1, 6):
        ac = corner(h, i) - a
        new_within = ac.sqr_magnitude <= mag and ab.dot(ac) >= 0
        new_sign = _sign(ab.cross(ac))
        if (within or new_within) and sign * new_sign <= 0:
            return True
        within = new_within
        sign = new_sign
    return False


def cartesian_rectangle_bounds(
    corner_a: Vec2 | Sequence[float], corner_b: Vec2 | Sequence[float]
) -> tuple[HexCoord, HexCoord]:
    """Corners of an offset rectangle covering the hex centers in an XY rectangle.

    Every hex whose center lies inside the XY rectangle is covered. Hexes that
    only overlap it along an edge or corner may fall outside. The result is meant for
    :func:`is_within_rectangle`.
    """

    a, b = Vec2.of(corner_a), Vec2.of(corner_b)
    lo = Vec2(min(a.x, b.x), min(a.y, b.y))
    hi = Vec2(max(a.x, b.x), max(a.y, b.y))
    low_hex = at_position(lo)
    high_hex = at_position(hi)

    pos = position(low_hex)
    if (pos + CORNER_VECTORS[0]).y <= lo.y or (pos + CORNER_VECTORS[5]).y >= lo.y:
        low_hex = _nudge(low_hex, 4)
    elif (pos + CORNER_VECTORS[1]).x <= lo.x:
        low_hex = _nudge(low_hex, 3)

    pos = position(high_hex)
    if (pos + CORNER_VECTORS[2]).y <= hi.y or (pos + CORNER_VECTORS[3]).y >= hi.y:
        high_hex = _nudge(high_hex, 1)
    elif (pos + CORNER_VECTORS[1]).x >= hi.x:
        high_hex = _nudge(high_hex, 0)

    return low_hex, high_hex


def _nudge(h: HexCoord, direction: int) -> HexCoord:
    moved = h + NEIGHBOR_VECTORS[direction]
    logger.debug("rectangle bound %s nudged toward neighbor %d: %s", h, direction, moved)
    return moved
