from __future__ import annotations

from collections.abc import Sequence

from .coords import HexCoord
from .vectors import Q_XY, R_XY, Vec2, round_half_away, vector_xy_to_qr


def position(h: HexCoord) -> Vec2:
    return h.q * Q_XY + h.r * R_XY


def to_qr_vector(h: HexCoord) -> Vec2:
    # QR space, kept explicit to avoid QR/XY mix-ups.
    return Vec2(float(h.q), float(h.r))


def from_qr_vector(qr: Vec2 | Sequence[float]) -> HexCoord:
    """Snap a fractional ``(q, r)`` vector to the hex containing it.

    Rounds all three cubic components independently; when they no longer sum
    to zero, the component that moved furthest is rebuilt from the other two.
    Ties prefer rebuilding ``q``, then ``r``.
    """

    v = Vec2.of(qr)
    z = -v.x - v.y
    iq = round_half_away(v.x)
    ir = round_half_away(v.y)
    iz = round_half_away(z)
    if iq + ir + iz != 0:
        dq = abs(iq - v.x)
        dr = abs(ir - v.y)
        dz = abs(iz - z)
        if dq >= dr and dq >= dz:
            iq = -ir - iz
        elif dr >= dz:
            ir = -iq - iz
    return HexCoord(iq, ir)


def at_position(xy: Vec2 | Sequence[float]) -> HexCoord:
    """Hex containing a Cartesian position."""

    return from_qr_vector(vector_xy_to_qr(xy))


def at_offset(x: int, y: int) -> HexCoord:
    """Hex at offset coordinates, where ``x = q + r/2``."""

    return HexCoord(x - (y >> 1), y)
