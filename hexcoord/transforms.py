from __future__ import annotations

import numbers

from .coords import ORIGIN, HexCoord, normalize_index
from .vectors import Vec2


def sextant_rotation(h: HexCoord, sextants: int) -> HexCoord:
    """Rotate counterclockwise around 0,0 by ``sextants`` steps of 60 degrees."""

    if h == ORIGIN:
        return h
    sextants = normalize_index(sextants, 6)
    q, r, z = h.q, h.r, h.z
    if sextants == 0:
        return h
    if sextants == 1:
        return HexCoord(-r, -z)
    if sextants == 2:
        return HexCoord(z, q)
    if sextants == 3:
        return HexCoord(-q, -r)
    if sextants == 4:
        return HexCoord(r, z)
    return HexCoord(-z, -q)


def mirror(h: HexCoord, axis: int = 1) -> HexCoord:
    """Mirror across a cubic axis.

    The cubic axes run diagonally through two opposite corners of each hex;
    ``axis`` is a corner index through which the axis passes, modulo 3.
    """

    if h == ORIGIN:
        return h
    axis = normalize_index(axis, 3)
    if axis == 0:
        return HexCoord(h.r, h.q)
    if axis == 1:
        return HexCoord(h.z, h.r)
    return HexCoord(h.q, h.z)


def scale(h: HexCoord, factor: float) -> HexCoord:
    """Scale as a vector.

    Integral factors are exact. Other real factors truncate the result toward
    zero rather than rounding it.
    """

    if isinstance(factor, numbers.Integral):
        return HexCoord(h.q * int(factor), h.r * int(factor))
    if isinstance(factor, numbers.Real):
        return HexCoord(int(h.q * factor), int(h.r * factor))
    raise TypeError("factor must be numeric")


def scale_to_vector(h: HexCoord, factor: float) -> Vec2:
    """Scale as a fractional QR vector, without truncation."""

    return Vec2(h.q * factor, h.r * factor)
