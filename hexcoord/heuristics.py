from __future__ import annotations

from .coords import HexCoord
from .polar import axial_length


def hex_distance(a: HexCoord, b: HexCoord) -> int:
    return axial_length(a - b)
