"""Axial hexagon grid coordinates."""

from .coords import HexCoord, ORIGIN, interleave_hash, is_same_rotation_index, normalize_index
from .vectors import SEXTANT, SQRT3, Vec2, round_half_away, vector_qr_to_xy, vector_xy_to_qr
from .conversions import at_offset, at_position, from_qr_vector, position, to_qr_vector
from .adjacency import (
    CORNER_VECTORS,
    NEIGHBOR_VECTORS,
    angle_to_corner_index,
    angle_to_neighbor_index,
    corner,
    corner_index_to_angle,
    corner_vector,
    corner_vectors,
    corners,
    neighbor,
    neighbor_index_to_angle,
    neighbor_vector,
    neighbor_vectors,
    neighbors,
)
from .polar import (
    at_polar,
    axial_length,
    axial_skew,
    corner_polar_angle,
    corner_sextant,
    find_polar_index,
    half_sextant,
    neighbor_sextant,
    polar_angle,
    polar_bounding_angle,
    polar_bounding_corner,
    polar_bounding_corner_index,
    polar_index,
)
from .heuristics import hex_distance
from .transforms import mirror, scale, scale_to_vector, sextant_rotation
from .regions import (
    cartesian_rectangle_bounds,
    is_on_cartesian_line,
    is_on_cartesian_line_segment,
    is_within_rectangle,
)
from .records import HexCoordinateModel

__version__ = "0.1.0"

__all__ = [
    "CORNER_VECTORS",
    "HexCoord",
    "HexCoordinateModel",
    "NEIGHBOR_VECTORS",
    "ORIGIN",
    "SEXTANT",
    "SQRT3",
    "Vec2",
    "angle_to_corner_index",
    "angle_to_neighbor_index",
    "at_offset",
    "at_polar",
    "at_position",
    "axial_length",
    "axial_skew",
    "cartesian_rectangle_bounds",
    "corner",
    "corner_index_to_angle",
    "corner_polar_angle",
    "corner_sextant",
    "corner_vector",
    "corner_vectors",
    "corners",
    "find_polar_index",
    "from_qr_vector",
    "half_sextant",
    "hex_distance",
    "interleave_hash",
    "is_on_cartesian_line",
    "is_on_cartesian_line_segment",
    "is_same_rotation_index",
    "is_within_rectangle",
    "mirror",
    "neighbor",
    "neighbor_index_to_angle",
    "neighbor_sextant",
    "neighbor_vector",
    "neighbor_vectors",
    "neighbors",
    "normalize_index",
    "polar_angle",
    "polar_bounding_angle",
    "polar_bounding_corner",
    "polar_bounding_corner_index",
    "polar_index",
    "position",
    "round_half_away",
    "scale",
    "scale_to_vector",
    "sextant_rotation",
    "to_qr_vector",
    "vector_qr_to_xy",
    "vector_xy_to_qr",
]
