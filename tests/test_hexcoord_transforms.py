import math

import pytest

from hexcoord import HexCoord, ORIGIN, Vec2, mirror, scale, sextant_rotation

SAMPLES = [HexCoord(q, r) for q in range(-4, 5) for r in range(-4, 5)]


def test_rotation_by_one_sextant():
    assert HexCoord(1, 0).sextant_rotation(1) == HexCoord(0, 1)
    assert HexCoord(2, -1).sextant_rotation(1) == HexCoord(1, 1)
    assert HexCoord(2, -1).sextant_rotation(2) == HexCoord(-1, 2)
    assert HexCoord(2, -1).sextant_rotation(3) == HexCoord(-2, 1)
    assert HexCoord(2, -1).sextant_rotation(-1) == HexCoord(1, -2)


def test_origin_is_fixed():
    for n in range(-6, 7):
        assert ORIGIN.sextant_rotation(n) == ORIGIN
    for axis in range(3):
        assert ORIGIN.mirror(axis) == ORIGIN


def test_full_turn_is_identity():
    for h in SAMPLES:
        assert h.sextant_rotation(6) == h
        assert h.sextant_rotation(0) == h
        assert h.sextant_rotation(-12) == h


def test_rotations_compose():
    for h in SAMPLES:
        for a in range(6):
            for b in range(-3, 6):
                assert sextant_rotation(sextant_rotation(h, a), b) == sextant_rotation(h, (a + b) % 6)


def test_rotation_turns_polar_angle():
    h = HexCoord(3, 1)
    for n in range(1, 6):
        turned = h.sextant_rotation(n).polar_angle() - h.polar_angle()
        assert math.cos(turned) == pytest.approx(math.cos(n * math.pi / 3), abs=1e-9)
        assert math.sin(turned) == pytest.approx(math.sin(n * math.pi / 3), abs=1e-9)


def test_rotation_preserves_length_and_skew():
    for h in SAMPLES:
        for n in range(6):
            rotated = h.sextant_rotation(n)
            assert rotated.axial_length() == h.axial_length()
            assert rotated.axial_skew() == h.axial_skew()


@pytest.mark.parametrize(
    ("axis", "expected"),
    [
        (0, HexCoord(-1, 2)),
        (1, HexCoord(-1, -1)),
        (2, HexCoord(2, -1)),
        (3, HexCoord(-1, 2)),
        (-1, HexCoord(2, -1)),
    ],
)
def test_mirror_axes(axis: int, expected: HexCoord):
    assert HexCoord(2, -1).mirror(axis) == expected


def test_mirror_default_axis():
    assert HexCoord(3, 1).mirror() == HexCoord(3, 1).mirror(1)


def test_mirror_is_involution():
    for h in SAMPLES:
        for axis in range(3):
            assert mirror(mirror(h, axis), axis) == h
            assert mirror(h, axis).axial_length() == h.axial_length()


def test_mirror_axis_passes_through_corner():
    # Axis n runs through corner n of the origin; mirroring flips the side.
    for axis in range(3):
        c = ORIGIN.corner(axis)
        for h in SAMPLES:
            p = h.position()
            m = h.mirror(axis).position()
            assert c.cross(p) == pytest.approx(-c.cross(m), abs=1e-9)
            assert c.dot(p) == pytest.approx(c.dot(m), abs=1e-9)


def test_scale_integer_is_exact():
    assert HexCoord(3, -2).scale(3) == HexCoord(9, -6)
    assert HexCoord(3, -2).scale(-1) == HexCoord(-3, 2)
    assert scale(HexCoord(3, -2), 0) == ORIGIN


def test_scale_float_truncates_toward_zero():
    assert HexCoord(3, -3).scale(0.5) == HexCoord(1, -1)
    assert HexCoord(5, -5).scale(0.99) == HexCoord(4, -4)
    assert HexCoord(-3, 7).scale(1.5) == HexCoord(-4, 10)


def test_scale_rejects_non_numeric():
    with pytest.raises(TypeError):
        HexCoord(1, 1).scale("2")  # type: ignore[arg-type]


def test_scale_to_vector_keeps_fraction():
    assert HexCoord(3, -3).scale_to_vector(0.5) == Vec2(1.5, -1.5)
