from hexcoord import HexCoord, at_polar, cartesian_rectangle_bounds, find_polar_index

radius = 3
target = HexCoord(2, 1)


def ring(n: int):
    return [at_polar(n, i) for i in range(6 * n)]


if __name__ == "__main__":
    for h in ring(radius):
        print(
            f"{str(h):>8} index={h.polar_index():>2} "
            f"sextant={h.neighbor_sextant()} angle={h.polar_angle():+.3f}"
        )
    print("target:", target, "distance:", target.distance(HexCoord()))
    print("nearest ring index:", find_polar_index(radius, target.polar_angle()))
    print("rotations:", [str(target.sextant_rotation(n)) for n in range(6)])
    print("bounds of (0,0)-(5,5):", cartesian_rectangle_bounds((0.0, 0.0), (5.0, 5.0)))
