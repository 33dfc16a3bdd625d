import math

from geopaint.extent import Bounds, get_bounds


def test_bounds_cover_every_part(nested_collection):
    b = get_bounds([nested_collection])
    assert b == Bounds(-5.0, 12.0, 0.0, 12.0)
    assert b.width == 17.0
    assert b.height == 12.0


def test_bounds_over_several_geometries(unit_square):
    line = {"type": "LineString", "coordinates": [(3, -1), (4, 0.5)]}
    assert get_bounds([unit_square, line]) == Bounds(0.0, 4.0, -1.0, 1.0)


def test_interior_ring_outside_exterior_counts():
    # Invalid but possible: the hole pokes out of the shell
    poly = {"type": "Polygon", "coordinates": [
        [(0, 0), (0, 1), (1, 1), (1, 0), (0, 0)],
        [(0.5, 0.5), (0.5, 3), (0.7, 3), (0.5, 0.5)],
    ]}
    assert get_bounds([poly]).ymax == 3.0


def test_single_point_and_decreasing_points():
    # Later points smaller than the first still move the minimum
    line = {"type": "LineString", "coordinates": [(5, 5), (4, 6), (3, 1)]}
    assert get_bounds([line]) == Bounds(3.0, 5.0, 1.0, 6.0)
    point = {"type": "Point", "coordinates": (2, 2)}
    assert get_bounds([point]) == Bounds(2.0, 2.0, 2.0, 2.0)


def test_no_points_gives_empty_bounds():
    b = get_bounds([])
    assert b.is_empty
    assert math.isinf(b.xmin)
