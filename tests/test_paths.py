import pytest

from geopaint.paths import GeoPath, to_path
from geopaint.transform import Transform, fit_transform
from geopaint.extent import get_bounds


def test_polygon_with_hole_gives_two_closed_contours(square_with_hole):
    path = to_path(square_with_hole)
    assert len(path) == 2
    assert len(path.polygons()) == 2
    assert path.lines() == []


def test_lines_stay_open(nested_collection):
    path = to_path(nested_collection)
    closed = [c for _, c in path.tolist()]
    assert closed == [False, True, True, True]


def test_multipoint_and_unknown_types_are_line_like():
    path = to_path({"type": "GeometryCollection", "geometries": [
        {"type": "MultiPoint", "coordinates": [(0, 0), (1, 1)]},
        {"type": "CircularString", "coordinates": [(0, 0), (1, 1), (2, 0)]},
    ]})
    assert len(path.lines()) == 3
    assert path.polygons() == []


def test_transform_translates_then_scales(unit_square):
    t = Transform(scale=10.0, offset_x=-1.0, offset_y=2.0, center_x=0.0, center_y=0.0)
    points, closed = to_path(unit_square, t).tolist()[0]
    assert closed
    assert points[0] == pytest.approx((10.0, -20.0))
    assert points[2] == pytest.approx((20.0, -10.0))


def test_fitted_path_fills_the_image(unit_square):
    t = fit_transform(get_bounds([unit_square]), 100, 100)
    points, _ = to_path(unit_square, t).tolist()[0]
    xs = [x for x, _ in points]
    ys = [y for _, y in points]
    assert (min(xs), max(xs), min(ys), max(ys)) == pytest.approx((0, 100, 0, 100))


def test_empty_parts_add_nothing():
    path = GeoPath()
    path.add_polygon([])
    path.add_lines([])
    assert len(path) == 0
    assert len(to_path({"type": "Polygon", "coordinates": []})) == 0
