"""Shared geometry samples."""

import pytest


def square(x0, y0, x1, y1):
    # Clockwise, closed
    return [(x0, y0), (x0, y1), (x1, y1), (x1, y0), (x0, y0)]


@pytest.fixture()
def unit_square():
    return {"type": "Polygon", "coordinates": [square(0, 0, 1, 1)]}


@pytest.fixture()
def square_with_hole():
    return {"type": "Polygon", "coordinates": [square(0, 0, 10, 10), square(3, 3, 7, 7)]}


@pytest.fixture()
def nested_collection():
    return {
        "type": "GeometryCollection",
        "geometries": [
            {"type": "LineString", "coordinates": [(-5, 2), (0, 0)]},
            {
                "type": "GeometryCollection",
                "geometries": [
                    {"type": "MultiPolygon", "coordinates": [
                        [square(0, 0, 2, 2)],
                        [square(10, 10, 12, 12), square(10.5, 10.5, 11, 11)],
                    ]},
                ],
            },
        ],
    }
