"""
extent - bounding box over a collection of geometries
"""

from collections import namedtuple

from geopaint.geometry import points

INF = float("inf")


class Bounds(namedtuple("Bounds", ["xmin", "xmax", "ymin", "ymax"])):
    __slots__ = ()

    @property
    def width(self):
        return self.xmax - self.xmin

    @property
    def height(self):
        return self.ymax - self.ymin

    @property
    def is_empty(self):
        return self.xmin > self.xmax or self.ymin > self.ymax


def get_bounds(geometries):
    """Bounds covering every point of every geometry.

    Interior rings count too. With no points at all the result is
    empty (min at +inf, max at -inf).
    """
    xmin = ymin = INF
    xmax = ymax = -INF
    # Loop through each geometry in the dataset
    for geometry in geometries:
        # Loop through each point in this geometry
        for x, y in points(geometry):
            xmin = min(xmin, x)
            xmax = max(xmax, x)
            ymin = min(ymin, y)
            ymax = max(ymax, y)
    return Bounds(xmin, xmax, ymin, ymax)
