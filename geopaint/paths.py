"""
paths - turn one geometry into a drawable path

A GeoPath holds every sub-path of one geometry: closed contours for
polygon rings (exterior and holes alike) and open polylines for
everything else. Each sub-path is a PIL.ImagePath.Path so the
transform is applied by Pillow in one affine step.
"""

from PIL import ImagePath

from geopaint import geometry as geom


class GeoPath:

    def __init__(self):
        self.subpaths = []

    def __iter__(self):
        return iter(self.subpaths)

    def __len__(self):
        return len(self.subpaths)

    def add_polygon(self, points):
        if points:
            self.subpaths.append((ImagePath.Path(points), True))

    def add_lines(self, points):
        if points:
            self.subpaths.append((ImagePath.Path(points), False))

    def polygons(self):
        return [path for path, closed in self.subpaths if closed]

    def lines(self):
        return [path for path, closed in self.subpaths if not closed]

    def transform(self, transform):
        """Translate by the offsets, then scale, in place"""
        matrix = transform.matrix
        for path, _ in self.subpaths:
            path.transform(matrix)
        return self

    def tolist(self):
        return [(path.tolist(), closed) for path, closed in self.subpaths]


def to_path(geometry, transform=None):
    """Build the path for one geometry, moved into image space when a
    transform is given."""
    path = GeoPath()
    for part in geom.subgeometries(geometry):
        if geom.is_polygon(part):
            # Exterior first, then each hole as its own closed contour
            path.add_polygon(geom.exterior_ring(part))
            for ring in geom.interior_rings(part):
                path.add_polygon(ring)
        else:
            path.add_lines(geom.line_points(part))
    if transform is not None:
        path.transform(transform)
    return path
