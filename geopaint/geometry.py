"""
geometry - read-only access to vector geometry through the
__geo_interface__ protocol.

pyshp shapes, shapely geometries and plain GeoJSON dicts all speak
this protocol, so the renderer never needs to know which library
produced the data.
"""

MULTI_TYPES = {
    "MultiPolygon": "Polygon",
    "MultiLineString": "LineString",
    "MultiPoint": "Point",
}


def geo_interface(geometry):
    """Return the GeoJSON-like mapping for a geometry.

    Accepts objects with __geo_interface__, GeoJSON geometry dicts
    and GeoJSON Features.
    """
    if isinstance(geometry, dict):
        mapping = geometry
    else:
        mapping = getattr(geometry, "__geo_interface__", None)
        if mapping is None:
            raise TypeError("%r does not provide __geo_interface__" % (geometry,))
    # Unwrap features down to their geometry
    if mapping.get("type") == "Feature":
        return geo_interface(mapping.get("geometry") or {})
    return mapping


def subgeometries(geometry):
    """Yield every simple part of a geometry in part order."""
    mapping = geo_interface(geometry)
    geom_type = mapping.get("type")
    if not geom_type:
        return
    if geom_type == "GeometryCollection":
        for member in mapping.get("geometries", []):
            for part in subgeometries(member):
                yield part
    elif geom_type in MULTI_TYPES:
        for coords in mapping.get("coordinates", []):
            yield {"type": MULTI_TYPES[geom_type], "coordinates": coords}
    else:
        yield mapping


def is_polygon(part):
    return part.get("type") == "Polygon"


def _xy(coords):
    return [(float(c[0]), float(c[1])) for c in coords]


def exterior_ring(polygon):
    rings = polygon.get("coordinates") or []
    if not rings:
        return []
    return _xy(rings[0])


def interior_rings(polygon):
    rings = polygon.get("coordinates") or []
    return [_xy(ring) for ring in rings[1:]]


def line_points(part):
    """Points of a line-like part. Unknown types are read the same way."""
    coords = part.get("coordinates")
    if not coords:
        return []
    if part.get("type") == "Point":
        return _xy([coords])
    return _xy(coords)


def rings(part):
    """Every point sequence of a part: all rings of a polygon, or the
    single sequence of a line-like part."""
    if is_polygon(part):
        exterior = exterior_ring(part)
        if not exterior:
            return []
        return [exterior] + interior_rings(part)
    return [line_points(part)]


def points(geometry):
    """Yield every (x, y) of every ring of every part of a geometry."""
    for part in subgeometries(geometry):
        for ring in rings(part):
            for point in ring:
                yield point
