"""
transform - fit a geometry extent into an image

The transform is a translate followed by a uniform scale:

    px = (x - offset_x) * scale
    py = (y - offset_y) * scale

The offsets are in geometry units and already include the padding
and the centring slack, so (xmin, ymin) lands on (padding + center_x,
padding + center_y) in pixels.
"""

import logging
import math
from collections import namedtuple

from geopaint.errors import DegenerateExtentError

logger = logging.getLogger(__name__)


class Transform(namedtuple("Transform", ["scale", "offset_x", "offset_y", "center_x", "center_y"])):
    __slots__ = ()

    def apply(self, x, y):
        return (x - self.offset_x) * self.scale, (y - self.offset_y) * self.scale

    @property
    def matrix(self):
        """Affine 6-tuple (a, b, c, d, e, f) for PIL.ImagePath.Path.transform"""
        s = self.scale
        return (s, 0.0, -self.offset_x * s, 0.0, s, -self.offset_y * s)


def fit_transform(bounds, width, height, padding=0):
    """Scale and offsets that fit bounds into a width x height image.

    Aspect ratio is preserved and the content is centred along the
    axis with slack. A zero extent on one axis is fitted by the other
    axis; raises DegenerateExtentError when both are zero or the
    bounds are empty.
    """
    draw_width = float(width - 2 * padding)
    draw_height = float(height - 2 * padding)
    if draw_width <= 0 or draw_height <= 0:
        raise ValueError("padding %s leaves no drawable area in a %sx%s image" % (padding, width, height))

    if bounds.is_empty or not all(math.isfinite(v) for v in bounds):
        raise DegenerateExtentError("geometry has no points")

    geo_width = bounds.width
    geo_height = bounds.height
    if geo_width == 0 and geo_height == 0:
        raise DegenerateExtentError(
            "all points are at (%s, %s); extent has no width or height" % (bounds.xmin, bounds.ymin))

    image_ratio = draw_width / draw_height
    geo_ratio = geo_width / geo_height if geo_height else math.inf

    # Fit the relatively wider axis and centre the other one
    if geo_ratio > image_ratio:
        scale = draw_width / geo_width
        center_x = 0.0
        center_y = (draw_height - geo_height * scale) / 2
    else:
        scale = draw_height / geo_height
        center_x = (draw_width - geo_width * scale) / 2
        center_y = 0.0

    # Shift the geometry to the image origin, with padding and centring
    # converted back from pixels to geometry units
    offset_x = bounds.xmin - (padding + center_x) / scale
    offset_y = bounds.ymin - (padding + center_y) / scale

    logger.debug("fitted %s into %sx%s (padding %s): scale=%s offset=(%s, %s)",
                 bounds, width, height, padding, scale, offset_x, offset_y)
    return Transform(scale, offset_x, offset_y, center_x, center_y)


def world_file(transform, height):
    """World file parameters for an image drawn with transform and then
    flipped vertically.

    Returns (A, D, B, E, C, F): pixel width, two rotation terms, negative
    pixel height, and the map coordinates of the centre of the upper-left
    pixel.
    """
    pixel = 1.0 / transform.scale
    upper_left_x = transform.offset_x + 0.5 * pixel
    upper_left_y = transform.offset_y + (height - 0.5) * pixel
    return (pixel, 0.0, 0.0, -pixel, upper_left_x, upper_left_y)


def world_file_lines(params):
    return "".join("%s\n" % value for value in params)
