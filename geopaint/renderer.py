"""
renderer - fit a list of styled geometries into a fixed-size image

    r = MapRenderer(400, 600, padding=10)
    r.fill_color = "rgb(198, 204, 189)"
    for shape in shapefile.Reader("mississippi").shapes():
        r.add_data(shape)
    img = r.render()
    img.save("mississippi.png")

Shapes are painted in the order they were added, fill then stroke,
with one transform shared by the whole dataset. The image is flipped
at the end so north is up.
"""

import logging
from collections import namedtuple
from dataclasses import dataclass

from PIL import ImageColor

from geopaint.canvas import PillowCanvas
from geopaint.errors import NoDataError
from geopaint.geometry import geo_interface
from geopaint.extent import get_bounds
from geopaint.paths import to_path
from geopaint.transform import fit_transform, world_file

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderConfig:
    width: int
    height: int
    padding: int = 0

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError("image size must be positive, got %sx%s" % (self.width, self.height))
        if self.padding < 0:
            raise ValueError("padding must not be negative, got %s" % self.padding)
        if self.width - 2 * self.padding <= 0 or self.height - 2 * self.padding <= 0:
            raise ValueError("padding %s leaves no drawable area in a %sx%s image"
                             % (self.padding, self.width, self.height))


Datum = namedtuple("Datum", ["geometry", "fill_color", "stroke_color", "stroke_width"])


def to_rgba(color):
    """Normalize a Pillow color spec or an RGB(A) tuple to an RGBA tuple"""
    if isinstance(color, str):
        rgb = ImageColor.getrgb(color)
    else:
        rgb = tuple(int(c) for c in color)
        if len(rgb) not in (3, 4) or not all(0 <= c <= 255 for c in rgb):
            raise ValueError("not an RGB or RGBA color: %r" % (color,))
    if len(rgb) == 3:
        rgb += (255,)
    return rgb


def check_width(width):
    if isinstance(width, bool) or int(width) != width or width <= 0:
        raise ValueError("stroke width must be a positive whole number of pixels, got %r" % (width,))
    return int(width)


class MapRenderer:

    canvas_class = PillowCanvas

    def __init__(self, width, height, padding=0):
        self.config = RenderConfig(width, height, padding)
        self.data = []
        self.fill_color = "white"
        self.stroke_color = "black"
        self.stroke_width = 1

    @property
    def width(self):
        return self.config.width

    @property
    def height(self):
        return self.config.height

    @property
    def padding(self):
        return self.config.padding

    # Defaults only apply to data added after they are changed

    @property
    def fill_color(self):
        return self._fill_color

    @fill_color.setter
    def fill_color(self, color):
        self._fill_color = to_rgba(color)

    @property
    def stroke_color(self):
        return self._stroke_color

    @stroke_color.setter
    def stroke_color(self, color):
        self._stroke_color = to_rgba(color)

    @property
    def stroke_width(self):
        return self._stroke_width

    @stroke_width.setter
    def stroke_width(self, width):
        self._stroke_width = check_width(width)

    def add_data(self, geometry, fill_color=None, stroke_color=None, stroke_width=None):
        # Raises TypeError now rather than on every later render
        geo_interface(geometry)
        datum = Datum(
            geometry,
            self.fill_color if fill_color is None else to_rgba(fill_color),
            self.stroke_color if stroke_color is None else to_rgba(stroke_color),
            self.stroke_width if stroke_width is None else check_width(stroke_width),
        )
        self.data.append(datum)
        return datum

    def add_shapes(self, shapes, fill_color=None, stroke_color=None, stroke_width=None):
        """Add every shape of an iterable with one style, skipping null shapes"""
        count = 0
        for shape in shapes:
            if not getattr(shape, "points", True):
                continue
            self.add_data(shape, fill_color, stroke_color, stroke_width)
            count += 1
        return count

    def bounds(self):
        if not self.data:
            raise NoDataError("No data")
        return get_bounds(d.geometry for d in self.data)

    def transform(self):
        return fit_transform(self.bounds(), self.width, self.height, self.padding)

    def world_file(self):
        return world_file(self.transform(), self.height)

    def render(self):
        """Paint every datum and return a new RGBA PIL image.

        The caller owns the image. If painting fails the surface is
        closed before the error propagates.
        """
        transform = self.transform()
        canvas = self.canvas_class(self.width, self.height)
        try:
            for datum in self.data:
                path = to_path(datum.geometry, transform)
                canvas.fill(path, datum.fill_color)
                canvas.stroke(path, datum.stroke_color, datum.stroke_width)
            # y-axis points are inverse to geometry, so flip vertically
            canvas.flip()
        except Exception:
            canvas.close()
            raise
        logger.debug("rendered %d shapes into %sx%s", len(self.data), self.width, self.height)
        return canvas.image
