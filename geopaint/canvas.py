"""
canvas - Pillow backed raster surface

Fills use the even-odd rule: each contour is drawn into its own
1-bit stencil and xor'ed into the fill mask, so holes and
overlapping parts cancel out. Open lines are filled as if closed.
Fills and strokes are painted on a transparent layer and
alpha-composited over the surface.
"""

from PIL import Image, ImageChops, ImageDraw

TRANSPARENT = (0, 0, 0, 0)


class PillowCanvas:

    mode = "RGBA"

    def __init__(self, width, height, background=TRANSPARENT):
        self.image = Image.new(self.mode, (width, height), background)

    @property
    def size(self):
        return self.image.size

    def fill(self, path, color):
        contours = [subpath.tolist() for subpath, _ in path if len(subpath) >= 3]
        if not contours:
            return
        mask = Image.new("1", self.size, 0)
        try:
            for contour in contours:
                with Image.new("1", self.size, 0) as stencil:
                    ImageDraw.Draw(stencil).polygon(contour, fill=1)
                    combined = ImageChops.logical_xor(mask, stencil)
                mask.close()
                mask = combined
            with Image.new(self.mode, self.size, TRANSPARENT) as layer:
                layer.paste(color, mask=mask)
                self.image.alpha_composite(layer)
        finally:
            mask.close()

    def stroke(self, path, color, width):
        lines = []
        for subpath, closed in path:
            points = subpath.tolist()
            if closed and points[0] != points[-1]:
                points.append(points[0])
            if len(points) >= 2:
                lines.append(points)
        if not lines:
            return
        with Image.new(self.mode, self.size, TRANSPARENT) as layer:
            draw = ImageDraw.Draw(layer)
            for points in lines:
                draw.line(points, fill=color, width=width, joint="curve")
            self.image.alpha_composite(layer)

    def flip(self):
        """Mirror the surface top to bottom"""
        flipped = self.image.transpose(Image.Transpose.FLIP_TOP_BOTTOM)
        self.image.close()
        self.image = flipped

    def close(self):
        self.image.close()
