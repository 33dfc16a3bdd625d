"""
shp2img.py - creates a png image and world file (.pgw) from a shapefile.

Every shape in the file is fitted into the image, keeping its aspect
ratio, and painted with one fill and stroke color.

usage: python shp2img.py mississippi -o mississippi.png --width 400 --height 600
"""

import argparse
import logging
import os
import sys

import shapefile

from geopaint import MapRenderer, RenderError
from geopaint.transform import world_file_lines

logger = logging.getLogger("shp2img")


def world_file_name(image_name):
    # mississippi.png -> mississippi.pgw
    root, ext = os.path.splitext(image_name)
    ext = ext[1:]
    if len(ext) >= 2:
        return "%s.%s%sw" % (root, ext[0], ext[-1])
    return root + ".wld"


def build_parser():
    parser = argparse.ArgumentParser(prog="shp2img", description="Render a shapefile to a PNG image")
    parser.add_argument("shapefile", help="path to the shapefile, with or without extension")
    parser.add_argument("-o", "--output", help="output image (default: <shapefile>.png)")
    parser.add_argument("--width", type=int, default=400)
    parser.add_argument("--height", type=int, default=600)
    parser.add_argument("--padding", type=int, default=0)
    parser.add_argument("--fill", default="rgb(198, 204, 189)")
    parser.add_argument("--stroke", default="rgb(203, 196, 190)")
    parser.add_argument("--stroke-width", type=int, default=1)
    parser.add_argument("--no-world-file", action="store_true", help="do not write the .pgw file")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    output = args.output or os.path.splitext(args.shapefile)[0] + ".png"

    try:
        renderer = MapRenderer(args.width, args.height, args.padding)
        renderer.fill_color = args.fill
        renderer.stroke_color = args.stroke
        renderer.stroke_width = args.stroke_width
    except ValueError as e:
        logger.error("%s", e)
        return 2

    try:
        # Read in a shapefile
        with shapefile.Reader(args.shapefile) as r:
            count = renderer.add_shapes(r.shapes())
        logger.info("read %d shapes from %s", count, args.shapefile)

        img = renderer.render()
        params = renderer.world_file()
    except (RenderError, shapefile.ShapefileException) as e:
        logger.error("cannot render %s: %s", args.shapefile, e)
        return 1

    with img:
        img.save(output)
    logger.info("wrote %s", output)

    # Create a world file
    if not args.no_world_file:
        wld_name = world_file_name(output)
        with open(wld_name, "w") as wld:
            wld.write(world_file_lines(params))
        logger.info("wrote %s", wld_name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
