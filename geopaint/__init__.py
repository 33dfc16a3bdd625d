from geopaint.canvas import PillowCanvas
from geopaint.errors import DegenerateExtentError, NoDataError, RenderError
from geopaint.extent import Bounds, get_bounds
from geopaint.paths import GeoPath, to_path
from geopaint.renderer import Datum, MapRenderer, RenderConfig
from geopaint.transform import Transform, fit_transform, world_file

__version__ = "0.1.0"

__all__ = [
    "Bounds",
    "Datum",
    "DegenerateExtentError",
    "GeoPath",
    "MapRenderer",
    "NoDataError",
    "PillowCanvas",
    "RenderConfig",
    "RenderError",
    "Transform",
    "fit_transform",
    "get_bounds",
    "to_path",
    "world_file",
]
