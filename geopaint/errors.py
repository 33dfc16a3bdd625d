"""
errors - exceptions raised while fitting and rendering geometry
"""


class RenderError(Exception):
    pass


class NoDataError(RenderError):
    """Render was asked for before any geometry was added."""


class DegenerateExtentError(RenderError):
    """The data has no points, or every point sits on the same spot,
    so there is no extent to scale into the image."""
