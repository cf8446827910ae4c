"""Point sets and analysis windows."""

from .points import as_point_set, bounding_box
from .window import Window, as_window, validate_extent

__all__ = [
    "Window",
    "as_point_set",
    "as_window",
    "bounding_box",
    "validate_extent",
]
