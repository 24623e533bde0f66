__version__ = "0.1.0"

from .core import (
    DepthExceededError,
    InvalidCoordinateError,
    QuadTreeError,
    QuadTreeSettings,
    apply_settings,
    load_settings,
    logger,
)
from .index import MAX_DEPTH, MAX_OBJECTS, Bounds, Point, QuadTree

__all__ = [
    "Bounds",
    "DepthExceededError",
    "InvalidCoordinateError",
    "MAX_DEPTH",
    "MAX_OBJECTS",
    "Point",
    "QuadTree",
    "QuadTreeError",
    "QuadTreeSettings",
    "apply_settings",
    "load_settings",
    "logger",
]
