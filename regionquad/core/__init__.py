from . import logger
from .errors import DepthExceededError, InvalidCoordinateError, QuadTreeError
from .settings import QuadTreeSettings, apply_settings, load_settings

__all__ = [
    "logger",
    "QuadTreeError",
    "InvalidCoordinateError",
    "DepthExceededError",
    "QuadTreeSettings",
    "apply_settings",
    "load_settings",
]
