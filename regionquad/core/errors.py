from __future__ import annotations


class QuadTreeError(Exception):
    """Base class for errors raised by the quadtree."""


class InvalidCoordinateError(QuadTreeError, ValueError):
    """A coordinate or radius that would corrupt the tree's bounds (NaN, +/-inf)."""

    def __init__(self, name: str, value: float) -> None:
        super().__init__(f"Invalid {name}: {value!r} (must be finite)")
        self.name = name
        self.value = value


class DepthExceededError(QuadTreeError, RuntimeError):
    """A leaf at the maximum depth overflowed and cannot split any further.

    Happens when more than ``max_objects`` points share (nearly) identical
    coordinates.
    """

    def __init__(self, depth: int, x: float, y: float) -> None:
        super().__init__(f"Split depth limit {depth} reached near ({x}, {y})")
        self.depth = depth
        self.x = x
        self.y = y
