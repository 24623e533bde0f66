from __future__ import annotations

import math
from typing import Generic, Iterator, List, Optional, TypeVar

from ..core.logger import get_logger
from ..core.errors import DepthExceededError, InvalidCoordinateError
from ..core.settings import QuadTreeSettings
from .bounds import Bounds
from .node import MAX_DEPTH, MAX_OBJECTS, Node
from .point import Point

V = TypeVar("V")

log = get_logger(__name__)


class QuadTree(Generic[V]):
    """Region quadtree whose bounding rectangle grows to admit new points.

    The tree starts as a single empty leaf covering the origin. Inserting a
    point outside the current rectangle enlarges it (each violated side moves
    out by twice the overshoot) and rebuilds every node from ``all_points``,
    since quadrant assignment depends on the overall rectangle.

    Not safe for concurrent mutation.
    """

    def __init__(
        self,
        max_objects: Optional[int] = None,
        max_depth: Optional[int] = None,
        settings: Optional[QuadTreeSettings] = None,
    ) -> None:
        if max_objects is None:
            max_objects = settings.max_objects if settings else MAX_OBJECTS
        if max_depth is None:
            max_depth = settings.max_depth if settings else MAX_DEPTH
        if max_objects < 1:
            raise ValueError(f"max_objects must be >= 1, got {max_objects}")
        if max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {max_depth}")

        self.root = Node(Bounds(), max_objects, max_depth)
        self._all_points: List[Point[V]] = []
        # Growth rebuilds of committed inserts; rolled-back attempts are not counted.
        self.rebuild_count = 0

    @property
    def bounds(self) -> Bounds:
        return self.root.bounds

    @property
    def max_objects(self) -> int:
        return self.root.max_objects

    @property
    def max_depth(self) -> int:
        return self.root.max_depth

    @property
    def all_points(self) -> List[Point[V]]:
        return self._all_points

    def __len__(self) -> int:
        return len(self._all_points)

    def __iter__(self) -> Iterator[Point[V]]:
        return iter(self._all_points)

    def insert(self, point: Point[V]) -> None:
        _check_finite("x", point.x)
        _check_finite("y", point.y)

        previous = self.root.bounds
        grew = not previous.contains(point.x, point.y)
        try:
            if grew:
                self._grow(point)
            # Node.insert leaves the tree untouched when it raises.
            self.root.insert(point)
        except DepthExceededError as exc:
            log.warning("Insert of (%s, %s) rolled back: %s", point.x, point.y, exc)
            if self.root.bounds != previous:
                self._rebuild(previous)
            raise
        self._all_points.append(point)
        if grew:
            self.rebuild_count += 1

    def query_radius(self, x: float, y: float, radius: float) -> List[Point[V]]:
        _check_finite("x", x)
        _check_finite("y", y)
        if math.isnan(radius):
            raise InvalidCoordinateError("radius", radius)

        found: List[Point[V]] = []
        if radius < 0:
            return found
        self.root.query_radius(x, y, radius, found)
        return found

    def _grow(self, point: Point[V]) -> None:
        bounds = self.root.bounds.grown_to(point.x, point.y)
        log.debug(
            "Growing bounds %s -> %s for point (%s, %s)", self.root.bounds, bounds, point.x, point.y
        )
        self._rebuild(bounds)

    def _rebuild(self, bounds: Bounds) -> None:
        self.root.reset(bounds)
        for point in self._all_points:
            self.root.insert(point)
        log.debug("Rebuilt tree with %d points", len(self._all_points))


def _check_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise InvalidCoordinateError(name, value)
