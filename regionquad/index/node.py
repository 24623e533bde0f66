from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from ..core.logger import get_logger
from ..core.errors import DepthExceededError
from ..core.settings import DEFAULT_MAX_DEPTH, DEFAULT_MAX_OBJECTS
from .bounds import Bounds
from .point import Point

# Points a leaf holds before it splits into four children.
MAX_OBJECTS = DEFAULT_MAX_OBJECTS
MAX_DEPTH = DEFAULT_MAX_DEPTH

log = get_logger(__name__)


@dataclass
class Leaf:
    points: List[Point] = field(default_factory=list)


@dataclass
class Internal:
    children: Tuple["Node", "Node", "Node", "Node"]


NodeContent = Leaf | Internal


class Node:
    """A rectangular region holding either points (leaf) or four children."""

    def __init__(
        self,
        bounds: Bounds,
        max_objects: int = MAX_OBJECTS,
        max_depth: int = MAX_DEPTH,
        depth: int = 0,
    ) -> None:
        self.bounds = bounds
        self.max_objects = max_objects
        self.max_depth = max_depth
        self.depth = depth
        self.content: NodeContent = Leaf()

    @property
    def is_leaf(self) -> bool:
        return isinstance(self.content, Leaf)

    @property
    def points(self) -> List[Point]:
        if isinstance(self.content, Leaf):
            return list(self.content.points)
        return []

    @property
    def children(self) -> Tuple["Node", ...]:
        if isinstance(self.content, Internal):
            return self.content.children
        return ()

    def reset(self, bounds: Bounds) -> None:
        self.bounds = bounds
        self.content = Leaf()

    def insert(self, point: Point) -> None:
        node = self
        while isinstance(node.content, Internal):
            node = node.content.children[node.pick_child(point)]

        points = node.content.points
        points.append(point)
        if len(points) > node.max_objects:
            try:
                node.split()
            except DepthExceededError:
                points.pop()
                raise

    def pick_child(self, point: Point) -> int:
        # Vertical midline goes left, horizontal midline goes to the top half.
        mx, my = self.bounds.mid()
        if point.x <= mx:
            return 0 if point.y < my else 1
        return 2 if point.y < my else 3

    def split(self) -> None:
        content = self.content
        if not isinstance(content, Leaf):
            return
        self._check_depth()

        children = self._divide()
        # Overflowing children split in turn, detached from this node until all settle.
        pending = [child for child in children if child._overflows()]
        while pending:
            node = pending.pop()
            node._check_depth()
            grandchildren = node._divide()
            node.content = Internal(grandchildren)
            pending.extend(child for child in grandchildren if child._overflows())

        self.content = Internal(children)
        log.debug("Split node at depth %d %s (%d points)", self.depth, self.bounds, len(content.points))

    def _divide(self) -> Tuple["Node", "Node", "Node", "Node"]:
        children = tuple(
            Node(self.bounds.quadrant(i), self.max_objects, self.max_depth, self.depth + 1)
            for i in range(4)
        )
        for point in self.content.points:
            children[self.pick_child(point)].content.points.append(point)
        return children

    def _overflows(self) -> bool:
        return isinstance(self.content, Leaf) and len(self.content.points) > self.max_objects

    def _check_depth(self) -> None:
        if self.depth < self.max_depth:
            return
        points = self.points
        if points:
            x, y = points[-1].x, points[-1].y
        else:
            x, y = self.bounds.mid()
        raise DepthExceededError(self.max_depth, x, y)

    def query_radius(self, x: float, y: float, radius: float, found: List[Point]) -> None:
        stack = [self]
        while stack:
            node = stack.pop()
            if not node.bounds.intersects_square(x, y, radius):
                continue

            content = node.content
            if isinstance(content, Leaf):
                for point in content.points:
                    if point.distance_to(x, y) <= radius:
                        found.append(point)
                continue

            stack.extend(reversed(content.children))

    def iter_nodes(self) -> Iterator["Node"]:
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def iter_points(self) -> Iterator[Point]:
        for node in self.iter_nodes():
            if isinstance(node.content, Leaf):
                yield from node.content.points

    def count(self) -> int:
        return sum(1 for _ in self.iter_points())

    def height(self) -> int:
        return 1 + max(node.depth for node in self.iter_nodes()) - self.depth

    def __repr__(self) -> str:
        kind = "leaf" if self.is_leaf else "internal"
        return f"Node({kind}, depth={self.depth}, bounds={self.bounds})"
