from .bounds import Bounds
from .node import MAX_DEPTH, MAX_OBJECTS, Internal, Leaf, Node
from .point import Point
from .quadtree import QuadTree

__all__ = [
    "Bounds",
    "Internal",
    "Leaf",
    "MAX_DEPTH",
    "MAX_OBJECTS",
    "Node",
    "Point",
    "QuadTree",
]
