from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

V = TypeVar("V")


@dataclass(frozen=True, eq=False)
class Point(Generic[V]):
    """A coordinate pair carrying an opaque payload.

    Points compare by identity: the tree keeps references to the caller's
    objects and never copies them.
    """

    x: float
    y: float
    value: Optional[V] = None

    def distance_to(self, x: float, y: float) -> float:
        return math.hypot(self.x - x, self.y - y)
