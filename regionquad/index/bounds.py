from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Tuple

# Grown edges stop here instead of overflowing to infinity.
EDGE_LIMIT = sys.float_info.max


@dataclass(frozen=True)
class Bounds:
    x1: float = 0.0
    y1: float = 0.0
    x2: float = 0.0
    y2: float = 0.0

    def mid(self) -> Tuple[float, float]:
        return _midpoint(self.x1, self.x2), _midpoint(self.y1, self.y2)

    def contains(self, x: float, y: float) -> bool:
        return self.x1 <= x <= self.x2 and self.y1 <= y <= self.y2

    def intersects_square(self, x: float, y: float, radius: float) -> bool:
        """Overlap test against the square enclosing the circle at (x, y).

        May report corners the circle never reaches, never misses an overlap.
        """
        return not (
            x + radius < self.x1
            or x - radius > self.x2
            or y + radius < self.y1
            or y - radius > self.y2
        )

    def quadrant(self, idx: int) -> "Bounds":
        # 0 bottom-left, 1 top-left, 2 bottom-right, 3 top-right
        mx, my = self.mid()
        if idx == 0:
            return Bounds(self.x1, self.y1, mx, my)
        if idx == 1:
            return Bounds(self.x1, my, mx, self.y2)
        if idx == 2:
            return Bounds(mx, self.y1, self.x2, my)
        if idx == 3:
            return Bounds(mx, my, self.x2, self.y2)
        raise ValueError(f"Quadrant index out of range: {idx}")

    def grown_to(self, x: float, y: float) -> "Bounds":
        """Push every side (x, y) lies beyond out by twice the overshoot.

        Edges saturate at +/- ``EDGE_LIMIT`` so the bounds stay finite.
        """
        x1, y1, x2, y2 = self.x1, self.y1, self.x2, self.y2
        if x < x1:
            x1 = max(min(x1 - (x1 - x) * 2.0, x), -EDGE_LIMIT)
        if x > x2:
            x2 = min(max(x2 + (x - x2) * 2.0, x), EDGE_LIMIT)
        if y < y1:
            y1 = max(min(y1 - (y1 - y) * 2.0, y), -EDGE_LIMIT)
        if y > y2:
            y2 = min(max(y2 + (y - y2) * 2.0, y), EDGE_LIMIT)
        return Bounds(x1, y1, x2, y2)


def _midpoint(lo: float, hi: float) -> float:
    # Halving first cannot overflow; the clamp covers subnormal rounding.
    return min(max(lo / 2.0 + hi / 2.0, lo), hi)
