"""2D line segments."""

from __future__ import annotations

from dataclasses import dataclass, field

from .core import X, Y
from .point import DEFAULT_POINT_2D
from .vector import Vector


@dataclass
class Segment2d:
    """A 2D segment between ``p1`` and ``p2``."""

    p1: Vector = field(default_factory=lambda: DEFAULT_POINT_2D)
    p2: Vector = field(default_factory=lambda: DEFAULT_POINT_2D)

    def get_x(self, y: float) -> float:
        """Return the x coordinate of the segment's line at height ``y``.

        Raises ZeroDivisionError for a horizontal segment.
        """
        x1, y1 = self.p1[X], self.p1[Y]
        x2, y2 = self.p2[X], self.p2[Y]
        dy = y2 - y1
        return y * (x2 - x1) / dy + (y2 * x1 - y1 * x2) / dy