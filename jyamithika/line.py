"""Infinite lines in 2D and 3D."""

from __future__ import annotations

from dataclasses import dataclass

from .core import X, Y
from .vector import Vector


@dataclass
class Line:
    """A 3D line given by a point on it and a direction."""

    point: Vector
    direction: Vector

    @classmethod
    def through(cls, p1: Vector, p2: Vector) -> Line:
        """Return the line through two points, with a unit direction."""
        return cls(p1, (p2 - p1).normalized())


class Line2d:
    """A 2D line given by a point and a direction, which is normalized."""

    def __init__(self, point: Vector, direction: Vector) -> None:
        self.point = point
        self.direction = direction.normalized()
        self._normal = Vector(-self.direction[Y], self.direction[X])

    def normal(self) -> Vector:
        """Return the unit normal, the direction turned counter-clockwise."""
        return self._normal

    def __repr__(self) -> str:
        return f"Line2d(point={self.point!r}, direction={self.direction!r})"


class LineStd:
    """A line with a point, a unit direction, an optional second point and a constant."""

    def __init__(self, point: Vector, direction: Vector, d: float = 0.0) -> None:
        self.point = point
        self.direction = direction.normalized()
        self.second: Vector | None = None
        self.d = d

    @classmethod
    def from_points(cls, p1: Vector, p2: Vector) -> LineStd:
        """Return the line through two points, remembering the second one."""
        line = cls(p1, p2 - p1)
        line.second = p2
        return line

    def __repr__(self) -> str:
        return (
            f"LineStd(point={self.point!r}, direction={self.direction!r}, "
            f"second={self.second!r}, d={self.d!r})"
        )