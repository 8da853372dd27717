"""Point constructors and orderings."""

from __future__ import annotations

from collections.abc import Iterable

from .core import X, Y
from .vector import Vector

FLT_MAX = 3.4028234663852886e38

DEFAULT_POINT_2D = Vector(FLT_MAX, FLT_MAX)
DEFAULT_POINT_3D = Vector(FLT_MAX, FLT_MAX, FLT_MAX)


def point2d(x: float, y: float) -> Vector:
    """Return a 2D point."""
    return Vector(x, y)


def point3d(x: float, y: float, z: float) -> Vector:
    """Return a 3D point."""
    return Vector(x, y, z)


def lrtb_key(point: Vector) -> tuple[float, float]:
    """Sort key: left to right, then bottom to top."""
    return (point[X], point[Y])


def tblr_key(point: Vector) -> tuple[float, float]:
    """Sort key: top to bottom, then left to right."""
    return (-point[Y], point[X])


def sort_lrtb(points: Iterable[Vector]) -> list[Vector]:
    """Return the points ordered by x, ties broken by increasing y."""
    return sorted(points, key=lrtb_key)


def sort_tblr(points: Iterable[Vector]) -> list[Vector]:
    """Return the points ordered by decreasing y, ties broken by increasing x."""
    return sorted(points, key=tblr_key)


def sort_by_x(points: Iterable[Vector]) -> list[Vector]:
    """Return the points ordered by x."""
    return sorted(points, key=lambda p: p[X])


def sort_by_y(points: Iterable[Vector]) -> list[Vector]:
    """Return the points ordered by y."""
    return sorted(points, key=lambda p: p[Y])