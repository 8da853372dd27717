"""Distances between points, lines and planes."""

from __future__ import annotations

from .line import Line
from .plane import Plane
from .vector import Vector, cross_product_3d, dot_product


def point_to_line_through(a: Vector, b: Vector, c: Vector) -> float:
    """Return the (unsigned) distance from ``c`` to the 3D line through ``a`` and ``b``."""
    ab = b - a
    mag_dir = ab.magnitude()
    if mag_dir == 0.0:
        raise ValueError("a and b coincide; they do not define a line")
    return cross_product_3d(a - c, ab).magnitude() / mag_dir


def point_to_line(line: Line, point: Vector) -> float:
    """Return the distance from ``point`` to ``line``, whose direction is a unit vector."""
    t = dot_product(line.direction, point - line.point)
    foot = line.point + line.direction * t
    return (foot - point).magnitude()


def point_distance(p1: Vector, p2: Vector) -> float:
    """Return the Euclidean distance between two points of the same dimension."""
    return (p1 - p2).magnitude()


def plane_point_distance(plane: Plane, point: Vector) -> float:
    """Return the signed distance from ``plane`` to ``point``; positive along the normal."""
    return dot_product(plane.normal, point) - plane.d