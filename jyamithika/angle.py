"""Angles between lines and planes, in degrees."""

from __future__ import annotations

import math

from .core import radians_to_degrees
from .line import Line, Line2d
from .plane import Plane
from .vector import Vector, dot_product


def _angle_degrees(v1: Vector, v2: Vector) -> float:
    """Return the acute angle between two unit vectors in degrees."""
    return radians_to_degrees(math.acos(min(1.0, abs(dot_product(v1, v2)))))


def angle_lines_2d(l1: Line2d, l2: Line2d) -> float:
    """Return the acute angle between two 2D lines in degrees."""
    return _angle_degrees(l1.direction, l2.direction)


def angle_lines_3d(l1: Line, l2: Line) -> float:
    """Return the acute angle between two 3D lines with unit directions."""
    return _angle_degrees(l1.direction, l2.direction)


def angle_line_plane(line: Line, plane: Plane) -> float:
    """Return the angle between a line and a plane, both with unit vectors."""
    return 90 - _angle_degrees(line.direction, plane.normal)


def angle_planes(p1: Plane, p2: Plane) -> float:
    """Return the acute angle between two planes with unit normals."""
    return _angle_degrees(p1.normal, p2.normal)