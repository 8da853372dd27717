"""Intersections between lines, segments and planes."""

from __future__ import annotations

import math

from .core import ZERO, X, Y, Z, RelativePosition, is_equal_d
from .line import Line, Line2d
from .orientation import is_left, orientation_2d
from .plane import Plane
from .segment import Segment2d
from .vector import Vector, cross_product_3d, dot_product, perpendicular


def _ratio_negative(num: float, den: float) -> bool:
    """Return True if num / den is negative under IEEE division rules."""
    if den == 0.0:
        if num == 0.0 or math.isnan(num):
            return False
        return math.copysign(1.0, num) * math.copysign(1.0, den) < 0
    return num / den < 0


def lines_2d_intersection(l1: Line2d, l2: Line2d) -> Vector | None:
    """Return where the two rays (point plus forward direction) meet, or None.

    Parallel lines and crossings behind either ray's point give None.
    """
    p1, p2 = l1.point, l2.point
    d1, d2 = l1.direction, l2.direction
    if is_equal_d(dot_product(d1, perpendicular(d2)), ZERO):
        return None

    a = d1[X]
    b = -d2[X]
    c = p2[X] - p1[X]
    d = d1[Y]
    e = -d2[Y]
    f = p2[Y] - p1[Y]
    t = (c * e - b * f) / (a * e - b * d)

    x = p1[X] + t * d1[X]
    y = p1[Y] + t * d1[Y]
    if (
        _ratio_negative(x - p1[X], d1[X])
        or _ratio_negative(y - p1[Y], d1[Y])
        or _ratio_negative(x - p2[X], d2[X])
        or _ratio_negative(y - p2[Y], d2[Y])
    ):
        return None
    return Vector(x, y)


def segments_intersect(a: Vector, b: Vector, c: Vector, d: Vector) -> bool:
    """Return True if segments [a b] and [c d] intersect or touch."""
    if RelativePosition.BETWEEN in (
        orientation_2d(a, b, c),
        orientation_2d(a, b, d),
        orientation_2d(c, d, a),
        orientation_2d(c, d, b),
    ):
        return True
    return (is_left(a, b, c) != is_left(a, b, d)) and (is_left(c, d, a) != is_left(c, d, b))


def segment_lines_intersection(a: Vector, b: Vector, c: Vector, d: Vector) -> Vector | None:
    """Return where the lines through [a b] and [c d] cross, or None if parallel."""
    ab = b - a
    cd = d - c
    normal = Vector(cd[Y], -cd[X])
    deno = dot_product(normal, ab)
    if is_equal_d(deno, ZERO):
        return None
    t = dot_product(normal, c - a) / deno
    return Vector(a[X] + t * ab[X], a[Y] + t * ab[Y])


def plane_line_intersection(plane: Plane, line: Line) -> Vector | None:
    """Return where ``line`` meets ``plane``, or None if they are parallel."""
    n = plane.normal
    d = line.direction
    p = line.point
    denominator = dot_product(n, d)
    if is_equal_d(denominator, ZERO):
        return None
    t = (plane.d - dot_product(n, p)) / denominator
    return Vector(p[X] + t * d[X], p[Y] + t * d[Y], p[Z] + t * d[Z])


def planes_intersection(p1: Plane, p2: Plane) -> Line | None:
    """Return the line shared by two planes with unit normals, or None if parallel."""
    n1, n2 = p1.normal, p2.normal
    cross = cross_product_3d(n1, n2)
    if is_equal_d(cross.magnitude(), ZERO):
        return None
    direction = cross.normalized()

    n1n2 = dot_product(n1, n2)
    denom = n1n2 * n1n2 - 1
    a = (p2.d * n1n2 - p1.d) / denom
    b = (p1.d * n1n2 - p2.d) / denom
    return Line(n1 * a + n2 * b, direction)


def line_segment_intersection(line: Line2d, segment: Segment2d) -> Vector | None:
    """Return where ``line`` meets the ray from ``segment.p1`` towards ``segment.p2``."""
    seg_line = Line2d(segment.p1, segment.p2 - segment.p1)
    return lines_2d_intersection(line, seg_line)