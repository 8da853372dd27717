"""Predicates on polygons, faces and vectors."""

from __future__ import annotations

import math

from .core import ZERO, X, Y, Z, Winding, is_equal_d, is_equal_dl, radians_to_degrees
from .intersection import segments_intersect
from .orientation import is_left, left_or_beyond
from .plane import Plane
from .polygon import Polygon2dSimple, Vertex2dSimple
from .polyhedron import Face
from .segment import Segment2d
from .vector import Vector, dot_product, scalar_triple_product


def _in_cone(v1: Vertex2dSimple, v2: Vertex2dSimple) -> bool:
    """Return True if ``v2`` lies inside the interior angle at ``v1``."""
    if left_or_beyond(v1.point, v1.next.point, v1.prev.point):
        # Convex vertex.
        return is_left(v1.point, v2.point, v1.prev.point) and is_left(
            v2.point, v1.point, v1.next.point
        )
    # Reflex vertex.
    return not (
        left_or_beyond(v1.point, v2.point, v1.next.point)
        and left_or_beyond(v2.point, v1.point, v1.prev.point)
    )


def _ring_from(start: Vertex2dSimple) -> list[Vertex2dSimple]:
    ring = [start]
    vertex = start.next
    while vertex is not start:
        ring.append(vertex)
        vertex = vertex.next
    return ring


def is_diagonal(
    v1: Vertex2dSimple, v2: Vertex2dSimple, polygon: Polygon2dSimple | None = None
) -> bool:
    """Return True if the segment v1-v2 is a diagonal of the polygon.

    Without ``polygon`` the ring is walked starting from ``v1``.
    """
    vertices = polygon.vertices() if polygon is not None else _ring_from(v1)
    first = vertices[0]
    current = first
    while True:
        following = current.next
        touches = current in (v1, v2) or following in (v1, v2)
        if not touches and segments_intersect(
            v1.point, v2.point, current.point, following.point
        ):
            return False
        current = following
        if current is first:
            break
    return _in_cone(v1, v2) and _in_cone(v2, v1)


def polar_angle(other: Vector, ref: Vector) -> float:
    """Return the counter-clockwise angle in degrees (0 to 360) from ``ref`` to ``other``.

    Coincident points give -1.
    """
    dx = other[X] - ref[X]
    dy = other[Y] - ref[Y]
    if is_equal_d(dx, 0.0) and is_equal_d(dy, 0.0):
        return -1.0
    if is_equal_d(dx, 0.0):
        return 90.0 if dy > 0.0 else 270.0
    theta = radians_to_degrees(math.atan(dy / dx))
    if dx > 0.0:
        return theta if dy >= 0.0 else 360.0 + theta
    return 180.0 + theta


def face_orientation(face: Face, point: Vector) -> Winding:
    """Return how the face's vertices wind when seen from ``point``."""
    points = [v.point for v in face.vertices]
    plane = Plane.from_points(points[0], points[1], points[2])
    winding = dot_product(plane.normal, points[0] - point)
    return Winding.CCW if winding < ZERO else Winding.CW


def face_visibility(face: Face, point: Vector) -> float:
    """Return the signed volume spanned by the face's first three vertices and ``point``."""
    p1, p2, p3 = (v.point for v in face.vertices[:3])
    return scalar_triple_product(p2 - p1, p3 - p1, point - p1)


def angle_between(v1: Vector, v2: Vector) -> float:
    """Return the angle between two vectors in radians."""
    dot = dot_product(v1, v2)
    denominator = v1.magnitude() * v2.magnitude()
    if is_equal_dl(dot, denominator):
        return 0.0
    return math.acos(max(-1.0, min(1.0, dot / denominator)))


def collinear_vectors(a: Vector, b: Vector) -> bool:
    """Return True if two 3D vectors are parallel."""
    v1 = a[X] * b[Y] - a[Y] * b[X]
    v2 = a[Y] * b[Z] - a[Z] * b[Y]
    v3 = a[X] * b[Z] - a[Z] * b[X]
    return is_equal_d(v1, ZERO) and is_equal_d(v2, ZERO) and is_equal_d(v3, ZERO)


def collinear(a: Vector, b: Vector, c: Vector) -> bool:
    """Return True if three 3D points lie on one line."""
    return collinear_vectors(b - a, c - a)


def coplanar_vectors(v1: Vector, v2: Vector, v3: Vector) -> bool:
    """Return True if three 3D vectors are parallel to one plane."""
    return is_equal_d(scalar_triple_product(v1, v2, v3), ZERO)


def coplanar(a: Vector, b: Vector, c: Vector, d: Vector) -> bool:
    """Return True if four 3D points lie in one plane."""
    return coplanar_vectors(b - a, c - a, d - a)


def segment_is_left(base: Segment2d, compare: Segment2d, point: Vector) -> bool:
    """Return True if ``base`` lies left of ``compare`` at the height of ``point``."""
    return base.get_x(point[Y]) < compare.get_x(point[Y])