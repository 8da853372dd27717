"""Orientation predicates and triangle areas."""

from __future__ import annotations

import math
from collections.abc import Callable

from .core import TOLERANCE, X, Y, Z, RelativePosition
from .line import Line2d, LineStd
from .vector import Vector, dot_product


def area_triangle_2d(a: Vector, b: Vector, c: Vector) -> float:
    """Return the signed area of triangle abc projected onto the XY plane.

    The area is positive when a, b, c turn counter-clockwise.
    """
    return 0.5 * ((b[X] - a[X]) * (c[Y] - a[Y]) - (c[X] - a[X]) * (b[Y] - a[Y]))


def area_triangle_3d(a: Vector, b: Vector, c: Vector) -> float:
    """Return the (unsigned) area of the 3D triangle abc."""
    ab = b - a
    ac = c - a
    x_ = ab[Y] * ac[Z] - ab[Z] * ac[Y]
    y_ = ab[X] * ac[Z] - ab[Z] * ac[X]
    z_ = ab[X] * ac[Y] - ab[Y] * ac[X]
    return math.sqrt(x_ * x_ + y_ * y_ + z_ * z_) / 2


def _classify(area: float, a: Vector, b: Vector, c: Vector) -> RelativePosition:
    if 0 < area < TOLERANCE:
        area = 0.0
    ab = b - a
    ac = c - a
    if area > 0.0:
        return RelativePosition.LEFT
    if area < 0.0:
        return RelativePosition.RIGHT
    if ab[X] * ac[X] < 0.0 or ab[Y] * ac[Y] < 0.0:
        return RelativePosition.BEHIND
    if ab.magnitude() < ac.magnitude():
        return RelativePosition.BEYOND
    if a == c:
        return RelativePosition.ORIGIN
    if b == c:
        return RelativePosition.DESTINATION
    return RelativePosition.BETWEEN


def orientation_2d(a: Vector, b: Vector, c: Vector) -> RelativePosition:
    """Return the position of ``c`` relative to the directed segment a->b in 2D."""
    return _classify(area_triangle_2d(a, b, c), a, b, c)


def orientation_3d(a: Vector, b: Vector, c: Vector) -> RelativePosition:
    """Return the position of ``c`` relative to a->b using the unsigned 3D area.

    As the 3D area carries no sign, any non-collinear point reports LEFT.
    """
    return _classify(area_triangle_3d(a, b, c), a, b, c)


def _orientation_for(a: Vector) -> Callable[[Vector, Vector, Vector], RelativePosition]:
    return orientation_2d if len(a) == 2 else orientation_3d


def is_left(a: Vector, b: Vector, c: Vector) -> bool:
    """Return True if ``c`` lies to the left of the directed segment a->b."""
    return _orientation_for(a)(a, b, c) == RelativePosition.LEFT


def is_left_of_line(line: Line2d | LineStd, point: Vector) -> bool:
    """Return True if ``point`` lies on the left of ``line`` or on it."""
    if isinstance(line, LineStd):
        direction = line.direction
        normal = Vector(-direction[Y], direction[X])
        return dot_product(normal, point) - line.d >= 0
    normal = line.normal()
    d = dot_product(normal, line.point)
    return dot_product(normal, point) - d >= 0


def is_right(a: Vector, b: Vector, c: Vector) -> bool:
    """Return True if ``c`` lies to the right of the directed segment a->b."""
    return _orientation_for(a)(a, b, c) == RelativePosition.RIGHT


def left_or_beyond(a: Vector, b: Vector, c: Vector) -> bool:
    """Return True if ``c`` is left of a->b or on its extension past ``b``."""
    position = _orientation_for(a)(a, b, c)
    return position in (RelativePosition.LEFT, RelativePosition.BEYOND)


def left_or_between(a: Vector, b: Vector, c: Vector) -> bool:
    """Return True if ``c`` is left of a->b or strictly between its end points."""
    position = _orientation_for(a)(a, b, c)
    return position in (RelativePosition.LEFT, RelativePosition.BETWEEN)