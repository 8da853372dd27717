"""Planes in normal-point form n . X = d."""

from __future__ import annotations

from dataclasses import dataclass, field

from .core import is_equal_d
from .vector import Vector, cross_product_3d, dot_product


@dataclass(eq=False)
class Plane:
    """A plane with normal ``normal`` and constant ``d``."""

    normal: Vector = field(default_factory=lambda: Vector(0.0, 0.0, 0.0))
    d: float = 0.0

    @classmethod
    def from_normal(cls, normal: Vector, d: float = 0.0) -> Plane:
        """Return a plane with the normalized ``normal`` and constant ``d``."""
        return cls(normal.normalized(), d)

    @classmethod
    def from_normal_and_point(cls, normal: Vector, point: Vector) -> Plane:
        """Return the plane with ``normal`` (kept as given) through ``point``."""
        return cls(normal, dot_product(normal, point))

    @classmethod
    def from_points(cls, p1: Vector, p2: Vector, p3: Vector) -> Plane:
        """Return the plane through three points with a unit normal."""
        normal = cross_product_3d(p2 - p1, p3 - p1).normalized()
        return cls(normal, dot_product(normal, p1))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Plane):
            return NotImplemented
        return self.normal == other.normal and is_equal_d(self.d, other.d)

    __hash__ = None  # type: ignore[assignment]