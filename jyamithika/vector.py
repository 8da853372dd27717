"""Fixed-dimension vectors with tolerance-aware equality."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from numbers import Real

from .core import X, Y, Z, is_equal_d


class Vector:
    """An immutable vector of two or more float coordinates."""

    __slots__ = ("_coords",)

    def __init__(self, *coords: float | Iterable[float]) -> None:
        if len(coords) == 1 and not isinstance(coords[0], Real):
            coords = tuple(coords[0])  # type: ignore[arg-type]
        if len(coords) < 2:
            raise ValueError("a vector needs at least two dimensions")
        self._coords: tuple[float, ...] = tuple(float(c) for c in coords)  # type: ignore[arg-type]

    @property
    def dimension(self) -> int:
        return len(self._coords)

    @property
    def x(self) -> float:
        return self[X]

    @property
    def y(self) -> float:
        return self[Y]

    @property
    def z(self) -> float:
        return self[Z]

    def __len__(self) -> int:
        return len(self._coords)

    def __iter__(self) -> Iterator[float]:
        return iter(self._coords)

    def __getitem__(self, index: int) -> float:
        if not 0 <= index < len(self._coords):
            raise IndexError(f"index {index} out of bounds for {len(self._coords)}D vector")
        return self._coords[index]

    def __repr__(self) -> str:
        return f"Vector{self._coords}"

    def _check_same(self, other: Vector) -> None:
        if len(other) != len(self):
            raise ValueError("vectors have different dimensions")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        if len(other) != len(self):
            return False
        return all(is_equal_d(a, b) for a, b in zip(self._coords, other._coords))

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: Vector) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same(other)
        return self._coords < other._coords

    def __gt__(self, other: Vector) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same(other)
        if self == other:
            return False
        return not self < other

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same(other)
        return Vector(a + b for a, b in zip(self._coords, other._coords))

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same(other)
        return Vector(a - b for a, b in zip(self._coords, other._coords))

    def __mul__(self, value: float) -> Vector:
        if not isinstance(value, Real):
            return NotImplemented
        return Vector(c * value for c in self._coords)

    __rmul__ = __mul__

    def magnitude(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.sqrt(sum(c * c for c in self._coords))

    def normalized(self) -> Vector:
        """Return the unit vector in the same direction."""
        mag = self.magnitude()
        if mag == 0.0:
            raise ValueError("cannot normalize a zero-length vector")
        return Vector(c / mag for c in self._coords)

    def replace(self, index: int, value: float) -> Vector:
        """Return a copy with the coordinate at ``index`` set to ``value``."""
        if not 0 <= index < len(self._coords):
            raise IndexError(f"index {index} out of bounds for {len(self._coords)}D vector")
        coords = list(self._coords)
        coords[index] = value
        return Vector(coords)


def dot_product(v1: Vector, v2: Vector) -> float:
    """Return the dot product of two vectors of the same dimension."""
    if len(v1) != len(v2):
        raise ValueError("vectors have different dimensions")
    return sum(a * b for a, b in zip(v1, v2))


def cross_product_3d(a: Vector, b: Vector) -> Vector:
    """Return the cross product of two 3D vectors."""
    if len(a) != 3 or len(b) != 3:
        raise ValueError("cross product needs 3D vectors")
    return Vector(
        a[Y] * b[Z] - b[Y] * a[Z],
        -(b[Z] * a[X] - a[Z] * b[X]),
        a[X] * b[Y] - b[X] * a[Y],
    )


def scalar_triple_product(a: Vector, b: Vector, c: Vector) -> float:
    """Return a . (b x c)."""
    return dot_product(a, cross_product_3d(b, c))


def orthogonal(a: Vector, b: Vector) -> bool:
    """Return True if the two vectors are perpendicular."""
    return is_equal_d(dot_product(a, b), 0.0)


def perpendicular(vec: Vector) -> Vector:
    """Return the 2D vector rotated clockwise by a right angle."""
    return Vector(vec[Y], -vec[X])