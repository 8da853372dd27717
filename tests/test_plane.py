import pytest

from jyamithika.plane import Plane
from jyamithika.vector import Vector, dot_product, orthogonal


def test_from_points_contains_points():
    pts = [Vector(1.0, 0.0, 2.0), Vector(0.0, 3.0, 1.0), Vector(-2.0, 1.0, 4.0)]
    plane = Plane.from_points(*pts)
    assert plane.normal.magnitude() == pytest.approx(1.0)
    for p in pts:
        assert dot_product(plane.normal, p) == pytest.approx(plane.d)


def test_from_points_normal_is_orthogonal_to_edges():
    p1, p2, p3 = Vector(0.0, 0.0, 1.0), Vector(2.0, 1.0, 0.0), Vector(1.0, 4.0, 2.0)
    plane = Plane.from_points(p1, p2, p3)
    assert abs(dot_product(plane.normal, p2 - p1)) < 1e-9
    assert abs(dot_product(plane.normal, p3 - p1)) < 1e-9


def test_from_points_collinear_raises():
    with pytest.raises(ValueError):
        Plane.from_points(Vector(0.0, 0.0, 0.0), Vector(1.0, 1.0, 1.0), Vector(2.0, 2.0, 2.0))


def test_from_normal_normalizes():
    plane = Plane.from_normal(Vector(0.0, 0.0, 5.0), 2.0)
    assert plane.normal == Vector(0.0, 0.0, 5.0).normalized()
    assert plane.d == 2.0


def test_from_normal_and_point_keeps_normal():
    normal = Vector(0.0, 2.0, 0.0)
    point = Vector(1.0, 3.0, 7.0)
    plane = Plane.from_normal_and_point(normal, point)
    assert plane.normal == normal
    assert plane.d == pytest.approx(dot_product(normal, point))


def test_equality():
    a = Plane.from_normal(Vector(1.0, 1.0, 0.0), 1.0)
    b = Plane.from_normal(Vector(2.0, 2.0, 0.0), 1.0)
    c = Plane.from_normal(Vector(2.0, 2.0, 0.0), 1.5)
    assert a == b
    assert a != c


def test_default_plane_equal_to_explicit_zero():
    assert Plane() == Plane(Vector(0.0, 0.0, 0.0), 0.0)
    assert orthogonal(Plane().normal, Vector(1.0, 2.0, 3.0))