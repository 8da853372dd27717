import pytest

from jyamithika.bounds import AABB, BoundRectangle
from jyamithika.vector import Vector


@pytest.fixture
def box():
    return AABB(x_min=-1.0, x_max=2.0, y_min=0.0, y_max=3.0)


def test_contains_interior_point(box):
    assert box.contains(Vector(0.5, 1.5))


def test_contains_boundary_points(box):
    assert box.contains(Vector(box.x_min, box.y_min))
    assert box.contains(Vector(box.x_max, box.y_max))


@pytest.mark.parametrize("point", [Vector(-1.5, 1.0), Vector(2.5, 1.0), Vector(0.0, -0.1), Vector(0.0, 3.1)])
def test_rejects_outside_points(box, point):
    assert not box.contains(point)


def test_contains_accepts_3d_points(box):
    assert box.contains(Vector(0.0, 1.0, 100.0))


def test_bound_rectangle_defaults_and_fields():
    assert BoundRectangle() == BoundRectangle(0.0, 0.0, 0.0, 0.0)
    rect = BoundRectangle(left_x=1.0, right_x=4.0, top_y=5.0, bot_y=2.0)
    assert (rect.left_x, rect.right_x, rect.top_y, rect.bot_y) == (1.0, 4.0, 5.0, 2.0)