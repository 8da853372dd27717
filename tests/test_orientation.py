import pytest

from jyamithika.core import RelativePosition
from jyamithika.line import Line2d, LineStd
from jyamithika.orientation import (
    area_triangle_2d,
    area_triangle_3d,
    is_left,
    is_left_of_line,
    is_right,
    left_or_beyond,
    left_or_between,
    orientation_2d,
    orientation_3d,
)
from jyamithika.point import point2d, point3d
from jyamithika.vector import Vector

A = point2d(0, 0)
B = point2d(2, 0)


def test_area_2d_is_antisymmetric():
    c = point2d(1, 3)
    assert area_triangle_2d(A, B, c) == pytest.approx(-area_triangle_2d(A, c, B))
    assert area_triangle_2d(A, B, c) > 0


def test_area_3d_matches_2d_magnitude_in_plane():
    a, b, c = point3d(0, 0, 0), point3d(4, 1, 0), point3d(1, 3, 0)
    assert area_triangle_3d(a, b, c) == pytest.approx(abs(area_triangle_2d(a, b, c)))
    assert area_triangle_3d(a, c, b) == pytest.approx(area_triangle_3d(a, b, c))


def test_area_3d_unit_right_triangle():
    assert area_triangle_3d(point3d(0, 0, 0), point3d(1, 0, 0), point3d(0, 0, 1)) == pytest.approx(0.5)


@pytest.mark.parametrize(
    "c, expected",
    [
        (point2d(1, 1), RelativePosition.LEFT),
        (point2d(1, -1), RelativePosition.RIGHT),
        (point2d(-1, 0), RelativePosition.BEHIND),
        (point2d(3, 0), RelativePosition.BEYOND),
        (point2d(0, 0), RelativePosition.ORIGIN),
        (point2d(2, 0), RelativePosition.DESTINATION),
        (point2d(1, 0), RelativePosition.BETWEEN),
    ],
)
def test_orientation_2d(c, expected):
    assert orientation_2d(A, B, c) == expected


def test_tiny_positive_area_counts_as_collinear():
    assert orientation_2d(point2d(0, 0), point2d(1, 0), point2d(2, 1e-12)) == RelativePosition.BEYOND


def test_orientation_3d_has_no_right_side():
    a, b = point3d(0, 0, 0), point3d(1, 0, 0)
    assert orientation_3d(a, b, point3d(0, 1, 0)) == RelativePosition.LEFT
    assert orientation_3d(a, b, point3d(0, -1, 0)) == RelativePosition.LEFT
    assert not is_right(a, b, point3d(0, -1, 0))


def test_orientation_3d_collinear():
    a, b = point3d(0, 0, 0), point3d(1, 0, 0)
    assert orientation_3d(a, b, point3d(2, 0, 0)) == RelativePosition.BEYOND
    assert orientation_3d(a, b, point3d(-1, 0, 0)) == RelativePosition.BEHIND
    assert orientation_3d(a, b, point3d(0.5, 0, 0)) == RelativePosition.BETWEEN


def test_left_and_right_2d():
    assert is_left(A, B, point2d(1, 1))
    assert not is_left(A, B, point2d(1, -1))
    assert is_right(A, B, point2d(1, -1))
    assert not is_right(A, B, point2d(1, 1))


def test_left_or_beyond_and_between():
    assert left_or_beyond(A, B, point2d(3, 0))
    assert not left_or_beyond(A, B, point2d(1, 0))
    assert left_or_between(A, B, point2d(1, 0))
    assert not left_or_between(A, B, point2d(3, 0))
    assert left_or_between(point3d(0, 0, 0), point3d(2, 0, 0), point3d(1, 0, 0))


def test_is_left_of_line2d():
    line = Line2d(point2d(0, 0), Vector(1, 0))
    assert is_left_of_line(line, point2d(5, 1))
    assert not is_left_of_line(line, point2d(5, -1))
    assert is_left_of_line(line, point2d(5, 0))


def test_is_left_of_line_std_uses_constant():
    line = LineStd(point2d(0, 0), Vector(1, 0))
    assert is_left_of_line(line, point2d(0, 1))
    line.d = 2.0
    assert not is_left_of_line(line, point2d(0, 1))
    assert is_left_of_line(line, point2d(0, 3))