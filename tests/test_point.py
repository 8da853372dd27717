from jyamithika.point import (
    DEFAULT_POINT_2D,
    DEFAULT_POINT_3D,
    lrtb_key,
    point2d,
    point3d,
    sort_by_x,
    sort_by_y,
    sort_lrtb,
    sort_tblr,
    tblr_key,
)


def test_point_constructors():
    p = point2d(1.5, -2.0)
    q = point3d(1.0, 2.0, 3.0)
    assert (p[0], p[1]) == (1.5, -2.0)
    assert list(q) == [1.0, 2.0, 3.0]


def test_default_points_sort_to_the_extremes():
    p = point2d(1.0, 2.0)
    assert sort_by_x([DEFAULT_POINT_2D, p]) == [p, DEFAULT_POINT_2D]
    q = point3d(0.0, 0.0, 0.0)
    assert sort_tblr([q, DEFAULT_POINT_3D]) == [DEFAULT_POINT_3D, q]


def test_sort_lrtb_breaks_ties_by_y():
    a = point2d(1.0, 5.0)
    b = point2d(0.0, 3.0)
    c = point2d(1.0, 2.0)
    assert sort_lrtb([a, b, c]) == [b, c, a]


def test_sort_tblr_breaks_ties_by_x():
    a = point2d(3.0, 1.0)
    b = point2d(2.0, 4.0)
    c = point2d(-1.0, 4.0)
    assert sort_tblr([a, b, c]) == [c, b, a]


def test_sort_tblr_works_for_3d_points():
    a = point3d(0.0, 1.0, 9.0)
    b = point3d(0.0, 2.0, 0.0)
    assert sort_tblr([a, b]) == [b, a]


def test_sort_by_x_and_y():
    a = point2d(2.0, 0.0)
    b = point2d(1.0, 5.0)
    c = point2d(3.0, -1.0)
    assert sort_by_x([a, b, c]) == [b, a, c]
    assert sort_by_y([a, b, c]) == [c, a, b]


def test_keys_agree_with_sorts():
    pts = [point2d(2.0, 1.0), point2d(2.0, -1.0), point2d(0.0, 7.0)]
    assert sort_lrtb(pts) == sorted(pts, key=lrtb_key)
    assert sort_tblr(pts) == sorted(pts, key=tblr_key)


def test_sorts_do_not_modify_input():
    pts = [point2d(2.0, 1.0), point2d(1.0, 1.0)]
    original = list(pts)
    sort_lrtb(pts)
    assert pts == original