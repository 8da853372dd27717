import pytest

from jyamithika.point import DEFAULT_POINT_2D
from jyamithika.polygon import Edge2dSimple, Polygon, Polygon2dSimple, Vertex2dSimple
from jyamithika.vector import Vector

SQUARE = [Vector(0, 0), Vector(1, 0), Vector(1, 1), Vector(0, 1)]


def _ring(start):
    out = [start]
    v = start.next
    while v is not start:
        out.append(v)
        v = v.next
    return out


def test_polygon_points_round_trip():
    pts = [Vector(0, 0, 0), Vector(1, 0, 0), Vector(0, 1, 0)]
    assert Polygon(pts).points() == pts


def test_polygon_ring_is_cyclic():
    poly = Polygon([Vector(0, 0, 0), Vector(1, 0, 0), Vector(0, 1, 0)])
    vertices = list(poly)
    for v in vertices:
        assert v.next.prev is v
        assert v.prev.next is v
    assert vertices[-1].next is vertices[0]


def test_polygon_insert_extends_ring():
    poly = Polygon()
    for p in [Vector(0, 0, 0), Vector(1, 0, 0), Vector(1, 1, 0)]:
        poly.insert(p)
    vertices = list(poly)
    assert len(poly) == 3
    assert _ring(vertices[0]) == vertices
    assert vertices[0].prev is vertices[2]


def test_simple_polygon_points_and_len():
    poly = Polygon2dSimple(SQUARE)
    assert poly.points() == SQUARE
    assert len(poly) == 4


def test_simple_polygon_links():
    poly = Polygon2dSimple(SQUARE)
    vs = poly.vertices()
    assert vs[0].prev is vs[3]
    assert vs[3].next is vs[0]
    assert _ring(vs[0]) == vs


def test_simple_polygon_insert():
    poly = Polygon2dSimple(SQUARE[:3])
    v = poly.insert(SQUARE[3])
    vs = poly.vertices()
    assert vs[2].next is v
    assert v.next is vs[0]
    assert vs[0].prev is v
    assert poly.points() == SQUARE


def test_from_root_walks_ring():
    original = Polygon2dSimple(SQUARE)
    root = original.vertices()[2]
    rebuilt = Polygon2dSimple.from_root(root)
    assert rebuilt.points() == SQUARE[2:] + SQUARE[:2]
    assert rebuilt.vertices()[0] is root


def test_remove_vertex_relinks_neighbours():
    poly = Polygon2dSimple(SQUARE)
    vs = poly.vertices()
    poly.remove_vertex(vs[1])
    assert len(poly) == 3
    assert vs[0].next is vs[2]
    assert vs[2].prev is vs[0]
    assert poly.points() == [SQUARE[0], SQUARE[2], SQUARE[3]]


def test_remove_missing_vertex_is_ignored():
    poly = Polygon2dSimple(SQUARE)
    poly.remove_vertex(Vertex2dSimple(Vector(5, 5)))
    assert poly.points() == SQUARE


def test_vertices_returns_copy():
    poly = Polygon2dSimple(SQUARE)
    poly.vertices().clear()
    assert len(poly) == 4


def test_vertex_flags_default_false():
    v = Vertex2dSimple(Vector(1, 2))
    assert (v.is_ear, v.is_processed, v.next, v.prev) == (False, False, None, None)


@pytest.mark.parametrize("args", [(), (Vector(1, 2), Vector(3, 4))])
def test_edge_simple_defaults(args):
    edge = Edge2dSimple(*args)
    assert edge.fp1 == DEFAULT_POINT_2D
    if args:
        assert (edge.p1, edge.p2) == args
    else:
        assert edge.p1 == DEFAULT_POINT_2D