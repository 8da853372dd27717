"""Doubly connected edge list for planar polygons."""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator

from .core import X, Y
from .vector import Vector

_edge_ids = itertools.count(1)


class VertexDCEL:
    """A vertex with its point and one outgoing half-edge."""

    def __init__(self, point: Vector) -> None:
        self.point = point
        self.incident_edge: EdgeDCEL | None = None

    def __repr__(self) -> str:
        return f"VertexDCEL({self.point!r})"


class EdgeDCEL:
    """A half-edge; ``id`` is -1 for an edge without an origin."""

    def __init__(self, origin: VertexDCEL | None = None) -> None:
        self.origin = origin
        self.twin: EdgeDCEL | None = None
        self.next: EdgeDCEL | None = None
        self.prev: EdgeDCEL | None = None
        self.incident_face: FaceDCEL | None = None
        self.id = next(_edge_ids) if origin is not None else -1

    def destination(self) -> VertexDCEL:
        """Return the vertex this half-edge points to."""
        return self.twin.origin

    def __repr__(self) -> str:
        return f"EdgeDCEL(id={self.id}, origin={self.origin!r})"


def _cycle(start: EdgeDCEL) -> Iterator[EdgeDCEL]:
    """Yield the half-edges of the cycle beginning at ``start``."""
    edge = start
    while True:
        yield edge
        edge = edge.next
        if edge is start:
            return


class FaceDCEL:
    """A face bounded by ``outer`` with hole boundaries in ``inner``."""

    def __init__(self) -> None:
        self.outer: EdgeDCEL | None = None
        self.inner: list[EdgeDCEL] = []

    def edges(self) -> list[EdgeDCEL]:
        """Return the half-edges around the outer boundary."""
        return list(_cycle(self.outer)) if self.outer is not None else []

    def points(self) -> list[Vector]:
        """Return the points of the outer boundary in order."""
        return [e.origin.point for e in self.edges()]

    def __repr__(self) -> str:
        return f"FaceDCEL({self.points()!r})"


def _outgoing(vertex: VertexDCEL) -> Iterator[EdgeDCEL]:
    """Yield every half-edge whose origin is ``vertex``."""
    start = vertex.incident_edge
    edge = start
    while True:
        yield edge
        edge = edge.twin.next
        if edge is start:
            return


class PolygonDCEL:
    """A polygon held as a DCEL; the points must be counter-clockwise.

    Fewer than three points give an empty structure.
    """

    def __init__(self, points: Iterable[Vector]) -> None:
        points = list(points)
        self._vertices: list[VertexDCEL] = []
        self._edges: list[EdgeDCEL] = []
        self._faces: list[FaceDCEL] = []
        if len(points) < 3:
            return

        self._vertices = [VertexDCEL(p) for p in points]
        count = len(self._vertices)
        ccw: list[EdgeDCEL] = []
        cw: list[EdgeDCEL] = []
        for i, vertex in enumerate(self._vertices):
            half = EdgeDCEL(vertex)
            twin = EdgeDCEL(self._vertices[(i + 1) % count])
            vertex.incident_edge = half
            half.twin = twin
            twin.twin = half
            ccw.append(half)
            cw.append(twin)
            self._edges.extend((half, twin))

        for i in range(count):
            ccw[i].next = ccw[(i + 1) % count]
            ccw[i].prev = ccw[i - 1]
            cw[i].next = cw[i - 1]
            cw[i].prev = cw[(i + 1) % count]

        inside = FaceDCEL()
        outside = FaceDCEL()
        inside.outer = ccw[0]
        outside.inner.append(cw[0])
        self._faces = [inside, outside]
        for edge in _cycle(ccw[0]):
            edge.incident_face = inside
        for edge in _cycle(cw[0]):
            edge.incident_face = outside

    def _edges_on_common_face(
        self, v1: VertexDCEL, v2: VertexDCEL
    ) -> tuple[EdgeDCEL, EdgeDCEL] | None:
        for e1 in _outgoing(v1):
            for e2 in _outgoing(v2):
                if e1.incident_face.outer is not None and e1.incident_face is e2.incident_face:
                    return e1, e2
        return None

    def split(self, v1: VertexDCEL, v2: VertexDCEL) -> bool:
        """Add the diagonal v1-v2, splitting their common bounded face in two.

        Return False if the vertices share no bounded face or are adjacent.
        """
        found = self._edges_on_common_face(v1, v2)
        if found is None:
            return False
        e1, e2 = found
        if e1.next.origin is v2 or e1.prev.origin is v2:
            return False

        previous_face = e1.incident_face
        h1 = EdgeDCEL(v1)
        h2 = EdgeDCEL(v2)
        h1.twin = h2
        h2.twin = h1
        h1.next = e2
        h2.next = e1
        h1.prev = e1.prev
        h2.prev = e2.prev
        h1.next.prev = h1
        h2.next.prev = h2
        h1.prev.next = h1
        h2.prev.next = h2

        for half in (h1, h2):
            face = FaceDCEL()
            face.outer = half
            for edge in _cycle(half):
                edge.incident_face = face
            self._faces.append(face)

        self._faces = [f for f in self._faces if f is not previous_face]
        return True

    def vertices(self) -> list[VertexDCEL]:
        """Return all vertices in input order."""
        return list(self._vertices)

    def faces(self) -> list[FaceDCEL]:
        """Return all faces, the unbounded one included."""
        return list(self._faces)

    def edges(self) -> list[EdgeDCEL]:
        """Return the half-edges created from the polygon boundary."""
        return list(self._edges)

    def get_vertex(self, point: Vector) -> VertexDCEL | None:
        """Return the first vertex at ``point``, or None."""
        return next((v for v in self._vertices if v.point == point), None)


def vertex_tblr_key(vertex: VertexDCEL) -> tuple[float, float]:
    """Sort key: top to bottom, then left to right."""
    return (-vertex.point[Y], vertex.point[X])