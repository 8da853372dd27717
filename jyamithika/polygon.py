"""Simple polygons stored as circular doubly linked vertex lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .point import DEFAULT_POINT_2D
from .vector import Vector


class Vertex:
    """A 3D polygon vertex linked to its neighbours."""

    def __init__(
        self,
        point: Vector,
        next: Vertex | None = None,
        prev: Vertex | None = None,
        id: int = 0,
    ) -> None:
        self.point = point
        self.next = next
        self.prev = prev
        self.id = id

    def __repr__(self) -> str:
        return f"Vertex({self.point!r})"


class Vertex2dSimple:
    """A 2D polygon vertex with flags used by ear clipping."""

    def __init__(
        self,
        point: Vector,
        next: Vertex2dSimple | None = None,
        prev: Vertex2dSimple | None = None,
    ) -> None:
        self.point = point
        self.next = next
        self.prev = prev
        self.is_ear = False
        self.is_processed = False

    def __repr__(self) -> str:
        return f"Vertex2dSimple({self.point!r})"


class Edge2dSimple:
    """A 2D edge between two points, with two spare points for callers."""

    def __init__(self, p1: Vector | None = None, p2: Vector | None = None) -> None:
        self.p1 = p1 if p1 is not None else DEFAULT_POINT_2D
        self.p2 = p2 if p2 is not None else DEFAULT_POINT_2D
        self.fp1 = DEFAULT_POINT_2D
        self.fp2 = DEFAULT_POINT_2D

    def __repr__(self) -> str:
        return f"Edge2dSimple({self.p1!r}, {self.p2!r})"


def _link_ring(vertices: list) -> None:
    """Link the vertices into a cycle in list order."""
    count = len(vertices)
    for i, vertex in enumerate(vertices):
        vertex.next = vertices[(i + 1) % count]
        vertex.prev = vertices[i - 1]


def _insert_after_last(vertices: list, new) -> None:
    """Append ``new`` to ``vertices`` and splice it in after the previous last vertex."""
    if not vertices:
        new.next = new
        new.prev = new
        vertices.append(new)
        return
    last = vertices[-1]
    vertices.append(new)
    new.next = last.next
    last.next = new
    new.prev = last
    new.next.prev = new


class Polygon:
    """A 3D polygon whose vertices form a closed ring."""

    def __init__(self, points: Iterable[Vector] = ()) -> None:
        self._vertices: list[Vertex] = [Vertex(p) for p in points]
        _link_ring(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices)

    def __len__(self) -> int:
        return len(self._vertices)

    def insert(self, point: Vector) -> Vertex:
        """Add a vertex after the most recently added one and return it."""
        vertex = Vertex(point)
        _insert_after_last(self._vertices, vertex)
        return vertex

    def points(self) -> list[Vector]:
        """Return the vertex points in storage order."""
        return [v.point for v in self._vertices]


class Polygon2dSimple:
    """A 2D polygon whose vertices form a closed ring."""

    def __init__(self, points: Iterable[Vector] = ()) -> None:
        self._vertices: list[Vertex2dSimple] = [Vertex2dSimple(p) for p in points]
        _link_ring(self._vertices)

    @classmethod
    def from_root(cls, root: Vertex2dSimple) -> Polygon2dSimple:
        """Build a polygon from an already linked ring starting at ``root``."""
        polygon = cls()
        vertex = root
        while True:
            polygon._vertices.append(vertex)
            vertex = vertex.next
            if vertex is root or vertex is None:
                break
        return polygon

    def insert(self, point: Vector) -> Vertex2dSimple:
        """Add a vertex after the most recently added one and return it."""
        vertex = Vertex2dSimple(point)
        _insert_after_last(self._vertices, vertex)
        return vertex

    def remove_vertex(self, vertex: Vertex2dSimple) -> None:
        """Remove ``vertex`` if present, joining its neighbours to each other."""
        for i, candidate in enumerate(self._vertices):
            if candidate is vertex:
                del self._vertices[i]
                break
        else:
            return
        if vertex.prev is not None and vertex.next is not None and vertex.next is not vertex:
            vertex.prev.next = vertex.next
            vertex.next.prev = vertex.prev

    def vertices(self) -> list[Vertex2dSimple]:
        """Return the vertices in storage order."""
        return list(self._vertices)

    def points(self) -> list[Vector]:
        """Return the vertex points in storage order."""
        return [v.point for v in self._vertices]

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex2dSimple]:
        return iter(self._vertices)