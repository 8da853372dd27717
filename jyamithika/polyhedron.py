"""Vertices, edges and triangular faces of polyhedra."""

from __future__ import annotations

from .plane import Plane
from .vector import Vector


class Vertex3d:
    """A polyhedron vertex referring to a point."""

    def __init__(self, point: Vector | None = None) -> None:
        self.point = point
        self.processed = False

    def __repr__(self) -> str:
        return f"Vertex3d({self.point!r})"


class Edge3d:
    """An edge between two vertices with up to two adjacent faces."""

    def __init__(self, v1: Vertex3d, v2: Vertex3d) -> None:
        self.vertices: list[Vertex3d] = [v1, v2]
        self.faces: list[Face | None] = [None, None]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge3d):
            return NotImplemented
        return (
            self.vertices[0].point == other.vertices[0].point
            and self.vertices[1].point == other.vertices[1].point
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Edge3d({self.vertices[0]!r}, {self.vertices[1]!r})"


class Face:
    """A polyhedron face; three vertices also define its plane."""

    def __init__(
        self,
        v1: Vertex3d | None = None,
        v2: Vertex3d | None = None,
        v3: Vertex3d | None = None,
    ) -> None:
        self.edges: list[Edge3d] = []
        self.vertices: list[Vertex3d] = []
        self.plane = Plane()
        self.visible = False
        self.normal_switch_needed = False
        if v1 is not None and v2 is not None and v3 is not None:
            self.vertices = [v1, v2, v3]
            self.plane = Plane.from_points(v1.point, v2.point, v3.point)

    def add_edge(self, edge: Edge3d) -> None:
        """Record ``edge`` as bounding this face."""
        self.edges.append(edge)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Face):
            return NotImplemented
        if len(self.vertices) != len(other.vertices):
            return False
        return all(a.point is b.point for a, b in zip(self.vertices, other.vertices))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Face({self.vertices!r})"