"""Partition of a simple polygon into y-monotone pieces by plane sweep."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .core import X, Y
from .dcel import EdgeDCEL, PolygonDCEL, VertexDCEL, vertex_tblr_key
from .orientation import is_left
from .vector import Vector


class VertexCategory(Enum):
    """Role of a vertex in the monotone partition sweep."""

    START = "start"
    END = "end"
    REGULAR = "regular"
    SPLIT = "split"
    MERGE = "merge"
    INVALID = "invalid"


def categorize_vertex(vertex: VertexDCEL) -> VertexCategory:
    """Classify ``vertex`` by its neighbours along its incident boundary."""
    v_prev = vertex.incident_edge.prev.origin
    v_next = vertex.incident_edge.next.origin
    if v_prev is None or v_next is None:
        return VertexCategory.INVALID

    p_prev, p, p_next = v_prev.point, vertex.point, v_next.point
    convex = is_left(p_prev, p, p_next)
    if p[Y] > p_prev[Y] and p[Y] > p_next[Y]:
        return VertexCategory.START if convex else VertexCategory.SPLIT
    if p[Y] < p_prev[Y] and p[Y] < p_next[Y]:
        return VertexCategory.END if convex else VertexCategory.MERGE
    return VertexCategory.REGULAR


@dataclass(frozen=True)
class _Event:
    vertex: VertexDCEL
    category: VertexCategory


@dataclass(eq=False)
class _SweepEdge:
    edge: EdgeDCEL
    helper: _Event

    def x_at(self, point: Vector) -> float:
        origin = self.edge.origin.point
        dest = self.edge.twin.origin.point
        denominator = dest[Y] - origin[Y]
        if denominator == 0:
            return point[X]
        return (point[Y] - origin[Y]) * (dest[X] - origin[X]) / denominator + origin[X]


class _Sweep:
    def __init__(self, polygon: PolygonDCEL) -> None:
        self.polygon = polygon
        self.status: list[_SweepEdge] = []
        self.by_edge: dict[EdgeDCEL, _SweepEdge] = {}
        vertices = polygon.vertices()
        # Boundary links are recorded before diagonals are added, as splits rewire them.
        self.prev_edge = {v: v.incident_edge.prev for v in vertices}
        self.prev_vertex = {v: v.incident_edge.prev.origin for v in vertices}
        self.next_vertex = {v: v.incident_edge.next.origin for v in vertices}

    def _add(self, event: _Event) -> None:
        entry = _SweepEdge(event.vertex.incident_edge, event)
        self.status.append(entry)
        self.by_edge[entry.edge] = entry

    def _remove(self, entry: _SweepEdge) -> None:
        self.status = [e for e in self.status if e is not entry]

    def _left_of(self, point: Vector) -> _SweepEdge | None:
        candidates = [e for e in self.status if e.x_at(point) < point[X]]
        return max(candidates, key=lambda e: e.x_at(point), default=None)

    def _close_previous(self, event: _Event) -> None:
        entry = self.by_edge.get(self.prev_edge[event.vertex])
        if entry is None:
            return
        if entry.helper.category is VertexCategory.MERGE:
            self.polygon.split(event.vertex, entry.helper.vertex)
        self._remove(entry)

    def _retarget_left(self, event: _Event, split_always: bool) -> None:
        left = self._left_of(event.vertex.point)
        if left is None:
            return
        if split_always or left.helper.category is VertexCategory.MERGE:
            self.polygon.split(event.vertex, left.helper.vertex)
        left.helper = event

    def handle(self, event: _Event) -> None:
        category = event.category
        if category is VertexCategory.START:
            self._add(event)
        elif category is VertexCategory.END:
            self._close_previous(event)
        elif category is VertexCategory.SPLIT:
            self._retarget_left(event, split_always=True)
            self._add(event)
        elif category is VertexCategory.MERGE:
            self._close_previous(event)
            self._retarget_left(event, split_always=False)
        elif category is VertexCategory.REGULAR:
            vertex = event.vertex
            prev_y = self.prev_vertex[vertex].point[Y]
            next_y = self.next_vertex[vertex].point[Y]
            current_y = vertex.point[Y]
            if prev_y >= current_y >= next_y:
                # Interior lies to the right of the vertex.
                self._close_previous(event)
                self._add(event)
            else:
                self._retarget_left(event, split_always=False)


def get_monotone_polygons(polygon: PolygonDCEL) -> list[PolygonDCEL]:
    """Split ``polygon`` into y-monotone pieces and return them as new polygons.

    Diagonals are added to ``polygon`` itself. Raises ValueError for an empty polygon.
    """
    vertices = polygon.vertices()
    if not vertices:
        raise ValueError("polygon has no vertices")

    events = sorted(
        (_Event(v, categorize_vertex(v)) for v in vertices),
        key=lambda e: vertex_tblr_key(e.vertex),
    )
    sweep = _Sweep(polygon)
    for event in events:
        sweep.handle(event)

    return [PolygonDCEL(face.points()) for face in polygon.faces() if face.outer is not None]