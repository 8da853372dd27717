# jyamithika

A small computational geometry library in pure Python, with no dependencies
outside the standard library.

## Modules

- `jyamithika.core`: tolerances (`TOLERANCE`, `TOLERANCEL`, `TOLERANCELL`),
  the comparisons `is_equal_d`, `is_equal_dl` and `is_equal_dll`,
  `radians_to_degrees`, and the enumerations `RelativePosition`,
  `IntersectionOps` and `Winding`.
- `jyamithika.vector`: an immutable `Vector` of two or more coordinates, with
  `+`, `-`, scalar `*`, lexicographic ordering, tolerance-aware equality,
  `magnitude()`, `normalized()` and `replace()`; and the functions
  `dot_product`, `cross_product_3d`, `scalar_triple_product`, `orthogonal` and
  `perpendicular`.
- `jyamithika.point`: `point2d`, `point3d`, the sort keys `lrtb_key` and
  `tblr_key`, and `sort_lrtb`, `sort_tblr`, `sort_by_x`, `sort_by_y`.
- `jyamithika.line`: `Line` (3D, with `Line.through`), `Line2d` (normalized
  direction and `normal()`) and `LineStd` (with `LineStd.from_points`).
- `jyamithika.plane`: `Plane` in the form `n . X = d`, built with
  `from_normal`, `from_normal_and_point` or `from_points`.
- `jyamithika.segment`: `Segment2d` and its `get_x(y)`.
- `jyamithika.bounds`: `AABB` with `contains(point)`, and `BoundRectangle`.
- `jyamithika.polygon`: `Polygon` and `Polygon2dSimple`, rings of linked
  `Vertex` / `Vertex2dSimple` objects, plus `Edge2dSimple`.
- `jyamithika.dcel`: a doubly connected edge list — `PolygonDCEL` with
  `VertexDCEL`, `EdgeDCEL` and `FaceDCEL`. `PolygonDCEL.split(v1, v2)` adds a
  diagonal and returns `False` when the vertices share no bounded face or are
  adjacent. Points must be given in counter-clockwise order; fewer than three
  points give an empty structure.
- `jyamithika.polyhedron`: `Vertex3d`, `Edge3d` and `Face` (a face built from
  three vertices also carries its `Plane`).
- `jyamithika.orientation`: `area_triangle_2d` (signed), `area_triangle_3d`
  (unsigned), `orientation_2d`, `orientation_3d`, `is_left`, `is_right`,
  `is_left_of_line`, `left_or_beyond`, `left_or_between`. Because the 3D area
  has no sign, `orientation_3d` reports `LEFT` for any non-collinear point.
- `jyamithika.intersection`: `lines_2d_intersection`, `segments_intersect`,
  `segment_lines_intersection`, `plane_line_intersection`,
  `planes_intersection` and `line_segment_intersection`. Functions that
  compute a point or line return `None` when there is none.
- `jyamithika.distance`: `point_to_line_through`, `point_to_line`,
  `point_distance` and `plane_point_distance` (signed).
- `jyamithika.angle`: `angle_lines_2d`, `angle_lines_3d`, `angle_line_plane`
  and `angle_planes`, in degrees.
- `jyamithika.geoutils`: `is_diagonal`, `polar_angle`, `face_orientation`,
  `face_visibility`, `angle_between` (radians), `collinear`,
  `collinear_vectors`, `coplanar`, `coplanar_vectors` and `segment_is_left`.
- `jyamithika.monotone`: `VertexCategory`, `categorize_vertex` and
  `get_monotone_polygons`, which partitions a simple polygon into y-monotone
  pieces by a plane sweep.

## Installation

```
pip install .
```

## Example

```python
from jyamithika.point import point2d
from jyamithika.dcel import PolygonDCEL
from jyamithika.monotone import get_monotone_polygons

points = [point2d(0, 0), point2d(4, 0), point2d(4, 4), point2d(2, 1), point2d(0, 4)]
polygon = PolygonDCEL(points)
for piece in get_monotone_polygons(polygon):
    print([tuple(p) for p in piece.faces()[0].points()])
```

`get_monotone_polygons` adds its diagonals to the polygon it is given and
returns each bounded face as a new `PolygonDCEL`. It raises `ValueError` for a
polygon with no vertices.

## What it does not do

This is a library only: it has no command-line tool, does no drawing or
visualization, and reads and writes no files. `PolygonDCEL` can split faces
but not join them again.

## Running the tests

```
pip install .[test]
pytest
```