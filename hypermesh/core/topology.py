# -*- coding: utf-8 -*-
"""
topology.py - Orientation and Closedness Checks for Simplicial Meshes

Handedness:
    triangle_sign(p0, p1, p2)      = sign((p0 - p1) ⟂· (p2 - p1))
    tetrahedron_sign(p0..p3)       = sign(((p1 - p0) × (p2 - p0)) · (p3 - p0))
+1 right-handed, -1 left-handed, 0 degenerate.

Closedness of a 3D triangle surface:
- combinatorial: every edge shared by exactly two triangles;
- geometric: a line through the interior crosses the surface an even
  number of times (twice for a convex shell).
"""
from collections import Counter
from typing import Sequence

import numpy as np

from .mesh import TriangleMesh


def _as_array(point) -> np.ndarray:
    if hasattr(point, 'components'):
        return np.asarray(point.components(), dtype=float)
    return np.asarray(point, dtype=float)


def triangle_sign(points: Sequence) -> float:
    p0, p1, p2 = (_as_array(p) for p in points)
    a, b = p0 - p1, p2 - p1
    return float(np.sign(a[0] * b[1] - a[1] * b[0]))


def tetrahedron_sign(points: Sequence) -> float:
    p0, p1, p2, p3 = (_as_array(p) for p in points)
    return float(np.sign(np.dot(np.cross(p1 - p0, p2 - p0), p3 - p0)))


def simplex_sign(points: Sequence) -> float:
    """Handedness of a triangle (2D) or tetrahedron (3D)."""
    if len(points) == 3:
        return triangle_sign(points)
    if len(points) == 4:
        return tetrahedron_sign(points)
    raise ValueError(f"No handedness for a {len(points)}-vertex simplex")


def triangle_mesh_closed(mesh: TriangleMesh) -> bool:
    """
    True if every edge belongs to exactly two triangles.

    Needs unique vertices; a cross-section output generally fails this
    since neighbouring cells do not share intersection vertices.
    """
    edges = Counter()
    for i, j, k in mesh.simplexes.tolist():
        for a, b in ((i, j), (i, k), (j, k)):
            edges[(min(a, b), max(a, b))] += 1
    return all(count == 2 for count in edges.values())


def line_triangle_intersect(triangle: Sequence, direction, offset) -> bool:
    """
    Does the line through `offset` along `direction` pass through the triangle?

    The line is clipped to a segment long enough to reach past the triangle
    on both sides; the segment crosses the triangle's plane when its ends
    see the triangle with opposite handedness, and hits the inside when the
    three edge tests agree.
    """
    p0, p1, p2 = (_as_array(p) for p in triangle)
    direction = _as_array(direction)
    offset = _as_array(offset)

    reach = 2.0 * (max(np.linalg.norm(p) for p in (p0, p1, p2)) + np.linalg.norm(offset))
    direction = direction / np.linalg.norm(direction)
    end1 = offset + reach * direction
    end2 = offset - reach * direction

    opposite_sides = tetrahedron_sign([end1, p0, p1, p2]) != tetrahedron_sign([end2, p0, p1, p2])
    inside_sign = tetrahedron_sign([end1, end2, p0, p1])
    return bool(
        opposite_sides
        and tetrahedron_sign([end1, end2, p1, p2]) == inside_sign
        and tetrahedron_sign([end1, end2, p2, p0]) == inside_sign
    )


def line_intersect_count(mesh: TriangleMesh, direction, offset) -> int:
    """Number of triangles of a 3D mesh crossed by the line."""
    return sum(
        line_triangle_intersect(mesh.simplex_positions(index), direction, offset)
        for index in range(mesh.n_simplexes)
    )


__all__ = [
    'triangle_sign', 'tetrahedron_sign', 'simplex_sign',
    'triangle_mesh_closed', 'line_triangle_intersect', 'line_intersect_count',
]
