# -*- coding: utf-8 -*-
"""
operators/cross_section.py - Hyperplane Cross-Section (Marching Tetrahedra)

TetrahedronMesh in R^{D+1} -> TriangleMesh in R^D: the part of the mesh
lying in the hyperplane where the last coordinate equals
CROSS_SECTION_DEPTH.

A tetrahedron is cut according to which of its vertices lie strictly above
the hyperplane ("positive"):
- 0 or 4 positive: no output.
- 1 positive or 1 negative: one triangle on the three edges of the lone vertex.
- 2 and 2: a quadrilateral, emitted as two triangles.
Every emitted triangle has the handedness of its source tetrahedron.
"""
import logging
from typing import Dict, List, Tuple

from ..mesh import TetrahedronMesh, TriangleMesh
from ..tolerance import CROSS_SECTION_DEPTH

logger = logging.getLogger(__name__)

# Face opposite vertex i, wound clockwise seen from outside when (0, 1, 2)
# faces away from vertex 3.
TETRAHEDRON_FACE_WINDING = ((1, 3, 2), (0, 2, 3), (0, 3, 1), (0, 1, 2))

# 2-2 split: side pattern → (neg1, neg2, pos1, pos2)
TWO_NEGATIVE_ORDER = {
    (False, False, True, True): (0, 1, 2, 3),
    (True, True, False, False): (3, 2, 1, 0),
    (True, False, True, False): (3, 1, 0, 2),
    (False, True, False, True): (0, 2, 3, 1),
    (True, False, False, True): (2, 1, 3, 0),
    (False, True, True, False): (0, 3, 1, 2),
}

Edge = Tuple[int, int]


def _one_negative(i: int) -> List[Tuple[Edge, Edge, Edge]]:
    return [tuple((i, j) for j in TETRAHEDRON_FACE_WINDING[i])]


def _three_negative(i: int) -> List[Tuple[Edge, Edge, Edge]]:
    return [tuple((i, j) for j in reversed(TETRAHEDRON_FACE_WINDING[i]))]


def _two_negative(neg1: int, neg2: int, pos1: int, pos2: int) -> List[Tuple[Edge, Edge, Edge]]:
    return [
        ((neg1, pos2), (neg1, pos1), (neg2, pos2)),
        ((neg1, pos1), (neg2, pos1), (neg2, pos2)),
    ]


def _build_case_table() -> Dict[Tuple[bool, ...], list]:
    """All 16 side patterns → triangles as triples of local edges."""
    table = {
        (False,) * 4: [],
        (True,) * 4: [],
    }
    for i in range(4):
        lone = tuple(k == i for k in range(4))
        table[lone] = _three_negative(i)
        table[tuple(not s for s in lone)] = _one_negative(i)
    for pattern, order in TWO_NEGATIVE_ORDER.items():
        table[pattern] = _two_negative(*order)
    return table


CASE_TABLE = _build_case_table()


def project_edge(vertex1, vertex2):
    """
    Point where the edge crosses the hyperplane, projected one dimension down.

    Interpolates the projections at fraction d₁ / (d₁ - d₂). Undefined
    (division by zero) for edges parallel to the hyperplane.
    """
    depth1 = vertex1.orthographic_depth() - CROSS_SECTION_DEPTH
    depth2 = vertex2.orthographic_depth() - CROSS_SECTION_DEPTH
    fraction = depth1 / (depth1 - depth2)
    return vertex1.project_orthographic().interpolate_with(vertex2.project_orthographic(), fraction)


def cross_section(mesh: TetrahedronMesh) -> TriangleMesh:
    """
    Slice the mesh at CROSS_SECTION_DEPTH.

    Edge intersections are shared: each mesh edge yields at most one output
    vertex, keyed by its (lower, higher) vertex indices.
    """
    vertices = mesh.vertices
    edge_vertex: Dict[Edge, int] = {}
    projected = []

    def intersection(i: int, j: int) -> int:
        key = (min(i, j), max(i, j))
        index = edge_vertex.get(key)
        if index is None:
            projected.append(project_edge(vertices[i], vertices[j]))
            index = len(projected) - 1
            edge_vertex[key] = index
        return index

    sides = [v.orthographic_depth() > CROSS_SECTION_DEPTH for v in vertices]
    triangles = []
    for simplex in mesh.simplexes.tolist():
        pattern = tuple(sides[k] for k in simplex)
        for face in CASE_TABLE[pattern]:
            triangles.append([intersection(simplex[i], simplex[j]) for i, j in face])

    logger.debug("Cross-section: %d tetrahedra -> %d triangles", mesh.n_simplexes, len(triangles))
    return TriangleMesh(vertices=projected, simplexes=triangles)


__all__ = ['TETRAHEDRON_FACE_WINDING', 'CASE_TABLE', 'project_edge', 'cross_section']
