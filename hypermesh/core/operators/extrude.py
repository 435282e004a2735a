# -*- coding: utf-8 -*-
"""
operators/extrude.py - Triangle Prism Extrusion

TriangleMesh in R^D -> TetrahedronMesh in R^{D+1}, centered on 0 in the
new dimension.
"""
import logging

import numpy as np

from ..mesh import TetrahedronMesh, TriangleMesh

logger = logging.getLogger(__name__)


def extrude(mesh: TriangleMesh, height: float) -> TetrahedronMesh:
    """
    Sweep every triangle (a, b, c) across the new dimension.

    Vertices 0..n-1 are the originals lifted to -height/2, n..2n-1 their
    copies (a', b', c') at +height/2. Each triangular prism is cut into
        (a, c, b, a'), (c, b, a', c'), (a', b', c', b)
    which all share the handedness of the source triangle, so a
    cross-section of the result gives back the input winding.
    """
    half = height / 2.0
    n = mesh.n_vertices
    vertices = ([v.lift_orthographic(-half) for v in mesh.vertices]
                + [v.lift_orthographic(half) for v in mesh.vertices])

    a, b, c = mesh.simplexes[:, 0], mesh.simplexes[:, 1], mesh.simplexes[:, 2]
    a2, b2, c2 = a + n, b + n, c + n
    # Interleave the three tetrahedra of each prism
    simplexes = np.stack([
        np.stack([a, c, b, a2], axis=1),
        np.stack([c, b, a2, c2], axis=1),
        np.stack([a2, b2, c2, b], axis=1),
    ], axis=1).reshape(-1, 4)

    logger.debug("Extruded %d triangles into %d tetrahedra", mesh.n_simplexes, len(simplexes))
    return TetrahedronMesh(vertices=vertices, simplexes=simplexes)


__all__ = ['extrude']
