# -*- coding: utf-8 -*-
"""
operators/lifting.py - Orthographic Lift and Projection of Meshes

Lift: R^D -> R^{D+1}, every vertex gets `depth` as its new last coordinate.
Project: R^{D+1} -> R^D, the last coordinate is dropped.
Simplex rows are shared unchanged, so lift followed by project is the
identity on positions and topology.
"""
import logging

from ..mesh import SimplexMesh

logger = logging.getLogger(__name__)


def lift_mesh(mesh: SimplexMesh, depth: float) -> SimplexMesh:
    """Same simplexes, vertices lifted to the hyperplane at `depth`."""
    return type(mesh)(
        vertices=[v.lift_orthographic(depth) for v in mesh.vertices],
        simplexes=mesh.simplexes.copy(),
    )


def project_mesh(mesh: SimplexMesh) -> SimplexMesh:
    """
    Flatten onto the hyperplane where the last coordinate is 0.

    Simplexes may become degenerate; use cross_section to slice instead.
    """
    return type(mesh)(
        vertices=[v.project_orthographic() for v in mesh.vertices],
        simplexes=mesh.simplexes.copy(),
    )


def depths(mesh: SimplexMesh) -> list:
    """Orthographic depth (last coordinate) of every vertex."""
    return [v.orthographic_depth() for v in mesh.vertices]


__all__ = ['lift_mesh', 'project_mesh', 'depths']
