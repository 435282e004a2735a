# -*- coding: utf-8 -*-
"""
operators package - Mesh operations

Lifting/projection between dimensions, extrusion, and cross-section.
"""

from .lifting import lift_mesh, project_mesh, depths
from .extrude import extrude
from .cross_section import cross_section, project_edge, TETRAHEDRON_FACE_WINDING

__all__ = [
    "lift_mesh", "project_mesh", "depths",
    "extrude",
    "cross_section", "project_edge", "TETRAHEDRON_FACE_WINDING",
]
