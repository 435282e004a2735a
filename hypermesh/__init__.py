"""
hypermesh - 4D rotations and simplicial meshes.

Core modules:
- hypermesh.core.algebra: Bivec4, Rotor4
- hypermesh.core.transform: RotateScaleTranslate4, AffineTransform
- hypermesh.core.mesh: TriangleMesh, TetrahedronMesh (extrude, cross_section)
"""

from hypermesh.core import (
    Bivec4, SimpleBivec4, ScalarPlusQuadvec4, Rotor4,
    RotateScaleTranslate4, AffineTransform,
    Vertex2, Vertex3, Vertex4, TriangleMesh, TetrahedronMesh,
    Vec2, Vec3, Vec4, Mat4,
    NotSimpleError, NotInvertibleError,
)

__version__ = "0.1.0"
__all__ = [
    "Bivec4", "SimpleBivec4", "ScalarPlusQuadvec4", "Rotor4",
    "RotateScaleTranslate4", "AffineTransform",
    "Vertex2", "Vertex3", "Vertex4", "TriangleMesh", "TetrahedronMesh",
    "Vec2", "Vec3", "Vec4", "Mat4",
    "NotSimpleError", "NotInvertibleError",
]
