"""
hypermesh core - geometric algebra and meshes in four dimensions.
"""

from hypermesh.core.base import NotInvertibleError, NotSimpleError, Transform
from hypermesh.core.algebra import Bivec4, SimpleBivec4, ScalarPlusQuadvec4, Rotor4
from hypermesh.core.linalg import Vec2, Vec3, Vec4, Mat4
from hypermesh.core.transform import RotateScaleTranslate4, AffineTransform
from hypermesh.core.mesh import Vertex2, Vertex3, Vertex4, TriangleMesh, TetrahedronMesh

__all__ = [
    "NotInvertibleError", "NotSimpleError", "Transform",
    "Bivec4", "SimpleBivec4", "ScalarPlusQuadvec4", "Rotor4",
    "Vec2", "Vec3", "Vec4", "Mat4",
    "RotateScaleTranslate4", "AffineTransform",
    "Vertex2", "Vertex3", "Vertex4", "TriangleMesh", "TetrahedronMesh",
]
