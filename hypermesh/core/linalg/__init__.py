"""
linalg package - Vector/matrix interfaces and the numpy implementation
"""

from .traits import Vector, Vector2, Vector3, Vector4, Matrix4
from .numeric import Vec2, Vec3, Vec4, Mat4

__all__ = [
    "Vector", "Vector2", "Vector3", "Vector4", "Matrix4",
    "Vec2", "Vec3", "Vec4", "Mat4",
]
