# -*- coding: utf-8 -*-
"""
linalg/numeric.py - numpy-backed Vec2/Vec3/Vec4/Mat4

Reference implementation of the vector interfaces. Values are stored as
float64 arrays and treated as immutable.
"""
from typing import Sequence, Tuple

import numpy as np

from .traits import Matrix4, Vector, Vector2, Vector3, Vector4


class _ArrayVector(Vector):
    """Shared storage and numpy arithmetic for the concrete vector types."""

    def __init__(self, *components: float):
        data = np.array(components, dtype=float)
        if data.shape != (self.dimension,):
            raise ValueError(f"{type(self).__name__} needs {self.dimension} components, got {len(components)}")
        data.flags.writeable = False
        self._data = data

    @classmethod
    def new(cls, *components: float) -> 'Vector':
        return cls(*components)

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> 'Vector':
        return cls(*np.asarray(array, dtype=float).tolist())

    def components(self) -> Tuple[float, ...]:
        return tuple(self._data.tolist())

    def to_numpy(self) -> np.ndarray:
        return self._data.copy()

    def __iter__(self):
        return iter(self._data.tolist())

    def __len__(self):
        return self.dimension

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.from_numpy(self._data + np.asarray(other.components()))

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.from_numpy(self._data - np.asarray(other.components()))

    def __neg__(self):
        return self.from_numpy(-self._data)

    def __mul__(self, scalar):
        if not isinstance(scalar, (int, float, np.floating)):
            return NotImplemented
        return self.from_numpy(self._data * float(scalar))

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __truediv__(self, scalar):
        if not isinstance(scalar, (int, float, np.floating)):
            return NotImplemented
        return self.from_numpy(self._data / float(scalar))

    def dot(self, other: Vector) -> float:
        return float(np.dot(self._data, np.asarray(other.components())))

    def length(self) -> float:
        return float(np.linalg.norm(self._data))

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return type(self) is type(other) and np.array_equal(self._data, np.asarray(other.components()))

    __hash__ = None

    def __repr__(self):
        return f"{type(self).__name__}({', '.join(f'{v:.6g}' for v in self._data)})"


class Vec2(_ArrayVector, Vector2):
    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])


class Vec3(_ArrayVector, Vector3):
    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    @property
    def z(self) -> float:
        return float(self._data[2])

    def cross(self, other: Vector3) -> 'Vec3':
        return Vec3.from_numpy(np.cross(self._data, np.asarray(other.components())))


class Vec4(_ArrayVector, Vector4):
    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    @property
    def z(self) -> float:
        return float(self._data[2])

    @property
    def w(self) -> float:
        return float(self._data[3])


class Mat4(Matrix4):
    """
    4×4 matrix over a row-major float64 array.

    `from_array` takes columns, matching `Rotor4.into_mat4_array()`.
    """

    def __init__(self, data: np.ndarray):
        data = np.array(data, dtype=float)
        if data.shape != (4, 4):
            raise ValueError(f"Mat4 needs a (4, 4) array, got {data.shape}")
        data.flags.writeable = False
        self._data = data

    @classmethod
    def identity(cls) -> 'Mat4':
        return cls(np.eye(4))

    @classmethod
    def from_array(cls, columns: Sequence[Sequence[float]]) -> 'Mat4':
        return cls(np.asarray(columns, dtype=float).T)

    def to_array(self):
        """Column-major nested lists, inverse of `from_array`."""
        return self._data.T.tolist()

    def to_numpy(self) -> np.ndarray:
        return self._data.copy()

    def __matmul__(self, other):
        if isinstance(other, Mat4):
            return Mat4(self._data @ other._data)
        if isinstance(other, Vector4):
            return type(other).new(*(self._data @ np.asarray(other.components())).tolist())
        return NotImplemented

    def __mul__(self, scalar):
        if not isinstance(scalar, (int, float, np.floating)):
            return NotImplemented
        return Mat4(self._data * float(scalar))

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __eq__(self, other):
        if not isinstance(other, Mat4):
            return NotImplemented
        return np.array_equal(self._data, other._data)

    __hash__ = None

    def __repr__(self):
        return f"Mat4({self._data.tolist()})"


Vec2.vector3_type = Vec3
Vec3.vector2_type = Vec2
Vec3.vector4_type = Vec4
Vec4.vector3_type = Vec3
Vec4.matrix4_type = Mat4
Mat4.vector4_type = Vec4


__all__ = ['Vec2', 'Vec3', 'Vec4', 'Mat4']
