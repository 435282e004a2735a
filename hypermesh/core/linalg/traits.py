# -*- coding: utf-8 -*-
"""
linalg/traits.py - Abstract Vector and Matrix Interfaces

The mesh and rotor code only talks to these interfaces, so any vector type
providing them can be plugged in. `hypermesh.core.linalg.numeric` ships a
numpy-backed implementation.

Associated types are class attributes:
    Vector2.vector3_type              (lift)
    Vector3.vector2_type / vector4_type
    Vector4.vector3_type / matrix4_type
    Matrix4.vector4_type
"""
from abc import ABC, abstractmethod
from typing import ClassVar, Optional, Sequence, Tuple, Type
import math

from ..algebra.bivector import Bivec4


class Vector(ABC):
    """Fixed-size real vector with the usual linear operations."""

    dimension: ClassVar[int] = 0

    @classmethod
    @abstractmethod
    def new(cls, *components: float) -> 'Vector':
        """Construct from exactly `dimension` components."""
        pass

    @abstractmethod
    def components(self) -> Tuple[float, ...]:
        pass

    @classmethod
    def zero(cls) -> 'Vector':
        return cls.new(*([0.0] * cls.dimension))

    @classmethod
    def from_components(cls, components: Sequence[float]) -> 'Vector':
        return cls.new(*components)

    # === Arithmetic ===

    def __add__(self, other: 'Vector') -> 'Vector':
        if not isinstance(other, Vector):
            return NotImplemented
        return self.new(*(a + b for a, b in zip(self.components(), other.components())))

    def __sub__(self, other: 'Vector') -> 'Vector':
        if not isinstance(other, Vector):
            return NotImplemented
        return self.new(*(a - b for a, b in zip(self.components(), other.components())))

    def __neg__(self) -> 'Vector':
        return self.new(*(-a for a in self.components()))

    def __mul__(self, scalar: float) -> 'Vector':
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return self.new(*(a * scalar for a in self.components()))

    def __rmul__(self, scalar: float) -> 'Vector':
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> 'Vector':
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return self.new(*(a / scalar for a in self.components()))

    # === Metric ===

    def dot(self, other: 'Vector') -> float:
        return sum(a * b for a, b in zip(self.components(), other.components()))

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalized(self) -> 'Vector':
        return self / self.length()

    def interpolate_with(self, other: 'Vector', fraction: float) -> 'Vector':
        """Linear interpolation: self at 0, other at 1."""
        return self + (other - self) * fraction


class Vector2(Vector):
    dimension = 2
    vector3_type: ClassVar[Optional[Type['Vector3']]] = None

    @property
    @abstractmethod
    def x(self) -> float:
        pass

    @property
    @abstractmethod
    def y(self) -> float:
        pass

    def perp_dot(self, other: 'Vector2') -> float:
        """z-component of the 3D cross product of the two vectors."""
        return self.x * other.y - self.y * other.x


class Vector3(Vector):
    dimension = 3
    vector2_type: ClassVar[Optional[Type[Vector2]]] = None
    vector4_type: ClassVar[Optional[Type['Vector4']]] = None

    @property
    @abstractmethod
    def x(self) -> float:
        pass

    @property
    @abstractmethod
    def y(self) -> float:
        pass

    @property
    @abstractmethod
    def z(self) -> float:
        pass

    def cross(self, other: 'Vector3') -> 'Vector3':
        return self.new(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )


class Vector4(Vector):
    dimension = 4
    vector3_type: ClassVar[Optional[Type[Vector3]]] = None
    matrix4_type: ClassVar[Optional[Type['Matrix4']]] = None

    @property
    @abstractmethod
    def x(self) -> float:
        pass

    @property
    @abstractmethod
    def y(self) -> float:
        pass

    @property
    @abstractmethod
    def z(self) -> float:
        pass

    @property
    @abstractmethod
    def w(self) -> float:
        pass

    def wedge(self, other: 'Vector4') -> Bivec4:
        """a∧b: the oriented plane spanned by a and b, scaled by the parallelogram area."""
        return Bivec4(
            xy=self.x * other.y - self.y * other.x,
            xz=self.x * other.z - self.z * other.x,
            xw=self.x * other.w - self.w * other.x,
            yz=self.y * other.z - self.z * other.y,
            wy=self.w * other.y - self.y * other.w,
            zw=self.z * other.w - self.w * other.z,
        )


class Matrix4(ABC):
    """4×4 real matrix acting on Vector4 by left multiplication."""

    vector4_type: ClassVar[Optional[Type[Vector4]]] = None

    @classmethod
    @abstractmethod
    def identity(cls) -> 'Matrix4':
        pass

    @classmethod
    @abstractmethod
    def from_array(cls, columns: Sequence[Sequence[float]]) -> 'Matrix4':
        """Build from column-major nested lists: columns[j][i] is row i of column j."""
        pass

    @abstractmethod
    def __matmul__(self, other):
        """Matrix × vector or matrix × matrix."""
        pass

    def transform(self, vector: Vector4) -> Vector4:
        return self @ vector


__all__ = ['Vector', 'Vector2', 'Vector3', 'Vector4', 'Matrix4']
