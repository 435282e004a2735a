# -*- coding: utf-8 -*-
"""
transform.py - Composite Transforms for Points and Vertices

RotateScaleTranslate4: p ↦ rotate(p)·scale + translation, closed under
composition and interpolation.

AffineTransform: p ↦ A·p + b in any dimension, with inverse. Usable
wherever a mesh takes a Transform.

Composition order follows `Transform.compose`: `a.compose(b)` applies a
first, then b. `a @ b` is the mathematical a ∘ b.
"""
from dataclasses import dataclass, field
from typing import ClassVar

import numpy as np

from .algebra.rotor import Rotor4
from .base import NotInvertibleError, SequentialTransform, Transform
from .linalg.numeric import Vec4
from .linalg.traits import Vector, Vector4


@dataclass(frozen=True)
class RotateScaleTranslate4(Transform):
    """
    Rotation, then uniform scale, then translation.

    The translation type decides the vector type produced by `transform`
    and the matrix type of `get_rotate_scale_matrix`.
    """
    rotation: Rotor4 = Rotor4.IDENTITY
    scale: float = 1.0
    translation: Vector4 = field(default_factory=Vec4.zero)

    IDENTITY: ClassVar['RotateScaleTranslate4']

    def transform(self, operand: Vector4) -> Vector4:
        return self.rotation.transform(operand) * self.scale + self.translation

    def transform_direction(self, operand: Vector4) -> Vector4:
        """Directions ignore scale and translation."""
        return self.rotation.transform(operand)

    def get_rotate_scale_matrix(self):
        """Matrix of the rotation and scale, in the translation's Matrix4 type."""
        matrix_type = type(self.translation).matrix4_type
        columns = [[v * self.scale for v in col] for col in self.rotation.into_mat4_array()]
        return matrix_type.from_array(columns)

    # === Builders (apply self, then the given step) ===

    def rotated(self, rotation: Rotor4) -> 'RotateScaleTranslate4':
        return RotateScaleTranslate4(
            rotation=self.rotation.compose(rotation),
            scale=self.scale,
            translation=rotation.transform(self.translation),
        )

    def scaled(self, scale: float) -> 'RotateScaleTranslate4':
        return RotateScaleTranslate4(
            rotation=self.rotation,
            scale=self.scale * scale,
            translation=self.translation * scale,
        )

    def translated(self, offset: Vector4) -> 'RotateScaleTranslate4':
        return RotateScaleTranslate4(
            rotation=self.rotation,
            scale=self.scale,
            translation=self.translation + offset,
        )

    # === Algebraic Methods ===

    def compose(self, other: Transform) -> Transform:
        if isinstance(other, RotateScaleTranslate4):
            return self.rotated(other.rotation).scaled(other.scale).translated(other.translation)
        if isinstance(other, Rotor4):
            return self.rotated(other)
        return super().compose(other)

    def inverse(self) -> 'RotateScaleTranslate4':
        """
        p = R⁻¹((p' - t) / s) = R⁻¹(p')/s - R⁻¹(t)/s

        Raises NotInvertibleError for a zero scale.
        """
        if self.scale == 0.0:
            raise NotInvertibleError("RotateScaleTranslate4 with zero scale")
        inv_rotation = self.rotation.inverse()
        inv_scale = 1.0 / self.scale
        return RotateScaleTranslate4(
            rotation=inv_rotation,
            scale=inv_scale,
            translation=-inv_rotation.transform(self.translation) * inv_scale,
        )

    def interpolate_with(self, other: 'RotateScaleTranslate4', fraction: float) -> 'RotateScaleTranslate4':
        """Slerp on the rotation, lerp on scale and translation."""
        return RotateScaleTranslate4(
            rotation=self.rotation.interpolate_with(other.rotation, fraction),
            scale=self.scale + (other.scale - self.scale) * fraction,
            translation=self.translation.interpolate_with(other.translation, fraction),
        )

    def to_affine(self) -> 'AffineTransform':
        return AffineTransform(
            linear=self.rotation.to_numpy_matrix() * self.scale,
            translation=np.array(self.translation.components(), dtype=float),
        )

    @property
    def is_identity(self) -> bool:
        return (self.rotation.is_identity
                and abs(self.scale - 1.0) < 1e-9
                and self.translation.length() < 1e-9)


RotateScaleTranslate4.IDENTITY = RotateScaleTranslate4()


@dataclass(eq=False)
class AffineTransform(Transform):
    """
    Mesh transform p ↦ linear·p + translation for vertices of any dimension.

    Operands are Vector instances of dimension D (the same vector type comes
    back) or (N, D) point arrays. Mirrors and shears that a rotor cannot
    express go here, e.g. `linear_map(np.diag([1.0, -1.0]))`.
    """
    linear: np.ndarray      # (D, D)
    translation: np.ndarray # (D,)

    def __post_init__(self):
        self.linear = np.asarray(self.linear, dtype=float)
        self.translation = np.asarray(self.translation, dtype=float)
        d = self.linear.shape[0]
        if self.linear.shape != (d, d) or self.translation.shape != (d,):
            raise ValueError(
                f"Shape mismatch: linear {self.linear.shape}, translation {self.translation.shape}"
            )

    @property
    def n_dims(self) -> int:
        return self.linear.shape[0]

    @classmethod
    def identity(cls, n_dims: int) -> 'AffineTransform':
        return cls(np.eye(n_dims), np.zeros(n_dims))

    @classmethod
    def translate(cls, vector) -> 'AffineTransform':
        vector = np.asarray(vector, dtype=float)
        return cls(np.eye(len(vector)), vector)

    @classmethod
    def linear_map(cls, matrix: np.ndarray) -> 'AffineTransform':
        matrix = np.asarray(matrix, dtype=float)
        return cls(matrix, np.zeros(matrix.shape[0]))

    @classmethod
    def from_rotor(cls, rotor: Rotor4) -> 'AffineTransform':
        """The rotor's sandwich as a 4D linear map."""
        return cls.linear_map(rotor.to_numpy_matrix())

    # === Application ===

    def transform(self, operand):
        if isinstance(operand, Vector):
            if operand.dimension != self.n_dims:
                raise ValueError(f"Expected a {self.n_dims}D vector, got {operand.dimension}D")
            result = self.linear @ np.asarray(operand.components()) + self.translation
            return operand.new(*result.tolist())
        points = np.asarray(operand, dtype=float)
        if points.shape[-1] != self.n_dims:
            raise ValueError(f"Expected points of dimension {self.n_dims}, got shape {points.shape}")
        # Rows are points
        return points @ self.linear.T + self.translation

    # === Algebraic Methods ===

    def compose(self, other: Transform) -> Transform:
        """
        Self, then other: (A2·A1)p + (A2·t1 + t2).

        A 4D RotateScaleTranslate4 is folded in through `to_affine`; other
        transforms are sequenced.
        """
        if isinstance(other, AffineTransform):
            return AffineTransform(other.linear @ self.linear, other.linear @ self.translation + other.translation)
        if isinstance(other, RotateScaleTranslate4) and self.n_dims == 4:
            return self.compose(other.to_affine())
        return SequentialTransform(steps=[self, other])

    def inverse(self) -> 'AffineTransform':
        """p = A⁻¹(p' - t). Raises NotInvertibleError for a singular A."""
        if not self.is_invertible:
            raise NotInvertibleError(f"AffineTransform is singular (det={np.linalg.det(self.linear):.6f})")
        A_inv = np.linalg.inv(self.linear)
        return AffineTransform(linear=A_inv, translation=-A_inv @ self.translation)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AffineTransform):
            return NotImplemented
        return (self.linear.shape == other.linear.shape
                and np.allclose(self.linear, other.linear)
                and np.allclose(self.translation, other.translation))

    def __repr__(self):
        return f"AffineTransform({self.n_dims}D)"

    # === Properties ===

    @property
    def is_identity(self) -> bool:
        return np.allclose(self.linear, np.eye(self.n_dims)) and self.is_linear

    @property
    def is_invertible(self) -> bool:
        return abs(np.linalg.det(self.linear)) > 1e-10

    @property
    def is_linear(self) -> bool:
        """No translation part."""
        return np.allclose(self.translation, 0)


__all__ = ['RotateScaleTranslate4', 'AffineTransform']
