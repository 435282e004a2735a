# -*- coding: utf-8 -*-
"""
algebra/rotor.py - 4D Rotors

A rotor R = c + B + xyzw·I is the even-grade element of Cl(4,0) with
R·R̃ = 1. It acts on vectors by the sandwich v ↦ R̃ v R, so that
R1.compose(R2) = R1·R2 applies R1 first, then R2.

Every 4D rotation is a double rotation: angle θ1 in a plane P1 and angle θ2
in the orthogonal plane P2,
    R = (cos θ1 + sin θ1·P̂1)(cos θ2 + sin θ2·P̂2)
which is what `log` recovers and `exp` rebuilds. Sandwich rotation angles
are twice these half-angles.
"""
import logging
import math
from dataclasses import dataclass, field
from typing import ClassVar, Type, Union

import numpy as np

from ..base import Transform
from ..tolerance import EPSILON, LOG_EPSILON, NORMALIZE_EPSILON
from .bivector import Bivec4, ScalarPlusQuadvec4, SimpleBivec4

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rotor4(Transform):
    """
    Normalized 4D rotor (c, bivec, xyzw).

    Invariant: c² + xyzw² + |bivec|² = 1 and 2·c·xyzw = bivec.square().xyzw.
    Enforced on construction by renormalizing; a zero rotor raises ValueError.
    Matrices built by `to_matrix` are kept per matrix type, so a rotor applied
    to many vertices expands its sandwich once.
    """
    c: float = 1.0
    bivec: Bivec4 = Bivec4.ZERO
    xyzw: float = 0.0
    _matrices: dict = field(default_factory=dict, init=False, repr=False, compare=False)

    IDENTITY: ClassVar['Rotor4']

    def __post_init__(self):
        c, xyzw = float(self.c), float(self.xyzw)
        square = self.bivec.square()
        if abs(c) > NORMALIZE_EPSILON:
            # Recover the pseudoscalar part from the bivector: R·R̃ has no I part
            xyzw = square.xyzw / (2.0 * c)
        norm_sq = c * c + xyzw * xyzw - square.c
        if norm_sq <= 0.0:
            raise ValueError("Cannot normalize a zero rotor")
        scale = 1.0 / math.sqrt(norm_sq)
        object.__setattr__(self, 'c', c * scale)
        object.__setattr__(self, 'bivec', self.bivec.scaled(scale))
        object.__setattr__(self, 'xyzw', xyzw * scale)

    # === Construction ===

    @classmethod
    def between(cls, from_vec, to_vec) -> 'Rotor4':
        """
        Rotor in the plane of the two vectors, rotating by twice the angle
        between them. `between(a, b).pow(0.5)` maps a onto the direction of b.
        """
        a = from_vec.normalized()
        b = to_vec.normalized()
        return cls(c=a.dot(b), bivec=a.wedge(b), xyzw=0.0)

    @classmethod
    def from_bivec_angles(cls, angles: Bivec4) -> 'Rotor4':
        """Each component is a rotation angle in its plane; positive `ab` turns a towards b."""
        return angles.scaled(0.5).exp()

    @classmethod
    def from_simple_bivec_angle(cls, plane: SimpleBivec4, angle: float) -> 'Rotor4':
        """Rotation by `angle` in a single plane."""
        return plane.normalized().scaled(0.5 * angle).exp()

    # === Algebra ===

    def reverse(self) -> 'Rotor4':
        """R̃: grade-2 part negated. Equals the inverse for a normalized rotor."""
        return Rotor4(c=self.c, bivec=-self.bivec, xyzw=self.xyzw)

    def inverse(self) -> 'Rotor4':
        return self.reverse()

    def compose(self, other: Transform) -> Transform:
        """
        Geometric product self·other: apply self, then other.

        (c1 + B1 + q1I)(c2 + B2 + q2I), with I² = 1 and I commuting with B:
            c = c1c2 + q1q2 - B1·B2
            B = (c1 + q1I)B2 + (c2 + q2I)B1 + B1×B2
            q = c1q2 + q1c2 + B1∧B2
        """
        if not isinstance(other, Rotor4):
            return super().compose(other)
        b1, b2 = self.bivec, other.bivec
        spq1 = ScalarPlusQuadvec4(self.c, self.xyzw)
        spq2 = ScalarPlusQuadvec4(other.c, other.xyzw)
        return Rotor4(
            c=self.c * other.c + self.xyzw * other.xyzw - b1.dot(b2),
            bivec=spq1 * b2 + spq2 * b1 + b1.commutator(b2),
            xyzw=self.c * other.xyzw + self.xyzw * other.c + b1.wedge(b2),
        )

    def log(self) -> 'RotorLog4':
        """
        Logarithm as a double rotation (P̂1, θ1), (P̂2, θ2).

        The bivector part is m1·P̂1 + m2·P̂2 with m1 = sin θ1 cos θ2 and
        m2 = cos θ1 sin θ2, and c ∓ xyzw·(P̂1∧P̂2) = cos(θ1 ± θ2), so both
        sums of angles come out of atan2 with the right quadrant.
        """
        bivec = self.bivec
        mag = bivec.magnitude()
        if mag < LOG_EPSILON:
            # Pure c + xyzw·I: isoclinic, any orthogonal pair of planes works
            logger.debug("Rotor log: negligible bivector part")
            plane1 = SimpleBivec4(Bivec4(xy=1.0))
            plane2 = SimpleBivec4(Bivec4(zw=1.0))
            mag1 = mag2 = 0.0
        elif abs(bivec.square().xyzw) < LOG_EPSILON * mag * mag:
            # Planar bivector: either xyzw ≈ 0, or c ≈ 0 with a π/2 turn in the complement
            logger.debug("Rotor log: planar bivector part")
            plane1 = SimpleBivec4(bivec.scaled(1.0 / mag))
            plane2 = plane1.dual()
            mag1, mag2 = mag, 0.0
        else:
            logger.debug("Rotor log: general double rotation")
            b1, b2 = bivec.factor_into_simple_orthogonal()
            plane1, plane2 = b1.normalized(), b2.normalized()
            mag1, mag2 = b1.magnitude(), b2.magnitude()

        orientation = plane1.bivec.wedge(plane2.bivec)
        angle_sum = math.atan2(mag1 + mag2, self.c - self.xyzw * orientation)
        angle_diff = math.atan2(mag1 - mag2, self.c + self.xyzw * orientation)
        angle1 = 0.5 * (angle_sum + angle_diff)
        angle2 = 0.5 * (angle_sum - angle_diff)

        if abs(angle2) < LOG_EPSILON:
            return SimpleRotorLog(plane=plane1, angle=angle1)
        return DoubleRotorLog(plane1=plane1, angle1=angle1, plane2=plane2, angle2=angle2)

    def pow(self, exponent: float) -> 'Rotor4':
        return self.log().scaled(exponent).exp()

    def interpolate_with(self, other: 'Rotor4', fraction: float) -> 'Rotor4':
        """Spherical interpolation: self at 0, other at 1."""
        return self.compose(self.inverse().compose(other).pow(fraction))

    # === Action ===

    def into_mat4_array(self):
        """
        Column-major 4×4 rotation matrix: element [j][i] is row i of column j.

        With K the generator of the bivector part (K·v = v⌋B) and K* that of
        its dual, the sandwich expands to
            M = (c² - xyzw²)·1 + 2c·K + K² - K*² + 2·xyzw·K*
        """
        K = _generator(self.bivec)
        K_dual = _generator(self.bivec.dual())
        M = ((self.c * self.c - self.xyzw * self.xyzw) * np.eye(4)
             + 2.0 * self.c * K + K @ K - K_dual @ K_dual
             + 2.0 * self.xyzw * K_dual)
        return M.T.tolist()

    def to_numpy_matrix(self) -> np.ndarray:
        """Row-major 4×4 matrix M with M @ v = R̃ v R."""
        return np.array(self.into_mat4_array()).T

    def to_matrix(self, matrix_type: Type):
        """Rotation as `matrix_type`, built on first use and kept on the rotor."""
        matrix = self._matrices.get(matrix_type)
        if matrix is None:
            matrix = self._matrices[matrix_type] = matrix_type.from_array(self.into_mat4_array())
        return matrix

    def transform(self, operand):
        """Rotate a Vector4 through its associated Matrix4 type."""
        matrix_type = getattr(type(operand), 'matrix4_type', None)
        if matrix_type is None:
            raise TypeError(f"{type(operand).__name__} has no associated matrix4_type")
        return self.to_matrix(matrix_type) @ operand

    # === Checks ===

    def invariant_error(self) -> float:
        """Largest deviation of R·R̃ from 1 (0 for an exactly normalized rotor)."""
        square = self.bivec.square()
        return max(
            abs(self.c * self.c + self.xyzw * self.xyzw - square.c - 1.0),
            abs(2.0 * self.c * self.xyzw - square.xyzw),
        )

    def components(self):
        return (self.c,) + self.bivec.components() + (self.xyzw,)

    def approx_eq(self, other: 'Rotor4', eps: float = EPSILON) -> bool:
        return all(abs(a - b) < eps for a, b in zip(self.components(), other.components()))

    def same_rotation(self, other: 'Rotor4', eps: float = EPSILON) -> bool:
        """R and -R describe the same rotation."""
        return self.approx_eq(other, eps) or all(
            abs(a + b) < eps for a, b in zip(self.components(), other.components())
        )

    @property
    def is_identity(self) -> bool:
        """True for 1 and for -1, which rotates nothing either."""
        return self.same_rotation(Rotor4.IDENTITY)


Rotor4.IDENTITY = Rotor4()


def _generator(b: Bivec4) -> np.ndarray:
    """Antisymmetric K with K @ v = v⌋B; a positive `ab` component turns a towards b."""
    return np.array([
        [0.0, -b.xy, -b.xz, -b.xw],
        [b.xy, 0.0, -b.yz, b.wy],
        [b.xz, b.yz, 0.0, -b.zw],
        [b.xw, -b.wy, b.zw, 0.0],
    ])


def double_rotation(plane1: Bivec4, angle1: float, plane2: Bivec4, angle2: float) -> Rotor4:
    """(cos θ1 + sin θ1·P̂1)(cos θ2 + sin θ2·P̂2) for orthogonal unit planes."""
    c1, s1 = math.cos(angle1), math.sin(angle1)
    c2, s2 = math.cos(angle2), math.sin(angle2)
    return Rotor4(
        c=c1 * c2,
        bivec=plane1.scaled(s1 * c2) + plane2.scaled(c1 * s2),
        xyzw=s1 * s2 * plane1.wedge(plane2),
    )


# === Logarithms ===

@dataclass(frozen=True)
class SimpleRotorLog:
    """Single rotation: half-angle `angle` in the unit plane `plane`."""
    plane: SimpleBivec4
    angle: float

    def scaled(self, factor: float) -> 'SimpleRotorLog':
        return SimpleRotorLog(plane=self.plane, angle=self.angle * factor)

    def exp(self) -> Rotor4:
        return Rotor4(
            c=math.cos(self.angle),
            bivec=self.plane.bivec.scaled(math.sin(self.angle)),
            xyzw=0.0,
        )

    def to_bivec(self) -> Bivec4:
        return self.plane.bivec.scaled(self.angle)


@dataclass(frozen=True)
class DoubleRotorLog:
    """Double rotation: half-angles in two orthogonal unit planes."""
    plane1: SimpleBivec4
    angle1: float
    plane2: SimpleBivec4
    angle2: float

    def scaled(self, factor: float) -> 'DoubleRotorLog':
        return DoubleRotorLog(
            plane1=self.plane1, angle1=self.angle1 * factor,
            plane2=self.plane2, angle2=self.angle2 * factor,
        )

    def exp(self) -> Rotor4:
        return double_rotation(self.plane1.bivec, self.angle1, self.plane2.bivec, self.angle2)

    def to_bivec(self) -> Bivec4:
        return self.plane1.bivec.scaled(self.angle1) + self.plane2.bivec.scaled(self.angle2)


RotorLog4 = Union[SimpleRotorLog, DoubleRotorLog]


__all__ = ['Rotor4', 'RotorLog4', 'SimpleRotorLog', 'DoubleRotorLog', 'double_rotation']
