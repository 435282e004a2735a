# -*- coding: utf-8 -*-
"""
algebra/bivector.py - 4D Bivectors and the Scalar+Pseudoscalar Sub-algebra

Basis planes: xy, xz, xw, yz, wy, zw (with wy = e₄e₂ rather than e₂e₄, so
that the dual pairs xy↔zw, xz↔wy, xw↔yz all carry the same sign).

Product facts used throughout (Euclidean Cl(4,0), I = e₁e₂e₃e₄):
- Every basis plane squares to -1, I² = +1.
- I commutes with bivectors and I·B = -dual(B).
- For bivectors A, B: AB = -A·B + A×B + (A∧B)I
  (scalar product, commutator, pseudoscalar).
"""

import logging
import math
from dataclasses import dataclass
from typing import ClassVar, Tuple

from ..base import NotSimpleError
from ..tolerance import EPSILON, FACTOR_EPSILON

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScalarPlusQuadvec4:
    """
    Scalar + pseudoscalar pair: c + xyzw·I.

    Closed under the geometric product (I² = 1), and commutes with every
    bivector, so it acts on a bivector from either side.
    """
    c: float = 0.0
    xyzw: float = 0.0

    def __mul__(self, other):
        if isinstance(other, ScalarPlusQuadvec4):
            return ScalarPlusQuadvec4(
                c=self.c * other.c + self.xyzw * other.xyzw,
                xyzw=self.c * other.xyzw + self.xyzw * other.c,
            )
        if isinstance(other, Bivec4):
            # (c + qI)B = cB + q(IB) = cB - q·dual(B)
            return other.scaled(self.c) - other.dual().scaled(self.xyzw)
        if isinstance(other, (int, float)):
            return self.scaled(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (int, float)):
            return self.scaled(other)
        return NotImplemented

    def __add__(self, other: 'ScalarPlusQuadvec4') -> 'ScalarPlusQuadvec4':
        return ScalarPlusQuadvec4(self.c + other.c, self.xyzw + other.xyzw)

    def __sub__(self, other: 'ScalarPlusQuadvec4') -> 'ScalarPlusQuadvec4':
        return ScalarPlusQuadvec4(self.c - other.c, self.xyzw - other.xyzw)

    def scaled(self, scale: float) -> 'ScalarPlusQuadvec4':
        return ScalarPlusQuadvec4(self.c * scale, self.xyzw * scale)


@dataclass(frozen=True)
class Bivec4:
    """
    4D bivector with a component for each of the six basis planes.

    As a rotation generator, a positive `ab` component turns axis a towards
    axis b.
    """
    xy: float = 0.0
    xz: float = 0.0
    xw: float = 0.0
    yz: float = 0.0
    wy: float = 0.0
    zw: float = 0.0

    ZERO: ClassVar['Bivec4']

    @classmethod
    def from_components(cls, components) -> 'Bivec4':
        """Build from a (xy, xz, xw, yz, wy, zw) sequence."""
        xy, xz, xw, yz, wy, zw = (float(v) for v in components)
        return cls(xy=xy, xz=xz, xw=xw, yz=yz, wy=wy, zw=zw)

    def components(self) -> Tuple[float, ...]:
        return (self.xy, self.xz, self.xw, self.yz, self.wy, self.zw)

    # === Linear Structure ===

    def __neg__(self) -> 'Bivec4':
        return self.scaled(-1.0)

    def __add__(self, other: 'Bivec4') -> 'Bivec4':
        if not isinstance(other, Bivec4):
            return NotImplemented
        return Bivec4.from_components(a + b for a, b in zip(self.components(), other.components()))

    def __sub__(self, other: 'Bivec4') -> 'Bivec4':
        if not isinstance(other, Bivec4):
            return NotImplemented
        return Bivec4.from_components(a - b for a, b in zip(self.components(), other.components()))

    def __mul__(self, other):
        if isinstance(other, ScalarPlusQuadvec4):
            return other * self
        if isinstance(other, (int, float)):
            return self.scaled(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (int, float)):
            return self.scaled(other)
        return NotImplemented

    def scaled(self, scale: float) -> 'Bivec4':
        return Bivec4.from_components(v * scale for v in self.components())

    # === Products ===

    def square(self) -> ScalarPlusQuadvec4:
        """B² = -|B|² + 2(xy·zw + xz·wy + xw·yz)·I. The scalar part is never positive."""
        return ScalarPlusQuadvec4(
            c=-(self.xy * self.xy
                + self.xz * self.xz
                + self.xw * self.xw
                + self.yz * self.yz
                + self.wy * self.wy
                + self.zw * self.zw),
            xyzw=2.0 * (self.xy * self.zw + self.xz * self.wy + self.xw * self.yz),
        )

    def dot(self, other: 'Bivec4') -> float:
        """Euclidean scalar product of the components, i.e. -⟨AB⟩₀."""
        return sum(a * b for a, b in zip(self.components(), other.components()))

    def wedge(self, other: 'Bivec4') -> float:
        """A∧B, the coefficient of the pseudoscalar. Symmetric in A and B."""
        return (self.xy * other.zw + self.zw * other.xy
                + self.xz * other.wy + self.wy * other.xz
                + self.xw * other.yz + self.yz * other.xw)

    def commutator(self, other: 'Bivec4') -> 'Bivec4':
        """
        A×B = (AB - BA)/2, the bivector part of AB.

        Each term pairs planes sharing exactly one axis, e.g. xy×yz = xz.
        """
        a, b = self, other
        return Bivec4(
            xy=a.yz * b.xz - a.xz * b.yz + a.xw * b.wy - a.wy * b.xw,
            xz=a.xy * b.yz - a.yz * b.xy - a.xw * b.zw + a.zw * b.xw,
            xw=a.wy * b.xy - a.xy * b.wy + a.xz * b.zw - a.zw * b.xz,
            yz=a.xz * b.xy - a.xy * b.xz + a.wy * b.zw - a.zw * b.wy,
            wy=a.xy * b.xw - a.xw * b.xy + a.zw * b.yz - a.yz * b.zw,
            zw=a.xw * b.xz - a.xz * b.xw + a.yz * b.wy - a.wy * b.yz,
        )

    def dual(self) -> 'Bivec4':
        """Orthogonal-complement plane: xy↔zw, xz↔wy, xw↔yz. Equals -I·B."""
        return Bivec4(xy=self.zw, xz=self.wy, xw=self.yz, yz=self.xw, wy=self.xz, zw=self.xy)

    # === Metric ===

    def magnitude(self) -> float:
        return math.sqrt(-self.square().c)

    def normalized(self) -> 'Bivec4':
        """Unit bivector in the same direction; the zero bivector stays zero."""
        mag = self.magnitude()
        if mag == 0.0:
            return Bivec4.ZERO
        return self.scaled(1.0 / mag)

    def is_simple(self, eps: float = EPSILON) -> bool:
        return abs(self.square().xyzw) < eps

    def approx_eq(self, other: 'Bivec4', eps: float = EPSILON) -> bool:
        return all(abs(a - b) < eps for a, b in zip(self.components(), other.components()))

    # === Exponential ===

    def factor_into_simple_orthogonal(self) -> Tuple['SimpleBivec4', 'SimpleBivec4']:
        """
        Factor B = B1 + B2 with B1, B2 simple and commuting (B1B2 = B2B1).

        With B² = c + qI and det = √(c² - q²):
            f1 = (-c + det + qI) / 2det,  f2 = 1 - f1 = (c + det - qI) / 2det
            B1 = B·f1,  B2 = B·f2

        Evaluated through the self-dual / anti-self-dual parts
        B⁺ = (B + dual B)/2 and B⁻ = (B - dual B)/2, where det = 2|B⁺||B⁻|
        and the products reduce to
            B1 = (|B⁺| + |B⁻|)/2 · (B̂⁺ + B̂⁻),  B2 = (|B⁺| - |B⁻|)/2 · (B̂⁺ - B̂⁻)
        so nothing cancels as det → 0. B1 is the larger factor.

        When one part vanishes (isoclinic, equal angles in both planes) the
        factors are undefined; the {xy, xz, xw} / {yz, wy, zw} split is then
        already a valid factorization.
        """
        dual = self.dual()
        plus = (self + dual).scaled(0.5)
        minus = (self - dual).scaled(0.5)
        p, m = plus.magnitude(), minus.magnitude()

        if min(p, m) <= FACTOR_EPSILON * max(p, m):
            logger.debug("Isoclinic bivector %s, splitting by planes", self)
            b1 = Bivec4(xy=self.xy, xz=self.xz, xw=self.xw)
            b2 = Bivec4(yz=self.yz, wy=self.wy, zw=self.zw)
        else:
            plus_hat, minus_hat = plus.scaled(1.0 / p), minus.scaled(1.0 / m)
            b1 = (plus_hat + minus_hat).scaled(0.5 * (p + m))
            b2 = (plus_hat - minus_hat).scaled(0.5 * (p - m))

        return SimpleBivec4._from_factor(b1), SimpleBivec4._from_factor(b2)

    def exp(self) -> 'Rotor4':
        """
        Bivector exponential e^B of an arbitrary bivector.

        B = θ1·B̂1 + θ2·B̂2 with commuting simple factors, so
        e^B = (cos θ1 + sin θ1·B̂1)(cos θ2 + sin θ2·B̂2).
        """
        from .rotor import double_rotation

        b1, b2 = self.factor_into_simple_orthogonal()
        return double_rotation(b1.normalized().bivec, b1.magnitude(), b2.normalized().bivec, b2.magnitude())

    def __repr__(self):
        return (f"Bivec4(xy={self.xy:.4g}, xz={self.xz:.4g}, xw={self.xw:.4g}, "
                f"yz={self.yz:.4g}, wy={self.wy:.4g}, zw={self.zw:.4g})")


Bivec4.ZERO = Bivec4()


class SimpleBivec4:
    """
    A Bivec4 confined to a single plane: its square has no pseudoscalar part.

    Smart constructor: `SimpleBivec4(bivec)` raises NotSimpleError when the
    invariant does not hold. Immutable.
    """
    __slots__ = ('_bivec',)

    def __init__(self, bivec: Bivec4):
        if not bivec.is_simple():
            raise NotSimpleError(f"{bivec} is not simple (B² = {bivec.square()})")
        object.__setattr__(self, '_bivec', bivec)

    @classmethod
    def try_from(cls, bivec: Bivec4) -> 'SimpleBivec4':
        """Checked conversion, same as the constructor."""
        return cls(bivec)

    @classmethod
    def _from_factor(cls, bivec: Bivec4) -> 'SimpleBivec4':
        """Conversion for factorization outputs, simple by construction."""
        try:
            return cls(bivec)
        except NotSimpleError:
            logger.warning("Factorization produced a non-simple component %s", bivec)
            raise

    def __setattr__(self, name, value):
        raise AttributeError("SimpleBivec4 is immutable")

    @property
    def bivec(self) -> Bivec4:
        return self._bivec

    def squared(self) -> float:
        """B² as a scalar (always <= 0)."""
        return self._bivec.square().c

    def magnitude(self) -> float:
        return math.sqrt(abs(self.squared()))

    def normalized(self) -> 'SimpleBivec4':
        return _simple(self._bivec.normalized())

    def scaled(self, scale: float) -> 'SimpleBivec4':
        return _simple(self._bivec.scaled(scale))

    def __neg__(self) -> 'SimpleBivec4':
        return self.scaled(-1.0)

    def dual(self) -> 'SimpleBivec4':
        """The orthogonal complement plane, also simple."""
        return _simple(self._bivec.dual())

    def exp(self) -> 'Rotor4':
        """e^{θB̂} = cos θ + sin θ·B̂, since B̂² = -1 (same proof as e^{iπ} = -1)."""
        from .rotor import Rotor4

        theta = self.magnitude()
        return Rotor4(
            c=math.cos(theta),
            bivec=self._bivec.normalized().scaled(math.sin(theta)),
            xyzw=0.0,
        )

    def __eq__(self, other):
        if isinstance(other, SimpleBivec4):
            return self._bivec == other._bivec
        return NotImplemented

    def __hash__(self):
        return hash(self._bivec)

    def __repr__(self):
        return f"Simple{self._bivec!r}"


def _simple(bivec: Bivec4) -> SimpleBivec4:
    """Wrap a bivector derived from an already-simple one (scaling, dual)."""
    simple = object.__new__(SimpleBivec4)
    object.__setattr__(simple, '_bivec', bivec)
    return simple


__all__ = ['Bivec4', 'SimpleBivec4', 'ScalarPlusQuadvec4']
