# -*- coding: utf-8 -*-
"""
tests/unit/test_bivector.py

Bivec4 products, simple-bivector checks, factorization and exponential.
"""
import logging

import pytest
import numpy as np

from hypermesh.core.algebra import Bivec4, SimpleBivec4, ScalarPlusQuadvec4
from hypermesh.core.algebra import cayley
from hypermesh.core.base import NotSimpleError


def _product(a: Bivec4, b: Bivec4) -> np.ndarray:
    return cayley.geometric_product(cayley.bivector_to_multivector(a), cayley.bivector_to_multivector(b))


class TestProducts:
    """Hand-expanded products against the Cl(4,0) table."""

    def test_square(self, random_bivec):
        b = random_bivec()
        mv = _product(b, b)
        square = b.square()
        assert mv[0] == pytest.approx(square.c)
        assert mv[cayley.PSEUDOSCALAR] == pytest.approx(square.xyzw)
        assert square.c <= 0.0

    def test_scalar_commutator_wedge(self, random_bivec):
        for _ in range(10):
            a, b = random_bivec(), random_bivec()
            mv = _product(a, b)
            assert mv[0] == pytest.approx(-a.dot(b))
            assert mv[cayley.PSEUDOSCALAR] == pytest.approx(a.wedge(b))
            got = Bivec4(**cayley.multivector_to_bivector_components(mv))
            assert got.approx_eq(a.commutator(b), eps=1e-9)

    def test_pseudoscalar_acts_as_negative_dual(self, random_bivec):
        b = random_bivec()
        mv = cayley.geometric_product(
            cayley.rotor_to_multivector(0.0, Bivec4.ZERO, 1.0), cayley.bivector_to_multivector(b)
        )
        got = Bivec4(**cayley.multivector_to_bivector_components(mv))
        assert got.approx_eq(-b.dual(), eps=1e-9)
        assert (ScalarPlusQuadvec4(0.0, 1.0) * b).approx_eq(-b.dual(), eps=1e-9)

    def test_basis_commutator(self):
        """xy×yz = xz: planes sharing one axis."""
        assert Bivec4(xy=1.0).commutator(Bivec4(yz=1.0)).approx_eq(Bivec4(xz=1.0))

    def test_scalar_plus_quadvec_product(self):
        got = ScalarPlusQuadvec4(2.0, 3.0) * ScalarPlusQuadvec4(5.0, 7.0)
        assert got == ScalarPlusQuadvec4(2.0 * 5.0 + 3.0 * 7.0, 2.0 * 7.0 + 3.0 * 5.0)


class TestSimpleBivec:
    """Checked conversion to SimpleBivec4."""

    def test_single_plane_is_simple(self):
        simple = SimpleBivec4(Bivec4(xz=2.0))
        assert simple.squared() == pytest.approx(-4.0)
        assert simple.magnitude() == pytest.approx(2.0)

    def test_double_plane_raises(self):
        with pytest.raises(NotSimpleError):
            SimpleBivec4(Bivec4(xy=1.0, zw=1.0))
        with pytest.raises(NotSimpleError):
            SimpleBivec4.try_from(Bivec4(xz=0.5, wy=0.5))

    def test_immutable(self):
        simple = SimpleBivec4(Bivec4(xy=1.0))
        with pytest.raises(AttributeError):
            simple.foo = 1

    def test_dual_and_normalized(self):
        simple = SimpleBivec4(Bivec4(xy=3.0))
        assert simple.dual().bivec == Bivec4(zw=3.0)
        assert simple.normalized().bivec.approx_eq(Bivec4(xy=1.0))

    def test_exp_single_plane(self):
        rotor = SimpleBivec4(Bivec4(xy=np.pi / 6)).exp()
        assert rotor.c == pytest.approx(np.cos(np.pi / 6))
        assert rotor.bivec.approx_eq(Bivec4(xy=np.sin(np.pi / 6)))
        assert rotor.xyzw == pytest.approx(0.0)


class TestFactorization:
    """B = B1 + B2 with simple, commuting, orthogonal parts."""

    def test_random_bivectors(self, random_bivec):
        for _ in range(20):
            b = random_bivec(1.0)
            b1, b2 = b.factor_into_simple_orthogonal()
            assert (b1.bivec + b2.bivec).approx_eq(b, eps=1e-9)
            assert b1.bivec.commutator(b2.bivec).approx_eq(Bivec4.ZERO, eps=1e-9)
            assert b1.bivec.dot(b2.bivec) == pytest.approx(0.0, abs=1e-9)

    def test_two_plane_sum(self):
        """αxy + βzw splits back into its planes, larger part first."""
        b1, b2 = Bivec4(xy=2.0, zw=0.5).factor_into_simple_orthogonal()
        assert b1.bivec.approx_eq(Bivec4(xy=2.0), eps=1e-9)
        assert b2.bivec.approx_eq(Bivec4(zw=0.5), eps=1e-9)

    def test_isoclinic_split(self, caplog):
        caplog.set_level(logging.DEBUG, logger="hypermesh.core.algebra.bivector")
        b1, b2 = Bivec4(xy=1.0, zw=1.0).factor_into_simple_orthogonal()
        assert b1.bivec == Bivec4(xy=1.0)
        assert b2.bivec == Bivec4(zw=1.0)
        assert "Isoclinic" in caplog.text

    def test_zero(self):
        b1, b2 = Bivec4.ZERO.factor_into_simple_orthogonal()
        assert b1.bivec == Bivec4.ZERO
        assert b2.bivec == Bivec4.ZERO


class TestExp:
    """e^B against the matrix exponential."""

    def test_zero_is_identity(self):
        rotor = Bivec4.ZERO.exp()
        assert rotor.c == pytest.approx(1.0)
        assert rotor.bivec.approx_eq(Bivec4.ZERO)

    def test_exp_matches_expm(self, random_bivec, generator_matrix):
        from scipy.linalg import expm

        for _ in range(10):
            b = random_bivec()
            # e^B rotates by twice the bivector angles
            expected = expm(generator_matrix(b.scaled(2.0)))
            np.testing.assert_allclose(b.exp().to_numpy_matrix(), expected, atol=1e-9)

    def test_isoclinic_exp(self, generator_matrix):
        from scipy.linalg import expm

        b = Bivec4(xz=0.7, wy=0.7)
        np.testing.assert_allclose(b.exp().to_numpy_matrix(), expm(generator_matrix(b.scaled(2.0))), atol=1e-9)
