# -*- coding: utf-8 -*-
"""
tests/unit/test_linalg.py

Vector/matrix interfaces and the numpy-backed implementation.
"""
import pytest
import numpy as np

from hypermesh.core.algebra import Bivec4
from hypermesh.core.linalg import Vec2, Vec3, Vec4, Mat4, Vector4


class TestVectorArithmetic:
    """Linear operations on Vec2/Vec3/Vec4."""

    def test_add_sub_neg_scale(self):
        a = Vec3(1.0, 2.0, 3.0)
        b = Vec3(4.0, 5.0, 6.0)
        np.testing.assert_allclose((a + b).components(), [5.0, 7.0, 9.0])
        np.testing.assert_allclose((b - a).components(), [3.0, 3.0, 3.0])
        np.testing.assert_allclose((-a).components(), [-1.0, -2.0, -3.0])
        np.testing.assert_allclose((a * 2.0).components(), [2.0, 4.0, 6.0])
        np.testing.assert_allclose((2.0 * a).components(), [2.0, 4.0, 6.0])

    def test_dot_length_normalized(self):
        v = Vec2(3.0, 4.0)
        assert v.dot(Vec2(1.0, 1.0)) == pytest.approx(7.0)
        assert v.length() == pytest.approx(5.0)
        np.testing.assert_allclose(v.normalized().components(), [0.6, 0.8])

    def test_interpolate_with(self):
        a = Vec4(0.0, 0.0, 0.0, 0.0)
        b = Vec4(2.0, 4.0, 6.0, 8.0)
        np.testing.assert_allclose(a.interpolate_with(b, 0.25).components(), [0.5, 1.0, 1.5, 2.0])

    def test_zero_and_accessors(self):
        assert Vec4.zero().components() == (0.0, 0.0, 0.0, 0.0)
        v = Vec4(1.0, 2.0, 3.0, 4.0)
        assert (v.x, v.y, v.z, v.w) == (1.0, 2.0, 3.0, 4.0)

    def test_wrong_component_count(self):
        with pytest.raises(ValueError):
            Vec3(1.0, 2.0)

    def test_cross(self):
        np.testing.assert_allclose(Vec3(1.0, 0.0, 0.0).cross(Vec3(0.0, 1.0, 0.0)).components(), [0.0, 0.0, 1.0])


class TestWedge:
    """Vector4 wedge product into Bivec4."""

    def test_wedge_example(self):
        got = Vec4(1.0, 2.0, 3.0, 4.0).wedge(Vec4(5.0, 6.0, 7.0, 8.0))
        assert got.approx_eq(Bivec4(xy=-4.0, xz=-8.0, xw=-12.0, yz=-4.0, wy=8.0, zw=-4.0))

    def test_wedge_is_antisymmetric_and_simple(self, random_vec4):
        a, b = random_vec4(), random_vec4()
        assert a.wedge(b).approx_eq(-b.wedge(a))
        assert a.wedge(b).is_simple()
        assert a.wedge(a).approx_eq(Bivec4.ZERO)


class TestAssociatedTypes:
    """Dimension changes go through class attributes."""

    def test_links(self):
        assert Vec2.vector3_type is Vec3
        assert Vec3.vector2_type is Vec2
        assert Vec3.vector4_type is Vec4
        assert Vec4.vector3_type is Vec3
        assert Vec4.matrix4_type is Mat4
        assert Mat4.vector4_type is Vec4
        assert issubclass(Vec4, Vector4)


class TestMat4:
    """Column-major construction and application."""

    def test_from_array_is_column_major(self):
        m = Mat4.from_array([
            [0.0, 2.0, 0.0, 0.0],
            [-2.0, 0.0, 0.0, 0.0],
            [0.0, 0.0, 2.0, 0.0],
            [0.0, 0.0, 0.0, 2.0],
        ])
        got = m @ Vec4(5.0, 6.0, 7.0, 8.0)
        assert isinstance(got, Vec4)
        np.testing.assert_allclose(got.components(), [-12.0, 10.0, 14.0, 16.0])

    def test_to_array_round_trip(self):
        cols = np.arange(16.0).reshape(4, 4).tolist()
        assert Mat4.from_array(cols).to_array() == cols

    def test_identity_and_product(self):
        m = Mat4.from_array(np.arange(16.0).reshape(4, 4))
        assert Mat4.identity() @ m == m
        np.testing.assert_allclose(m.transform(Vec4(1.0, 0.0, 0.0, 0.0)).components(), [0.0, 1.0, 2.0, 3.0])
