# -*- coding: utf-8 -*-
"""
tests/unit/test_mesh.py

Simplex meshes: construction, joins, lifting, primitives and the closed
tesseract shell.
"""
import pytest
import numpy as np

from hypermesh.core.algebra import Bivec4, Rotor4
from hypermesh.core.linalg import Vec2, Vec3, Vec4
from hypermesh.core.mesh import Vertex2, Vertex3, TriangleMesh, TetrahedronMesh
from hypermesh.core.operators import depths, project_mesh
from hypermesh.core.topology import (
    simplex_sign, triangle_mesh_closed, line_intersect_count,
)
from hypermesh.core.transform import AffineTransform

# Interior point off every symmetry plane of the test shapes
OFFSET = (0.013, 0.021, 0.037)


def signs(mesh):
    return [simplex_sign(mesh.simplex_positions(i)) for i in range(mesh.n_simplexes)]


class TestSimplexMesh:
    """Validation and whole-mesh operations."""

    def test_empty(self):
        mesh = TriangleMesh()
        assert mesh.is_empty
        assert mesh.simplexes.shape == (0, 3)

    def test_index_out_of_range(self):
        vertices = [Vertex2(position=Vec2(0.0, 0.0)), Vertex2(position=Vec2(1.0, 0.0)), Vertex2(position=Vec2(0.0, 1.0))]
        with pytest.raises(ValueError):
            TriangleMesh(vertices=vertices, simplexes=[[0, 1, 3]])
        with pytest.raises(ValueError):
            TriangleMesh(vertices=vertices, simplexes=[[0, 1]])

    def test_join(self):
        square = TriangleMesh.square(1.0)
        circle = TriangleMesh.circle(1.0, 5)
        joined = square.join(circle)
        assert joined.n_vertices == 9
        assert joined.n_simplexes == 5
        np.testing.assert_array_equal(joined.simplexes[:2], square.simplexes)
        np.testing.assert_array_equal(joined.simplexes[2:], circle.simplexes + 4)
        # Receivers are untouched
        assert square.n_vertices == 4

    def test_invert_flips_handedness(self):
        rect = TriangleMesh.rectangle(Vec2(2.0, 1.0))
        assert signs(rect) == [1.0, 1.0]
        assert signs(rect.invert()) == [-1.0, -1.0]

    def test_apply_transform(self):
        rect = TriangleMesh.square(2.0)
        moved = rect.apply_transform(AffineTransform.translate([1.0, 2.0]))
        positions, simplexes = moved.as_arrays()
        original, _ = rect.as_arrays()
        np.testing.assert_allclose(positions, original + [1.0, 2.0])
        np.testing.assert_array_equal(simplexes, rect.simplexes)
        assert isinstance(moved.vertices[0], Vertex2)

    def test_as_arrays(self):
        positions, simplexes = TriangleMesh.square(2.0).as_arrays()
        assert positions.shape == (4, 2)
        assert simplexes.shape == (2, 3)
        np.testing.assert_allclose(np.abs(positions), 1.0)


class TestLifting:
    """Orthographic lift and projection."""

    def test_lift_then_project(self):
        mesh = TriangleMesh.circle(2.0, 7)
        lifted = mesh.lift_orthographic(3.0)
        assert isinstance(lifted.vertices[0], Vertex3)
        assert depths(lifted) == [3.0] * 7
        back = project_mesh(lifted)
        np.testing.assert_allclose(back.as_arrays()[0], mesh.as_arrays()[0])
        np.testing.assert_array_equal(back.simplexes, mesh.simplexes)

    def test_lift_keeps_vector_type(self):
        lifted = TriangleMesh.cube(1.0).lift_orthographic(-0.5)
        assert isinstance(lifted.vertices[0].position, Vec4)
        assert lifted.vertices[0].orthographic_depth() == -0.5


class TestPrimitives:
    """2D shapes, 3D shells and solids."""

    def test_circle(self):
        mesh = TriangleMesh.circle(1.5, 6)
        assert mesh.n_vertices == 6
        assert mesh.n_simplexes == 4
        assert all(s == 1.0 for s in signs(mesh))
        positions, _ = mesh.as_arrays()
        np.testing.assert_allclose(np.linalg.norm(positions, axis=1), 1.5)

    def test_circle_needs_three_sides(self):
        with pytest.raises(ValueError):
            TriangleMesh.circle(1.0, 2)

    def test_cube_shell_closed(self):
        cube = TriangleMesh.cube(2.0)
        assert cube.n_vertices == 8
        assert cube.n_simplexes == 12
        assert triangle_mesh_closed(cube)

    def test_cube_shell_line_count(self, rng):
        cube = TriangleMesh.cube(2.0)
        for _ in range(10):
            direction = Vec3.from_numpy(rng.normal(size=3))
            assert line_intersect_count(cube, direction, Vec3(0.0, 0.0, 0.0)) == 2

    def test_open_surface_not_closed(self):
        assert not triangle_mesh_closed(TriangleMesh.square(1.0).lift_orthographic(0.0))

    def test_solid_cube(self):
        cube = TetrahedronMesh.cube(2.0)
        assert cube.n_vertices == 8
        assert cube.n_simplexes == 6
        assert all(s == 1.0 for s in signs(cube))

    def test_tesseract_counts(self):
        tesseract = TetrahedronMesh.tesseract_cube(1.0)
        assert tesseract.n_vertices == 32
        assert tesseract.n_simplexes == 48
        assert isinstance(tesseract.vertices[0].position, Vec4)
        positions, _ = tesseract.as_arrays()
        np.testing.assert_allclose(np.abs(positions), 0.5)


class TestTesseractSlices:
    """Slices through the center of a rotated tesseract are closed shells."""

    def test_axis_aligned(self, rng):
        section = TetrahedronMesh.tesseract_cube(1.0).cross_section()
        assert not section.is_empty
        for _ in range(5):
            direction = rng.normal(size=3)
            assert line_intersect_count(section, direction, OFFSET) == 2

    def test_random_rotations(self, random_rotor, rng):
        tesseract = TetrahedronMesh.tesseract_cube(1.0)
        for _ in range(10):
            section = tesseract.apply_transform(random_rotor()).cross_section()
            direction = rng.normal(size=3)
            assert line_intersect_count(section, direction, OFFSET) == 2

    def test_quarter_turn_into_w(self):
        """x turned onto w: the slice is the cube of the w-facing cells."""
        rotor = Rotor4.from_bivec_angles(Bivec4(xw=np.pi / 2))
        section = TetrahedronMesh.tesseract_cube(1.0).apply_transform(rotor).cross_section()
        assert line_intersect_count(section, (2.0, 0.0, 0.0), (0.0, 0.1, 0.23)) == 2

    def test_axis_aligned_slice_winds_inward(self):
        """Right-hand normals of the cube slice point inward until inverted."""
        section = TetrahedronMesh.tesseract_cube(1.0).cross_section()

        def facing(mesh):
            positions, triangles = mesh.as_arrays()
            p0, p1, p2 = (positions[triangles[:, k]] for k in range(3))
            normals = np.cross(p1 - p0, p2 - p0)
            return np.einsum('ij,ij->i', normals, (p0 + p1 + p2) / 3.0)

        assert section.n_simplexes == 48
        assert np.all(facing(section) < 0.0)
        assert np.all(facing(section.invert()) > 0.0)
        assert np.all(facing(TriangleMesh.cube(1.0)) < 0.0)
