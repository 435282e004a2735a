# -*- coding: utf-8 -*-
"""
mesh.py - Simplicial Meshes

A SimplexMesh is a vertex list plus an (M, N) integer array of indices, one
row per simplex: N=3 triangles, N=4 tetrahedra. Orientation is encoded only
by the order of indices in a row.

Vertices carry a position vector. Lifting appends a coordinate, projection
drops the last one; the dimension change goes through the vector types'
associated classes (`vector3_type`, `vector4_type`, ...).
"""
import logging
import math
from dataclasses import dataclass, field, replace
from typing import ClassVar, List, Optional, Type

import numpy as np

from .base import Transform
from .linalg.numeric import Vec2, Vec3, Vec4
from .linalg.traits import Vector, Vector2, Vector3, Vector4

logger = logging.getLogger(__name__)


# === Vertices ===

@dataclass(frozen=True)
class _Vertex:
    position: Vector

    def transformed(self, transform: Transform) -> '_Vertex':
        return replace(self, position=transform.transform(self.position))

    def interpolate_with(self, other: '_Vertex', fraction: float) -> '_Vertex':
        return replace(self, position=self.position.interpolate_with(other.position, fraction))


@dataclass(frozen=True)
class Vertex2(_Vertex):
    position: Vector2

    def lift_orthographic(self, depth: float) -> 'Vertex3':
        p = self.position
        return Vertex3(position=p.vector3_type.new(p.x, p.y, depth))


@dataclass(frozen=True)
class Vertex3(_Vertex):
    position: Vector3

    def lift_orthographic(self, depth: float) -> 'Vertex4':
        p = self.position
        return Vertex4(position=p.vector4_type.new(p.x, p.y, p.z, depth))

    def project_orthographic(self) -> Vertex2:
        """Onto the plane z = 0."""
        p = self.position
        return Vertex2(position=p.vector2_type.new(p.x, p.y))

    def orthographic_depth(self) -> float:
        return self.position.z


@dataclass(frozen=True)
class Vertex4(_Vertex):
    position: Vector4

    def project_orthographic(self) -> Vertex3:
        """Onto the hyperplane w = 0."""
        p = self.position
        return Vertex3(position=p.vector3_type.new(p.x, p.y, p.z))

    def orthographic_depth(self) -> float:
        return self.position.w


# === Meshes ===

@dataclass(eq=False)
class SimplexMesh:
    """
    Vertices plus simplex index rows.

    Vertices need not be unique. Operations return new meshes and leave the
    receiver untouched.
    """
    vertices: List[_Vertex] = field(default_factory=list)
    simplexes: np.ndarray = None

    SIMPLEX_SIZE: ClassVar[int] = 0

    def __post_init__(self):
        self.vertices = list(self.vertices)
        if self.simplexes is None:
            self.simplexes = np.empty((0, self.SIMPLEX_SIZE), dtype=np.int64)
        simplexes = np.asarray(self.simplexes, dtype=np.int64)
        if simplexes.size == 0:
            simplexes = simplexes.reshape(0, self.SIMPLEX_SIZE)
        if simplexes.ndim != 2 or simplexes.shape[1] != self.SIMPLEX_SIZE:
            raise ValueError(f"{type(self).__name__} needs (M, {self.SIMPLEX_SIZE}) simplexes, got {simplexes.shape}")
        if simplexes.size and (simplexes.min() < 0 or simplexes.max() >= len(self.vertices)):
            raise ValueError(f"Simplex index out of range for {len(self.vertices)} vertices")
        self.simplexes = simplexes

    @property
    def n_vertices(self) -> int:
        return len(self.vertices)

    @property
    def n_simplexes(self) -> int:
        return self.simplexes.shape[0]

    @property
    def is_empty(self) -> bool:
        return self.n_simplexes == 0

    def simplex_positions(self, index: int) -> list:
        return [self.vertices[i].position for i in self.simplexes[index]]

    def as_arrays(self):
        """(positions (V, D) float array, simplexes (M, N) int array)."""
        if not self.vertices:
            return np.empty((0, 0)), self.simplexes.copy()
        positions = np.array([v.position.components() for v in self.vertices], dtype=float)
        return positions, self.simplexes.copy()

    # === Operations ===

    def apply_transform(self, transform: Transform) -> 'SimplexMesh':
        return type(self)(
            vertices=[v.transformed(transform) for v in self.vertices],
            simplexes=self.simplexes.copy(),
        )

    def invert(self) -> 'SimplexMesh':
        """Flip every simplex: triangles front to back, tetrahedra inside out."""
        simplexes = self.simplexes.copy()
        simplexes[:, [0, 1]] = simplexes[:, [1, 0]]
        return type(self)(vertices=list(self.vertices), simplexes=simplexes)

    def join(self, other: 'SimplexMesh') -> 'SimplexMesh':
        """Concatenate geometry. Duplicate vertices are kept."""
        return type(self)(
            vertices=self.vertices + other.vertices,
            simplexes=np.concatenate([self.simplexes, other.simplexes + len(self.vertices)]),
        )

    def lift_orthographic(self, depth: float) -> 'SimplexMesh':
        from .operators.lifting import lift_mesh

        return lift_mesh(self, depth)

    def __repr__(self):
        return f"{type(self).__name__}(vertices={self.n_vertices}, simplexes={self.n_simplexes})"


class TriangleMesh(SimplexMesh):
    SIMPLEX_SIZE = 3

    def extrude(self, height: float) -> 'TetrahedronMesh':
        from .operators.extrude import extrude

        return extrude(self, height)

    # === 2D Primitives ===

    @classmethod
    def rectangle(cls, size: Vector2) -> 'TriangleMesh':
        """Rectangle with side lengths `size`, centered at the origin."""
        x, y = size.x * 0.5, size.y * 0.5
        new = type(size).new
        return cls(
            vertices=[Vertex2(position=new(px, py)) for px, py in [(x, y), (x, -y), (-x, -y), (-x, y)]],
            simplexes=[[0, 1, 2], [2, 3, 0]],
        )

    @classmethod
    def square(cls, size: float, vector_type: Type[Vector2] = Vec2) -> 'TriangleMesh':
        return cls.rectangle(vector_type.new(size, size))

    @classmethod
    def circle(cls, radius: float, sides: int, vector_type: Type[Vector2] = Vec2) -> 'TriangleMesh':
        """
        Regular polygon with `sides` corners on a circle of `radius`,
        triangulated as a fan of sides - 2 triangles around vertex 0 with the
        same winding as `rectangle`.
        """
        if sides < 3:
            raise ValueError(f"A circle needs at least 3 sides, got {sides}")
        angles = [2.0 * math.pi * i / sides for i in range(sides)]
        return cls(
            vertices=[Vertex2(position=vector_type.new(radius * math.cos(a), radius * math.sin(a))) for a in angles],
            simplexes=[[0, i + 2, i + 1] for i in range(sides - 2)],
        )

    # === 3D Shells ===

    @classmethod
    def rectangular_prism(cls, size: Vector3) -> 'TriangleMesh':
        """
        Closed surface of a box with side lengths `size`, centered at the origin.

        Faces are wound clockwise seen from outside: right-hand normals point in.
        """
        x, y, z = size.x * 0.5, size.y * 0.5, size.z * 0.5
        corners = [
            (x, y, z), (-x, y, z), (x, -y, z), (-x, -y, z),
            (x, y, -z), (-x, y, -z), (x, -y, -z), (-x, -y, -z),
        ]
        new = type(size).new
        return cls(
            vertices=[Vertex3(position=new(*c)) for c in corners],
            simplexes=[
                [0, 2, 3], [3, 1, 0],  # +z
                [4, 7, 6], [4, 5, 7],  # -z
                [0, 4, 2], [4, 6, 2],  # +x
                [1, 3, 5], [7, 5, 3],  # -x
                [3, 2, 6], [3, 6, 7],  # -y
                [0, 1, 4], [4, 1, 5],  # +y
            ],
        )

    @classmethod
    def cube(cls, size: float, vector_type: Type[Vector3] = Vec3) -> 'TriangleMesh':
        return cls.rectangular_prism(vector_type.new(size, size, size))


class TetrahedronMesh(SimplexMesh):
    SIMPLEX_SIZE = 4

    def cross_section(self) -> TriangleMesh:
        from .operators.cross_section import cross_section

        return cross_section(self)

    @classmethod
    def rectangular_prism(cls, size: Vector3) -> 'TetrahedronMesh':
        """Solid box: the rectangle extruded along z."""
        rect = TriangleMesh.rectangle(type(size).vector2_type.new(size.x, size.y))
        return rect.extrude(size.z)

    @classmethod
    def cube(cls, size: float, vector_type: Type[Vector3] = Vec3) -> 'TetrahedronMesh':
        return cls.rectangular_prism(vector_type.new(size, size, size))

    @classmethod
    def tesseract(cls, size: Vector4) -> 'TetrahedronMesh':
        """
        Closed 3D shell of a 4D box with side lengths `size`.

        Six of the eight cells come from extruding the 3D box surface along
        w; the two w-facing cells are solid boxes lifted to ±w/2, the top one
        inverted to match the orientation of its neighbors.

        Slices keep the winding of the box surface the side cells came from,
        so cross-section triangles are wound clockwise seen from outside
        (right-hand normals point into the slice). Renderers that take
        counter-clockwise triangles as front faces should `invert()` the
        section or cull the other side.
        """
        size3 = type(size).vector3_type.new(size.x, size.y, size.z)
        half_w = size.w * 0.5
        sides = TriangleMesh.rectangular_prism(size3).extrude(size.w)
        endcap = TetrahedronMesh.rectangular_prism(size3)
        top_cap = endcap.lift_orthographic(half_w).invert()
        bottom_cap = endcap.lift_orthographic(-half_w)
        mesh = sides.join(top_cap).join(bottom_cap)
        logger.debug("Built tesseract shell: %s", mesh)
        return mesh

    @classmethod
    def tesseract_cube(cls, size: float, vector4_type: Optional[Type[Vector4]] = None) -> 'TetrahedronMesh':
        if vector4_type is None:
            vector4_type = Vec4
        return cls.tesseract(vector4_type.new(size, size, size, size))


__all__ = [
    'Vertex2', 'Vertex3', 'Vertex4',
    'SimplexMesh', 'TriangleMesh', 'TetrahedronMesh',
]
