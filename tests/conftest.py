"""Shared fixtures.

- Seeded random generator
- Random bivectors / rotors / vectors built from it
"""

from __future__ import annotations

from typing import Callable

import numpy as np
import pytest

from hypermesh.core.algebra import Bivec4, Rotor4
from hypermesh.core.linalg import Vec4

# (name, from-axis, to-axis) with x=0, y=1, z=2, w=3
PLANES = (
    ("xy", 0, 1), ("xz", 0, 2), ("xw", 0, 3),
    ("yz", 1, 2), ("wy", 3, 1), ("zw", 2, 3),
)


def rotation_generator(angles: Bivec4) -> np.ndarray:
    """Skew-symmetric 4×4 generator whose expm turns each `ab` axis a towards b."""
    G = np.zeros((4, 4))
    for name, a, b in PLANES:
        theta = getattr(angles, name)
        G[b, a] += theta
        G[a, b] -= theta
    return G


@pytest.fixture()
def rng() -> np.random.Generator:
    return np.random.default_rng(12345)


@pytest.fixture()
def random_bivec(rng) -> Callable[..., Bivec4]:
    def make(scale: float = np.pi) -> Bivec4:
        return Bivec4.from_components(rng.uniform(-scale, scale, 6))
    return make


@pytest.fixture()
def random_rotor(random_bivec) -> Callable[[], Rotor4]:
    def make() -> Rotor4:
        return Rotor4.from_bivec_angles(random_bivec())
    return make


@pytest.fixture()
def random_vec4(rng) -> Callable[[], Vec4]:
    def make() -> Vec4:
        return Vec4.from_numpy(rng.uniform(-5.0, 5.0, 4))
    return make


@pytest.fixture()
def generator_matrix() -> Callable[[Bivec4], np.ndarray]:
    return rotation_generator
