# -*- coding: utf-8 -*-
"""
algebra/cayley.py - Cl(4,0) Product Table on Bitmask Blades

Each basis blade is a 4-bit mask (bit i set ⇔ eᵢ₊₁ is a factor), stored in
canonical ascending order, so a multivector is a length-16 array.

Used for the rotor → matrix sandwich and as an independent reference for
the hand-expanded rotor/bivector products.
"""
import numpy as np

N_DIMS = 4
N_BLADES = 1 << N_DIMS

# Vector basis: x, y, z, w → e1..e4
VECTOR_BLADES = (0b0001, 0b0010, 0b0100, 0b1000)

# Bivec4 component → (blade, sign). wy is e4e2 = -e2e4.
BIVECTOR_BLADES = (
    ('xy', 0b0011, 1.0),
    ('xz', 0b0101, 1.0),
    ('xw', 0b1001, 1.0),
    ('yz', 0b0110, 1.0),
    ('wy', 0b1010, -1.0),
    ('zw', 0b1100, 1.0),
)

PSEUDOSCALAR = 0b1111


def blade_product(a: int, b: int):
    """
    Product of two basis blades: e_A e_B = sign · e_(A xor B).

    Each factor of B is moved left past the factors of A with a larger
    index (one sign flip per swap); repeated factors square to +1.
    """
    sign = 1.0
    bits = a
    for i in range(N_DIMS):
        if (b >> i) & 1:
            for j in range(i + 1, N_DIMS):
                if (bits >> j) & 1:
                    sign = -sign
            bits ^= (1 << i)
    return sign, bits


def _build_table() -> np.ndarray:
    table = np.zeros((N_BLADES, N_BLADES, N_BLADES))
    for a in range(N_BLADES):
        for b in range(N_BLADES):
            sign, k = blade_product(a, b)
            table[a, b, k] = sign
    table.flags.writeable = False
    return table


# CAYLEY[a, b, k]: coefficient of blade k in e_a e_b
CAYLEY = _build_table()

GRADES = np.array([bin(k).count('1') for k in range(N_BLADES)])

# Reversion sign per blade: (-1)^(k(k-1)/2)
REVERSE_SIGNS = np.where((GRADES * (GRADES - 1) // 2) % 2 == 0, 1.0, -1.0)


def geometric_product(x: np.ndarray, y: np.ndarray) -> np.ndarray:
    """Full geometric product of two multivectors (length-16 arrays)."""
    return np.einsum('i,j,ijk->k', x, y, CAYLEY)


def reverse(x: np.ndarray) -> np.ndarray:
    return x * REVERSE_SIGNS


def grade(x: np.ndarray, k: int) -> np.ndarray:
    """Grade-k projection."""
    return np.where(GRADES == k, x, 0.0)


# === Conversions ===

def vector_to_multivector(components) -> np.ndarray:
    mv = np.zeros(N_BLADES)
    for blade, value in zip(VECTOR_BLADES, components):
        mv[blade] = value
    return mv


def multivector_to_vector(mv: np.ndarray) -> np.ndarray:
    return np.array([mv[blade] for blade in VECTOR_BLADES])


def bivector_to_multivector(bivec) -> np.ndarray:
    mv = np.zeros(N_BLADES)
    for name, blade, sign in BIVECTOR_BLADES:
        mv[blade] = sign * getattr(bivec, name)
    return mv


def multivector_to_bivector_components(mv: np.ndarray) -> dict:
    return {name: sign * float(mv[blade]) for name, blade, sign in BIVECTOR_BLADES}


def rotor_to_multivector(c: float, bivec, xyzw: float) -> np.ndarray:
    mv = bivector_to_multivector(bivec)
    mv[0] = c
    mv[PSEUDOSCALAR] = xyzw
    return mv


def sandwich_matrix(rotor_mv: np.ndarray) -> np.ndarray:
    """
    Row-major 4×4 matrix of v ↦ R̃ v R.

    Column j is the vector part of R̃ e_j R.
    """
    rev = reverse(rotor_mv)
    columns = [
        multivector_to_vector(geometric_product(geometric_product(rev, vector_to_multivector(e)), rotor_mv))
        for e in np.eye(N_DIMS)
    ]
    return np.stack(columns, axis=1)


__all__ = [
    'CAYLEY', 'blade_product', 'geometric_product', 'reverse', 'grade',
    'vector_to_multivector', 'multivector_to_vector',
    'bivector_to_multivector', 'multivector_to_bivector_components',
    'rotor_to_multivector', 'sandwich_matrix',
]
