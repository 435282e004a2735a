"""
tolerance.py - Numeric precision constants shared by the algebra and mesh code.
"""

# Simple-bivector check: |square().xyzw| must stay below this. Also the
# default tolerance of approx_eq helpers.
EPSILON = 1e-3

# Relative threshold: a bivector whose self-dual or anti-self-dual part is
# this small against the other is isoclinic and is split by planes.
FACTOR_EPSILON = 1e-9

# Rotor logarithm case selection (near-zero bivector part, planar bivector).
LOG_EPSILON = 1e-6

# Below this |c| the pseudoscalar part is not recovered from the bivector.
NORMALIZE_EPSILON = 1e-9

# Hyperplane (value of the last coordinate) at which meshes are sliced.
CROSS_SECTION_DEPTH = 0.0
