# MIT License (see LICENSE)
"""
rotmath - Fixed-size linear algebra and rotation representations.

This package provides small, dtype-generic vectors and matrices, unit-tagged
angles, Euler angle triples and quaternions, with conversions between the
rotation representations and the usual transform builders for 3D graphics.

Main entry points:
    - Vector2, Vector3, Vector4: Fixed-length vectors (vector_type(n) for others).
    - Mat2, Mat3, Mat4: Square matrices (matrix_type(m, n) for other shapes).
    - Angle: A magnitude tagged as radians or degrees.
    - EulerAngles: (roll, pitch, yaw), Z-Y-X intrinsic.
    - Quaternion: w + xi + yj + zk, converts to/from Euler angles and to Mat3.

Submodules:
    - scalar: The float32/float64 scalar fields everything is generic over.
    - functions: Free constructors, products and transform builders.
    - gfx: Optional uniform-binding adapters.

Configuration:
    ROTMATH_DEFAULT_DTYPE=float32|float64 selects the dtype of values built
    from plain Python numbers (default float64).

Example:
    from rotmath import EulerAngles, Quaternion, deg, vec3

    q = Quaternion.from_euler(EulerAngles(deg(0.0), deg(0.0), deg(90.0)))
    q.rotate(vec3(1.0, 0.0, 0.0))   # ~ [0, 1, 0]
"""
from .scalar import Scalar, FloatField, F32, F64, field_of
from .angle import Angle, AngleUnit
from .vector import Vector, Vector2, Vector3, Vector4, vector_type
from .matrix import Matrix, SquareMatrix, Mat2, Mat3, Mat4, matrix_type, format_matrix
from .euler_angles import EulerAngles
from .quaternion import Quaternion, quaternion
from .functions import (
    rad,
    deg,
    vec2,
    vec3,
    vec4,
    mat2,
    mat3,
    mat4,
    mat_fill,
    mat_identity_fill,
    mat_transpose,
    translation,
    scale,
    look_at,
    perspective,
    orthographic,
    rotation_x,
    rotation_y,
    rotation_z,
)

__all__ = [
    # Scalar fields
    "Scalar",
    "FloatField",
    "F32",
    "F64",
    "field_of",
    # Angles
    "Angle",
    "AngleUnit",
    "EulerAngles",
    "rad",
    "deg",
    # Vectors
    "Vector",
    "Vector2",
    "Vector3",
    "Vector4",
    "vector_type",
    "vec2",
    "vec3",
    "vec4",
    # Matrices
    "Matrix",
    "SquareMatrix",
    "Mat2",
    "Mat3",
    "Mat4",
    "matrix_type",
    "format_matrix",
    "mat2",
    "mat3",
    "mat4",
    "mat_fill",
    "mat_identity_fill",
    "mat_transpose",
    # Quaternions
    "Quaternion",
    "quaternion",
    # Transform builders
    "translation",
    "scale",
    "look_at",
    "perspective",
    "orthographic",
    "rotation_x",
    "rotation_y",
    "rotation_z",
]
