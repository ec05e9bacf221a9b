# MIT License (see LICENSE)
"""
Free functions over the core types.

Grouped as:
    - Scalar wrappers: atan2, sqrt, sin, cos, tan (typed by the argument's field).
    - Constructors: rad, deg, vec2/3/4 (+ f32/f64 variants), mat2/3/4,
      mat_fill, mat_identity_fill.
    - Matrix helpers: mat_transpose, mat_to_mat2/3/4, the size-checked
      products mat2_mul_mat2 / mat3_mul_mat3 / mat4_mul_mat4, quat_mul_quat.
    - Transform builders: translation, scale, look_at, perspective,
      orthographic, rotation_x/y/z.

Layout conventions of the builders:
    translation, scale, orthographic and rotation_* are written for column
    vectors (M @ p): the translation sits in the last column.
    look_at and perspective are written for row vectors (p @ M): the eye
    projection and the w-divide term sit in the last row/column pair. Read
    as a flat row-major buffer, these two are exactly what a column-major
    graphics API expects, so they upload without transposition.

Reference:
    gluLookAt / gluPerspective / glOrtho man pages (OpenGL 2.1).
"""
from __future__ import annotations

import numpy as np

from .angle import Angle
from .matrix import (
    Mat2,
    Mat3,
    Mat4,
    Matrix,
    SquareMatrix,
    mat_identity_fill,
    mat_transpose,
    matrix_type,
)
from .quaternion import Quaternion
from .scalar import field_of, field_of_values
from .vector import Vector2, Vector3, Vector4


# =============================================================================
# Scalar wrappers
# =============================================================================

def atan2(a, b):
    """Angle of the point (b, a) in radians, in the field of a."""
    return field_of(a).inv_tangent2(a, b)


def sqrt(s):
    return field_of(s).square_root(s)


def sin(s):
    return field_of(s).sine(s)


def cos(s):
    return field_of(s).cosine(s)


def tan(s):
    return field_of(s).tangent(s)


def rad(radians) -> Angle:
    return Angle.rad(radians)


def deg(degrees) -> Angle:
    return Angle.deg(degrees)


# =============================================================================
# Constructors
# =============================================================================

def vec2(x, y, dtype=None) -> Vector2:
    return Vector2([x, y], dtype=dtype)


def vec3(x, y, z, dtype=None) -> Vector3:
    return Vector3([x, y, z], dtype=dtype)


def vec4(x, y, z, w, dtype=None) -> Vector4:
    return Vector4([x, y, z, w], dtype=dtype)


def vec2f32(x, y) -> Vector2:
    return Vector2([x, y], dtype=np.float32)


def vec3f32(x, y, z) -> Vector3:
    return Vector3([x, y, z], dtype=np.float32)


def vec4f32(x, y, z, w) -> Vector4:
    return Vector4([x, y, z, w], dtype=np.float32)


def vec2f64(x, y) -> Vector2:
    return Vector2([x, y], dtype=np.float64)


def vec3f64(x, y, z) -> Vector3:
    return Vector3([x, y, z], dtype=np.float64)


def vec4f64(x, y, z, w) -> Vector4:
    return Vector4([x, y, z, w], dtype=np.float64)


def mat2(a, b, c, d, dtype=None) -> Mat2:
    """2x2 matrix from its elements in row-major order."""
    return Mat2([
        [a, b],
        [c, d],
    ], dtype=dtype)


def mat3(a, b, c, d, e, f, g, h, i, dtype=None) -> Mat3:
    """3x3 matrix from its elements in row-major order."""
    return Mat3([
        [a, b, c],
        [d, e, f],
        [g, h, i],
    ], dtype=dtype)


def mat4(a, b, c, d, e, f, g, h, i, j, k, l, m, n, o, p, dtype=None) -> Mat4:
    """4x4 matrix from its elements in row-major order."""
    return Mat4([
        [a, b, c, d],
        [e, f, g, h],
        [i, j, k, l],
        [m, n, o, p],
    ], dtype=dtype)


def mat_fill(m: int, n: int, fill, dtype=None) -> Matrix:
    """m x n matrix with every element equal to fill."""
    return matrix_type(m, n).fill(fill, dtype=dtype)


# =============================================================================
# Matrix helpers
# =============================================================================

def mat_to_mat2(matrix: SquareMatrix) -> Mat2:
    """Top-left 2x2 block (or identity-padded embedding). Lossy."""
    return matrix.mat2()


def mat_to_mat3(matrix: SquareMatrix) -> Mat3:
    return matrix.mat3()


def mat_to_mat4(matrix: SquareMatrix) -> Mat4:
    return matrix.mat4()


def _checked_product(cls: type[SquareMatrix], a, b):
    if not (type(a) is cls and type(b) is cls and a.dtype == b.dtype):
        raise TypeError(
            f"Expected two {cls.__name__} of one dtype, got "
            f"{type(a).__name__}[{getattr(a, 'dtype', '?')}] and "
            f"{type(b).__name__}[{getattr(b, 'dtype', '?')}]"
        )
    return a @ b


def mat2_mul_mat2(a: Mat2, b: Mat2) -> Mat2:
    return _checked_product(Mat2, a, b)


def mat3_mul_mat3(a: Mat3, b: Mat3) -> Mat3:
    return _checked_product(Mat3, a, b)


def mat4_mul_mat4(a: Mat4, b: Mat4) -> Mat4:
    return _checked_product(Mat4, a, b)


def quat_mul_quat(a: Quaternion, b: Quaternion) -> Quaternion:
    """Hamilton product a * b."""
    if not (isinstance(a, Quaternion) and isinstance(b, Quaternion) and a.dtype == b.dtype):
        raise TypeError("quat_mul_quat expects two quaternions of one dtype")
    return a * b


# =============================================================================
# Transform builders
# =============================================================================

def translation(translation: Vector3) -> Mat4:
    """Identity with the translation in the last column (column-vector form)."""
    out = Mat4.identity(translation.dtype)
    for i in range(3):
        out[i, 3] = translation[i]
    return out


def scale(scale: Vector3) -> Mat4:
    """diag(x, y, z, 1)."""
    zero, one = scale.field.ZERO, scale.field.ONE
    return Mat4([
        [scale.x, zero, zero, zero],
        [zero, scale.y, zero, zero],
        [zero, zero, scale.z, zero],
        [zero, zero, zero, one],
    ], dtype=scale.dtype)


def look_at(eye: Vector3, center: Vector3, up: Vector3) -> Mat4:
    """
    View matrix looking from eye towards center (row-vector form).

    forward f = normalize(center - eye), side s = normalize(f x up),
    true up u = s x f. Applied as ``point @ view``, center lands on the
    negative Z axis at distance |center - eye|.

    up must not be parallel to center - eye (the side vector would be NaN).
    """
    field = eye.field
    zero, one = field.ZERO, field.ONE

    f = (center - eye).normalize()
    s = f.cross_product(up).normalize()
    u = s.cross_product(f)

    return Mat4([
        [s.x, u.x, -f.x, zero],
        [s.y, u.y, -f.y, zero],
        [s.z, u.z, -f.z, zero],
        [-s.dot_product(eye), -u.dot_product(eye), f.dot_product(eye), one],
    ], dtype=eye.dtype)


def perspective(aspect_ratio, fov, near, far) -> Mat4:
    """
    Symmetric-frustum perspective projection (row-vector form).

    Args:
        aspect_ratio: Viewport width / height.
        fov: Full vertical field of view in radians (halved internally).
        near, far: Clip plane distances, both positive.
    """
    field = field_of_values([aspect_ratio, fov, near, far])
    aspect_ratio, fov, near, far = (field.cast(v) for v in (aspect_ratio, fov, near, far))
    zero, one, two = field.ZERO, field.ONE, field.from_f32(2.0)
    fov = fov / two

    a = one / (aspect_ratio * field.tangent(fov))
    b = one / field.tangent(fov)
    c = -(far + near) / (far - near)
    d = -(two * far * near) / (far - near)
    e = -one

    return Mat4([
        [a, zero, zero, zero],
        [zero, b, zero, zero],
        [zero, zero, c, e],
        [zero, zero, d, zero],
    ], dtype=field.dtype)


def orthographic(left, right, bottom, top, near, far) -> Mat4:
    """Map the box [l, r] x [b, t] x [-n, -f] onto the NDC cube (column-vector form)."""
    field = field_of_values([left, right, bottom, top, near, far])
    left, right, bottom, top, near, far = (
        field.cast(v) for v in (left, right, bottom, top, near, far)
    )
    zero, one, two = field.ZERO, field.ONE, field.from_f32(2.0)

    return Mat4([
        [two / (right - left), zero, zero, -(right + left) / (right - left)],
        [zero, two / (top - bottom), zero, -(top + bottom) / (top - bottom)],
        [zero, zero, -two / (far - near), -(far + near) / (far - near)],
        [zero, zero, zero, one],
    ], dtype=field.dtype)


def rotation_x(theta) -> Mat3:
    """Rotation about +X by theta radians."""
    field = field_of(theta)
    sin_t, cos_t = field.sine_cosine(theta)
    zero, one = field.ZERO, field.ONE
    return Mat3([
        [one, zero, zero],
        [zero, cos_t, -sin_t],
        [zero, sin_t, cos_t],
    ], dtype=field.dtype)


def rotation_y(theta) -> Mat3:
    """Rotation about +Y by theta radians."""
    field = field_of(theta)
    sin_t, cos_t = field.sine_cosine(theta)
    zero, one = field.ZERO, field.ONE
    return Mat3([
        [cos_t, zero, sin_t],
        [zero, one, zero],
        [-sin_t, zero, cos_t],
    ], dtype=field.dtype)


def rotation_z(theta) -> Mat3:
    """Rotation about +Z by theta radians."""
    field = field_of(theta)
    sin_t, cos_t = field.sine_cosine(theta)
    zero, one = field.ZERO, field.ONE
    return Mat3([
        [cos_t, -sin_t, zero],
        [sin_t, cos_t, zero],
        [zero, zero, one],
    ], dtype=field.dtype)
