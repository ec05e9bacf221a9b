# MIT License (see LICENSE)
"""
Quaternions and the rotation conversions built on them.

A quaternion q = w + xi + yj + zk is stored as its vector part xyz (a
Vector3) and its scalar part w. Values are immutable; every operation
returns a new quaternion.

Rotation conversions (Z-Y-X intrinsic Euler convention, see
euler_angles.py):

    EulerAngles --from_euler--> Quaternion --to_euler--> EulerAngles
                                Quaternion --to_mat3---> Mat3

Quaternions are never normalized implicitly. to_mat3() and rotate() are
only meaningful for unit quaternions: call unit() first. A zero quaternion
has no unit() (the result is NaN).

Euler extraction uses the half-angle form
    pitch = 2 * atan2(sqrt(1 + t), sqrt(1 - t)) - pi/2,  t = 2(wy - xz)
instead of asin(t), with t clamped to [-1, 1]. Away from gimbal lock
(|pitch| < 90 deg) a round trip recovers the input angles; at the poles
roll and yaw are coupled and only their combination is recoverable.

Reference:
    https://en.wikipedia.org/wiki/Conversion_between_quaternions_and_Euler_angles
"""
from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from .angle import Angle
from .euler_angles import EulerAngles
from .matrix import Mat3
from .scalar import FloatField, field_of, field_of_values
from .util import frozen, is_number
from .vector import Vector3


@dataclass(frozen=True)
class Quaternion:
    """
    Quaternion w + xi + yj + zk.

    Attributes:
        xyz: Vector part (x, y, z). Accepts any 3-element array-like; stored
             as a read-only Vector3.
        w: Scalar part, cast to the dtype of xyz.
    """
    xyz: Vector3
    w: object = 0.0

    def __post_init__(self) -> None:
        """Freeze a private copy of the vector part and type the scalar part."""
        xyz = Vector3(self.xyz)
        frozen(xyz._data)
        object.__setattr__(self, "xyz", xyz)
        object.__setattr__(self, "w", xyz.field.cast(self.w))

    def __hash__(self) -> int:
        # Hash by value: Vector itself is unhashable.
        return hash((self.w, tuple(self.xyz.tolist())))

    @classmethod
    def new(cls, xyz, w) -> Quaternion:
        return cls(xyz, w)

    @classmethod
    def pure(cls, xyz) -> Quaternion:
        """Quaternion with zero scalar part, used to embed a 3D vector."""
        return cls(xyz, 0.0)

    @classmethod
    def identity(cls, dtype=None) -> Quaternion:
        """The no-rotation quaternion 1 + 0i + 0j + 0k."""
        return cls(Vector3.zeros(dtype), 1.0)

    # -- components ---------------------------------------------------------

    @property
    def field(self) -> FloatField:
        return self.xyz.field

    @property
    def dtype(self) -> np.dtype:
        return self.xyz.dtype

    @property
    def v(self) -> Vector3:
        return self.xyz

    @property
    def s(self):
        return self.w

    @property
    def x(self):
        return self.xyz[0]

    @property
    def y(self):
        return self.xyz[1]

    @property
    def z(self):
        return self.xyz[2]

    def w_xyz(self) -> tuple:
        """Components as (w, x, y, z)."""
        return self.w, self.xyz[0], self.xyz[1], self.xyz[2]

    # -- algebra ------------------------------------------------------------

    def conjugate(self) -> Quaternion:
        """q* = w - xi - yj - zk."""
        return Quaternion(-self.xyz, self.w)

    def norm(self):
        """|q| = sqrt(w^2 + x^2 + y^2 + z^2)."""
        field = self.field
        two = field.from_f32(2.0)
        total = field.ZERO
        for c in self.xyz:
            total += field.pow(c, two)
        total += field.pow(self.w, two)
        return field.square_root(total)

    def unit(self) -> Quaternion:
        """q / |q|. A zero quaternion yields NaN components."""
        return self / self.norm()

    def inverse(self) -> Quaternion:
        """q^-1 = q* / |q|^2."""
        return self.conjugate() / self.field.pow(self.norm(), self.field.from_f32(2.0))

    @np.errstate(divide="ignore", invalid="ignore")
    def __truediv__(self, scalar) -> Quaternion:
        if not is_number(scalar):
            return NotImplemented
        scalar = self.field.cast(scalar)
        return Quaternion(self.xyz / scalar, self.w / scalar)

    def __mul__(self, other) -> Quaternion:
        """Hamilton product self * other (not commutative)."""
        if not isinstance(other, Quaternion) or other.dtype != self.dtype:
            return NotImplemented
        a_w, a_x, a_y, a_z = self.w_xyz()
        b_w, b_x, b_y, b_z = other.w_xyz()
        return Quaternion(
            Vector3._wrap(np.array([
                a_w * b_x + a_x * b_w + a_y * b_z - a_z * b_y,
                a_w * b_y - a_x * b_z + a_y * b_w + a_z * b_x,
                a_w * b_z + a_x * b_y - a_y * b_x + a_z * b_w,
            ], dtype=self.dtype)),
            a_w * b_w - a_x * b_x - a_y * b_y - a_z * b_z,
        )

    # -- rotation conversions -----------------------------------------------

    @classmethod
    def from_euler(cls, angles: EulerAngles) -> Quaternion:
        """
        Quaternion for Rz(yaw) * Ry(pitch) * Rx(roll).

        Angles may be in any unit; all three are computed in the scalar
        field of roll.
        """
        field = field_of(angles.roll.value)
        two = field.from_f32(2.0)

        roll = field.cast(angles.roll.to_radians().to_inner())
        pitch = field.cast(angles.pitch.to_radians().to_inner())
        yaw = field.cast(angles.yaw.to_radians().to_inner())

        sr, cr = field.sine_cosine(roll / two)
        sp, cp = field.sine_cosine(pitch / two)
        sy, cy = field.sine_cosine(yaw / two)

        w = cr * cp * cy + sr * sp * sy
        x = sr * cp * cy - cr * sp * sy
        y = cr * sp * cy + sr * cp * sy
        z = cr * cp * sy - sr * sp * cy

        return cls(Vector3._wrap(np.array([x, y, z], dtype=field.dtype)), w)

    def to_euler(self) -> EulerAngles:
        """Roll, pitch and yaw in radians (see module docstring for the poles)."""
        field = self.field
        one, two, pi = field.ONE, field.from_f32(2.0), field.PI
        q_w, q_x, q_y, q_z = self.w_xyz()

        sinr_cosp = two * (q_w * q_x + q_y * q_z)
        cosr_cosp = one - two * (q_x * q_x + q_y * q_y)

        t = min(max(two * (q_w * q_y - q_x * q_z), field.NEG_ONE), one)
        sin_p = field.square_root(one + t)
        cos_p = field.square_root(one - t)

        siny_cosp = two * (q_w * q_z + q_x * q_y)
        cosy_cosp = one - two * (q_y * q_y + q_z * q_z)

        return EulerAngles(
            roll=Angle.rad(field.inv_tangent2(sinr_cosp, cosr_cosp)),
            pitch=Angle.rad(two * field.inv_tangent2(sin_p, cos_p) - pi / two),
            yaw=Angle.rad(field.inv_tangent2(siny_cosp, cosy_cosp)),
        )

    def to_mat3(self) -> Mat3:
        """
        3x3 rotation matrix of a unit quaternion.

        No normalization is done here; a non-unit quaternion gives a scaled,
        non-orthogonal matrix.
        """
        one, two = self.field.ONE, self.field.from_f32(2.0)
        w, x, y, z = self.w_xyz()
        return Mat3._wrap(np.array([
            [one - two * y * y - two * z * z, two * x * y - two * w * z, two * x * z + two * w * y],
            [two * x * y + two * w * z, one - two * x * x - two * z * z, two * y * z - two * w * x],
            [two * x * z - two * w * y, two * y * z + two * w * x, one - two * x * x - two * y * y],
        ], dtype=self.dtype))

    def rotation_matrix(self) -> Mat3:
        """Alias of to_mat3()."""
        return self.to_mat3()

    def rotate(self, v: Vector3) -> Vector3:
        """Rotate v by the sandwich product q * v * q*. Requires a unit quaternion."""
        if not isinstance(v, Vector3):
            raise TypeError(f"rotate() expects a Vector3, got {type(v).__name__}")
        rotated = self * Quaternion.pure(v.astype(self.dtype)) * self.conjugate()
        return rotated.xyz.copy()

    def __str__(self) -> str:
        return f"{self.w} + {self.x}i + {self.y}j + {self.z}k"


def quaternion(x, y, z, w, dtype=None) -> Quaternion:
    """Build a quaternion from four scalars (vector part first)."""
    field = field_of_values([x, y, z, w], dtype)
    return Quaternion(Vector3([x, y, z], dtype=field.dtype), w)
