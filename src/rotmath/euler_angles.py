# MIT License (see LICENSE)
"""
Euler angle triples.

Convention (aerospace, Z-Y-X intrinsic):
    roll  - rotation about X
    pitch - rotation about Y
    yaw   - rotation about Z
The composed rotation is Rz(yaw) * Ry(pitch) * Rx(roll). See
quaternion.py for the conversions.
"""
from __future__ import annotations
from dataclasses import dataclass, field

from .angle import Angle


@dataclass(frozen=True)
class EulerAngles:
    """
    (roll, pitch, yaw), each an independent Angle.

    The three angles may carry different units; to_radians()/to_degrees()
    bring them to one unit.
    """
    roll: Angle = field(default_factory=Angle)
    pitch: Angle = field(default_factory=Angle)
    yaw: Angle = field(default_factory=Angle)

    def to_radians(self) -> EulerAngles:
        return EulerAngles(
            roll=self.roll.to_radians(),
            pitch=self.pitch.to_radians(),
            yaw=self.yaw.to_radians(),
        )

    def to_degrees(self) -> EulerAngles:
        return EulerAngles(
            roll=self.roll.to_degrees(),
            pitch=self.pitch.to_degrees(),
            yaw=self.yaw.to_degrees(),
        )

    def __iter__(self):
        """Unpack as roll, pitch, yaw."""
        return iter((self.roll, self.pitch, self.yaw))

    def __str__(self) -> str:
        return f"[{self.roll} {self.pitch} {self.yaw}]"
