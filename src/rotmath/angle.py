# MIT License (see LICENSE)
"""
Unit-tagged angles.

An Angle is a single value type carrying a magnitude and a unit tag
(radians or degrees). Conversion between units is always explicit.

Arithmetic rules:
    angle ± scalar  -> magnitude changes, unit unchanged.
    angle ± angle   -> the right-hand side is converted to the left-hand
                       unit first; the result carries the left-hand unit.

The second rule is asymmetric: deg(90) + rad(pi) is
Degrees(270) while rad(pi) + deg(90) is Radians(3pi/2). Both describe the
same rotation.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .constants import DEGREES_SUFFIX, RADIANS_SUFFIX
from .scalar import FloatField, field_of
from .util import is_number


class AngleUnit(Enum):
    """Unit tag carried by every Angle."""
    RADIANS = "rad"
    DEGREES = "deg"


@dataclass(frozen=True)
class Angle:
    """
    An angle magnitude tagged with its unit.

    Attributes:
        value: Magnitude, stored in the dtype of its scalar field. Plain
               Python numbers are stored in the default dtype.
        unit: AngleUnit.RADIANS (default) or AngleUnit.DEGREES.
    """
    value: Any = 0.0
    unit: AngleUnit = AngleUnit.RADIANS

    def __post_init__(self) -> None:
        """Store the magnitude as a typed numpy scalar."""
        object.__setattr__(self, "value", field_of(self.value).cast(self.value))

    @classmethod
    def rad(cls, s) -> Angle:
        """Angle of s radians."""
        return cls(s, AngleUnit.RADIANS)

    @classmethod
    def deg(cls, s) -> Angle:
        """Angle of s degrees."""
        return cls(s, AngleUnit.DEGREES)

    @property
    def field(self) -> FloatField:
        return field_of(self.value)

    def is_radians(self) -> bool:
        return self.unit is AngleUnit.RADIANS

    def is_degrees(self) -> bool:
        return self.unit is AngleUnit.DEGREES

    def to_radians(self) -> Angle:
        """Same angle in radians. Returns self if already in radians."""
        if self.is_radians():
            return self
        return Angle(self.field.rad(self.value), AngleUnit.RADIANS)

    def to_degrees(self) -> Angle:
        """Same angle in degrees. Returns self if already in degrees."""
        if self.is_degrees():
            return self
        return Angle(self.field.deg(self.value), AngleUnit.DEGREES)

    def to_unit(self, unit: AngleUnit) -> Angle:
        """Same angle expressed in the given unit."""
        if unit is AngleUnit.RADIANS:
            return self.to_radians()
        return self.to_degrees()

    def inner(self):
        """Bare magnitude in the current unit."""
        return self.value

    def to_inner(self):
        """Bare magnitude in the current unit (the unit is discarded)."""
        return self.value

    def units(self) -> str:
        """Display suffix: empty for radians, a degree sign for degrees."""
        return RADIANS_SUFFIX if self.is_radians() else DEGREES_SUFFIX

    def _rhs_magnitude(self, other):
        if isinstance(other, Angle):
            return self.field.cast(other.to_unit(self.unit).value)
        if is_number(other):
            return self.field.cast(other)
        return None

    def __add__(self, other) -> Angle:
        rhs = self._rhs_magnitude(other)
        if rhs is None:
            return NotImplemented
        return Angle(self.value + rhs, self.unit)

    def __sub__(self, other) -> Angle:
        rhs = self._rhs_magnitude(other)
        if rhs is None:
            return NotImplemented
        return Angle(self.value - rhs, self.unit)

    def __str__(self) -> str:
        return f"{self.value}{self.units()}"
