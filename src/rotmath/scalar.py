# MIT License (see LICENSE)
"""
The scalar field capability every other type is generic over.

A field is a small object describing one IEEE floating-point type: its
constants (ZERO, ONE, NEG_ONE, PI) and the operations the rest of the
library needs (trig, sqrt, pow, atan2, degree/radian scaling). Vectors,
matrices and quaternions never hard-code a precision; they look up the field
of their numpy dtype with field_of() and call through it.

Two fields are provided:
    F32: numpy.float32 (single precision)
    F64: numpy.float64 (double precision)

All operations are total over IEEE floats. NaN and Inf propagate and are
never reported as failures.

Example:
    from rotmath.scalar import F32

    half_pi = F32.PI / F32.from_f32(2.0)
    s, c = F32.sine_cosine(half_pi)
"""
from __future__ import annotations
from dataclasses import dataclass
from functools import reduce
from typing import TYPE_CHECKING, Any, Protocol

import numpy as np

from .util import as_dtype, default_dtype

if TYPE_CHECKING:
    from .angle import Angle


class Scalar(Protocol):
    """
    Contract for a numeric field.

    Anything implementing these members can drive the containers. FloatField
    is the concrete implementation for numpy float dtypes.
    """

    ZERO: Any
    ONE: Any
    NEG_ONE: Any
    PI: Any

    def cast(self, x) -> Any: ...
    def pow(self, x, exp) -> Any: ...
    def square_root(self, x) -> Any: ...
    def sine(self, x) -> Any: ...
    def cosine(self, x) -> Any: ...
    def tangent(self, x) -> Any: ...
    def inv_tangent2(self, a, b) -> Any: ...
    def rad(self, x) -> Any: ...
    def deg(self, x) -> Any: ...
    def angle_rad(self, x) -> "Angle": ...
    def angle_deg(self, x) -> "Angle": ...
    def from_f32(self, f: float) -> Any: ...


@dataclass(frozen=True)
class FloatField:
    """
    Scalar field backed by a numpy floating-point dtype.

    Attributes:
        dtype: numpy float dtype (float32 or float64).
        ZERO, ONE, NEG_ONE, PI: Typed constants, set on init.
    """
    dtype: np.dtype

    def __post_init__(self) -> None:
        """Normalize the dtype and precompute typed constants."""
        dt = np.dtype(self.dtype)
        if dt.kind != "f":
            raise TypeError(f"Scalar field requires a float dtype, got {dt}")
        object.__setattr__(self, "dtype", dt)
        object.__setattr__(self, "ZERO", dt.type(0.0))
        object.__setattr__(self, "ONE", dt.type(1.0))
        object.__setattr__(self, "NEG_ONE", dt.type(-1.0))
        object.__setattr__(self, "PI", dt.type(np.pi))

    @property
    def name(self) -> str:
        return self.dtype.name

    def cast(self, x):
        """Coerce a number or array into this field's dtype."""
        if isinstance(x, np.ndarray):
            return x.astype(self.dtype, copy=False)
        return self.dtype.type(x)

    def from_f32(self, f: float):
        """
        Build a typed literal from a single-precision constant.

        The literal is rounded through float32 first, so generic code that
        spells its constants this way gets the same value in every field
        whenever the constant is exactly representable (2.0, 0.5, 180.0...).
        """
        return self.dtype.type(np.float32(f))

    def pow(self, x, exp):
        return np.power(self.cast(x), self.cast(exp))

    @np.errstate(invalid="ignore")
    def square_root(self, x):
        """Square root. Negative input yields NaN without a warning."""
        return np.sqrt(self.cast(x))

    def sine(self, x):
        return np.sin(self.cast(x))

    def cosine(self, x):
        return np.cos(self.cast(x))

    def tangent(self, x):
        return np.tan(self.cast(x))

    def sine_cosine(self, x) -> tuple:
        """Return (sin x, cos x)."""
        x = self.cast(x)
        return np.sin(x), np.cos(x)

    def inv_tangent2(self, a, b):
        """atan2(a, b): angle of the point (b, a), in radians."""
        return np.arctan2(self.cast(a), self.cast(b))

    def rad(self, x):
        """Treat x as a magnitude in degrees and return it in radians."""
        return np.deg2rad(self.cast(x))

    def deg(self, x):
        """Treat x as a magnitude in radians and return it in degrees."""
        return np.rad2deg(self.cast(x))

    def angle_rad(self, x) -> "Angle":
        """Wrap x as an Angle in radians."""
        # Local import: angle.py depends on this module.
        from .angle import Angle
        return Angle.rad(self.cast(x))

    def angle_deg(self, x) -> "Angle":
        """Wrap x as an Angle in degrees."""
        from .angle import Angle
        return Angle.deg(self.cast(x))


F32 = FloatField(np.dtype(np.float32))
F64 = FloatField(np.dtype(np.float64))

_FIELDS: dict[np.dtype, FloatField] = {
    F32.dtype: F32,
    F64.dtype: F64,
}


def field_for_dtype(dtype=None) -> FloatField:
    """
    Look up the field for a dtype (None selects the configured default).

    Raises:
        TypeError: If the dtype has no field (ints, float16, complex...).
    """
    dt = as_dtype(dtype)
    try:
        return _FIELDS[dt]
    except KeyError:
        raise TypeError(f"Unsupported scalar dtype: {dt}") from None


def field_of(value) -> FloatField:
    """
    Resolve the scalar field of a value.

    Accepts a FloatField, a numpy dtype or scalar type, a numpy scalar or
    array, any object exposing a ``dtype`` attribute (Vector, Matrix), or a
    plain Python number (resolves to the default field).

    Raises:
        TypeError: If the value's dtype is not supported.
    """
    if isinstance(value, FloatField):
        return value
    # np.float64 subclasses float, so numpy values are matched first.
    if isinstance(value, (np.generic, np.ndarray)):
        return field_for_dtype(value.dtype)
    if isinstance(value, (bool, int, float)):
        return field_for_dtype(default_dtype())
    if isinstance(value, np.dtype) or (isinstance(value, type) and issubclass(value, np.generic)):
        return field_for_dtype(value)
    dtype = getattr(value, "dtype", None)
    if dtype is None:
        raise TypeError(f"Cannot determine scalar field of {type(value).__name__}")
    return field_for_dtype(dtype)


def field_of_values(values, dtype=None) -> FloatField:
    """
    Pick the field for a container built from ``values``.

    An explicit dtype wins. Otherwise a float array (or container) keeps its
    own dtype. A sequence takes the promoted dtype of the float-typed items it
    holds at any nesting depth: numpy scalars, arrays, vectors or nested
    lists of rows. Python numbers in it adapt like NumPy's weak scalars.
    Anything else (plain Python numbers, int arrays) uses the default.
    """
    if dtype is not None:
        return field_for_dtype(dtype)
    own = getattr(values, "dtype", None)
    if own is not None:
        own = np.dtype(own)
        if own in _FIELDS:
            return _FIELDS[own]
        return field_for_dtype(None)
    if isinstance(values, (list, tuple)):
        kinds = _float_dtypes(values)
        if kinds:
            promoted = reduce(np.promote_types, kinds)
            if promoted in _FIELDS:
                return _FIELDS[promoted]
    return field_for_dtype(None)


def _float_dtypes(values) -> list[np.dtype]:
    """Float dtypes carried by the items of a (possibly nested) sequence."""
    kinds = []
    for v in values:
        if isinstance(v, (list, tuple)):
            kinds.extend(_float_dtypes(v))
            continue
        dt = getattr(v, "dtype", None)
        if dt is not None and np.dtype(dt).kind == "f":
            kinds.append(np.dtype(dt))
    return kinds
