# MIT License (see LICENSE)
"""
Array conversion and configuration helpers.

Provides the small set of numpy helpers the containers share: coercing
array-likes into contiguous arrays of a fixed float dtype, marking constants
read-only, and resolving the default dtype from the environment.
"""
from __future__ import annotations
import os

import numpy as np

from .constants import DEFAULT_DTYPE_ENV

_DTYPE_ALIASES = {
    "float32": np.float32,
    "f32": np.float32,
    "float": np.float32,
    "float64": np.float64,
    "f64": np.float64,
    "double": np.float64,
}


def default_dtype() -> np.dtype:
    """
    Dtype used for values built from plain Python numbers.

    Reads ROTMATH_DEFAULT_DTYPE on every call so tests can flip it with
    monkeypatch.setenv. Defaults to float64.

    Raises:
        ValueError: If the variable names an unsupported dtype.
    """
    raw = os.environ.get(DEFAULT_DTYPE_ENV, "float64").strip().lower()
    try:
        return np.dtype(_DTYPE_ALIASES[raw])
    except KeyError:
        raise ValueError(
            f"{DEFAULT_DTYPE_ENV} must be float32 or float64, got '{raw}'"
        ) from None


def as_dtype(dtype=None) -> np.dtype:
    """Normalize a dtype argument, falling back to default_dtype()."""
    if dtype is None:
        return default_dtype()
    return np.dtype(dtype)


def contiguous(values, dtype, shape: tuple[int, ...]) -> np.ndarray:
    """
    Copy array-like values into a C-contiguous array of the given dtype and shape.

    The copy is unconditional: containers never alias caller memory.

    Raises:
        ValueError: If the number of elements does not match the shape.
    """
    arr = np.array(values, dtype=dtype)
    if arr.shape != shape:
        if arr.size != int(np.prod(shape)):
            raise ValueError(f"Expected {shape} elements, got array of shape {arr.shape}")
        arr = arr.reshape(shape)
    return np.ascontiguousarray(arr)


def frozen(arr: np.ndarray) -> np.ndarray:
    """Mark an array read-only and return it. Used for class-level constants."""
    arr.flags.writeable = False
    return arr



def is_number(x) -> bool:
    """True for real Python or numpy scalars; bools are not numbers here."""
    return isinstance(x, (int, float, np.integer, np.floating)) and not isinstance(x, bool)
