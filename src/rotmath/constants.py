# MIT License (see LICENSE)
"""
Numeric and configuration constants shared across the library.

Display defaults and the environment variable names read by util.py live
here so that tests and tooling can refer to them by name.
"""
from __future__ import annotations

# Decimal places used when a matrix is rendered with str().
# Passing decimals= to Matrix.to_string() or format_matrix() overrides it
# per call; the value is never stored on the matrix itself.
DEFAULT_DECIMAL_PLACES: int = 4

# Environment variable selecting the dtype for values built from plain
# Python numbers. Accepted values: "float32", "float64" (also "f32", "f64").
DEFAULT_DTYPE_ENV: str = "ROTMATH_DEFAULT_DTYPE"

# Unit suffixes used by Angle.__str__.
RADIANS_SUFFIX: str = ""
DEGREES_SUFFIX: str = "°"
