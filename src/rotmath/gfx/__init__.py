# MIT License (see LICENSE)
"""
Graphics binding adapters.

This subpackage connects the core types to shader uniforms:
    - UniformBinding: Abstract base class (name validation, inactive uniforms).
    - RecordingBinding: In-memory binding for tests and headless tools.
    - ModernGLBinding: Binding for moderngl programs (install rotmath[gfx]).
    - UniformNameError: Raised for names with an embedded NUL.

The core library has no graphics dependency; these adapters are optional.

Typical usage:
    from rotmath.gfx import RecordingBinding

    binding = RecordingBinding()
    binding.bind(view_matrix, "u_view", program)
"""
from .binding import (
    UniformBinding,
    RecordingBinding,
    ModernGLBinding,
    UniformNameError,
    UniformUpload,
    INACTIVE_LOCATION,
)

__all__ = [
    "UniformBinding",
    "RecordingBinding",
    "ModernGLBinding",
    "UniformNameError",
    "UniformUpload",
    "INACTIVE_LOCATION",
]
