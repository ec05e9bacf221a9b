# MIT License (see LICENSE)
"""
Uniform binding adapters.

The core types only promise a contiguous, row-major scalar buffer
(as_array/as_ptr/count). Getting that buffer into a shader is the job of a
binding: look up the uniform's location by name, then upload the buffer.
This module defines that seam as an abstract base class plus two concrete
bindings:

    - RecordingBinding: keeps every upload in memory. No GPU required.
    - ModernGLBinding: writes into moderngl program uniforms.

The only structured failure is an unusable uniform name. Names are handed to
C APIs as NUL-terminated strings, so an embedded NUL raises
UniformNameError. A location of -1 means "not an active uniform", which
graphics APIs ignore silently; bindings do the same (and log it at debug
level).
"""
from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

import numpy as np

if TYPE_CHECKING:
    import moderngl

logger = logging.getLogger(__name__)

INACTIVE_LOCATION: int = -1


class UniformNameError(ValueError):
    """Uniform name cannot be passed to the graphics API (embedded NUL)."""


class Bindable(Protocol):
    """What a binding needs from a value: a flat buffer and its element count."""

    @property
    def count(self) -> int: ...

    def as_array(self) -> np.ndarray: ...


class UniformBinding(ABC):
    """
    Abstract base class for uniform bindings.

    Subclasses implement _lookup() and _upload(); validation, inactive
    uniform handling and logging live here.

    Usage:
        binding = RecordingBinding()
        binding.bind(Mat4.perspective(16 / 9, deg(60.0), 0.1, 100.0), "u_proj", program=1)
    """

    def uniform_location(self, name: Any, program: Any) -> int:
        """
        Resolve the location of a named uniform in program.

        Args:
            name: Uniform name; anything with a str() form.
            program: Backend-specific program handle.

        Returns:
            The location, or -1 if the program has no such active uniform.

        Raises:
            UniformNameError: If the name contains a NUL character.
        """
        text = str(name)
        if "\0" in text:
            raise UniformNameError(
                f"Uniform name contains a NUL character at offset {text.index(chr(0))}: {text!r}"
            )
        return self._lookup(text, program)

    def bind(self, value: Bindable, name: Any, program: Any) -> bool:
        """
        Upload value to the named uniform.

        Returns:
            True if uploaded, False if the uniform is inactive.

        Raises:
            UniformNameError: If the name contains a NUL character.
        """
        location = self.uniform_location(name, program)
        if location == INACTIVE_LOCATION:
            logger.debug("Uniform %r not active in program %r, skipping upload", str(name), program)
            return False
        data = value.as_array()
        self._upload(location, str(name), program, data, value.count)
        logger.debug(
            "Uploaded %d x %s to uniform %r (location %d)",
            value.count, data.dtype.name, str(name), location,
        )
        return True

    @abstractmethod
    def _lookup(self, name: str, program: Any) -> int:
        """Backend location lookup for an already validated name."""
        ...

    @abstractmethod
    def _upload(self, location: int, name: str, program: Any, data: np.ndarray, count: int) -> None:
        """
        Backend upload.

        Args:
            location: Location returned by _lookup().
            name: Uniform name.
            program: Program handle.
            data: Read-only flat row-major buffer.
            count: Number of scalars in data.
        """
        ...


@dataclass(frozen=True)
class UniformUpload:
    """One upload captured by RecordingBinding."""
    program: Any
    name: str
    location: int
    data: np.ndarray
    count: int


class RecordingBinding(UniformBinding):
    """
    Binding that records uploads instead of talking to a GPU.

    Locations are handed out per program in first-lookup order. Names listed
    in ``inactive`` resolve to -1.

    Attributes:
        uploads: Captured uploads, oldest first. Each holds a copy of the buffer.
    """

    def __init__(self, inactive: tuple[str, ...] = ()) -> None:
        self.inactive = set(inactive)
        self.uploads: list[UniformUpload] = []
        self._locations: dict[Any, dict[str, int]] = {}

    def _lookup(self, name: str, program: Any) -> int:
        if name in self.inactive:
            return INACTIVE_LOCATION
        table = self._locations.setdefault(program, {})
        return table.setdefault(name, len(table))

    def _upload(self, location: int, name: str, program: Any, data: np.ndarray, count: int) -> None:
        self.uploads.append(UniformUpload(
            program=program,
            name=name,
            location=location,
            data=data.copy(),
            count=count,
        ))

    def last(self, name: str) -> UniformUpload | None:
        """Most recent upload to name, if any."""
        for upload in reversed(self.uploads):
            if upload.name == name:
                return upload
        return None

    def clear(self) -> None:
        self.uploads.clear()


class ModernGLBinding(UniformBinding):
    """
    Binding for moderngl programs.

    moderngl takes raw bytes and interprets them in GL order (column-major
    for matrices). Matrices built for row vectors (look_at, perspective)
    therefore upload as-is; column-vector matrices need transpose() first.

    Args:
        dtype: Scalar type the shader declares (float32 for float/vec/mat,
               float64 for double/dvec/dmat).
    """

    def __init__(self, dtype=np.float32) -> None:
        self.dtype = np.dtype(dtype)

    def _lookup(self, name: str, program: "moderngl.Program") -> int:
        if name not in program:
            return INACTIVE_LOCATION
        return int(program[name].location)

    def _upload(
        self,
        location: int,
        name: str,
        program: "moderngl.Program",
        data: np.ndarray,
        count: int,
    ) -> None:
        program[name].write(np.ascontiguousarray(data, dtype=self.dtype).tobytes())
