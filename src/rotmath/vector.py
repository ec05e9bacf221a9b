# MIT License (see LICENSE)
"""
Fixed-length vectors.

The length of a vector is part of its class, never of the instance:
Vector2, Vector3 and Vector4 are the named specializations, and
vector_type(n) returns the (cached) class for any other length. Operations
between vectors require the same class and the same dtype, so a Vector3 can
never be silently combined with a Vector4.

Storage is a C-contiguous numpy array of the vector's dtype, which doubles as
the export buffer handed to graphics bindings (see as_array/as_ptr).

Axis constants (UP, DOWN, LEFT, RIGHT, FORWARD, BACKWARD) are read-only and
built in the default dtype at import time; use astype() for another
precision.
"""
from __future__ import annotations
from typing import ClassVar, Iterator

import numpy as np

from .scalar import FloatField, field_of, field_of_values
from .util import contiguous, frozen, is_number


class Vector:
    """
    Base class of all fixed-length vectors.

    Not instantiable directly: use Vector2/Vector3/Vector4 or vector_type(n).

    Args:
        values: Exactly SIZE components (any array-like).
        dtype: float32 or float64. Inferred from values when omitted.

    Raises:
        ValueError: If the number of components does not match SIZE.
    """

    SIZE: ClassVar[int] = 0
    ZERO: ClassVar[Vector]

    __slots__ = ("_data",)
    # numpy must defer to our reflected operators (np.float32(2) * v).
    __array_ufunc__ = None
    __hash__ = None

    def __init__(self, values, dtype=None) -> None:
        if self.SIZE <= 0:
            raise TypeError("Vector has no fixed length; use Vector2/3/4 or vector_type(n)")
        field = field_of_values(values, dtype)
        self._data = contiguous(values, field.dtype, (self.SIZE,))

    @classmethod
    def _wrap(cls, data: np.ndarray) -> Vector:
        """Adopt an array without copying. Caller guarantees shape and dtype."""
        obj = object.__new__(cls)
        obj._data = data
        return obj

    @classmethod
    def _constant(cls, values) -> Vector:
        return cls._wrap(frozen(contiguous(values, field_of_values(None).dtype, (cls.SIZE,))))

    @classmethod
    def zeros(cls, dtype=None) -> Vector:
        """All-zero vector of this length."""
        return cls._wrap(np.zeros(cls.SIZE, dtype=field_of_values(None, dtype).dtype))

    # -- scalar field -------------------------------------------------------

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def field(self) -> FloatField:
        return field_of(self._data)

    def astype(self, dtype) -> Vector:
        """Copy of this vector in another dtype."""
        return type(self)._wrap(self._data.astype(field_of_values(None, dtype).dtype))

    def copy(self) -> Vector:
        return type(self)._wrap(self._data.copy())

    # -- sequence protocol --------------------------------------------------

    def __len__(self) -> int:
        return self.SIZE

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._data[index].copy()
        return self._data[index]

    def __setitem__(self, index, value) -> None:
        self._data[index] = value

    def __iter__(self) -> Iterator:
        return iter(self._data)

    def tolist(self) -> list[float]:
        return self._data.tolist()

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        return np.array(self._data, dtype=dtype)

    # -- buffer export ------------------------------------------------------

    def as_array(self) -> np.ndarray:
        """Read-only view of the contiguous component buffer."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def as_ptr(self) -> int:
        """Address of the first component."""
        return self._data.ctypes.data

    @property
    def count(self) -> int:
        """Number of scalars in the buffer."""
        return self.SIZE

    @property
    def nbytes(self) -> int:
        return self._data.nbytes

    @property
    def stride(self) -> int:
        """Byte size of one vector (itemsize * SIZE)."""
        return self._data.itemsize * self.SIZE

    # -- comparison ---------------------------------------------------------

    def _same_kind(self, other) -> bool:
        return type(other) is type(self) and other.dtype == self.dtype

    def _require_same_kind(self, other, op: str) -> None:
        if not self._same_kind(other):
            raise TypeError(
                f"{op} requires two {type(self).__name__}[{self.dtype}], "
                f"got {type(other).__name__}[{getattr(other, 'dtype', '?')}]"
            )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._same_kind(other) and bool(np.array_equal(self._data, other._data))

    # -- arithmetic ---------------------------------------------------------

    def __neg__(self) -> Vector:
        return type(self)._wrap(-self._data)

    def __add__(self, other) -> Vector:
        if not self._same_kind(other):
            return NotImplemented
        return type(self)._wrap(self._data + other._data)

    def __sub__(self, other) -> Vector:
        if not self._same_kind(other):
            return NotImplemented
        return type(self)._wrap(self._data - other._data)

    def __mul__(self, scalar) -> Vector:
        if not is_number(scalar):
            return NotImplemented
        return type(self)._wrap(self._data * self.field.cast(scalar))

    def __rmul__(self, scalar) -> Vector:
        return self.__mul__(scalar)

    @np.errstate(divide="ignore", invalid="ignore")
    def __truediv__(self, scalar) -> Vector:
        if not is_number(scalar):
            return NotImplemented
        return type(self)._wrap(self._data / self.field.cast(scalar))

    # -- geometry -----------------------------------------------------------

    def dot_product(self, other: Vector):
        """Sum of componentwise products."""
        self._require_same_kind(other, "dot_product")
        total = self.field.ZERO
        for a, b in zip(self._data, other._data):
            total += a * b
        return total

    def magnitude(self):
        """Euclidean length: sqrt of the sum of squared components."""
        return self.field.square_root(self.dot_product(self))

    @np.errstate(divide="ignore", invalid="ignore")
    def normalize(self) -> Vector:
        """
        Scale this vector to unit length in place and return a copy of it.

        A zero vector becomes NaN; callers that may hold one must check
        magnitude() first.
        """
        self._data /= self.magnitude()
        return self.copy()

    def normalized(self) -> Vector:
        """Unit-length copy; this vector is left untouched."""
        return self.copy().normalize()

    # -- display ------------------------------------------------------------

    def __str__(self) -> str:
        return "[" + ", ".join(str(c) for c in self._data) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data.tolist()}, dtype={self.dtype.name})"


class Vector2(Vector):
    """Two-component vector (x, y)."""

    SIZE = 2
    __slots__ = ()

    @property
    def x(self):
        return self._data[0]

    @property
    def y(self):
        return self._data[1]


class Vector3(Vector):
    """Three-component vector (x, y, z) with the cross product."""

    SIZE = 3
    __slots__ = ()

    @property
    def x(self):
        return self._data[0]

    @property
    def y(self):
        return self._data[1]

    @property
    def z(self):
        return self._data[2]

    def x_y_z(self) -> tuple:
        return self._data[0], self._data[1], self._data[2]

    def cross_product(self, other: Vector3) -> Vector3:
        """Right-handed cross product self × other."""
        self._require_same_kind(other, "cross_product")
        a_x, a_y, a_z = self.x_y_z()
        b_x, b_y, b_z = other.x_y_z()
        return Vector3._wrap(np.array([
            a_y * b_z - a_z * b_y,
            a_z * b_x - a_x * b_z,
            a_x * b_y - a_y * b_x,
        ], dtype=self.dtype))


class Vector4(Vector):
    """Four-component vector (x, y, z, w), typically a homogeneous point."""

    SIZE = 4
    __slots__ = ()

    @property
    def x(self):
        return self._data[0]

    @property
    def y(self):
        return self._data[1]

    @property
    def z(self):
        return self._data[2]

    @property
    def w(self):
        return self._data[3]


_VECTOR_TYPES: dict[int, type[Vector]] = {2: Vector2, 3: Vector3, 4: Vector4}


def vector_type(n: int) -> type[Vector]:
    """
    Vector class of length n.

    Returns the named specialization for 2, 3 and 4, otherwise a generated
    class (cached, so vector_type(5) is vector_type(5)) that supports the
    length-generic operations: dot product, magnitude, normalize and the
    componentwise arithmetic.

    Raises:
        ValueError: If n < 1.
    """
    n = int(n)
    if n < 1:
        raise ValueError(f"Vector length must be positive, got {n}")
    cls = _VECTOR_TYPES.get(n)
    if cls is None:
        cls = type(f"Vector{n}", (Vector,), {"SIZE": n, "__slots__": ()})
        cls.ZERO = cls._constant([0.0] * n)
        _VECTOR_TYPES[n] = cls
    return cls


for _cls in (Vector2, Vector3, Vector4):
    _cls.ZERO = _cls._constant([0.0] * _cls.SIZE)

Vector2.UP = Vector2._constant([0.0, 1.0])
Vector2.DOWN = Vector2._constant([0.0, -1.0])
Vector2.RIGHT = Vector2._constant([1.0, 0.0])
Vector2.LEFT = Vector2._constant([-1.0, 0.0])

Vector3.UP = Vector3._constant([0.0, 1.0, 0.0])
Vector3.DOWN = Vector3._constant([0.0, -1.0, 0.0])
Vector3.RIGHT = Vector3._constant([1.0, 0.0, 0.0])
Vector3.LEFT = Vector3._constant([-1.0, 0.0, 0.0])
Vector3.FORWARD = Vector3._constant([0.0, 0.0, 1.0])
Vector3.BACKWARD = Vector3._constant([0.0, 0.0, -1.0])

Vector4.UP = Vector4._constant([0.0, 1.0, 0.0, 0.0])
Vector4.DOWN = Vector4._constant([0.0, -1.0, 0.0, 0.0])
Vector4.RIGHT = Vector4._constant([1.0, 0.0, 0.0, 0.0])
Vector4.LEFT = Vector4._constant([-1.0, 0.0, 0.0, 0.0])
Vector4.FORWARD = Vector4._constant([0.0, 0.0, 1.0, 0.0])
Vector4.BACKWARD = Vector4._constant([0.0, 0.0, -1.0, 0.0])
