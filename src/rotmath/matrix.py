# MIT License (see LICENSE)
"""
Fixed-shape matrices.

A matrix's shape (ROWS x COLS) belongs to its class. Mat2, Mat3 and Mat4
are the square specializations and the only shapes with a matrix product;
matrix_type(m, n) returns the cached class for any other shape, which
supports construction, transpose, vector application and display.

Storage is row-major: element (i, j) is at flat offset i * COLS + j and the
buffer has no padding. That buffer is what as_array()/as_ptr() export.

Products:
    Mat2 @ Mat2, Mat3 @ Mat3   closed-form, fully unrolled
    Mat4 @ Mat4                triple-nested accumulation
    Matrix @ Vector            column vector on the right (len == COLS)
    Vector @ Matrix            row vector on the left (len == ROWS)

The unrolled and looped kernels accumulate in the same order, so they give
bit-identical results.

Display precision is a formatting argument (to_string/format_matrix) and is
never part of the matrix value.
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Callable, ClassVar, Iterator

import numpy as np

from .constants import DEFAULT_DECIMAL_PLACES
from .scalar import FloatField, field_of, field_of_values
from .util import contiguous, frozen
from .vector import Vector, vector_type

if TYPE_CHECKING:
    from .angle import Angle
    from .vector import Vector3


class Matrix:
    """
    Base class of all fixed-shape matrices.

    Not instantiable directly: use Mat2/Mat3/Mat4 or matrix_type(m, n).

    Args:
        values: ROWS rows (lists, arrays or vectors), or ROWS * COLS values in
                row-major order. Float-typed rows decide the dtype.
        dtype: float32 or float64. Inferred from values when omitted.

    Raises:
        ValueError: If the number of elements does not match the shape.
    """

    ROWS: ClassVar[int] = 0
    COLS: ClassVar[int] = 0
    ZERO: ClassVar[Matrix]
    ONE: ClassVar[Matrix]

    __slots__ = ("_data",)
    __array_ufunc__ = None
    __hash__ = None

    def __init__(self, values, dtype=None) -> None:
        if self.ROWS <= 0 or self.COLS <= 0:
            raise TypeError("Matrix has no fixed shape; use Mat2/3/4 or matrix_type(m, n)")
        field = field_of_values(values, dtype)
        self._data = contiguous(values, field.dtype, (self.ROWS, self.COLS))

    @classmethod
    def _wrap(cls, data: np.ndarray) -> Matrix:
        """Adopt an array without copying. Caller guarantees shape and dtype."""
        obj = object.__new__(cls)
        obj._data = data
        return obj

    @classmethod
    def _constant(cls, data: np.ndarray) -> Matrix:
        return cls._wrap(frozen(data))

    @classmethod
    def fill(cls, value, dtype=None) -> Matrix:
        """Matrix with every element set to value."""
        field = field_of_values([value], dtype)
        return cls._wrap(np.full((cls.ROWS, cls.COLS), value, dtype=field.dtype))

    @classmethod
    def zeros(cls, dtype=None) -> Matrix:
        return cls.fill(0.0, dtype=field_of_values(None, dtype).dtype)

    # -- scalar field -------------------------------------------------------

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def field(self) -> FloatField:
        return field_of(self._data)

    @property
    def shape(self) -> tuple[int, int]:
        return self.ROWS, self.COLS

    def astype(self, dtype) -> Matrix:
        return type(self)._wrap(self._data.astype(field_of_values(None, dtype).dtype))

    def copy(self) -> Matrix:
        return type(self)._wrap(self._data.copy())

    # -- element access -----------------------------------------------------

    def __getitem__(self, index):
        """m[i, j] is an element; m[i] is a copy of row i."""
        item = self._data[index]
        if isinstance(item, np.ndarray):
            return item.copy()
        return item

    def __setitem__(self, index, value) -> None:
        self._data[index] = value

    def __len__(self) -> int:
        return self.ROWS

    def __iter__(self) -> Iterator[np.ndarray]:
        """Iterate over copies of the rows."""
        for row in self._data:
            yield row.copy()

    def rows(self) -> list[list[float]]:
        return self._data.tolist()

    def tolist(self) -> list[list[float]]:
        return self._data.tolist()

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        return np.array(self._data, dtype=dtype)

    # -- buffer export ------------------------------------------------------

    def as_array(self) -> np.ndarray:
        """Read-only flat view of the row-major element buffer."""
        view = self._data.reshape(-1)
        view.flags.writeable = False
        return view

    def as_ptr(self) -> int:
        """Address of element (0, 0)."""
        return self._data.ctypes.data

    @property
    def count(self) -> int:
        """Number of scalars in the buffer (ROWS * COLS)."""
        return self.ROWS * self.COLS

    @property
    def nbytes(self) -> int:
        return self._data.nbytes

    # -- comparison ---------------------------------------------------------

    def _same_kind(self, other) -> bool:
        return type(other) is type(self) and other.dtype == self.dtype

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._same_kind(other) and bool(np.array_equal(self._data, other._data))

    # -- algebra ------------------------------------------------------------

    def transpose(self) -> Matrix:
        """COLS x ROWS matrix with element (j, i) = self(i, j)."""
        return mat_transpose(self)

    # Square specializations install a kernel here.
    _product: ClassVar[Callable[[np.ndarray, np.ndarray], np.ndarray] | None] = None

    def __matmul__(self, other):
        if isinstance(other, Matrix):
            if self._product is None or not self._same_kind(other):
                return NotImplemented
            return type(self)._wrap(type(self)._product(self._data, other._data))
        if isinstance(other, Vector):
            if len(other) != self.COLS or other.dtype != self.dtype:
                return NotImplemented
            return vector_type(self.ROWS)._wrap(_apply_columns(self._data, other.as_array()))
        return NotImplemented

    def __rmatmul__(self, other):
        if isinstance(other, Vector):
            if len(other) != self.ROWS or other.dtype != self.dtype:
                return NotImplemented
            return vector_type(self.COLS)._wrap(_apply_rows(other.as_array(), self._data))
        return NotImplemented

    # -- display ------------------------------------------------------------

    def to_string(self, decimals: int = DEFAULT_DECIMAL_PLACES) -> str:
        """Newline-separated rows, each formatted with the given decimals."""
        return format_matrix(self, decimals)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data.tolist()}, dtype={self.dtype.name})"


class SquareMatrix(Matrix):
    """
    Square matrix base: identity constructors and size conversion.

    Conversions (mat2/mat3/mat4) are lossy in both directions. Growing embeds
    this matrix in the top-left block of an identity; shrinking keeps only
    the top-left block.
    """

    IDENTITY: ClassVar[SquareMatrix]

    __slots__ = ()

    @classmethod
    def identity(cls, dtype=None) -> SquareMatrix:
        """Identity matrix in the requested dtype."""
        return cls._wrap(np.eye(cls.ROWS, dtype=field_of_values(None, dtype).dtype))

    @classmethod
    def identity_fill(cls, value, dtype=None) -> SquareMatrix:
        """value on the diagonal, zero elsewhere."""
        return mat_identity_fill(cls.ROWS, value, dtype=dtype)

    def _resize(self, n: int) -> SquareMatrix:
        out = np.eye(n, dtype=self.dtype)
        k = min(n, self.ROWS)
        out[:k, :k] = self._data[:k, :k]
        return matrix_type(n, n)._wrap(out)

    def mat2(self) -> Mat2:
        return self._resize(2)

    def mat3(self) -> Mat3:
        return self._resize(3)

    def mat4(self) -> Mat4:
        return self._resize(4)


# -- product kernels ---------------------------------------------------------

def _mat2_product(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    a1, a2, a3, a4 = a[0, 0], a[0, 1], a[1, 0], a[1, 1]
    b1, b2, b3, b4 = b[0, 0], b[1, 0], b[0, 1], b[1, 1]

    ab11 = a1 * b1 + a2 * b2
    ab12 = a1 * b3 + a2 * b4
    ab21 = a3 * b1 + a4 * b2
    ab22 = a3 * b3 + a4 * b4

    return np.array([
        [ab11, ab12],
        [ab21, ab22],
    ], dtype=a.dtype)


def _mat3_product(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    a1, a2, a3 = a[0, 0], a[0, 1], a[0, 2]
    a4, a5, a6 = a[1, 0], a[1, 1], a[1, 2]
    a7, a8, a9 = a[2, 0], a[2, 1], a[2, 2]
    # b is read column by column.
    b1, b2, b3 = b[0, 0], b[1, 0], b[2, 0]
    b4, b5, b6 = b[0, 1], b[1, 1], b[2, 1]
    b7, b8, b9 = b[0, 2], b[1, 2], b[2, 2]

    ab11 = a1 * b1 + a2 * b2 + a3 * b3
    ab12 = a1 * b4 + a2 * b5 + a3 * b6
    ab13 = a1 * b7 + a2 * b8 + a3 * b9
    ab21 = a4 * b1 + a5 * b2 + a6 * b3
    ab22 = a4 * b4 + a5 * b5 + a6 * b6
    ab23 = a4 * b7 + a5 * b8 + a6 * b9
    ab31 = a7 * b1 + a8 * b2 + a9 * b3
    ab32 = a7 * b4 + a8 * b5 + a9 * b6
    ab33 = a7 * b7 + a8 * b8 + a9 * b9

    return np.array([
        [ab11, ab12, ab13],
        [ab21, ab22, ab23],
        [ab31, ab32, ab33],
    ], dtype=a.dtype)


def _looped_product(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Row-by-column product, accumulated left to right."""
    rows, inner = a.shape
    cols = b.shape[1]
    out = np.zeros((rows, cols), dtype=a.dtype)
    for i in range(rows):
        for j in range(cols):
            acc = out[i, j]
            for k in range(inner):
                acc += a[i, k] * b[k, j]
            out[i, j] = acc
    return out


def _apply_columns(m: np.ndarray, v: np.ndarray) -> np.ndarray:
    """m @ v for a column vector v."""
    return _looped_product(m, v.reshape(-1, 1)).reshape(-1)


def _apply_rows(v: np.ndarray, m: np.ndarray) -> np.ndarray:
    """v @ m for a row vector v."""
    return _looped_product(v.reshape(1, -1), m).reshape(-1)


# -- square specializations --------------------------------------------------

class Mat2(SquareMatrix):
    """2x2 matrix."""

    ROWS = COLS = 2
    __slots__ = ()
    _product = staticmethod(_mat2_product)


class Mat3(SquareMatrix):
    """3x3 matrix; rotation matrices live here."""

    ROWS = COLS = 3
    __slots__ = ()
    _product = staticmethod(_mat3_product)

    @classmethod
    def rotation_x(cls, angle: "Angle") -> Mat3:
        """Rotation about +X by angle (any unit)."""
        from . import functions
        return functions.rotation_x(angle.to_radians().to_inner())

    @classmethod
    def rotation_y(cls, angle: "Angle") -> Mat3:
        from . import functions
        return functions.rotation_y(angle.to_radians().to_inner())

    @classmethod
    def rotation_z(cls, angle: "Angle") -> Mat3:
        from . import functions
        return functions.rotation_z(angle.to_radians().to_inner())


class Mat4(SquareMatrix):
    """4x4 matrix: homogeneous transforms and projections."""

    ROWS = COLS = 4
    __slots__ = ()
    _product = staticmethod(_looped_product)

    # Builders live in functions.py, which imports this module.

    @classmethod
    def rotation_x(cls, angle: "Angle") -> Mat4:
        from . import functions
        return functions.rotation_x(angle.to_radians().to_inner()).mat4()

    @classmethod
    def rotation_y(cls, angle: "Angle") -> Mat4:
        from . import functions
        return functions.rotation_y(angle.to_radians().to_inner()).mat4()

    @classmethod
    def rotation_z(cls, angle: "Angle") -> Mat4:
        from . import functions
        return functions.rotation_z(angle.to_radians().to_inner()).mat4()

    @classmethod
    def perspective(cls, aspect_ratio, fov: "Angle", near, far) -> Mat4:
        """Perspective projection; fov is the full vertical field of view."""
        from . import functions
        return functions.perspective(aspect_ratio, fov.to_radians().to_inner(), near, far)

    @classmethod
    def orthographic(cls, left, right, bottom, top, near, far) -> Mat4:
        from . import functions
        return functions.orthographic(left, right, bottom, top, near, far)

    @classmethod
    def look_at(cls, eye: "Vector3", center: "Vector3", up: "Vector3") -> Mat4:
        from . import functions
        return functions.look_at(eye, center, up)

    @classmethod
    def translation(cls, translation: "Vector3") -> Mat4:
        from . import functions
        return functions.translation(translation)

    @classmethod
    def scale(cls, scale: "Vector3") -> Mat4:
        from . import functions
        return functions.scale(scale)


_MATRIX_TYPES: dict[tuple[int, int], type[Matrix]] = {
    (2, 2): Mat2,
    (3, 3): Mat3,
    (4, 4): Mat4,
}


def _install_constants(cls: type[Matrix]) -> None:
    dtype = field_of_values(None).dtype
    cls.ZERO = cls._constant(np.zeros((cls.ROWS, cls.COLS), dtype=dtype))
    cls.ONE = cls._constant(np.ones((cls.ROWS, cls.COLS), dtype=dtype))
    if issubclass(cls, SquareMatrix):
        cls.IDENTITY = cls._constant(np.eye(cls.ROWS, dtype=dtype))


def matrix_type(m: int, n: int) -> type[Matrix]:
    """
    Matrix class of shape m x n.

    Mat2/Mat3/Mat4 for those shapes; otherwise a generated, cached class.
    Generated square classes get identity constructors and size conversion
    but no matrix product.

    Raises:
        ValueError: If either dimension is < 1.
    """
    m, n = int(m), int(n)
    if m < 1 or n < 1:
        raise ValueError(f"Matrix dimensions must be positive, got {m}x{n}")
    cls = _MATRIX_TYPES.get((m, n))
    if cls is None:
        base = SquareMatrix if m == n else Matrix
        cls = type(f"Matrix{m}x{n}", (base,), {"ROWS": m, "COLS": n, "__slots__": ()})
        _install_constants(cls)
        _MATRIX_TYPES[(m, n)] = cls
    return cls


for _cls in (Mat2, Mat3, Mat4):
    _install_constants(_cls)


def mat_transpose(matrix: Matrix) -> Matrix:
    """Transpose into the COLS x ROWS class."""
    out = np.ascontiguousarray(matrix._data.T)
    return matrix_type(matrix.COLS, matrix.ROWS)._wrap(out)


def mat_identity_fill(n: int, value, dtype=None) -> SquareMatrix:
    """n x n matrix with value on the diagonal and zero elsewhere."""
    field = field_of_values([value], dtype)
    out = np.zeros((n, n), dtype=field.dtype)
    np.fill_diagonal(out, field.cast(value))
    return matrix_type(n, n)._wrap(out)


def format_matrix(matrix: Matrix, decimals: int = DEFAULT_DECIMAL_PLACES) -> str:
    """
    Human-readable listing, one "[a, b, ...]" line per row.

    For diagnostics only; the output is not meant to be parsed back.
    """
    return "\n".join(
        "[" + ", ".join(f"{float(c):.{decimals}f}" for c in row) + "]"
        for row in matrix._data
    )
