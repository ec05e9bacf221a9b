import numpy as np
import pytest
from rotmath import Mat2, Mat3, Mat4, format_matrix, mat2, mat3, mat_fill, matrix_type, vec2, vec3
from rotmath.functions import mat2_mul_mat2, mat3_mul_mat3, mat4_mul_mat4, mat_to_mat3, mat_to_mat4, vec3f32
from rotmath.matrix import _looped_product, _mat2_product, _mat3_product


def _random_mat4(rng) -> Mat4:
    return Mat4(rng.uniform(-2.0, 2.0, size=(4, 4)))


def test_mat2_product_example():
    m = mat2(3, 7, 4, 9) @ mat2(6, 2, 5, 8)
    assert m.tolist() == [[53.0, 62.0], [69.0, 80.0]]
    assert mat2_mul_mat2(mat2(3, 7, 4, 9), mat2(6, 2, 5, 8)) == m


def test_identity_laws():
    rng = np.random.default_rng(1)
    m = _random_mat4(rng)
    assert Mat4.IDENTITY @ m == m
    assert m @ Mat4.IDENTITY == m
    m3 = Mat3(rng.normal(size=9))
    assert mat3_mul_mat3(Mat3.IDENTITY, m3) == m3


def test_mat4_associativity():
    rng = np.random.default_rng(12345)
    for _ in range(10):
        a, b, c = _random_mat4(rng), _random_mat4(rng), _random_mat4(rng)
        left = (a @ b) @ c
        right = a @ (b @ c)
        assert np.allclose(left.tolist(), right.tolist())


def test_unrolled_products_match_loop():
    """Closed-form 2x2/3x3 kernels accumulate in loop order."""
    rng = np.random.default_rng(3)
    for n, kernel in ((2, _mat2_product), (3, _mat3_product)):
        for dtype in (np.float32, np.float64):
            a = rng.normal(size=(n, n)).astype(dtype)
            b = rng.normal(size=(n, n)).astype(dtype)
            assert np.array_equal(kernel(a, b), _looped_product(a, b))


def test_product_matches_numpy():
    rng = np.random.default_rng(5)
    a, b = _random_mat4(rng), _random_mat4(rng)
    assert np.allclose(np.asarray(a @ b), np.asarray(a) @ np.asarray(b))


def test_mismatched_products_raise():
    with pytest.raises(TypeError):
        Mat4.IDENTITY @ Mat3.IDENTITY
    with pytest.raises(TypeError):
        Mat3.IDENTITY @ Mat3.identity(np.float32)
    with pytest.raises(TypeError):
        mat4_mul_mat4(Mat4.IDENTITY, Mat3.IDENTITY)
    with pytest.raises(TypeError):
        matrix_type(2, 3).ZERO @ matrix_type(2, 3).ZERO


def test_vector_application():
    m = mat2(1, 2, 3, 4)
    assert m @ vec2(1.0, 1.0) == vec2(3.0, 7.0)
    assert vec2(1.0, 1.0) @ m == vec2(4.0, 6.0)
    with pytest.raises(TypeError):
        m @ vec3(1.0, 1.0, 1.0)


def test_rectangular_application():
    M = matrix_type(2, 3)
    m = M([1, 2, 3, 4, 5, 6])
    out = m @ vec3(1.0, 0.0, 1.0)
    assert out.tolist() == [4.0, 10.0]
    assert (vec2(1.0, 1.0) @ m).tolist() == [5.0, 7.0, 9.0]


def test_transpose():
    M = matrix_type(2, 3)
    m = M([[1, 2, 3], [4, 5, 6]])
    t = m.transpose()
    assert type(t) is matrix_type(3, 2)
    assert t.tolist() == [[1.0, 4.0], [2.0, 5.0], [3.0, 6.0]]
    assert t.transpose() == m


def test_size_conversions():
    m3 = mat3(1, 2, 3, 4, 5, 6, 7, 8, 9)
    assert m3.mat4().tolist() == [
        [1.0, 2.0, 3.0, 0.0],
        [4.0, 5.0, 6.0, 0.0],
        [7.0, 8.0, 9.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ]
    assert m3.mat2().tolist() == [[1.0, 2.0], [4.0, 5.0]]
    assert mat_to_mat3(mat_to_mat4(m3)) == m3
    assert m3.mat3() == m3
    assert m3.mat3() is not m3


def test_constants_and_fills():
    assert Mat3.identity_fill(2.0).tolist() == [[2.0, 0.0, 0.0], [0.0, 2.0, 0.0], [0.0, 0.0, 2.0]]
    assert Mat2.ONE.tolist() == [[1.0, 1.0], [1.0, 1.0]]
    assert Mat4.ZERO == Mat4.zeros()
    assert Mat4.IDENTITY == Mat4.identity()
    f = mat_fill(2, 3, 7.0)
    assert type(f) is matrix_type(2, 3)
    assert f.tolist() == [[7.0] * 3] * 2
    with pytest.raises(ValueError):
        Mat4.IDENTITY[0, 0] = 5.0


def test_wrong_element_count():
    with pytest.raises(ValueError):
        Mat2([1.0, 2.0, 3.0])
    with pytest.raises(ValueError):
        matrix_type(0, 3)


def test_generated_square_type():
    M5 = matrix_type(5, 5)
    assert matrix_type(5, 5) is M5
    assert M5.IDENTITY.tolist() == np.eye(5).tolist()
    assert M5.identity().mat4() == Mat4.IDENTITY


def test_str_uses_display_precision():
    m = mat2(1, 2, 3, 4)
    assert str(m) == "[1.0000, 2.0000]\n[3.0000, 4.0000]"
    assert m.to_string(1) == "[1.0, 2.0]\n[3.0, 4.0]"
    assert format_matrix(m, decimals=0) == "[1, 2]\n[3, 4]"


def test_equality_ignores_formatting():
    """Display precision is not part of the value."""
    a = mat2(1, 2, 3, 4)
    b = mat2(1, 2, 3, 4)
    a.to_string(2)
    assert a == b
    assert a != b.astype(np.float32)


def test_element_access():
    m = mat2(1, 2, 3, 4)
    assert m[1, 0] == 3.0
    row = m[0]
    row[0] = 100.0
    assert m[0, 0] == 1.0
    m[0, 1] = 9.0
    assert m.rows() == [[1.0, 9.0], [3.0, 4.0]]
    assert [r.tolist() for r in m] == [[1.0, 9.0], [3.0, 4.0]]


def test_buffer_export_is_row_major():
    m = mat2(1, 2, 3, 4)
    arr = m.as_array()
    assert arr.tolist() == [1.0, 2.0, 3.0, 4.0]
    assert not arr.flags.writeable
    assert m.count == 4
    assert m.nbytes == 32
    assert m.as_ptr() == arr.ctypes.data
    assert Mat4.identity(np.float32).nbytes == 64


def test_rows_keep_their_dtype():
    """Rows given as float32 vectors or arrays build a float32 matrix."""
    rows = [vec3f32(1, 0, 0), vec3f32(0, 1, 0), vec3f32(0, 0, 1)]
    m = Mat3(rows)
    assert m.dtype == np.float32
    assert m == Mat3.identity(np.float32)
    assert m @ vec3f32(1, 2, 3) == vec3f32(1, 2, 3)

    m2 = Mat2([np.array([1.0, 2.0], np.float32), np.array([3.0, 4.0], np.float32)])
    assert m2.dtype == np.float32
    assert m2.tolist() == [[1.0, 2.0], [3.0, 4.0]]


def test_mixed_row_dtypes_promote():
    m = Mat2([np.array([1.0, 2.0], np.float32), [np.float64(3.0), 4.0]])
    assert m.dtype == np.float64
    assert Mat2([np.array([1.0, 2.0], np.float32), [3.0, 4.0]]).dtype == np.float32
    assert Mat2([[1.0, 2.0], [3.0, 4.0]]).dtype == np.float64
    assert Mat2([vec2(1.0, 2.0).astype(np.float32), vec2(3.0, 4.0)], dtype=np.float32).dtype == np.float32
