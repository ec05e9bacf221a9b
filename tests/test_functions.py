import numpy as np
import pytest
from rotmath import Mat3, Mat4, deg, look_at, orthographic, perspective, rad, scale, translation, vec3, vec4
from rotmath import functions as fn


def _close(a, b, **kw) -> bool:
    return np.allclose(np.asarray(a), np.asarray(b), **kw)


def test_scalar_wrappers_follow_argument_dtype():
    r = fn.sqrt(np.float32(4.0))
    assert r == 2.0
    assert r.dtype == np.float32
    assert fn.atan2(1.0, 1.0) == pytest.approx(np.pi / 4)
    assert fn.sin(np.pi / 2) == pytest.approx(1.0)
    assert fn.cos(0.0) == 1.0
    assert fn.tan(np.float32(0.0)).dtype == np.float32
    assert rad(1.0).is_radians()
    assert deg(1.0).is_degrees()


def test_typed_vector_constructors():
    assert fn.vec2f32(1, 2).dtype == np.float32
    assert fn.vec3f64(1, 2, 3).dtype == np.float64
    assert fn.vec4(1, 2, 3, 4, dtype=np.float32).dtype == np.float32


def test_translation_moves_origin():
    m = translation(vec3(1.0, 2.0, 3.0))
    assert m @ vec4(0.0, 0.0, 0.0, 1.0) == vec4(1.0, 2.0, 3.0, 1.0)
    # Directions (w = 0) are not translated.
    assert m @ vec4(1.0, 0.0, 0.0, 0.0) == vec4(1.0, 0.0, 0.0, 0.0)
    assert Mat4.translation(vec3(1.0, 2.0, 3.0)) == m


def test_scale():
    m = scale(vec3(2.0, 3.0, 4.0))
    assert m @ vec4(1.0, 1.0, 1.0, 1.0) == vec4(2.0, 3.0, 4.0, 1.0)
    assert Mat4.scale(vec3(2.0, 3.0, 4.0)) == m


def test_look_at_maps_center_onto_negative_z():
    """Applied as point @ view, center lands at (0, 0, -distance)."""
    eye = vec3(1.0, 2.0, 3.0)
    center = vec3(4.0, 6.0, 3.0)
    view = look_at(eye, center, vec3(0.0, 1.0, 0.0))
    assert _close(vec4(4.0, 6.0, 3.0, 1.0) @ view, [0.0, 0.0, -5.0, 1.0])
    assert _close(vec4(1.0, 2.0, 3.0, 1.0) @ view, [0.0, 0.0, 0.0, 1.0])


def test_look_at_rotation_block_is_orthonormal():
    view = Mat4.look_at(vec3(3.0, -1.0, 7.0), vec3(0.0, 0.5, 0.0), vec3(0.0, 1.0, 0.0))
    r = np.asarray(view.mat3())
    assert _close(r.T @ r, np.eye(3))
    assert np.linalg.det(r) == pytest.approx(1.0)


def test_look_at_down_negative_z():
    view = look_at(vec3(0.0, 0.0, 5.0), vec3(0.0, 0.0, 0.0), vec3(0.0, 1.0, 0.0))
    assert _close(view, [
        [1.0, 0.0, 0.0, 0.0],
        [0.0, 1.0, 0.0, 0.0],
        [0.0, 0.0, 1.0, 0.0],
        [0.0, 0.0, -5.0, 1.0],
    ])
    assert _close(vec4(1.0, 1.0, 0.0, 1.0) @ view, [1.0, 1.0, -5.0, 1.0])


def test_perspective_depth_range():
    """Near plane maps to NDC z = -1, far plane to +1."""
    near, far = 0.1, 100.0
    proj = perspective(16 / 9, np.pi / 2, near, far)
    p_near = vec4(0.0, 0.0, -near, 1.0) @ proj
    p_far = vec4(0.0, 0.0, -far, 1.0) @ proj
    assert p_near.z / p_near.w == pytest.approx(-1.0)
    assert p_far.z / p_far.w == pytest.approx(1.0)
    # tan(45 deg) == 1
    assert proj[1, 1] == pytest.approx(1.0)
    assert proj[0, 0] == pytest.approx(9 / 16)
    assert proj[2, 3] == -1.0


def test_perspective_angle_overload():
    assert _close(Mat4.perspective(16 / 9, deg(90.0), 0.1, 100.0), perspective(16 / 9, np.pi / 2, 0.1, 100.0))


def test_perspective_dtype_follows_arguments():
    proj = perspective(np.float32(1.5), np.float32(1.0), 0.1, 10.0)
    assert proj.dtype == np.float32


def test_orthographic_maps_box_to_ndc_cube():
    m = orthographic(-2.0, 2.0, -1.0, 1.0, 0.5, 10.0)
    assert _close(m @ vec4(-2.0, -1.0, -0.5, 1.0), [-1.0, -1.0, -1.0, 1.0])
    assert _close(m @ vec4(2.0, 1.0, -10.0, 1.0), [1.0, 1.0, 1.0, 1.0])
    assert Mat4.orthographic(-2.0, 2.0, -1.0, 1.0, 0.5, 10.0) == m


@pytest.mark.parametrize("builder, axis, v, expected", [
    (fn.rotation_x, "x", (0.0, 1.0, 0.0), (0.0, 0.0, 1.0)),
    (fn.rotation_y, "y", (0.0, 0.0, 1.0), (1.0, 0.0, 0.0)),
    (fn.rotation_z, "z", (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)),
])
def test_elementary_rotations(builder, axis, v, expected):
    """A quarter turn about each axis, right-handed."""
    m = builder(np.pi / 2)
    assert type(m) is Mat3
    assert _close(m @ vec3(*v), expected, atol=1e-12)

    via_angle = getattr(Mat3, f"rotation_{axis}")(deg(90.0))
    assert _close(via_angle, m)
    as_mat4 = getattr(Mat4, f"rotation_{axis}")(deg(90.0))
    assert _close(as_mat4, m.mat4())


def test_rotation_dtype_follows_angle():
    assert fn.rotation_x(np.float32(0.3)).dtype == np.float32
    assert Mat3.rotation_z(deg(np.float32(30.0))).dtype == np.float32


def test_matrix_constructors():
    assert fn.mat4(*range(16)).tolist()[1] == [4.0, 5.0, 6.0, 7.0]
    assert fn.mat3(1, 0, 0, 0, 1, 0, 0, 0, 1) == Mat3.IDENTITY
    assert fn.mat_identity_fill(3, 5.0) == Mat3.identity_fill(5.0)
    assert fn.mat_transpose(fn.mat2(1, 2, 3, 4)) == fn.mat2(1, 3, 2, 4)
    assert fn.mat_to_mat2(Mat4.IDENTITY) == fn.mat2(1, 0, 0, 1)


def test_checked_products_reject_mixed_dtypes():
    a = Mat4.identity(np.float32)
    with pytest.raises(TypeError):
        fn.mat4_mul_mat4(a, Mat4.IDENTITY)
    with pytest.raises(TypeError):
        fn.mat2_mul_mat2(fn.mat2(1, 2, 3, 4), Mat3.IDENTITY)
