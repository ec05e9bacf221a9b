import warnings

import numpy as np
import pytest
from rotmath.scalar import F32, F64, FloatField, field_of, field_for_dtype, field_of_values


def test_field_constants_are_typed():
    """Constants carry the field's dtype."""
    assert F32.ZERO.dtype == np.float32
    assert F32.PI.dtype == np.float32
    assert F64.ONE.dtype == np.float64
    assert F64.NEG_ONE == -1.0
    assert F64.PI == np.pi


def test_field_rejects_non_float_dtype():
    with pytest.raises(TypeError):
        FloatField(np.dtype(np.int32))


def test_field_of_resolution():
    """Numpy values resolve by dtype, Python numbers by the default."""
    assert field_of(np.float32(1.0)) is F32
    assert field_of(np.float64(1.0)) is F64
    assert field_of(np.zeros(3, dtype=np.float32)) is F32
    assert field_of(np.float32) is F32
    assert field_of(np.dtype("float64")) is F64
    assert field_of(1.0) is F64
    assert field_of(3) is F64
    assert field_of(F32) is F32


@pytest.mark.parametrize("value", [np.int32(1), np.float16(1.0), np.complex64(1.0)])
def test_field_of_unsupported_dtype(value):
    with pytest.raises(TypeError):
        field_of(value)


def test_field_for_dtype_unsupported():
    with pytest.raises(TypeError):
        field_for_dtype(np.int64)


def test_field_of_values_promotion():
    """Numpy floats in a sequence decide; Python numbers adapt to them."""
    assert field_of_values([np.float32(1.0), 2.0, 3]) is F32
    assert field_of_values([np.float32(1.0), np.float64(2.0)]) is F64
    assert field_of_values([1.0, 2.0]) is F64
    assert field_of_values(np.arange(3)) is F64
    assert field_of_values([1.0, 2.0], dtype=np.float32) is F32
    assert field_of_values([np.zeros(2, np.float32), [1.0, 2.0]]) is F32
    assert field_of_values([[np.float32(1.0)], np.zeros(1, np.float64)]) is F64
    assert field_of_values([np.arange(2), [1.0, 2.0]]) is F64


def test_from_f32_literal():
    two = F64.from_f32(2.0)
    assert two.dtype == np.float64
    assert two == 2.0
    # 0.1 is not exact in float32, so the literal carries float32 rounding.
    assert F64.from_f32(0.1) == np.float64(np.float32(0.1))


def test_trig_and_roots():
    s, c = F32.sine_cosine(F32.PI / F32.from_f32(2.0))
    assert s == pytest.approx(1.0, abs=1e-6)
    assert c == pytest.approx(0.0, abs=1e-6)
    assert s.dtype == np.float32
    assert F64.tangent(np.pi / 4) == pytest.approx(1.0)
    assert F64.inv_tangent2(1.0, 0.0) == pytest.approx(np.pi / 2)
    assert F64.pow(3.0, 2.0) == pytest.approx(9.0)
    assert F64.square_root(16.0) == 4.0


def test_degree_radian_scaling():
    assert F64.rad(180.0) == pytest.approx(np.pi)
    assert F64.deg(np.pi) == pytest.approx(180.0)
    assert F32.rad(90.0).dtype == np.float32


def test_angle_wrappers():
    a = F32.angle_deg(45.0)
    assert a.is_degrees()
    assert a.value.dtype == np.float32
    assert F64.angle_rad(1.0).is_radians()


def test_degenerate_inputs_propagate_quietly():
    """NaN comes back from sqrt of a negative without a RuntimeWarning."""
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert np.isnan(F64.square_root(-1.0))
        assert np.isnan(F32.square_root(np.float32(-4.0)))
