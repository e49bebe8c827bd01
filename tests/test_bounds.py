import math

import numpy as np
import pytest

from mcmckit.bounds import (
    BoundsType,
    determine_bounds_type,
    inv_jacobian_adjust,
    inv_transform,
    log_jacobian,
    sampling_bounds_check,
    transform,
)

LOWER = np.array([0.0, -np.inf, -1.0, -np.inf])
UPPER = np.array([np.inf, 3.0, 2.0, np.inf])


@pytest.fixture
def types():
    return determine_bounds_type(True, LOWER, UPPER)


def test_determine_bounds_type_classifies(types):
    assert list(types) == [
        BoundsType.LOWER,
        BoundsType.UPPER,
        BoundsType.BOTH,
        BoundsType.NONE,
    ]
    assert [int(t) for t in types] == [2, 3, 4, 1]


def test_determine_bounds_type_unbounded():
    result = determine_bounds_type(False, LOWER, UPPER)
    assert list(result) == [BoundsType.NONE] * 4


def test_determine_bounds_type_requires_bounds():
    with pytest.raises(ValueError):
        determine_bounds_type(True, None, None)


def test_transform_round_trip(types):
    vals = np.array([0.7, 1.5, 0.25, -4.0])
    trans = transform(vals, types, LOWER, UPPER)
    back = inv_transform(trans, types, LOWER, UPPER)
    np.testing.assert_allclose(back, vals, rtol=1e-10, atol=1e-12)


def test_transform_leaves_unbounded_unchanged(types):
    vals = np.array([0.7, 1.5, 0.25, -4.0])
    assert transform(vals, types, LOWER, UPPER)[3] == -4.0
    assert inv_transform(vals, types, LOWER, UPPER)[3] == -4.0


def test_inv_transform_stays_inside_bounds(types):
    for t in (-30.0, -1.0, 0.0, 1.0, 30.0):
        x = inv_transform(np.full(4, t), types, LOWER, UPPER)
        assert x[0] > LOWER[0]
        assert x[1] < UPPER[1]
        assert LOWER[2] < x[2] < UPPER[2]


def test_inv_transform_non_finite_both():
    t = np.array([np.nan, -np.inf, np.inf])
    bt = np.full(3, BoundsType.BOTH)
    lb = np.zeros(3)
    ub = np.full(3, 4.0)
    out = inv_transform(t, bt, lb, ub)
    assert out[0] == pytest.approx((4.0 - 0.0) / 2)
    assert out[1] == pytest.approx(0.0)
    assert out[2] == pytest.approx(4.0)


def test_inv_transform_overflow_clamps_to_upper():
    out = inv_transform([800.0], [BoundsType.BOTH], [0.0], [4.0])
    assert out[0] == pytest.approx(4.0)


def _numeric_derivatives(t, types, h=1e-6):
    plus = inv_transform(t + h, types, LOWER, UPPER)
    minus = inv_transform(t - h, types, LOWER, UPPER)
    return (plus - minus) / (2 * h)


def test_log_jacobian_matches_numeric_derivative(types):
    t = np.array([0.3, -0.4, 0.8, 1.1])
    deriv = _numeric_derivatives(t, types)
    expected = float(np.sum(np.log(np.abs(deriv))))
    assert log_jacobian(t, types, LOWER, UPPER) == pytest.approx(expected, rel=1e-5)


def test_log_jacobian_zero_without_bounds():
    bt = [BoundsType.NONE, BoundsType.NONE]
    assert log_jacobian([1.0, -2.0], bt, None, None) == 0.0


def test_log_jacobian_overflow_branch():
    value = log_jacobian([800.0], [BoundsType.BOTH], [0.0], [4.0])
    assert value == pytest.approx(math.log(4.0) - 800.0)


def test_inv_jacobian_adjust_inverts_derivative(types):
    t = np.array([0.3, -0.4, 0.8, 1.1])
    mat = inv_jacobian_adjust(t, types, LOWER, UPPER)
    deriv = _numeric_derivatives(t, types)
    np.testing.assert_allclose(np.diag(mat) * deriv, np.ones(4), rtol=1e-5)
    assert np.count_nonzero(mat - np.diag(np.diag(mat))) == 0


def test_inv_jacobian_adjust_identity_without_bounds():
    mat = inv_jacobian_adjust([1.0, 2.0, 3.0], [1, 1, 1], None, None)
    np.testing.assert_array_equal(mat, np.eye(3))


def test_sampling_bounds_check_tightens(types):
    s_lower = np.array([-5.0, -5.0, -5.0, -5.0])
    s_upper = np.array([5.0, 5.0, 5.0, 5.0])
    lower, upper = sampling_bounds_check(True, types, LOWER, UPPER, s_lower, s_upper)
    np.testing.assert_array_equal(lower, [0.0, -5.0, -1.0, -5.0])
    np.testing.assert_array_equal(upper, [5.0, 3.0, 2.0, 5.0])
    np.testing.assert_array_equal(s_lower, [-5.0] * 4)


def test_sampling_bounds_check_inactive(types):
    s_lower = np.array([-5.0, -5.0, -5.0, -5.0])
    s_upper = np.array([5.0, 5.0, 5.0, 5.0])
    lower, upper = sampling_bounds_check(False, types, LOWER, UPPER, s_lower, s_upper)
    np.testing.assert_array_equal(lower, s_lower)
    np.testing.assert_array_equal(upper, s_upper)