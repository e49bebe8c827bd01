import math
import sys

import numpy as np
import pytest

from mcmckit.stats import LOG_2PI, dmvnorm, dnorm, dnorm_array, generate_seed_value


def test_dnorm_log_at_mean_is_normalising_constant():
    assert dnorm(0.0, 0.0, 1.0, True) == pytest.approx(-0.5 * LOG_2PI)


def test_dnorm_default_parameters_match_standard():
    assert dnorm(0.7) == pytest.approx(dnorm(0.7, 0.0, 1.0, False))


@pytest.mark.parametrize("x,mu,sigma", [(0.3, 0.0, 1.0), (2.5, 1.0, 2.0), (-4.0, 3.0, 0.5)])
def test_log_form_is_log_of_density(x, mu, sigma):
    assert dnorm(x, mu, sigma, True) == pytest.approx(math.log(dnorm(x, mu, sigma, False)))


def test_dnorm_is_symmetric_about_mean():
    assert dnorm(1.0 + 0.8, 1.0, 2.0) == pytest.approx(dnorm(1.0 - 0.8, 1.0, 2.0))


def test_dnorm_location_scale_relation():
    x, mu, sigma = 3.1, 1.2, 1.7
    assert dnorm(x, mu, sigma) == pytest.approx(dnorm((x - mu) / sigma) / sigma)


def test_infinite_sigma_gives_zero():
    assert dnorm(1.0, 0.0, math.inf, False) == 0.0
    assert dnorm(1.0, 0.0, math.inf, True) == -math.inf


def test_matching_infinities_give_nan():
    assert math.isnan(dnorm(math.inf, math.inf, 1.0, False))
    assert math.isnan(dnorm(-math.inf, -math.inf, 1.0, True))


def test_zero_sigma_at_mean_is_infinite():
    assert dnorm(2.0, 2.0, 0.0, False) == math.inf
    assert dnorm(2.0, 2.0, 0.0, True) == math.inf


def test_zero_sigma_off_mean_is_zero():
    assert dnorm(2.5, 2.0, 0.0, False) == 0.0
    assert dnorm(2.5, 2.0, 0.0, True) == -math.inf


def test_invalid_inputs_give_nan():
    assert math.isnan(dnorm(1.0, 0.0, -1.0))
    assert math.isnan(dnorm(math.nan, 0.0, 1.0))
    assert math.isnan(dnorm(0.0, math.nan, 1.0, True))


@pytest.mark.parametrize("log_form", [False, True])
def test_dnorm_array_matches_scalar(log_form):
    x = np.array([[-1.0, 0.0], [0.5, 2.0]])
    out = dnorm_array(x, 0.5, 1.5, log_form)
    assert out.shape == x.shape
    for value, got in zip(x.ravel(), out.ravel()):
        assert got == pytest.approx(dnorm(value, 0.5, 1.5, log_form))


def test_dmvnorm_one_dimensional_matches_dnorm():
    got = dmvnorm([1.3], [0.2], [[4.0]], True)
    assert got == pytest.approx(dnorm(1.3, 0.2, 2.0, True))


def test_dmvnorm_diagonal_is_product_of_marginals():
    x = np.array([0.5, -1.0, 2.0])
    mu = np.array([0.0, 1.0, 1.5])
    sds = np.array([1.0, 2.0, 0.5])
    got = dmvnorm(x, mu, np.diag(sds**2), False)
    expected = np.prod([dnorm(a, m, s) for a, m, s in zip(x, mu, sds)])
    assert got == pytest.approx(expected)


def test_dmvnorm_log_and_plain_agree():
    sigma = np.array([[2.0, 0.3], [0.3, 1.0]])
    x, mu = np.array([0.4, -0.2]), np.zeros(2)
    assert math.log(dmvnorm(x, mu, sigma, False)) == pytest.approx(dmvnorm(x, mu, sigma, True))


def test_dmvnorm_overflow_is_capped_at_max_float():
    tiny = np.eye(2) * 1e-320
    assert dmvnorm([0.0, 0.0], [0.0, 0.0], tiny, False) == sys.float_info.max


def test_generate_seed_value_range_and_determinism():
    seeds_a = [generate_seed_value(3, 4, rng) for rng in [np.random.default_rng(5)]]
    seeds_b = [generate_seed_value(3, 4, rng) for rng in [np.random.default_rng(5)]]
    assert seeds_a == seeds_b
    rng = np.random.default_rng(11)
    for index in range(5):
        seed = generate_seed_value(index, 2, rng)
        assert (index + 2) * 1000 <= seed < (index + 3) * 1000