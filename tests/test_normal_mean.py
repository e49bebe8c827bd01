import numpy as np
import pytest

from mcmckit.models.normal_mean import NormalMeanModel
from mcmckit.stats import dnorm, dnorm_array


@pytest.fixture
def model():
    rng = np.random.default_rng(7)
    return NormalMeanModel(x=2.0 + rng.standard_normal(100))


def test_defaults_follow_example():
    m = NormalMeanModel(x=[1.0, 2.0])
    assert (m.sigma, m.mu_0, m.sigma_0) == (1.0, 1.0, 2.0)


def test_likelihood_is_sum_of_normal_log_densities(model):
    mu = 1.7
    expected = float(np.sum(dnorm_array(model.x, mu, model.sigma, True)))
    assert model.log_likelihood([mu]) == pytest.approx(expected)


def test_prior_matches_dnorm(model):
    for mu in (-1.0, 1.0, 3.5):
        assert model.log_prior([mu]) == pytest.approx(dnorm(mu, model.mu_0, model.sigma_0, True))


def test_target_is_likelihood_plus_prior(model):
    vals = np.array([2.3])
    assert model.log_target(vals) == pytest.approx(
        model.log_likelihood(vals) + model.log_prior(vals)
    )


def test_likelihood_peaks_at_sample_mean(model):
    mean = float(np.mean(model.x))
    peak = model.log_likelihood([mean])
    assert peak > model.log_likelihood([mean + 0.1])
    assert peak > model.log_likelihood([mean - 0.1])


def test_prior_symmetric_about_mu_0(model):
    assert model.log_prior([model.mu_0 + 0.8]) == pytest.approx(model.log_prior([model.mu_0 - 0.8]))


def test_nonpositive_sigma_raises():
    with pytest.raises(ValueError):
        NormalMeanModel(x=[1.0], sigma=0.0)
    with pytest.raises(ValueError):
        NormalMeanModel(x=[1.0], sigma_0=-1.0)