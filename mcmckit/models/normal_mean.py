"""Normal model with known variance and a normal prior on the mean."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

_LOG_2PI = math.log(2.0 * math.pi)


@dataclass
class NormalMeanModel:
    """Data ``x`` drawn from N(mu, sigma^2), with prior mu ~ N(mu_0, sigma_0^2)."""

    x: np.ndarray
    sigma: float = 1.0
    mu_0: float = 1.0
    sigma_0: float = 2.0

    def __post_init__(self) -> None:
        self.x = np.atleast_1d(np.asarray(self.x, dtype=float)).ravel()
        self.sigma = float(self.sigma)
        self.mu_0 = float(self.mu_0)
        self.sigma_0 = float(self.sigma_0)
        if self.sigma <= 0 or self.sigma_0 <= 0:
            raise ValueError("sigma and sigma_0 must be positive")

    @staticmethod
    def _mean(vals) -> float:
        return float(np.atleast_1d(np.asarray(vals, dtype=float)).ravel()[0])

    def log_likelihood(self, vals) -> float:
        """Log likelihood of the data at mean ``vals[0]``."""
        mu = self._mean(vals)
        n_vals = self.x.size
        sq = float(np.sum((self.x - mu) ** 2))
        return -n_vals * (0.5 * _LOG_2PI + math.log(self.sigma)) - sq / (2.0 * self.sigma ** 2)

    def log_prior(self, vals) -> float:
        """Log prior density of the mean ``vals[0]``."""
        mu = self._mean(vals)
        return (
            -0.5 * _LOG_2PI
            - math.log(self.sigma_0)
            - (mu - self.mu_0) ** 2 / (2.0 * self.sigma_0 ** 2)
        )

    def log_target(self, vals) -> float:
        """Unnormalised log posterior of the mean."""
        return self.log_likelihood(vals) + self.log_prior(vals)