"""Normal model with unknown mean and standard deviation, with gradient."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

_LOG_2PI = math.log(2.0 * math.pi)


@dataclass
class NormalModel:
    """Data ``x`` drawn from N(mu, sigma^2); parameters are ``(mu, sigma)``."""

    x: np.ndarray

    def __post_init__(self) -> None:
        self.x = np.atleast_1d(np.asarray(self.x, dtype=float)).ravel()

    @staticmethod
    def _params(vals) -> Tuple[float, float]:
        vals = np.atleast_1d(np.asarray(vals, dtype=float)).ravel()
        if vals.size < 2:
            raise ValueError("vals must hold the mean and the standard deviation")
        return float(vals[0]), float(vals[1])

    def log_density(self, vals, with_grad=False) -> Tuple[float, Optional[np.ndarray]]:
        """Log likelihood at ``vals = (mu, sigma)``.

        Returns ``(value, gradient)``; the gradient with respect to
        ``(mu, sigma)`` is computed only when ``with_grad`` is true and is
        ``None`` otherwise.
        """
        mu, sigma = self._params(vals)
        n_vals = self.x.size
        dev = self.x - mu

        with np.errstate(divide="ignore", invalid="ignore"):
            sigma_f = np.float64(sigma)
            m_2 = np.sum(dev ** 2)
            value = float(
                -n_vals * (0.5 * _LOG_2PI + np.log(sigma_f)) - m_2 / (2.0 * sigma_f * sigma_f)
            )

            grad = None
            if with_grad:
                m_1 = np.sum(dev)
                grad = np.array(
                    [
                        m_1 / (sigma_f * sigma_f),
                        m_2 / (sigma_f * sigma_f * sigma_f) - n_vals / sigma_f,
                    ],
                    dtype=float,
                )
        return value, grad

    def gradient(self, vals) -> np.ndarray:
        """Gradient of the log likelihood with respect to ``(mu, sigma)``."""
        _, grad = self.log_density(vals, with_grad=True)
        return grad