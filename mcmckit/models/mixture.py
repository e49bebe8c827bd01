"""Gaussian mixture target with spherical components."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np


def _component_matrix(mu, n_vals: int) -> np.ndarray:
    mu = np.asarray(mu, dtype=float)
    if mu.ndim == 1:
        mu = mu.reshape(-1, 1)
    if mu.ndim != 2 or mu.shape[0] != n_vals:
        raise ValueError("mu must have one row per dimension and one column per component")
    return mu


def gaussian_mixture(x, weights, mu, sig_sq) -> float:
    """Log density of a mixture of spherical normals.

    Column ``i`` of ``mu`` is the mean of component ``i``, whose covariance is
    ``sig_sq[i]`` times the identity and whose weight is ``weights[i]``.
    """
    x = np.atleast_1d(np.asarray(x, dtype=float)).ravel()
    weights = np.atleast_1d(np.asarray(weights, dtype=float)).ravel()
    sig_sq = np.atleast_1d(np.asarray(sig_sq, dtype=float)).ravel()
    n_vals = x.size
    mu = _component_matrix(mu, n_vals)

    n_mix = weights.size
    if mu.shape[1] != n_mix or sig_sq.size != n_mix:
        raise ValueError("weights, mu columns and sig_sq must describe the same components")

    dist = np.sum((x[:, None] - mu) ** 2, axis=0)
    dens = weights * np.exp(-0.5 * dist / sig_sq) / np.power(2.0 * math.pi * sig_sq, n_vals / 2.0)
    dens_val = float(np.sum(dens))

    if dens_val == 0.0:
        return -math.inf
    return math.log(dens_val)


@dataclass
class MixtureModel:
    """A Gaussian mixture used as a sampling target."""

    mu: np.ndarray
    sig_sq: np.ndarray
    weights: np.ndarray

    def __post_init__(self) -> None:
        mu = np.asarray(self.mu, dtype=float)
        if mu.ndim == 1:
            mu = mu.reshape(-1, 1)
        if mu.ndim != 2:
            raise ValueError("mu must be a matrix")
        self.mu = mu
        self.sig_sq = np.atleast_1d(np.asarray(self.sig_sq, dtype=float)).ravel()
        self.weights = np.atleast_1d(np.asarray(self.weights, dtype=float)).ravel()
        n_mix = self.mu.shape[1]
        if self.sig_sq.size != n_mix or self.weights.size != n_mix:
            raise ValueError("weights, mu columns and sig_sq must describe the same components")

    @property
    def n_vals(self) -> int:
        return int(self.mu.shape[0])

    @property
    def n_mix(self) -> int:
        return int(self.mu.shape[1])

    def log_kernel(self, vals) -> float:
        """Log density of the mixture at ``vals``."""
        return gaussian_mixture(vals, self.weights, self.mu, self.sig_sq)

    @classmethod
    def symmetric(cls, n_vals=2, n_mix=2) -> "MixtureModel":
        """Equal-weight mixture with every mean at 2, except the first at -2.

        Each component has variance 0.1 along every axis.
        """
        if n_vals < 1 or n_mix < 1:
            raise ValueError("n_vals and n_mix must be positive")
        mu = np.ones((n_vals, n_mix)) + 1.0
        mu[:, 0] *= -1.0
        weights = np.full(n_mix, 1.0 / n_mix)
        sig_sq = 0.1 * np.ones(n_mix)
        return cls(mu=mu, sig_sq=sig_sq, weights=weights)