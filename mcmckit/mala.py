"""Proposal-density correction for the Metropolis-adjusted Langevin algorithm."""

from __future__ import annotations

from typing import Callable, Optional, Tuple

import numpy as np

from mcmckit.stats import dmvnorm

MalaMeanFn = Callable[[np.ndarray, float, bool], Tuple[np.ndarray, Optional[np.ndarray]]]


def mala_prop_adjustment(
    prop_vals,
    prev_vals,
    step_size,
    vals_bound,
    precond_mat,
    mala_mean_fn: MalaMeanFn,
) -> float:
    """Log ratio of reverse to forward Langevin proposal densities.

    ``mala_mean_fn(vals, step_size, with_jacobian)`` returns the proposal mean
    at ``vals`` and, when ``with_jacobian`` is true, the inverse Jacobian of the
    bounds transform at ``vals`` (otherwise ``None``).

    When ``vals_bound`` is true both densities use the inverse Jacobian taken
    at the proposed point.
    """
    prop_vals = np.atleast_1d(np.asarray(prop_vals, dtype=float))
    prev_vals = np.atleast_1d(np.asarray(prev_vals, dtype=float))
    precond_mat = np.atleast_2d(np.asarray(precond_mat, dtype=float))
    step_size = float(step_size)
    step_size_sq = step_size * step_size

    if vals_bound:
        prop_mean, prop_inv_jacob = mala_mean_fn(prop_vals, step_size, True)
        prev_mean, _ = mala_mean_fn(prev_vals, step_size, True)
        if prop_inv_jacob is None:
            raise ValueError("mala_mean_fn must return a Jacobian when one is requested")
        cov = step_size_sq * (np.atleast_2d(prop_inv_jacob) @ precond_mat)
    else:
        prop_mean, _ = mala_mean_fn(prop_vals, step_size, False)
        prev_mean, _ = mala_mean_fn(prev_vals, step_size, False)
        cov = step_size_sq * precond_mat

    return dmvnorm(prev_vals, prop_mean, cov, True) - dmvnorm(prop_vals, prev_mean, cov, True)