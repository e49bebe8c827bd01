"""Proposal steps shared by the population samplers."""

from __future__ import annotations

import math
from typing import Callable, Tuple

import numpy as np

LogKernel = Callable[[np.ndarray], float]


def single_step_mh(
    x_prev,
    temper_val,
    prop_scaling_mat,
    target_log_kernel: LogKernel,
    rng: np.random.Generator,
) -> Tuple[np.ndarray, float]:
    """One Metropolis-Hastings step on a tempered target.

    Returns the resulting state and the log-kernel value at that state.
    """
    x_prev = np.atleast_1d(np.asarray(x_prev, dtype=float))
    scaling = np.atleast_2d(np.asarray(prop_scaling_mat, dtype=float))
    temper_val = float(temper_val)

    rand_vec = rng.standard_normal(x_prev.size)
    x_new = x_prev + math.sqrt(temper_val) * (scaling @ rand_vec)

    val_new = float(target_log_kernel(x_new))
    val_prev = float(target_log_kernel(x_prev))

    comp_val = min(0.01, (val_new - val_prev) / temper_val)
    z = rng.random()

    if z < math.exp(comp_val):
        return x_new, val_new
    return x_prev, val_prev


def de_cooling_schedule(s, n_gen) -> float:
    """Temperature for generation ``s`` of ``n_gen``; constant at one."""
    return 1.0