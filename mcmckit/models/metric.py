"""Metric tensor for the normal model and a finite-difference gradient helper."""

from __future__ import annotations

from typing import Callable, Optional, Tuple

import numpy as np

LogFn = Callable[[np.ndarray], float]


def _params(vals) -> Tuple[float, float]:
    vals = np.atleast_1d(np.asarray(vals, dtype=float)).ravel()
    if vals.size < 2:
        raise ValueError("vals must hold the mean and the standard deviation")
    return float(vals[0]), float(vals[1])


def normal_tensor(vals, n_data, with_deriv=False) -> Tuple[np.ndarray, Optional[np.ndarray]]:
    """Fisher information of a normal model at ``vals = (mu, sigma)``.

    Returns ``(tensor, deriv)``. ``tensor`` is the 2x2 metric; ``deriv`` has
    shape ``(2, 2, 2)`` and ``deriv[k]`` is the derivative of the metric with
    respect to parameter ``k``. ``deriv`` is ``None`` unless ``with_deriv``.
    """
    _, sigma = _params(vals)
    n_data = int(n_data)
    if n_data < 0:
        raise ValueError("n_data must not be negative")

    sigma_sq = sigma * sigma
    tensor = np.zeros((2, 2))
    tensor[0, 0] = n_data / sigma_sq
    tensor[1, 1] = 2.0 * n_data / sigma_sq

    deriv = None
    if with_deriv:
        deriv = np.zeros((2, 2, 2))
        deriv[1] = -2.0 * tensor / sigma
    return tensor, deriv


def numerical_gradient(log_fn: LogFn, vals, step=1e-6) -> np.ndarray:
    """Central finite-difference gradient of ``log_fn`` at ``vals``.

    The step along each coordinate is ``step`` scaled by the magnitude of
    that coordinate when it exceeds one.
    """
    step = float(step)
    if not step > 0.0:
        raise ValueError("step must be positive")
    x = np.atleast_1d(np.asarray(vals, dtype=float)).ravel()

    grad = np.empty_like(x)
    for i, x_i in enumerate(x):
        h = step * max(1.0, abs(x_i))
        forward = x.copy()
        backward = x.copy()
        forward[i] = x_i + h
        backward[i] = x_i - h
        grad[i] = (float(log_fn(forward)) - float(log_fn(backward))) / (2.0 * h)
    return grad