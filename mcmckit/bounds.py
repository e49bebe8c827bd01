"""Box constraints: classifying bounds and mapping between bounded and free space."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Tuple

import numpy as np

from mcmckit.settings import EPS_DBL


class BoundsType(IntEnum):
    """Which bounds apply to one parameter."""

    NONE = 1
    LOWER = 2
    UPPER = 3
    BOTH = 4


def _vector(values, n_vals: int) -> np.ndarray:
    if values is None:
        return np.full(n_vals, np.nan)
    return np.atleast_1d(np.asarray(values, dtype=float))


def _types(bounds_type) -> np.ndarray:
    return np.atleast_1d(np.asarray(bounds_type, dtype=int))


def determine_bounds_type(vals_bound, lower_bounds, upper_bounds) -> np.ndarray:
    """Classify each parameter by which of its bounds are finite.

    Returns an integer array of ``BoundsType`` values. When ``vals_bound`` is
    false every parameter is ``BoundsType.NONE``.
    """
    reference = lower_bounds if lower_bounds is not None else upper_bounds
    if reference is None:
        raise ValueError("at least one of lower_bounds and upper_bounds is required")
    n_vals = np.atleast_1d(np.asarray(reference)).size

    ret = np.full(n_vals, int(BoundsType.NONE), dtype=int)
    if not vals_bound:
        return ret

    lower = _vector(lower_bounds, n_vals)
    upper = _vector(upper_bounds, n_vals)
    if lower.size != n_vals or upper.size != n_vals:
        raise ValueError("lower_bounds and upper_bounds must have the same length")

    lower_ok = np.isfinite(lower)
    upper_ok = np.isfinite(upper)
    ret[lower_ok & upper_ok] = BoundsType.BOTH
    ret[lower_ok & ~upper_ok] = BoundsType.LOWER
    ret[~lower_ok & upper_ok] = BoundsType.UPPER
    return ret


def sampling_bounds_check(
    vals_bound,
    bounds_type,
    hard_lower_bounds,
    hard_upper_bounds,
    sampling_lower_bounds,
    sampling_upper_bounds,
) -> Tuple[np.ndarray, np.ndarray]:
    """Tighten sampling bounds so they lie within the hard bounds.

    Returns new ``(sampling_lower, sampling_upper)`` arrays.
    """
    types = _types(bounds_type)
    n_vals = types.size
    lower = np.array(_vector(sampling_lower_bounds, n_vals), dtype=float)
    upper = np.array(_vector(sampling_upper_bounds, n_vals), dtype=float)
    if not vals_bound:
        return lower, upper

    hard_lower = _vector(hard_lower_bounds, n_vals)
    hard_upper = _vector(hard_upper_bounds, n_vals)

    has_lower = (types == BoundsType.BOTH) | (types == BoundsType.LOWER)
    has_upper = (types == BoundsType.BOTH) | (types == BoundsType.UPPER)
    lower[has_lower] = np.maximum(hard_lower[has_lower], lower[has_lower])
    upper[has_upper] = np.minimum(hard_upper[has_upper], upper[has_upper])
    return lower, upper


def transform(vals, bounds_type, lower_bounds, upper_bounds) -> np.ndarray:
    """Map bounded values to an unconstrained space (log / logit)."""
    types = _types(bounds_type)
    n_vals = types.size
    x = np.atleast_1d(np.asarray(vals, dtype=float))[:n_vals]
    lower = _vector(lower_bounds, n_vals)
    upper = _vector(upper_bounds, n_vals)

    out = x.copy()
    with np.errstate(divide="ignore", invalid="ignore"):
        log_lower = np.log(x - lower + EPS_DBL)
        log_upper = np.log(upper - x + EPS_DBL)

    out = np.where(types == BoundsType.LOWER, log_lower, out)
    out = np.where(types == BoundsType.UPPER, -log_upper, out)
    out = np.where(types == BoundsType.BOTH, log_lower - log_upper, out)
    return out


def inv_transform(vals_trans, bounds_type, lower_bounds, upper_bounds) -> np.ndarray:
    """Map unconstrained values back into their bounded space."""
    types = _types(bounds_type)
    n_vals = types.size
    t = np.atleast_1d(np.asarray(vals_trans, dtype=float))[:n_vals]
    lower = _vector(lower_bounds, n_vals)
    upper = _vector(upper_bounds, n_vals)
    finite = np.isfinite(t)

    with np.errstate(over="ignore", invalid="ignore"):
        exp_t = np.exp(t)
        exp_neg_t = np.exp(-t)
        logistic = (lower - EPS_DBL + (upper + EPS_DBL) * exp_t) / (1.0 + exp_t)

    lower_only = np.where(finite, lower + EPS_DBL + exp_t, lower + EPS_DBL)
    upper_only = np.where(finite, upper - EPS_DBL - exp_neg_t, upper - EPS_DBL)

    both = np.where(np.isfinite(logistic), logistic, upper - EPS_DBL)
    both = np.where(
        finite,
        both,
        np.where(
            np.isnan(t),
            (upper - lower) / 2,
            np.where(t < 0.0, lower + EPS_DBL, upper - EPS_DBL),
        ),
    )

    out = t.copy()
    out = np.where(types == BoundsType.LOWER, lower_only, out)
    out = np.where(types == BoundsType.UPPER, upper_only, out)
    out = np.where(types == BoundsType.BOTH, both, out)
    return out


def log_jacobian(vals_trans, bounds_type, lower_bounds, upper_bounds) -> float:
    """Log absolute determinant of the Jacobian of ``inv_transform``."""
    types = _types(bounds_type)
    n_vals = types.size
    t = np.atleast_1d(np.asarray(vals_trans, dtype=float))[:n_vals]
    lower = _vector(lower_bounds, n_vals)
    upper = _vector(upper_bounds, n_vals)

    total = 0.0
    for kind, t_i, lb, ub in zip(types, t, lower, upper):
        if kind == BoundsType.LOWER:
            total += t_i
        elif kind == BoundsType.UPPER:
            total -= t_i
        elif kind == BoundsType.BOTH:
            with np.errstate(over="ignore"):
                exp_inp = np.exp(t_i)
            if np.isfinite(exp_inp):
                total += np.log(ub - lb) + t_i - 2.0 * np.log1p(exp_inp)
            else:
                total += np.log(ub - lb) - t_i
    return float(total)


def inv_jacobian_adjust(vals_trans, bounds_type, lower_bounds, upper_bounds) -> np.ndarray:
    """Diagonal matrix of inverse derivatives of ``inv_transform``."""
    types = _types(bounds_type)
    n_vals = types.size
    t = np.atleast_1d(np.asarray(vals_trans, dtype=float))[:n_vals]
    lower = _vector(lower_bounds, n_vals)
    upper = _vector(upper_bounds, n_vals)

    diag = np.ones(n_vals)
    with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
        exp_t = np.exp(t)
        both = (exp_t + 1.0) ** 2 / (exp_t * (upper - lower))
        diag = np.where(types == BoundsType.LOWER, np.exp(-t), diag)
        diag = np.where(types == BoundsType.UPPER, exp_t, diag)
        diag = np.where(types == BoundsType.BOTH, both, diag)
    return np.diag(diag)


__all__: Optional[list] = [
    "BoundsType",
    "determine_bounds_type",
    "sampling_bounds_check",
    "transform",
    "inv_transform",
    "log_jacobian",
    "inv_jacobian_adjust",
]