"""Densities of the univariate and multivariate normal distributions."""

from __future__ import annotations

import math
import sys

import numpy as np

LOG_2PI: float = 1.83787706640934548356


def _limit_value(x: float, mu: float, sigma: float) -> float:
    if sigma == math.inf:
        return 0.0
    if (x == math.inf and mu == math.inf) or (x == -math.inf and mu == -math.inf):
        return math.nan
    if sigma == 0.0 and x == mu:
        return math.inf
    return 0.0


def _log_if(value: float, log_form: bool) -> float:
    if not log_form:
        return value
    if math.isnan(value):
        return value
    return math.log(value) if value > 0 else -math.inf


def dnorm(x, mu=0.0, sigma=1.0, log_form=False) -> float:
    """Density (or log-density) of a normal distribution at ``x``."""
    x, mu, sigma = float(x), float(mu), float(sigma)
    if math.isnan(x) or math.isnan(mu) or math.isnan(sigma) or sigma < 0:
        return math.nan
    if any(math.isinf(v) for v in (x, mu, sigma)) or sigma == 0.0:
        return _log_if(_limit_value(x, mu, sigma), log_form)
    z = (x - mu) / sigma
    log_val = -0.5 * LOG_2PI - math.log(sigma) - z * z / 2.0
    return log_val if log_form else math.exp(log_val)


def dnorm_array(x, mu=0.0, sigma=1.0, log_form=False) -> np.ndarray:
    """Elementwise normal density (or log-density) of an array."""
    z = (np.asarray(x, dtype=float) - mu) / sigma
    norm_term = -0.5 * LOG_2PI - math.log(sigma)
    ret = -(z * z) / 2.0 + norm_term
    return ret if log_form else np.exp(ret)


def dmvnorm(x, mu, sigma, log_form=False) -> float:
    """Density (or log-density) of a multivariate normal at ``x``."""
    x = np.asarray(x, dtype=float).ravel()
    mu = np.asarray(mu, dtype=float).ravel()
    sigma = np.atleast_2d(np.asarray(sigma, dtype=float))
    k = x.size

    cons_term = -0.5 * k * LOG_2PI
    x_cent = x - mu
    quad_term = float(x_cent @ np.linalg.solve(sigma, x_cent))

    sign, logabsdet = np.linalg.slogdet(sigma)
    if sign > 0:
        log_det = float(logabsdet)
    elif sign == 0:
        log_det = -math.inf
    else:
        log_det = math.nan

    ret = cons_term - 0.5 * (log_det + quad_term)
    if not log_form:
        ret = math.exp(ret) if ret < 709.0 else math.inf
        if math.isinf(ret):
            ret = sys.float_info.max
    return ret


def generate_seed_value(index, n_threads, rng: np.random.Generator) -> int:
    """Derive a per-worker seed from a uniform draw, an index and a thread count."""
    return int((rng.random() + index + n_threads) * 1000)