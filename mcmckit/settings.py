"""Tuning parameters for the samplers and the shared random-number setup."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

EPS_DBL: float = float(np.finfo(float).eps)
POSINF: float = float("inf")
NEGINF: float = float("-inf")
SMALL_NUMBER: float = 1e-08


def _as_float_array(value) -> Optional[np.ndarray]:
    if value is None:
        return None
    return np.array(value, dtype=float)


def _random_device_seed() -> int:
    return random.SystemRandom().getrandbits(32)


@dataclass
class AeesSettings:
    """Adaptive equi-energy sampler settings."""

    n_initial_draws: int = 1000
    n_burnin_draws: int = 1000
    n_keep_draws: int = 1000
    omp_n_threads: int = -1
    par_scale: float = 1.0
    cov_mat: Optional[np.ndarray] = None
    n_rings: int = 5
    ee_prob_par: float = 0.10
    temper_vec: Optional[np.ndarray] = None

    def __post_init__(self) -> None:
        self.cov_mat = _as_float_array(self.cov_mat)
        self.temper_vec = _as_float_array(self.temper_vec)


@dataclass
class DeSettings:
    """Differential-evolution MCMC settings; ``n_accept_draws`` is filled by the sampler."""

    jumps: bool = False
    n_pop: int = 100
    n_burnin_draws: int = 1000
    n_keep_draws: int = 1000
    omp_n_threads: int = -1
    par_b: float = 1e-04
    par_gamma: float = 1.0
    par_gamma_jump: float = 2.0
    initial_lb: Optional[np.ndarray] = None
    initial_ub: Optional[np.ndarray] = None
    n_accept_draws: int = 0

    def __post_init__(self) -> None:
        self.initial_lb = _as_float_array(self.initial_lb)
        self.initial_ub = _as_float_array(self.initial_ub)


@dataclass
class HmcSettings:
    """Hamiltonian Monte Carlo settings."""

    n_burnin_draws: int = 1000
    n_keep_draws: int = 1000
    omp_n_threads: int = -1
    n_leap_steps: int = 1
    step_size: float = 1.0
    precond_mat: Optional[np.ndarray] = None
    n_accept_draws: int = 0

    def __post_init__(self) -> None:
        self.precond_mat = _as_float_array(self.precond_mat)


@dataclass
class NutsSettings:
    """No-U-Turn sampler settings, including dual-averaging parameters."""

    n_burnin_draws: int = 1000
    n_keep_draws: int = 1000
    omp_n_threads: int = -1
    n_adapt_draws: int = 1000
    target_accept_rate: float = 0.55
    max_tree_depth: int = 10
    step_size: float = 1.0
    gamma_val: float = 0.05
    t0_val: float = 10.0
    kappa_val: float = 0.75
    precond_mat: Optional[np.ndarray] = None
    n_accept_draws: int = 0

    def __post_init__(self) -> None:
        self.precond_mat = _as_float_array(self.precond_mat)


@dataclass
class RmhmcSettings:
    """Riemannian-manifold HMC settings."""

    n_burnin_draws: int = 1000
    n_keep_draws: int = 1000
    omp_n_threads: int = -1
    n_leap_steps: int = 1
    step_size: float = 1.0
    precond_mat: Optional[np.ndarray] = None
    n_fp_steps: int = 5
    n_accept_draws: int = 0

    def __post_init__(self) -> None:
        self.precond_mat = _as_float_array(self.precond_mat)


@dataclass
class MalaSettings:
    """Metropolis-adjusted Langevin settings."""

    n_burnin_draws: int = 1000
    n_keep_draws: int = 1000
    omp_n_threads: int = -1
    step_size: float = 1.0
    precond_mat: Optional[np.ndarray] = None
    n_accept_draws: int = 0

    def __post_init__(self) -> None:
        self.precond_mat = _as_float_array(self.precond_mat)


@dataclass
class RwmhSettings:
    """Random-walk Metropolis-Hastings settings."""

    n_burnin_draws: int = 1000
    n_keep_draws: int = 1000
    omp_n_threads: int = -1
    par_scale: float = 1.0
    cov_mat: Optional[np.ndarray] = None
    n_accept_draws: int = 0

    def __post_init__(self) -> None:
        self.cov_mat = _as_float_array(self.cov_mat)


@dataclass
class AlgoSettings:
    """Settings shared by all samplers plus one block per algorithm."""

    rng_seed_value: int = field(default_factory=_random_device_seed)
    vals_bound: bool = False
    lower_bounds: Optional[np.ndarray] = None
    upper_bounds: Optional[np.ndarray] = None
    aees_settings: AeesSettings = field(default_factory=AeesSettings)
    de_settings: DeSettings = field(default_factory=DeSettings)
    hmc_settings: HmcSettings = field(default_factory=HmcSettings)
    nuts_settings: NutsSettings = field(default_factory=NutsSettings)
    rmhmc_settings: RmhmcSettings = field(default_factory=RmhmcSettings)
    mala_settings: MalaSettings = field(default_factory=MalaSettings)
    rwmh_settings: RwmhSettings = field(default_factory=RwmhSettings)

    def __post_init__(self) -> None:
        self.lower_bounds = _as_float_array(self.lower_bounds)
        self.upper_bounds = _as_float_array(self.upper_bounds)

    def make_rng(self) -> np.random.Generator:
        """Return a fresh generator seeded with ``rng_seed_value``."""
        return np.random.default_rng(self.rng_seed_value)