# mcmckit

Building blocks for Markov chain Monte Carlo sampling with NumPy.

## Installation

```
pip install .
```

## Modules

### `mcmckit.settings`

Dataclasses that hold each algorithm's tuning options: `AeesSettings`,
`DeSettings`, `HmcSettings`, `NutsSettings`, `RmhmcSettings`,
`MalaSettings` and `RwmhSettings`. Matrix and vector fields such as
`cov_mat`, `precond_mat`, `temper_vec`, `initial_lb` and `initial_ub` are
converted to float arrays when they are given, and are `None` otherwise.

`AlgoSettings` gathers one block of each kind. It also carries
`rng_seed_value`, which defaults to a random 32-bit seed from the system, and
`vals_bound`, `lower_bounds` and `upper_bounds`. `AlgoSettings.make_rng()`
returns a fresh `numpy.random.Generator` seeded with `rng_seed_value`.

The module also defines the constants `EPS_DBL`, `POSINF`, `NEGINF` and
`SMALL_NUMBER`.

### `mcmckit.stats`

- `dnorm(x, mu=0.0, sigma=1.0, log_form=False)` gives the scalar normal
  density. It returns NaN for NaN inputs or a negative `sigma`, and handles
  the limits that arise for infinite values and for `sigma == 0`.
- `dnorm_array(x, mu, sigma, log_form)` gives the same density, element by
  element, for an array.
- `dmvnorm(x, mu, sigma, log_form)` gives the multivariate normal density. A
  density that overflows is capped at the largest float.
- `generate_seed_value(index, n_threads, rng)` returns
  `int((u + index + n_threads) * 1000)`, where `u` is a uniform draw from
  `rng`.

### `mcmckit.bounds`

Box constraints and the mapping between bounded and unconstrained space.

- `BoundsType` takes the values `NONE`, `LOWER`, `UPPER` and `BOTH`.
- `determine_bounds_type` classifies each parameter by which of its bounds
  are finite.
- `sampling_bounds_check` tightens a pair of sampling bounds so that they lie
  within the hard bounds, and returns the new `(lower, upper)` pair.
- `transform` maps bounded values to unconstrained space (log or logit), and
  `inv_transform` maps them back.
- `log_jacobian` gives the log Jacobian of `inv_transform`.
- `inv_jacobian_adjust` gives the diagonal matrix of inverse derivatives.

### `mcmckit.proposals`

- `single_step_mh(x_prev, temper_val, prop_scaling_mat, target_log_kernel, rng)`
  makes one Metropolis-Hastings move on a tempered target. It returns
  `(state, log_kernel_value)`.
- `de_cooling_schedule(s, n_gen)` always returns `1.0`.

### `mcmckit.mala`

`mala_prop_adjustment(prop_vals, prev_vals, step_size, vals_bound, precond_mat, mala_mean_fn)`
returns the log ratio of the reverse proposal density to the forward one.
`mala_mean_fn(vals, step_size, with_jacobian)` must return a
`(mean, inverse_jacobian_or_None)` pair.

### `mcmckit.nuts`

- `find_initial_step_size(draw, mntm, inv_precond_matrix, log_kernel, leap_frog)`
  searches for a starting step size. It begins at 1 and doubles or halves the
  step with single leapfrog steps.
- `build_tree(...)` recursively builds a trajectory of `2 ** tree_depth`
  leapfrog steps and returns a `TreeState`. That state holds the chosen
  draw, the two trajectory ends with their momenta, `n_val`, `s_val`,
  `alpha_val` and `n_alpha_val`.

`leap_frog(step_size, n_leap_steps, draw, mntm)` must return the new
`(draw, mntm)` pair.

### `mcmckit.models`

Example targets.

- `mixture`: `gaussian_mixture(x, weights, mu, sig_sq)` gives the log density
  of a mixture of spherical normals. `MixtureModel` has the method
  `log_kernel(vals)` and the class method `symmetric(n_vals, n_mix)`, which
  builds an equal-weight mixture. Every mean in it is 2, except the first
  component, whose mean is -2, and every variance is 0.1.
- `normal_mean`: `NormalMeanModel` is a normal likelihood with a known
  `sigma` and a normal prior on the mean. It has the methods
  `log_likelihood`, `log_prior` and `log_target`.
- `normal`: `NormalModel` is a normal likelihood in `(mu, sigma)`.
  `log_density(vals, with_grad)` returns `(value, gradient_or_None)`, and
  `gradient(vals)` returns the gradient alone.
- `metric`: `normal_tensor(vals, n_data, with_deriv)` returns the Fisher
  information of the normal model, along with its derivative if asked for
  it. `numerical_gradient(log_fn, vals, step=1e-6)` gives a central
  finite-difference gradient.

## Example

```python
import numpy as np
from mcmckit.settings import AlgoSettings
from mcmckit.models.mixture import MixtureModel
from mcmckit.proposals import single_step_mh

settings = AlgoSettings(rng_seed_value=42)
rng = settings.make_rng()

model = MixtureModel.symmetric(2, 2)
x = np.array([-2.0, -2.0])
scaling = np.linalg.cholesky(0.35 * np.eye(2))

draws = []
for _ in range(1000):
    x, log_val = single_step_mh(x, 1.0, scaling, model.log_kernel, rng)
    draws.append(x)
```

## What it does not do

mcmckit provides the pieces of samplers, not complete sampler runs. It has
no function that runs a full random-walk Metropolis-Hastings, MALA, HMC,
NUTS, RM-HMC, differential-evolution or equi-energy chain with burn-in and
kept draws. The settings dataclasses only store options; nothing in the
package reads most of them, fills in `n_accept_draws`, or uses
`omp_n_threads`. The package has no command-line interface and does no
parallel sampling.

## Tests

```
pip install ".[test]"
pytest
```