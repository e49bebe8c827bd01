"""Building blocks of the No-U-Turn sampler: step-size search and tree building."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Tuple

import numpy as np

LogKernel = Callable[[np.ndarray], float]
LeapFrog = Callable[[float, int, np.ndarray, np.ndarray], Tuple[np.ndarray, np.ndarray]]

# Large slack on the energy error before a trajectory is declared divergent.
MAX_TUNING_PAR: float = 1000.0


@dataclass
class TreeState:
    """Result of building one (sub)tree of the NUTS trajectory."""

    draw: np.ndarray
    draw_pos: np.ndarray
    draw_neg: np.ndarray
    mntm_pos: np.ndarray
    mntm_neg: np.ndarray
    n_val: int
    s_val: bool
    alpha_val: float
    n_alpha_val: int


def _potential(log_kernel: LogKernel, draw: np.ndarray) -> float:
    value = -float(log_kernel(draw))
    return value if math.isfinite(value) else math.inf


def _kinetic(mntm: np.ndarray, inv_precond_matrix: np.ndarray) -> float:
    return float(mntm @ (inv_precond_matrix @ mntm)) / 2.0


def find_initial_step_size(
    draw,
    mntm,
    inv_precond_matrix,
    log_kernel: LogKernel,
    leap_frog: LeapFrog,
) -> float:
    """Double the step size from one while a single leapfrog step stays accurate.

    ``leap_frog(step_size, n_leap_steps, draw, mntm)`` returns the new
    ``(draw, mntm)`` pair.
    """
    draw = np.atleast_1d(np.asarray(draw, dtype=float))
    mntm = np.atleast_1d(np.asarray(mntm, dtype=float))
    inv_precond_matrix = np.atleast_2d(np.asarray(inv_precond_matrix, dtype=float))

    step_size = 1.0
    prev_h = _potential(log_kernel, draw) + _kinetic(mntm, inv_precond_matrix)

    new_draw, new_mntm = leap_frog(step_size, 1, draw.copy(), mntm.copy())

    def energy_change(d, m) -> float:
        return -(_potential(log_kernel, d) + _kinetic(m, inv_precond_matrix)) + prev_h

    diff = energy_change(new_draw, new_mntm)
    a_val = 2 * int(diff > math.log(0.5)) - 1

    while diff > -math.log(2):
        step_size *= 2.0 ** a_val
        new_draw, new_mntm = leap_frog(step_size, 1, new_draw, new_mntm)
        diff = energy_change(new_draw, new_mntm)
        a_val = 2 * int(diff > math.log(0.5)) - 1

    return step_size


def build_tree(
    direction,
    step_size,
    log_rand_val,
    prev_u,
    prev_k,
    draw,
    mntm,
    inv_precond_matrix,
    log_kernel: LogKernel,
    leap_frog: LeapFrog,
    tree_depth,
    rng: np.random.Generator,
) -> TreeState:
    """Recursively build a trajectory of ``2 ** tree_depth`` leapfrog steps."""
    draw = np.atleast_1d(np.asarray(draw, dtype=float))
    mntm = np.atleast_1d(np.asarray(mntm, dtype=float))
    inv_precond_matrix = np.atleast_2d(np.asarray(inv_precond_matrix, dtype=float))
    direction = int(direction)

    if tree_depth == 0:
        new_draw, new_mntm = leap_frog(direction * step_size, 1, draw.copy(), mntm.copy())
        new_draw = np.asarray(new_draw, dtype=float)
        new_mntm = np.asarray(new_mntm, dtype=float)

        prop_u = _potential(log_kernel, new_draw)
        prop_k = _kinetic(new_mntm, inv_precond_matrix)

        return TreeState(
            draw=new_draw,
            draw_pos=new_draw.copy(),
            draw_neg=new_draw.copy(),
            mntm_pos=new_mntm.copy(),
            mntm_neg=new_mntm.copy(),
            n_val=int(log_rand_val <= -prop_u - prop_k),
            s_val=bool(log_rand_val < MAX_TUNING_PAR - prop_u - prop_k),
            alpha_val=math.exp(min(0.0, -(prop_u + prop_k) + (prev_u + prev_k))),
            n_alpha_val=1,
        )

    def subtree(start_draw, start_mntm) -> TreeState:
        return build_tree(
            direction, step_size, log_rand_val, prev_u, prev_k,
            start_draw, start_mntm, inv_precond_matrix,
            log_kernel, leap_frog, tree_depth - 1, rng,
        )

    state = subtree(draw, mntm)
    if not state.s_val:
        return state

    if direction == -1:
        extra = subtree(state.draw_neg.copy(), state.mntm_neg.copy())
        state.draw_neg = extra.draw_pos
        state.mntm_neg = extra.mntm_pos
    else:
        extra = subtree(state.draw_pos.copy(), state.mntm_pos.copy())
        state.draw_pos = extra.draw_neg
        state.mntm_pos = extra.mntm_neg

    total = state.n_val + extra.n_val
    z = rng.random()
    if total > 0 and z < extra.n_val / total:
        state.draw = extra.draw

    state.n_val = total
    state.alpha_val += extra.alpha_val
    state.n_alpha_val += extra.n_alpha_val

    span = state.draw_pos - state.draw_neg
    no_turn_neg = float(span @ state.mntm_neg) >= 0.0
    no_turn_pos = float(span @ state.mntm_pos) >= 0.0
    state.s_val = bool(extra.s_val and no_turn_neg and no_turn_pos)
    return state