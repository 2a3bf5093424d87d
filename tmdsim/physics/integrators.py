"""
Fixed-step integrators for the two-body system: state_{n+1} = step(state_n, dt, params).

Pure numerical level: inputs are never mutated, a new SimulationState is returned.
Interface: step(state, dt, params) -> SimulationState.
"""

import math
from typing import Iterator

import numpy as np

from tmdsim.core.errors import InvalidTimestep, NonFiniteResult
from tmdsim.core.state import SimulationState, SystemParameters
from tmdsim.physics.dynamics import Derivative, evaluate


def _check_inputs(dt: float, params: SystemParameters) -> None:
    if not (math.isfinite(dt) and dt > 0):
        raise InvalidTimestep(f"dt must be finite and > 0, got {dt!r}")
    params.validate()


def _advance(state: SimulationState, x_next: np.ndarray, dt: float) -> SimulationState:
    new_state = SimulationState.from_array(state.t + dt, x_next)
    if not new_state.is_finite():
        raise NonFiniteResult(
            f"Non-finite state after step from t={state.t!r} with dt={dt!r}",
            state=state,
            dt=dt,
        )
    return new_state


def euler_step(state: SimulationState, dt: float, params: SystemParameters) -> SimulationState:
    """Explicit Euler, order 1: x_{n+1} = x_n + dt * f(x_n, t_n)."""
    _check_inputs(dt, params)
    k1 = np.array(evaluate(state, state.t, 0.0, Derivative.zero(), params))
    with np.errstate(over="ignore", invalid="ignore"):
        x_next = state.as_array() + dt * k1
    return _advance(state, x_next, dt)


def rk4_step(state: SimulationState, dt: float, params: SystemParameters) -> SimulationState:
    """
    Classic Runge-Kutta 4, order 4.

    Raises:
        InvalidTimestep: dt is not finite and strictly positive.
        InvalidParameter: a mass is not strictly positive or a parameter is not finite.
        NonFiniteResult: the new state contains NaN or Inf.
    """
    _check_inputs(dt, params)
    half = 0.5 * dt
    k1 = evaluate(state, state.t, 0.0, Derivative.zero(), params)
    k2 = evaluate(state, state.t + half, half, k1, params)
    k3 = evaluate(state, state.t + half, half, k2, params)
    k4 = evaluate(state, state.t + dt, dt, k3, params)

    k1, k2, k3, k4 = (np.array(k) for k in (k1, k2, k3, k4))
    with np.errstate(over="ignore", invalid="ignore"):
        x_next = state.as_array() + (dt / 6.0) * (k1 + 2 * k2 + 2 * k3 + k4)
    return _advance(state, x_next, dt)


def integrate(
    state: SimulationState,
    dt: float,
    params: SystemParameters,
    n_steps: int,
) -> Iterator[SimulationState]:
    """Yield the n_steps successive RK4 states following state (state itself excluded)."""
    for _ in range(n_steps):
        state = rk4_step(state, dt, params)
        yield state


class EulerIntegrator:
    """Explicit Euler integrator, order 1."""

    order = 1

    @staticmethod
    def step(state: SimulationState, dt: float, params: SystemParameters) -> SimulationState:
        return euler_step(state, dt, params)


class RK4Integrator:
    """Runge-Kutta 4 integrator, order 4."""

    order = 4

    @staticmethod
    def step(state: SimulationState, dt: float, params: SystemParameters) -> SimulationState:
        return rk4_step(state, dt, params)
