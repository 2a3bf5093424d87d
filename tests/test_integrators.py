"""Tests for the fixed-step integrators (RK4 and the Euler reference)."""

import math

import numpy as np
import pytest

from tmdsim.core.errors import InvalidParameter, InvalidTimestep, NonFiniteResult, SimulationError
from tmdsim.core.state import SimulationState, SystemParameters
from tmdsim.physics import (
    Derivative,
    EulerIntegrator,
    RK4Integrator,
    euler_step,
    evaluate,
    integrate,
    mechanical_energy,
    rk4_step,
)
from tmdsim.config import DEFAULT_PARAMETERS


def _undamped_undriven() -> SystemParameters:
    return SystemParameters(m1=1.0, k1=1.0, b1=0.0, m2=0.5, k2=0.7, b2=0.0)


def _run(step, state: SimulationState, dt: float, params: SystemParameters, n: int) -> SimulationState:
    for _ in range(n):
        state = step(state, dt, params)
    return state


def test_rk4_conserves_energy_without_damping_or_drive() -> None:
    params = _undamped_undriven()
    state = SimulationState(x1=1.0, v1=0.0, x2=-0.5, v2=0.2)
    e0 = mechanical_energy(state, params)
    energies = [mechanical_energy(s, params) for s in integrate(state, 0.01, params, 5000)]
    drift = np.max(np.abs(np.array(energies) - e0)) / e0
    assert drift < 1e-6


def test_euler_drifts_where_rk4_does_not() -> None:
    params = _undamped_undriven()
    state = SimulationState(x1=1.0, v1=0.0, x2=-0.5, v2=0.2)
    e0 = mechanical_energy(state, params)
    e_rk4 = mechanical_energy(_run(rk4_step, state, 0.01, params, 5000), params)
    e_euler = mechanical_energy(_run(euler_step, state, 0.01, params, 5000), params)
    assert abs(e_euler - e0) / e0 > 1e-2
    assert abs(e_rk4 - e0) < abs(e_euler - e0) * 1e-4


@pytest.mark.parametrize("dt", [1e-4, 0.01, 0.5])
@pytest.mark.parametrize(
    "params",
    [
        DEFAULT_PARAMETERS.replace(force_amplitude=0.0),
        SystemParameters(m1=1.0, k1=0.0, b1=0.0, m2=1.0, k2=0.0, b2=0.0, force_frequency=3.0),
        SystemParameters(m1=200.0, k1=5000.0, b1=50.0, m2=1.0, k2=10.0, b2=0.0),
    ],
)
def test_equilibrium_is_a_fixed_point(dt: float, params: SystemParameters) -> None:
    state = SimulationState.at_rest()
    new = rk4_step(state, dt, params)
    assert new.t == dt
    assert (new.x1, new.v1, new.x2, new.v2) == (0.0, 0.0, 0.0, 0.0)


def test_step_is_deterministic_and_pure() -> None:
    state = SimulationState(t=0.37, x1=0.01, v1=-0.02, x2=0.03, v2=0.04)
    first = rk4_step(state, 0.01, DEFAULT_PARAMETERS)
    second = rk4_step(state, 0.01, DEFAULT_PARAMETERS)
    assert first == second
    assert state == SimulationState(t=0.37, x1=0.01, v1=-0.02, x2=0.03, v2=0.04)
    assert first.t == pytest.approx(0.38)


def test_decoupled_primary_is_simple_harmonic() -> None:
    params = SystemParameters(m1=1.0, k1=1.0, b1=0.0, m2=1.0, k2=0.0, b2=0.0)
    dt = 0.001
    n = round(2 * math.pi / dt)
    state = _run(rk4_step, SimulationState(x1=1.0), dt, params, n)
    assert state.x1 == pytest.approx(1.0, abs=1e-4)
    assert state.x1 == pytest.approx(math.cos(state.t), abs=1e-4)
    assert state.v1 == pytest.approx(-math.sin(state.t), abs=1e-4)
    assert (state.x2, state.v2) == (0.0, 0.0)


def test_decoupled_primary_returns_after_exact_period() -> None:
    params = SystemParameters(m1=1.0, k1=1.0, b1=0.0, m2=1.0, k2=0.0, b2=0.0)
    n = 6283
    dt = 2 * math.pi / n
    state = _run(rk4_step, SimulationState(x1=1.0), dt, params, n)
    assert state.x1 == pytest.approx(1.0, abs=1e-4)
    assert state.v1 == pytest.approx(0.0, abs=1e-4)


def test_rk4_is_fourth_order() -> None:
    params = SystemParameters(m1=1.0, k1=1.0, b1=0.0, m2=1.0, k2=0.0, b2=0.0)

    def error(dt: float) -> float:
        n = round(1.0 / dt)
        state = _run(rk4_step, SimulationState(x1=1.0), dt, params, n)
        return abs(state.x1 - math.cos(state.t))

    ratio = error(0.1) / error(0.05)
    assert 10.0 < ratio < 25.0


def test_integrate_yields_successive_states() -> None:
    states = list(integrate(SimulationState(x1=0.1), 0.01, DEFAULT_PARAMETERS, 3))
    assert len(states) == 3
    assert [s.t for s in states] == pytest.approx([0.01, 0.02, 0.03])
    assert states[1] == rk4_step(states[0], 0.01, DEFAULT_PARAMETERS)


def test_integrator_classes_delegate() -> None:
    state = SimulationState(x1=0.2, v2=0.1)
    assert RK4Integrator().step(state, 0.01, DEFAULT_PARAMETERS) == rk4_step(state, 0.01, DEFAULT_PARAMETERS)
    assert EulerIntegrator.step(state, 0.01, DEFAULT_PARAMETERS) == euler_step(state, 0.01, DEFAULT_PARAMETERS)
    assert RK4Integrator.order == 4 and EulerIntegrator.order == 1


def test_tuned_mass_reduces_resonant_response() -> None:
    detuned = DEFAULT_PARAMETERS.replace(k2=0.0, b2=0.0)

    def late_amplitude(params: SystemParameters) -> float:
        x1 = [s.x1 for s in integrate(SimulationState.at_rest(), 0.01, params, 4000)]
        return float(np.max(np.abs(x1[-1000:])))

    assert late_amplitude(DEFAULT_PARAMETERS) < 0.5 * late_amplitude(detuned)


@pytest.mark.parametrize("field", ["m1", "m2"])
@pytest.mark.parametrize("value", [0.0, -1.0, float("nan")])
def test_non_positive_mass_raises_invalid_parameter(field: str, value: float) -> None:
    params = DEFAULT_PARAMETERS.replace(**{field: value})
    with pytest.raises(InvalidParameter):
        rk4_step(SimulationState.at_rest(), 0.01, params)
    with pytest.raises(InvalidParameter):
        euler_step(SimulationState.at_rest(), 0.01, params)


def test_zero_mass_never_yields_nan() -> None:
    with pytest.raises(InvalidParameter, match="m1"):
        rk4_step(SimulationState(x1=1.0), 0.01, DEFAULT_PARAMETERS.replace(m1=0.0))


def test_non_finite_parameter_raises_invalid_parameter() -> None:
    with pytest.raises(InvalidParameter, match="k2"):
        rk4_step(SimulationState.at_rest(), 0.01, DEFAULT_PARAMETERS.replace(k2=float("inf")))


@pytest.mark.parametrize("dt", [0.0, -0.01, float("nan"), float("inf")])
def test_bad_timestep_raises_invalid_timestep(dt: float) -> None:
    with pytest.raises(InvalidTimestep):
        rk4_step(SimulationState.at_rest(), dt, DEFAULT_PARAMETERS)


def test_timestep_checked_before_parameters() -> None:
    with pytest.raises(InvalidTimestep):
        rk4_step(SimulationState.at_rest(), 0.0, DEFAULT_PARAMETERS.replace(m1=0.0))


def test_overflow_raises_non_finite_result() -> None:
    params = DEFAULT_PARAMETERS.replace(k1=1e10)
    state = SimulationState(x1=1e300)
    with pytest.raises(NonFiniteResult) as info:
        rk4_step(state, 0.01, params)
    assert info.value.state == state
    assert info.value.dt == 0.01


def test_negative_stiffness_is_accepted_by_the_core() -> None:
    params = DEFAULT_PARAMETERS.replace(k1=-10.0, b2=-1.0)
    new = rk4_step(SimulationState(x1=0.01), 0.01, params)
    assert new.is_finite()


def test_huge_time_raises_non_finite_result() -> None:
    state = SimulationState(t=1e308)
    with pytest.raises(NonFiniteResult):
        rk4_step(state, 0.01, DEFAULT_PARAMETERS)
    with pytest.raises(SimulationError):
        euler_step(state, 0.01, DEFAULT_PARAMETERS)


def test_rk4_matches_weighted_stage_sum() -> None:
    state = SimulationState(t=0.2, x1=0.03, v1=-0.1, x2=0.02, v2=0.4)
    dt = 0.01
    k1 = evaluate(state, state.t, 0.0, Derivative.zero(), DEFAULT_PARAMETERS)
    k2 = evaluate(state, state.t + dt / 2, dt / 2, k1, DEFAULT_PARAMETERS)
    k3 = evaluate(state, state.t + dt / 2, dt / 2, k2, DEFAULT_PARAMETERS)
    k4 = evaluate(state, state.t + dt, dt, k3, DEFAULT_PARAMETERS)
    expected = [
        getattr(state, c) + dt * (a + 2 * b + 2 * cc + d) / 6
        for c, a, b, cc, d in zip(("x1", "v1", "x2", "v2"), k1, k2, k3, k4)
    ]
    new = rk4_step(state, dt, DEFAULT_PARAMETERS)
    np.testing.assert_allclose(new.as_array(), expected, rtol=1e-12, atol=1e-15)
    assert new.t == pytest.approx(0.21)
