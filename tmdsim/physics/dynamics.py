"""
Equations of motion of the primary body + tuned mass damper.

    m1 * a1 = -k1*x1 - b1*v1 + k2*(x2 - x1) + b2*(v2 - v1) + F(t)
    m2 * a2 = -k2*(x2 - x1) - b2*(v2 - v1)

The coupling spring/damper is the only force on body 2; the drive acts on body 1 only.
"""

from typing import NamedTuple, Tuple

from tmdsim.core.state import SimulationState, SystemParameters
from tmdsim.physics.forcing import drive_force


class Derivative(NamedTuple):
    """Time derivative of the state vector [x1, v1, x2, v2]."""

    dx1: float
    dv1: float
    dx2: float
    dv2: float

    @classmethod
    def zero(cls) -> "Derivative":
        return cls(0.0, 0.0, 0.0, 0.0)


def coupling_force(x1: float, v1: float, x2: float, v2: float, params: SystemParameters) -> float:
    """Force exerted by body 2 on body 1 through the coupling spring and damper."""
    return params.k2 * (x2 - x1) + params.b2 * (v2 - v1)


def _forces(
    x1: float, v1: float, x2: float, v2: float, t: float, params: SystemParameters
) -> Tuple[float, float]:
    spring = params.k2 * (x2 - x1)
    damping = params.b2 * (v2 - v1)
    drive = drive_force(t, params.force_amplitude, params.force_frequency)
    f1 = -params.k1 * x1 - params.b1 * v1 + spring + damping + drive
    f2 = -spring - damping
    return f1, f2


def net_forces(state: SimulationState, t: float, params: SystemParameters) -> Tuple[float, float]:
    """Net forces (F1, F2) on both bodies for the given state and drive time t."""
    return _forces(state.x1, state.v1, state.x2, state.v2, t, params)


def evaluate(
    state: SimulationState,
    t: float,
    dt_offset: float,
    partial_derivative: Derivative,
    params: SystemParameters,
) -> Derivative:
    """
    State derivative at the trial point state + partial_derivative * dt_offset.

    Args:
        state: base state of the current step.
        t: time at which the drive force is sampled.
        dt_offset: distance from the base state along partial_derivative.
        partial_derivative: slope estimate from the previous RK stage.
        params: system parameters (masses assumed validated).

    Returns:
        Derivative {dx1, dv1, dx2, dv2} at the trial point.
    """
    x1 = state.x1 + partial_derivative.dx1 * dt_offset
    v1 = state.v1 + partial_derivative.dv1 * dt_offset
    x2 = state.x2 + partial_derivative.dx2 * dt_offset
    v2 = state.v2 + partial_derivative.dv2 * dt_offset

    f1, f2 = _forces(x1, v1, x2, v2, t, params)
    return Derivative(dx1=v1, dv1=f1 / params.m1, dx2=v2, dv2=f2 / params.m2)
