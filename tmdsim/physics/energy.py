"""Energy and frequency diagnostics for the two-body system."""

import math

from tmdsim.core.state import SimulationState, SystemParameters


def mechanical_energy(state: SimulationState, params: SystemParameters) -> float:
    """Kinetic energy of both bodies plus potential energy of the ground and coupling springs."""
    kinetic = 0.5 * params.m1 * state.v1 ** 2 + 0.5 * params.m2 * state.v2 ** 2
    potential = 0.5 * params.k1 * state.x1 ** 2 + 0.5 * params.k2 * (state.x2 - state.x1) ** 2
    return kinetic + potential


def natural_frequency(m: float, k: float) -> float:
    """Undamped natural frequency sqrt(k/m) / (2*pi), in Hz."""
    if m <= 0:
        raise ValueError(f"Mass must be > 0, got {m!r}")
    if k < 0:
        raise ValueError(f"Stiffness must be >= 0 for a real frequency, got {k!r}")
    return math.sqrt(k / m) / (2.0 * math.pi)


def tuning_ratio(params: SystemParameters) -> float:
    """Natural frequency of the tuned mass over that of the primary body (1.0 = perfectly tuned)."""
    primary = natural_frequency(params.m1, params.k1)
    if primary == 0.0:
        raise ValueError("Primary body has zero stiffness: tuning ratio undefined")
    return natural_frequency(params.m2, params.k2) / primary
