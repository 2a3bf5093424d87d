"""
Physics of the two-body system.

Hierarchy:
  - forcing: external sinusoidal drive on the primary body
  - dynamics: equations of motion (Derivative, evaluate)
  - integrators: fixed-step steppers (Euler, RK4)
  - energy: mechanical energy and tuning diagnostics
"""

from tmdsim.physics.dynamics import Derivative, coupling_force, evaluate, net_forces
from tmdsim.physics.energy import mechanical_energy, natural_frequency, tuning_ratio
from tmdsim.physics.forcing import drive_force
from tmdsim.physics.integrators import (
    EulerIntegrator,
    RK4Integrator,
    euler_step,
    integrate,
    rk4_step,
)

__all__ = [
    # Forcing
    "drive_force",
    # Dynamics
    "Derivative",
    "evaluate",
    "coupling_force",
    "net_forces",
    # Integrators
    "EulerIntegrator",
    "RK4Integrator",
    "euler_step",
    "rk4_step",
    "integrate",
    # Energy
    "mechanical_energy",
    "natural_frequency",
    "tuning_ratio",
]
