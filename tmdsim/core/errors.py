"""Errors raised by the integrator and the simulation driver."""

from typing import Any, Optional


class SimulationError(Exception):
    """Base class for every error raised by tmdsim."""


class InvalidParameter(SimulationError, ValueError):
    """A system parameter is unusable (non-positive mass, non-finite value, unknown key)."""


class InvalidTimestep(SimulationError, ValueError):
    """The integration step dt is not a finite, strictly positive number."""


class NonFiniteResult(SimulationError, ArithmeticError):
    """
    The state computed by a step contains NaN or Inf.

    Attributes:
        state: state the failing step started from.
        dt: step size of the failing step.
    """

    def __init__(self, message: str, state: Optional[Any] = None, dt: Optional[float] = None) -> None:
        super().__init__(message)
        self.state = state
        self.dt = dt
