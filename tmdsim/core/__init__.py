"""Core: data model, errors, history and the simulation driver."""

from tmdsim.core.errors import InvalidParameter, InvalidTimestep, NonFiniteResult, SimulationError
from tmdsim.core.history import StateHistory
from tmdsim.core.simulation import Simulation
from tmdsim.core.state import SimulationState, SystemParameters

__all__ = [
    "SimulationError",
    "InvalidParameter",
    "InvalidTimestep",
    "NonFiniteResult",
    "StateHistory",
    "Simulation",
    "SimulationState",
    "SystemParameters",
]
