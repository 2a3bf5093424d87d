"""
tmdsim: fixed-step RK4 simulation of a driven primary mass with a tuned mass damper.
"""

__version__ = "0.1.0"

from tmdsim.core.errors import InvalidParameter, InvalidTimestep, NonFiniteResult, SimulationError
from tmdsim.core.simulation import Simulation
from tmdsim.core.state import SimulationState, SystemParameters
from tmdsim.physics.integrators import rk4_step as step

__all__ = [
    "__version__",
    "step",
    "Simulation",
    "SimulationState",
    "SystemParameters",
    "SimulationError",
    "InvalidParameter",
    "InvalidTimestep",
    "NonFiniteResult",
]
