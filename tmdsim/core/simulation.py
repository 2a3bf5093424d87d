"""Simulation driver: fixed-tick loop, state ownership, history sampling."""

import logging
import math
from typing import Any, Dict, Optional

from tmdsim.config import DEFAULT_PARAMETERS, HISTORY_LENGTH, PHYSICS_DT, SAMPLE_EVERY
from tmdsim.core.errors import InvalidTimestep, SimulationError
from tmdsim.core.history import StateHistory
from tmdsim.core.state import SimulationState, SystemParameters
from tmdsim.physics.integrators import RK4Integrator

logger = logging.getLogger(__name__)


class Simulation:
    """
    Caller-side driver around the pure integrator.

    Owns the live state and threads it through integrator.step(state, dt, params)
    one tick at a time; every sample_every-th state goes into a bounded history.
    """

    def __init__(
        self,
        params: SystemParameters = DEFAULT_PARAMETERS,
        dt: float = PHYSICS_DT,
        integrator: Optional[Any] = None,
        history_length: Optional[int] = HISTORY_LENGTH,
        sample_every: int = SAMPLE_EVERY,
        initial_state: Optional[SimulationState] = None,
    ) -> None:
        """
        Args:
            params: system parameters (validated here and on every step).
            dt: fixed time step.
            integrator: object with step(state, dt, params). Default: RK4.
            history_length: samples kept in history (None = unbounded).
            sample_every: record one state every N steps.
            initial_state: state restored by reset(). Default: at rest.
        """
        if not (math.isfinite(dt) and dt > 0):
            raise InvalidTimestep(f"dt must be finite and > 0, got {dt!r}")
        if sample_every < 1:
            raise ValueError(f"sample_every must be >= 1, got {sample_every}")
        self.dt = dt
        self.integrator = integrator or RK4Integrator()
        self.sample_every = sample_every
        self._initial_state = initial_state or SimulationState.at_rest()
        self._history = StateHistory(max_length=history_length)
        self.set_parameters(params)
        self._initial_params = self._params
        self.reset()

    def reset(self, restore_parameters: bool = False) -> None:
        """
        Back to the initial state; history restarts with that state.

        Args:
            restore_parameters: also restore the parameters given at construction,
                discarding later set_parameters/update_parameters changes.
        """
        if restore_parameters:
            self._params = self._initial_params
        self._state = self._initial_state
        self._steps = 0
        self._history.clear()
        self._record()
        logger.debug("Simulation reset to %s", self._state)

    def set_parameters(self, params: SystemParameters) -> None:
        """Replace the parameters used from the next step on."""
        params.validate()
        negative = [
            name for name in ("k1", "b1", "k2", "b2") if getattr(params, name) < 0
        ]
        if negative:
            logger.warning("Negative stiffness/damping %s: system may be unstable", negative)
        self._params = params
        logger.debug("Parameters set: %s", params)

    def update_parameters(self, **changes: float) -> None:
        """Change some parameters, keeping the others."""
        self.set_parameters(self._params.replace(**changes))

    def step(self) -> SimulationState:
        """Advance one fixed step and return the new state."""
        try:
            new_state = self.integrator.step(self._state, self.dt, self._params)
        except SimulationError:
            logger.error("Step %d failed at t=%.6g", self._steps + 1, self._state.t)
            raise
        self._state = new_state
        self._steps += 1
        if self._steps % self.sample_every == 0:
            self._record()
        return new_state

    def advance(self, n_steps: int) -> SimulationState:
        """Run n_steps steps; returns the last state."""
        if n_steps < 0:
            raise ValueError(f"n_steps must be >= 0, got {n_steps}")
        for _ in range(n_steps):
            self.step()
        return self._state

    def run(self, duration: float) -> SimulationState:
        """Run ceil(duration / dt) steps."""
        if duration < 0:
            raise ValueError(f"duration must be >= 0, got {duration}")
        return self.advance(math.ceil(duration / self.dt))

    def _record(self) -> None:
        self._history.append(self._state)

    @property
    def state(self) -> SimulationState:
        return self._state

    @property
    def time(self) -> float:
        """Current simulated time."""
        return self._state.t

    @property
    def params(self) -> SystemParameters:
        return self._params

    @property
    def history(self) -> StateHistory:
        return self._history

    @property
    def steps_taken(self) -> int:
        return self._steps

    def state_dict(self) -> Dict[str, Any]:
        """Snapshot of the driver for checkpointing."""
        return {
            "state": self._state.to_dict(),
            "params": self._params.to_dict(),
            "dt": self.dt,
            "steps": self._steps,
        }
