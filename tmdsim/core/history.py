"""Bounded buffer of sampled simulation states, for charts and analysis."""

from collections import deque
from dataclasses import fields
from typing import Deque, Dict, Iterator, List, Optional

import numpy as np

from tmdsim.core.state import SimulationState

STATE_FIELDS = tuple(f.name for f in fields(SimulationState))


class StateHistory:
    """
    Sliding window over the most recent SimulationState samples.

    Once max_length samples are held, each append drops the oldest one.
    Field series (t, x1, v1, x2, v2) are exported as numpy arrays.
    """

    def __init__(self, max_length: Optional[int] = None) -> None:
        """
        Args:
            max_length: maximum number of samples kept (None = unbounded).
        """
        if max_length is not None and max_length <= 0:
            raise ValueError(f"max_length must be > 0 or None, got {max_length}")
        self._states: Deque[SimulationState] = deque(maxlen=max_length)

    @property
    def max_length(self) -> Optional[int]:
        return self._states.maxlen

    def append(self, state: SimulationState) -> None:
        self._states.append(state)

    def clear(self) -> None:
        self._states.clear()

    @property
    def latest(self) -> Optional[SimulationState]:
        """Most recent sample, or None if empty."""
        return self._states[-1] if self._states else None

    def states(self) -> List[SimulationState]:
        """Samples, oldest first."""
        return list(self._states)

    def get(self, name: str) -> np.ndarray:
        """Series of one state field (t, x1, v1, x2 or v2)."""
        if name not in STATE_FIELDS:
            raise KeyError(f"Unknown state field: {name!r}")
        return np.array([getattr(s, name) for s in self._states], dtype=float)

    def to_dict(self) -> Dict[str, np.ndarray]:
        """All field series as a dict of arrays."""
        return {name: self.get(name) for name in STATE_FIELDS}

    def to_array(self) -> np.ndarray:
        """Samples as an (n, 4) array of [x1, v1, x2, v2] rows."""
        if not self._states:
            return np.empty((0, 4))
        return np.vstack([s.as_array() for s in self._states])

    def __iter__(self) -> Iterator[SimulationState]:
        return iter(self._states)

    def __len__(self) -> int:
        return len(self._states)
