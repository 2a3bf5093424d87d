"""Data model: system parameters and simulation state (immutable values)."""

import dataclasses
import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping

import numpy as np

from tmdsim.core.errors import InvalidParameter

# camelCase names used by front-end parameter payloads
_ALIASES = {
    "forceAmplitude": "force_amplitude",
    "forceFrequency": "force_frequency",
}


@dataclass(frozen=True)
class SystemParameters:
    """
    Parameters of the two-body system.

    Body 1 (primary): mass m1, ground spring k1, ground damper b1, driven by
    force_amplitude * sin(2*pi*force_frequency*t).
    Body 2 (tuned mass): mass m2, coupled to body 1 through spring k2 and damper b2.
    """

    m1: float
    k1: float
    b1: float
    m2: float
    k2: float
    b2: float
    force_amplitude: float = 0.0
    force_frequency: float = 0.0

    def validate(self) -> None:
        """Raise InvalidParameter if a mass is not strictly positive or a field is not a finite number."""
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidParameter(f"{field.name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise InvalidParameter(f"{field.name} must be finite, got {value!r}")
        if not self.m1 > 0:
            raise InvalidParameter(f"m1 must be > 0, got {self.m1!r}")
        if not self.m2 > 0:
            raise InvalidParameter(f"m2 must be > 0, got {self.m2!r}")

    def replace(self, **changes: Any) -> "SystemParameters":
        """Copy with some fields changed (camelCase aliases accepted)."""
        return dataclasses.replace(self, **_coerce(changes))

    def to_dict(self) -> Dict[str, float]:
        return dataclasses.asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SystemParameters":
        """Build from a mapping; snake_case or camelCase force keys."""
        values = _coerce(data)
        required = [f.name for f in dataclasses.fields(cls) if f.default is dataclasses.MISSING]
        missing = [name for name in required if name not in values]
        if missing:
            raise InvalidParameter(f"Missing system parameters: {missing}")
        return cls(**values)


def _coerce(data: Mapping[str, Any]) -> Dict[str, float]:
    """Map aliases to field names and convert every value to float."""
    names = {f.name for f in dataclasses.fields(SystemParameters)}
    out: Dict[str, float] = {}
    for key, value in data.items():
        name = _ALIASES.get(key, key)
        if name not in names:
            raise InvalidParameter(f"Unknown system parameter: {key!r}")
        if isinstance(value, bool):
            raise InvalidParameter(f"{name} must be a number, got {value!r}")
        try:
            out[name] = float(value)
        except (TypeError, ValueError) as exc:
            raise InvalidParameter(f"{name} must be a number, got {value!r}") from exc
    return out


@dataclass(frozen=True)
class SimulationState:
    """Elapsed time t and displacement/velocity of both bodies, measured from equilibrium."""

    t: float = 0.0
    x1: float = 0.0
    v1: float = 0.0
    x2: float = 0.0
    v2: float = 0.0

    @classmethod
    def at_rest(cls) -> "SimulationState":
        """Equilibrium at t = 0."""
        return cls()

    def as_array(self) -> np.ndarray:
        """State vector [x1, v1, x2, v2]."""
        return np.array([self.x1, self.v1, self.x2, self.v2], dtype=float)

    @classmethod
    def from_array(cls, t: float, x: np.ndarray) -> "SimulationState":
        x = np.asarray(x, dtype=float).ravel()
        if x.size != 4:
            raise ValueError(f"Expected state vector of size 4, got {x.size}")
        return cls(t=float(t), x1=float(x[0]), v1=float(x[1]), x2=float(x[2]), v2=float(x[3]))

    def is_finite(self) -> bool:
        return bool(np.all(np.isfinite([self.t, self.x1, self.v1, self.x2, self.v2])))

    def to_dict(self) -> Dict[str, float]:
        return dataclasses.asdict(self)
