"""
Reference configuration: default parameters, step size, history/sampling policy
and the input ranges a front end should enforce before calling the integrator.
"""

from typing import Dict, List, Tuple

from tmdsim.core.state import SystemParameters

DEFAULT_PARAMETERS = SystemParameters(
    m1=50.0,    # primary (building) mass, kg
    k1=2000.0,  # primary stiffness, N/m
    b1=10.0,    # primary damping, N*s/m
    m2=5.0,     # tuned mass, ~10% of m1
    k2=200.0,   # sqrt(k2/m2) ~= sqrt(k1/m1)
    b2=15.0,    # TMD damping, N*s/m
    force_amplitude=50.0,  # N
    force_frequency=1.0,   # Hz, near resonance sqrt(2000/50)/(2*pi) ~= 1.006
)

PHYSICS_DT = 0.01
HISTORY_LENGTH = 200
SAMPLE_EVERY = 5

# (min, max) per field, inclusive
PARAMETER_RANGES: Dict[str, Tuple[float, float]] = {
    "m1": (10.0, 200.0),
    "k1": (500.0, 5000.0),
    "b1": (0.0, 50.0),
    "m2": (1.0, 50.0),
    "k2": (10.0, 1000.0),
    "b2": (0.0, 50.0),
    "force_amplitude": (0.0, 200.0),
    "force_frequency": (0.1, 5.0),
}


def out_of_range(params: SystemParameters) -> List[str]:
    """Names of the fields lying outside PARAMETER_RANGES."""
    bad = []
    for name, (lo, hi) in PARAMETER_RANGES.items():
        value = getattr(params, name)
        if not lo <= value <= hi:
            bad.append(name)
    return bad


def clamp_parameters(params: SystemParameters) -> SystemParameters:
    """Copy of params with every field clamped into PARAMETER_RANGES."""
    changes = {
        name: min(max(getattr(params, name), lo), hi)
        for name, (lo, hi) in PARAMETER_RANGES.items()
    }
    return params.replace(**changes)
