"""External drive acting on the primary body."""

import math


def drive_force(t: float, amplitude: float, frequency: float) -> float:
    """
    Sinusoidal drive F(t) = amplitude * sin(2*pi*frequency*t), frequency in Hz.

    Defined for every t: if the phase overflows, the result is NaN.
    """
    phase = 2.0 * math.pi * frequency * t
    if not math.isfinite(phase):
        return math.nan
    return amplitude * math.sin(phase)
