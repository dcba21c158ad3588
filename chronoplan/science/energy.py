"""
Synthetic circadian energy curve.

Models subjective alertness over 24 hours as two Gaussian peaks and one
post-lunch dip, all positioned relative to wake time. The peak offsets
depend on chronotype: morning types peak earlier after waking, evening
types later.

    energy(t) = 0.5 * peak1 + 0.7 * peak2 - 0.6 * dip + 0.4

where t is minutes since wake and each term is exp(-(t - offset)^2 / 2σ²).
The result is clamped to [0, 1] and forced to 0 inside the sleep window.
"""

import math
from dataclasses import dataclass
from types import MappingProxyType

from ..circadian_math import MINUTES_PER_DAY, is_asleep, to_minutes
from ..types import Chronotype

# Gaussian width shared by both peaks and the dip
SIGMA_MINUTES = 90

PEAK1_WEIGHT = 0.5
PEAK2_WEIGHT = 0.7
DIP_WEIGHT = 0.6
BASELINE = 0.4

# Mean energy reported for an empty range
DEFAULT_ENERGY = 0.5


@dataclass(frozen=True)
class CurveParameters:
    """Offsets in minutes since wake for the two peaks and the dip."""

    peak1: int
    peak2: int
    dip: int


CHRONOTYPE_CURVES: MappingProxyType[Chronotype, CurveParameters] = MappingProxyType(
    {
        "morning": CurveParameters(peak1=120, peak2=540, dip=420),
        "intermediate": CurveParameters(peak1=180, peak2=600, dip=480),
        "evening": CurveParameters(peak1=240, peak2=720, dip=540),
    }
)


def _gaussian(t: int, center: int) -> float:
    return math.exp(-((t - center) ** 2) / (2 * SIGMA_MINUTES**2))


def energy_at(minutes_since_wake: int, params: CurveParameters) -> float:
    """Clamped energy for a waking minute, ignoring the sleep window."""
    t = minutes_since_wake
    raw = (
        PEAK1_WEIGHT * _gaussian(t, params.peak1)
        + PEAK2_WEIGHT * _gaussian(t, params.peak2)
        - DIP_WEIGHT * _gaussian(t, params.dip)
        + BASELINE
    )
    return max(0.0, min(1.0, raw))


def energy_curve(wake_time: str, sleep_time: str, chronotype: Chronotype) -> list[float]:
    """
    Build the per-minute energy curve for one day.

    Args:
        wake_time: "HH:MM" habitual wake time
        sleep_time: "HH:MM" habitual sleep time
        chronotype: Selects peak and dip offsets

    Returns:
        1440 values in [0, 1], indexed by minute of day
    """
    wake = to_minutes(wake_time)
    sleep = to_minutes(sleep_time)
    params = CHRONOTYPE_CURVES[chronotype]

    curve = []
    for minute in range(MINUTES_PER_DAY):
        if is_asleep(minute, wake, sleep):
            curve.append(0.0)
            continue
        since_wake = (minute - wake + MINUTES_PER_DAY) % MINUTES_PER_DAY
        curve.append(energy_at(since_wake, params))
    return curve


def average_energy(curve: list[float], start: int, end: int) -> float:
    """Mean of the curve over [start, end), indexing modulo one day."""
    if end <= start:
        return DEFAULT_ENERGY
    total = sum(curve[m % MINUTES_PER_DAY] for m in range(start, end))
    return total / (end - start)
