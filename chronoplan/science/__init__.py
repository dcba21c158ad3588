"""
Circadian Science Layer.

Pure energy modelling with no knowledge of commitments or placement.

Modules:
- energy: Chronotype-dependent synthetic energy curve
"""

from .energy import CHRONOTYPE_CURVES, CurveParameters, average_energy, energy_curve

__all__ = [
    "CHRONOTYPE_CURVES",
    "CurveParameters",
    "average_energy",
    "energy_curve",
]
