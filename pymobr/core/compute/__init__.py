"""Timing and numerical tolerance helpers."""

from pymobr.core.compute.timing import Timer
from pymobr.core.compute.tolerances import ToleranceTier, EXACT, LOG_SPACE, MONTE_CARLO

__all__ = [
    "Timer",
    "ToleranceTier",
    "EXACT",
    "LOG_SPACE",
    "MONTE_CARLO",
]
