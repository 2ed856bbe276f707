"""
Core infrastructure for pymobr.

Shared abstractions used by every domain subpackage (diversity, anova,
montecarlo, mob).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and numerical tolerances
"""

from pymobr.core.result import Result
from pymobr.core.exceptions import (
    PyMobrError,
    ValidationError,
    DimensionError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyMobrError",
    "ValidationError",
    "DimensionError",
]
