"""
Exception hierarchy for pymobr.

All exceptions inherit from PyMobrError so callers can catch any
library-specific error. Advisory conditions (low-count sites, empty
sites) are not exceptions; they are reported through the warnings
module and recorded on the returned Result.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Invalid input is rejected before any expensive computation
"""


class PyMobrError(Exception):
    """Base exception for all pymobr errors."""
    pass


class ValidationError(PyMobrError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks, e.g. negative
    abundances or a non-positive number of permutations.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when an abundance matrix is not 2D or when the grouping vector
    does not have one label per site.
    """
    pass

