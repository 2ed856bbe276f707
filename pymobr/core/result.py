"""
Generic result container for all pymobr computations.

The Result class is the envelope every domain result is stored in. Domain
payloads (MobParams, PermutationParams, AnovaParams) go in ``params``;
diagnostics and timings travel alongside them.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (effort, n_min, seed)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) so a returned bundle cannot be edited
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (metric tables, F statistics, ...)
        info: Structured metadata (n_min, nperm, rarefaction effort)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=MobParams(...),
        ...     info={'n_min': 10, 'nperm': 999},
        ...     timing={'total_seconds': 0.2},
        ...     backend_name='cpu_mob',
        ...     warnings=('There are 2 plots with less than 10 individuals...',),
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
