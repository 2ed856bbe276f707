"""
ANOVA design object.

Wraps validated data and metadata for one-way ANOVA.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymobr.core.validation import (
    check_array,
    check_1d,
    check_groups,
)
from pymobr.core.exceptions import ValidationError


@dataclass(frozen=True)
class AnovaDesign:
    """
    Validated data container for one-way ANOVA.

    Created via for_oneway(), not directly. Observations with a missing
    response are dropped here, so y and codes hold complete cases only.
    """
    y: NDArray[np.floating[Any]]
    codes: NDArray[np.intp]
    levels: tuple[str, ...]
    n: int
    n_missing: int

    @staticmethod
    def for_oneway(
        y: Any,
        group: Any,
    ) -> 'AnovaDesign':
        """
        Create design for one-way ANOVA.

        Args:
            y: Response variable (1D numeric). NaN marks a missing value.
            group: Group labels (1D, same length as y)

        Returns:
            AnovaDesign

        Raises:
            ValidationError: If y contains Inf, or fewer than 2 groups have
                complete observations, or there are no residual degrees
                of freedom
        """
        y_arr = check_array(y, "y")
        check_1d(y_arr, "y")
        if np.any(np.isinf(y_arr)):
            raise ValidationError("y: contains Inf values")

        all_levels, all_codes = check_groups(group, len(y_arr), "group")

        keep = ~np.isnan(y_arr)
        y_kept = y_arr[keep].copy()
        codes_kept = all_codes[keep]

        used = sorted(set(codes_kept.tolist()))
        levels = tuple(all_levels[c] for c in used)
        remap = {old: new for new, old in enumerate(used)}
        codes = np.array([remap[c] for c in codes_kept.tolist()], dtype=np.intp)

        if len(levels) < 2:
            raise ValidationError(
                f"group: need at least 2 groups with observed y, got {len(levels)}"
            )
        if len(y_kept) - len(levels) < 1:
            raise ValidationError(
                f"y: {len(y_kept)} complete observations leave no residual "
                f"degrees of freedom for {len(levels)} groups"
            )

        return AnovaDesign(
            y=y_kept,
            codes=codes,
            levels=levels,
            n=len(y_kept),
            n_missing=int(np.sum(~keep)),
        )
