"""
Design class for permutation testing.

PermutationDesign encapsulates all inputs the backend needs to relabel
groups and refit F statistics. Immutable, validated at construction.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymobr.core.exceptions import ValidationError
from pymobr.core.validation import (
    check_array,
    check_1d,
    check_consistent_length,
    check_groups,
    check_int_at_least,
)


@dataclass(frozen=True)
class PermutationDesign:
    """
    Frozen design for a group-label permutation F-test.

    Attributes:
        names: Response names, in test order.
        values: Responses stacked as columns, shape (n, k). NaN = missing.
        levels: Group levels.
        codes: Group code per observation, shape (n,).
        nperm: Number of permutations.
        seed: Random seed for reproducibility.
        chunk_size: Number of permutations evaluated per vectorised batch.
    """
    names: tuple[str, ...]
    values: NDArray[np.floating[Any]]
    levels: tuple[str, ...]
    codes: NDArray[np.intp]
    nperm: int
    seed: int | None
    chunk_size: int

    @classmethod
    def for_ftest(
        cls,
        values: Mapping[str, Any],
        group: Any,
        nperm: int = 999,
        *,
        seed: int | None = None,
        chunk_size: int = 256,
    ) -> PermutationDesign:
        """
        Create a permutation F-test design with validation.

        Args:
            values: {name: 1D response}, all of the same length.
            group: Group labels, one per observation.
            nperm: Number of permutations. Must be >= 1.
            seed: Random seed.
            chunk_size: Permutations per batch. Must be >= 1.

        Returns:
            Validated PermutationDesign.

        Raises:
            ValidationError: If inputs are invalid.
        """
        nperm = check_int_at_least(nperm, 1, "nperm")
        chunk_size = check_int_at_least(chunk_size, 1, "chunk_size")
        if seed is not None:
            seed = check_int_at_least(seed, 0, "seed")

        if not isinstance(values, Mapping) or len(values) == 0:
            raise ValidationError("values: expected a non-empty mapping of name -> response")

        names = tuple(str(name) for name in values)
        columns = []
        for name, response in values.items():
            arr = check_array(response, str(name))
            check_1d(arr, str(name))
            if np.any(np.isinf(arr)):
                raise ValidationError(f"{name}: contains Inf values")
            columns.append(arr)

        check_consistent_length(*columns, names=names)

        n = len(columns[0])
        levels, codes = check_groups(group, n, "group")

        return cls(
            names=names,
            values=np.column_stack(columns).astype(np.float64, copy=True),
            levels=levels,
            codes=codes,
            nperm=nperm,
            seed=seed,
            chunk_size=chunk_size,
        )
