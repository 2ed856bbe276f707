"""
MoB design object.

Validates the community matrix, grouping vector and run settings once, so
the backend can assume clean inputs. All invalid-input errors surface here,
before any metric or permutation is computed.
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
    check_2d,
    check_finite,
    check_non_negative,
    check_min_samples,
    check_groups,
    check_int_at_least,
    check_number_at_least,
)


@dataclass(frozen=True)
class MobDesign:
    """
    Validated data container for sample/group biodiversity statistics.

    Attributes:
        comm: Private copy of the sites x species abundance matrix.
        levels: Group levels in output order.
        codes: Group code per site.
        n_min: Minimum individuals for rarefaction.
        nperm: Number of permutations.
        seed: Random seed for the permutation step.
        chunk_size: Permutations per vectorised batch.
    """
    comm: NDArray[np.floating[Any]]
    levels: tuple[str, ...]
    codes: NDArray[np.intp]
    n_min: float
    nperm: int
    seed: int | None
    chunk_size: int

    @property
    def n_sites(self) -> int:
        return self.comm.shape[0]

    @property
    def n_species(self) -> int:
        return self.comm.shape[1]

    @classmethod
    def for_stats(
        cls,
        comm: Any,
        group: Any,
        *,
        env: Mapping[str, Any] | None = None,
        n_min: float = 10,
        nperm: int = 1000,
        seed: int | None = None,
        chunk_size: int = 256,
    ) -> MobDesign:
        """
        Create a design with validation.

        Args:
            comm: Sites x species abundance matrix (array-like or DataFrame).
            group: Group label per site, or the name of a column of ``env``.
            env: Optional site attribute table (mapping or DataFrame).
            n_min: Minimum number of individuals for rarefied richness.
            nperm: Number of permutations (>= 1).
            seed: Random seed for the permutation step.
            chunk_size: Permutations evaluated per batch.

        Returns:
            Validated MobDesign.

        Raises:
            ValidationError: If any input is invalid.
        """
        nperm = check_int_at_least(nperm, 1, "nperm")
        chunk_size = check_int_at_least(chunk_size, 1, "chunk_size")
        n_min = check_number_at_least(n_min, 0, "n_min")
        if seed is not None:
            seed = check_int_at_least(seed, 0, "seed")

        arr = check_array(comm, "comm")
        check_2d(arr, "comm")
        check_min_samples(arr, 1, "comm")
        check_finite(arr, "comm")
        check_non_negative(arr, "comm")

        if env is not None:
            if not isinstance(group, str):
                raise ValidationError(
                    f"group: must be a column name of env, got {type(group).__name__}"
                )
            try:
                group = env[group]
            except KeyError as e:
                raise ValidationError(f"env: has no column {group!r}") from e

        levels, codes = check_groups(group, arr.shape[0], "group")

        return cls(
            comm=arr.copy(),
            levels=levels,
            codes=codes,
            n_min=n_min,
            nperm=nperm,
            seed=seed,
            chunk_size=chunk_size,
        )
