"""Permutation test backends."""

from pymobr.montecarlo.backends.cpu import CPUPermutationBackend, empirical_p_values

__all__ = ["CPUPermutationBackend", "empirical_p_values"]
