"""MoB statistics backends."""

from pymobr.mob.backends.cpu import CPUMobBackend

__all__ = ["CPUMobBackend"]
