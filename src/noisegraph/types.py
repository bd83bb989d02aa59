"""Core enumerations shared by the kernel and the generator modules."""

from enum import IntEnum


class NoiseQuality(IntEnum):
    """Smoothing curve applied to lattice offsets before interpolation."""

    FAST = 0  # identity, visible creases at cell boundaries
    STANDARD = 1  # cubic s-curve, continuous first derivative
    BEST = 2  # quintic s-curve, continuous second derivative


class NoiseMode(IntEnum):
    """Which lattice noise is interpolated by the smoothed kernel."""

    GRADIENT = 0
    VALUE = 1
