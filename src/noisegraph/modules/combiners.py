"""Combiner modules and the single-point cache."""

import math

import numpy as np

from .base import Module


class Power(Module):
    """Raises source 0 to the power of source 1.

    Follows IEEE pow semantics: a negative base with a fractional
    exponent yields NaN.
    """

    source_count = 2

    def get_value(self, x: float, y: float, z: float) -> float:
        base = self._sources[0].get_value(x, y, z)
        exponent = self._sources[1].get_value(x, y, z)
        with np.errstate(all="ignore"):
            return float(np.power(base, exponent, dtype=np.float64))


class Cache(Module):
    """Caches the last value computed by its source.

    Re-evaluating at exactly the same point returns the stored value
    without touching the source. This is useful when one module feeds
    several others in the same graph.

    This is the only module with state that changes during evaluation, so
    a graph containing a Cache must not be evaluated from several threads
    at once without external locking.
    """

    source_count = 1

    def __init__(self) -> None:
        super().__init__()
        self._is_cached = False
        self._cached_value = math.nan
        self._cached_point = (0.0, 0.0, 0.0)

    @property
    def is_cached(self) -> bool:
        return self._is_cached

    def set_source(self, index: int, source: Module) -> None:
        super().set_source(index, source)
        self._is_cached = False

    def get_value(self, x: float, y: float, z: float) -> float:
        point = (x, y, z)
        if not (self._is_cached and point == self._cached_point):
            self._cached_value = self._sources[0].get_value(x, y, z)
            self._cached_point = point
            self._is_cached = True
        return self._cached_value
