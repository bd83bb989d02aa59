"""Selector modules: choose or mix between two sources using a third."""

from ..exceptions import InvalidParameterError
from ..interp import linear_interp, s_curve3
from .base import Module

DEFAULT_LOWER_BOUND = -1.0
DEFAULT_UPPER_BOUND = 1.0
DEFAULT_EDGE_FALLOFF = 0.0


class Select(Module):
    """Outputs source 0 or source 1 depending on the selector (source 2).

    Source 1 is used while the selector value lies within
    [lower_bound, upper_bound], source 0 otherwise. A positive
    ``edge_falloff`` replaces the hard switch with a cubic blend over
    ``[bound - falloff, bound + falloff]`` at both bounds.
    """

    source_count = 3

    def __init__(self) -> None:
        super().__init__()
        self._lower_bound = DEFAULT_LOWER_BOUND
        self._upper_bound = DEFAULT_UPPER_BOUND
        self._edge_falloff = DEFAULT_EDGE_FALLOFF

    @property
    def lower_bound(self) -> float:
        return self._lower_bound

    @property
    def upper_bound(self) -> float:
        return self._upper_bound

    @property
    def edge_falloff(self) -> float:
        return self._edge_falloff

    @edge_falloff.setter
    def edge_falloff(self, value: float) -> None:
        # Keep the two transition bands from overlapping.
        half_span = (self._upper_bound - self._lower_bound) / 2.0
        self._edge_falloff = half_span if value > half_span else value
        self._touch()

    def set_bounds(self, lower_bound: float, upper_bound: float) -> None:
        """Set the selection range and re-clamp the edge falloff.

        Raises:
            InvalidParameterError: If lower_bound is not below upper_bound.
        """
        if not lower_bound < upper_bound:
            raise InvalidParameterError(
                f"Lower bound {lower_bound} must be less than "
                f"upper bound {upper_bound}"
            )
        self._lower_bound = lower_bound
        self._upper_bound = upper_bound
        self.edge_falloff = self._edge_falloff

    @property
    def selector_module(self) -> Module:
        return self.get_source(2)

    @selector_module.setter
    def selector_module(self, module: Module) -> None:
        self.set_source(2, module)

    def get_value(self, x: float, y: float, z: float) -> float:
        selector = self._sources[2].get_value(x, y, z)
        lower = self._lower_bound
        upper = self._upper_bound
        falloff = self._edge_falloff

        if falloff > 0.0:
            if selector < lower - falloff:
                return self._sources[0].get_value(x, y, z)
            elif selector < lower + falloff:
                low_curve = lower - falloff
                high_curve = lower + falloff
                alpha = s_curve3((selector - low_curve) / (high_curve - low_curve))
                return linear_interp(
                    self._sources[0].get_value(x, y, z),
                    self._sources[1].get_value(x, y, z),
                    alpha,
                )
            elif selector < upper - falloff:
                return self._sources[1].get_value(x, y, z)
            elif selector < upper + falloff:
                low_curve = upper - falloff
                high_curve = upper + falloff
                alpha = s_curve3((selector - low_curve) / (high_curve - low_curve))
                return linear_interp(
                    self._sources[1].get_value(x, y, z),
                    self._sources[0].get_value(x, y, z),
                    alpha,
                )
            return self._sources[0].get_value(x, y, z)

        if selector < lower or selector > upper:
            return self._sources[0].get_value(x, y, z)
        return self._sources[1].get_value(x, y, z)


class Blend(Module):
    """Linear blend of source 0 and source 1, weighted by source 2.

    The control value is used directly as the interpolation alpha: 0
    yields source 0 and 1 yields source 1.
    """

    source_count = 3

    @property
    def control_module(self) -> Module:
        return self.get_source(2)

    @control_module.setter
    def control_module(self, module: Module) -> None:
        self.set_source(2, module)

    def get_value(self, x: float, y: float, z: float) -> float:
        v0 = self._sources[0].get_value(x, y, z)
        v1 = self._sources[1].get_value(x, y, z)
        alpha = self._sources[2].get_value(x, y, z)
        return linear_interp(v0, v1, alpha)
