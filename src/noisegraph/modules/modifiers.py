"""Modifier modules: remap the output value of a single source module."""

import bisect

import numpy as np
import structlog

from ..exceptions import InvalidParameterError
from ..interp import linear_interp
from .base import Module

logger = structlog.get_logger()

DEFAULT_SCALE = 1.0
DEFAULT_BIAS = 0.0
DEFAULT_EXPONENT = 1.0


class ScaleBias(Module):
    """Outputs ``source * scale + bias``."""

    source_count = 1

    def __init__(self) -> None:
        super().__init__()
        self.scale = DEFAULT_SCALE
        self.bias = DEFAULT_BIAS

    def get_value(self, x: float, y: float, z: float) -> float:
        return self._sources[0].get_value(x, y, z) * self.scale + self.bias


class Exponent(Module):
    """Applies an exponential curve to the source value.

    The source value is mapped from [-1, 1] to [0, 1], raised to
    ``exponent``, then mapped back to [-1, 1]. Follows IEEE pow semantics:
    0 to a negative exponent gives inf, and overflow gives inf.
    """

    source_count = 1

    def __init__(self) -> None:
        super().__init__()
        self.exponent = DEFAULT_EXPONENT

    def get_value(self, x: float, y: float, z: float) -> float:
        value = self._sources[0].get_value(x, y, z)
        with np.errstate(all="ignore"):
            curved = np.power(abs((value + 1.0) / 2.0), self.exponent, dtype=np.float64)
        return float(curved) * 2.0 - 1.0


class Terrace(Module):
    """Maps the source value onto a terrace-forming curve.

    The curve is defined by a sorted set of unique terrace points. Between
    two neighbouring points the output rises along a quadratic, so the
    result is flat just above each point and steep just below the next.
    Values outside the point range are clamped to the nearest point.
    Evaluating with fewer than two points raises IndexError.
    """

    source_count = 1

    def __init__(self) -> None:
        super().__init__()
        self._points: list[float] = []
        self.invert_terraces = False

    @property
    def terrace_points(self) -> tuple[float, ...]:
        return tuple(self._points)

    @property
    def terrace_point_count(self) -> int:
        return len(self._points)

    def add_terrace_point(self, value: float) -> None:
        """Insert a terrace point, keeping the points sorted.

        Raises:
            InvalidParameterError: If a point with this value exists.
        """
        pos = bisect.bisect_left(self._points, value)
        if pos < len(self._points) and self._points[pos] == value:
            raise InvalidParameterError(f"Duplicate terrace point {value}")
        self._points.insert(pos, value)
        self._touch()

    def clear_terrace_points(self) -> None:
        self._points.clear()
        self._touch()

    def make_terrace_points(self, count: int) -> None:
        """Replace the terrace points with ``count`` points spread evenly
        over [-1, 1].

        Raises:
            InvalidParameterError: If count is less than 2.
        """
        if count < 2:
            raise InvalidParameterError(
                f"At least 2 terrace points required, got {count}"
            )
        self.clear_terrace_points()
        step = 2.0 / (count - 1.0)
        current = -1.0
        for _ in range(count):
            self.add_terrace_point(current)
            current += step
        logger.debug("terrace_points_made", count=count)

    def parameter_errors(self) -> list[str]:
        if len(self._points) < 2:
            return [
                f"Terrace needs at least 2 terrace points, has {len(self._points)}"
            ]
        return []

    def get_value(self, x: float, y: float, z: float) -> float:
        value = self._sources[0].get_value(x, y, z)
        points = self._points
        if len(points) < 2:
            raise IndexError(
                f"Terrace needs at least 2 terrace points, has {len(points)}"
            )
        last = len(points) - 1

        # Index of the first point greater than the source value.
        pos = bisect.bisect_right(points, value)
        index0 = min(max(pos - 1, 0), last)
        index1 = min(max(pos, 0), last)

        if index0 == index1:
            return points[index1]

        value0 = points[index0]
        value1 = points[index1]
        alpha = (value - value0) / (value1 - value0)
        if self.invert_terraces:
            alpha = 1.0 - alpha
            value0, value1 = value1, value0

        alpha *= alpha
        return linear_interp(value0, value1, alpha)
