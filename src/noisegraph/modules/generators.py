"""Generator modules: fractal noise and simple analytic fields.

Generators have no source modules. Perlin, Billow and RidgedMulti share
the same octave loop: the input point is scaled by ``frequency``, and for
every octave the coordinates are folded into 32-bit range, sampled with
smoothed gradient noise using ``seed + octave``, then multiplied by
``lacunarity`` for the next octave.
"""

import math

from ..exceptions import InvalidParameterError
from ..noisegen import fold_to_int32_range, smooth_gradient_noise_3d
from ..types import NoiseQuality
from .base import Module

DEFAULT_FREQUENCY = 1.0
DEFAULT_LACUNARITY = 2.0
DEFAULT_OCTAVE_COUNT = 6
DEFAULT_PERSISTENCE = 0.5
DEFAULT_QUALITY = NoiseQuality.STANDARD
DEFAULT_SEED = 0
MIN_OCTAVE = 1
MAX_OCTAVE = 30

# Subtracted from |signal| in the ridged loop; controls ridge sharpness.
RIDGED_OFFSET = 0.8

DEFAULT_CONST_VALUE = 0.0
DEFAULT_SHAPE_FREQUENCY = 1.0


def check_octave_count(octave_count: int) -> int:
    """Validate an octave count.

    Raises:
        InvalidParameterError: If octave_count is not an int in [1, 30].
    """
    if isinstance(octave_count, bool) or not isinstance(octave_count, int):
        raise InvalidParameterError(
            f"Octave count must be an int, got {type(octave_count).__name__}"
        )
    if octave_count < MIN_OCTAVE or octave_count > MAX_OCTAVE:
        raise InvalidParameterError(
            f"Octave count {octave_count} outside [{MIN_OCTAVE}, {MAX_OCTAVE}]"
        )
    return octave_count


class _Fractal(Module):
    """Parameters shared by the fractal generators."""

    source_count = 0

    def __init__(self) -> None:
        super().__init__()
        self.frequency = DEFAULT_FREQUENCY
        self.lacunarity = DEFAULT_LACUNARITY
        self.quality = DEFAULT_QUALITY
        self.seed = DEFAULT_SEED
        self._octave_count = DEFAULT_OCTAVE_COUNT

    @property
    def octave_count(self) -> int:
        return self._octave_count

    @octave_count.setter
    def octave_count(self, value: int) -> None:
        self._octave_count = check_octave_count(value)
        self._touch()

    def _octaves(self, x: float, y: float, z: float):
        """Yield the raw smoothed noise signal of every octave."""
        x *= self.frequency
        y *= self.frequency
        z *= self.frequency
        for octave in range(self._octave_count):
            seed = (self.seed + octave) & 0xFFFFFFFF
            yield smooth_gradient_noise_3d(
                fold_to_int32_range(x),
                fold_to_int32_range(y),
                fold_to_int32_range(z),
                seed,
                self.quality,
            )
            x *= self.lacunarity
            y *= self.lacunarity
            z *= self.lacunarity

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(frequency={self.frequency}, "
            f"octave_count={self._octave_count}, seed={self.seed})"
        )


class Perlin(_Fractal):
    """Fractal sum of gradient noise.

    Each octave is weighted by ``persistence ** octave``. The sum is not
    normalized; values usually fall in [-1, 1] but may exceed it.
    """

    def __init__(self) -> None:
        super().__init__()
        self.persistence = DEFAULT_PERSISTENCE

    def get_value(self, x: float, y: float, z: float) -> float:
        value = 0.0
        amplitude = 1.0
        for signal in self._octaves(x, y, z):
            value += signal * amplitude
            amplitude *= self.persistence
        return value


class Billow(_Fractal):
    """Perlin variant with every octave rectified to ``2|signal| - 1``.

    Produces rounded, lumpy shapes suited to clouds and rocks.
    """

    def __init__(self) -> None:
        super().__init__()
        self.persistence = DEFAULT_PERSISTENCE

    def get_value(self, x: float, y: float, z: float) -> float:
        value = 0.0
        amplitude = 1.0
        for signal in self._octaves(x, y, z):
            value += (2.0 * abs(signal) - 1.0) * amplitude
            amplitude *= self.persistence
        return value


class RidgedMulti(_Fractal):
    """Ridged multifractal noise.

    Each octave's ridge signal is weighted by the clamped signal of the
    previous octave, so sharp ridges carry more high frequency detail
    than valleys. The result is biased by -1 to sit near [-1, 1].
    """

    def get_value(self, x: float, y: float, z: float) -> float:
        value = 0.0
        weight = 1.0
        for raw in self._octaves(x, y, z):
            signal = (RIDGED_OFFSET - abs(raw)) * weight
            value += signal
            weight = min(max(signal, 0.0), 1.0)
        return value - 1.0


class Const(Module):
    """Outputs a constant value everywhere."""

    source_count = 0

    def __init__(self, value: float = DEFAULT_CONST_VALUE) -> None:
        super().__init__()
        self.value = value

    def get_value(self, x: float, y: float, z: float) -> float:
        return self.value

    def __repr__(self) -> str:
        return f"Const(value={self.value})"


def _nearest_shell(distance: float) -> float:
    """Map a distance to 1 on unit shells, -1 halfway between them."""
    inner = distance - math.floor(distance)
    outer = 1.0 - inner
    return 1.0 - (min(inner, outer) * 4.0)


class Spheres(Module):
    """Concentric spheres centred on the origin, one per unit of distance."""

    source_count = 0

    def __init__(self) -> None:
        super().__init__()
        self.frequency = DEFAULT_SHAPE_FREQUENCY

    def get_value(self, x: float, y: float, z: float) -> float:
        x *= self.frequency
        y *= self.frequency
        z *= self.frequency
        return _nearest_shell(math.sqrt(x * x + y * y + z * z))


class Cylinders(Module):
    """Concentric cylinders around the y axis."""

    source_count = 0

    def __init__(self) -> None:
        super().__init__()
        self.frequency = DEFAULT_SHAPE_FREQUENCY

    def get_value(self, x: float, y: float, z: float) -> float:
        x *= self.frequency
        z *= self.frequency
        return _nearest_shell(math.sqrt(x * x + z * z))
