"""Transformer modules: move the input point before sampling a source."""

import math

from .base import Module
from .generators import DEFAULT_SEED, Perlin

DEFAULT_SCALE_POINT = 1.0
DEFAULT_TRANSLATION = 0.0
DEFAULT_ANGLE = 0.0

DEFAULT_TURBULENCE_FREQUENCY = 1.0
DEFAULT_TURBULENCE_POWER = 1.0
DEFAULT_TURBULENCE_ROUGHNESS = 3
DEFAULT_TURBULENCE_SEED = DEFAULT_SEED


class ScalePoint(Module):
    """Scales each input coordinate before sampling the source."""

    source_count = 1

    def __init__(self) -> None:
        super().__init__()
        self.x_scale = DEFAULT_SCALE_POINT
        self.y_scale = DEFAULT_SCALE_POINT
        self.z_scale = DEFAULT_SCALE_POINT

    def set_scale(self, x_scale: float, y_scale: float, z_scale: float) -> None:
        self.x_scale = x_scale
        self.y_scale = y_scale
        self.z_scale = z_scale

    def get_value(self, x: float, y: float, z: float) -> float:
        return self._sources[0].get_value(
            x * self.x_scale, y * self.y_scale, z * self.z_scale
        )


class TranslatePoint(Module):
    """Offsets each input coordinate before sampling the source."""

    source_count = 1

    def __init__(self) -> None:
        super().__init__()
        self.x_translation = DEFAULT_TRANSLATION
        self.y_translation = DEFAULT_TRANSLATION
        self.z_translation = DEFAULT_TRANSLATION

    def set_translation(
        self, x_translation: float, y_translation: float, z_translation: float
    ) -> None:
        self.x_translation = x_translation
        self.y_translation = y_translation
        self.z_translation = z_translation

    def get_value(self, x: float, y: float, z: float) -> float:
        return self._sources[0].get_value(
            x + self.x_translation, y + self.y_translation, z + self.z_translation
        )


class RotatePoint(Module):
    """Rotates the input point around the origin before sampling the source.

    Angles are in degrees. The rotation matrix is rebuilt whenever an
    angle changes, not on every evaluation.
    """

    source_count = 1

    def __init__(self) -> None:
        super().__init__()
        self.set_angles(DEFAULT_ANGLE, DEFAULT_ANGLE, DEFAULT_ANGLE)

    @property
    def x_angle(self) -> float:
        return self._x_angle

    @x_angle.setter
    def x_angle(self, value: float) -> None:
        self.set_angles(value, self._y_angle, self._z_angle)

    @property
    def y_angle(self) -> float:
        return self._y_angle

    @y_angle.setter
    def y_angle(self, value: float) -> None:
        self.set_angles(self._x_angle, value, self._z_angle)

    @property
    def z_angle(self) -> float:
        return self._z_angle

    @z_angle.setter
    def z_angle(self, value: float) -> None:
        self.set_angles(self._x_angle, self._y_angle, value)

    @property
    def matrix(self) -> tuple[tuple[float, float, float], ...]:
        """Row-major rotation matrix applied to (x, y, z)."""
        return self._matrix

    def set_angles(self, x_angle: float, y_angle: float, z_angle: float) -> None:
        x_cos = math.cos(math.radians(x_angle))
        y_cos = math.cos(math.radians(y_angle))
        z_cos = math.cos(math.radians(z_angle))
        x_sin = math.sin(math.radians(x_angle))
        y_sin = math.sin(math.radians(y_angle))
        z_sin = math.sin(math.radians(z_angle))

        self._matrix = (
            (
                y_sin * x_sin * z_sin + y_cos * z_cos,
                x_cos * z_sin,
                y_sin * z_cos - y_cos * x_sin * z_sin,
            ),
            (
                y_sin * x_sin * z_cos - y_cos * z_sin,
                x_cos * z_cos,
                -y_cos * x_sin * z_cos - y_sin * z_sin,
            ),
            (
                -y_sin * x_cos,
                x_sin,
                y_cos * x_cos,
            ),
        )
        self._x_angle = x_angle
        self._y_angle = y_angle
        self._z_angle = z_angle

    def get_value(self, x: float, y: float, z: float) -> float:
        (m11, m12, m13), (m21, m22, m23), (m31, m32, m33) = self._matrix
        return self._sources[0].get_value(
            m11 * x + m12 * y + m13 * z,
            m21 * x + m22 * y + m23 * z,
            m31 * x + m32 * y + m33 * z,
        )


class Displace(Module):
    """Offsets the input point by the outputs of three displacement modules.

    Source 0 supplies the output value. Sources 1, 2 and 3 are sampled at
    the original point and added to x, y and z respectively.
    """

    source_count = 4

    @property
    def x_displace_module(self) -> Module:
        return self.get_source(1)

    @x_displace_module.setter
    def x_displace_module(self, module: Module) -> None:
        self.set_source(1, module)

    @property
    def y_displace_module(self) -> Module:
        return self.get_source(2)

    @y_displace_module.setter
    def y_displace_module(self, module: Module) -> None:
        self.set_source(2, module)

    @property
    def z_displace_module(self) -> Module:
        return self.get_source(3)

    @z_displace_module.setter
    def z_displace_module(self, module: Module) -> None:
        self.set_source(3, module)

    def set_displace_modules(
        self, x_module: Module, y_module: Module, z_module: Module
    ) -> None:
        self.set_source(1, x_module)
        self.set_source(2, y_module)
        self.set_source(3, z_module)

    def get_value(self, x: float, y: float, z: float) -> float:
        dx = x + self._sources[1].get_value(x, y, z)
        dy = y + self._sources[2].get_value(x, y, z)
        dz = z + self._sources[3].get_value(x, y, z)
        return self._sources[0].get_value(dx, dy, dz)


class Turbulence(Module):
    """Randomly displaces the input point using three internal Perlin modules.

    The internal modules share ``frequency`` and ``roughness`` (their
    octave count) and are seeded with ``seed``, ``seed + 1`` and
    ``seed + 2``. Each displacement is scaled by ``power``.
    """

    source_count = 1

    def __init__(self) -> None:
        super().__init__()
        self._x_distort = Perlin()
        self._y_distort = Perlin()
        self._z_distort = Perlin()
        self.power = DEFAULT_TURBULENCE_POWER
        self.frequency = DEFAULT_TURBULENCE_FREQUENCY
        self.roughness = DEFAULT_TURBULENCE_ROUGHNESS
        self.seed = DEFAULT_TURBULENCE_SEED

    @property
    def _distort_modules(self) -> tuple[Perlin, Perlin, Perlin]:
        return (self._x_distort, self._y_distort, self._z_distort)

    @property
    def frequency(self) -> float:
        return self._x_distort.frequency

    @frequency.setter
    def frequency(self, value: float) -> None:
        for module in self._distort_modules:
            module.frequency = value

    @property
    def roughness(self) -> int:
        return self._x_distort.octave_count

    @roughness.setter
    def roughness(self, value: int) -> None:
        for module in self._distort_modules:
            module.octave_count = value

    @property
    def seed(self) -> int:
        return self._x_distort.seed

    @seed.setter
    def seed(self, value: int) -> None:
        for offset, module in enumerate(self._distort_modules):
            module.seed = value + offset

    def get_value(self, x: float, y: float, z: float) -> float:
        power = self.power
        dx = x + self._x_distort.get_value(x, y, z) * power
        dy = y + self._y_distort.get_value(x, y, z) * power
        dz = z + self._z_distort.get_value(x, y, z) * power
        return self._sources[0].get_value(dx, dy, dz)
