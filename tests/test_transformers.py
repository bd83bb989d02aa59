"""Tests for transformer modules."""

import pytest

from noisegraph.exceptions import InvalidParameterError, MissingSourceModuleError
from noisegraph.modules import (
    Const,
    Displace,
    Perlin,
    RotatePoint,
    ScalePoint,
    TranslatePoint,
    Turbulence,
)

from conftest import CountingModule, PointModule


class TestScalePoint:
    """Tests for ScalePoint."""

    def test_defaults(self) -> None:
        """Default scale is 1 on every axis."""
        module = ScalePoint()
        assert (module.x_scale, module.y_scale, module.z_scale) == (1.0, 1.0, 1.0)

    def test_scales_point(self) -> None:
        """The source sees the scaled point."""
        source = CountingModule()
        module = ScalePoint()
        module.set_source(0, source)
        module.set_scale(2.0, 3.0, -1.0)
        module.get_value(1.0, 2.0, 3.0)
        assert source.calls == [(2.0, 6.0, -3.0)]


class TestTranslatePoint:
    """Tests for TranslatePoint."""

    def test_defaults(self) -> None:
        """Default translation is 0 on every axis."""
        module = TranslatePoint()
        assert (module.x_translation, module.y_translation, module.z_translation) == (
            0.0,
            0.0,
            0.0,
        )

    def test_translates_point(self) -> None:
        """The source sees the translated point."""
        source = CountingModule()
        module = TranslatePoint()
        module.set_source(0, source)
        module.set_translation(1.0, -2.0, 0.5)
        module.get_value(1.0, 2.0, 3.0)
        assert source.calls == [(2.0, 0.0, 3.5)]


class TestRotatePoint:
    """Tests for RotatePoint."""

    def test_zero_angles_identity(self) -> None:
        """No rotation passes the point through."""
        source = CountingModule()
        module = RotatePoint()
        module.set_source(0, source)
        module.get_value(1.0, 2.0, 3.0)
        assert source.calls == [(1.0, 2.0, 3.0)]

    def test_z_rotation_quarter_turn(self) -> None:
        """A 90 degree z rotation maps (x, y) to (y, -x)."""
        module = RotatePoint()
        module.z_angle = 90.0
        xs = PointModule(0)
        ys = PointModule(1)
        module.set_source(0, xs)
        assert module.get_value(1.0, 2.0, 3.0) == pytest.approx(2.0)
        module.set_source(0, ys)
        assert module.get_value(1.0, 2.0, 3.0) == pytest.approx(-1.0)

    def test_angle_setters_rebuild_matrix(self) -> None:
        """Setting one angle keeps the others and updates the matrix."""
        module = RotatePoint()
        module.set_angles(10.0, 20.0, 30.0)
        before = module.matrix
        module.y_angle = 45.0
        assert (module.x_angle, module.y_angle, module.z_angle) == (10.0, 45.0, 30.0)
        assert module.matrix != before

    def test_rotation_preserves_length(self) -> None:
        """Rotation does not change the distance from the origin."""
        module = RotatePoint()
        module.set_angles(33.0, -71.0, 12.5)
        (a, b, c), (d, e, f), (g, h, i) = module.matrix
        x, y, z = 1.0, -2.0, 0.5
        rx = a * x + b * y + c * z
        ry = d * x + e * y + f * z
        rz = g * x + h * y + i * z
        assert rx * rx + ry * ry + rz * rz == pytest.approx(x * x + y * y + z * z)


class TestDisplace:
    """Tests for Displace."""

    def test_displaces_each_axis(self) -> None:
        """Displacement sources are added to their own axis."""
        source = CountingModule()
        module = Displace()
        module.set_source(0, source)
        module.set_displace_modules(Const(1.0), Const(-2.0), Const(0.5))
        module.get_value(1.0, 1.0, 1.0)
        assert source.calls == [(2.0, -1.0, 1.5)]

    def test_displacement_sampled_at_original_point(self) -> None:
        """Displacement modules see the undisplaced point."""
        x_disp = CountingModule(10.0)
        y_disp = CountingModule(0.0)
        z_disp = CountingModule(0.0)
        module = Displace()
        module.set_source(0, Const(0.0))
        module.x_displace_module = x_disp
        module.y_displace_module = y_disp
        module.z_displace_module = z_disp
        module.get_value(0.1, 0.2, 0.3)
        assert x_disp.calls == y_disp.calls == z_disp.calls == [(0.1, 0.2, 0.3)]

    def test_accessors(self) -> None:
        """Named accessors map onto slots 1-3."""
        module = Displace()
        x_disp = Const(1.0)
        module.x_displace_module = x_disp
        assert module.get_source(1) is x_disp
        with pytest.raises(MissingSourceModuleError):
            module.y_displace_module
        with pytest.raises(MissingSourceModuleError):
            module.z_displace_module


class TestTurbulence:
    """Tests for Turbulence."""

    def test_defaults(self) -> None:
        """Defaults match the documented table."""
        module = Turbulence()
        assert module.frequency == 1.0
        assert module.power == 1.0
        assert module.roughness == 3
        assert module.seed == 0
        assert module.source_count == 1

    def test_zero_power_is_identity(self) -> None:
        """With power 0 the source sees the original point."""
        source = CountingModule()
        module = Turbulence()
        module.set_source(0, source)
        module.power = 0.0
        module.get_value(0.3, 0.4, 0.5)
        assert source.calls == [(0.3, 0.4, 0.5)]

    def test_displacement_matches_internal_perlins(self) -> None:
        """Each axis is displaced by a Perlin seeded seed + axis."""
        source = CountingModule()
        module = Turbulence()
        module.set_source(0, source)
        module.seed = 5
        module.frequency = 2.0
        module.roughness = 2
        module.power = 0.25

        expected = []
        for offset, coord in enumerate((0.3, 0.4, 0.5)):
            perlin = Perlin()
            perlin.seed = 5 + offset
            perlin.frequency = 2.0
            perlin.octave_count = 2
            expected.append(coord + perlin.get_value(0.3, 0.4, 0.5) * 0.25)

        module.get_value(0.3, 0.4, 0.5)
        assert source.calls == [tuple(expected)]

    def test_roughness_validated(self) -> None:
        """Roughness is an octave count and shares its range."""
        module = Turbulence()
        with pytest.raises(InvalidParameterError):
            module.roughness = 0
        with pytest.raises(InvalidParameterError):
            module.roughness = 31
        assert module.roughness == 3

    def test_internal_modules_not_sources(self) -> None:
        """The displacement generators are not exposed as source slots."""
        module = Turbulence()
        assert module.sources == (None,)
