"""Tests for selector modules."""

import pytest

from noisegraph.exceptions import InvalidParameterError, MissingSourceModuleError
from noisegraph.interp import s_curve3
from noisegraph.modules import Blend, Const, Select


def _select(selector: float, lower: float, upper: float, falloff: float = 0.0) -> float:
    module = Select()
    module.set_source(0, Const(-1.0))
    module.set_source(1, Const(1.0))
    module.selector_module = Const(selector)
    module.set_bounds(lower, upper)
    module.edge_falloff = falloff
    return module.get_value(0.0, 0.0, 0.0)


class TestSelectParameters:
    """Tests for Select bounds and falloff."""

    def test_defaults(self) -> None:
        """Defaults match the documented table."""
        module = Select()
        assert module.lower_bound == -1.0
        assert module.upper_bound == 1.0
        assert module.edge_falloff == 0.0
        assert module.source_count == 3

    @pytest.mark.parametrize("lower,upper", [(0.5, 0.5), (1.0, -1.0)])
    def test_non_increasing_bounds_rejected(self, lower: float, upper: float) -> None:
        """Lower bound must be strictly below upper bound."""
        module = Select()
        with pytest.raises(InvalidParameterError):
            module.set_bounds(lower, upper)
        assert (module.lower_bound, module.upper_bound) == (-1.0, 1.0)

    def test_falloff_capped_to_half_span(self) -> None:
        """Falloff is limited so the two bands cannot overlap."""
        module = Select()
        module.set_bounds(0.0, 1.0)
        module.edge_falloff = 2.0
        assert module.edge_falloff == 0.5

    def test_set_bounds_recaps_falloff(self) -> None:
        """Narrowing the bounds shrinks an existing falloff."""
        module = Select()
        module.edge_falloff = 0.8
        module.set_bounds(0.0, 0.5)
        assert module.edge_falloff == 0.25

    def test_selector_module_missing(self) -> None:
        """Reading an unwired selector raises."""
        with pytest.raises(MissingSourceModuleError):
            Select().selector_module


class TestSelectValue:
    """Tests for Select output."""

    def test_outside_bounds_returns_source0(self) -> None:
        """Selector above the range picks source 0."""
        assert _select(0.9, -0.5, 0.5) == -1.0

    def test_inside_bounds_returns_source1(self) -> None:
        """Selector within the range picks source 1."""
        assert _select(0.0, -0.5, 0.5) == 1.0

    def test_bounds_are_inclusive(self) -> None:
        """Selector exactly on a bound picks source 1."""
        assert _select(-0.5, -0.5, 0.5) == 1.0
        assert _select(0.5, -0.5, 0.5) == 1.0

    @pytest.mark.parametrize(
        "selector,expected",
        [(-2.0, -1.0), (-0.8, -1.0), (0.0, 1.0), (0.8, -1.0), (2.0, -1.0)],
    )
    def test_falloff_zones_outside_bands(self, selector: float, expected: float) -> None:
        """Outside the transition bands the hard choice is kept."""
        assert _select(selector, -0.5, 0.5, falloff=0.25) == expected

    def test_lower_band_blends(self) -> None:
        """The lower band blends source 0 into source 1 along an s-curve."""
        alpha = s_curve3((-0.4 - (-0.75)) / 0.5)
        expected = (1 - alpha) * -1.0 + alpha * 1.0
        assert _select(-0.4, -0.5, 0.5, falloff=0.25) == pytest.approx(expected)

    def test_upper_band_blends_back(self) -> None:
        """The upper band blends source 1 back into source 0."""
        alpha = s_curve3((0.6 - 0.25) / 0.5)
        expected = (1 - alpha) * 1.0 + alpha * -1.0
        assert _select(0.6, -0.5, 0.5, falloff=0.25) == pytest.approx(expected)

    def test_band_centres_are_midpoints(self) -> None:
        """On a bound with falloff the output is halfway between sources."""
        assert _select(-0.5, -0.5, 0.5, falloff=0.25) == pytest.approx(0.0)
        assert _select(0.5, -0.5, 0.5, falloff=0.25) == pytest.approx(0.0)


class TestBlend:
    """Tests for Blend."""

    def _blend(self, alpha: float) -> float:
        module = Blend()
        module.set_source(0, Const(2.0))
        module.set_source(1, Const(6.0))
        module.control_module = Const(alpha)
        return module.get_value(0.0, 0.0, 0.0)

    def test_control_zero_returns_source0(self) -> None:
        """Control value 0 gives source 0."""
        assert self._blend(0.0) == 2.0

    def test_control_one_returns_source1(self) -> None:
        """Control value 1 gives source 1."""
        assert self._blend(1.0) == 6.0

    def test_control_half(self) -> None:
        """Control value 0.5 gives the midpoint."""
        assert self._blend(0.5) == 4.0

    def test_control_module_accessor(self) -> None:
        """The control module is source slot 2."""
        module = Blend()
        control = Const(0.1)
        module.control_module = control
        assert module.get_source(2) is control
        assert module.control_module is control
