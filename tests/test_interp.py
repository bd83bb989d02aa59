"""Tests for interpolation primitives."""

import pytest

from noisegraph.interp import cubic_interp, linear_interp, s_curve3, s_curve5


class TestLinearInterp:
    """Tests for linear interpolation."""

    def test_alpha_zero_returns_first(self) -> None:
        """Alpha 0 returns the first value."""
        assert linear_interp(3.0, 7.0, 0.0) == 3.0

    def test_alpha_one_returns_second(self) -> None:
        """Alpha 1 returns the second value."""
        assert linear_interp(3.0, 7.0, 1.0) == 7.0

    def test_midpoint(self) -> None:
        """Alpha 0.5 returns the midpoint."""
        assert linear_interp(0.0, 10.0, 0.5) == 5.0


class TestCubicInterp:
    """Tests for cubic interpolation."""

    def test_midpoint_of_step(self) -> None:
        """Midpoint of a symmetric step is 0.5."""
        assert cubic_interp(0.0, 0.0, 1.0, 1.0, 0.5) == 0.5

    def test_endpoints(self) -> None:
        """Alpha 0 and 1 return the two inner values."""
        assert cubic_interp(-2.0, 1.0, 4.0, 9.0, 0.0) == 1.0
        assert cubic_interp(-2.0, 1.0, 4.0, 9.0, 1.0) == pytest.approx(4.0)

    def test_outer_values_shape_the_curve(self) -> None:
        """Changing the outer values changes the interior, not the ends."""
        flat = cubic_interp(0.0, 0.0, 1.0, 1.0, 0.25)
        steep = cubic_interp(-1.0, 0.0, 1.0, 2.0, 0.25)
        assert flat != steep
        assert cubic_interp(-1.0, 0.0, 1.0, 2.0, 0.0) == 0.0


class TestSCurves:
    """Tests for the smoothing curves."""

    def test_s_curve3_known_values(self) -> None:
        """Cubic s-curve hits its documented values."""
        assert s_curve3(0.0) == 0.0
        assert s_curve3(1.0) == 1.0
        assert s_curve3(0.25) == 0.15625
        assert s_curve3(0.5) == 0.5

    def test_s_curve5_known_values(self) -> None:
        """Quintic s-curve is fixed at 0, 0.5 and 1."""
        assert s_curve5(0.0) == 0.0
        assert s_curve5(1.0) == 1.0
        assert s_curve5(0.5) == pytest.approx(0.5)

    def test_s_curve5_flatter_at_edges(self) -> None:
        """Quintic curve stays closer to 0 near the start than the cubic."""
        assert s_curve5(0.1) < s_curve3(0.1)

    @pytest.mark.parametrize("curve", [s_curve3, s_curve5])
    def test_monotonic(self, curve) -> None:
        """Curves never decrease over [0, 1]."""
        values = [curve(i / 100) for i in range(101)]
        assert all(b >= a - 1e-12 for a, b in zip(values, values[1:]))
