"""Tests for combiner and cache modules."""

import math

import pytest

from noisegraph.modules import Cache, Const, Power

from conftest import CountingModule


class TestPower:
    """Tests for Power."""

    def _power(self, base: float, exponent: float) -> float:
        module = Power()
        module.set_source(0, Const(base))
        module.set_source(1, Const(exponent))
        return module.get_value(0.0, 0.0, 0.0)

    def test_integer_power(self) -> None:
        """Base raised to exponent."""
        assert self._power(2.0, 3.0) == 8.0

    def test_fractional_power(self) -> None:
        """Fractional exponents on positive bases."""
        assert self._power(0.25, 0.5) == pytest.approx(0.5)

    def test_negative_base_integer_exponent(self) -> None:
        """Negative bases with integral exponents are real."""
        assert self._power(-0.5, 2.0) == pytest.approx(0.25)

    def test_negative_base_fractional_exponent_is_nan(self) -> None:
        """Negative base with a fractional exponent gives NaN, not an error."""
        value = self._power(-0.5, 0.5)
        assert isinstance(value, float)
        assert math.isnan(value)

    def test_source_count(self) -> None:
        """Power takes two sources."""
        assert Power.source_count == 2


class TestCache:
    """Tests for Cache."""

    def test_same_point_evaluates_source_once(self, counting: CountingModule) -> None:
        """A repeated point is served from the cache."""
        module = Cache()
        module.set_source(0, counting)
        assert module.get_value(1.0, 2.0, 3.0) == 0.25
        assert module.get_value(1.0, 2.0, 3.0) == 0.25
        assert len(counting.calls) == 1

    def test_new_point_recomputes(self, counting: CountingModule) -> None:
        """A different point invokes the source again."""
        module = Cache()
        module.set_source(0, counting)
        module.get_value(1.0, 2.0, 3.0)
        module.get_value(1.0, 2.0, 3.5)
        module.get_value(1.0, 2.0, 3.0)
        assert len(counting.calls) == 3

    def test_set_source_invalidates(self, counting: CountingModule) -> None:
        """Re-wiring the source forces recomputation at the same point."""
        module = Cache()
        module.set_source(0, counting)
        module.get_value(1.0, 2.0, 3.0)
        module.set_source(0, counting)
        assert not module.is_cached
        module.get_value(1.0, 2.0, 3.0)
        assert len(counting.calls) == 2

    def test_new_source_value_returned(self) -> None:
        """After re-wiring, the new source's value is returned."""
        module = Cache()
        module.set_source(0, Const(1.0))
        assert module.get_value(0.0, 0.0, 0.0) == 1.0
        module.set_source(0, Const(2.0))
        assert module.get_value(0.0, 0.0, 0.0) == 2.0

    def test_starts_empty(self) -> None:
        """A new cache holds nothing."""
        assert not Cache().is_cached
