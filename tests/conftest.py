"""Shared test fixtures for noise module tests."""

import pytest

from noisegraph.modules import Const, Module


class CountingModule(Module):
    """Stub source that returns a fixed value and counts evaluations."""

    source_count = 0

    def __init__(self, value: float = 0.0) -> None:
        super().__init__()
        self.value = value
        self.calls: list[tuple[float, float, float]] = []

    def get_value(self, x: float, y: float, z: float) -> float:
        self.calls.append((x, y, z))
        return self.value


class PointModule(Module):
    """Stub source that returns one coordinate of the point it is given."""

    source_count = 0

    def __init__(self, axis: int = 0) -> None:
        super().__init__()
        self.axis = axis

    def get_value(self, x: float, y: float, z: float) -> float:
        return (x, y, z)[self.axis]


@pytest.fixture
def counting() -> CountingModule:
    """Counting stub returning 0.25."""
    return CountingModule(0.25)


@pytest.fixture
def low() -> Const:
    """Constant source returning -1."""
    return Const(-1.0)


@pytest.fixture
def high() -> Const:
    """Constant source returning 1."""
    return Const(1.0)


@pytest.fixture
def sample_graph_toml() -> str:
    """Small terrain graph as TOML string."""
    return """
root = "terrain"

[nodes.base]
type = "perlin"
frequency = 2.0
octave_count = 4
seed = 7

[nodes.mountains]
type = "ridged_multi"
octave_count = 3

[nodes.selector]
type = "billow"
octave_count = 2

[nodes.terrain]
type = "select"
sources = ["base", "mountains", "selector"]
lower_bound = 0.0
upper_bound = 1000.0
edge_falloff = 0.125
"""
