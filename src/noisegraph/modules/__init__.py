"""Noise modules: the nodes of a noise module graph."""

from .base import Module
from .combiners import Cache, Power
from .generators import (
    DEFAULT_FREQUENCY,
    DEFAULT_LACUNARITY,
    DEFAULT_OCTAVE_COUNT,
    DEFAULT_PERSISTENCE,
    DEFAULT_QUALITY,
    DEFAULT_SEED,
    MAX_OCTAVE,
    MIN_OCTAVE,
    Billow,
    Const,
    Cylinders,
    Perlin,
    RidgedMulti,
    Spheres,
)
from .modifiers import Exponent, ScaleBias, Terrace
from .selectors import Blend, Select
from .transformers import (
    Displace,
    RotatePoint,
    ScalePoint,
    TranslatePoint,
    Turbulence,
)

__all__ = [
    # Base
    "Module",
    # Generators
    "Perlin",
    "Billow",
    "RidgedMulti",
    "Const",
    "Spheres",
    "Cylinders",
    # Modifiers
    "ScaleBias",
    "Exponent",
    "Terrace",
    # Selectors
    "Select",
    "Blend",
    # Transformers
    "ScalePoint",
    "TranslatePoint",
    "RotatePoint",
    "Displace",
    "Turbulence",
    # Combiners
    "Power",
    "Cache",
    # Defaults
    "DEFAULT_FREQUENCY",
    "DEFAULT_LACUNARITY",
    "DEFAULT_OCTAVE_COUNT",
    "DEFAULT_PERSISTENCE",
    "DEFAULT_QUALITY",
    "DEFAULT_SEED",
    "MIN_OCTAVE",
    "MAX_OCTAVE",
]
