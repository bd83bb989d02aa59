"""Coherent noise generation and composable noise module graphs.

The kernel (``noisegraph.noisegen``) turns a 3D point and a seed into a
deterministic, smoothly varying value. Modules built on top of it are
wired into a graph and evaluated from a root with ``get_value``.
"""

from .config import GraphConfig, build_graph, load_graph_config
from .exceptions import (
    ErrorKind,
    GraphValidationError,
    InvalidParameterError,
    MissingSourceModuleError,
    NoiseError,
)
from .fields import normalize, sample_plane
from .graph import ModuleGraph, ValidationResult, validate_graph
from .interp import cubic_interp, linear_interp, s_curve3, s_curve5
from .modules import (
    Billow,
    Blend,
    Cache,
    Const,
    Cylinders,
    Displace,
    Exponent,
    Module,
    Perlin,
    Power,
    RidgedMulti,
    RotatePoint,
    ScaleBias,
    ScalePoint,
    Select,
    Spheres,
    Terrace,
    TranslatePoint,
    Turbulence,
)
from .noisegen import (
    fold_to_int32_range,
    gradient_noise_3d,
    int_hash_3d,
    smooth_gradient_noise_3d,
    smooth_value_noise_3d,
    smoothed_noise_3d,
    value_noise_3d,
)
from .types import NoiseMode, NoiseQuality

__all__ = [
    # Types
    "NoiseQuality",
    "NoiseMode",
    # Interpolation
    "linear_interp",
    "cubic_interp",
    "s_curve3",
    "s_curve5",
    # Kernel
    "int_hash_3d",
    "gradient_noise_3d",
    "value_noise_3d",
    "smooth_gradient_noise_3d",
    "smooth_value_noise_3d",
    "smoothed_noise_3d",
    "fold_to_int32_range",
    # Modules
    "Module",
    "Perlin",
    "Billow",
    "RidgedMulti",
    "Const",
    "Spheres",
    "Cylinders",
    "ScaleBias",
    "Exponent",
    "Terrace",
    "Select",
    "Blend",
    "ScalePoint",
    "TranslatePoint",
    "RotatePoint",
    "Displace",
    "Turbulence",
    "Power",
    "Cache",
    # Graph
    "ModuleGraph",
    "ValidationResult",
    "validate_graph",
    # Config
    "GraphConfig",
    "build_graph",
    "load_graph_config",
    # Fields
    "sample_plane",
    "normalize",
    # Exceptions
    "ErrorKind",
    "NoiseError",
    "InvalidParameterError",
    "MissingSourceModuleError",
    "GraphValidationError",
]
