"""Module graph configuration models and TOML loading.

A graph is described as a set of named nodes, each with a ``type``, its
parameters and the names of its source nodes::

    root = "terrain"

    [nodes.base]
    type = "perlin"
    frequency = 2.0

    [nodes.terrain]
    type = "scale_bias"
    sources = ["base"]
    scale = 0.5
"""

import tomllib
from pathlib import Path
from typing import Annotated, Literal, Union

import structlog
from pydantic import BaseModel, Field

from .exceptions import MissingSourceModuleError
from .graph import ModuleGraph
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
from .modules import generators, modifiers, selectors, transformers
from .types import NoiseQuality

logger = structlog.get_logger()


class NodeConfig(BaseModel):
    """Fields shared by every node."""

    sources: list[str] = Field(
        default_factory=list, description="Names of source nodes, by slot"
    )


class _FractalConfig(NodeConfig):
    frequency: float = Field(
        default=generators.DEFAULT_FREQUENCY, description="Frequency of the first octave"
    )
    lacunarity: float = Field(
        default=generators.DEFAULT_LACUNARITY, description="Frequency multiplier per octave"
    )
    octave_count: int = Field(
        default=generators.DEFAULT_OCTAVE_COUNT,
        ge=generators.MIN_OCTAVE,
        le=generators.MAX_OCTAVE,
        description="Number of octaves",
    )
    quality: NoiseQuality = Field(
        default=generators.DEFAULT_QUALITY, description="Smoothing curve quality"
    )
    seed: int = Field(default=generators.DEFAULT_SEED, description="Noise seed")


class PerlinConfig(_FractalConfig):
    type: Literal["perlin"] = "perlin"
    persistence: float = Field(
        default=generators.DEFAULT_PERSISTENCE, description="Amplitude multiplier per octave"
    )


class BillowConfig(_FractalConfig):
    type: Literal["billow"] = "billow"
    persistence: float = Field(
        default=generators.DEFAULT_PERSISTENCE, description="Amplitude multiplier per octave"
    )


class RidgedMultiConfig(_FractalConfig):
    type: Literal["ridged_multi"] = "ridged_multi"


class ConstConfig(NodeConfig):
    type: Literal["const"] = "const"
    value: float = Field(default=generators.DEFAULT_CONST_VALUE, description="Output value")


class SpheresConfig(NodeConfig):
    type: Literal["spheres"] = "spheres"
    frequency: float = Field(
        default=generators.DEFAULT_SHAPE_FREQUENCY, description="Spheres per unit"
    )


class CylindersConfig(NodeConfig):
    type: Literal["cylinders"] = "cylinders"
    frequency: float = Field(
        default=generators.DEFAULT_SHAPE_FREQUENCY, description="Cylinders per unit"
    )


class ScaleBiasConfig(NodeConfig):
    type: Literal["scale_bias"] = "scale_bias"
    scale: float = Field(default=modifiers.DEFAULT_SCALE, description="Output multiplier")
    bias: float = Field(default=modifiers.DEFAULT_BIAS, description="Output offset")


class ExponentConfig(NodeConfig):
    type: Literal["exponent"] = "exponent"
    exponent: float = Field(default=modifiers.DEFAULT_EXPONENT, description="Curve exponent")


class TerraceConfig(NodeConfig):
    type: Literal["terrace"] = "terrace"
    points: list[float] = Field(
        default_factory=list, description="Explicit terrace points"
    )
    point_count: int | None = Field(
        default=None,
        ge=2,
        description="Evenly spaced points over [-1, 1] (used when points is empty)",
    )
    invert: bool = Field(default=False, description="Invert the terrace curve")


class SelectConfig(NodeConfig):
    type: Literal["select"] = "select"
    lower_bound: float = Field(
        default=selectors.DEFAULT_LOWER_BOUND, description="Lower selector bound"
    )
    upper_bound: float = Field(
        default=selectors.DEFAULT_UPPER_BOUND, description="Upper selector bound"
    )
    edge_falloff: float = Field(
        default=selectors.DEFAULT_EDGE_FALLOFF, description="Transition half-width"
    )


class BlendConfig(NodeConfig):
    type: Literal["blend"] = "blend"


class ScalePointConfig(NodeConfig):
    type: Literal["scale_point"] = "scale_point"
    x_scale: float = transformers.DEFAULT_SCALE_POINT
    y_scale: float = transformers.DEFAULT_SCALE_POINT
    z_scale: float = transformers.DEFAULT_SCALE_POINT


class TranslatePointConfig(NodeConfig):
    type: Literal["translate_point"] = "translate_point"
    x_translation: float = transformers.DEFAULT_TRANSLATION
    y_translation: float = transformers.DEFAULT_TRANSLATION
    z_translation: float = transformers.DEFAULT_TRANSLATION


class RotatePointConfig(NodeConfig):
    type: Literal["rotate_point"] = "rotate_point"
    x_angle: float = Field(default=transformers.DEFAULT_ANGLE, description="Degrees")
    y_angle: float = Field(default=transformers.DEFAULT_ANGLE, description="Degrees")
    z_angle: float = Field(default=transformers.DEFAULT_ANGLE, description="Degrees")


class DisplaceConfig(NodeConfig):
    type: Literal["displace"] = "displace"


class TurbulenceConfig(NodeConfig):
    type: Literal["turbulence"] = "turbulence"
    frequency: float = Field(
        default=transformers.DEFAULT_TURBULENCE_FREQUENCY,
        description="Frequency of the displacement noise",
    )
    power: float = Field(
        default=transformers.DEFAULT_TURBULENCE_POWER,
        description="Displacement scale",
    )
    roughness: int = Field(
        default=transformers.DEFAULT_TURBULENCE_ROUGHNESS,
        ge=generators.MIN_OCTAVE,
        le=generators.MAX_OCTAVE,
        description="Octaves of the displacement noise",
    )
    seed: int = Field(default=transformers.DEFAULT_TURBULENCE_SEED, description="Noise seed")


class PowerConfig(NodeConfig):
    type: Literal["power"] = "power"


class CacheConfig(NodeConfig):
    type: Literal["cache"] = "cache"


AnyNodeConfig = Annotated[
    Union[
        PerlinConfig,
        BillowConfig,
        RidgedMultiConfig,
        ConstConfig,
        SpheresConfig,
        CylindersConfig,
        ScaleBiasConfig,
        ExponentConfig,
        TerraceConfig,
        SelectConfig,
        BlendConfig,
        ScalePointConfig,
        TranslatePointConfig,
        RotatePointConfig,
        DisplaceConfig,
        TurbulenceConfig,
        PowerConfig,
        CacheConfig,
    ],
    Field(discriminator="type"),
]


class GraphConfig(BaseModel):
    """Complete module graph description."""

    root: str = Field(description="Name of the node to evaluate")
    nodes: dict[str, AnyNodeConfig] = Field(default_factory=dict)


def load_graph_config(config_path: Path) -> GraphConfig:
    """Load a graph description from a TOML file.

    Args:
        config_path: Path to the TOML config file.

    Returns:
        Parsed GraphConfig object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If TOML is malformed.
        pydantic.ValidationError: If a node is malformed.
    """
    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    return GraphConfig.model_validate(data)


def create_module(config: NodeConfig) -> Module:
    """Instantiate an unwired module from its node configuration."""
    if isinstance(config, (PerlinConfig, BillowConfig, RidgedMultiConfig)):
        module = {"perlin": Perlin, "billow": Billow, "ridged_multi": RidgedMulti}[
            config.type
        ]()
        module.frequency = config.frequency
        module.lacunarity = config.lacunarity
        module.octave_count = config.octave_count
        module.quality = config.quality
        module.seed = config.seed
        if not isinstance(config, RidgedMultiConfig):
            module.persistence = config.persistence
        return module

    if isinstance(config, ConstConfig):
        return Const(config.value)

    if isinstance(config, (SpheresConfig, CylindersConfig)):
        module = Spheres() if isinstance(config, SpheresConfig) else Cylinders()
        module.frequency = config.frequency
        return module

    if isinstance(config, ScaleBiasConfig):
        module = ScaleBias()
        module.scale = config.scale
        module.bias = config.bias
        return module

    if isinstance(config, ExponentConfig):
        module = Exponent()
        module.exponent = config.exponent
        return module

    if isinstance(config, TerraceConfig):
        module = Terrace()
        if config.points:
            for point in config.points:
                module.add_terrace_point(point)
        elif config.point_count is not None:
            module.make_terrace_points(config.point_count)
        module.invert_terraces = config.invert
        return module

    if isinstance(config, SelectConfig):
        module = Select()
        module.set_bounds(config.lower_bound, config.upper_bound)
        module.edge_falloff = config.edge_falloff
        return module

    if isinstance(config, ScalePointConfig):
        module = ScalePoint()
        module.set_scale(config.x_scale, config.y_scale, config.z_scale)
        return module

    if isinstance(config, TranslatePointConfig):
        module = TranslatePoint()
        module.set_translation(
            config.x_translation, config.y_translation, config.z_translation
        )
        return module

    if isinstance(config, RotatePointConfig):
        module = RotatePoint()
        module.set_angles(config.x_angle, config.y_angle, config.z_angle)
        return module

    if isinstance(config, TurbulenceConfig):
        module = Turbulence()
        module.frequency = config.frequency
        module.power = config.power
        module.roughness = config.roughness
        module.seed = config.seed
        return module

    simple: dict[str, type[Module]] = {
        "blend": Blend,
        "displace": Displace,
        "power": Power,
        "cache": Cache,
    }
    return simple[config.type]()


def build_graph(config: GraphConfig) -> tuple[ModuleGraph, int]:
    """Instantiate and wire every node of a graph description.

    Args:
        config: Parsed graph description.

    Returns:
        The populated ModuleGraph and the handle of the root node.

    Raises:
        MissingSourceModuleError: If a node or the root names an unknown node.
        InvalidParameterError: If a node lists more sources than it has slots,
            or a parameter is rejected by its module.
    """
    graph = ModuleGraph()
    for name, node in config.nodes.items():
        graph.add(create_module(node), name=name)

    for name, node in config.nodes.items():
        target = graph.handle(name)
        for index, source_name in enumerate(node.sources):
            if source_name not in config.nodes:
                raise MissingSourceModuleError(
                    f"Node '{name}' references unknown source '{source_name}'"
                )
            graph.connect(target, index, graph.handle(source_name))

    if config.root not in config.nodes:
        raise MissingSourceModuleError(f"Root node '{config.root}' is not defined")

    logger.info("graph_built", nodes=len(graph), root=config.root)
    return graph, graph.handle(config.root)
