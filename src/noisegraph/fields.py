"""Sampling helpers: evaluate a module over a regular grid."""

import numpy as np
from numpy.typing import NDArray

from .modules.base import Module


def sample_plane(
    module: Module,
    width: int,
    height: int,
    x_bounds: tuple[float, float] = (0.0, 1.0),
    z_bounds: tuple[float, float] = (0.0, 1.0),
    y: float = 0.0,
) -> NDArray[np.float64]:
    """Sample a module over an evenly spaced grid in the x/z plane.

    Args:
        module: Module to evaluate.
        width: Number of samples along x (columns).
        height: Number of samples along z (rows).
        x_bounds: Inclusive x range covered by the columns.
        z_bounds: Inclusive z range covered by the rows.
        y: Constant y coordinate of the plane.

    Returns:
        2D array of shape (height, width).
    """
    xs = np.linspace(x_bounds[0], x_bounds[1], width, dtype=np.float64)
    zs = np.linspace(z_bounds[0], z_bounds[1], height, dtype=np.float64)
    result = np.empty((height, width), dtype=np.float64)

    for row, z in enumerate(zs.tolist()):
        for col, x in enumerate(xs.tolist()):
            result[row, col] = module.get_value(x, y, z)

    return result


def normalize(field: NDArray[np.float64]) -> NDArray[np.float64]:
    """Rescale a field linearly to [0, 1].

    A constant field maps to all zeros.
    """
    low = float(field.min())
    high = float(field.max())
    if high > low:
        return (field - low) / (high - low)
    return np.zeros_like(field)
