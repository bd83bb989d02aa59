"""Coherent noise kernel.

Integer lattice hashing, gradient and value noise, and the trilinearly
interpolated ("smoothed") variants used by the generator modules.

All integer arithmetic is done with explicit masks, so results match a
two's-complement 32-bit implementation bit for bit regardless of platform.
"""

import math

from .interp import linear_interp, s_curve3, s_curve5
from .types import NoiseMode, NoiseQuality
from .vectortable import RANDOM_VECTORS

# Prime multipliers for the lattice hash. Changing any of these produces a
# different, non-interchangeable noise field for the same seed.
X_NOISE_GEN = 1619
Y_NOISE_GEN = 31337
Z_NOISE_GEN = 6971
SEED_NOISE_GEN = 1013
SHIFT_NOISE_GEN = 8

GRADIENT_SCALE = 2.12

_MASK_31 = 0x7FFFFFFF
_MASK_32 = 0xFFFFFFFF
_INT32_FOLD = 1073741824.0  # 2^30


def int_hash_3d(x: int, y: int, z: int, seed: int = 0) -> int:
    """Hash an integer lattice point and seed into [0, 2^31).

    Args:
        x: Lattice x coordinate.
        y: Lattice y coordinate.
        z: Lattice z coordinate.
        seed: Noise seed.

    Returns:
        Non-negative 31-bit hash value.
    """
    n = (
        X_NOISE_GEN * x
        + Y_NOISE_GEN * y
        + Z_NOISE_GEN * z
        + SEED_NOISE_GEN * seed
    ) & _MASK_31
    n = ((n << 13) ^ n) & _MASK_32
    mix = (n * n * 60493 + 19990303) & _MASK_32
    return (n * mix + 1376312589) & _MASK_31


def gradient_index(ix: int, iy: int, iz: int, seed: int = 0) -> int:
    """Pick one of the 256 gradient vectors for a lattice point."""
    h = int_hash_3d(ix, iy, iz, seed)
    return (h ^ (h >> SHIFT_NOISE_GEN)) & 0xFF


def gradient_noise_3d(
    x: float,
    y: float,
    z: float,
    ix: int,
    iy: int,
    iz: int,
    seed: int = 0,
) -> float:
    """Gradient noise contribution of one lattice point.

    Dot product of the lattice point's gradient with the offset from the
    lattice point to (x, y, z), scaled into roughly [-1, 1]. The offset
    must be at most 1 on every axis.
    """
    xg, yg, zg = RANDOM_VECTORS[gradient_index(ix, iy, iz, seed)]
    return (
        (xg * (x - ix)) + (yg * (y - iy)) + (zg * (z - iz))
    ) * GRADIENT_SCALE


def value_noise_3d(x: int, y: int, z: int, seed: int = 0) -> float:
    """Value noise at a lattice point, in [-1, 1]."""
    return 1.0 - (int_hash_3d(x, y, z, seed) / _INT32_FOLD)


def fold_to_int32_range(n: float) -> float:
    """Fold a coordinate into the range a 32-bit integer can represent.

    Values inside (-2^30, 2^30) are returned unchanged, so the common case
    is an identity. Larger magnitudes are wrapped with fmod so that the
    lattice coordinates derived from them stay portable.

    Raises:
        ValueError: If n is NaN or infinite, for example a NaN from
            ``Power`` feeding a ``Displace``.
    """
    if not math.isfinite(n):
        raise ValueError(f"Cannot fold non-finite coordinate {n}")
    if n >= _INT32_FOLD:
        return (2.0 * math.fmod(n, _INT32_FOLD)) - _INT32_FOLD
    elif n <= -_INT32_FOLD:
        return (2.0 * math.fmod(n, _INT32_FOLD)) + _INT32_FOLD
    return n


def _curve(t: float, quality: NoiseQuality) -> float:
    if quality == NoiseQuality.FAST:
        return t
    elif quality == NoiseQuality.STANDARD:
        return s_curve3(t)
    return s_curve5(t)


def smooth_gradient_noise_3d(
    x: float,
    y: float,
    z: float,
    seed: int = 0,
    quality: NoiseQuality = NoiseQuality.STANDARD,
) -> float:
    """Trilinearly interpolated gradient noise at (x, y, z).

    Coordinates must be finite; NaN or infinity raises from ``math.floor``.
    """
    x0 = math.floor(x)
    y0 = math.floor(y)
    z0 = math.floor(z)
    x1 = x0 + 1
    y1 = y0 + 1
    z1 = z0 + 1

    xs = _curve(x - x0, quality)
    ys = _curve(y - y0, quality)
    zs = _curve(z - z0, quality)

    n0 = gradient_noise_3d(x, y, z, x0, y0, z0, seed)
    n1 = gradient_noise_3d(x, y, z, x1, y0, z0, seed)
    ix0 = linear_interp(n0, n1, xs)
    n0 = gradient_noise_3d(x, y, z, x0, y1, z0, seed)
    n1 = gradient_noise_3d(x, y, z, x1, y1, z0, seed)
    ix1 = linear_interp(n0, n1, xs)
    iy0 = linear_interp(ix0, ix1, ys)

    n0 = gradient_noise_3d(x, y, z, x0, y0, z1, seed)
    n1 = gradient_noise_3d(x, y, z, x1, y0, z1, seed)
    ix0 = linear_interp(n0, n1, xs)
    n0 = gradient_noise_3d(x, y, z, x0, y1, z1, seed)
    n1 = gradient_noise_3d(x, y, z, x1, y1, z1, seed)
    ix1 = linear_interp(n0, n1, xs)
    iy1 = linear_interp(ix0, ix1, ys)

    return linear_interp(iy0, iy1, zs)


def smooth_value_noise_3d(
    x: float,
    y: float,
    z: float,
    seed: int = 0,
    quality: NoiseQuality = NoiseQuality.STANDARD,
) -> float:
    """Trilinearly interpolated value noise at (x, y, z).

    Coordinates must be finite; NaN or infinity raises from ``math.floor``.
    """
    x0 = math.floor(x)
    y0 = math.floor(y)
    z0 = math.floor(z)
    x1 = x0 + 1
    y1 = y0 + 1
    z1 = z0 + 1

    xs = _curve(x - x0, quality)
    ys = _curve(y - y0, quality)
    zs = _curve(z - z0, quality)

    n0 = value_noise_3d(x0, y0, z0, seed)
    n1 = value_noise_3d(x1, y0, z0, seed)
    ix0 = linear_interp(n0, n1, xs)
    n0 = value_noise_3d(x0, y1, z0, seed)
    n1 = value_noise_3d(x1, y1, z0, seed)
    ix1 = linear_interp(n0, n1, xs)
    iy0 = linear_interp(ix0, ix1, ys)

    n0 = value_noise_3d(x0, y0, z1, seed)
    n1 = value_noise_3d(x1, y0, z1, seed)
    ix0 = linear_interp(n0, n1, xs)
    n0 = value_noise_3d(x0, y1, z1, seed)
    n1 = value_noise_3d(x1, y1, z1, seed)
    ix1 = linear_interp(n0, n1, xs)
    iy1 = linear_interp(ix0, ix1, ys)

    return linear_interp(iy0, iy1, zs)


def smoothed_noise_3d(
    x: float,
    y: float,
    z: float,
    seed: int = 0,
    quality: NoiseQuality = NoiseQuality.STANDARD,
    mode: NoiseMode = NoiseMode.GRADIENT,
) -> float:
    """Smoothed lattice noise at (x, y, z).

    Args:
        x: X coordinate.
        y: Y coordinate.
        z: Z coordinate.
        seed: Noise seed.
        quality: Smoothing curve applied to the cell offsets.
        mode: Gradient or value noise at the cell corners.

    Returns:
        Noise value, roughly in [-1, 1].
    """
    if mode == NoiseMode.VALUE:
        return smooth_value_noise_3d(x, y, z, seed, quality)
    return smooth_gradient_noise_3d(x, y, z, seed, quality)
