"""
Cylindrical RGB models: HSV, HSL and HWB.

Inputs and outputs are linear RGB in the model's own RGB space; callers
decode the transfer function before converting. Hue is in degrees
``[0, 360)``, the remaining channels are unit floats.
"""
from __future__ import annotations

import numpy as np
from numpy import ndarray as NDArray

from ..colorimetry.matrix import Vec3
from ..utils.hue import normalize_hue, np_normalize_hue


def _sextant_hue(r: float, g: float, b: float, max_c: float, delta: float) -> float:
    if delta == 0:
        return 0.0
    if max_c == r:
        hue = 60 * ((g - b) / delta)
    elif max_c == g:
        hue = 60 * ((b - r) / delta) + 120
    else:
        hue = 60 * ((r - g) / delta) + 240
    return normalize_hue(hue)


def _np_sextant_hue(r: NDArray, g: NDArray, b: NDArray, max_c: NDArray, delta: NDArray) -> NDArray:
    hue = np.zeros_like(max_c)
    mask = delta > 0
    mask_r = mask & (max_c == r)
    mask_g = mask & ~mask_r & (max_c == g)
    mask_b = mask & ~mask_r & ~mask_g

    hue[mask_r] = 60 * ((g[mask_r] - b[mask_r]) / delta[mask_r])
    hue[mask_g] = 60 * ((b[mask_g] - r[mask_g]) / delta[mask_g]) + 120
    hue[mask_b] = 60 * ((r[mask_b] - g[mask_b]) / delta[mask_b]) + 240
    return np_normalize_hue(hue)


def _chroma_to_rgb(hue: float, chroma: float, m: float) -> Vec3:
    """Place ``chroma`` on the RGB cube edge selected by ``hue`` and lift by ``m``."""
    h = normalize_hue(hue) / 60.0
    x = chroma * (1 - abs(h % 2 - 1))
    sextant = int(h)
    if sextant == 0:
        r, g, b = chroma, x, 0.0
    elif sextant == 1:
        r, g, b = x, chroma, 0.0
    elif sextant == 2:
        r, g, b = 0.0, chroma, x
    elif sextant == 3:
        r, g, b = 0.0, x, chroma
    elif sextant == 4:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x
    return (r + m, g + m, b + m)


## RGB <-> HSV

def rgb_to_hsv(r: float, g: float, b: float) -> Vec3:
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    hue = _sextant_hue(r, g, b, max_c, delta)
    saturation = 0.0 if max_c == 0 else delta / max_c
    return (hue, saturation, max_c)


def hsv_to_rgb(hue: float, saturation: float, value: float) -> Vec3:
    chroma = value * saturation
    return _chroma_to_rgb(hue, chroma, value - chroma)


## RGB <-> HSL

def rgb_to_hsl(r: float, g: float, b: float) -> Vec3:
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0
    denominator = 1 - abs(2 * lightness - 1)
    if delta == 0 or denominator == 0:
        saturation = 0.0
    else:
        saturation = delta / denominator

    return (_sextant_hue(r, g, b, max_c, delta), saturation, lightness)


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> Vec3:
    chroma = (1 - abs(2 * lightness - 1)) * saturation
    return _chroma_to_rgb(hue, chroma, lightness - chroma / 2.0)


## HSV <-> HWB

def hsv_to_hwb(hue: float, saturation: float, value: float) -> Vec3:
    return (hue, (1.0 - saturation) * value, 1.0 - value)


def hwb_to_hsv(hue: float, whiteness: float, blackness: float) -> Vec3:
    value = 1.0 - blackness
    saturation = 0.0 if value == 0 else 1.0 - whiteness / value
    return (hue, saturation, value)


## Vectorized variants

def np_rgb_to_hsv(rgb: NDArray) -> NDArray:
    """
    Vectorized: ``(..., 3)`` linear RGB to ``(..., 3)`` HSV.

    Returns:
        hsv: array of shape (..., 3): (hue [0,360), saturation, value)
    """
    rgb = np.asarray(rgb, dtype=float)
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]
    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    saturation = np.zeros_like(max_c)
    mask = max_c != 0
    saturation[mask] = delta[mask] / max_c[mask]

    hue = _np_sextant_hue(r, g, b, max_c, delta)
    return np.stack([hue, saturation, max_c], axis=-1)


def np_rgb_to_hsl(rgb: NDArray) -> NDArray:
    rgb = np.asarray(rgb, dtype=float)
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]
    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0
    denominator = 1 - np.abs(2 * lightness - 1)
    saturation = np.zeros_like(lightness)
    mask = (delta > 0) & (denominator != 0)
    saturation[mask] = delta[mask] / denominator[mask]

    hue = _np_sextant_hue(r, g, b, max_c, delta)
    return np.stack([hue, saturation, lightness], axis=-1)
