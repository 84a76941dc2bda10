"""
Conversions to and from the CIE XYZ hub.

All functions operate on plain float triples; tags (standards, white points)
are passed in explicitly. Numeric degeneracies never raise: denominators
that are zero, subnormal or not finite leave the affected channels at 0.
"""
from __future__ import annotations
import math
import sys
from typing import Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..colorimetry.matrix import Vec3, multiply_3x3_and_vec3
from ..colorimetry.rgb_space import LumaStandard, RgbStandard


def is_normal(x: float) -> bool:
    """True for finite, non-zero, non-subnormal floats."""
    return math.isfinite(x) and abs(x) >= sys.float_info.min


## RGB <-> XYZ

def rgb_to_xyz(r: float, g: float, b: float, standard: RgbStandard) -> Vec3:
    decode = standard.transfer.into_linear
    linear = (decode(r), decode(g), decode(b))
    return multiply_3x3_and_vec3(standard.space.rgb_to_xyz_matrix(), linear)


def xyz_to_rgb(x: float, y: float, z: float, standard: RgbStandard) -> Vec3:
    encode = standard.transfer.from_linear
    lr, lg, lb = multiply_3x3_and_vec3(standard.space.xyz_to_rgb_matrix(), (x, y, z))
    return (encode(lr), encode(lg), encode(lb))


def np_rgb_to_xyz(rgb: NDArray, standard: RgbStandard) -> NDArray:
    """Vectorized: ``(..., 3)`` RGB array to ``(..., 3)`` XYZ."""
    linear = standard.transfer.np_into_linear(rgb)
    return linear @ standard.space.rgb_to_xyz_matrix().T


def np_xyz_to_rgb(xyz: NDArray, standard: RgbStandard) -> NDArray:
    """Vectorized: ``(..., 3)`` XYZ array to ``(..., 3)`` RGB."""
    linear = np.asarray(xyz, dtype=float) @ standard.space.xyz_to_rgb_matrix().T
    return standard.transfer.np_from_linear(linear)


## Luma <-> XYZ

def luma_to_xyz(luma: float, standard: LumaStandard) -> Vec3:
    y = standard.transfer.into_linear(luma)
    wx, wy, wz = standard.white_point.xyz
    return (wx * y, wy * y, wz * y)


def xyz_to_luma(x: float, y: float, z: float, standard: LumaStandard) -> Tuple[float]:
    return (standard.transfer.from_linear(y),)


## XYZ <-> Yxy

def xyz_to_yxy(x: float, y: float, z: float) -> Vec3:
    """Returns ``(x, y, luma)`` chromaticity coordinates plus luminance."""
    total = x + y + z
    if not is_normal(total):
        return (0.0, 0.0, y)
    return (x / total, y / total, y)


def yxy_to_xyz(x: float, y: float, luma: float) -> Vec3:
    if not is_normal(y):
        return (0.0, luma, 0.0)
    return (luma * x / y, luma, luma * (1.0 - x - y) / y)
