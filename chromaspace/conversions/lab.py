"""CIE L*a*b* and its cylindrical form L*C*h."""
from __future__ import annotations
import math

import numpy as np
from numpy import ndarray as NDArray

from ..colorimetry.matrix import Vec3
from ..colorimetry.white_point import WhitePoint
from ..utils.hue import normalize_hue, np_normalize_hue

EPSILON = (6.0 / 29.0) ** 3
KAPPA = (1.0 / 3.0) * (29.0 / 6.0) ** 2
DELTA = 6.0 / 29.0


def lab_f(t: float) -> float:
    if t > EPSILON:
        return t ** (1.0 / 3.0)
    return t * KAPPA + 16.0 / 116.0


def lab_f_inverse(c: float) -> float:
    if c > DELTA:
        return c ** 3
    return (c - 4.0 / 29.0) * 108.0 / 841.0


def xyz_to_lab(x: float, y: float, z: float, white_point: WhitePoint) -> Vec3:
    wx, wy, wz = white_point.xyz
    fx = lab_f(x / wx)
    fy = lab_f(y / wy)
    fz = lab_f(z / wz)
    return (116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz))


def lab_to_xyz(l: float, a: float, b: float, white_point: WhitePoint) -> Vec3:
    fy = (l + 16.0) / 116.0
    fx = fy + a / 500.0
    fz = fy - b / 200.0
    wx, wy, wz = white_point.xyz
    return (lab_f_inverse(fx) * wx, lab_f_inverse(fy) * wy, lab_f_inverse(fz) * wz)


def lab_to_lch(l: float, a: float, b: float) -> Vec3:
    """Hue is stored as 0 when the chroma vanishes."""
    chroma = math.hypot(a, b)
    if chroma <= 0.0:
        return (l, 0.0, 0.0)
    return (l, chroma, normalize_hue(math.degrees(math.atan2(b, a))))


def lch_to_lab(l: float, chroma: float, hue: float) -> Vec3:
    rad = math.radians(hue)
    return (l, chroma * math.cos(rad), chroma * math.sin(rad))


def np_xyz_to_lab(xyz: NDArray, white_point: WhitePoint) -> NDArray:
    """Vectorized: ``(..., 3)`` XYZ to ``(..., 3)`` Lab."""
    t = np.asarray(xyz, dtype=float) / np.array(white_point.xyz)
    f = np.where(t > EPSILON, np.cbrt(t), t * KAPPA + 16.0 / 116.0)
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]
    return np.stack([116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)], axis=-1)


def np_lab_to_xyz(lab: NDArray, white_point: WhitePoint) -> NDArray:
    lab = np.asarray(lab, dtype=float)
    fy = (lab[..., 0] + 16.0) / 116.0
    f = np.stack([fy + lab[..., 1] / 500.0, fy, fy - lab[..., 2] / 200.0], axis=-1)
    t = np.where(f > DELTA, f ** 3, (f - 4.0 / 29.0) * 108.0 / 841.0)
    return t * np.array(white_point.xyz)


def np_lab_to_lch(lab: NDArray) -> NDArray:
    lab = np.asarray(lab, dtype=float)
    chroma = np.hypot(lab[..., 1], lab[..., 2])
    hue = np_normalize_hue(np.degrees(np.arctan2(lab[..., 2], lab[..., 1])))
    hue = np.where(chroma > 0.0, hue, 0.0)
    return np.stack([lab[..., 0], chroma, hue], axis=-1)


def np_lch_to_lab(lch: NDArray) -> NDArray:
    lch = np.asarray(lch, dtype=float)
    chroma = lch[..., 1]
    rad = np.radians(lch[..., 2])
    return np.stack([lch[..., 0], chroma * np.cos(rad), chroma * np.sin(rad)], axis=-1)
