"""
Hue angle helpers.

Hues are stored in degrees in ``[0, 360)``. ``hue_lerp`` takes the shortest
arc unless a ``HueMode`` asks for a fixed direction around the wheel.
"""
from __future__ import annotations
from enum import IntEnum

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers.functions import clamp01, cyclic_wrap_float

from ..types.format_type import HUE_360


class HueMode(IntEnum):
    """
    Hue interpolation modes for cyclical color space.

    CW:       Clockwise (increasing hue direction)
    CCW:      Counterclockwise (decreasing hue direction)
    SHORTEST: Shortest path (<=180 degree arc)
    LONGEST:  Longest path (>=180 degree arc)
    """
    CW = 0
    CCW = 1
    SHORTEST = 2
    LONGEST = 3


def normalize_hue(hue: float) -> float:
    """Wrap ``hue`` into ``[0, 360)``."""
    wrapped = cyclic_wrap_float(float(hue), 0.0, HUE_360)
    # tiny negatives wrap to exactly 360.0 in float arithmetic
    return 0.0 if wrapped >= HUE_360 else wrapped


def np_normalize_hue(hue: NDArray) -> NDArray:
    wrapped = np.mod(np.asarray(hue, dtype=float), HUE_360)
    return np.where(wrapped >= HUE_360, 0.0, wrapped)


def hue_difference(h0: float, h1: float, mode: HueMode = HueMode.SHORTEST) -> float:
    """Signed angle to travel from ``h0`` to ``h1``."""
    diff = normalize_hue(h1 - h0)  # in [0, 360): clockwise distance
    if mode == HueMode.CW:
        return diff
    if mode == HueMode.CCW:
        return diff - HUE_360 if diff > 0.0 else 0.0
    if mode == HueMode.LONGEST:
        if diff == 0.0:
            return 0.0
        return diff - HUE_360 if diff <= 180.0 else diff
    # shortest: (-180, 180]
    return diff - HUE_360 if diff > 180.0 else diff


def hue_lerp(h0: float, h1: float, t: float, mode: HueMode = HueMode.SHORTEST) -> float:
    """
    Interpolate between two hues.

    Args:
        h0: Start hue in degrees
        h1: End hue in degrees
        t: Interpolation factor, clamped to [0, 1]
        mode: Direction around the wheel

    Returns:
        Interpolated hue in [0, 360)
    """
    t = clamp01(t)
    if t == 1.0:
        return normalize_hue(h1)
    return normalize_hue(h0 + hue_difference(h0, h1, mode) * t)


def np_hue_lerp(h0: float, h1: float, t: NDArray, mode: HueMode = HueMode.SHORTEST) -> NDArray:
    """Vectorized: interpolate between two hues at every factor in ``t``."""
    t = np.clip(np.asarray(t, dtype=float), 0.0, 1.0)
    return np_normalize_hue(h0 + hue_difference(h0, h1, mode) * t)
