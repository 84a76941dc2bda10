"""
Component scaling between numeric representations.

Every cross-format conversion (``Rgb.into_format``, raw pixel buffers, alpha
channels) funnels through :func:`convert_component` or its vectorized twin.
The scale factor is the ratio of maximum intensities; clamping happens only
when the destination format is range-limited.
"""
from __future__ import annotations
import math
import warnings

import numpy as np
from boundednumbers import clamp

from ..types.color_types import Scalar
from ..types.format_type import FormatType, default_format_dtypes


def convert_component(
    value: Scalar,
    source: FormatType,
    dest: FormatType,
    *,
    warn: bool = False,
) -> Scalar:
    """
    Rescale a single component from ``source`` to ``dest``.

    Integer to integer conversions are done with exact integer arithmetic,
    everything else goes through a Python float. Limited destinations are
    clamped to ``[0, max]`` and rounded to the nearest integer.

    Args:
        value: Component value in the source representation
        source: Format of ``value``
        dest: Target format
        warn: Emit a RuntimeWarning when clamping discards information

    Returns:
        The rescaled value (int for limited formats, float otherwise)
    """
    source = FormatType(source)
    dest = FormatType(dest)
    src_max = source.max_intensity
    dst_max = dest.max_intensity

    if source.limited and dest.limited:
        v = int(clamp(int(value), 0, src_max))
        # round-half-up of v * dst_max / src_max without leaving the integers
        return (2 * v * dst_max + src_max) // (2 * src_max)

    scaled = float(value) * float(dst_max) / float(src_max)
    if not dest.limited:
        return scaled

    if warn and not 0.0 <= scaled <= dst_max:
        warnings.warn(
            f"component {value!r} is outside the {dest.value} range and will be clamped",
            RuntimeWarning,
            stacklevel=2,
        )
    if math.isnan(scaled):
        return 0
    scaled = clamp(scaled, 0.0, dst_max)
    return min(int(math.floor(scaled + 0.5)), dst_max)


def np_convert_component(
    values: np.ndarray,
    source: FormatType,
    dest: FormatType,
) -> np.ndarray:
    """
    Vectorized: rescale an array of components from ``source`` to ``dest``.

    Uses a float64 intermediate. The result has the default dtype of ``dest``.
    """
    source = FormatType(source)
    dest = FormatType(dest)
    arr = np.asarray(values, dtype=np.float64)
    scaled = arr * float(dest.max_intensity) / float(source.max_intensity)

    if dest.limited:
        upper = float(dest.max_intensity)
        if int(upper) > dest.max_intensity:
            # u64 max is not representable as float64
            upper = float(np.nextafter(upper, 0.0))
        scaled = np.nan_to_num(scaled, nan=0.0)
        scaled = np.round(np.clip(scaled, 0.0, upper))
    return scaled.astype(default_format_dtypes[dest])
