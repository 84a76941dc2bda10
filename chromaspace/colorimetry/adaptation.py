"""
Chromatic adaptation between white points.

Colors never cross white points implicitly; :func:`adapt` is the explicit
step. The transform is the von Kries style
``M^-1 * diag(dest_cone / source_cone) * M``.
"""
from __future__ import annotations
from enum import Enum
from functools import lru_cache
from typing import Sequence

import numpy as np
from numpy import ndarray as NDArray

from .matrix import Vec3, mat3, matrix_inverse, multiply_3x3_and_vec3
from .white_point import WhitePoint


class AdaptationMethod(str, Enum):
    BRADFORD = "bradford"
    VON_KRIES = "von_kries"
    XYZ_SCALING = "xyz_scaling"


cone_response_matrices = {
    AdaptationMethod.BRADFORD: mat3([
        [0.8951, 0.2664, -0.1614],
        [-0.7502, 1.7135, 0.0367],
        [0.0389, -0.0685, 1.0296],
    ]),
    AdaptationMethod.VON_KRIES: mat3([
        [0.40024, 0.7076, -0.08081],
        [-0.2263, 1.16532, 0.0457],
        [0.0, 0.0, 0.91822],
    ]),
    AdaptationMethod.XYZ_SCALING: mat3(np.eye(3)),
}


@lru_cache(maxsize=None)
def adaptation_matrix(
    source: WhitePoint,
    dest: WhitePoint,
    method: AdaptationMethod = AdaptationMethod.BRADFORD,
) -> NDArray:
    """XYZ -> XYZ matrix taking colors seen under ``source`` to ``dest``."""
    m = cone_response_matrices[AdaptationMethod(method)]
    src_cone = multiply_3x3_and_vec3(m, source.xyz)
    dst_cone = multiply_3x3_and_vec3(m, dest.xyz)
    scale = np.diag([d / s for d, s in zip(dst_cone, src_cone)])
    return mat3(matrix_inverse(m) @ scale @ m)


def adapt_xyz(
    xyz: Sequence[float],
    source: WhitePoint,
    dest: WhitePoint,
    method: AdaptationMethod = AdaptationMethod.BRADFORD,
) -> Vec3:
    if source == dest:
        x, y, z = xyz
        return (float(x), float(y), float(z))
    return multiply_3x3_and_vec3(adaptation_matrix(source, dest, method), xyz)


def adapt(color, dest: WhitePoint, method: AdaptationMethod = AdaptationMethod.BRADFORD):
    """
    Re-express ``color`` under another white point.

    Works for every white-point tagged color (Xyz, Yxy, Lab, Lch). The color
    is routed through XYZ, adapted, and converted back into its own space.

    Raises:
        TypeError: if the color is tagged with an RGB space or standard
    """
    from ..colors.color_base import ColorBase
    from ..conversions import convert
    from ..types.color_types import ColorSpace

    if not isinstance(color, ColorBase) or color.tag_name != "white_point":
        raise TypeError(
            f"adapt expects a white point tagged color, got {type(color).__name__}; "
            "convert RGB and luma colors to Xyz first"
        )
    xyz = convert(color, ColorSpace.XYZ)
    adapted = type(xyz)(*adapt_xyz(xyz.into_raw(), xyz.white_point, dest, method), white_point=dest)
    return convert(adapted, type(color), white_point=dest)
