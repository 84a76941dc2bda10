"""
Chromaspace Color Space Conversions
===================================

Pairwise formulas between color spaces and the hub-and-spoke dispatcher that
chains them. Scalar functions work on float triples; ``np_`` twins accept
``(..., 3)`` arrays.

Conversion Graph
----------------
Every space has a single parent; CIE XYZ is the hub::

    rgb  -> xyz        luma -> xyz        yxy -> xyz
    lab  -> xyz        lch  -> lab
    hsv  -> rgb        hsl  -> rgb        hwb -> hsv

Component Scaling
-----------------
    convert_component(value, source, dest, warn=False)
        Rescale one component between FormatTypes
    np_convert_component(values, source, dest)
        Vectorized component rescaling

High-Level API
--------------
    convert(color, to, **tags)
        Convert a color value into another space
    convert_values(values, from_space, from_tag, to_space, to_tag)
        Same walk on raw float components

Examples
--------
>>> from chromaspace import LinSrgb, Xyz
>>> LinSrgb(1.0, 0.0, 0.0).convert(Xyz)
Xyz(x=0.4124..., y=0.2126..., z=0.0193..., white_point=WhitePoint(D65))
"""

from .numbers import convert_component, np_convert_component

from .xyz import (
    rgb_to_xyz,
    xyz_to_rgb,
    np_rgb_to_xyz,
    np_xyz_to_rgb,
    luma_to_xyz,
    xyz_to_luma,
    xyz_to_yxy,
    yxy_to_xyz,
)
from .lab import (
    xyz_to_lab,
    lab_to_xyz,
    lab_to_lch,
    lch_to_lab,
    np_xyz_to_lab,
    np_lab_to_xyz,
    np_lab_to_lch,
    np_lch_to_lab,
)
from .cylindrical import (
    rgb_to_hsv,
    hsv_to_rgb,
    rgb_to_hsl,
    hsl_to_rgb,
    hsv_to_hwb,
    hwb_to_hsv,
    np_rgb_to_hsv,
    np_rgb_to_hsl,
)

# High-level API
from .wrapper import convert, convert_values, ancestry

from ..types.format_type import FormatType

__all__ = [
    # Components
    'convert_component',
    'np_convert_component',

    # XYZ hub
    'rgb_to_xyz',
    'xyz_to_rgb',
    'np_rgb_to_xyz',
    'np_xyz_to_rgb',
    'luma_to_xyz',
    'xyz_to_luma',
    'xyz_to_yxy',
    'yxy_to_xyz',

    # Lab / Lch
    'xyz_to_lab',
    'lab_to_xyz',
    'lab_to_lch',
    'lch_to_lab',
    'np_xyz_to_lab',
    'np_lab_to_xyz',
    'np_lab_to_lch',
    'np_lch_to_lab',

    # Cylindrical RGB
    'rgb_to_hsv',
    'hsv_to_rgb',
    'rgb_to_hsl',
    'hsl_to_rgb',
    'hsv_to_hwb',
    'hwb_to_hsv',
    'np_rgb_to_hsv',
    'np_rgb_to_hsl',

    # High-level API
    'convert',
    'convert_values',
    'ancestry',

    # Types
    'FormatType',
]
