from __future__ import annotations
from enum import Enum
from typing import Sequence, Tuple, Union
from numpy import ndarray

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
RawPixel = Union[Sequence[Scalar], ndarray]


class ColorSpace(str, Enum):
    RGB = "rgb"
    LUMA = "luma"
    XYZ = "xyz"
    YXY = "yxy"
    LAB = "lab"
    LCH = "lch"
    HSV = "hsv"
    HSL = "hsl"
    HWB = "hwb"


# Spaces parameterized by a full RGB space rather than a bare white point
RGB_FAMILY = {ColorSpace.RGB, ColorSpace.HSV, ColorSpace.HSL, ColorSpace.HWB}


class TagMismatchError(TypeError):
    """Raised when colors tagged with different white points, RGB spaces or
    standards meet without an explicit conversion or adaptation step."""
