"""Chromaspace: color spaces, conversions, gradients and blending."""

from .types import FormatType, DEFAULT_FORMAT, ColorSpace, TagMismatchError
from .colorimetry import (
    WhitePoint,
    RgbSpace,
    RgbStandard,
    LumaStandard,
    AdaptationMethod,
    adapt,
    D50,
    D65,
    SRGB_SPACE,
    SRGB,
    LINEAR_SRGB,
    GAMMA_SRGB,
    SRGB_LUMA,
    LINEAR_LUMA,
    GAMMA_LUMA,
)
from .colors import (
    ColorBase,
    Rgb,
    Srgb,
    LinSrgb,
    GammaSrgb,
    Luma,
    SrgbLuma,
    LinLuma,
    GammaLuma,
    Xyz,
    Yxy,
    Lab,
    Lch,
    Hsv,
    Hsl,
    Hwb,
    Color,
    Alpha,
)
from .conversions import convert, convert_component, np_convert_component
from .utils import HueMode
from .gradients import Gradient, GradientSamples
from .blend import BlendMode, PreAlpha, blend, premultiply, unpremultiply

__all__ = [
    # types
    "FormatType",
    "DEFAULT_FORMAT",
    "ColorSpace",
    "TagMismatchError",
    # colorimetry
    "WhitePoint",
    "RgbSpace",
    "RgbStandard",
    "LumaStandard",
    "AdaptationMethod",
    "adapt",
    "D50",
    "D65",
    "SRGB_SPACE",
    "SRGB",
    "LINEAR_SRGB",
    "GAMMA_SRGB",
    "SRGB_LUMA",
    "LINEAR_LUMA",
    "GAMMA_LUMA",
    # color types
    "ColorBase",
    "Rgb",
    "Srgb",
    "LinSrgb",
    "GammaSrgb",
    "Luma",
    "SrgbLuma",
    "LinLuma",
    "GammaLuma",
    "Xyz",
    "Yxy",
    "Lab",
    "Lch",
    "Hsv",
    "Hsl",
    "Hwb",
    "Color",
    "Alpha",
    # conversions
    "convert",
    "convert_component",
    "np_convert_component",
    "HueMode",
    # gradients and blending
    "Gradient",
    "GradientSamples",
    "BlendMode",
    "PreAlpha",
    "blend",
    "premultiply",
    "unpremultiply",
]
