"""White points, RGB spaces, transfer functions and chromatic adaptation."""

from .white_point import (
    WhitePoint,
    WHITE_POINTS,
    get_white_point,
    A, B, C, D50, D55, D65, D75, E, F2, F7, F11,
)
from .transfer import TransferFn, LinearFn, SrgbFn, GammaFn, LINEAR, GAMMA_2_2
from .transfer import SRGB as SRGB_TRANSFER
from .rgb_space import (
    Primaries,
    RgbSpace,
    RgbStandard,
    LumaStandard,
    SRGB_PRIMARIES,
    SRGB_SPACE,
    SRGB,
    LINEAR_SRGB,
    GAMMA_SRGB,
    SRGB_LUMA,
    LINEAR_LUMA,
    GAMMA_LUMA,
)
from .adaptation import AdaptationMethod, adaptation_matrix, adapt_xyz, adapt
