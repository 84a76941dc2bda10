"""
RGB spaces and standards.

An :class:`RgbSpace` is a set of primaries plus a reference white; it fixes
the matrices to and from XYZ. An :class:`RgbStandard` adds the transfer
function that relates stored values to linear light. Luma has no primaries,
so a :class:`LumaStandard` only needs a white point and a transfer function.
"""
from __future__ import annotations
from functools import lru_cache
from typing import NamedTuple, Tuple

from numpy import ndarray as NDArray

from .matrix import matrix_inverse, rgb_to_xyz_matrix
from .transfer import GAMMA_2_2, LINEAR, SRGB as SRGB_TRANSFER, TransferFn
from .white_point import D65, WhitePoint

Chromaticity = Tuple[float, float]


class Primaries(NamedTuple):
    """xy chromaticities of the red, green and blue primaries."""
    red: Chromaticity
    green: Chromaticity
    blue: Chromaticity


class RgbSpace(NamedTuple):
    name: str
    white_point: WhitePoint
    primaries: Primaries

    def rgb_to_xyz_matrix(self) -> NDArray:
        return _rgb_to_xyz(self)

    def xyz_to_rgb_matrix(self) -> NDArray:
        return _xyz_to_rgb(self)

    def __repr__(self) -> str:
        return f"RgbSpace({self.name}, {self.white_point.name})"


@lru_cache(maxsize=None)
def _rgb_to_xyz(space: RgbSpace) -> NDArray:
    red, green, blue = space.primaries
    return rgb_to_xyz_matrix(red, green, blue, space.white_point.xyz)


@lru_cache(maxsize=None)
def _xyz_to_rgb(space: RgbSpace) -> NDArray:
    return matrix_inverse(_rgb_to_xyz(space))


class RgbStandard(NamedTuple):
    space: RgbSpace
    transfer: TransferFn

    @property
    def white_point(self) -> WhitePoint:
        return self.space.white_point

    @property
    def is_linear(self) -> bool:
        return self.transfer.is_linear

    def linear(self) -> RgbStandard:
        """The same space with the identity transfer function."""
        return RgbStandard(self.space, LINEAR)

    def __repr__(self) -> str:
        return f"RgbStandard({self.space.name}, {self.transfer.name})"


class LumaStandard(NamedTuple):
    white_point: WhitePoint
    transfer: TransferFn

    @property
    def is_linear(self) -> bool:
        return self.transfer.is_linear

    def linear(self) -> LumaStandard:
        return LumaStandard(self.white_point, LINEAR)

    def __repr__(self) -> str:
        return f"LumaStandard({self.white_point.name}, {self.transfer.name})"


SRGB_PRIMARIES = Primaries(
    red=(0.6400, 0.3300),
    green=(0.3000, 0.6000),
    blue=(0.1500, 0.0600),
)
SRGB_SPACE = RgbSpace("sRGB", D65, SRGB_PRIMARIES)

SRGB = RgbStandard(SRGB_SPACE, SRGB_TRANSFER)
LINEAR_SRGB = RgbStandard(SRGB_SPACE, LINEAR)
GAMMA_SRGB = RgbStandard(SRGB_SPACE, GAMMA_2_2)

SRGB_LUMA = LumaStandard(D65, SRGB_TRANSFER)
LINEAR_LUMA = LumaStandard(D65, LINEAR)
GAMMA_LUMA = LumaStandard(D65, GAMMA_2_2)
