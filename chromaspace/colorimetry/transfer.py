"""
Transfer functions relating stored RGB/luma values to linear light.

``into_linear`` decodes (stored -> linear), ``from_linear`` encodes
(linear -> stored). Each function has a scalar and a numpy variant.
"""
from __future__ import annotations
import math
from dataclasses import dataclass

import numpy as np
from numpy import ndarray as NDArray


## sRGB curve

def srgb_into_linear(x: float) -> float:
    if x <= 0.04045:
        return x / 12.92
    return ((x + 0.055) / 1.055) ** 2.4


def srgb_from_linear(x: float) -> float:
    if x <= 0.0031308:
        return x * 12.92
    return 1.055 * x ** (1.0 / 2.4) - 0.055


def np_srgb_into_linear(x: NDArray) -> NDArray:
    x = np.asarray(x, dtype=float)
    # clip inside the power branch only to keep np.power away from negatives
    high = np.power((np.maximum(x, 0.04045) + 0.055) / 1.055, 2.4)
    return np.where(x <= 0.04045, x / 12.92, high)


def np_srgb_from_linear(x: NDArray) -> NDArray:
    x = np.asarray(x, dtype=float)
    high = 1.055 * np.power(np.maximum(x, 0.0031308), 1.0 / 2.4) - 0.055
    return np.where(x <= 0.0031308, x * 12.92, high)


## Pure power curve

def gamma_into_linear(x: float, gamma: float) -> float:
    return math.copysign(abs(x) ** gamma, x)


def gamma_from_linear(x: float, gamma: float) -> float:
    return math.copysign(abs(x) ** (1.0 / gamma), x)


class TransferFn:
    """Base class of the encode/decode pairs."""

    name: str = "transfer"

    @property
    def is_linear(self) -> bool:
        return False

    def into_linear(self, x: float) -> float:
        raise NotImplementedError

    def from_linear(self, x: float) -> float:
        raise NotImplementedError

    def np_into_linear(self, x: NDArray) -> NDArray:
        return np.vectorize(self.into_linear, otypes=[float])(x)

    def np_from_linear(self, x: NDArray) -> NDArray:
        return np.vectorize(self.from_linear, otypes=[float])(x)


@dataclass(frozen=True)
class LinearFn(TransferFn):
    name: str = "linear"

    @property
    def is_linear(self) -> bool:
        return True

    def into_linear(self, x: float) -> float:
        return x

    def from_linear(self, x: float) -> float:
        return x

    def np_into_linear(self, x: NDArray) -> NDArray:
        return np.asarray(x, dtype=float)

    def np_from_linear(self, x: NDArray) -> NDArray:
        return np.asarray(x, dtype=float)


@dataclass(frozen=True)
class SrgbFn(TransferFn):
    name: str = "srgb"

    def into_linear(self, x: float) -> float:
        return srgb_into_linear(x)

    def from_linear(self, x: float) -> float:
        return srgb_from_linear(x)

    def np_into_linear(self, x: NDArray) -> NDArray:
        return np_srgb_into_linear(x)

    def np_from_linear(self, x: NDArray) -> NDArray:
        return np_srgb_from_linear(x)


@dataclass(frozen=True)
class GammaFn(TransferFn):
    gamma: float = 2.2
    name: str = "gamma"

    def __post_init__(self):
        if not self.gamma > 0:
            raise ValueError(f"gamma must be positive, got {self.gamma!r}")

    def into_linear(self, x: float) -> float:
        return gamma_into_linear(x, self.gamma)

    def from_linear(self, x: float) -> float:
        return gamma_from_linear(x, self.gamma)

    def np_into_linear(self, x: NDArray) -> NDArray:
        x = np.asarray(x, dtype=float)
        return np.sign(x) * np.power(np.abs(x), self.gamma)

    def np_from_linear(self, x: NDArray) -> NDArray:
        x = np.asarray(x, dtype=float)
        return np.sign(x) * np.power(np.abs(x), 1.0 / self.gamma)


LINEAR = LinearFn()
SRGB = SrgbFn()
GAMMA_2_2 = GammaFn(2.2)
