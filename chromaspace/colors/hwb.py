from __future__ import annotations
from typing import ClassVar, List, Tuple

from boundednumbers import clamp01

from ..colorimetry.rgb_space import SRGB_SPACE, RgbSpace
from ..colorimetry.white_point import WhitePoint
from ..types.color_types import ColorSpace
from .color_base import ColorBase, Limit, NativeHue, channel


class Hwb(NativeHue, ColorBase):
    """
    Hue, whiteness and blackness, derived from HSV.

    Whiteness and blackness each lie in [0, 1] and together may not exceed
    1; clamping rescales an oversized pair onto that edge. Saturation goes
    through Lch because HWB stores none.
    """
    __slots__ = ()

    space: ClassVar[ColorSpace] = ColorSpace.HWB
    fields: ClassVar[Tuple[str, ...]] = ('hue', 'whiteness', 'blackness')
    channels: ClassVar[int] = 3
    tag_name: ClassVar[str] = 'space'
    tag_type: ClassVar[type] = RgbSpace
    default_tag: ClassVar[RgbSpace] = SRGB_SPACE
    limits: ClassVar[Tuple[Limit, ...]] = (None, (0.0, 1.0), (0.0, 1.0))
    hue_index: ClassVar[int] = 0

    hue = channel(0)
    whiteness = channel(1)
    blackness = channel(2)

    @property
    def rgb_space(self) -> RgbSpace:
        return self._tag

    @property
    def white_point(self) -> WhitePoint:
        return self._tag.white_point

    def _hue_defined(self) -> bool:
        _, whiteness, blackness = self._value
        return whiteness + blackness < 1.0

    def is_valid(self) -> bool:
        _, whiteness, blackness = self._value
        return super().is_valid() and whiteness + blackness <= 1.0

    def _clamped_values(self) -> List[float]:
        hue, whiteness, blackness = self._value
        whiteness = clamp01(whiteness)
        blackness = clamp01(blackness)
        total = whiteness + blackness
        if total > 1.0:
            whiteness /= total
            blackness = 1.0 - whiteness
        return [hue, whiteness, blackness]

    def _shade(self, amount: float) -> List[float]:
        hue, whiteness, blackness = self._value
        return [hue, whiteness + amount, blackness - amount]
