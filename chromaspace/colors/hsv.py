from __future__ import annotations
from typing import ClassVar, List, Optional, Tuple

from ..colorimetry.rgb_space import SRGB_SPACE, RgbSpace
from ..colorimetry.white_point import WhitePoint
from ..types.color_types import ColorSpace
from .color_base import ColorBase, Limit, NativeHue, channel


class Hsv(NativeHue, ColorBase):
    """
    Hue, saturation and value computed on the linear RGB of ``space``.
    """
    __slots__ = ()

    space: ClassVar[ColorSpace] = ColorSpace.HSV
    fields: ClassVar[Tuple[str, ...]] = ('hue', 'saturation', 'value')
    channels: ClassVar[int] = 3
    tag_name: ClassVar[str] = 'space'
    tag_type: ClassVar[type] = RgbSpace
    default_tag: ClassVar[RgbSpace] = SRGB_SPACE
    limits: ClassVar[Tuple[Limit, ...]] = (None, (0.0, 1.0), (0.0, 1.0))
    hue_index: ClassVar[int] = 0
    saturation_index: ClassVar[Optional[int]] = 1

    hue = channel(0)
    saturation = channel(1)
    value = channel(2)

    @property
    def rgb_space(self) -> RgbSpace:
        return self._tag

    @property
    def white_point(self) -> WhitePoint:
        return self._tag.white_point

    def _hue_defined(self) -> bool:
        _, saturation, value = self._value
        return saturation > 0.0 and value > 0.0

    def _shade(self, amount: float) -> List[float]:
        hue, saturation, value = self._value
        return [hue, saturation, value + amount]
