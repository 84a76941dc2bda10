from __future__ import annotations
from typing import ClassVar, List, Optional, Tuple

from ..colorimetry.white_point import D65, WhitePoint
from ..types.color_types import ColorSpace
from .color_base import ColorBase, Limit, NativeHue, channel


class Lch(NativeHue, ColorBase):
    """
    CIE L*C*h, the cylindrical form of Lab.

    Hue is undefined (``get_hue`` returns None) when chroma is not positive.
    Chroma has no upper bound.
    """
    __slots__ = ()

    space: ClassVar[ColorSpace] = ColorSpace.LCH
    fields: ClassVar[Tuple[str, ...]] = ('l', 'chroma', 'hue')
    channels: ClassVar[int] = 3
    tag_name: ClassVar[str] = 'white_point'
    tag_type: ClassVar[type] = WhitePoint
    default_tag: ClassVar[WhitePoint] = D65
    limits: ClassVar[Tuple[Limit, ...]] = ((0.0, 100.0), (0.0, float('inf')), None)
    hue_index: ClassVar[int] = 2
    saturation_index: ClassVar[Optional[int]] = 1

    l = channel(0)
    chroma = channel(1)
    hue = channel(2)

    @property
    def white_point(self) -> WhitePoint:
        return self._tag

    def _hue_defined(self) -> bool:
        return self._value[1] > 0.0

    def _shade(self, amount: float) -> List[float]:
        l, chroma, hue = self._value
        return [l + amount * 100.0, chroma, hue]
