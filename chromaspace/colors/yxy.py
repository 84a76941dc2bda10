from __future__ import annotations
from typing import ClassVar, List, Tuple

from ..colorimetry.white_point import D65, WhitePoint
from ..types.color_types import ColorSpace
from .color_base import ColorBase, Limit, channel


class Yxy(ColorBase):
    """CIE xyY: chromaticity ``x, y`` plus luminance ``luma``."""
    __slots__ = ()

    space: ClassVar[ColorSpace] = ColorSpace.YXY
    fields: ClassVar[Tuple[str, ...]] = ('x', 'y', 'luma')
    channels: ClassVar[int] = 3
    tag_name: ClassVar[str] = 'white_point'
    tag_type: ClassVar[type] = WhitePoint
    default_tag: ClassVar[WhitePoint] = D65
    limits: ClassVar[Tuple[Limit, ...]] = ((0.0, 1.0), (0.0, 1.0), (0.0, 1.0))

    x = channel(0)
    y = channel(1)
    luma = channel(2)

    @property
    def white_point(self) -> WhitePoint:
        return self._tag

    def _shade(self, amount: float) -> List[float]:
        x, y, luma = self._value
        return [x, y, luma + amount]
