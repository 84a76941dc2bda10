from __future__ import annotations
from typing import ClassVar, List, Tuple

from ..colorimetry.white_point import D65, WhitePoint
from ..types.color_types import ColorSpace
from .color_base import ColorBase, Limit, channel


class Xyz(ColorBase):
    """
    CIE 1931 XYZ, the conversion hub.

    ``y`` is the luminance; the valid range of every channel runs from 0 to
    the reference white of the tagged white point.
    """
    __slots__ = ()

    space: ClassVar[ColorSpace] = ColorSpace.XYZ
    fields: ClassVar[Tuple[str, ...]] = ('x', 'y', 'z')
    channels: ClassVar[int] = 3
    tag_name: ClassVar[str] = 'white_point'
    tag_type: ClassVar[type] = WhitePoint
    default_tag: ClassVar[WhitePoint] = D65

    x = channel(0)
    y = channel(1)
    z = channel(2)

    @property
    def white_point(self) -> WhitePoint:
        return self._tag

    def _limits(self) -> Tuple[Limit, ...]:
        return tuple((0.0, ref) for ref in self._tag.xyz)

    def _shade(self, amount: float) -> List[float]:
        x, y, z = self._value
        return [x, y + amount, z]
