from __future__ import annotations
from typing import ClassVar, List, Tuple

from ..colorimetry.white_point import D65, WhitePoint
from ..types.color_types import ColorSpace
from .color_base import ColorBase, Limit, channel


class Lab(ColorBase):
    """
    CIE L*a*b*.

    ``l`` is lightness in [0, 100]; ``a`` runs green to red and ``b`` blue to
    yellow, both nominally in [-128, 127].
    """
    __slots__ = ()

    space: ClassVar[ColorSpace] = ColorSpace.LAB
    fields: ClassVar[Tuple[str, ...]] = ('l', 'a', 'b')
    channels: ClassVar[int] = 3
    tag_name: ClassVar[str] = 'white_point'
    tag_type: ClassVar[type] = WhitePoint
    default_tag: ClassVar[WhitePoint] = D65
    limits: ClassVar[Tuple[Limit, ...]] = ((0.0, 100.0), (-128.0, 127.0), (-128.0, 127.0))

    l = channel(0)
    a = channel(1)
    b = channel(2)

    @property
    def white_point(self) -> WhitePoint:
        return self._tag

    def _shade(self, amount: float) -> List[float]:
        l, a, b = self._value
        return [l + amount * 100.0, a, b]
