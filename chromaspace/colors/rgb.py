from __future__ import annotations
from typing import ClassVar, List, Optional, Tuple

from ..colorimetry.rgb_space import GAMMA_SRGB, LINEAR_SRGB, SRGB, RgbStandard
from ..colorimetry.white_point import WhitePoint
from ..types.color_types import ColorSpace
from .color_base import ColorBase, Limit, channel


class Rgb(ColorBase):
    """
    RGB in any standard (primaries + white point + transfer function).

    The only space, together with luma, that accepts unsigned integer
    components. Mixing and shading require a linear transfer function.
    """
    __slots__ = ()

    space: ClassVar[ColorSpace] = ColorSpace.RGB
    fields: ClassVar[Tuple[str, ...]] = ('red', 'green', 'blue')
    channels: ClassVar[int] = 3
    tag_name: ClassVar[str] = 'standard'
    tag_type: ClassVar[type] = RgbStandard
    default_tag: ClassVar[RgbStandard] = SRGB
    integer_components: ClassVar[bool] = True

    red = channel(0)
    green = channel(1)
    blue = channel(2)

    @property
    def standard(self) -> RgbStandard:
        return self._tag

    @property
    def white_point(self) -> WhitePoint:
        return self._tag.white_point

    def _limits(self) -> Tuple[Limit, ...]:
        return ((0, self._format.max_intensity),) * 3

    def _require_linear(self, operation: str) -> None:
        if not self._tag.is_linear:
            raise TypeError(
                f"{operation} needs linear RGB, this color uses the {self._tag.transfer.name} "
                "transfer function; convert it to a linear standard first"
            )

    def mix(self, other: Rgb, factor: float) -> Rgb:
        self._require_linear("mix")
        return super().mix(other, factor)

    def _shade(self, amount: float) -> List[float]:
        self._require_linear("lighten")
        step = amount * self._format.max_intensity
        return [v + step for v in self._value]

    def get_hue(self) -> Optional[float]:
        r, g, b = self._value
        if r == g == b:
            return None
        return super().get_hue()


class Srgb(Rgb):
    __slots__ = ()
    default_tag: ClassVar[RgbStandard] = SRGB


class LinSrgb(Rgb):
    __slots__ = ()
    default_tag: ClassVar[RgbStandard] = LINEAR_SRGB


class GammaSrgb(Rgb):
    __slots__ = ()
    default_tag: ClassVar[RgbStandard] = GAMMA_SRGB
