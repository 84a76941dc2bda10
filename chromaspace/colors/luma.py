from __future__ import annotations
from typing import ClassVar, List, Optional, Tuple

from ..colorimetry.rgb_space import GAMMA_LUMA, LINEAR_LUMA, SRGB_LUMA, LumaStandard
from ..colorimetry.white_point import WhitePoint
from ..types.color_types import ColorSpace
from .color_base import ColorBase, Limit, channel


class Luma(ColorBase):
    """Single channel luminance. Grays have no hue, so hue and saturation
    operations return the color unchanged."""
    __slots__ = ()

    space: ClassVar[ColorSpace] = ColorSpace.LUMA
    fields: ClassVar[Tuple[str, ...]] = ('luma',)
    channels: ClassVar[int] = 1
    tag_name: ClassVar[str] = 'standard'
    tag_type: ClassVar[type] = LumaStandard
    default_tag: ClassVar[LumaStandard] = SRGB_LUMA
    integer_components: ClassVar[bool] = True

    luma = channel(0)

    @property
    def standard(self) -> LumaStandard:
        return self._tag

    @property
    def white_point(self) -> WhitePoint:
        return self._tag.white_point

    def _limits(self) -> Tuple[Limit, ...]:
        return ((0, self._format.max_intensity),)

    def _require_linear(self, operation: str) -> None:
        if not self._tag.is_linear:
            raise TypeError(
                f"{operation} needs linear luma, this color uses the {self._tag.transfer.name} "
                "transfer function"
            )

    def mix(self, other: Luma, factor: float) -> Luma:
        self._require_linear("mix")
        return super().mix(other, factor)

    def _shade(self, amount: float) -> List[float]:
        self._require_linear("lighten")
        return [self._value[0] + amount * self._format.max_intensity]

    def get_hue(self) -> Optional[float]:
        return None

    def with_hue(self, hue: float) -> Luma:
        return self

    def shift_hue(self, amount: float) -> Luma:
        return self

    def saturate(self, factor: float) -> Luma:
        return self


class SrgbLuma(Luma):
    __slots__ = ()
    default_tag: ClassVar[LumaStandard] = SRGB_LUMA


class LinLuma(Luma):
    __slots__ = ()
    default_tag: ClassVar[LumaStandard] = LINEAR_LUMA


class GammaLuma(Luma):
    __slots__ = ()
    default_tag: ClassVar[LumaStandard] = GAMMA_LUMA
