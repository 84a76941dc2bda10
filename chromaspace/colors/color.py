"""
The generic ``Color`` sum type.

A ``Color`` holds one floating point value from any supported space, with
every variant sharing a single RGB space. Operations pick a working space,
run there and convert the result back into the variant the color started
in: mixing and blending use linear RGB, shading uses Lab, and hue and
saturation use Lch.
"""
from __future__ import annotations
from typing import Any, Dict, Optional, Tuple

from ..colorimetry.rgb_space import SRGB_SPACE, LumaStandard, RgbSpace, RgbStandard
from ..colorimetry.transfer import LINEAR
from ..conversions import convert
from ..types.color_types import ColorSpace, ScalarVector, TagMismatchError
from ..types.format_type import FormatType
from .color_base import ColorBase
from .hsl import Hsl
from .hsv import Hsv
from .hwb import Hwb
from .lab import Lab
from .lch import Lch
from .luma import Luma
from .rgb import Rgb
from .xyz import Xyz
from .yxy import Yxy

variant_classes: Dict[ColorSpace, type[ColorBase]] = {
    cls.space: cls for cls in (Luma, Rgb, Xyz, Yxy, Lab, Lch, Hsv, Hsl, Hwb)
}


def _rgb_space_of(inner: ColorBase) -> RgbSpace:
    if inner.space == ColorSpace.RGB:
        return inner.tag.space
    if inner.space in (ColorSpace.HSV, ColorSpace.HSL, ColorSpace.HWB):
        return inner.tag
    return SRGB_SPACE


def variant_tag(space: ColorSpace, rgb_space: RgbSpace) -> Any:
    """The tag a variant must carry inside a ``Color`` over ``rgb_space``."""
    if space == ColorSpace.RGB:
        return RgbStandard(rgb_space, LINEAR)
    if space == ColorSpace.LUMA:
        return LumaStandard(rgb_space.white_point, LINEAR)
    if space in (ColorSpace.HSV, ColorSpace.HSL, ColorSpace.HWB):
        return rgb_space
    return rgb_space.white_point


class Color:
    """
    Any-space color over one RGB space.

    Args:
        inner: The wrapped value. Rgb and Luma must be linear.
        rgb_space: Shared RGB space; taken from ``inner`` when it has one,
            otherwise sRGB.

    Raises:
        TypeError: for integer components or non-linear Rgb/Luma
        TagMismatchError: when ``inner`` is tagged for another space or white point
    """
    __slots__ = ('_inner', '_rgb_space', '_is_frozen')

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, inner: ColorBase, rgb_space: Optional[RgbSpace] = None) -> None:
        if isinstance(inner, Color):
            inner = inner.inner
        if not isinstance(inner, ColorBase):
            raise TypeError(f"Color wraps a color value, got {type(inner).__name__}")
        if inner.format_type.limited:
            raise TypeError("Color requires floating point components")
        if inner.space in (ColorSpace.RGB, ColorSpace.LUMA) and not inner.tag.is_linear:
            raise TypeError(f"Color only holds linear {inner.space.value}; got {inner.tag!r}")

        rgb_space = rgb_space or _rgb_space_of(inner)
        expected = variant_tag(inner.space, rgb_space)
        if inner.tag != expected:
            raise TagMismatchError(
                f"{type(inner).__name__} tagged {inner.tag!r} does not belong to a Color over {rgb_space!r}"
            )
        self._inner = inner
        self._rgb_space = rgb_space
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def inner(self) -> ColorBase:
        return self._inner

    @property
    def variant(self) -> ColorSpace:
        return self._inner.space

    @property
    def rgb_space(self) -> RgbSpace:
        return self._rgb_space

    @property
    def format_type(self) -> FormatType:
        return self._inner.format_type

    @property
    def fields(self) -> Tuple[str, ...]:
        return self._inner.fields

    @property
    def channels(self) -> int:
        return self._inner.channels

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._rgb_space == other._rgb_space and self._inner == other._inner

    def __hash__(self) -> int:
        return hash((self._rgb_space, self._inner))

    def __repr__(self) -> str:
        return f"Color({self._inner!r})"

    # ------------------ VARIANT SWITCHING ------------------
    def into_space(self, space: ColorSpace | str) -> Color:
        """Same color, held as another variant."""
        space = ColorSpace(space)
        inner = convert(self._inner, variant_classes[space], **{
            variant_classes[space].tag_name: variant_tag(space, self._rgb_space)
        })
        return Color(inner, self._rgb_space)

    def _working(self, space: ColorSpace) -> ColorBase:
        return self.into_space(space).inner

    def _restore(self, working: ColorBase) -> Color:
        """Convert a working-space result back into this color's variant."""
        inner = convert(working, type(self._inner), **{self._inner.tag_name: self._inner.tag})
        return Color(inner, self._rgb_space)

    def _coerce_other(self, other: Any, operation: str) -> Color:
        if isinstance(other, ColorBase):
            other = Color(other, self._rgb_space)
        if not isinstance(other, Color):
            raise TypeError(f"cannot {operation} Color with {type(other).__name__}")
        if other._rgb_space != self._rgb_space:
            raise TagMismatchError(f"cannot {operation} colors over {self._rgb_space!r} and {other._rgb_space!r}")
        return other

    def convert(self, to: Any, **tags: Any) -> ColorBase:
        return self._inner.convert(to, **tags)

    def into_linear_rgb(self) -> Rgb:
        return self._working(ColorSpace.RGB)

    # ------------------ RAW PIXELS ------------------
    def into_raw(self) -> ScalarVector:
        return self._inner.into_raw()

    def as_dict(self) -> Dict[str, float]:
        return self._inner.as_dict()

    def into_format(self, format_type: FormatType | str) -> Color:
        return Color(self._inner.into_format(format_type), self._rgb_space)

    def with_alpha(self, alpha: float):
        from .alpha import Alpha  # local import to avoid cycles
        return Alpha(self, alpha)

    # ------------------ ALGEBRA ------------------
    def mix(self, other: Color, factor: float) -> Color:
        """Mix in linear RGB."""
        other = self._coerce_other(other, "mix")
        mixed = self._working(ColorSpace.RGB).mix(other._working(ColorSpace.RGB), factor)
        return self._restore(mixed)

    def lighten(self, amount: float) -> Color:
        return self._restore(self._working(ColorSpace.LAB).lighten(amount))

    def darken(self, amount: float) -> Color:
        return self.lighten(-amount)

    def get_hue(self) -> Optional[float]:
        return self._inner.get_hue()

    def with_hue(self, hue: float) -> Color:
        return self._restore(self._working(ColorSpace.LCH).with_hue(hue))

    def shift_hue(self, amount: float) -> Color:
        return self._restore(self._working(ColorSpace.LCH).shift_hue(amount))

    def saturate(self, factor: float) -> Color:
        return self._restore(self._working(ColorSpace.LCH).saturate(factor))

    def desaturate(self, factor: float) -> Color:
        return self.saturate(-factor)

    def is_valid(self) -> bool:
        return self._inner.is_valid()

    def clamp(self) -> Color:
        return Color(self._inner.clamp(), self._rgb_space)

    def clamp_self(self) -> None:
        object.__setattr__(self, '_inner', self._inner.clamp())

    def _arith(self, other: Any, name: str) -> Color:
        if isinstance(other, (Color, ColorBase)):
            other = self._coerce_other(other, name).into_space(self.variant).inner
        return Color(getattr(self._inner, name)(other), self._rgb_space)

    def component_wise(self, other: Any, fn) -> Color:
        other = self._coerce_other(other, "combine").into_space(self.variant).inner
        return Color(self._inner.component_wise(other, fn), self._rgb_space)

    def component_wise_self(self, fn) -> Color:
        return Color(self._inner.component_wise_self(fn), self._rgb_space)

    def add(self, other: Any) -> Color:
        return self._arith(other, "add")

    def subtract(self, other: Any) -> Color:
        return self._arith(other, "subtract")

    def multiply(self, other: Any) -> Color:
        return self._arith(other, "multiply")

    def divide(self, other: Any) -> Color:
        return self._arith(other, "divide")

    def scale(self, factor: float) -> Color:
        return Color(self._inner.scale(factor), self._rgb_space)

    __add__ = add
    __sub__ = subtract
    __mul__ = multiply
    __truediv__ = divide
