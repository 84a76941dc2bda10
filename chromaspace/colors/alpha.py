from __future__ import annotations
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

import numpy as np
from numpy import ndarray
from boundednumbers import clamp, clamp01

from ..conversions import convert_component
from ..types.format_type import DEFAULT_FORMAT, FormatType, default_format_dtypes, format_classes, format_valid_dtypes
from ..types.color_types import RawPixel, Scalar, ScalarVector
from .color import Color
from .color_base import ColorBase, dtype_formats

# Attributes read straight from the wrapped color
_FORWARDED = frozenset({'space', 'tag', 'tag_name', 'standard', 'white_point', 'rgb_space', 'has_hue'})


class Alpha:
    """
    A color plus an opacity channel.

    Composition rather than inheritance: ``color`` keeps its own type and
    ``alpha`` is stored in the same component format. Color-intrinsic
    operations (shading, hue, saturation, conversion, arithmetic) act on the
    color and carry the alpha over unchanged. ``mix`` interpolates the
    alpha as well, and ``scale`` multiplies both.
    """
    __slots__ = ('_color', '_alpha', '_is_frozen')

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, color: ColorBase | Color, alpha: Scalar) -> None:
        if not isinstance(color, (ColorBase, Color)):
            raise TypeError(f"Alpha wraps a color value, got {type(color).__name__}")
        fmt = color.format_type
        if not isinstance(alpha, format_valid_dtypes[fmt]):
            raise TypeError(f"alpha must be one of {format_valid_dtypes[fmt]} for {fmt.value}, got {type(alpha).__name__}")
        alpha = format_classes[fmt](alpha)
        if fmt.limited and not 0 <= alpha <= fmt.max_intensity:
            raise ValueError(f"alpha={alpha} is outside the {fmt.value} range [0, {fmt.max_intensity}]")

        self._color = color
        self._alpha = alpha
        super().__setattr__('_is_frozen', True)

    def __getattr__(self, name: str) -> Any:
        color = object.__getattribute__(self, '_color')
        if name in _FORWARDED or name in color.fields:
            return getattr(color, name)
        raise AttributeError(f"{self.__class__.__name__} has no attribute {name!r}")

    @property
    def color(self) -> ColorBase:
        return self._color

    @property
    def alpha(self) -> Scalar:
        return self._alpha

    @property
    def format_type(self) -> FormatType:
        return self._color.format_type

    @property
    def channels(self) -> int:
        return self._color.channels + 1

    @property
    def fields(self) -> Tuple[str, ...]:
        return self._color.fields + ('alpha',)

    def _wrap(self, color: ColorBase) -> Alpha:
        return Alpha(color, self._alpha)

    def with_alpha(self, alpha: Scalar) -> Alpha:
        return Alpha(self._color, alpha)

    # ------------------ COMPARISON ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alpha):
            return NotImplemented
        return self._color == other._color and self._alpha == other._alpha

    def __hash__(self) -> int:
        return hash((self._color, self._alpha))

    def __repr__(self) -> str:
        return f"Alpha({self._color!r}, alpha={self._alpha!r})"

    # ------------------ RAW PIXELS ------------------
    def into_raw(self) -> ScalarVector:
        return self._color.into_raw() + (self._alpha,)

    @classmethod
    def from_raw(
        cls,
        raw: RawPixel,
        color_cls: type[ColorBase],
        format_type: FormatType | str = DEFAULT_FORMAT,
        **tags: Any,
    ) -> Alpha:
        """Build from ``color_cls.channels + 1`` components, alpha last."""
        if isinstance(raw, ndarray):
            raw = raw.tolist()
        if len(raw) != color_cls.channels + 1:
            raise ValueError(
                f"Alpha of {color_cls.__name__} expects {color_cls.channels + 1} raw components, got {len(raw)}"
            )
        *channels, alpha = raw
        return cls(color_cls.from_raw(channels, format_type, **tags), alpha)

    @classmethod
    def from_raw_slice(
        cls,
        buffer: RawPixel,
        color_cls: type[ColorBase],
        format_type: FormatType | str | None = None,
        **tags: Any,
    ) -> List[Alpha]:
        arr = np.asarray(buffer)
        width = color_cls.channels + 1
        if arr.size % width:
            raise ValueError(f"buffer of {arr.size} components is not a whole number of {width}-channel pixels")
        if format_type is None:
            try:
                format_type = dtype_formats[arr.dtype]
            except KeyError:
                raise TypeError(f"cannot infer a component format from dtype {arr.dtype}") from None
        return [cls.from_raw(px, color_cls, format_type, **tags) for px in arr.reshape(-1, width).tolist()]

    @staticmethod
    def into_raw_slice(colors: Iterable[Alpha]) -> ndarray:
        colors = list(colors)
        fmt = colors[0].format_type if colors else DEFAULT_FORMAT
        if any(c.format_type != fmt for c in colors):
            raise ValueError("all colors in a raw slice must share one component format")
        return np.array([c.into_raw() for c in colors], dtype=default_format_dtypes[fmt]).reshape(-1)

    def as_dict(self) -> Dict[str, Scalar]:
        data = self._color.as_dict()
        data['alpha'] = self._alpha
        return data

    @classmethod
    def from_dict(
        cls,
        mapping: Mapping[str, Scalar],
        color_cls: type[ColorBase],
        format_type: FormatType | str = DEFAULT_FORMAT,
        **tags: Any,
    ) -> Alpha:
        if 'alpha' not in mapping:
            raise ValueError("missing field 'alpha'")
        fields = {k: v for k, v in mapping.items() if k != 'alpha'}
        return cls(color_cls.from_dict(fields, format_type, **tags), mapping['alpha'])

    # ------------------ FORMATS & CONVERSION ------------------
    def into_format(self, format_type: FormatType | str) -> Alpha:
        fmt = FormatType(format_type)
        return Alpha(self._color.into_format(fmt), convert_component(self._alpha, self.format_type, fmt))

    def convert(self, to: Any, **tags: Any) -> Alpha:
        return self._wrap(self._color.convert(to, **tags))

    # ------------------ LIMITED ------------------
    def _alpha_valid(self) -> bool:
        return 0 <= self._alpha <= self.format_type.max_intensity

    def is_valid(self) -> bool:
        return self._color.is_valid() and self._alpha_valid()

    def clamp(self) -> Alpha:
        return Alpha(self._color.clamp(), clamp(self._alpha, 0, self.format_type.max_intensity))

    def clamp_self(self) -> None:
        clamped = self.clamp()
        object.__setattr__(self, '_color', clamped._color)
        object.__setattr__(self, '_alpha', clamped._alpha)

    # ------------------ ALGEBRA ------------------
    def mix(self, other: Alpha, factor: float) -> Alpha:
        """Mix color and opacity with the same factor."""
        if not isinstance(other, Alpha):
            raise TypeError(f"cannot mix Alpha with {type(other).__name__}")
        t = clamp01(factor)
        return Alpha(
            self._color.mix(other._color, t),
            self._alpha * (1.0 - t) + other._alpha * t,
        )

    def lighten(self, amount: float) -> Alpha:
        return self._wrap(self._color.lighten(amount))

    def darken(self, amount: float) -> Alpha:
        return self._wrap(self._color.darken(amount))

    def get_hue(self) -> Optional[float]:
        return self._color.get_hue()

    def with_hue(self, hue: float) -> Alpha:
        return self._wrap(self._color.with_hue(hue))

    def shift_hue(self, amount: float) -> Alpha:
        return self._wrap(self._color.shift_hue(amount))

    def saturate(self, factor: float) -> Alpha:
        return self._wrap(self._color.saturate(factor))

    def desaturate(self, factor: float) -> Alpha:
        return self._wrap(self._color.desaturate(factor))

    def _color_of(self, other):
        return other._color if isinstance(other, Alpha) else other

    def component_wise(self, other, fn) -> Alpha:
        return self._wrap(self._color.component_wise(self._color_of(other), fn))

    def component_wise_self(self, fn) -> Alpha:
        return self._wrap(self._color.component_wise_self(fn))

    def add(self, other) -> Alpha:
        return self._wrap(self._color.add(self._color_of(other)))

    def subtract(self, other) -> Alpha:
        return self._wrap(self._color.subtract(self._color_of(other)))

    def multiply(self, other) -> Alpha:
        return self._wrap(self._color.multiply(self._color_of(other)))

    def divide(self, other) -> Alpha:
        return self._wrap(self._color.divide(self._color_of(other)))

    def scale(self, factor: float) -> Alpha:
        """Scale the color channels and the opacity."""
        alpha = self._alpha * factor
        if self.format_type.limited:
            top = self.format_type.max_intensity
            alpha = min(int(round(clamp(alpha, 0, top))), top)
        return Alpha(self._color.scale(factor), alpha)

    __add__ = add
    __sub__ = subtract
    __mul__ = multiply
    __truediv__ = divide
