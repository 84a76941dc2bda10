from __future__ import annotations
import math
from typing import Any, ClassVar, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Self

import numpy as np
from numpy import ndarray
from boundednumbers import clamp, clamp01

from ..conversions import convert, convert_component
from ..types.format_type import (
    DEFAULT_FORMAT,
    FormatType,
    default_format_dtypes,
    format_classes,
    format_valid_dtypes,
)
from ..types.color_types import ColorSpace, RawPixel, Scalar, ScalarVector, TagMismatchError
from ..utils.hue import hue_lerp, normalize_hue

Limit = Optional[Tuple[float, float]]

dtype_formats: Dict[np.dtype, FormatType] = {
    np.dtype(dtype): fmt for fmt, dtype in default_format_dtypes.items()
}


def channel(index: int, doc: str | None = None) -> property:
    """Read-only accessor for one component of ``_value``."""
    def getter(self: ColorBase) -> Scalar:
        return self._value[index]
    return property(getter, doc=doc)


class ColorBase:
    __slots__ = ('_value', '_tag', '_format', '_is_frozen')

    space:        ClassVar[ColorSpace]
    fields:       ClassVar[Tuple[str, ...]]
    channels:     ClassVar[int]
    tag_name:     ClassVar[str]
    tag_type:     ClassVar[type]
    default_tag:  ClassVar[Any]
    limits:       ClassVar[Tuple[Limit, ...]] = ()
    hue_index:    ClassVar[Optional[int]] = None
    integer_components: ClassVar[bool] = False

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, *components: Scalar, format_type: FormatType | str = DEFAULT_FORMAT, **tags: Any) -> None:
        fmt = FormatType(format_type)
        if fmt.limited and not self.integer_components:
            raise TypeError(f"{self.space.value} only supports floating point components, got {fmt.value}")
        if len(components) != self.channels:
            raise ValueError(
                f"{self.__class__.__name__} expects {self.channels} components {self.fields}, got {len(components)}"
            )

        self._tag = self._resolve_tag(tags)
        self._format = fmt
        self._value = self._coerce(components, fmt)

        # freeze instance; clamp_self is the only writer after this point
        super().__setattr__('_is_frozen', True)

    @classmethod
    def _resolve_tag(cls, tags: Dict[str, Any]) -> Any:
        tag = tags.pop(cls.tag_name, None)
        if tags:
            raise TypeError(
                f"{cls.__name__} got unexpected keyword(s) {sorted(tags)}; its tag is {cls.tag_name!r}"
            )
        if tag is None:
            return cls.default_tag
        if not isinstance(tag, cls.tag_type):
            raise TypeError(f"{cls.tag_name} must be a {cls.tag_type.__name__}, got {type(tag).__name__}")
        return tag

    def _coerce(self, components: Sequence[Scalar], fmt: FormatType) -> ScalarVector:
        valid_types = format_valid_dtypes[fmt]
        cast = format_classes[fmt]
        values = []
        for name, v in zip(self.fields, components):
            if not isinstance(v, valid_types):
                raise TypeError(f"{name} must be one of {valid_types} for {fmt.value}, got {type(v).__name__}")
            values.append(cast(v))

        if fmt.limited:
            for name, v in zip(self.fields, values):
                if not 0 <= v <= fmt.max_intensity:
                    raise ValueError(f"{name}={v} is outside the {fmt.value} range [0, {fmt.max_intensity}]")
        elif self.hue_index is not None:
            values[self.hue_index] = normalize_hue(values[self.hue_index])
        return tuple(values)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def components(self) -> ScalarVector:
        return self._value

    @property
    def tag(self) -> Any:
        return self._tag

    @property
    def format_type(self) -> FormatType:
        return self._format

    @property
    def has_hue(self) -> bool:
        return self.hue_index is not None

    @property
    def white_point(self):
        raise NotImplementedError

    def _replace(self, values: Iterable[float]) -> Self:
        """New color of the same class, tag and format with ``values``."""
        values = list(values)
        if self._format.limited:
            top = self._format.max_intensity
            values = [0 if math.isnan(v) else min(int(round(clamp(v, 0, top))), top) for v in values]
        return self.__class__(*values, format_type=self._format, **{self.tag_name: self._tag})

    def _require_float(self, operation: str) -> None:
        if self._format.limited:
            raise TypeError(
                f"{operation} requires floating point components; "
                f"call into_format(FormatType.F32) on this {self._format.value} color first"
            )

    def _check_compatible(self, other: Any, operation: str) -> None:
        if not isinstance(other, ColorBase) or other.space != self.space:
            raise TypeError(
                f"cannot {operation} {self.__class__.__name__} with {type(other).__name__}"
            )
        if other._tag != self._tag:
            raise TagMismatchError(
                f"cannot {operation} colors tagged {self._tag!r} and {other._tag!r}"
            )
        if other._format != self._format:
            raise TypeError(
                f"cannot {operation} {self._format.value} and {other._format.value} components"
            )

    # ------------------ COMPARISON ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return (
            self.space == other.space
            and self._tag == other._tag
            and self._format == other._format
            and self._value == other._value
        )

    def __hash__(self) -> int:
        return hash((self.space, self._tag, self._format, self._value))

    def __repr__(self) -> str:
        parts = [f"{name}={v!r}" for name, v in zip(self.fields, self._value)]
        parts.append(f"{self.tag_name}={self._tag!r}")
        if self._format != DEFAULT_FORMAT:
            parts.append(f"format_type={self._format.value!r}")
        return f"{self.__class__.__name__}({', '.join(parts)})"

    # ------------------ RAW PIXELS ------------------
    def into_raw(self) -> ScalarVector:
        return self._value

    @classmethod
    def from_raw(cls, raw: RawPixel, format_type: FormatType | str = DEFAULT_FORMAT, **tags: Any) -> Self:
        if isinstance(raw, ndarray):
            raw = raw.tolist()
        if len(raw) != cls.channels:
            raise ValueError(f"{cls.__name__} expects {cls.channels} raw components, got {len(raw)}")
        return cls(*raw, format_type=format_type, **tags)

    @classmethod
    def from_raw_slice(cls, buffer: RawPixel, format_type: FormatType | str | None = None, **tags: Any) -> List[Self]:
        """
        Read a flat buffer of interleaved pixels.

        The component format follows the buffer dtype unless given.

        Raises:
            ValueError: if the buffer length is not a multiple of ``channels``
        """
        arr = np.asarray(buffer)
        if arr.size % cls.channels:
            raise ValueError(
                f"buffer of {arr.size} components is not a whole number of {cls.channels}-channel pixels"
            )
        if format_type is None:
            try:
                format_type = dtype_formats[arr.dtype]
            except KeyError:
                raise TypeError(f"cannot infer a component format from dtype {arr.dtype}") from None
        return [cls(*px, format_type=format_type, **tags) for px in arr.reshape(-1, cls.channels).tolist()]

    @classmethod
    def into_raw_slice(cls, colors: Iterable[ColorBase]) -> ndarray:
        """Flatten colors into one interleaved buffer of their format's dtype."""
        colors = list(colors)
        fmt = colors[0].format_type if colors else DEFAULT_FORMAT
        if any(c.format_type != fmt for c in colors):
            raise ValueError("all colors in a raw slice must share one component format")
        return np.array([c.into_raw() for c in colors], dtype=default_format_dtypes[fmt]).reshape(-1)

    def as_dict(self) -> Dict[str, Scalar]:
        return dict(zip(self.fields, self._value))

    @classmethod
    def from_dict(cls, mapping: Mapping[str, Scalar], format_type: FormatType | str = DEFAULT_FORMAT, **tags: Any) -> Self:
        if set(mapping) != set(cls.fields):
            raise ValueError(f"{cls.__name__} expects fields {cls.fields}, got {tuple(mapping)}")
        return cls(*(mapping[name] for name in cls.fields), format_type=format_type, **tags)

    # ------------------ FORMATS & CONVERSION ------------------
    def into_format(self, format_type: FormatType | str) -> Self:
        fmt = FormatType(format_type)
        values = [convert_component(v, self._format, fmt) for v in self._value]
        return self.__class__(*values, format_type=fmt, **{self.tag_name: self._tag})

    def convert(self, to: Any, **tags: Any) -> ColorBase:
        """Convert into another space (a ``ColorSpace`` or a color class)."""
        return convert(self, to, **tags)

    def with_alpha(self, alpha: Scalar):
        from .alpha import Alpha  # local import to avoid cycles
        return Alpha(self, alpha)

    # ------------------ LIMITED ------------------
    def _limits(self) -> Tuple[Limit, ...]:
        return self.limits

    def is_valid(self) -> bool:
        return all(
            limit is None or limit[0] <= v <= limit[1]
            for v, limit in zip(self._value, self._limits())
        )

    def _clamped_values(self) -> List[Scalar]:
        return [
            v if limit is None else clamp(v, limit[0], limit[1])
            for v, limit in zip(self._value, self._limits())
        ]

    def clamp(self) -> Self:
        return self._replace(self._clamped_values())

    def clamp_self(self) -> None:
        """Clamp in place. The only mutation a color supports."""
        object.__setattr__(self, '_value', self.clamp()._value)

    # ------------------ MIX & SHADE ------------------
    def mix(self, other: Self, factor: float) -> Self:
        """
        Linear interpolation towards ``other``.

        ``factor`` is clamped to [0, 1]. Hue channels take the shortest path
        around the wheel.
        """
        self._check_compatible(other, "mix")
        self._require_float("mix")
        t = clamp01(factor)
        values = []
        for i, (a, b) in enumerate(zip(self._value, other._value)):
            if i == self.hue_index:
                values.append(hue_lerp(a, b, t))
            else:
                values.append(a * (1.0 - t) + b * t)
        return self._replace(values)

    def _shade(self, amount: float) -> List[float]:
        raise NotImplementedError

    def lighten(self, amount: float) -> Self:
        self._require_float("lighten")
        return self._replace(self._shade(amount))

    def darken(self, amount: float) -> Self:
        return self.lighten(-amount)

    # ------------------ HUE & SATURATION ------------------
    def _via_lch(self, operation):
        from .lch import Lch  # local import to avoid cycles
        self._require_float("hue and saturation operations")
        lch = operation(self.convert(Lch))
        return convert(lch, self.__class__, **{self.tag_name: self._tag})

    def get_hue(self) -> Optional[float]:
        from .lch import Lch
        self._require_float("get_hue")
        return self.convert(Lch).get_hue()

    def with_hue(self, hue: float) -> Self:
        return self._via_lch(lambda lch: lch.with_hue(hue))

    def shift_hue(self, amount: float) -> Self:
        return self._via_lch(lambda lch: lch.shift_hue(amount))

    def saturate(self, factor: float) -> Self:
        return self._via_lch(lambda lch: lch.saturate(factor))

    def desaturate(self, factor: float) -> Self:
        return self.saturate(-factor)


class NativeHue:
    """
    Mixin for spaces that store a hue channel.

    Assumes the host class sets ``hue_index`` and a ``saturation_index``
    (or ``None`` when saturation is not a stored channel).
    """
    __slots__ = ()

    hue_index: ClassVar[int]
    saturation_index: ClassVar[Optional[int]] = None

    def _hue_defined(self) -> bool:
        raise NotImplementedError

    def get_hue(self) -> Optional[float]:
        self._require_float("get_hue")
        if not self._hue_defined():
            return None
        return self._value[self.hue_index]

    def with_hue(self, hue: float) -> Self:
        self._require_float("with_hue")
        values = list(self._value)
        values[self.hue_index] = hue
        return self._replace(values)

    def shift_hue(self, amount: float) -> Self:
        return self.with_hue(self._value[self.hue_index] + amount)

    def saturate(self, factor: float) -> Self:
        if self.saturation_index is None:
            return super().saturate(factor)
        self._require_float("saturate")
        values = list(self._value)
        values[self.saturation_index] *= 1.0 + factor
        return self._replace(values)


def build_registry(*classes: type[ColorBase]) -> Dict[ColorSpace, type[ColorBase]]:
    return {cls.space: cls for cls in classes}
