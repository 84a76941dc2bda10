"""Premultiplied alpha values and the conversions in and out of them."""
from __future__ import annotations
from typing import NamedTuple, Tuple, Union

from ..colors.alpha import Alpha
from ..colors.color import Color
from ..colors.color_base import ColorBase
from ..types.color_types import ColorSpace


class PreAlpha(NamedTuple):
    """Linear channels already multiplied by ``alpha``."""
    channels: Tuple[float, ...]
    alpha: float


def _linear_color(value: Alpha) -> ColorBase:
    color = value.color
    if isinstance(color, Color):
        return color.into_linear_rgb()
    if color.format_type.limited:
        raise TypeError("premultiplying requires floating point components")
    if color.space not in (ColorSpace.RGB, ColorSpace.LUMA) or not color.tag.is_linear:
        raise TypeError(
            f"premultiplying requires linear RGB or linear luma, got {type(color).__name__} "
            f"tagged {color.tag!r}"
        )
    return color


def premultiply(value: Alpha) -> PreAlpha:
    """
    Multiply the linear channels by alpha.

    Raises:
        TypeError: for non-linear, non-RGB/luma or integer colors
    """
    color = _linear_color(value)
    alpha = float(value.alpha)
    return PreAlpha(tuple(c * alpha for c in color.into_raw()), alpha)


def unpremultiply(pre: PreAlpha, like: Union[Alpha, ColorBase, Color]) -> Alpha:
    """
    Divide the channels back out, producing an ``Alpha`` shaped like ``like``.

    A fully transparent value has no recoverable color; its channels are 0.
    """
    if pre.alpha == 0.0:
        channels = [0.0] * len(pre.channels)
    else:
        channels = [c / pre.alpha for c in pre.channels]

    template = like.color if isinstance(like, Alpha) else like
    if isinstance(template, Color):
        linear = template.into_linear_rgb()
        rgb = type(linear)(*channels, format_type=linear.format_type, standard=linear.tag)
        return Alpha(Color(rgb, template.rgb_space).into_space(template.variant), pre.alpha)
    color = type(template)(*channels, format_type=template.format_type, **{template.tag_name: template.tag})
    return Alpha(color, pre.alpha)
