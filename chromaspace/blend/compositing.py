from __future__ import annotations
from typing import Union, overload

from ..colors.alpha import Alpha
from ..colors.color import Color
from ..types.color_types import TagMismatchError
from .equations import BLEND_FUNCTIONS, BlendMode
from .pre_alpha import PreAlpha, premultiply, unpremultiply


def blend_premultiplied(src: PreAlpha, dst: PreAlpha, mode: BlendMode | str) -> PreAlpha:
    """Combine two premultiplied values channel by channel."""
    if len(src.channels) != len(dst.channels):
        raise ValueError(
            f"cannot blend {len(src.channels)}-channel and {len(dst.channels)}-channel values"
        )
    channel_fn, alpha_fn = BLEND_FUNCTIONS[BlendMode(mode)]
    sa, da = src.alpha, dst.alpha
    return PreAlpha(
        tuple(channel_fn(s, d, sa, da) for s, d in zip(src.channels, dst.channels)),
        alpha_fn(sa, da),
    )


def _check_blendable(src: Alpha, dst: Alpha) -> None:
    a, b = src.color, dst.color
    if isinstance(a, Color) or isinstance(b, Color):
        if not (isinstance(a, Color) and isinstance(b, Color)):
            raise TypeError("a Color can only be blended with another Color")
        if a.rgb_space != b.rgb_space:
            raise TagMismatchError(f"cannot blend colors over {a.rgb_space!r} and {b.rgb_space!r}")
        return
    a._check_compatible(b, "blend")


@overload
def blend(src: Alpha, dst: Alpha, mode: BlendMode | str = ...) -> Alpha: ...
@overload
def blend(src: PreAlpha, dst: PreAlpha, mode: BlendMode | str = ...) -> PreAlpha: ...

def blend(src, dst, mode=BlendMode.OVER):
    """
    Composite ``src`` onto ``dst``.

    ``Alpha`` values are premultiplied, combined and divided back out; the
    result has the type, tag and format of ``src``. ``Alpha`` values wrapping
    a ``Color`` blend through linear RGB and come back in the source's
    variant. ``PreAlpha`` values are combined as they are.

    Raises:
        TypeError: for operands that are not both ``Alpha`` or both
            ``PreAlpha``, or colors that cannot be premultiplied
        TagMismatchError: when the two colors carry different tags
    """
    if isinstance(src, PreAlpha) and isinstance(dst, PreAlpha):
        return blend_premultiplied(src, dst, mode)
    if not (isinstance(src, Alpha) and isinstance(dst, Alpha)):
        raise TypeError(f"cannot blend {type(src).__name__} with {type(dst).__name__}")
    _check_blendable(src, dst)
    result = blend_premultiplied(premultiply(src), premultiply(dst), mode)
    return unpremultiply(result, src)


def _blend_method(mode: BlendMode):
    def method(self: Alpha, dst: Alpha) -> Alpha:
        return blend(self, dst, mode)
    method.__name__ = mode.value
    method.__doc__ = f"Blend onto ``dst`` with the {mode.value} operator."
    return method


def _blend(self: Alpha, dst: Alpha, mode: BlendMode | str = BlendMode.OVER) -> Alpha:
    return blend(self, dst, mode)


# Inject blend methods into Alpha; modes whose name is already an Alpha
# operation (multiply, darken, lighten) go through Alpha.blend only.
Alpha.blend = _blend
for _mode in BlendMode:
    if not hasattr(Alpha, _mode.value):
        setattr(Alpha, _mode.value, _blend_method(_mode))
del _mode
