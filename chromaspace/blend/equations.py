"""
Blend equations on premultiplied channels.

Every mode is a pair ``(channel_fn, alpha_fn)``: ``channel_fn(s, d, sa, da)``
combines one premultiplied source channel with the matching destination
channel, and ``alpha_fn(sa, da)`` gives the resulting opacity. The
Porter-Duff operators carry their own alpha rule; the separable modes all
use ``sa + da - sa * da``.
"""
from __future__ import annotations
from enum import Enum
from math import sqrt
from typing import Callable, Dict, Tuple

ChannelFn = Callable[[float, float, float, float], float]
AlphaFn = Callable[[float, float], float]


class BlendMode(str, Enum):
    OVER = "over"
    INSIDE = "inside"
    OUTSIDE = "outside"
    ATOP = "atop"
    XOR = "xor"
    PLUS = "plus"
    MULTIPLY = "multiply"
    SCREEN = "screen"
    OVERLAY = "overlay"
    DARKEN = "darken"
    LIGHTEN = "lighten"
    DODGE = "dodge"
    BURN = "burn"
    HARD_LIGHT = "hard_light"
    SOFT_LIGHT = "soft_light"
    DIFFERENCE = "difference"
    EXCLUSION = "exclusion"


def _remainder(s: float, d: float, sa: float, da: float) -> float:
    # the parts of each layer not covered by the other
    return s * (1.0 - da) + d * (1.0 - sa)


def _union_alpha(sa: float, da: float) -> float:
    return sa + da - sa * da


# ------------------ PORTER-DUFF ------------------
def over(s, d, sa, da):
    return s + d * (1.0 - sa)


def inside(s, d, sa, da):
    return s * da


def outside(s, d, sa, da):
    return s * (1.0 - da)


def atop(s, d, sa, da):
    return s * da + d * (1.0 - sa)


def xor(s, d, sa, da):
    return s * (1.0 - da) + d * (1.0 - sa)


def plus(s, d, sa, da):
    return s + d


# ------------------ SEPARABLE ------------------
def multiply(s, d, sa, da):
    return s * d + _remainder(s, d, sa, da)


def screen(s, d, sa, da):
    return s + d - s * d


def hard_light(s, d, sa, da):
    if s * 2.0 <= sa:
        return 2.0 * s * d + _remainder(s, d, sa, da)
    return s * (1.0 + da) + d * (1.0 + sa) - sa * da - 2.0 * s * d


def overlay(s, d, sa, da):
    """Hard light with the layers swapped."""
    return hard_light(d, s, da, sa)


def darken(s, d, sa, da):
    return min(s * da, d * sa) + _remainder(s, d, sa, da)


def lighten(s, d, sa, da):
    return max(s * da, d * sa) + _remainder(s, d, sa, da)


def dodge(s, d, sa, da):
    if s == sa and d == 0.0:
        return s * (1.0 - da)
    if s == sa:
        return sa * da + _remainder(s, d, sa, da)
    ratio = d / da if da > 0.0 else 0.0
    return sa * da * min(1.0, ratio * sa / (sa - s)) + _remainder(s, d, sa, da)


def burn(s, d, sa, da):
    if s == 0.0 and d == da:
        return sa * da + d * (1.0 - sa)
    if s == 0.0:
        return d * (1.0 - sa)
    ratio = d / da if da > 0.0 else 0.0
    return sa * da * (1.0 - min(1.0, (1.0 - ratio) * sa / s)) + _remainder(s, d, sa, da)


def soft_light(s, d, sa, da):
    m = d / da if da > 0.0 else 0.0
    if s * 2.0 <= sa:
        return d * (sa + (2.0 * s - sa) * (1.0 - m)) + _remainder(s, d, sa, da)
    if d * 4.0 <= da:
        m2 = m * m
        return da * (2.0 * s - sa) * (16.0 * m2 * m - 12.0 * m2 + 3.0 * m) + s - s * da + d
    return da * (2.0 * s - sa) * (sqrt(m) - m) + s - s * da + d


def difference(s, d, sa, da):
    return s + d - 2.0 * min(s * da, d * sa)


def exclusion(s, d, sa, da):
    return s + d - 2.0 * s * d


BLEND_FUNCTIONS: Dict[BlendMode, Tuple[ChannelFn, AlphaFn]] = {
    BlendMode.OVER: (over, lambda sa, da: sa + da * (1.0 - sa)),
    BlendMode.INSIDE: (inside, lambda sa, da: sa * da),
    BlendMode.OUTSIDE: (outside, lambda sa, da: sa * (1.0 - da)),
    BlendMode.ATOP: (atop, lambda sa, da: da),
    BlendMode.XOR: (xor, lambda sa, da: sa + da - 2.0 * sa * da),
    BlendMode.PLUS: (plus, lambda sa, da: min(sa + da, 1.0)),
    BlendMode.MULTIPLY: (multiply, _union_alpha),
    BlendMode.SCREEN: (screen, _union_alpha),
    BlendMode.OVERLAY: (overlay, _union_alpha),
    BlendMode.DARKEN: (darken, _union_alpha),
    BlendMode.LIGHTEN: (lighten, _union_alpha),
    BlendMode.DODGE: (dodge, _union_alpha),
    BlendMode.BURN: (burn, _union_alpha),
    BlendMode.HARD_LIGHT: (hard_light, _union_alpha),
    BlendMode.SOFT_LIGHT: (soft_light, _union_alpha),
    BlendMode.DIFFERENCE: (difference, _union_alpha),
    BlendMode.EXCLUSION: (exclusion, _union_alpha),
}
