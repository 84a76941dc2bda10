"""
Chromaspace Color Classes
=========================

Immutable color values for every supported space. Each value is a fixed
tuple of components plus a tag: the RGB/luma standard, white point or RGB
space that gives the numbers their meaning.

Features
--------
- Immutable color instances (frozen after initialization; ``clamp_self``
  is the one in-place operation)
- Float components everywhere, unsigned integer components for Rgb and Luma
- Mixing, shading, hue and saturation on every space
- Component-wise arithmetic with ``+ - * /``
- Raw pixel and field-dict interfaces for codecs and serializers
- Alpha as a wrapper (``Alpha``) and a generic any-space ``Color``

Usage
-----
>>> from chromaspace.colors import Srgb, LinSrgb, Lch, Alpha
>>> orange = Srgb(1.0, 0.5, 0.0)
>>> orange.convert(Lch).get_hue()
>>> LinSrgb(0.0, 0.5, 1.0).mix(LinSrgb(1.0, 0.5, 0.0), 0.5)
LinSrgb(red=0.5, green=0.5, blue=0.5, standard=RgbStandard(sRGB, linear))
>>> Alpha(orange, 0.5).lighten(0.1)

Color Classes
-------------
    - Rgb (Srgb, LinSrgb, GammaSrgb): red, green, blue
    - Luma (SrgbLuma, LinLuma, GammaLuma): luma
    - Xyz: x, y, z
    - Yxy: x, y, luma
    - Lab: l, a, b
    - Lch: l, chroma, hue
    - Hsv: hue, saturation, value
    - Hsl: hue, saturation, lightness
    - Hwb: hue, whiteness, blackness
"""

from .color_base import ColorBase, build_registry
from .rgb import Rgb, Srgb, LinSrgb, GammaSrgb
from .luma import Luma, SrgbLuma, LinLuma, GammaLuma
from .xyz import Xyz
from .yxy import Yxy
from .lab import Lab
from .lch import Lch
from .hsv import Hsv
from .hsl import Hsl
from .hwb import Hwb
from . import arithmetic  # installs +, -, *, / and the named arithmetic on ColorBase
from .color import Color
from .alpha import Alpha

color_classes = build_registry(Rgb, Luma, Xyz, Yxy, Lab, Lch, Hsv, Hsl, Hwb)

__all__ = [
    'ColorBase',
    'Rgb', 'Srgb', 'LinSrgb', 'GammaSrgb',
    'Luma', 'SrgbLuma', 'LinLuma', 'GammaLuma',
    'Xyz', 'Yxy', 'Lab', 'Lch', 'Hsv', 'Hsl', 'Hwb',
    'Color', 'Alpha',
    'color_classes',
]
