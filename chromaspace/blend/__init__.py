"""
Chromaspace Blending
====================

Alpha compositing on premultiplied linear channels.

Usage
-----
>>> from chromaspace.colors import LinSrgb, Alpha
>>> from chromaspace.blend import blend, BlendMode
>>> top = Alpha(LinSrgb(1.0, 0.0, 0.0), 0.5)
>>> bottom = Alpha(LinSrgb(0.0, 0.0, 1.0), 1.0)
>>> top.over(bottom)
>>> blend(top, bottom, BlendMode.SCREEN)
"""

from .equations import BLEND_FUNCTIONS, BlendMode
from .pre_alpha import PreAlpha, premultiply, unpremultiply
from .compositing import blend, blend_premultiplied

__all__ = [
    'BlendMode', 'BLEND_FUNCTIONS',
    'PreAlpha', 'premultiply', 'unpremultiply',
    'blend', 'blend_premultiplied',
]
