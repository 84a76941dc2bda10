"""Basic Chromaspace usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from chromaspace import (
    Alpha,
    BlendMode,
    Color,
    D50,
    D65,
    FormatType,
    Gradient,
    Hsv,
    Lab,
    Lch,
    LinSrgb,
    Srgb,
    Xyz,
    adapt,
    blend,
)


def demonstrate_colors() -> None:
    # Decode an 8-bit sRGB pixel and look at it in a few spaces.
    accent = Srgb(255, 128, 64, format_type=FormatType.U8).into_format(FormatType.F32)
    print("sRGB as floats:", accent.into_raw())
    print("sRGB -> Lab:", accent.convert(Lab).into_raw())
    print("sRGB -> HSV (linear):", accent.convert(Hsv).into_raw())

    # Hue and lightness edits happen in perceptual spaces.
    print("Hue of the accent:", accent.get_hue())
    print("Complement:", accent.shift_hue(180.0).into_raw())
    print("Lighter in Lab:", accent.convert(Lab).lighten(0.1).convert(Srgb).into_raw())

    # A D50 measurement has to be adapted before it can become sRGB.
    measured = Xyz(0.4, 0.35, 0.2, white_point=D50)
    print("Adapted to sRGB:", adapt(measured, D65).convert(Srgb).into_raw())


def demonstrate_gradients() -> None:
    # Mixing is done on linear light; hue gradients take the short way round.
    strip = Gradient([LinSrgb(1.0, 0.0, 0.0), LinSrgb(0.0, 0.0, 1.0)])
    print("Linear RGB gradient:", [c.convert(Srgb).into_raw() for c in strip.take(3)])

    ring = Gradient.with_domain([
        (0.0, Lch(60.0, 40.0, 120.0)),
        (0.8, Lch(60.0, 40.0, 300.0)),
        (1.0, Lch(30.0, 10.0, 300.0)),
    ])
    print("Lch gradient hues:", [round(c.hue, 1) for c in ring.take(5)])

    mixed = Gradient([Color(Hsv(0.0, 1.0, 1.0)), Color(Lab(50.0, 0.0, 0.0))])
    print("Any-space gradient midpoint:", mixed.get(0.5))


def demonstrate_blending() -> None:
    red = Alpha(LinSrgb(1.0, 0.0, 0.0), 0.5)
    blue = Alpha(LinSrgb(0.0, 0.0, 1.0), 1.0)
    print("Red over blue:", red.over(blue).into_raw())
    print("Screen:", blend(red, blue, BlendMode.SCREEN).into_raw())


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_gradients()
    demonstrate_blending()
