import numpy as np
import pytest

from chromaspace.colorimetry import D50, SRGB_SPACE
from chromaspace.colors import Alpha, Color, Hsv, Lab, Lch, LinLuma, LinSrgb, Srgb, Xyz
from chromaspace.types import ColorSpace, TagMismatchError


def test_wraps_any_variant():
    for inner in (LinSrgb(0.1, 0.2, 0.3), LinLuma(0.4), Xyz(0.2, 0.3, 0.4), Lab(50.0, 0.0, 0.0),
                  Lch(50.0, 10.0, 20.0), Hsv(10.0, 0.5, 0.5)):
        color = Color(inner)
        assert color.inner == inner
        assert color.variant == inner.space
        assert color.rgb_space == SRGB_SPACE


def test_rejects_encoded_and_integer_values():
    with pytest.raises(TypeError, match="linear"):
        Color(Srgb(0.1, 0.2, 0.3))
    with pytest.raises(TypeError, match="floating point"):
        Color(LinSrgb(0.1, 0.2, 0.3).into_format("u8"))
    with pytest.raises(TypeError):
        Color((0.1, 0.2, 0.3))


def test_rejects_foreign_white_point():
    with pytest.raises(TagMismatchError):
        Color(Lab(50.0, 0.0, 0.0, white_point=D50))


def test_into_space():
    color = Color(LinSrgb(1.0, 0.0, 0.0))
    lch = color.into_space(ColorSpace.LCH)
    assert lch.variant == ColorSpace.LCH
    assert isinstance(lch.inner, Lch)
    back = lch.into_space("rgb")
    assert np.allclose(back.into_raw(), (1.0, 0.0, 0.0), atol=1e-9)
    assert color.into_linear_rgb() == LinSrgb(1.0, 0.0, 0.0)


def test_mix_works_in_linear_rgb():
    red = Color(Hsv(0.0, 1.0, 1.0))
    green = Color(Hsv(120.0, 1.0, 1.0))
    mixed = red.mix(green, 0.5)
    assert mixed.variant == ColorSpace.HSV
    assert np.allclose(mixed.into_raw(), (60.0, 1.0, 0.5))


def test_mix_accepts_other_variants():
    a = Color(LinSrgb(0.0, 0.0, 0.0))
    b = Color(LinSrgb(1.0, 1.0, 1.0)).into_space(ColorSpace.XYZ)
    mixed = a.mix(b, 0.5)
    assert mixed.variant == ColorSpace.RGB
    assert np.allclose(mixed.into_raw(), (0.5, 0.5, 0.5))


def test_lighten_keeps_the_variant():
    color = Color(LinSrgb(0.2, 0.2, 0.2))
    lighter = color.lighten(0.1)
    assert lighter.variant == ColorSpace.RGB
    l_before = color.convert(Lab).l
    assert lighter.convert(Lab).l == pytest.approx(l_before + 10.0)
    assert color.lighten(0.1) == color.darken(-0.1)


def test_hue_operations():
    color = Color(Lch(50.0, 20.0, 30.0))
    assert color.get_hue() == 30.0
    assert color.shift_hue(360.0).get_hue() == pytest.approx(30.0)
    assert Color(LinSrgb(0.5, 0.5, 0.5)).get_hue() is None

    rgb = Color(LinSrgb(0.4, 0.2, 0.1))
    assert rgb.with_hue(100.0).convert(Lch).hue == pytest.approx(100.0)
    assert rgb.saturate(0.3) == rgb.desaturate(-0.3)


def test_clamp_and_validity():
    color = Color(LinSrgb(1.2, 0.5, -0.1))
    assert not color.is_valid()
    assert color.clamp().inner == LinSrgb(1.0, 0.5, 0.0)
    color.clamp_self()
    assert color.is_valid()


def test_arithmetic_converts_the_operand():
    a = Color(LinSrgb(0.1, 0.2, 0.3))
    b = Color(LinSrgb(0.1, 0.1, 0.1)).into_space(ColorSpace.XYZ)
    total = a + b
    assert total.variant == ColorSpace.RGB
    assert np.allclose(total.into_raw(), (0.2, 0.3, 0.4))
    assert np.allclose((a * 2).into_raw(), (0.2, 0.4, 0.6))
    assert np.allclose(a.scale(0.5).into_raw(), (0.05, 0.1, 0.15))


def test_with_alpha():
    a = Color(LinSrgb(0.1, 0.2, 0.3)).with_alpha(0.5)
    assert isinstance(a, Alpha)
    assert isinstance(a.color, Color)


def test_equality():
    assert Color(LinSrgb(0.1, 0.2, 0.3)) == Color(LinSrgb(0.1, 0.2, 0.3))
    assert Color(LinSrgb(0.1, 0.2, 0.3)) != Color(LinSrgb(0.1, 0.2, 0.4))
    assert repr(Color(LinLuma(0.5))).startswith("Color(LinLuma(")
