import numpy as np
import pytest

from chromaspace.colorimetry import D50
from chromaspace.colors import Hsl, Hsv, Hwb, Lab, Lch, LinLuma, LinSrgb, Luma, Srgb, Xyz, Yxy
from chromaspace.types import TagMismatchError


class TestMix:
    def test_linear_rgb_midpoint(self):
        a = LinSrgb(0.0, 0.5, 1.0)
        b = LinSrgb(1.0, 0.5, 0.0)
        assert a.mix(b, 0.5) == LinSrgb(0.5, 0.5, 0.5)

    @pytest.mark.parametrize("a, b", [
        (LinSrgb(0.1, 0.7, 0.3), LinSrgb(0.9, 0.2, 0.4)),
        (Lab(20.0, 5.0, -30.0), Lab(80.0, -40.0, 10.0)),
        (Lch(40.0, 30.0, 350.0), Lch(60.0, 10.0, 20.0)),
        (Hsv(300.0, 0.2, 0.9), Hsv(30.0, 0.8, 0.1)),
        (Hwb(10.0, 0.1, 0.2), Hwb(200.0, 0.5, 0.3)),
        (LinLuma(0.2), LinLuma(0.8)),
    ])
    def test_endpoints(self, a, b):
        assert a.mix(b, 0.0) == a
        assert a.mix(b, 1.0) == b

    def test_factor_is_clamped(self):
        a, b = Lab(20.0, 0.0, 0.0), Lab(80.0, 0.0, 0.0)
        assert a.mix(b, -1.0) == a
        assert a.mix(b, 2.0) == b

    def test_hue_takes_shortest_path(self):
        mixed = Lch(50.0, 20.0, 350.0).mix(Lch(50.0, 20.0, 30.0), 0.5)
        assert mixed.hue == pytest.approx(10.0)
        assert Hsl(340.0, 0.5, 0.5).mix(Hsl(20.0, 0.5, 0.5), 0.25).hue == pytest.approx(350.0)

    def test_encoded_rgb_cannot_mix(self):
        with pytest.raises(TypeError, match="linear"):
            Srgb(0.1, 0.2, 0.3).mix(Srgb(0.3, 0.2, 0.1), 0.5)
        with pytest.raises(TypeError, match="linear"):
            Luma(0.1).mix(Luma(0.5), 0.5)

    def test_mismatched_colors_cannot_mix(self):
        with pytest.raises(TagMismatchError):
            Lab(50.0, 0.0, 0.0).mix(Lab(50.0, 0.0, 0.0, white_point=D50), 0.5)
        with pytest.raises(TypeError):
            Lab(50.0, 0.0, 0.0).mix(Lch(50.0, 0.0, 0.0), 0.5)

    def test_mixed_component_formats_cannot_mix(self):
        with pytest.raises(TypeError, match="f32 and f64"):
            LinSrgb(0.1, 0.2, 0.3).mix(LinSrgb(0.1, 0.2, 0.3, format_type="f64"), 0.5)

    def test_integer_colors_cannot_mix(self):
        a = LinSrgb(0.0, 0.0, 0.0).into_format("u8")
        with pytest.raises(TypeError, match="floating point"):
            a.mix(a, 0.5)


class TestShade:
    def test_lab_lightness_scale(self):
        assert Lab(50.0, 10.0, 10.0).lighten(0.1).l == pytest.approx(60.0)
        assert Lch(50.0, 10.0, 10.0).darken(0.25).l == pytest.approx(25.0)

    def test_unit_channels(self):
        assert LinSrgb(0.2, 0.3, 0.4).lighten(0.1) == LinSrgb(0.2 + 0.1, 0.3 + 0.1, 0.4 + 0.1)
        assert Hsv(0.0, 0.5, 0.5).lighten(0.2).value == pytest.approx(0.7)
        assert Hsl(0.0, 0.5, 0.5).darken(0.2).lightness == pytest.approx(0.3)
        hwb = Hwb(0.0, 0.3, 0.3).lighten(0.1)
        assert (hwb.whiteness, hwb.blackness) == pytest.approx((0.4, 0.2))
        assert Xyz(0.2, 0.3, 0.4).lighten(0.1).y == pytest.approx(0.4)
        assert Yxy(0.3, 0.3, 0.5).lighten(0.1).luma == pytest.approx(0.6)
        assert LinLuma(0.5).darken(0.5).luma == pytest.approx(0.0)

    @pytest.mark.parametrize("color", [
        LinSrgb(0.2, 0.5, 0.7), Lab(40.0, 10.0, -5.0), Hsv(30.0, 0.4, 0.6), Hwb(90.0, 0.2, 0.3),
    ])
    @pytest.mark.parametrize("amount", [0.0, 0.15, -0.3])
    def test_lighten_is_negated_darken(self, color, amount):
        assert color.lighten(amount) == color.darken(-amount)

    def test_shading_does_not_clamp(self):
        bright = LinSrgb(0.9, 0.9, 0.9).lighten(0.5)
        assert not bright.is_valid()
        assert bright.clamp() == LinSrgb(1.0, 1.0, 1.0)

    def test_encoded_rgb_cannot_shade(self):
        with pytest.raises(TypeError, match="linear"):
            Srgb(0.5, 0.5, 0.5).lighten(0.1)


class TestHue:
    def test_gray_has_no_hue(self):
        assert Lch(50.0, 0.0, 0.0).get_hue() is None
        assert LinSrgb(0.5, 0.5, 0.5).get_hue() is None
        assert Srgb(0.2, 0.2, 0.2).get_hue() is None
        assert Hsv(120.0, 0.0, 0.5).get_hue() is None
        assert Hsv(120.0, 0.5, 0.0).get_hue() is None
        assert Hsl(120.0, 0.0, 0.5).get_hue() is None
        assert Hwb(120.0, 0.6, 0.4).get_hue() is None
        assert LinLuma(0.5).get_hue() is None

    def test_native_hue(self):
        assert Lch(50.0, 10.0, 40.0).get_hue() == 40.0
        assert Hsv(200.0, 0.5, 0.5).get_hue() == 200.0
        assert Hwb(200.0, 0.2, 0.2).get_hue() == 200.0

    def test_hue_through_lch(self):
        red = Srgb(1.0, 0.0, 0.0)
        assert red.get_hue() == pytest.approx(red.convert(Lch).hue)
        assert Lab(50.0, 0.0, 20.0).get_hue() == pytest.approx(90.0)

    @pytest.mark.parametrize("color", [
        Lch(50.0, 20.0, 30.0), Hsv(30.0, 0.5, 0.5), Hsl(30.0, 0.5, 0.5), Hwb(30.0, 0.2, 0.3),
    ])
    def test_full_turn_keeps_the_hue(self, color):
        assert color.shift_hue(360.0).get_hue() == pytest.approx(30.0)
        assert color.shift_hue(-720.0).get_hue() == pytest.approx(30.0)

    def test_shift_and_set_hue(self):
        assert Hsv(350.0, 0.5, 0.5).shift_hue(20.0).hue == pytest.approx(10.0)
        assert Lch(50.0, 20.0, 30.0).with_hue(-10.0).hue == pytest.approx(350.0)

    def test_shift_hue_of_rgb_round_trips_through_lch(self):
        color = LinSrgb(0.4, 0.2, 0.1)
        shifted = color.shift_hue(120.0)
        assert isinstance(shifted, LinSrgb)
        assert shifted.standard == color.standard
        back = shifted.shift_hue(-120.0)
        assert np.allclose(back.into_raw(), color.into_raw(), atol=1e-9)

    def test_luma_ignores_hue_and_saturation(self):
        luma = LinLuma(0.3)
        assert luma.with_hue(120.0) is luma
        assert luma.shift_hue(10.0) is luma
        assert luma.saturate(0.5) is luma


class TestSaturate:
    def test_native_saturation(self):
        assert Hsv(0.0, 0.5, 0.5).saturate(0.5).saturation == pytest.approx(0.75)
        assert Hsl(0.0, 0.4, 0.5).desaturate(0.5).saturation == pytest.approx(0.2)
        assert Lch(50.0, 20.0, 0.0).saturate(1.0).chroma == pytest.approx(40.0)

    @pytest.mark.parametrize("color", [
        Lch(50.0, 20.0, 30.0), Hsv(30.0, 0.5, 0.5), LinSrgb(0.6, 0.3, 0.2), Lab(50.0, 10.0, 10.0),
    ])
    @pytest.mark.parametrize("factor", [0.0, 0.25, -0.5])
    def test_saturate_is_negated_desaturate(self, color, factor):
        assert color.saturate(factor) == color.desaturate(-factor)

    def test_saturate_does_not_clamp(self):
        over = Hsv(0.0, 0.8, 0.5).saturate(0.5)
        assert over.saturation == pytest.approx(1.2)
        assert not over.is_valid()

    def test_full_desaturation_through_lch(self):
        gray = Lab(50.0, 20.0, -10.0).desaturate(1.0)
        assert gray.a == pytest.approx(0.0, abs=1e-9)
        assert gray.b == pytest.approx(0.0, abs=1e-9)

    def test_hwb_saturates_through_lch(self):
        assert isinstance(Hwb(30.0, 0.2, 0.2).saturate(0.2), Hwb)


class TestLimits:
    @pytest.mark.parametrize("color, expected", [
        (LinSrgb(1.5, -0.2, 0.5), LinSrgb(1.0, 0.0, 0.5)),
        (Lab(120.0, -200.0, 50.0), Lab(100.0, -128.0, 50.0)),
        (Lch(-5.0, -3.0, 40.0), Lch(0.0, 0.0, 40.0)),
        (Xyz(2.0, 0.5, -1.0), Xyz(0.95047, 0.5, 0.0)),
        (Yxy(1.2, 0.3, -0.1), Yxy(1.0, 0.3, 0.0)),
        (Hsv(10.0, 1.5, -0.5), Hsv(10.0, 1.0, 0.0)),
        (Hsl(10.0, 0.5, 2.0), Hsl(10.0, 0.5, 1.0)),
        (LinLuma(-0.1), LinLuma(0.0)),
    ])
    def test_clamp(self, color, expected):
        assert not color.is_valid()
        assert color.clamp() == expected
        assert expected.is_valid()

    def test_xyz_limits_follow_the_white_point(self):
        assert Xyz(0.96, 1.0, 0.8, white_point=D50).is_valid()
        assert not Xyz(0.96, 1.0, 0.8).is_valid()

    def test_lch_chroma_is_unbounded(self):
        assert Lch(50.0, 500.0, 10.0).is_valid()

    def test_hwb_sum_constraint(self):
        assert Hwb(0.0, 0.5, 0.5).is_valid()
        assert not Hwb(0.0, 0.8, 0.6).is_valid()
        clamped = Hwb(0.0, 0.8, 0.6).clamp()
        assert clamped.is_valid()
        assert clamped.whiteness + clamped.blackness == pytest.approx(1.0)
        assert clamped.whiteness / clamped.blackness == pytest.approx(0.8 / 0.6)

    @pytest.mark.parametrize("color", [
        LinSrgb(1.5, -0.2, 0.5), Lab(120.0, -200.0, 50.0), Hwb(0.0, 0.8, 0.6),
        Hwb(0.0, 1.7, -0.4), Xyz(2.0, 0.5, -1.0), Hsl(10.0, 0.5, 0.5),
    ])
    def test_clamp_is_idempotent(self, color):
        once = color.clamp()
        assert once.clamp() == once
        assert once.is_valid()

    def test_clamp_self(self):
        color = Lab(120.0, 0.0, 0.0)
        assert color.clamp_self() is None
        assert color == Lab(100.0, 0.0, 0.0)

    def test_integer_rgb_is_always_valid(self):
        assert Srgb(255, 0, 17, format_type="u8").is_valid()
