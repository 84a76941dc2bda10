import numpy as np
import pytest

from chromaspace.colorimetry import D50, D65, LINEAR_SRGB, SRGB, SRGB_LUMA, SRGB_SPACE
from chromaspace.colors import (
    GammaSrgb,
    Hsl,
    Hsv,
    Hwb,
    Lab,
    Lch,
    LinLuma,
    LinSrgb,
    Luma,
    Rgb,
    Srgb,
    Xyz,
    Yxy,
    color_classes,
)
from chromaspace.types import ColorSpace, FormatType


def test_registry_covers_every_space():
    assert set(color_classes) == set(ColorSpace)
    assert color_classes[ColorSpace.RGB] is Rgb


def test_fields_and_accessors():
    c = Srgb(0.1, 0.2, 0.3)
    assert c.fields == ('red', 'green', 'blue')
    assert c.channels == 3
    assert (c.red, c.green, c.blue) == (0.1, 0.2, 0.3)
    assert c.components == (0.1, 0.2, 0.3)
    assert c.standard == SRGB
    assert c.white_point == D65

    hsv = Hsv(10.0, 0.5, 0.25)
    assert (hsv.hue, hsv.saturation, hsv.value) == (10.0, 0.5, 0.25)
    assert hsv.rgb_space == SRGB_SPACE
    assert Luma(0.4).luma == 0.4
    assert Lab(50.0, 1.0, 2.0).b == 2.0


def test_default_tags():
    assert Rgb(0.1, 0.2, 0.3).standard == SRGB
    assert LinSrgb(0.1, 0.2, 0.3).standard == LINEAR_SRGB
    assert GammaSrgb(0.1, 0.2, 0.3).standard.transfer.name == "gamma"
    assert Luma(0.5).standard == SRGB_LUMA
    assert LinLuma(0.5).standard.is_linear
    for cls in (Xyz, Yxy, Lab, Lch):
        assert cls(0.1, 0.2, 0.3).white_point == D65


def test_explicit_tag():
    lab = Lab(50.0, 0.0, 0.0, white_point=D50)
    assert lab.white_point == D50
    assert lab != Lab(50.0, 0.0, 0.0)


def test_wrong_tag_type_rejected():
    with pytest.raises(TypeError, match="white_point must be a WhitePoint"):
        Lab(50.0, 0.0, 0.0, white_point=SRGB)
    with pytest.raises(TypeError, match="unexpected keyword"):
        Lab(50.0, 0.0, 0.0, standard=SRGB)


def test_wrong_component_count():
    with pytest.raises(ValueError, match="expects 3 components"):
        Srgb(0.1, 0.2)


def test_integer_components_only_on_rgb_and_luma():
    assert Srgb(255, 128, 0, format_type=FormatType.U8).into_raw() == (255, 128, 0)
    assert Luma(1000, format_type="u16").luma == 1000
    for cls in (Xyz, Yxy, Lab, Lch, Hsv, Hsl, Hwb):
        with pytest.raises(TypeError, match="floating point"):
            cls(1, 2, 3, format_type=FormatType.U8)


def test_integer_components_are_range_checked():
    with pytest.raises(ValueError, match="outside the u8 range"):
        Srgb(256, 0, 0, format_type=FormatType.U8)
    with pytest.raises(TypeError):
        Srgb(0.5, 0, 0, format_type=FormatType.U8)


def test_float_components_accept_ints_and_numpy():
    c = Srgb(1, np.float32(0.5), np.int64(0))
    assert c.into_raw() == (1.0, 0.5, 0.0)
    assert all(isinstance(v, float) for v in c.into_raw())


def test_hue_is_normalized_on_construction():
    assert Hsv(370.0, 0.5, 0.5).hue == pytest.approx(10.0)
    assert Lch(50.0, 10.0, -90.0).hue == pytest.approx(270.0)


def test_colors_are_immutable():
    c = LinSrgb(0.1, 0.2, 0.3)
    with pytest.raises(AttributeError):
        c.red = 0.5
    with pytest.raises(AttributeError):
        c._value = (0.5, 0.5, 0.5)


def test_equality_and_hash():
    assert LinSrgb(0.1, 0.2, 0.3) == LinSrgb(0.1, 0.2, 0.3)
    assert LinSrgb(0.1, 0.2, 0.3) != Srgb(0.1, 0.2, 0.3)
    assert LinSrgb(0.1, 0.2, 0.3) != LinSrgb(0.1, 0.2, 0.3, format_type=FormatType.F64)
    assert len({LinSrgb(0.1, 0.2, 0.3), LinSrgb(0.1, 0.2, 0.3)}) == 1


def test_repr():
    assert repr(LinSrgb(0.5, 0.5, 0.5)) == (
        "LinSrgb(red=0.5, green=0.5, blue=0.5, standard=RgbStandard(sRGB, linear))"
    )
    assert "format_type='u8'" in repr(Srgb(1, 2, 3, format_type="u8"))


def test_into_format():
    c = Srgb(1.0, 0.5, 0.0).into_format(FormatType.U8)
    assert c.format_type == FormatType.U8
    assert c.into_raw() == (255, 128, 0)
    assert c.standard == SRGB

    wide = c.into_format(FormatType.U16)
    assert wide.into_raw() == (65535, 32896, 0)
    assert np.allclose(wide.into_format("f64").into_raw(), (1.0, 32896 / 65535, 0.0))


def test_into_format_clamps_out_of_range_floats():
    assert LinSrgb(1.5, -0.5, 0.5).into_format("u8").into_raw() == (255, 0, 128)


class TestRawPixels:
    def test_from_raw(self):
        c = LinSrgb.from_raw([0.1, 0.2, 0.3])
        assert c == LinSrgb(0.1, 0.2, 0.3)
        assert Srgb.from_raw(np.array([1, 2, 3]), "u8").into_raw() == (1, 2, 3)

    def test_from_raw_wrong_length(self):
        with pytest.raises(ValueError, match="expects 3 raw components"):
            Srgb.from_raw([0.1, 0.2, 0.3, 0.4])

    def test_raw_slice_round_trip(self):
        buffer = np.array([255, 0, 0, 0, 128, 255], dtype=np.uint8)
        colors = Srgb.from_raw_slice(buffer)
        assert len(colors) == 2
        assert colors[0].format_type == FormatType.U8
        assert colors[1].into_raw() == (0, 128, 255)

        out = Srgb.into_raw_slice(colors)
        assert out.dtype == np.uint8
        assert out.tolist() == buffer.tolist()

    def test_raw_slice_float_dtype(self):
        colors = Lab.from_raw_slice(np.array([50.0, 1.0, 2.0], dtype=np.float64), white_point=D50)
        assert colors[0].format_type == FormatType.F64
        assert colors[0].white_point == D50

    def test_raw_slice_errors(self):
        with pytest.raises(ValueError, match="whole number"):
            Srgb.from_raw_slice(np.zeros(5, dtype=np.float32))
        with pytest.raises(TypeError, match="cannot infer"):
            Srgb.from_raw_slice(np.zeros(3, dtype=np.int64))

    def test_mixed_formats_rejected(self):
        with pytest.raises(ValueError, match="one component format"):
            Srgb.into_raw_slice([Srgb(1, 2, 3, format_type="u8"), Srgb(0.1, 0.2, 0.3)])


def test_dict_round_trip():
    c = Hwb(120.0, 0.25, 0.5)
    data = c.as_dict()
    assert data == {'hue': 120.0, 'whiteness': 0.25, 'blackness': 0.5}
    assert Hwb.from_dict(data) == c
    with pytest.raises(ValueError, match="expects fields"):
        Hwb.from_dict({'hue': 1.0, 'whiteness': 0.5})
