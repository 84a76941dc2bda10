import numpy as np
import pytest

from chromaspace.colorimetry import D50
from chromaspace.colors import Alpha, Color, Hsv, Lab, LinSrgb, Srgb
from chromaspace.gradients import Gradient, GradientSamples
from chromaspace.types import TagMismatchError

A = LinSrgb(1.0, 0.0, 0.0)
B = LinSrgb(0.0, 1.0, 0.0)
C = LinSrgb(0.0, 0.0, 1.0)


@pytest.fixture
def gradient():
    return Gradient.with_domain([(0.0, A), (0.25, B), (1.0, C)])


def test_even_positions():
    g = Gradient([A, B, C])
    assert g.positions.tolist() == [0.0, 0.5, 1.0]
    assert g.domain == (0.0, 1.0)
    assert len(g) == 3
    assert list(g) == [(0.0, A), (0.5, B), (1.0, C)]


def test_single_color():
    g = Gradient([A])
    assert g.get(-1.0) == A
    assert g.get(0.5) == A
    assert g.take(3)[2] == A


@pytest.mark.parametrize("t", [-10.0, -0.5, 0.0])
def test_before_the_domain_is_the_first_color(gradient, t):
    assert gradient.get(t) == A


@pytest.mark.parametrize("t", [1.0, 1.5, 42.0])
def test_after_the_domain_is_the_last_color(gradient, t):
    assert gradient.get(t) == C


def test_interpolates_between_neighbours(gradient):
    assert gradient.get(0.125) == A.mix(B, 0.5)
    assert gradient.get(0.25) == B
    assert np.allclose(gradient.get(0.625).into_raw(), (0.0, 0.5, 0.5))


def test_duplicate_positions_make_a_hard_stop():
    g = Gradient.with_domain([(0.0, A), (0.5, A), (0.5, C), (1.0, C)])
    assert np.allclose(g.get(0.49).into_raw(), A.into_raw())
    assert g.get(0.5) == C
    assert np.allclose(g.get(0.51).into_raw(), C.into_raw())


def test_custom_domain():
    g = Gradient.with_domain([(-1.0, A), (3.0, C)])
    assert g.domain == (-1.0, 3.0)
    assert np.allclose(g.get(1.0).into_raw(), (0.5, 0.0, 0.5))


def test_stops_are_never_reordered():
    with pytest.raises(ValueError, match="ascending order"):
        Gradient.with_domain([(0.5, A), (0.0, B)])
    with pytest.raises(ValueError, match="NaN"):
        Gradient.with_domain([(0.0, A), (float('nan'), B)])


def test_nan_position_is_rejected():
    g = Gradient([LinSrgb(0.0, 0.0, 0.0), LinSrgb(1.0, 1.0, 1.0)])
    with pytest.raises(ValueError, match="NaN"):
        g.get(float('nan'))
    with pytest.raises(ValueError, match="NaN"):
        g.take(2, start=float('nan'))[0]


def test_needs_a_color():
    with pytest.raises(ValueError):
        Gradient([])
    with pytest.raises(ValueError):
        Gradient.with_domain([])


def test_stops_must_be_mixable():
    with pytest.raises(TagMismatchError):
        Gradient([Lab(50.0, 0.0, 0.0), Lab(50.0, 0.0, 0.0, white_point=D50)])
    with pytest.raises(TypeError):
        Gradient([Srgb(1.0, 0.0, 0.0), Srgb(0.0, 0.0, 1.0)])


def test_positions_are_read_only(gradient):
    with pytest.raises(ValueError):
        gradient.positions[0] = 0.5


class TestTake:
    def test_lazy_finite_sequence(self, gradient):
        samples = gradient.take(5)
        assert isinstance(samples, GradientSamples)
        assert len(samples) == 5
        assert samples[0] == A
        assert samples[-1] == C
        assert samples[1] == gradient.get(0.25)
        assert len(samples[1:3]) == 2

    def test_restartable(self, gradient):
        samples = gradient.take(4)
        assert list(samples) == list(samples)

    def test_range(self, gradient):
        samples = gradient.take(3, 0.25, 0.75)
        assert [samples.position(i) for i in range(3)] == [0.25, 0.5, 0.75]
        assert samples[0] == B

    def test_index_errors(self, gradient):
        samples = gradient.take(2)
        with pytest.raises(IndexError):
            samples[2]
        with pytest.raises(ValueError):
            gradient.take(0)

    def test_to_array(self, gradient):
        strip = gradient.to_array(5)
        assert strip.shape == (5, 3)
        assert strip.dtype == np.float32
        assert np.allclose(strip[0], (1.0, 0.0, 0.0))


def test_hue_gradient_takes_the_short_way():
    g = Gradient([Hsv(350.0, 1.0, 1.0), Hsv(30.0, 1.0, 1.0)])
    assert g.get(0.5).hue == pytest.approx(10.0)


def test_alpha_and_generic_stops():
    g = Gradient([Alpha(A, 0.0), Alpha(C, 1.0)])
    mid = g.get(0.5)
    assert mid.alpha == 0.5
    assert np.allclose(mid.color.into_raw(), (0.5, 0.0, 0.5))

    generic = Gradient([Color(A), Color(Hsv(240.0, 1.0, 1.0))])
    assert np.allclose(generic.get(0.5).into_raw(), (0.5, 0.0, 0.5))
