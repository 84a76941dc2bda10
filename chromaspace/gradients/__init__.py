from .gradient import Gradient, GradientSamples

__all__ = ['Gradient', 'GradientSamples']
