"""
Component-wise arithmetic for color values.

Operands must share space and tag; a plain number is broadcast to every
channel. Floating results are left unbounded (use ``clamp`` to bring them
back in range) while integer formats clamp and round, and hue channels
always wrap around the wheel. Division is total: a zero divisor gives a
signed infinity (or NaN for 0/0), which ``is_valid`` then reports.
"""
from __future__ import annotations
import math
import operator
from numbers import Real
from typing import Callable

from .color_base import ColorBase


def component_wise(self: ColorBase, other: ColorBase, fn: Callable[[float, float], float]) -> ColorBase:
    """Combine two colors channel by channel with ``fn(a, b)``."""
    self._check_compatible(other, "combine")
    return self._replace(fn(a, b) for a, b in zip(self._value, other._value))


def component_wise_self(self: ColorBase, fn: Callable[[float], float]) -> ColorBase:
    """Apply ``fn`` to every channel."""
    return self._replace(fn(v) for v in self._value)


def _divide(a: float, b: float) -> float:
    """Float division that never raises: x/0 is a signed infinity, 0/0 is NaN."""
    if b:
        return a / b
    if a:
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return math.nan


def _operate(self: ColorBase, other, op: Callable[[float, float], float], reflected: bool = False) -> ColorBase:
    if isinstance(other, ColorBase):
        if reflected:
            return component_wise(other, self, op)
        return component_wise(self, other, op)
    if isinstance(other, Real) and not isinstance(other, bool):
        if reflected:
            return component_wise_self(self, lambda v: op(other, v))
        return component_wise_self(self, lambda v: op(v, other))
    raise TypeError(f"unsupported operand type for {self.__class__.__name__}: {type(other).__name__}")


def add(self: ColorBase, other) -> ColorBase:
    return _operate(self, other, operator.add)


def subtract(self: ColorBase, other) -> ColorBase:
    return _operate(self, other, operator.sub)


def multiply(self: ColorBase, other) -> ColorBase:
    return _operate(self, other, operator.mul)


def divide(self: ColorBase, other) -> ColorBase:
    return _operate(self, other, _divide)


def scale(self: ColorBase, factor: float) -> ColorBase:
    """Multiply every channel by ``factor``."""
    return _operate(self, factor, operator.mul)


def _operator(op: Callable[[float, float], float], reflected: bool = False):
    def operation(self, other):
        if not isinstance(other, (ColorBase, Real)):
            return NotImplemented
        return _operate(self, other, op, reflected)
    return operation


# Inject named arithmetic and operators into ColorBase
ColorBase.component_wise = component_wise
ColorBase.component_wise_self = component_wise_self
ColorBase.add = add
ColorBase.subtract = subtract
ColorBase.multiply = multiply
ColorBase.divide = divide
ColorBase.scale = scale

ColorBase.__add__ = _operator(operator.add)
ColorBase.__sub__ = _operator(operator.sub)
ColorBase.__mul__ = _operator(operator.mul)
ColorBase.__truediv__ = _operator(_divide)
ColorBase.__radd__ = _operator(operator.add, reflected=True)
ColorBase.__rsub__ = _operator(operator.sub, reflected=True)
ColorBase.__rmul__ = _operator(operator.mul, reflected=True)
ColorBase.__rtruediv__ = _operator(_divide, reflected=True)
