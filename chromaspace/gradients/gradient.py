from __future__ import annotations
import math
from collections.abc import Sequence as SequenceABC
from typing import Generic, Iterable, Iterator, List, Tuple, TypeVar, Union, overload

import numpy as np
from numpy import ndarray as NDArray

from ..types.format_type import default_format_dtypes

C = TypeVar('C')


class Gradient(Generic[C]):
    """
    A continuous gradient over ordered ``(position, color)`` stops.

    Sampling clamps to the end colors outside the domain and mixes the two
    neighbouring stops inside it. Any value with a ``mix(other, factor)``
    method works as a stop (colors, ``Alpha`` and ``Color`` values), provided
    every stop can mix with the others.
    """
    __slots__ = ('_positions', '_colors')

    def __init__(self, colors: Iterable[C]) -> None:
        """Spread ``colors`` evenly over ``[0, 1]``."""
        colors = list(colors)
        if not colors:
            raise ValueError("a gradient needs at least one color")
        count = len(colors)
        if count == 1:
            positions = np.zeros(1)
        else:
            positions = np.arange(count, dtype=np.float64) / (count - 1)
        self._init(positions, colors)

    @classmethod
    def with_domain(cls, stops: Iterable[Tuple[float, C]]) -> Gradient[C]:
        """
        Build from explicit ``(position, color)`` pairs.

        Raises:
            ValueError: if there are no stops or positions are not in
                non-decreasing order (stops are never re-sorted)
        """
        stops = list(stops)
        if not stops:
            raise ValueError("a gradient needs at least one color")
        positions = np.array([float(p) for p, _ in stops], dtype=np.float64)
        if np.isnan(positions).any():
            raise ValueError("gradient positions must be numbers, got NaN")
        if np.any(np.diff(positions) < 0):
            raise ValueError(f"gradient positions must be in ascending order, got {positions.tolist()}")
        gradient = cls.__new__(cls)
        gradient._init(positions, [c for _, c in stops])
        return gradient

    def _init(self, positions: NDArray, colors: List[C]) -> None:
        first = colors[0]
        for color in colors[1:]:
            # raises for colors that cannot be mixed with each other
            first.mix(color, 0.0)
        positions.setflags(write=False)
        self._positions = positions
        self._colors = tuple(colors)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def positions(self) -> NDArray:
        return self._positions

    @property
    def colors(self) -> Tuple[C, ...]:
        return self._colors

    @property
    def domain(self) -> Tuple[float, float]:
        return (float(self._positions[0]), float(self._positions[-1]))

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[Tuple[float, C]]:
        return zip(self._positions.tolist(), self._colors)

    def __repr__(self) -> str:
        return f"Gradient({list(self)!r})"

    # ------------------ SAMPLING ------------------
    def get(self, t: float) -> C:
        """
        Color at position ``t``.

        Raises:
            ValueError: if ``t`` is NaN
        """
        if math.isnan(t):
            raise ValueError("gradient position must be a number, got NaN")
        positions = self._positions
        if t <= positions[0]:
            return self._colors[0]
        if t >= positions[-1]:
            return self._colors[-1]

        right = int(np.searchsorted(positions, t, side='right'))
        t0 = positions[right - 1]
        t1 = positions[right]
        if t1 == t0:
            return self._colors[right]
        return self._colors[right - 1].mix(self._colors[right], float((t - t0) / (t1 - t0)))

    def take(self, n: int, start: float = 0.0, end: float = 1.0) -> GradientSamples[C]:
        """
        ``n`` evenly spaced samples from ``start`` to ``end`` (inclusive).

        The result is lazy: colors are computed when indexed or iterated.
        """
        return GradientSamples(self, n, start, end)

    def to_array(self, n: int, start: float = 0.0, end: float = 1.0) -> NDArray:
        """``(n, channels)`` strip of raw pixels."""
        samples = list(self.take(n, start, end))
        dtype = default_format_dtypes[samples[0].format_type]
        return np.array([c.into_raw() for c in samples], dtype=dtype)


class GradientSamples(SequenceABC, Generic[C]):
    """Finite, restartable sequence of samples taken from a gradient."""

    def __init__(self, gradient: Gradient[C], n: int, start: float = 0.0, end: float = 1.0) -> None:
        if n <= 0:
            raise ValueError(f"sample count must be positive, got {n}")
        self._gradient = gradient
        self._n = int(n)
        self._start = float(start)
        self._end = float(end)

    def position(self, index: int) -> float:
        if self._n == 1:
            return self._start
        return self._start + (self._end - self._start) * index / (self._n - 1)

    def __len__(self) -> int:
        return self._n

    @overload
    def __getitem__(self, index: int) -> C: ...
    @overload
    def __getitem__(self, index: slice) -> List[C]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[C, List[C]]:
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(self._n))]
        if index < 0:
            index += self._n
        if not 0 <= index < self._n:
            raise IndexError(f"sample index {index} out of range for {self._n} samples")
        return self._gradient.get(self.position(index))

    def __iter__(self) -> Iterator[C]:
        for i in range(self._n):
            yield self._gradient.get(self.position(i))

    def __repr__(self) -> str:
        return f"GradientSamples(n={self._n}, start={self._start}, end={self._end})"
