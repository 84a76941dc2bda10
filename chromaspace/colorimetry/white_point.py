"""
Reference illuminants.

A :class:`WhitePoint` is a shared, immutable tag. Colors hold a reference to
one of these instances instead of storing reference tristimulus values per
color. Values are the CIE 1931 2° observer tristimulus values normalised to
``Y = 1``.
"""
from __future__ import annotations
from typing import Dict, NamedTuple, Tuple


class WhitePoint(NamedTuple):
    name: str
    x: float
    y: float
    z: float

    @property
    def xyz(self) -> Tuple[float, float, float]:
        """Reference tristimulus value ``(Xn, Yn, Zn)``."""
        return (self.x, self.y, self.z)

    @property
    def chromaticity(self) -> Tuple[float, float]:
        """CIE xy chromaticity of the illuminant."""
        total = self.x + self.y + self.z
        return (self.x / total, self.y / total)

    def __repr__(self) -> str:
        return f"WhitePoint({self.name})"


# Incandescent / tungsten
A = WhitePoint("A", 1.09850, 1.0, 0.35585)
# Direct sunlight at noon (obsolete)
B = WhitePoint("B", 0.99072, 1.0, 0.85223)
# Average / north sky daylight (obsolete)
C = WhitePoint("C", 0.98074, 1.0, 1.18232)
# Horizon light, ICC profile PCS
D50 = WhitePoint("D50", 0.96422, 1.0, 0.82521)
# Mid-morning / mid-afternoon daylight
D55 = WhitePoint("D55", 0.95682, 1.0, 0.92149)
# Noon daylight, television and sRGB
D65 = WhitePoint("D65", 0.95047, 1.0, 1.08883)
# North sky daylight
D75 = WhitePoint("D75", 0.94972, 1.0, 1.22638)
# Equal energy
E = WhitePoint("E", 1.0, 1.0, 1.0)
# Cool white fluorescent
F2 = WhitePoint("F2", 0.99186, 1.0, 0.67393)
# D65 simulator, daylight simulator
F7 = WhitePoint("F7", 0.95041, 1.0, 1.08747)
# Philips TL84, Ultralume 40
F11 = WhitePoint("F11", 1.00962, 1.0, 0.64350)

WHITE_POINTS: Dict[str, WhitePoint] = {
    wp.name: wp for wp in (A, B, C, D50, D55, D65, D75, E, F2, F7, F11)
}


def get_white_point(name: str | WhitePoint) -> WhitePoint:
    """Look up a predefined white point by name (case-insensitive)."""
    if isinstance(name, WhitePoint):
        return name
    try:
        return WHITE_POINTS[name.upper()]
    except KeyError:
        raise ValueError(
            f"Unknown white point {name!r}; expected one of {sorted(WHITE_POINTS)}"
        ) from None
