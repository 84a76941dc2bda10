"""Fixed 3x3 matrix helpers for color transforms."""
from __future__ import annotations
from typing import Sequence, Tuple

import numpy as np
from numpy import ndarray as NDArray

Vec3 = Tuple[float, float, float]


def mat3(rows: Sequence[Sequence[float]]) -> NDArray:
    """Build a read-only float64 3x3 matrix."""
    m = np.array(rows, dtype=np.float64)
    if m.shape != (3, 3):
        raise ValueError(f"expected a 3x3 matrix, got shape {m.shape}")
    m.setflags(write=False)
    return m


def multiply_3x3_and_vec3(m: NDArray, v: Sequence[float]) -> Vec3:
    x, y, z = v
    return (
        float(m[0, 0] * x + m[0, 1] * y + m[0, 2] * z),
        float(m[1, 0] * x + m[1, 1] * y + m[1, 2] * z),
        float(m[2, 0] * x + m[2, 1] * y + m[2, 2] * z),
    )


def multiply_3x3(a: NDArray, b: NDArray) -> NDArray:
    return mat3(a @ b)


def matrix_inverse(m: NDArray) -> NDArray:
    """
    Closed-form inverse of a 3x3 matrix (adjugate over determinant).

    Raises:
        ValueError: if the matrix is singular
    """
    a, b, c = m[0]
    d, e, f = m[1]
    g, h, i = m[2]

    co00 = e * i - f * h
    co01 = -(d * i - f * g)
    co02 = d * h - e * g

    det = a * co00 + b * co01 + c * co02
    if det == 0.0:
        raise ValueError("matrix is singular and cannot be inverted")

    adjugate = (
        (co00, -(b * i - c * h), b * f - c * e),
        (co01, a * i - c * g, -(a * f - c * d)),
        (co02, -(a * h - b * g), a * e - b * d),
    )
    return mat3(np.array(adjugate, dtype=np.float64) / det)


def rgb_to_xyz_matrix(
    red: Tuple[float, float],
    green: Tuple[float, float],
    blue: Tuple[float, float],
    white: Vec3,
) -> NDArray:
    """
    Derive the RGB -> XYZ matrix from xy primaries and a reference white.

    Each primary becomes the XYZ column ``(x/y, 1, (1-x-y)/y)``; the columns
    are then scaled so that RGB ``(1, 1, 1)`` reproduces the white point.
    """
    columns = []
    for x, y in (red, green, blue):
        columns.append((x / y, 1.0, (1.0 - x - y) / y))
    primaries = mat3(np.array(columns, dtype=np.float64).T)

    sr, sg, sb = multiply_3x3_and_vec3(matrix_inverse(primaries), white)
    return mat3(primaries * np.array([sr, sg, sb], dtype=np.float64))
