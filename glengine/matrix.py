"""4x4 matrix helpers stored as flat, row-major 16-element tuples.

The layout follows the row-vector convention: translation lives in
elements 12, 13 and 14, and matrices are transposed before being handed
to a shader.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

Matrix = tuple[float, ...]

_SIZE = 4


def _check(matrix: Sequence[float], name: str = "matrix") -> None:
    if len(matrix) != _SIZE * _SIZE:
        raise ValueError(f"{name} must have 16 elements, got {len(matrix)}")


def identity() -> Matrix:
    """Return the 4x4 identity matrix."""
    return tuple(
        1.0 if row == col else 0.0 for row in range(_SIZE) for col in range(_SIZE)
    )


def perspective_fov(
    field_of_view: float,
    screen_aspect: float,
    screen_near: float,
    screen_depth: float,
) -> Matrix:
    """Return a left-handed perspective projection matrix."""
    half_tan = math.tan(field_of_view * 0.5)
    depth_range = screen_depth - screen_near
    return (
        1.0 / (screen_aspect * half_tan), 0.0, 0.0, 0.0,
        0.0, 1.0 / half_tan, 0.0, 0.0,
        0.0, 0.0, screen_depth / depth_range, 1.0,
        0.0, 0.0, (-screen_near * screen_depth) / depth_range, 0.0,
    )


def ortho(
    screen_width: float,
    screen_height: float,
    screen_near: float,
    screen_depth: float,
) -> Matrix:
    """Return an orthographic projection matrix for the given screen size."""
    return (
        2.0 / screen_width, 0.0, 0.0, 0.0,
        0.0, 2.0 / screen_height, 0.0, 0.0,
        0.0, 0.0, 1.0 / (screen_depth - screen_near), 0.0,
        0.0, 0.0, screen_near / (screen_near - screen_depth), 1.0,
    )


def rotation_x(angle: float) -> Matrix:
    """Return a rotation of ``angle`` radians about the X axis."""
    c, s = math.cos(angle), math.sin(angle)
    return (
        1.0, 0.0, 0.0, 0.0,
        0.0, c, s, 0.0,
        0.0, -s, c, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def rotation_y(angle: float) -> Matrix:
    """Return a rotation of ``angle`` radians about the Y axis."""
    c, s = math.cos(angle), math.sin(angle)
    return (
        c, 0.0, -s, 0.0,
        0.0, 1.0, 0.0, 0.0,
        s, 0.0, c, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def rotation_z(angle: float) -> Matrix:
    """Return a rotation of ``angle`` radians about the Z axis."""
    c, s = math.cos(angle), math.sin(angle)
    return (
        c, s, 0.0, 0.0,
        -s, c, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def translation(x: float, y: float, z: float) -> Matrix:
    """Return a translation matrix moving points by (x, y, z)."""
    return (
        1.0, 0.0, 0.0, 0.0,
        0.0, 1.0, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        float(x), float(y), float(z), 1.0,
    )


def transpose(matrix: Sequence[float]) -> Matrix:
    """Return the transpose of ``matrix``."""
    _check(matrix)
    return tuple(
        float(matrix[col * _SIZE + row]) for row in range(_SIZE) for col in range(_SIZE)
    )


def multiply(matrix1: Sequence[float], matrix2: Sequence[float]) -> Matrix:
    """Return the product ``matrix1 x matrix2``."""
    _check(matrix1, "matrix1")
    _check(matrix2, "matrix2")
    return tuple(
        sum(matrix1[row * _SIZE + k] * matrix2[k * _SIZE + col] for k in range(_SIZE))
        for row in range(_SIZE)
        for col in range(_SIZE)
    )