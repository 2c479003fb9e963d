"""4x4 transform matrices for column vectors (``matrix @ point``)."""

from typing import Sequence, Union

import numpy as np

Matrix = np.ndarray


def identity() -> Matrix:
    """The 4x4 identity matrix."""
    return np.eye(4, dtype=np.float32)


def ortho(left: float, right: float, bottom: float, top: float,
          near: float, far: float) -> Matrix:
    """Orthographic projection mapping the box onto the [-1, 1] cube."""
    m = np.eye(4, dtype=np.float64)
    m[0, 0] = 2.0 / (right - left)
    m[1, 1] = 2.0 / (top - bottom)
    m[2, 2] = -2.0 / (far - near)
    m[0, 3] = -(right + left) / (right - left)
    m[1, 3] = -(top + bottom) / (top - bottom)
    m[2, 3] = -(far + near) / (far - near)
    return m.astype(np.float32)


def translation(offset: Sequence[float]) -> Matrix:
    """Matrix moving points by ``offset`` (x, y, z)."""
    vector = np.asarray(offset, dtype=np.float32)
    if vector.shape != (3,):
        raise ValueError("offset must have three components")
    m = identity()
    m[:3, 3] = vector
    return m


def rotation_z(degrees: float) -> Matrix:
    """Matrix rotating counter-clockwise about the z axis."""
    angle = np.radians(degrees)
    c, s = np.cos(angle), np.sin(angle)
    m = identity()
    m[0, 0] = c
    m[0, 1] = -s
    m[1, 0] = s
    m[1, 1] = c
    return m


def scaling(factor: Union[float, Sequence[float]]) -> Matrix:
    """Matrix scaling uniformly by a number, or per axis by three numbers."""
    factors = np.broadcast_to(np.asarray(factor, dtype=np.float32), (3,))
    m = identity()
    m[0, 0], m[1, 1], m[2, 2] = factors
    return m