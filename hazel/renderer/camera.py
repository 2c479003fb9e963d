"""Two-dimensional orthographic camera."""

from typing import Sequence

import numpy as np

from hazel.renderer.transforms import identity, ortho, rotation_z, translation


class OrthographicCamera:
    """Camera with a fixed orthographic projection, a position and a z rotation."""

    def __init__(self, left: float, right: float, bottom: float, top: float) -> None:
        self._projection = ortho(left, right, bottom, top, -1.0, 1.0)
        self._view = identity()
        self._view_projection = self._projection @ self._view
        self._position = np.zeros(3, dtype=np.float32)
        self._rotation = 0.0

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @position.setter
    def position(self, position: Sequence[float]) -> None:
        vector = np.asarray(position, dtype=np.float32)
        if vector.shape != (3,):
            raise ValueError("position must have three components")
        self._position = vector.copy()
        self._recalculate_view_matrix()

    @property
    def rotation(self) -> float:
        """Rotation about the z axis, in degrees."""
        return self._rotation

    @rotation.setter
    def rotation(self, rotation: float) -> None:
        self._rotation = float(rotation)
        self._recalculate_view_matrix()

    @property
    def projection_matrix(self) -> np.ndarray:
        return self._projection.copy()

    @property
    def view_matrix(self) -> np.ndarray:
        return self._view.copy()

    @property
    def view_projection_matrix(self) -> np.ndarray:
        return self._view_projection.copy()

    def _recalculate_view_matrix(self) -> None:
        transform = translation(self._position) @ rotation_z(self._rotation)
        self._view = np.linalg.inv(transform).astype(np.float32)
        self._view_projection = self._projection @ self._view