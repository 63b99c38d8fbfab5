"""Perspective camera with a free look direction."""

from __future__ import annotations

import math

import numpy as np

_UP = np.array([0.0, 1.0, 0.0])


def _vec3(value) -> np.ndarray:
    return np.asarray(value, dtype=float).reshape(3).copy()


def _unit(value: np.ndarray, what: str) -> np.ndarray:
    length = float(np.linalg.norm(value))
    if length == 0.0:
        raise ValueError(f"{what} has zero length")
    return value / length


def perspective(fov: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection mapping depth to [-1, 1].

    ``fov`` is the vertical field of view in radians. The matrix is row-major
    and acts on column vectors.
    """
    if aspect == 0:
        raise ValueError("aspect ratio must be non-zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    focal = 1.0 / math.tan(fov / 2.0)
    matrix = np.zeros((4, 4))
    matrix[0, 0] = focal / aspect
    matrix[1, 1] = focal
    matrix[2, 2] = -(far + near) / (far - near)
    matrix[2, 3] = -(2.0 * far * near) / (far - near)
    matrix[3, 2] = -1.0
    return matrix


def look_at(eye, center, up) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``center``."""
    eye = _vec3(eye)
    forward = _unit(_vec3(center) - eye, "view direction")
    side = _unit(np.cross(forward, _vec3(up)), "side vector")
    true_up = np.cross(side, forward)
    matrix = np.identity(4)
    matrix[0, :3] = side
    matrix[1, :3] = true_up
    matrix[2, :3] = -forward
    matrix[0, 3] = -float(side @ eye)
    matrix[1, 3] = -float(true_up @ eye)
    matrix[2, 3] = float(forward @ eye)
    return matrix


class Camera:
    """A camera holding a position, a look direction and its matrices."""

    def __init__(
        self,
        fov: float = math.radians(85.0),
        aspect: float = 800.0 / 600.0,
        near: float = 0.1,
        far: float = 100.0,
    ):
        self._position = np.zeros(3)
        self.look = np.array([0.0, 0.0, 1.0])
        self.perspective = perspective(fov, aspect, near, far)
        self.view = np.identity(4)
        self.set_view()

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    def translate(self, delta) -> None:
        self._position += _vec3(delta)

    def move_look(self, direction) -> None:
        """Point the camera along ``direction``; a zero vector leaves it unchanged."""
        direction = _vec3(direction)
        if np.any(direction != 0):
            self.look = direction

    def set_view(self) -> None:
        """Recompute the view matrix from the current position and look."""
        self.view = look_at(self._position, self._position + self.look, _UP)