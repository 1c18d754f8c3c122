"""Perspective camera and the view/projection matrices it sends to shaders."""

from __future__ import annotations

import math

import numpy as np

_WORLD_UP = np.array([0.0, 1.0, 0.0])


def _vec3(value) -> np.ndarray:
    vector = np.asarray(value, dtype=np.float64).ravel()
    if vector.shape != (3,):
        raise ValueError(f"expected 3 components, got {vector.size}")
    return vector.copy()


def _normalize(vector: np.ndarray) -> np.ndarray:
    with np.errstate(invalid="ignore", divide="ignore"):
        return vector / np.linalg.norm(vector)


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed projection matrix mapping depth to -1..1; ``fovy`` is in radians.

    The result is indexed ``[row, column]``.
    """
    tan_half = math.tan(fovy / 2.0)
    matrix = np.zeros((4, 4))
    matrix[0, 0] = 1.0 / (aspect * tan_half)
    matrix[1, 1] = 1.0 / tan_half
    matrix[2, 2] = -(far + near) / (far - near)
    matrix[3, 2] = -1.0
    matrix[2, 3] = -(2.0 * far * near) / (far - near)
    return matrix


def look_at_matrix(eye, center, up) -> np.ndarray:
    """Right-handed view matrix placing ``eye`` at the origin looking down -Z at ``center``."""
    eye, center, up = _vec3(eye), _vec3(center), _vec3(up)
    forward = _normalize(center - eye)
    side = _normalize(np.cross(forward, up))
    upward = np.cross(side, forward)

    matrix = np.identity(4)
    matrix[0, :3] = side
    matrix[1, :3] = upward
    matrix[2, :3] = -forward
    matrix[0, 3] = -(side @ eye)
    matrix[1, 3] = -(upward @ eye)
    matrix[2, 3] = forward @ eye
    return matrix


class Camera:
    """A perspective camera looking from a position at a target point."""

    def __init__(self, start_pos, fov: float, aspect_ratio: float, near_plane: float, far_plane: float) -> None:
        self._position = _vec3(start_pos)
        self._target = np.zeros(3)
        self.up = np.zeros(3)
        self.view = np.identity(4)
        self._update_states(self._target)
        self.projection = perspective(math.radians(fov), aspect_ratio, near_plane, far_plane)

    @property
    def position(self) -> np.ndarray:
        """The camera's position in world space."""
        return self._position.copy()

    @property
    def target(self) -> np.ndarray:
        """The world point the camera looks at."""
        return self._target.copy()

    def apply(self, shader_program) -> None:
        """Send the view and projection matrices to the shader program."""
        shader_program.set_mat4("view", self.view)
        shader_program.set_mat4("projection", self.projection)

    def look_at(self, target) -> None:
        """Point the camera at ``target``."""
        self._update_states(_vec3(target))

    def move_to(self, new_position) -> None:
        """Move the camera, keeping its target."""
        self._position = _vec3(new_position)
        self._update_states(self._target)

    def _update_states(self, target: np.ndarray) -> None:
        self._target = target.copy()
        direction = _normalize(self._position - self._target)
        right = _normalize(np.cross(_WORLD_UP, direction))
        self.up = _normalize(np.cross(direction, right))
        self.view = look_at_matrix(self._position, self._target, self.up)