"""Scene entities positioned, rotated and scaled in world space."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

import numpy as np

try:
    from pyglet import gl
except Exception:  # no usable OpenGL library on this machine
    gl = None


def _require_gl():
    if gl is None:
        raise RuntimeError("OpenGL is not available")
    return gl


def _vec3(value) -> np.ndarray:
    vector = np.asarray(value, dtype=np.float64).ravel()
    if vector.shape != (3,):
        raise ValueError(f"expected 3 components, got {vector.size}")
    return vector.copy()


def _rotation(angle: float, axis: np.ndarray) -> np.ndarray:
    """Right-handed rotation by ``angle`` radians about ``axis`` (normalised first)."""
    unit = axis / np.linalg.norm(axis)
    x, y, z = unit
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    cross = np.array([[0.0, -z, y], [z, 0.0, -x], [-y, x, 0.0]])
    matrix = np.identity(4)
    matrix[:3, :3] = (
        cos_a * np.identity(3) + (1.0 - cos_a) * np.outer(unit, unit) + sin_a * cross
    )
    return matrix


class Entity(ABC):
    """Something placed in the world; subclasses decide how it is drawn.

    ``angle`` is in degrees; a zero ``rotate_axis`` means no rotation.
    """

    def __init__(self, init_position, scale: float, angle: float, rotate_axis) -> None:
        self.position = _vec3(init_position)
        self.scale = float(scale)
        self.angle = float(angle)
        self.rotate_axis = _vec3(rotate_axis)
        self.model = np.identity(4)

    def move_to(self, new_position) -> None:
        """Place the entity at ``new_position``."""
        self.position = _vec3(new_position)

    def rotate(self, rotation_axis, angle: float) -> None:
        """Set the rotation to ``angle`` degrees about ``rotation_axis``."""
        self.rotate_axis = _vec3(rotation_axis)
        self.angle = float(angle)

    def set_scale(self, scale: float) -> None:
        """Set the uniform scaling factor."""
        self.scale = float(scale)

    def model_matrix(self) -> np.ndarray:
        """Translation, then rotation, then scaling, as one ``[row, column]`` matrix."""
        matrix = np.identity(4)
        matrix[:3, 3] = self.position
        if np.any(self.rotate_axis != 0):
            matrix = matrix @ _rotation(math.radians(self.angle), self.rotate_axis)
        return matrix @ np.diag([self.scale, self.scale, self.scale, 1.0])

    def render(self, shader_program) -> None:
        """Send the model matrix to the shader program and draw the entity."""
        self.model = self.model_matrix()
        shader_program.set_mat4("model", self.model)
        self.draw()

    @abstractmethod
    def draw(self) -> None:
        """Issue the draw calls for this entity."""


class MeshEntity(Entity):
    """An entity drawn as the triangles of a mesh."""

    def __init__(self, mesh, init_position, scale: float, angle: float, rotate_axis) -> None:
        super().__init__(init_position, scale, angle, rotate_axis)
        self.mesh = mesh

    def draw(self) -> None:
        api = _require_gl()
        self.mesh.bind()
        api.glDrawArrays(api.GL_TRIANGLES, 0, self.mesh.mesh_data_size())
        self.mesh.unbind()


class Amy(MeshEntity):
    """The dancing figure."""


class Bucket(MeshEntity):
    """The bucket."""


class Floor(MeshEntity):
    """The floor the scene stands on."""