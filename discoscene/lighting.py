"""Point-style lights and spotlights fed to the shader as uniforms."""

from __future__ import annotations

import itertools
import math

import numpy as np

from .color import Color


def _vec3(value) -> np.ndarray:
    vector = np.asarray(value, dtype=np.float64).ravel()
    if vector.shape != (3,):
        raise ValueError(f"expected 3 components, got {vector.size}")
    return vector.copy()


class Light:
    """A light with attenuation constants.

    Each uniform is named ``<shader_prefix><Variable><shader_postfix>`` in the shader.
    """

    def __init__(
        self,
        pos,
        diffuse_color: Color,
        ambient_color: Color,
        kc: float,
        kl: float,
        kq: float,
        shader_prefix: str,
        shader_postfix: str,
    ) -> None:
        self.pos = _vec3(pos)
        self.diffuse_color = diffuse_color
        self.ambient_color = ambient_color
        self.kc = kc
        self.kl = kl
        self.kq = kq
        self.shader_prefix = shader_prefix
        self.shader_postfix = shader_postfix

    def _name(self, variable: str) -> str:
        return f"{self.shader_prefix}{variable}{self.shader_postfix}"

    def apply(self, shader_program) -> None:
        """Send position, colours and attenuation constants to the shader program."""
        shader_program.set_vec3(self._name("LightPos"), self.pos)
        shader_program.set_vec3(self._name("DiffuseColor"), self.diffuse_color.as_rgb())
        shader_program.set_vec3(self._name("AmbientColor"), self.ambient_color.as_rgb())
        shader_program.set_float(self._name("Kc"), self.kc)
        shader_program.set_float(self._name("Kl"), self.kl)
        shader_program.set_float(self._name("Kq"), self.kq)


class SpotLight(Light):
    """A cone of light; spotlights are numbered from 1 in creation order."""

    _ids = itertools.count(1)

    def __init__(
        self,
        pos,
        spot_dir,
        diffuse_color: Color,
        ambient_color: Color,
        kc: float,
        kl: float,
        kq: float,
        cutoff: float,
    ) -> None:
        super().__init__(
            pos, diffuse_color, ambient_color, kc, kl, kq,
            "spotlight", str(next(SpotLight._ids)),
        )
        self.cutoff = cutoff
        self.spot_dir = _vec3(spot_dir)
        self.spot_dir_rotated = self.spot_dir.copy()

    def rotate_y(self, theta: float) -> None:
        """Set the beam to the original direction turned by ``theta`` radians about Y."""
        x, _, z = self.spot_dir
        cos_t, sin_t = math.cos(theta), math.sin(theta)
        self.spot_dir_rotated = np.array(
            [cos_t * x - sin_t * z, self.spot_dir_rotated[1], sin_t * x + cos_t * z]
        )

    def apply(self, shader_program) -> None:
        """Send the light's uniforms plus cutoff angle and current direction."""
        super().apply(shader_program)
        shader_program.set_float(self._name("Cutoff"), self.cutoff)
        shader_program.set_vec3(self._name("SpotDir"), self.spot_dir_rotated)