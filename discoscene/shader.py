"""Loading, compiling and feeding GLSL shader programs."""

from __future__ import annotations

from collections.abc import Iterable
from os import PathLike

import numpy as np

try:
    from pyglet import gl
except Exception:  # no usable OpenGL library on this machine
    gl = None

_INFO_LOG_SIZE = 512


def _require_gl():
    if gl is None:
        raise RuntimeError("OpenGL is not available")
    return gl


def read_shader_source(path: str | PathLike) -> str:
    """Return the whole text of a shader file; raises OSError if it cannot be read."""
    with open(path, "rb") as handle:
        return handle.read().decode("utf-8")


def _chars(api, text: str):
    """A NUL-terminated GLchar array holding ``text``."""
    data = text.encode("utf-8")
    chars = (api.GLchar * (len(data) + 1))()
    chars.value = data
    return chars


def _floats(api, values: Iterable[float]):
    items = [float(v) for v in values]
    return (api.GLfloat * len(items))(*items)


def _info_log(api, getter, obj) -> str:
    log = (api.GLchar * _INFO_LOG_SIZE)()
    getter(obj, _INFO_LOG_SIZE, None, log)
    return log.value.decode("utf-8", errors="replace")


class ShaderProgram:
    """A linked vertex + fragment shader program."""

    def __init__(self, vertex_path: str | PathLike, fragment_path: str | PathLike) -> None:
        api = _require_gl()
        vertex_source = read_shader_source(vertex_path)
        fragment_source = read_shader_source(fragment_path)

        vertex_shader = self._compile(api, api.GL_VERTEX_SHADER, vertex_source, "VERTEX")
        fragment_shader = self._compile(api, api.GL_FRAGMENT_SHADER, fragment_source, "FRAGMENT")

        self.id = api.glCreateProgram()
        api.glAttachShader(self.id, vertex_shader)
        api.glAttachShader(self.id, fragment_shader)
        api.glLinkProgram(self.id)

        status = api.GLint(0)
        api.glGetProgramiv(self.id, api.GL_LINK_STATUS, status)
        if not status.value:
            print(
                "ERROR::SHADER::PROGRAM::LINKING_FAILED\n"
                + _info_log(api, api.glGetProgramInfoLog, self.id)
            )

        api.glDeleteShader(vertex_shader)
        api.glDeleteShader(fragment_shader)

    @staticmethod
    def _compile(api, kind, source: str, label: str):
        shader = api.glCreateShader(kind)
        source_chars = _chars(api, source)
        char_pointer = api.glShaderSource.argtypes[2]._type_
        sources = (char_pointer * 1)(source_chars)
        api.glShaderSource(shader, 1, sources, None)
        api.glCompileShader(shader)

        status = api.GLint(0)
        api.glGetShaderiv(shader, api.GL_COMPILE_STATUS, status)
        if not status.value:
            print(
                f"ERROR::SHADER::{label}::COMPILATION_FAILED\n"
                + _info_log(api, api.glGetShaderInfoLog, shader)
            )
        return shader

    def _location(self, name: str) -> int:
        api = _require_gl()
        return api.glGetUniformLocation(self.id, _chars(api, name))

    def activate(self) -> None:
        """Make this program the one used for drawing."""
        _require_gl().glUseProgram(self.id)

    def delete(self) -> None:
        """Release the program."""
        _require_gl().glDeleteProgram(self.id)

    def set_mat4(self, name: str, value) -> int:
        """Set a 4x4 matrix uniform, sent column by column; returns its location."""
        matrix = np.asarray(value, dtype=np.float32)
        if matrix.shape != (4, 4):
            raise ValueError(f"expected a 4x4 matrix, got shape {matrix.shape}")
        api = _require_gl()
        location = self._location(name)
        api.glUniformMatrix4fv(
            location, 1, api.GL_FALSE, _floats(api, matrix.flatten(order="F").tolist())
        )
        return location

    def set_vec3(self, name: str, value) -> int:
        """Set a three-component vector uniform; returns its location."""
        vector = np.asarray(value, dtype=np.float32).ravel()
        if vector.shape != (3,):
            raise ValueError(f"expected 3 components, got {vector.size}")
        api = _require_gl()
        location = self._location(name)
        api.glUniform3fv(location, 1, _floats(api, vector.tolist()))
        return location

    def set_bool(self, name: str, value: bool) -> int:
        """Set a boolean uniform (sent as 0 or 1); returns its location."""
        location = self._location(name)
        _require_gl().glUniform1i(location, int(bool(value)))
        return location

    def set_int(self, name: str, value: int) -> int:
        """Set an integer uniform; returns its location."""
        location = self._location(name)
        _require_gl().glUniform1i(location, int(value))
        return location

    def set_float(self, name: str, value: float) -> int:
        """Set a float uniform; returns its location."""
        location = self._location(name)
        _require_gl().glUniform1f(location, float(value))
        return location