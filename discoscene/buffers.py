"""OpenGL buffer, texture and vertex array objects."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from os import PathLike

import numpy as np
from PIL import Image

try:
    from pyglet import gl
except Exception:  # no usable OpenGL library on this machine
    gl = None


def _require_gl():
    if gl is None:
        raise RuntimeError("OpenGL is not available")
    return gl


class Buffer(ABC):
    """Base for OpenGL objects identified by a generated name."""

    def __init__(self) -> None:
        self._id = _require_gl().GLuint(0)

    @property
    def id(self) -> int:
        """The OpenGL name of this object."""
        return self._id.value

    @abstractmethod
    def bind(self) -> None:
        """Bind the object."""

    @abstractmethod
    def unbind(self) -> None:
        """Unbind the object."""

    @abstractmethod
    def delete(self) -> None:
        """Release the object."""


class _DataBuffer(Buffer):
    _dtype: type = np.float32

    def __init__(self, data: Iterable) -> None:
        super().__init__()
        _require_gl().glGenBuffers(1, self._id)
        self.bind()
        self._upload(data)

    @abstractmethod
    def _target(self):
        ...

    def _upload(self, data: Iterable) -> None:
        api = _require_gl()
        array = np.ascontiguousarray(np.asarray(list(data), dtype=self._dtype).ravel())
        api.glBufferData(self._target(), array.nbytes, array.tobytes(), api.GL_STATIC_DRAW)

    def bind(self) -> None:
        _require_gl().glBindBuffer(self._target(), self.id)

    def unbind(self) -> None:
        _require_gl().glBindBuffer(self._target(), 0)

    def delete(self) -> None:
        _require_gl().glDeleteBuffers(1, self._id)


class VBO(_DataBuffer):
    """A vertex buffer holding 32-bit floats."""

    _dtype = np.float32

    def __init__(self, data: Iterable[float]) -> None:
        super().__init__(data)

    def _target(self):
        return _require_gl().GL_ARRAY_BUFFER

    def update_data(self, data: Iterable[float]) -> None:
        """Replace the buffer contents, leaving it unbound afterwards."""
        self.bind()
        self._upload(data)
        self.unbind()


class EBO(_DataBuffer):
    """An element buffer holding 32-bit unsigned vertex indices."""

    _dtype = np.uint32

    def __init__(self, indices: Iterable[int]) -> None:
        super().__init__(indices)

    def _target(self):
        return _require_gl().GL_ELEMENT_ARRAY_BUFFER


class Texture(Buffer):
    """A 2D RGB texture loaded from an image file, flipped to OpenGL's bottom-up rows."""

    def __init__(self, source: str | PathLike) -> None:
        super().__init__()
        api = _require_gl()
        api.glGenTextures(1, self._id)
        self.bind()

        api.glTexParameteri(api.GL_TEXTURE_2D, api.GL_TEXTURE_WRAP_S, api.GL_REPEAT)
        api.glTexParameteri(api.GL_TEXTURE_2D, api.GL_TEXTURE_WRAP_T, api.GL_REPEAT)
        api.glTexParameteri(api.GL_TEXTURE_2D, api.GL_TEXTURE_MIN_FILTER, api.GL_LINEAR_MIPMAP_LINEAR)
        api.glTexParameteri(api.GL_TEXTURE_2D, api.GL_TEXTURE_MAG_FILTER, api.GL_LINEAR)

        try:
            with Image.open(source) as image:
                flipped = image.convert("RGB").transpose(Image.Transpose.FLIP_TOP_BOTTOM)
        except OSError:
            print("Failed to load texture")
            return

        width, height = flipped.size
        api.glTexImage2D(
            api.GL_TEXTURE_2D, 0, api.GL_RGB, width, height, 0,
            api.GL_RGB, api.GL_UNSIGNED_BYTE, flipped.tobytes(),
        )
        api.glGenerateMipmap(api.GL_TEXTURE_2D)

    def bind(self) -> None:
        api = _require_gl()
        api.glBindTexture(api.GL_TEXTURE_2D, self.id)

    def unbind(self) -> None:
        api = _require_gl()
        api.glBindTexture(api.GL_TEXTURE_2D, 0)

    def delete(self) -> None:
        _require_gl().glDeleteTextures(1, self._id)


class VAO:
    """A vertex array object describing how buffer data feeds shader inputs."""

    def __init__(self) -> None:
        api = _require_gl()
        self._id = api.GLuint(0)
        api.glGenVertexArrays(1, self._id)

    @property
    def id(self) -> int:
        """The OpenGL name of this vertex array."""
        return self._id.value

    def link_buffers(self, layout: int, stride: int, offset: int) -> None:
        """Attach three floats per vertex, read at ``offset`` every ``stride`` bytes, to ``layout``."""
        api = _require_gl()
        api.glVertexAttribPointer(
            layout, 3, api.GL_FLOAT, api.GL_FALSE, stride, offset or None
        )
        api.glEnableVertexAttribArray(layout)

    def bind(self) -> None:
        _require_gl().glBindVertexArray(self.id)

    def unbind(self) -> None:
        _require_gl().glBindVertexArray(0)

    def delete(self) -> None:
        _require_gl().glDeleteVertexArrays(1, self._id)