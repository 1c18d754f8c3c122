"""Wavefront OBJ loading and the interleaved vertex data drawn from it."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike, fspath
from typing import NamedTuple

import numpy as np

from .buffers import VAO, VBO, Texture

_FLOAT_SIZE = 4
_FLOATS_PER_VERTEX = 8
_STRIDE = _FLOATS_PER_VERTEX * _FLOAT_SIZE


class MeshLoadError(Exception):
    """Raised when a mesh file cannot be read or used."""

    def __init__(self, path: str | PathLike, detail: str | None = None) -> None:
        self.path = fspath(path)
        message = f"Failed to load the mesh located at {self.path}"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class _Corner(NamedTuple):
    vertex: int
    texcoord: int
    normal: int


@dataclass
class ObjModel:
    """Flat attribute lists of an OBJ file and its triangulated face corners.

    Corner indices are zero-based; -1 marks an attribute the face leaves out.
    """

    vertices: list[float] = field(default_factory=list)
    normals: list[float] = field(default_factory=list)
    texcoords: list[float] = field(default_factory=list)
    faces: list[_Corner] = field(default_factory=list)


def _components(args: list[str], count: int) -> list[float]:
    values = [float(arg) for arg in args[:count]]
    return values + [0.0] * (count - len(values))


def _resolve(text: str, count: int) -> int:
    if not text:
        return -1
    index = int(text)
    if index > 0:
        return index - 1
    if index < 0:
        return count + index
    raise ValueError("face index 0 is not allowed")


def _corner(spec: str, model: ObjModel) -> _Corner:
    parts = spec.split("/")
    if len(parts) > 3:
        raise ValueError(f"malformed face corner {spec!r}")
    parts += [""] * (3 - len(parts))
    if not parts[0]:
        raise ValueError(f"face corner {spec!r} has no vertex")
    return _Corner(
        _resolve(parts[0], len(model.vertices) // 3),
        _resolve(parts[1], len(model.texcoords) // 2),
        _resolve(parts[2], len(model.normals) // 3),
    )


def load_obj(path: str | PathLike) -> ObjModel:
    """Parse an OBJ file, splitting polygons into triangle fans."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            lines = handle.read().splitlines()
    except OSError as exc:
        raise MeshLoadError(path, exc.strerror) from exc

    model = ObjModel()
    for number, line in enumerate(lines, 1):
        fields = line.split("#", 1)[0].split()
        if not fields:
            continue
        tag, args = fields[0], fields[1:]
        try:
            if tag == "v":
                model.vertices.extend(_components(args, 3))
            elif tag == "vn":
                model.normals.extend(_components(args, 3))
            elif tag == "vt":
                model.texcoords.extend(_components(args, 2))
            elif tag == "f":
                corners = [_corner(arg, model) for arg in args]
                for second, third in zip(corners[1:], corners[2:]):
                    model.faces.extend((corners[0], second, third))
        except ValueError as exc:
            raise MeshLoadError(path, f"line {number}: {exc}") from exc
    return model


class Mesh:
    """A textured OBJ mesh, interleaved as position, normal and UV per corner."""

    def __init__(self, source: str | PathLike, texture: str | PathLike) -> None:
        self.source = source
        self.texture_path = texture
        self.model = load_obj(source)
        self.vertices = np.asarray(self.model.vertices, dtype=np.float32)
        self.normals = np.asarray(self.model.normals, dtype=np.float32)

        positions = self.vertices.reshape(-1, 3)
        normals = self.normals.reshape(-1, 3)
        uvs = np.asarray(self.model.texcoords, dtype=np.float32).reshape(-1, 2)

        rows = []
        for corner in self.model.faces:
            if not (
                0 <= corner.vertex < len(positions)
                and 0 <= corner.normal < len(normals)
                and 0 <= corner.texcoord < len(uvs)
            ):
                raise MeshLoadError(
                    source, "every face corner needs a valid vertex, normal and texture coordinate"
                )
            rows.append(np.concatenate((positions[corner.vertex], normals[corner.normal], uvs[corner.texcoord])))
        self.mesh_data = np.asarray(rows, dtype=np.float32).reshape(-1, _FLOATS_PER_VERTEX)

        self.vao: VAO | None = None
        self.vbo: VBO | None = None
        self.texture: Texture | None = None

    def gl_init(self) -> None:
        """Load the texture and upload the vertex data; needs a current GL context."""
        self.texture = Texture(self.texture_path)
        self.vao = VAO()
        self.vao.bind()
        self.vbo = VBO(self.mesh_data)
        self.vao.link_buffers(0, _STRIDE, 0)
        self.vao.link_buffers(1, _STRIDE, 3 * _FLOAT_SIZE)
        self.vao.link_buffers(2, _STRIDE, 6 * _FLOAT_SIZE)
        self.vao.unbind()
        self.vbo.unbind()

    def _gl_objects(self) -> tuple[VAO, VBO, Texture]:
        if self.vao is None or self.vbo is None or self.texture is None:
            raise RuntimeError("mesh has not been initialised with gl_init()")
        return self.vao, self.vbo, self.texture

    def bind(self) -> None:
        """Bind the texture and vertex array for drawing."""
        vao, _, texture = self._gl_objects()
        texture.bind()
        vao.bind()

    def unbind(self) -> None:
        """Unbind the vertex array and texture."""
        vao, _, texture = self._gl_objects()
        vao.unbind()
        texture.unbind()

    def delete(self) -> None:
        """Release the texture, vertex array and vertex buffer."""
        vao, vbo, texture = self._gl_objects()
        texture.delete()
        vao.delete()
        vbo.delete()

    def vertex_count(self) -> int:
        """Number of distinct positions in the file."""
        return len(self.vertices) // 3

    def normal_count(self) -> int:
        """Number of distinct normals in the file."""
        return len(self.normals) // 3

    def mesh_data_size(self) -> int:
        """Number of interleaved corners to draw."""
        return len(self.mesh_data)