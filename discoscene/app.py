"""The disco scene: a figure and a bucket lit by three turning coloured spotlights."""

from __future__ import annotations

import argparse
import math
from pathlib import Path

from .camera import Camera
from .capture import PPMCapture
from .color import Color
from .debug import DebugFilter
from .entity import Amy, Bucket, Floor
from .input import InputHandler
from .lighting import SpotLight
from .mesh import Mesh
from .shader import ShaderProgram
from .window import Window

WINDOW_WIDTH = 1024
WINDOW_HEIGHT = 576
WINDOW_TITLE = "Amy, Bucket, and Disco"
ROTATION_STEP = 0.05

_MESH_FILES = {
    "amy": ("Amy.obj", "Amy.png"),
    "bucket": ("bucket.obj", "bucket.jpg"),
    "floor": ("floor.obj", "floor.jpg"),
}


def _make_spotlights() -> list[SpotLight]:
    position = (0, 200, 0)
    ambient = Color(0.2, 0.2, 0.2)
    kc, kl, kq = 1.0, 0.000035, 0.000044
    cutoff = math.pi / 6
    beams = [
        ((50, -200, -50), Color(1, 0, 0)),
        ((-50, -200, -50), Color(0, 1, 0)),
        ((0, -200, 50), Color(0, 0, 1)),
    ]
    return [
        SpotLight(position, direction, colour, ambient, kc, kl, kq, cutoff)
        for direction, colour in beams
    ]


def _load_meshes(root: Path) -> dict[str, Mesh]:
    mesh_dir = root / "meshes"
    return {
        name: Mesh(mesh_dir / obj, mesh_dir / texture)
        for name, (obj, texture) in _MESH_FILES.items()
    }


def _run(root: Path) -> int:
    meshes = _load_meshes(root)

    with Window(WINDOW_WIDTH, WINDOW_HEIGHT, False, WINDOW_TITLE) as window:
        window.launch()

        input_handler = InputHandler(window.native)
        debug = DebugFilter()
        capturer = PPMCapture()
        window.apply_close_window_to_input_handler(input_handler)
        debug.apply_to_input_handler(input_handler)
        capturer.apply_to_input_handler(input_handler)

        shader_dir = root / "shaders"
        shader = ShaderProgram(shader_dir / "default.vert", shader_dir / "default.frag")

        for mesh in meshes.values():
            mesh.gl_init()

        origin = (0, 0, 0)
        entities = [
            Amy(meshes["amy"], origin, 1, 0, origin),
            Bucket(meshes["bucket"], origin, 1, 0, origin),
            Floor(meshes["floor"], origin, 1, 0, origin),
        ]
        lights = _make_spotlights()

        camera = Camera((0, 100, 180), 60.0, 16.0 / 9.0, 0.1, 1000.0)
        camera.look_at((0, 80, 0))

        background = Color(0.3, 0.4, 0.5, 1.0)
        theta = 0.0

        while not window.should_close():
            input_handler.process_input()
            window.clear_color(background)
            shader.activate()

            debug.handle_debug_shader(shader)
            camera.apply(shader)

            for light in lights:
                light.rotate_y(theta)
            for light in lights:
                light.apply(shader)

            for item in entities:
                item.render(shader)

            theta += ROTATION_STEP
            window.swap_buffers()
            window.native.dispatch_events()

        shader.delete()
        for mesh in meshes.values():
            mesh.delete()
    return 0


def main(argv=None) -> int:
    """Open the scene window and run until it is closed; returns the exit status."""
    parser = argparse.ArgumentParser(
        prog="discoscene", description="Render the disco scene with turning spotlights."
    )
    parser.add_argument(
        "--resources",
        default="resources",
        help="directory holding the meshes/ and shaders/ folders (default: resources)",
    )
    args = parser.parse_args(argv)
    try:
        return _run(Path(args.resources))
    except Exception as exc:
        print(exc)
        return -1


if __name__ == "__main__":
    raise SystemExit(main())