"""Saving the window contents as plain-text PPM images."""

from __future__ import annotations

from pathlib import Path

try:
    from pyglet import gl
except Exception:  # no usable OpenGL library on this machine
    gl = None

# pyglet's key symbol for the P key.
CAPTURE_KEY = 112

DEFAULT_PREFIX = "Assignment0-ss"

_CHANNELS = 3


def _require_gl():
    if gl is None:
        raise RuntimeError("OpenGL is not available")
    return gl


def format_ppm(pixels: bytes, width: int, height: int) -> str:
    """Render RGB rows, given bottom row first, as a P3 image with the top row first."""
    row_size = _CHANNELS * width
    if len(pixels) != row_size * height:
        raise ValueError(
            f"expected {row_size * height} bytes for {width}x{height} RGB, got {len(pixels)}"
        )
    lines = [f"P3\n{width} {height}\n255\n"]
    for row in reversed(range(height)):
        start = row * row_size
        values = pixels[start:start + row_size]
        lines.append("".join(f"{value} " for value in values) + "\n")
    return "".join(lines)


class PPMCapture:
    """Writes numbered screenshots named ``<prefix><n>.ppm``, counting from 0."""

    def __init__(self, prefix: str = DEFAULT_PREFIX) -> None:
        self.prefix = prefix
        self.id = 0

    def dump(self, prefix: str, width: int, height: int) -> Path:
        """Read the framebuffer and write it to ``<prefix><id>.ppm``; returns the path."""
        api = _require_gl()
        pixels = (api.GLubyte * (_CHANNELS * width * height))()
        api.glReadPixels(0, 0, width, height, api.GL_RGB, api.GL_UNSIGNED_BYTE, pixels)
        path = Path(f"{prefix}{self.id}.ppm")
        with open(path, "w") as out:
            out.write(format_ppm(bytes(pixels), width, height))
        self.id += 1
        return path

    def apply_to_input_handler(self, input_handler) -> None:
        """Register the P key to take one screenshot per press."""
        input_handler.add_key_callback(CAPTURE_KEY, False, self.capture)

    def capture(self, window) -> Path:
        """Save the whole framebuffer of ``window``."""
        print(f"Capture Window {self.id}")
        width, height = window.get_framebuffer_size()
        return self.dump(self.prefix, width, height)