"""Wireframe debug mode toggled from the keyboard."""

from __future__ import annotations

try:
    from pyglet import gl
except Exception:  # no usable OpenGL library on this machine
    gl = None

# pyglet's key symbol for the B key.
DEBUG_KEY = 98


def _require_gl():
    if gl is None:
        raise RuntimeError("OpenGL is not available")
    return gl


class DebugFilter:
    """Switches rendering between filled polygons and wireframe."""

    def __init__(self) -> None:
        self._debug = False

    def is_in_debug_mode(self) -> bool:
        """Whether wireframe mode is on."""
        return self._debug

    def apply_to_input_handler(self, input_handler) -> None:
        """Register the B key to toggle debug mode once per press."""
        input_handler.add_key_callback(DEBUG_KEY, False, self.toggle_debug_mode)

    def handle_debug_shader(self, shader_program) -> None:
        """Tell the shaders whether debug mode is on."""
        shader_program.set_bool("isDebug", self._debug)

    def toggle_debug_mode(self, window) -> None:
        """Flip between filled and wireframe polygon drawing."""
        api = _require_gl()
        if self._debug:
            api.glPolygonMode(api.GL_FRONT_AND_BACK, api.GL_FILL)
            self._debug = False
        else:
            api.glPolygonMode(api.GL_FRONT_AND_BACK, api.GL_LINE)
            self._debug = True