"""The application window and its OpenGL state."""

from __future__ import annotations

import sys

try:
    from pyglet import gl
except Exception:  # no usable OpenGL library on this machine
    gl = None

# pyglet's key symbol for the Escape key.
ESCAPE_KEY = 65307


def _require_gl():
    if gl is None:
        raise RuntimeError("OpenGL is not available")
    return gl


class WindowNotCreatedError(RuntimeError):
    """Raised when the native window cannot be opened."""

    def __init__(self, message: str = "Failed to create a window") -> None:
        super().__init__(message)


class GladInitFailedError(RuntimeError):
    """Raised when no OpenGL context can be made current."""

    def __init__(self, message: str = "Failed to initialize GLAD") -> None:
        super().__init__(message)


class Window:
    """A window with an OpenGL 3.3 context, depth testing, 4x multisampling and culling."""

    def __init__(self, width: int, height: int, resizable: bool, title: str) -> None:
        self.width = int(width)
        self.height = int(height)
        self.resizable = bool(resizable)
        self.title = title
        self._should_close = False
        self._launched = False
        try:
            native = self._create_native()
        except Exception as exc:
            raise WindowNotCreatedError() from exc
        if native is None:
            raise WindowNotCreatedError()
        self._native = native
        self._native.push_handlers(on_close=self._on_close, on_resize=self._on_resize)

    def _create_native(self):
        import pyglet.window

        api = _require_gl()
        config = api.Config(
            double_buffer=True,
            depth_size=24,
            sample_buffers=1,
            samples=4,
            major_version=3,
            minor_version=3,
            forward_compatible=sys.platform == "darwin",
        )
        return pyglet.window.Window(
            self.width, self.height, self.title, resizable=self.resizable, config=config
        )

    @property
    def native(self):
        """The underlying pyglet window."""
        if self._native is None:
            raise RuntimeError("window has been closed")
        return self._native

    def __enter__(self) -> Window:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _on_close(self) -> bool:
        self._should_close = True
        return True

    def _on_resize(self, width: int, height: int) -> bool:
        self.width = width
        self.height = height
        if self._launched:
            self._update_viewport()
        return True

    def _update_viewport(self) -> None:
        fb_width, fb_height = self.native.get_framebuffer_size()
        _require_gl().glViewport(0, 0, fb_width, fb_height)

    def launch(self) -> None:
        """Make the window's context current and set up the fixed GL state."""
        api = _require_gl()
        self.native.switch_to()
        if getattr(api, "current_context", None) is None:
            raise GladInitFailedError()
        self._launched = True
        self._update_viewport()

        api.glEnable(api.GL_DEPTH_TEST)
        api.glDepthFunc(api.GL_LESS)
        api.glEnable(api.GL_MULTISAMPLE)
        api.glEnable(api.GL_CULL_FACE)
        api.glCullFace(api.GL_BACK)
        api.glFrontFace(api.GL_CCW)

    def should_close(self) -> bool:
        """Whether the user or a key binding asked for the window to close."""
        return self._should_close

    def swap_buffers(self) -> None:
        """Show the frame just drawn."""
        self.native.flip()

    def clear_color(self, color) -> None:
        """Clear colour and depth, filling the window with ``color``."""
        api = _require_gl()
        api.glClearColor(color.r, color.g, color.b, color.a)
        api.glClear(api.GL_COLOR_BUFFER_BIT | api.GL_DEPTH_BUFFER_BIT)

    def apply_close_window_to_input_handler(self, input_handler) -> None:
        """Register the Escape key to ask the window to close."""

        def request_close(_window) -> None:
            self._should_close = True

        input_handler.add_key_callback(ESCAPE_KEY, False, request_close)

    def close(self) -> None:
        """Destroy the native window; calling it again does nothing."""
        if self._native is not None:
            self._native.close()
            self._native = None