from types import SimpleNamespace

import pytest

from discoscene import capture as capture_module
from discoscene.capture import CAPTURE_KEY, PPMCapture, format_ppm


class _FakeByteType:
    def __mul__(self, size):
        return lambda: bytearray(size)


def _fake_gl(data):
    def read_pixels(x, y, width, height, fmt, kind, buffer):
        assert (x, y, fmt, kind) == (0, 0, "rgb", "ubyte")
        buffer[:len(data)] = data

    return SimpleNamespace(
        GL_RGB="rgb",
        GL_UNSIGNED_BYTE="ubyte",
        GLubyte=_FakeByteType(),
        glReadPixels=read_pixels,
    )


def test_format_single_row():
    assert format_ppm(bytes([1, 2, 3, 4, 5, 6]), 2, 1) == "P3\n2 1\n255\n1 2 3 4 5 6 \n"


def test_format_flips_rows():
    text = format_ppm(bytes([1, 2, 3, 4, 5, 6]), 1, 2)
    assert text.splitlines()[3:] == ["4 5 6 ", "1 2 3 "]


def test_format_header_and_row_count():
    text = format_ppm(bytes(3 * 4 * 3), 4, 3)
    lines = text.splitlines()
    assert lines[:3] == ["P3", "4 3", "255"]
    assert len(lines) == 3 + 3


def test_format_rejects_wrong_size():
    with pytest.raises(ValueError):
        format_ppm(bytes(5), 2, 1)


def test_dump_writes_numbered_files(tmp_path, monkeypatch):
    data = bytes([10, 20, 30, 40, 50, 60])
    monkeypatch.setattr(capture_module, "gl", _fake_gl(data))
    capturer = PPMCapture()
    prefix = str(tmp_path / "shot-")
    first = capturer.dump(prefix, 2, 1)
    second = capturer.dump(prefix, 2, 1)
    assert first.name == "shot-0.ppm"
    assert second.name == "shot-1.ppm"
    assert capturer.id == 2
    assert first.read_text() == format_ppm(data, 2, 1)


def test_capture_uses_framebuffer_size(tmp_path, monkeypatch, capsys):
    data = bytes(range(12))
    monkeypatch.setattr(capture_module, "gl", _fake_gl(data))
    capturer = PPMCapture(str(tmp_path / "cap"))
    window = SimpleNamespace(get_framebuffer_size=lambda: (2, 2))
    path = capturer.capture(window)
    assert path == tmp_path / "cap0.ppm"
    assert path.read_text() == format_ppm(data, 2, 2)
    assert "Capture Window 0" in capsys.readouterr().out


def test_apply_to_input_handler_registers_single_press():
    registered = []
    handler = SimpleNamespace(add_key_callback=lambda *args: registered.append(args))
    capturer = PPMCapture()
    capturer.apply_to_input_handler(handler)
    assert len(registered) == 1
    key, holdable, func = registered[0]
    assert (key, holdable) == (CAPTURE_KEY, False)
    assert func == capturer.capture