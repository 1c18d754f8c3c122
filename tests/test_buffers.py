from types import SimpleNamespace
from unittest import mock

import pytest
from PIL import Image

from discoscene import buffers
from discoscene.buffers import EBO, VAO, VBO, Buffer, Texture


def _cell(value=0):
    return SimpleNamespace(value=value)


def _assign(value):
    def side_effect(_count, ref):
        ref.value = value

    return side_effect


@pytest.fixture
def fake_gl(monkeypatch):
    fake = mock.MagicMock()
    fake.GLuint = _cell
    fake.glGenBuffers.side_effect = _assign(7)
    fake.glGenTextures.side_effect = _assign(9)
    fake.glGenVertexArrays.side_effect = _assign(4)
    monkeypatch.setattr(buffers, "gl", fake)
    return fake


def test_buffer_is_abstract():
    with pytest.raises(TypeError):
        Buffer()


def test_vbo_generates_binds_and_uploads(fake_gl):
    vbo = VBO([1.0, 2.0, 3.0, 4.0])
    assert vbo.id == 7
    fake_gl.glBindBuffer.assert_called_with(fake_gl.GL_ARRAY_BUFFER, 7)
    target, size, data, usage = fake_gl.glBufferData.call_args.args
    assert target is fake_gl.GL_ARRAY_BUFFER
    assert size == 4 * 4
    assert len(data) == size
    assert usage is fake_gl.GL_STATIC_DRAW


def test_vbo_unbind_binds_zero(fake_gl):
    vbo = VBO([0.0])
    vbo.unbind()
    assert vbo.id == 7
    assert fake_gl.glBindBuffer.call_args.args == (fake_gl.GL_ARRAY_BUFFER, 0)


def test_vbo_update_data_rebinds_then_unbinds(fake_gl):
    vbo = VBO([0.0])
    fake_gl.glBindBuffer.reset_mock()
    vbo.update_data([1.0, 2.0])
    assert [c.args for c in fake_gl.glBindBuffer.call_args_list] == [
        (fake_gl.GL_ARRAY_BUFFER, vbo.id),
        (fake_gl.GL_ARRAY_BUFFER, 0),
    ]
    assert vbo.id == 7
    assert fake_gl.glBufferData.call_args.args[1] == 2 * 4


def test_vbo_delete_releases_its_name(fake_gl):
    vbo = VBO([0.0])
    vbo.delete()
    count, ref = fake_gl.glDeleteBuffers.call_args.args
    assert count == 1
    assert ref.value == vbo.id == 7


def test_ebo_uses_element_array_target(fake_gl):
    ebo = EBO([0, 1, 2])
    assert ebo.id == 7
    fake_gl.glBindBuffer.assert_called_with(fake_gl.GL_ELEMENT_ARRAY_BUFFER, 7)
    target, size, _data, _usage = fake_gl.glBufferData.call_args.args
    assert target is fake_gl.GL_ELEMENT_ARRAY_BUFFER
    assert size == 3 * 4


def test_texture_uploads_flipped_rgb(fake_gl, tmp_path):
    path = tmp_path / "tex.png"
    image = Image.new("RGBA", (1, 2))
    image.putpixel((0, 0), (255, 0, 0, 255))
    image.putpixel((0, 1), (0, 0, 255, 255))
    image.save(path)

    texture = Texture(str(path))
    assert texture.id == 9
    fake_gl.glBindTexture.assert_called_with(fake_gl.GL_TEXTURE_2D, 9)
    args = fake_gl.glTexImage2D.call_args.args
    assert (args[3], args[4]) == (1, 2)
    pixels = bytes(args[8])
    assert pixels == bytes([0, 0, 255, 255, 0, 0])
    fake_gl.glGenerateMipmap.assert_called_once_with(fake_gl.GL_TEXTURE_2D)


def test_texture_missing_file_reports_failure(fake_gl, tmp_path, capsys):
    texture = Texture(tmp_path / "missing.png")
    assert "Failed to load texture" in capsys.readouterr().out
    fake_gl.glTexImage2D.assert_not_called()
    assert texture.id == 9


def test_texture_unbind_and_delete(fake_gl, tmp_path):
    path = tmp_path / "tex.png"
    Image.new("RGB", (2, 2)).save(path)
    texture = Texture(path)
    texture.unbind()
    assert fake_gl.glBindTexture.call_args.args == (fake_gl.GL_TEXTURE_2D, 0)
    texture.delete()
    assert fake_gl.glDeleteTextures.call_args.args[1].value == texture.id == 9


def test_vao_lifecycle(fake_gl):
    vao = VAO()
    assert vao.id == 4
    vao.bind()
    fake_gl.glBindVertexArray.assert_called_with(4)
    vao.unbind()
    fake_gl.glBindVertexArray.assert_called_with(0)
    vao.delete()
    assert fake_gl.glDeleteVertexArrays.call_args.args[1].value == 4


def test_vao_link_buffers(fake_gl):
    vao = VAO()
    vao.link_buffers(1, 32, 12)
    layout, size, kind, normalized, stride, offset = fake_gl.glVertexAttribPointer.call_args.args
    assert vao.id == 4
    assert (layout, size, stride, offset) == (1, 3, 32, 12)
    assert kind is fake_gl.GL_FLOAT
    assert normalized is fake_gl.GL_FALSE
    assert fake_gl.glEnableVertexAttribArray.call_args.args == (1,)


def test_vao_zero_offset_is_null_pointer(fake_gl):
    vao = VAO()
    vao.link_buffers(0, 32, 0)
    assert vao.id == 4
    assert fake_gl.glVertexAttribPointer.call_args.args[5] is None