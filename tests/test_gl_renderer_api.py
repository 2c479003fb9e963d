from types import SimpleNamespace

import pyglet
import pytest

from hazel.platform.opengl.gl_renderer_api import OpenGLRendererAPI


class FakeGL:
    def __init__(self):
        self.calls = []

    def glClearColor(self, *c):
        self.calls.append(("color", c))

    def glClear(self, mask):
        self.calls.append(("clear", mask))

    def glDrawElements(self, mode, count, kind, offset):
        self.calls.append(("draw", mode, count, kind))


@pytest.fixture
def fake_gl(monkeypatch):
    fake = FakeGL()
    monkeypatch.setattr(pyglet, "gl", fake, raising=False)
    return fake


def test_clear_color(fake_gl):
    api = OpenGLRendererAPI()
    result = api.set_clear_color((0.1, 0.1, 0.1, 1))
    assert result is None
    assert fake_gl.calls == [("color", (0.1, 0.1, 0.1, 1.0))]


def test_clear_color_needs_four(fake_gl):
    with pytest.raises(ValueError):
        OpenGLRendererAPI().set_clear_color((0.1, 0.2))
    assert fake_gl.calls == []


def test_clear_mask(fake_gl):
    api = OpenGLRendererAPI()
    result = api.clear()
    assert result is None
    assert fake_gl.calls == [("clear", 0x4000 | 0x0100)]


def test_draw_uses_index_count(fake_gl):
    api = OpenGLRendererAPI()
    va = SimpleNamespace(index_buffer=SimpleNamespace(count=6))
    result = api.draw_indexed(va)
    assert result is None
    assert len(fake_gl.calls) == 1
    assert fake_gl.calls[0][2] == 6


def test_draw_without_index_buffer(fake_gl):
    with pytest.raises(ValueError):
        OpenGLRendererAPI().draw_indexed(SimpleNamespace(index_buffer=None))