"""OpenGL implementation of the drawing commands."""

from typing import Sequence

from hazel.renderer.api import RendererAPI, VertexArray

_GL_COLOR_BUFFER_BIT = 0x4000
_GL_DEPTH_BUFFER_BIT = 0x0100
_GL_TRIANGLES = 0x0004
_GL_UNSIGNED_INT = 0x1405


def _gl():
    from pyglet import gl

    return gl


class OpenGLRendererAPI(RendererAPI):
    """Clears and draws through OpenGL."""

    def set_clear_color(self, color: Sequence[float]) -> None:
        r, g, b, a = (float(c) for c in color)
        _gl().glClearColor(r, g, b, a)

    def clear(self) -> None:
        _gl().glClear(_GL_COLOR_BUFFER_BIT | _GL_DEPTH_BUFFER_BIT)

    def draw_indexed(self, vertex_array: VertexArray) -> None:
        index_buffer = vertex_array.index_buffer
        if index_buffer is None:
            raise ValueError("vertex array has no index buffer")
        _gl().glDrawElements(_GL_TRIANGLES, index_buffer.count, _GL_UNSIGNED_INT, None)