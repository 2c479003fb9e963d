"""OpenGL vertex and index buffers."""

from typing import Sequence

import numpy as np

from hazel.renderer.buffer import BufferLayout, IndexBuffer, VertexBuffer

_GL_ARRAY_BUFFER = 0x8892
_GL_ELEMENT_ARRAY_BUFFER = 0x8893
_GL_STATIC_DRAW = 0x88E4


def _gl():
    from pyglet import gl

    return gl


def _create_buffer(gl, target: int, data: bytes) -> int:
    renderer_id = gl.GLuint()
    gl.glCreateBuffers(1, renderer_id)
    gl.glBindBuffer(target, renderer_id.value)
    gl.glBufferData(target, len(data), data, _GL_STATIC_DRAW)
    return renderer_id.value


class OpenGLVertexBuffer(VertexBuffer):
    """Static vertex buffer filled with 32-bit floats."""

    def __init__(self, vertices: Sequence[float]) -> None:
        super().__init__()
        data = np.asarray(vertices, dtype=np.float32).ravel().tobytes()
        self._renderer_id = _create_buffer(_gl(), _GL_ARRAY_BUFFER, data)
        self._size = len(data)

    @property
    def renderer_id(self) -> int:
        return self._renderer_id

    @property
    def size(self) -> int:
        """Size of the data in bytes."""
        return self._size

    def bind(self) -> None:
        _gl().glBindBuffer(_GL_ARRAY_BUFFER, self._renderer_id)

    def unbind(self) -> None:
        _gl().glBindBuffer(_GL_ARRAY_BUFFER, 0)

    @property
    def layout(self) -> BufferLayout:
        return self._layout

    @layout.setter
    def layout(self, layout: BufferLayout) -> None:
        self._layout = layout


class OpenGLIndexBuffer(IndexBuffer):
    """Static index buffer of 32-bit unsigned integers."""

    def __init__(self, indices: Sequence[int]) -> None:
        array = np.asarray(indices, dtype=np.uint32).ravel()
        self._renderer_id = _create_buffer(_gl(), _GL_ELEMENT_ARRAY_BUFFER, array.tobytes())
        self._count = int(array.size)

    @property
    def renderer_id(self) -> int:
        return self._renderer_id

    def bind(self) -> None:
        _gl().glBindBuffer(_GL_ELEMENT_ARRAY_BUFFER, self._renderer_id)

    def unbind(self) -> None:
        _gl().glBindBuffer(_GL_ELEMENT_ARRAY_BUFFER, 0)

    @property
    def count(self) -> int:
        return self._count