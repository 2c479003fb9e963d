"""OpenGL vertex array object."""

from typing import Optional, Tuple

from hazel.renderer.api import VertexArray
from hazel.renderer.buffer import IndexBuffer, ShaderDataType, VertexBuffer

GL_FLOAT = 0x1406
GL_INT = 0x1404
GL_BOOL = 0x8B56
_GL_TRUE = 1
_GL_FALSE = 0

_BASE_TYPES = {
    ShaderDataType.FLOAT: GL_FLOAT,
    ShaderDataType.FLOAT2: GL_FLOAT,
    ShaderDataType.FLOAT3: GL_FLOAT,
    ShaderDataType.FLOAT4: GL_FLOAT,
    ShaderDataType.MAT3: GL_FLOAT,
    ShaderDataType.MAT4: GL_FLOAT,
    ShaderDataType.INT: GL_INT,
    ShaderDataType.INT2: GL_INT,
    ShaderDataType.INT3: GL_INT,
    ShaderDataType.INT4: GL_INT,
    ShaderDataType.BOOL: GL_BOOL,
}


def _gl():
    from pyglet import gl

    return gl


def shader_data_type_to_gl_base_type(data_type: ShaderDataType) -> int:
    """OpenGL scalar type of the attribute type's components."""
    try:
        return _BASE_TYPES[data_type]
    except KeyError:
        raise ValueError(f"unknown shader data type: {data_type!r}") from None


class OpenGLVertexArray(VertexArray):
    """Vertex array object binding attribute layouts and an index buffer."""

    def __init__(self) -> None:
        gl = _gl()
        renderer_id = gl.GLuint()
        gl.glCreateVertexArrays(1, renderer_id)
        self._renderer_id = renderer_id.value
        self._vertex_buffers: list = []
        self._index_buffer: Optional[IndexBuffer] = None

    @property
    def renderer_id(self) -> int:
        return self._renderer_id

    def bind(self) -> None:
        _gl().glBindVertexArray(self._renderer_id)

    def unbind(self) -> None:
        _gl().glBindVertexArray(0)

    def add_vertex_buffer(self, vertex_buffer: VertexBuffer) -> None:
        layout = vertex_buffer.layout
        if not len(layout):
            raise ValueError("vertex buffer has no layout")
        gl = _gl()
        gl.glBindVertexArray(self._renderer_id)
        vertex_buffer.bind()
        for index, element in enumerate(layout):
            gl.glEnableVertexAttribArray(index)
            gl.glVertexAttribPointer(
                index,
                element.component_count,
                shader_data_type_to_gl_base_type(element.data_type),
                _GL_TRUE if element.normalized else _GL_FALSE,
                layout.stride,
                element.offset,
            )
        self._vertex_buffers.append(vertex_buffer)

    def set_index_buffer(self, index_buffer: IndexBuffer) -> None:
        _gl().glBindVertexArray(self._renderer_id)
        index_buffer.bind()
        self._index_buffer = index_buffer

    @property
    def vertex_buffers(self) -> Tuple[VertexBuffer, ...]:
        return tuple(self._vertex_buffers)

    @property
    def index_buffer(self) -> Optional[IndexBuffer]:
        return self._index_buffer