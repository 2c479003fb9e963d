"""Creation of rendering resources for the selected graphics API."""

import os
from typing import Sequence, Union

from hazel.renderer.api import API, RendererAPI, Shader, Texture2D, VertexArray, UnsupportedRendererAPIError
from hazel.renderer.buffer import IndexBuffer, VertexBuffer


def _require_opengl() -> None:
    api = RendererAPI.get_api()
    if api is API.NONE:
        raise UnsupportedRendererAPIError("RendererAPI::None is currently not supported")
    if api is not API.OPENGL:
        raise UnsupportedRendererAPIError(f"unknown renderer API: {api!r}")


def create_vertex_buffer(vertices: Sequence[float]) -> VertexBuffer:
    _require_opengl()
    from hazel.platform.opengl.gl_buffer import OpenGLVertexBuffer

    return OpenGLVertexBuffer(vertices)


def create_index_buffer(indices: Sequence[int]) -> IndexBuffer:
    _require_opengl()
    from hazel.platform.opengl.gl_buffer import OpenGLIndexBuffer

    return OpenGLIndexBuffer(indices)


def create_shader(vertex_src: str, fragment_src: str) -> Shader:
    _require_opengl()
    from hazel.platform.opengl.gl_shader import OpenGLShader

    return OpenGLShader(vertex_src, fragment_src)


def create_texture2d(path: Union[str, os.PathLike]) -> Texture2D:
    _require_opengl()
    from hazel.platform.opengl.gl_texture import OpenGLTexture2D

    return OpenGLTexture2D(path)


def create_vertex_array() -> VertexArray:
    _require_opengl()
    from hazel.platform.opengl.gl_vertex_array import OpenGLVertexArray

    return OpenGLVertexArray()