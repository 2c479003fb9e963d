"""Scene submission and the global render command queue."""

from typing import Optional, Sequence

import numpy as np

from hazel.platform.opengl.gl_renderer_api import OpenGLRendererAPI
from hazel.renderer.api import API, RendererAPI, Shader, VertexArray
from hazel.renderer.camera import OrthographicCamera
from hazel.renderer.transforms import identity


class RenderCommand:
    """Static entry points forwarding to the active renderer API."""

    _renderer_api: RendererAPI = OpenGLRendererAPI()

    @staticmethod
    def set_renderer_api(renderer_api: RendererAPI) -> None:
        RenderCommand._renderer_api = renderer_api

    @staticmethod
    def set_clear_color(color: Sequence[float]) -> None:
        RenderCommand._renderer_api.set_clear_color(color)

    @staticmethod
    def clear() -> None:
        RenderCommand._renderer_api.clear()

    @staticmethod
    def draw_indexed(vertex_array: VertexArray) -> None:
        RenderCommand._renderer_api.draw_indexed(vertex_array)


class Renderer:
    """Collects scene data and submits draws with it."""

    _view_projection: np.ndarray = identity()

    @staticmethod
    def begin_scene(camera: OrthographicCamera) -> None:
        Renderer._view_projection = camera.view_projection_matrix

    @staticmethod
    def end_scene() -> None:
        """Finish the scene; draws are issued immediately, so nothing is left."""

    @staticmethod
    def submit(shader: Shader, vertex_array: VertexArray,
               transform: Optional[np.ndarray] = None) -> None:
        if transform is None:
            transform = identity()
        shader.bind()
        shader.upload_uniform_mat4("u_ViewProjection", Renderer._view_projection)
        shader.upload_uniform_mat4("u_Transform", transform)
        vertex_array.bind()
        RenderCommand.draw_indexed(vertex_array)

    @staticmethod
    def get_api() -> API:
        return RendererAPI.get_api()

    @staticmethod
    def view_projection_matrix() -> np.ndarray:
        return np.array(Renderer._view_projection, copy=True)