"""OpenGL shader program built from vertex and fragment sources."""

from typing import Any, Sequence

import numpy as np

from hazel.log import core_logger
from hazel.renderer.api import Shader


class ShaderCompileError(RuntimeError):
    """A shader failed to compile or the program failed to link."""


def _shader_api():
    from pyglet import graphics

    return graphics.shader


def _failure(message: str, error: Exception) -> ShaderCompileError:
    core_logger().error("%s", error)
    return ShaderCompileError(f"{message}: {error}")


class OpenGLShader(Shader):
    """Linked shader program with uniform upload helpers."""

    def __init__(self, vertex_src: str, fragment_src: str) -> None:
        api = self._api = _shader_api()
        try:
            vertex = api.Shader(vertex_src, "vertex")
        except api.ShaderException as exc:
            raise _failure("vertex shader compilation failure", exc) from exc
        try:
            fragment = api.Shader(fragment_src, "fragment")
        except api.ShaderException as exc:
            vertex.delete()
            raise _failure("fragment shader compilation failure", exc) from exc
        try:
            self._program = api.ShaderProgram(vertex, fragment)
        except api.ShaderException as exc:
            vertex.delete()
            fragment.delete()
            raise _failure("shader link failure", exc) from exc

    @property
    def renderer_id(self) -> int:
        return self._program.id

    def bind(self) -> None:
        self._program.use()

    def unbind(self) -> None:
        self._program.stop()

    def _upload(self, name: str, value: Any) -> None:
        # A uniform the program does not have is ignored, as with location -1.
        try:
            self._program[name] = value
        except self._api.ShaderException:
            pass

    def upload_uniform_int(self, name: str, value: int) -> None:
        self._upload(name, int(value))

    def upload_uniform_float(self, name: str, value: float) -> None:
        self._upload(name, float(value))

    def upload_uniform_float2(self, name: str, value: Sequence[float]) -> None:
        x, y = (float(v) for v in value)
        self._upload(name, (x, y))

    def upload_uniform_float3(self, name: str, value: Sequence[float]) -> None:
        x, y, z = (float(v) for v in value)
        self._upload(name, (x, y, z))

    def upload_uniform_float4(self, name: str, value: Sequence[float]) -> None:
        x, y, z, w = (float(v) for v in value)
        self._upload(name, (x, y, z, w))

    @staticmethod
    def _column_major(matrix, size: int) -> list:
        array = np.asarray(matrix, dtype=np.float32)
        if array.shape != (size, size):
            raise ValueError(f"matrix must be {size}x{size}")
        return array.flatten(order="F").tolist()

    def upload_uniform_mat3(self, name: str, matrix) -> None:
        self._upload(name, self._column_major(matrix, 3))

    def upload_uniform_mat4(self, name: str, matrix) -> None:
        self._upload(name, self._column_major(matrix, 4))