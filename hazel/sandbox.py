"""Example application: a grid of coloured squares, a textured quad and a movable camera."""

import argparse
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from hazel import log
from hazel.application import Application
from hazel.events import Event
from hazel.input import Input
from hazel.keycodes import Key
from hazel.layer import Layer
from hazel.renderer.buffer import BufferLayout, ShaderDataType
from hazel.renderer.camera import OrthographicCamera
from hazel.renderer.factory import (
    create_index_buffer,
    create_shader,
    create_texture2d,
    create_vertex_array,
    create_vertex_buffer,
)
from hazel.renderer.renderer import RenderCommand, Renderer
from hazel.renderer.transforms import scaling, translation
from hazel.timestep import Timestep
from hazel.window import Window

CAMERA_MOVE_SPEED = 5.0
CAMERA_ROTATION_SPEED = 180.0
TEXTURE_PATH = "assets/textures/Checkerboard.png"

_TRIANGLE_VERTEX_SRC = """
#version 330 core

layout(location = 0) in vec3 a_Position;
layout(location = 1) in vec4 a_Color;

uniform mat4 u_ViewProjection;
uniform mat4 u_Transform;

out vec3 v_Position;
out vec4 v_Color;

void main()
{
    v_Position = a_Position;
    v_Color = a_Color;
    gl_Position = u_ViewProjection * u_Transform * vec4(a_Position, 1.0);
}
"""

_TRIANGLE_FRAGMENT_SRC = """
#version 330 core

layout(location = 0) out vec4 color;

in vec3 v_Position;
in vec4 v_Color;

void main()
{
    color = v_Color;
}
"""

_FLAT_VERTEX_SRC = """
#version 330 core

layout(location = 0) in vec3 a_Position;

uniform mat4 u_ViewProjection;
uniform mat4 u_Transform;

out vec3 v_Position;

void main()
{
    v_Position = a_Position;
    gl_Position = u_ViewProjection * u_Transform * vec4(a_Position, 1.0);
}
"""

_FLAT_FRAGMENT_SRC = """
#version 330 core

layout(location = 0) out vec4 color;

in vec3 v_Position;

uniform vec3 u_Color;

void main()
{
    color = vec4(u_Color, 1.0);
}
"""

_TEXTURE_VERTEX_SRC = """
#version 330 core

layout(location = 0) in vec3 a_Position;
layout(location = 1) in vec2 a_TexCoord;

uniform mat4 u_ViewProjection;
uniform mat4 u_Transform;

out vec2 v_TexCoord;

void main()
{
    v_TexCoord = a_TexCoord;
    gl_Position = u_ViewProjection * u_Transform * vec4(a_Position, 1.0);
}
"""

_TEXTURE_FRAGMENT_SRC = """
#version 330 core

layout(location = 0) out vec4 color;

in vec2 v_TexCoord;

uniform sampler2D u_Texture;

void main()
{
    color = texture(u_Texture, v_TexCoord);
}
"""

_TRIANGLE_VERTICES = (
    -0.5, -0.5, 0.0, 0.8, 0.2, 0.8, 1.0,
    0.5, -0.5, 0.0, 0.2, 0.3, 0.8, 1.0,
    0.0, 0.5, 0.0, 0.8, 0.8, 0.2, 1.0,
)
_TRIANGLE_INDICES = (0, 1, 2)

_SQUARE_VERTICES = (
    -0.5, -0.5, 0.0, 0.0, 0.0,
    0.5, -0.5, 0.0, 1.0, 0.0,
    0.5, 0.5, 0.0, 1.0, 1.0,
    -0.5, 0.5, 0.0, 0.0, 1.0,
)
_SQUARE_INDICES = (0, 1, 2, 2, 3, 0)


def _step_camera(position: Sequence[float], rotation: float, ts: float,
                 is_pressed: Callable[[int], bool]) -> Tuple[np.ndarray, float]:
    """Camera position and rotation after one frame of arrow and A/D keys."""
    new_position = np.array(position, dtype=np.float32)
    step = CAMERA_MOVE_SPEED * float(ts)
    if is_pressed(Key.LEFT):
        new_position[0] -= step
    elif is_pressed(Key.RIGHT):
        new_position[0] += step

    if is_pressed(Key.UP):
        new_position[1] += step
    elif is_pressed(Key.DOWN):
        new_position[1] -= step

    turn = CAMERA_ROTATION_SPEED * float(ts)
    if is_pressed(Key.A):
        rotation += turn
    if is_pressed(Key.D):
        rotation -= turn
    return new_position, rotation


def _grid_transforms() -> List[np.ndarray]:
    """Transforms of the 20 by 20 grid of small squares, row by row."""
    scale = scaling(0.1)
    return [
        translation((x * 0.11, y * 0.11, 0.0)) @ scale
        for y in range(20)
        for x in range(20)
    ]


class ExampleLayer(Layer):
    """Draws the square grid and the textured quad through a keyboard-driven camera."""

    def __init__(self) -> None:
        super().__init__("Example")
        self._camera = OrthographicCamera(-1.6, 1.6, -0.9, 0.9)
        self._camera_position = np.zeros(3, dtype=np.float32)
        self._camera_rotation = 0.0
        self._square_color = (0.2, 0.3, 0.8)
        self._grid = _grid_transforms()

        self._vertex_array = create_vertex_array()
        vertex_buffer = create_vertex_buffer(_TRIANGLE_VERTICES)
        vertex_buffer.layout = BufferLayout([
            (ShaderDataType.FLOAT3, "a_Position"),
            (ShaderDataType.FLOAT4, "a_Color"),
        ])
        self._vertex_array.add_vertex_buffer(vertex_buffer)
        self._vertex_array.set_index_buffer(create_index_buffer(_TRIANGLE_INDICES))

        self._square_va = create_vertex_array()
        square_vb = create_vertex_buffer(_SQUARE_VERTICES)
        square_vb.layout = BufferLayout([
            (ShaderDataType.FLOAT3, "a_Position"),
            (ShaderDataType.FLOAT2, "a_TexCoord"),
        ])
        self._square_va.add_vertex_buffer(square_vb)
        self._square_va.set_index_buffer(create_index_buffer(_SQUARE_INDICES))

        self._shader = create_shader(_TRIANGLE_VERTEX_SRC, _TRIANGLE_FRAGMENT_SRC)
        self._flat_color_shader = create_shader(_FLAT_VERTEX_SRC, _FLAT_FRAGMENT_SRC)
        self._texture_shader = create_shader(_TEXTURE_VERTEX_SRC, _TEXTURE_FRAGMENT_SRC)

        self._texture = create_texture2d(TEXTURE_PATH)

        self._texture_shader.bind()
        self._texture_shader.upload_uniform_int("u_Texture", 0)

    def on_update(self, ts: Timestep) -> None:
        self._camera_position, self._camera_rotation = _step_camera(
            self._camera_position, self._camera_rotation, float(ts), Input.is_key_pressed
        )

        RenderCommand.set_clear_color((0.1, 0.1, 0.1, 1.0))
        RenderCommand.clear()

        self._camera.position = self._camera_position
        self._camera.rotation = self._camera_rotation

        Renderer.begin_scene(self._camera)

        self._flat_color_shader.bind()
        self._flat_color_shader.upload_uniform_float3("u_Color", self._square_color)
        for transform in self._grid:
            Renderer.submit(self._flat_color_shader, self._square_va, transform)

        self._texture.bind()
        Renderer.submit(self._texture_shader, self._square_va, scaling(1.5))

        Renderer.end_scene()

    def on_event(self, event: Event) -> None:
        """The example reacts to input by polling, not through events."""


class Sandbox(Application):
    """Application running a single example layer."""

    def __init__(self, window: Optional[Window] = None) -> None:
        super().__init__(window)
        try:
            self.push_layer(ExampleLayer())
        except BaseException:
            self.close()
            raise


def create_application() -> Application:
    return Sandbox()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="hazel-sandbox",
                                     description="Run the example application.")
    parser.parse_args(argv)

    log.init()
    log.core_logger().warning("Initialized Log!")
    log.client_logger().info("Hello! Var=%d", 5)

    app = create_application()
    try:
        app.run()
    finally:
        app.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())