# hazel

A small application framework for interactive 2D programs. It provides:

- an **application loop** (`hazel.application.Application`) that owns a window
  and drives a stack of layers;
- **layers and overlays** (`hazel.layer.Layer`, `hazel.layer.LayerStack`) that
  receive per-frame updates, a per-frame UI hook and events;
- a typed **event system** (`hazel.events`) with event types, category flags
  and an `EventDispatcher`;
- **input polling** through `hazel.input.Input`, with key and mouse-button
  codes in `hazel.keycodes` (`Key`, `MouseButton`, numbered as in GLFW);
- a **renderer** (`hazel.renderer`) with buffer layouts, vertex and index
  buffers, vertex arrays, shaders, 2D textures, an `OrthographicCamera` and
  numpy matrix helpers;
- an **OpenGL backend** (`hazel.platform.opengl`) and a pyglet window and input
  backend (`hazel.platform.pyglet_window`, `hazel.platform.pyglet_input`);
- engine and client **loggers** (`hazel.log`).

## Installation

```
pip install .
```

Running the tests:

```
pip install .[test]
pytest
```

## Running the sandbox

The package ships with a demo application, `hazel.sandbox`, that draws a
20 by 20 grid of flat-coloured squares and a textured quad. Arrow keys move the
camera, `A` and `D` rotate it.

```
hazel-sandbox
```

The demo loads its texture from `assets/textures/Checkerboard.png`, relative to
the current directory, so run it from a directory that holds that file. The
OpenGL backend creates its buffers, vertex arrays and textures with the
direct-state-access calls of OpenGL 4.5, so the driver must offer that version.

## Writing an application

Subclass `Layer`, push it onto an `Application`, and run:

```python
from hazel.application import Application
from hazel.events import EventDispatcher, KeyPressedEvent
from hazel.layer import Layer
from hazel.platform.pyglet_window import create_window
from hazel.window import WindowProps


class MyLayer(Layer):
    def __init__(self):
        super().__init__("My layer")

    def on_update(self, ts):
        print(f"frame took {ts.milliseconds:.2f} ms")

    def on_event(self, event):
        EventDispatcher(event).dispatch(KeyPressedEvent, self._on_key)

    def _on_key(self, event):
        print(event)
        return False


with Application(create_window(WindowProps())) as app:
    app.push_layer(MyLayer())
    app.run()
```

Layers are updated in stack order (layers first, overlays last); events travel
the other way, from the top-most overlay down, and stop as soon as a handler
marks the event handled. A `WindowCloseEvent` stops the loop.

Only one `Application` may exist at a time; creating a second raises
`ApplicationError` until the first is closed. `Application()` without a
window opens a default pyglet window and installs a `PygletInput` backend for
`Input`; when you pass your own window, install a backend yourself with
`Input.set_instance(...)` if you want to poll input.

The base `Layer` hooks keep simple bookkeeping: `attached`, `frames`,
`ui_frames`, `last_timestep` and `last_event`.

## Rendering

```python
from hazel.renderer.buffer import BufferLayout, ShaderDataType
from hazel.renderer.camera import OrthographicCamera
from hazel.renderer.factory import create_index_buffer, create_vertex_array, create_vertex_buffer
from hazel.renderer.renderer import Renderer
from hazel.renderer.transforms import scaling, translation

square = create_vertex_array()
vertices = create_vertex_buffer([
    -0.5, -0.5, 0.0,
     0.5, -0.5, 0.0,
     0.5,  0.5, 0.0,
    -0.5,  0.5, 0.0,
])
vertices.layout = BufferLayout([(ShaderDataType.FLOAT3, "a_Position")])
square.add_vertex_buffer(vertices)
square.set_index_buffer(create_index_buffer([0, 1, 2, 2, 3, 0]))

camera = OrthographicCamera(-1.6, 1.6, -0.9, 0.9)
Renderer.begin_scene(camera)
# Renderer.submit(shader, square, translation((0.5, 0.0, 0.0)) @ scaling(0.1))
Renderer.end_scene()
```

`Renderer.submit` uploads `u_ViewProjection` and `u_Transform` to the shader
and draws the vertex array's indices as triangles. Resources are created
through `hazel.renderer.factory`, which raises `UnsupportedRendererAPIError`
when `RendererAPI.set_api(API.NONE)` has been selected. Shader compile and link
failures raise `hazel.platform.opengl.gl_shader.ShaderCompileError`.

`hazel.renderer.transforms` offers `identity`, `ortho`, `translation`,
`rotation_z` and `scaling` for building 4×4 float32 matrices for column
vectors.

## Logging

Call `hazel.log.init()` once at start-up. `core_logger()` returns the engine's
logger (`HAZEL`) and `client_logger()` the application's (`APP`); both write
every level to standard output, coloured on a terminal.

## What it does not do

- There is no immediate-mode UI toolkit. `Layer.on_imgui_render` is called once
  per frame as a hook, but nothing draws a UI; the demo has no settings window
  for changing the square colour.
- Only an OpenGL backend exists, and only pyglet is used for windows and input.
- Events are dispatched immediately as they arrive; there is no event queue.