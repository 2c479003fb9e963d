"""The application: owns the window and the layer stack and runs the main loop."""

import time
from typing import Optional

from hazel.events import Event, EventDispatcher, WindowCloseEvent
from hazel.input import Input
from hazel.layer import Layer, LayerStack
from hazel.timestep import Timestep
from hazel.window import Window, WindowProps


class ApplicationError(RuntimeError):
    """Raised on misuse of the application singleton."""


class Application:
    """Single running application; close it to allow another to be created."""

    _instance: Optional["Application"] = None

    def __init__(self, window: Optional[Window] = None) -> None:
        if Application._instance is not None:
            raise ApplicationError("Application already exists!")
        if window is None:
            from hazel.platform.pyglet_input import PygletInput
            from hazel.platform.pyglet_window import create_window

            window = create_window(WindowProps())
            Input.set_instance(PygletInput(window))
        Application._instance = self
        self._window = window
        self._window.set_event_callback(self.on_event)
        self._layer_stack = LayerStack()
        self._running = True
        self._closed = False
        self._last_frame_time = time.perf_counter()

    @staticmethod
    def get() -> "Application":
        """The current application."""
        if Application._instance is None:
            raise ApplicationError("no application exists")
        return Application._instance

    @property
    def window(self) -> Window:
        return self._window

    @property
    def running(self) -> bool:
        return self._running

    def push_layer(self, layer: Layer) -> None:
        self._layer_stack.push_layer(layer)

    def push_overlay(self, layer: Layer) -> None:
        self._layer_stack.push_overlay(layer)

    def on_event(self, event: Event) -> None:
        """Handle a window event, then pass it down the layers from the top."""
        EventDispatcher(event).dispatch(WindowCloseEvent, self._on_window_close)
        for layer in reversed(self._layer_stack):
            layer.on_event(event)
            if event.handled:
                break

    def run(self) -> None:
        """Update and render every layer each frame until the window closes."""
        while self._running:
            now = time.perf_counter()
            timestep = Timestep(now - self._last_frame_time)
            self._last_frame_time = now

            for layer in self._layer_stack:
                layer.on_update(timestep)
            for layer in self._layer_stack:
                layer.on_imgui_render()

            self._window.on_update()

    def close(self) -> None:
        """Stop the loop, close the window and release the singleton."""
        self._running = False
        if self._closed:
            return
        self._closed = True
        if Application._instance is self:
            Application._instance = None
        close_window = getattr(self._window, "close", None)
        if callable(close_window):
            close_window()

    def __enter__(self) -> "Application":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _on_window_close(self, event: WindowCloseEvent) -> bool:
        self._running = False
        return True