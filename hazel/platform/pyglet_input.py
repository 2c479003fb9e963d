"""Input queries answered from a pyglet window's tracked state."""

from typing import Any, Tuple

from hazel.input import InputBackend


class PygletInput(InputBackend):
    """Input backend reading key, button and cursor state from a window."""

    def __init__(self, window: Any) -> None:
        self._window = window

    def is_key_pressed(self, keycode: int) -> bool:
        return bool(self._window.is_key_pressed(keycode))

    def is_mouse_button_pressed(self, button: int) -> bool:
        return bool(self._window.is_mouse_button_pressed(button))

    def get_mouse_position(self) -> Tuple[float, float]:
        x, y = self._window.mouse_position
        return float(x), float(y)

    def get_mouse_x(self) -> float:
        x, _ = self.get_mouse_position()
        return x

    def get_mouse_y(self) -> float:
        _, y = self.get_mouse_position()
        return y