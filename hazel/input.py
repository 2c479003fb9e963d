"""Polling access to keyboard and mouse state."""

from abc import ABC, abstractmethod
from typing import Optional, Tuple


class InputBackend(ABC):
    """Platform implementation that answers input queries."""

    @abstractmethod
    def is_key_pressed(self, keycode: int) -> bool:
        """Whether the key is held down."""

    @abstractmethod
    def is_mouse_button_pressed(self, button: int) -> bool:
        """Whether the mouse button is held down."""

    @abstractmethod
    def get_mouse_position(self) -> Tuple[float, float]:
        """Cursor position in window coordinates."""

    def get_mouse_x(self) -> float:
        x, _ = self.get_mouse_position()
        return x

    def get_mouse_y(self) -> float:
        _, y = self.get_mouse_position()
        return y


class Input:
    """Global input queries routed to the installed backend."""

    _instance: Optional[InputBackend] = None

    @staticmethod
    def set_instance(instance: Optional[InputBackend]) -> None:
        """Install the backend used by all queries, or remove it with None."""
        Input._instance = instance

    @staticmethod
    def _backend() -> InputBackend:
        if Input._instance is None:
            raise RuntimeError("no input backend installed")
        return Input._instance

    @staticmethod
    def is_key_pressed(keycode: int) -> bool:
        return Input._backend().is_key_pressed(keycode)

    @staticmethod
    def is_mouse_button_pressed(button: int) -> bool:
        return Input._backend().is_mouse_button_pressed(button)

    @staticmethod
    def get_mouse_position() -> Tuple[float, float]:
        return Input._backend().get_mouse_position()

    @staticmethod
    def get_mouse_x() -> float:
        return Input._backend().get_mouse_x()

    @staticmethod
    def get_mouse_y() -> float:
        return Input._backend().get_mouse_y()