"""Window properties and the window interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable

from hazel.events import Event

EventCallback = Callable[[Event], None]


@dataclass
class WindowProps:
    """Initial title and size of a window."""

    title: str = "Hazel Engine"
    width: int = 1280
    height: int = 720


class Window(ABC):
    """A desktop window that turns native input into events."""

    @abstractmethod
    def on_update(self) -> None:
        """Poll pending events and present the frame."""

    @property
    @abstractmethod
    def width(self) -> int:
        """Current width in pixels."""

    @property
    @abstractmethod
    def height(self) -> int:
        """Current height in pixels."""

    @abstractmethod
    def set_event_callback(self, callback: EventCallback) -> None:
        """Set the function that receives every event of this window."""

    @property
    @abstractmethod
    def vsync(self) -> bool:
        """Whether buffer swaps wait for the vertical refresh."""

    @vsync.setter
    @abstractmethod
    def vsync(self, enabled: bool) -> None:
        """Turn vertical sync on or off."""

    @property
    @abstractmethod
    def native_window(self) -> Any:
        """The underlying platform window object."""