"""Blocking events dispatched from the window to the application and its layers."""

from enum import Enum, IntFlag
from typing import Callable, ClassVar, Type, TypeVar


class EventType(Enum):
    """Kind of an event."""

    NONE = 0
    WINDOW_CLOSE = 1
    WINDOW_RESIZE = 2
    WINDOW_FOCUS = 3
    WINDOW_LOST_FOCUS = 4
    WINDOW_MOVED = 5
    APP_TICK = 6
    APP_UPDATE = 7
    APP_RENDER = 8
    KEY_PRESSED = 9
    KEY_RELEASED = 10
    KEY_TYPED = 11
    MOUSE_BUTTON_PRESSED = 12
    MOUSE_BUTTON_RELEASED = 13
    MOUSE_MOVED = 14
    MOUSE_SCROLLED = 15

    @property
    def label(self) -> str:
        """Camel-case name, e.g. ``WindowResize``."""
        return "".join(part.capitalize() for part in self.name.split("_"))


class EventCategory(IntFlag):
    """Bit flags grouping events."""

    NONE = 0
    APPLICATION = 1 << 0
    INPUT = 1 << 1
    KEYBOARD = 1 << 2
    MOUSE = 1 << 3
    MOUSE_BUTTON = 1 << 4


def _number(value: float) -> str:
    return f"{value:g}"


class Event:
    """Base class of all events."""

    event_type: ClassVar[EventType] = EventType.NONE
    category: ClassVar[EventCategory] = EventCategory.NONE

    def __init__(self) -> None:
        self.handled = False

    @property
    def name(self) -> str:
        return self.event_type.label

    def is_in_category(self, category: EventCategory) -> bool:
        return bool(self.category & category)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self}>"


E = TypeVar("E", bound=Event)


class EventDispatcher:
    """Routes one event to a handler when the event is of the handler's type."""

    def __init__(self, event: Event) -> None:
        self._event = event

    def dispatch(self, event_class: Type[E], func: Callable[[E], bool]) -> bool:
        """Call ``func`` if the event matches ``event_class``; return whether it did."""
        if self._event.event_type == event_class.event_type:
            self._event.handled = bool(func(self._event))  # type: ignore[arg-type]
            return True
        return False


class WindowResizeEvent(Event):
    event_type = EventType.WINDOW_RESIZE
    category = EventCategory.APPLICATION

    def __init__(self, width: int, height: int) -> None:
        super().__init__()
        self.width = width
        self.height = height

    def __str__(self) -> str:
        return f"WindowResizeEvent: {self.width}, {self.height}"


class WindowCloseEvent(Event):
    event_type = EventType.WINDOW_CLOSE
    category = EventCategory.APPLICATION


class AppTickEvent(Event):
    event_type = EventType.APP_TICK
    category = EventCategory.APPLICATION


class AppUpdateEvent(Event):
    event_type = EventType.APP_UPDATE
    category = EventCategory.APPLICATION


class AppRenderEvent(Event):
    event_type = EventType.APP_RENDER
    category = EventCategory.APPLICATION


class KeyEvent(Event):
    """Base of keyboard events."""

    category = EventCategory.KEYBOARD | EventCategory.INPUT

    def __init__(self, keycode: int) -> None:
        super().__init__()
        self.keycode = keycode


class KeyPressedEvent(KeyEvent):
    event_type = EventType.KEY_PRESSED

    def __init__(self, keycode: int, repeat_count: int) -> None:
        super().__init__(keycode)
        self.repeat_count = repeat_count

    def __str__(self) -> str:
        return f"KeyPressedEvent: {int(self.keycode)} ({self.repeat_count} repeats)"


class KeyReleasedEvent(KeyEvent):
    event_type = EventType.KEY_RELEASED

    def __str__(self) -> str:
        return f"KeyReleasedEvent: {int(self.keycode)}"


class KeyTypedEvent(KeyEvent):
    event_type = EventType.KEY_TYPED

    def __str__(self) -> str:
        return f"KeyTypedEvent: {int(self.keycode)}"


class MouseMovedEvent(Event):
    event_type = EventType.MOUSE_MOVED
    category = EventCategory.MOUSE | EventCategory.INPUT

    def __init__(self, x: float, y: float) -> None:
        super().__init__()
        self.x = x
        self.y = y

    def __str__(self) -> str:
        return f"MouseMovedEvent: {_number(self.x)}, {_number(self.y)}"


class MouseScrolledEvent(Event):
    event_type = EventType.MOUSE_SCROLLED
    category = EventCategory.MOUSE | EventCategory.INPUT

    def __init__(self, x_offset: float, y_offset: float) -> None:
        super().__init__()
        self.x_offset = x_offset
        self.y_offset = y_offset

    def __str__(self) -> str:
        return f"MouseScrolledEvent: {_number(self.x_offset)}, {_number(self.y_offset)}"


class MouseButtonEvent(Event):
    """Base of mouse button events."""

    category = EventCategory.MOUSE | EventCategory.INPUT

    def __init__(self, button: int) -> None:
        super().__init__()
        self.button = button


class MouseButtonPressedEvent(MouseButtonEvent):
    event_type = EventType.MOUSE_BUTTON_PRESSED

    def __str__(self) -> str:
        return f"MouseButtonPressedEvent: {int(self.button)}"


class MouseButtonReleasedEvent(MouseButtonEvent):
    event_type = EventType.MOUSE_BUTTON_RELEASED

    def __str__(self) -> str:
        return f"MouseButtonReleasedEvent: {int(self.button)}"