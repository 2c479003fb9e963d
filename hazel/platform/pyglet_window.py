"""Desktop window backed by pyglet, turning its input into engine events."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Set, Tuple

from hazel.events import (
    KeyPressedEvent,
    KeyReleasedEvent,
    KeyTypedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    WindowCloseEvent,
    WindowResizeEvent,
)
from hazel.keycodes import Key, MouseButton
from hazel.log import core_logger
from hazel.platform.opengl.gl_context import OpenGLContext
from hazel.window import EventCallback, Window, WindowProps

_EVENT_HANDLED = True


def _build_key_map() -> Dict[int, Key]:
    keys: Dict[int, Key] = {}
    for offset in range(26):
        keys[ord("a") + offset] = Key(Key.A + offset)
    for offset in range(10):
        keys[ord("0") + offset] = Key(Key.DIGIT_0 + offset)
    for char, key in {
        " ": Key.SPACE, "'": Key.APOSTROPHE, ",": Key.COMMA, "-": Key.MINUS,
        ".": Key.PERIOD, "/": Key.SLASH, ";": Key.SEMICOLON, "=": Key.EQUAL,
        "[": Key.LEFT_BRACKET, "\\": Key.BACKSLASH, "]": Key.RIGHT_BRACKET,
        "`": Key.GRAVE_ACCENT,
    }.items():
        keys[ord(char)] = key
    keys.update({
        0xFF1B: Key.ESCAPE, 0xFF0D: Key.ENTER, 0xFF09: Key.TAB,
        0xFF08: Key.BACKSPACE, 0xFF63: Key.INSERT, 0xFFFF: Key.DELETE,
        0xFF53: Key.RIGHT, 0xFF51: Key.LEFT, 0xFF54: Key.DOWN, 0xFF52: Key.UP,
        0xFF55: Key.PAGE_UP, 0xFF56: Key.PAGE_DOWN, 0xFF50: Key.HOME,
        0xFF57: Key.END, 0xFFE5: Key.CAPS_LOCK, 0xFF14: Key.SCROLL_LOCK,
        0xFF7F: Key.NUM_LOCK, 0xFF61: Key.PRINT_SCREEN, 0xFF13: Key.PAUSE,
        0xFFAE: Key.KP_DECIMAL, 0xFFAF: Key.KP_DIVIDE, 0xFFAA: Key.KP_MULTIPLY,
        0xFFAD: Key.KP_SUBTRACT, 0xFFAB: Key.KP_ADD, 0xFF8D: Key.KP_ENTER,
        0xFFBD: Key.KP_EQUAL, 0xFFE1: Key.LEFT_SHIFT, 0xFFE2: Key.RIGHT_SHIFT,
        0xFFE3: Key.LEFT_CONTROL, 0xFFE4: Key.RIGHT_CONTROL,
        0xFFE9: Key.LEFT_ALT, 0xFFEA: Key.RIGHT_ALT,
        0xFFEB: Key.LEFT_SUPER, 0xFFEC: Key.RIGHT_SUPER, 0xFF67: Key.MENU,
    })
    for offset in range(25):
        keys[0xFFBE + offset] = Key(Key.F1 + offset)
    for offset in range(10):
        keys[0xFFB0 + offset] = Key(Key.KP_0 + offset)
    return keys


_KEYS = _build_key_map()

_MOUSE_BUTTONS = {
    1: MouseButton.LEFT,
    2: MouseButton.MIDDLE,
    4: MouseButton.RIGHT,
    8: MouseButton.BUTTON_4,
    16: MouseButton.BUTTON_5,
}


def key_from_pyglet(symbol: int) -> Optional[Key]:
    """Engine key code for a pyglet key symbol, or None if it has none."""
    return _KEYS.get(symbol)


def mouse_button_from_pyglet(button: int) -> Optional[MouseButton]:
    """Engine mouse button for a pyglet mouse button, or None if it has none."""
    return _MOUSE_BUTTONS.get(button)


@dataclass
class _WindowState:
    """Window data and the handlers that turn pyglet events into engine events."""

    title: str
    width: int
    height: int
    vsync: bool = False
    callback: Optional[EventCallback] = None
    keys: Set[int] = field(default_factory=set)
    buttons: Set[int] = field(default_factory=set)
    mouse: Tuple[float, float] = (0.0, 0.0)

    def _emit(self, event) -> None:
        if self.callback is not None:
            self.callback(event)

    def is_key_pressed(self, keycode: int) -> bool:
        return keycode in self.keys

    def is_mouse_button_pressed(self, button: int) -> bool:
        return button in self.buttons

    @property
    def mouse_position(self) -> Tuple[float, float]:
        return self.mouse

    def on_resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._emit(WindowResizeEvent(width, height))

    def on_close(self) -> bool:
        self._emit(WindowCloseEvent())
        return _EVENT_HANDLED

    def on_key_press(self, symbol: int, modifiers: int) -> None:
        key = key_from_pyglet(symbol)
        if key is None:
            return
        repeat = 1 if key in self.keys else 0
        self.keys.add(key)
        self._emit(KeyPressedEvent(key, repeat))

    def on_key_release(self, symbol: int, modifiers: int) -> None:
        key = key_from_pyglet(symbol)
        if key is None:
            return
        self.keys.discard(key)
        self._emit(KeyReleasedEvent(key))

    def on_text(self, text: str) -> None:
        for char in text:
            self._emit(KeyTypedEvent(ord(char)))

    def on_mouse_press(self, x: int, y: int, button: int, modifiers: int) -> None:
        mapped = mouse_button_from_pyglet(button)
        if mapped is None:
            return
        self.buttons.add(mapped)
        self._emit(MouseButtonPressedEvent(mapped))

    def on_mouse_release(self, x: int, y: int, button: int, modifiers: int) -> None:
        mapped = mouse_button_from_pyglet(button)
        if mapped is None:
            return
        self.buttons.discard(mapped)
        self._emit(MouseButtonReleasedEvent(mapped))

    def on_mouse_scroll(self, x: int, y: int, scroll_x: float, scroll_y: float) -> None:
        self._emit(MouseScrolledEvent(float(scroll_x), float(scroll_y)))

    def on_mouse_motion(self, x: int, y: int, dx: int, dy: int) -> None:
        # pyglet counts y from the bottom; the engine counts from the top.
        self.mouse = (float(x), float(self.height - y))
        self._emit(MouseMovedEvent(*self.mouse))

    def on_mouse_drag(self, x: int, y: int, dx: int, dy: int,
                      buttons: int, modifiers: int) -> None:
        self.on_mouse_motion(x, y, dx, dy)

    def handlers(self) -> Dict[str, Any]:
        names = (
            "on_resize", "on_close", "on_key_press", "on_key_release", "on_text",
            "on_mouse_press", "on_mouse_release", "on_mouse_scroll",
            "on_mouse_motion", "on_mouse_drag",
        )
        return {name: getattr(self, name) for name in names}


class PygletWindow(Window):
    """Resizable pyglet window with an OpenGL context and vertical sync on."""

    def __init__(self, props: WindowProps) -> None:
        import pyglet

        self._state = _WindowState(props.title, props.width, props.height)
        core_logger().info("Creating window %s (%d, %d)",
                           props.title, props.width, props.height)
        self._native = pyglet.window.Window(
            width=props.width,
            height=props.height,
            caption=props.title,
            resizable=True,
            vsync=True,
        )
        self._context = OpenGLContext(self._native)
        self._context.init()
        self.vsync = True
        self._native.push_handlers(**self._state.handlers())

    def on_update(self) -> None:
        self._native.dispatch_events()
        self._context.swap_buffers()

    @property
    def width(self) -> int:
        return self._state.width

    @property
    def height(self) -> int:
        return self._state.height

    def set_event_callback(self, callback: EventCallback) -> None:
        self._state.callback = callback

    @property
    def vsync(self) -> bool:
        return self._state.vsync

    @vsync.setter
    def vsync(self, enabled: bool) -> None:
        self._native.set_vsync(bool(enabled))
        self._state.vsync = bool(enabled)

    @property
    def native_window(self) -> Any:
        return self._native

    def is_key_pressed(self, keycode: int) -> bool:
        return self._state.is_key_pressed(keycode)

    def is_mouse_button_pressed(self, button: int) -> bool:
        return self._state.is_mouse_button_pressed(button)

    @property
    def mouse_position(self) -> Tuple[float, float]:
        return self._state.mouse_position

    def close(self) -> None:
        """Destroy the native window."""
        self._native.close()


def create_window(props: Optional[WindowProps] = None) -> PygletWindow:
    """Open a new window with the given properties, or the defaults."""
    return PygletWindow(props if props is not None else WindowProps())