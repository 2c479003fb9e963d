import pytest

from hazel.events import (
    AppTickEvent,
    EventCategory,
    EventDispatcher,
    EventType,
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


def test_window_resize_string_and_fields():
    event = WindowResizeEvent(1280, 720)
    assert str(event) == "WindowResizeEvent: 1280, 720"
    assert (event.width, event.height) == (1280, 720)
    assert event.name == "WindowResize"
    assert event.event_type is EventType.WINDOW_RESIZE


def test_default_string_is_name():
    assert str(WindowCloseEvent()) == "WindowClose"
    assert str(AppTickEvent()) == "AppTick"


@pytest.mark.parametrize(
    "event, expected",
    [
        (KeyPressedEvent(Key.A, 3), "KeyPressedEvent: 65 (3 repeats)"),
        (KeyReleasedEvent(Key.SPACE), "KeyReleasedEvent: 32"),
        (KeyTypedEvent(Key.Z), "KeyTypedEvent: 90"),
        (MouseButtonPressedEvent(MouseButton.LEFT), "MouseButtonPressedEvent: 0"),
        (MouseButtonReleasedEvent(MouseButton.MIDDLE), "MouseButtonReleasedEvent: 2"),
        (MouseMovedEvent(1.5, 2.5), "MouseMovedEvent: 1.5, 2.5"),
        (MouseScrolledEvent(0.5, -1.5), "MouseScrolledEvent: 0.5, -1.5"),
    ],
)
def test_event_strings(event, expected):
    assert str(event) == expected


def test_key_event_categories():
    event = KeyPressedEvent(Key.A, 0)
    assert event.is_in_category(EventCategory.KEYBOARD)
    assert event.is_in_category(EventCategory.INPUT)
    assert not event.is_in_category(EventCategory.MOUSE)


def test_mouse_button_event_is_not_in_mouse_button_category():
    event = MouseButtonPressedEvent(MouseButton.RIGHT)
    assert event.is_in_category(EventCategory.MOUSE)
    assert not event.is_in_category(EventCategory.MOUSE_BUTTON)


def test_application_category():
    assert WindowCloseEvent().is_in_category(EventCategory.APPLICATION)
    assert not WindowCloseEvent().is_in_category(EventCategory.INPUT)


def test_dispatch_matching_sets_handled():
    event = WindowCloseEvent()
    seen = []

    def handler(e):
        seen.append(e)
        return True

    assert EventDispatcher(event).dispatch(WindowCloseEvent, handler) is True
    assert seen == [event]
    assert event.handled is True


def test_dispatch_non_matching_does_nothing():
    event = KeyPressedEvent(Key.A, 0)
    seen = []
    assert EventDispatcher(event).dispatch(WindowCloseEvent, seen.append) is False
    assert seen == []
    assert event.handled is False


def test_dispatch_result_overwrites_handled():
    event = WindowResizeEvent(10, 20)
    event.handled = True
    EventDispatcher(event).dispatch(WindowResizeEvent, lambda e: False)
    assert event.handled is False