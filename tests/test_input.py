import pytest

from hazel.input import Input, InputBackend
from hazel.keycodes import Key, MouseButton


class FakeBackend(InputBackend):
    def __init__(self, keys=(), buttons=(), position=(0.0, 0.0)):
        self.keys = set(keys)
        self.buttons = set(buttons)
        self.position = position

    def is_key_pressed(self, keycode):
        return keycode in self.keys

    def is_mouse_button_pressed(self, button):
        return button in self.buttons

    def get_mouse_position(self):
        return self.position


@pytest.fixture
def backend():
    fake = FakeBackend(keys={Key.A}, buttons={MouseButton.LEFT}, position=(12.5, 40.0))
    Input.set_instance(fake)
    yield fake
    Input.set_instance(None)


def test_key_queries(backend):
    assert Input.is_key_pressed(Key.A) is True
    assert Input.is_key_pressed(Key.D) is False


def test_mouse_button_queries(backend):
    assert Input.is_mouse_button_pressed(MouseButton.LEFT) is True
    assert Input.is_mouse_button_pressed(MouseButton.RIGHT) is False


def test_mouse_position_and_components(backend):
    assert Input.get_mouse_position() == (12.5, 40.0)
    assert Input.get_mouse_x() == 12.5
    assert Input.get_mouse_y() == 40.0


def test_backend_changes_are_seen(backend):
    backend.position = (1.0, 2.0)
    assert (Input.get_mouse_x(), Input.get_mouse_y()) == (1.0, 2.0)


def test_no_backend_raises():
    Input.set_instance(None)
    with pytest.raises(RuntimeError):
        Input.is_key_pressed(Key.A)


def test_backend_is_abstract():
    with pytest.raises(TypeError):
        InputBackend()