import numpy as np
import pytest

from hazel.application import Application, ApplicationError
from hazel.keycodes import Key
from hazel.renderer.api import API, RendererAPI, UnsupportedRendererAPIError
from hazel.renderer.transforms import scaling
from hazel.sandbox import ExampleLayer, Sandbox, _grid_transforms, _step_camera
from hazel.window import Window


def pressed(*keys):
    held = set(keys)
    return lambda key: key in held


class FakeWindow(Window):
    def on_update(self):
        pass

    @property
    def width(self):
        return 1280

    @property
    def height(self):
        return 720

    def set_event_callback(self, callback):
        self.callback = callback

    @property
    def vsync(self):
        return False

    @vsync.setter
    def vsync(self, enabled):
        pass

    @property
    def native_window(self):
        return None


@pytest.fixture
def no_renderer_api():
    RendererAPI.set_api(API.NONE)
    yield
    RendererAPI.set_api(API.OPENGL)


def test_no_keys_leaves_camera_still():
    position, rotation = _step_camera((0.0, 0.0, 0.0), 0.0, 0.5, pressed())
    assert np.array_equal(position, np.zeros(3))
    assert rotation == 0.0


def test_left_and_right_are_symmetric():
    left, _ = _step_camera((0.0, 0.0, 0.0), 0.0, 0.25, pressed(Key.LEFT))
    right, _ = _step_camera((0.0, 0.0, 0.0), 0.0, 0.25, pressed(Key.RIGHT))
    assert left[0] < 0
    assert left[0] == pytest.approx(-right[0])
    assert left[1] == 0.0


def test_left_wins_over_right():
    both, _ = _step_camera((0.0, 0.0, 0.0), 0.0, 0.25, pressed(Key.LEFT, Key.RIGHT))
    left, _ = _step_camera((0.0, 0.0, 0.0), 0.0, 0.25, pressed(Key.LEFT))
    assert np.array_equal(both, left)


def test_up_moves_up_and_wins_over_down():
    up, _ = _step_camera((0.0, 0.0, 0.0), 0.0, 0.1, pressed(Key.UP, Key.DOWN))
    assert up[1] > 0
    assert up[0] == 0.0


def test_rotation_keys_cancel_and_scale_with_time():
    _, rotation = _step_camera((0.0, 0.0, 0.0), 0.0, 1.0, pressed(Key.A, Key.D))
    assert rotation == pytest.approx(0.0)
    _, one = _step_camera((0.0, 0.0, 0.0), 0.0, 1.0, pressed(Key.A))
    _, two = _step_camera((0.0, 0.0, 0.0), 0.0, 2.0, pressed(Key.A))
    assert one > 0
    assert two == pytest.approx(2 * one)


def test_step_does_not_mutate_input():
    start = np.zeros(3, dtype=np.float32)
    _step_camera(start, 0.0, 1.0, pressed(Key.RIGHT))
    assert np.array_equal(start, np.zeros(3))


def test_grid_has_twenty_rows_of_twenty():
    transforms = _grid_transforms()
    assert len(transforms) == 20 * 20
    assert np.allclose(transforms[0], scaling(0.1))
    for m in transforms:
        assert np.allclose(np.diag(m)[:3], 0.1)
        assert m[2, 3] == 0.0


def test_example_layer_needs_a_renderer_api(no_renderer_api):
    with pytest.raises(UnsupportedRendererAPIError):
        ExampleLayer()


def test_failed_sandbox_releases_application(no_renderer_api):
    with pytest.raises(UnsupportedRendererAPIError):
        Sandbox(FakeWindow())
    with pytest.raises(ApplicationError):
        Application.get()