import pytest

from hazel.renderer.api import (
    API,
    GraphicsContext,
    RendererAPI,
    Shader,
    Texture,
    Texture2D,
    UnsupportedRendererAPIError,
    VertexArray,
)


@pytest.fixture
def restore_api():
    saved = RendererAPI.get_api()
    yield
    RendererAPI.set_api(saved)


def test_default_api_is_opengl():
    assert RendererAPI.get_api() is API.OPENGL


def test_set_api_round_trip(restore_api):
    RendererAPI.set_api(API.NONE)
    assert RendererAPI.get_api() is API.NONE
    RendererAPI.set_api(API.OPENGL)
    assert RendererAPI.get_api() is API.OPENGL


def test_set_api_from_value(restore_api):
    RendererAPI.set_api(0)
    assert RendererAPI.get_api() is API.NONE


def test_set_api_rejects_unknown(restore_api):
    with pytest.raises(ValueError):
        RendererAPI.set_api(42)
    assert RendererAPI.get_api() is API.OPENGL


def test_unsupported_error_is_runtime_error_with_message():
    error = UnsupportedRendererAPIError("RendererAPI::None is currently not supported!")
    assert str(error) == "RendererAPI::None is currently not supported!"
    assert RuntimeError in type(error).__mro__


@pytest.mark.parametrize(
    "cls", [RendererAPI, GraphicsContext, Shader, Texture, Texture2D, VertexArray]
)
def test_interfaces_are_abstract(cls):
    with pytest.raises(TypeError):
        cls()