"""OpenGL context attached to a window."""

from typing import Any

from hazel.log import core_logger
from hazel.renderer.api import GraphicsContext


def _gl():
    from pyglet import gl

    return gl


def _version_string(info: Any) -> str:
    version_string = getattr(info, "get_version_string", None)
    if version_string is not None:
        return str(version_string())
    version = info.get_version()
    if isinstance(version, tuple):
        return ".".join(str(part) for part in version)
    return str(version)


class OpenGLContext(GraphicsContext):
    """Context of a window that has ``switch_to`` and ``flip`` methods."""

    def __init__(self, window: Any) -> None:
        if window is None:
            raise ValueError("window handle is null")
        self._window = window

    def init(self) -> None:
        self._window.switch_to()
        info = _gl().gl_info
        log = core_logger()
        log.info("OpenGL Info:")
        log.info("  Vendor: %s", info.get_vendor())
        log.info("  Renderer: %s", info.get_renderer())
        log.info("  Version: %s", _version_string(info))

    def swap_buffers(self) -> None:
        self._window.flip()