"""OpenGL two-dimensional texture loaded from an image file."""

import os
from typing import Union

from PIL import Image

from hazel.renderer.api import Texture2D

_GL_TEXTURE_2D = 0x0DE1
_GL_RGB8 = 0x8051
_GL_RGB = 0x1907
_GL_UNSIGNED_BYTE = 0x1401
_GL_TEXTURE_MIN_FILTER = 0x2801
_GL_TEXTURE_MAG_FILTER = 0x2800
_GL_LINEAR = 0x2601
_GL_NEAREST = 0x2600


def _gl():
    from pyglet import gl

    return gl


class OpenGLTexture2D(Texture2D):
    """RGB texture read from disk, flipped so the first row is the bottom."""

    def __init__(self, path: Union[str, os.PathLike]) -> None:
        self.path = str(path)
        with Image.open(self.path) as image:
            rgb = image.convert("RGB").transpose(Image.Transpose.FLIP_TOP_BOTTOM)
            self._width, self._height = rgb.size
            pixels = rgb.tobytes()

        gl = _gl()
        renderer_id = gl.GLuint()
        gl.glCreateTextures(_GL_TEXTURE_2D, 1, renderer_id)
        self._renderer_id = renderer_id.value
        gl.glTextureStorage2D(self._renderer_id, 1, _GL_RGB8, self._width, self._height)
        gl.glTextureParameteri(self._renderer_id, _GL_TEXTURE_MIN_FILTER, _GL_LINEAR)
        gl.glTextureParameteri(self._renderer_id, _GL_TEXTURE_MAG_FILTER, _GL_NEAREST)
        gl.glTextureSubImage2D(self._renderer_id, 0, 0, 0, self._width, self._height,
                               _GL_RGB, _GL_UNSIGNED_BYTE, pixels)

    @property
    def renderer_id(self) -> int:
        return self._renderer_id

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def bind(self, slot: int = 0) -> None:
        _gl().glBindTextureUnit(slot, self._renderer_id)