"""Rendering backend interfaces: renderer API, context, shader, texture, vertex array."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Sequence, Tuple

from hazel.renderer.buffer import IndexBuffer, VertexBuffer


class API(Enum):
    """Graphics API a renderer runs on."""

    NONE = 0
    OPENGL = 1


class UnsupportedRendererAPIError(RuntimeError):
    """Raised when a resource is requested for an API that has no backend."""


class RendererAPI(ABC):
    """Low-level drawing commands of one graphics API."""

    _api: API = API.OPENGL

    @abstractmethod
    def set_clear_color(self, color: Sequence[float]) -> None:
        """Set the RGBA colour used when clearing."""

    @abstractmethod
    def clear(self) -> None:
        """Clear the colour and depth buffers."""

    @abstractmethod
    def draw_indexed(self, vertex_array: "VertexArray") -> None:
        """Draw the triangles described by the vertex array's index buffer."""

    @staticmethod
    def get_api() -> API:
        return RendererAPI._api

    @staticmethod
    def set_api(api: API) -> None:
        RendererAPI._api = API(api)


class GraphicsContext(ABC):
    """Drawing context bound to a window."""

    @abstractmethod
    def init(self) -> None:
        """Make the context current and load the API."""

    @abstractmethod
    def swap_buffers(self) -> None:
        """Present the back buffer."""


class Shader(ABC):
    """Compiled shader program."""

    @abstractmethod
    def bind(self) -> None:
        """Use this program for drawing."""

    @abstractmethod
    def unbind(self) -> None:
        """Stop using any program."""


class Texture(ABC):
    """Image on the GPU."""

    @property
    @abstractmethod
    def width(self) -> int:
        """Width in pixels."""

    @property
    @abstractmethod
    def height(self) -> int:
        """Height in pixels."""

    @abstractmethod
    def bind(self, slot: int = 0) -> None:
        """Bind the texture to a texture unit."""


class Texture2D(Texture):
    """Two-dimensional texture."""


class VertexArray(ABC):
    """Vertex buffers and an index buffer bound together for drawing."""

    @abstractmethod
    def bind(self) -> None:
        """Make this vertex array current."""

    @abstractmethod
    def unbind(self) -> None:
        """Unbind any vertex array."""

    @abstractmethod
    def add_vertex_buffer(self, vertex_buffer: VertexBuffer) -> None:
        """Attach a vertex buffer, using its layout for the attributes."""

    @abstractmethod
    def set_index_buffer(self, index_buffer: IndexBuffer) -> None:
        """Attach the index buffer used for drawing."""

    @property
    @abstractmethod
    def vertex_buffers(self) -> Tuple[VertexBuffer, ...]:
        """The attached vertex buffers, in order."""

    @property
    @abstractmethod
    def index_buffer(self) -> Optional[IndexBuffer]:
        """The attached index buffer, if any."""