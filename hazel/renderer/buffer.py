"""Vertex layouts and the vertex and index buffer interfaces."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, Iterator, Tuple, Union


class ShaderDataType(Enum):
    """Type of one vertex attribute as seen by a shader."""

    NONE = 0
    FLOAT = 1
    FLOAT2 = 2
    FLOAT3 = 3
    FLOAT4 = 4
    MAT3 = 5
    MAT4 = 6
    INT = 7
    INT2 = 8
    INT3 = 9
    INT4 = 10
    BOOL = 11


_SIZES = {
    ShaderDataType.FLOAT: 4,
    ShaderDataType.FLOAT2: 4 * 2,
    ShaderDataType.FLOAT3: 4 * 3,
    ShaderDataType.FLOAT4: 4 * 4,
    ShaderDataType.MAT3: 4 * 3 * 3,
    ShaderDataType.MAT4: 4 * 4 * 4,
    ShaderDataType.INT: 4,
    ShaderDataType.INT2: 4 * 2,
    ShaderDataType.INT3: 4 * 3,
    ShaderDataType.INT4: 4 * 4,
    ShaderDataType.BOOL: 1,
}

_COMPONENTS = {
    ShaderDataType.FLOAT: 1,
    ShaderDataType.FLOAT2: 2,
    ShaderDataType.FLOAT3: 3,
    ShaderDataType.FLOAT4: 4,
    ShaderDataType.MAT3: 3 * 3,
    ShaderDataType.MAT4: 4 * 4,
    ShaderDataType.INT: 1,
    ShaderDataType.INT2: 2,
    ShaderDataType.INT3: 3,
    ShaderDataType.INT4: 4,
    ShaderDataType.BOOL: 1,
}


def shader_data_type_size(data_type: ShaderDataType) -> int:
    """Size in bytes of one attribute of the given type."""
    try:
        return _SIZES[data_type]
    except KeyError:
        raise ValueError(f"unknown shader data type: {data_type!r}") from None


@dataclass
class BufferElement:
    """One named attribute inside a vertex layout."""

    data_type: ShaderDataType
    name: str
    normalized: bool = False
    size: int = field(init=False)
    offset: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self.size = shader_data_type_size(self.data_type)

    @property
    def component_count(self) -> int:
        """Number of scalar components in the attribute."""
        try:
            return _COMPONENTS[self.data_type]
        except KeyError:
            raise ValueError(f"unknown shader data type: {self.data_type!r}") from None


ElementSpec = Union[BufferElement, Tuple]


class BufferLayout:
    """Ordered attributes of a vertex with their offsets and the total stride."""

    def __init__(self, elements: Iterable[ElementSpec] = ()) -> None:
        self._elements = tuple(
            replace(e) if isinstance(e, BufferElement) else BufferElement(*e)
            for e in elements
        )
        offset = 0
        for element in self._elements:
            element.offset = offset
            offset += element.size
        self._stride = offset

    @property
    def stride(self) -> int:
        """Size in bytes of one whole vertex."""
        return self._stride

    @property
    def elements(self) -> Tuple[BufferElement, ...]:
        return self._elements

    def __iter__(self) -> Iterator[BufferElement]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        names = ", ".join(e.name for e in self._elements)
        return f"<BufferLayout [{names}] stride={self._stride}>"


class VertexBuffer(ABC):
    """GPU buffer of vertex data with a layout describing it."""

    def __init__(self) -> None:
        self._layout = BufferLayout()

    @abstractmethod
    def bind(self) -> None:
        """Make this buffer current."""

    @abstractmethod
    def unbind(self) -> None:
        """Unbind any vertex buffer."""

    @property
    def layout(self) -> BufferLayout:
        return self._layout

    @layout.setter
    def layout(self, layout: BufferLayout) -> None:
        self._layout = layout


class IndexBuffer(ABC):
    """GPU buffer of vertex indices."""

    @abstractmethod
    def bind(self) -> None:
        """Make this buffer current."""

    @abstractmethod
    def unbind(self) -> None:
        """Unbind any index buffer."""

    @property
    @abstractmethod
    def count(self) -> int:
        """Number of indices held."""