import pyglet
import pytest

from hazel.platform.opengl.gl_vertex_array import (
    GL_FLOAT,
    GL_INT,
    OpenGLVertexArray,
    shader_data_type_to_gl_base_type,
)
from hazel.renderer.buffer import BufferLayout, IndexBuffer, ShaderDataType, VertexBuffer


class FakeGLuint:
    def __init__(self, value=0):
        self.value = value


class FakeGL:
    GLuint = FakeGLuint

    def __init__(self):
        self.attribs = []
        self.bound = []

    def glCreateVertexArrays(self, n, ref):
        ref.value = 7

    def glBindVertexArray(self, vao):
        self.bound.append(vao)

    def glEnableVertexAttribArray(self, index):
        pass

    def glVertexAttribPointer(self, *args):
        self.attribs.append(args)


class StubVB(VertexBuffer):
    def __init__(self):
        super().__init__()
        self.binds = 0

    def bind(self):
        self.binds += 1

    def unbind(self):
        pass


class StubIB(IndexBuffer):
    def __init__(self):
        self.binds = 0

    def bind(self):
        self.binds += 1

    def unbind(self):
        pass

    @property
    def count(self):
        return 3


@pytest.fixture
def fake_gl(monkeypatch):
    fake = FakeGL()
    monkeypatch.setattr(pyglet, "gl", fake, raising=False)
    return fake


def test_base_types():
    assert shader_data_type_to_gl_base_type(ShaderDataType.MAT4) == GL_FLOAT
    assert shader_data_type_to_gl_base_type(ShaderDataType.INT3) == GL_INT
    assert shader_data_type_to_gl_base_type(ShaderDataType.BOOL) == 0x8B56


def test_unknown_type_raises():
    with pytest.raises(ValueError):
        shader_data_type_to_gl_base_type(ShaderDataType.NONE)


def test_renderer_id_comes_from_gl(fake_gl):
    assert OpenGLVertexArray().renderer_id == 7


def test_add_vertex_buffer_sets_attributes(fake_gl):
    va = OpenGLVertexArray()
    vb = StubVB()
    vb.layout = BufferLayout([
        (ShaderDataType.FLOAT3, "a_Position"),
        (ShaderDataType.FLOAT4, "a_Color"),
    ])
    va.add_vertex_buffer(vb)
    stride = vb.layout.stride
    assert [a[0] for a in fake_gl.attribs] == [0, 1]
    assert [a[1] for a in fake_gl.attribs] == [3, 4]
    assert all(a[4] == stride for a in fake_gl.attribs)
    assert fake_gl.attribs[1][5] == vb.layout.elements[1].offset
    assert va.vertex_buffers == (vb,)
    assert vb.binds == 1


def test_add_buffer_without_layout_raises(fake_gl):
    va = OpenGLVertexArray()
    with pytest.raises(ValueError):
        va.add_vertex_buffer(StubVB())
    assert va.vertex_buffers == ()


def test_set_index_buffer(fake_gl):
    va = OpenGLVertexArray()
    ib = StubIB()
    va.set_index_buffer(ib)
    assert va.index_buffer is ib
    assert fake_gl.bound[-1] == va.renderer_id
    va.unbind()
    assert fake_gl.bound[-1] == 0