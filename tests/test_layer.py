from hazel.events import WindowCloseEvent
from hazel.layer import Layer, LayerStack
from hazel.timestep import Timestep


class Recorder(Layer):
    def __init__(self, name, log):
        super().__init__(name)
        self.log = log

    def on_attach(self):
        self.log.append(("attach", self.name))

    def on_detach(self):
        self.log.append(("detach", self.name))


def test_default_name():
    assert Layer().name == "Layer"
    assert Layer("Example").name == "Example"


def test_default_hooks_accept_arguments():
    layer = Layer()
    event = WindowCloseEvent()
    layer.on_event(event)
    layer.on_update(Timestep(0.1))
    assert event.handled is False


def test_layers_come_before_overlays():
    stack = LayerStack()
    first, second, overlay = Layer("first"), Layer("second"), Layer("overlay")
    stack.push_overlay(overlay)
    stack.push_layer(first)
    stack.push_layer(second)
    assert list(stack) == [first, second, overlay]
    assert list(reversed(stack)) == [overlay, second, first]
    assert len(stack) == 3


def test_push_calls_attach():
    log = []
    stack = LayerStack()
    stack.push_layer(Recorder("a", log))
    stack.push_overlay(Recorder("b", log))
    assert log == [("attach", "a"), ("attach", "b")]


def test_pop_layer_detaches_and_keeps_order():
    log = []
    stack = LayerStack()
    a, b, o = Recorder("a", log), Recorder("b", log), Recorder("o", log)
    stack.push_layer(a)
    stack.push_layer(b)
    stack.push_overlay(o)
    stack.pop_layer(a)
    assert list(stack) == [b, o]
    assert log[-1] == ("detach", "a")
    c = Recorder("c", log)
    stack.push_layer(c)
    assert list(stack) == [b, c, o]


def test_pop_layer_ignores_overlay():
    log = []
    stack = LayerStack()
    o = Recorder("o", log)
    stack.push_overlay(o)
    stack.pop_layer(o)
    assert list(stack) == [o]
    assert ("detach", "o") not in log


def test_pop_overlay_ignores_layer_and_removes_overlay():
    log = []
    stack = LayerStack()
    a, o = Recorder("a", log), Recorder("o", log)
    stack.push_layer(a)
    stack.push_overlay(o)
    stack.pop_overlay(a)
    assert list(stack) == [a, o]
    stack.pop_overlay(o)
    assert list(stack) == [a]
    assert log[-1] == ("detach", "o")


def test_pop_unknown_layer_is_ignored():
    stack = LayerStack()
    a = Layer("a")
    stack.push_layer(a)
    stack.pop_layer(Layer("a"))
    assert list(stack) == [a]