"""Layers and the ordered stack that holds them."""

from typing import Iterator, List, Optional

from hazel.events import Event
from hazel.timestep import Timestep


class Layer:
    """A slice of the application that receives updates and events.

    The default hooks keep simple bookkeeping: whether the layer is attached,
    how many frames it has seen, and the last timestep and event it got.
    Subclasses override the hooks they care about.
    """

    def __init__(self, name: str = "Layer") -> None:
        self.name = name
        self.attached = False
        self.frames = 0
        self.ui_frames = 0
        self.last_timestep: Optional[Timestep] = None
        self.last_event: Optional[Event] = None

    def on_attach(self) -> None:
        """Called when the layer is pushed onto a stack."""
        self.attached = True

    def on_detach(self) -> None:
        """Called when the layer is popped from a stack."""
        self.attached = False

    def on_update(self, ts: Timestep) -> None:
        """Called once per frame."""
        self.last_timestep = ts
        self.frames += 1

    def on_imgui_render(self) -> None:
        """Called once per frame while the UI frame is open."""
        self.ui_frames += 1

    def on_event(self, event: Event) -> None:
        """Called for each event not yet handled by a layer above."""
        self.last_event = event

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


class LayerStack:
    """Ordered layers: regular layers first, overlays always after them."""

    def __init__(self) -> None:
        self._layers: List[Layer] = []
        self._insert_index = 0

    def push_layer(self, layer: Layer) -> None:
        self._layers.insert(self._insert_index, layer)
        self._insert_index += 1
        layer.on_attach()

    def push_overlay(self, overlay: Layer) -> None:
        self._layers.append(overlay)
        overlay.on_attach()

    def pop_layer(self, layer: Layer) -> None:
        """Remove a regular layer; overlays and unknown layers are ignored."""
        index = self._find(layer, 0, self._insert_index)
        if index is not None:
            layer.on_detach()
            del self._layers[index]
            self._insert_index -= 1

    def pop_overlay(self, overlay: Layer) -> None:
        """Remove an overlay; regular layers and unknown layers are ignored."""
        index = self._find(overlay, self._insert_index, len(self._layers))
        if index is not None:
            overlay.on_detach()
            del self._layers[index]

    def _find(self, layer: Layer, start: int, stop: int) -> Optional[int]:
        return next(
            (i for i, item in enumerate(self._layers[start:stop], start) if item is layer),
            None,
        )

    def __iter__(self) -> Iterator[Layer]:
        return iter(list(self._layers))

    def __reversed__(self) -> Iterator[Layer]:
        return reversed(list(self._layers))

    def __len__(self) -> int:
        return len(self._layers)