"""Ordered ownership of layers and overlays."""

from __future__ import annotations

from typing import Iterator, Optional, Union

from .layer import Layer
from .log import core_logger

LayerRef = Union[Layer, str]


class LayerStack:
    """Holds layers followed by overlays: ``[ layers... | overlays... ]``.

    Layers are inserted at the boundary; overlays are appended at the end.
    Removal and popping accept either the layer object or its name.
    """

    def __init__(self) -> None:
        self._layers: list[Layer] = []
        self._insert = 0

    def push_layer(self, layer: Optional[Layer]) -> None:
        """Insert a layer before the overlays and attach it.

        If ``on_attach`` raises, the layer is removed again and the error
        is re-raised.
        """
        if layer is None:
            return
        self._layers.insert(self._insert, layer)
        self._insert += 1
        self._attach(layer)

    def push_overlay(self, overlay: Optional[Layer]) -> None:
        """Append an overlay and attach it, rolling back if attaching fails."""
        if overlay is None:
            return
        self._layers.append(overlay)
        self._attach(overlay)

    def remove_layer(self, layer: Optional[LayerRef]) -> bool:
        """Detach and drop a layer; return whether one was found."""
        return self.pop_layer(layer) is not None

    def pop_layer(self, layer: Optional[LayerRef]) -> Optional[Layer]:
        """Detach and remove a layer, returning it, or None if not found."""
        index = self._find(layer)
        if index is None:
            return None
        popped = self._layers[index]
        self._detach(popped, "")
        self._erase(index)
        return popped

    def clear(self) -> None:
        """Detach every layer and empty the stack."""
        for layer in self._layers:
            self._detach(layer, " during clear")
        self._layers.clear()
        self._insert = 0

    def __contains__(self, layer: object) -> bool:
        return any(item is layer for item in self._layers)

    def __len__(self) -> int:
        return len(self._layers)

    def __iter__(self) -> Iterator[Layer]:
        return iter(self._layers)

    def _attach(self, layer: Layer) -> None:
        try:
            layer.on_attach()
        except Exception as error:
            core_logger().error(f"[LayerStack] on_attach() threw exception: {error}")
            self._rollback(layer)
            raise

    @staticmethod
    def _detach(layer: Layer, context: str) -> None:
        try:
            layer.on_detach()
        except Exception as error:
            core_logger().error(
                f"[LayerStack] on_detach() threw exception{context}: {error}"
            )

    def _find(self, layer: Optional[LayerRef]) -> Optional[int]:
        if layer is None:
            return None
        if isinstance(layer, str):
            matches = (i for i, item in enumerate(self._layers) if item.name == layer)
        else:
            matches = (i for i, item in enumerate(self._layers) if item is layer)
        return next(matches, None)

    def _erase(self, index: int) -> None:
        del self._layers[index]
        if index < self._insert:
            self._insert -= 1

    def _rollback(self, layer: Layer) -> None:
        index = self._find(layer)
        if index is not None:
            self._erase(index)