"""Base class for application layers."""

from __future__ import annotations


class Layer:
    """A named unit of per-frame behaviour owned by a layer stack.

    Layers are identity objects: they cannot be copied.
    """

    def __init__(self, name: str = "Layer") -> None:
        self._name = name
        self._attached = False
        self._last_delta_time = 0.0

    @property
    def name(self) -> str:
        """The layer's name."""
        return self._name

    @property
    def attached(self) -> bool:
        """Whether the base attach hook ran more recently than the detach hook."""
        return self._attached

    @property
    def last_delta_time(self) -> float:
        """Delta time passed to the most recent base update hook."""
        return self._last_delta_time

    def on_attach(self) -> None:
        """Called when the layer is added to a stack."""
        self._attached = True

    def on_detach(self) -> None:
        """Called when the layer is removed from a stack."""
        self._attached = False

    def on_update(self, delta_time: float) -> None:
        """Called once per frame with the frame's delta time in seconds."""
        self._last_delta_time = delta_time

    def __copy__(self):
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r})"