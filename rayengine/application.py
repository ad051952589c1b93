"""The application singleton: owns the layer stack and drives the main loop."""

from __future__ import annotations

import contextlib
import sys
import threading
import time
from typing import Callable, ClassVar, Optional

from . import log
from .clock import Timer
from .layer import Layer
from .layer_stack import LayerStack
from .log import core_logger
from .profiler import Profiler, profile_function

PopCallback = Callable[[Optional[Layer]], None]

_FRAME_SLEEP_SECONDS = 0.001


class Application:
    """Owns a layer stack and a frame timer and runs the main loop.

    Layer mutations requested through the ``*_async`` methods may come from
    any thread or from inside layer callbacks; they are queued and applied on
    the loop's thread at the start of each frame.
    """

    _instance: ClassVar[Optional["Application"]] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self._timer = Timer()
        self._running = threading.Event()
        self._layer_stack = LayerStack()
        self._pending_lock = threading.Lock()
        self._pending: list[Callable[[], None]] = []

    @classmethod
    def get_instance(cls) -> "Application":
        """Return the process-wide application, creating it on first use."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def initialize(self) -> bool:
        """Set up logging; return whether it succeeded."""
        try:
            log.init()
            core_logger().info("Application initializing")
            return True
        except Exception:
            try:
                core_logger().error("Log initialization failed")
            except Exception:
                sys.stderr.write("log.init() failed and logging is not available\n")
            return False

    @profile_function
    def run(self) -> bool:
        """Run the main loop until stop() is called, then shut down."""
        self._timer.reset()
        self._running.set()
        core_logger().info("Application started")

        while self._running.is_set():
            scope = Profiler("MainLoopTick") if __debug__ else contextlib.nullcontext()
            with scope:
                self._apply_pending()

                self._timer.tick()
                delta_time = self._timer.delta_seconds

                for layer in list(self._layer_stack):
                    try:
                        layer.on_update(delta_time)
                    except Exception as error:
                        core_logger().error(
                            f"[Application] Layer on_update() threw: {error}"
                        )

                time.sleep(_FRAME_SLEEP_SECONDS)

        core_logger().info("Application stopping")
        self._shutdown()
        return True

    def is_running(self) -> bool:
        """Whether the main loop is active."""
        return self._running.is_set()

    def stop(self) -> None:
        """Ask the main loop to end after the current frame."""
        self._running.clear()

    def push_layer(self, layer: Optional[Layer]) -> None:
        """Push a layer immediately; call only from the loop's thread."""
        if layer is not None:
            self._layer_stack.push_layer(layer)

    def push_overlay(self, overlay: Optional[Layer]) -> None:
        """Push an overlay immediately; call only from the loop's thread."""
        if overlay is not None:
            self._layer_stack.push_overlay(overlay)

    @property
    def layer_stack(self) -> LayerStack:
        """The owned layer stack."""
        return self._layer_stack

    def push_layer_async(self, layer: Optional[Layer]) -> None:
        """Queue a layer push for the start of the next frame."""
        if layer is None:
            return
        self._enqueue(lambda: self._layer_stack.push_layer(layer))

    def push_overlay_async(self, overlay: Optional[Layer]) -> None:
        """Queue an overlay push for the start of the next frame."""
        if overlay is None:
            return
        self._enqueue(lambda: self._layer_stack.push_overlay(overlay))

    def remove_layer_async(self, layer: Optional[Layer]) -> None:
        """Queue removal of a layer for the start of the next frame."""
        if layer is None:
            return
        self._enqueue(lambda: self._layer_stack.remove_layer(layer))

    def pop_layer_async(
        self, layer: Optional[Layer], callback: Optional[PopCallback] = None
    ) -> None:
        """Queue a pop; ``callback`` receives the popped layer (or None).

        With no layer, the callback is invoked at once with None.
        """
        if layer is None:
            if callback is not None:
                callback(None)
            return

        def operation() -> None:
            popped = self._layer_stack.pop_layer(layer)
            if callback is not None:
                callback(popped)

        self._enqueue(operation)

    def _enqueue(self, operation: Callable[[], None]) -> None:
        with self._pending_lock:
            self._pending.append(operation)

    def _apply_pending(self) -> None:
        with self._pending_lock:
            operations, self._pending = self._pending, []
        for operation in operations:
            try:
                operation()
            except Exception as error:
                core_logger().error(f"[Application] pending op threw: {error}")

    @profile_function
    def _shutdown(self) -> None:
        core_logger().info("Shutting down...")
        log.shutdown()