"""Example layers exercising the application and layer stack."""

from __future__ import annotations

import sys
import time
from typing import Callable, Optional

from .application import Application
from .layer import Layer
from .log import client_logger


class ExampleLayer(Layer):
    """Logs every frame and simulates work by sleeping."""

    def __init__(self) -> None:
        super().__init__("Example")

    def on_attach(self) -> None:
        client_logger().info("ExampleLayer attached")

    def on_detach(self) -> None:
        client_logger().info("ExampleLayer detached")

    def on_update(self, delta_time: float) -> None:
        client_logger().info("Application is running")
        time.sleep(0.5)


class ExampleChildLayerDirect(Layer):
    """Child layer pushed and popped by ExampleLayerDirect."""

    def __init__(self) -> None:
        super().__init__("ExampleChildDirect")

    def on_attach(self) -> None:
        client_logger().info("ExampleChildDirect attached")

    def on_detach(self) -> None:
        client_logger().info("ExampleChildDirect detached")

    def on_update(self, delta_time: float) -> None:
        client_logger().info("ExampleChildDirect OnUpdate")


def _read_one_char() -> None:
    sys.stdin.read(1)


class ExampleLayerDirect(Layer):
    """Pushes a child layer, pops it on the next frame, then waits for input.

    The stack is mutated directly and synchronously from inside on_update.
    """

    def __init__(
        self,
        application: Optional[Application] = None,
        wait_for_input: Optional[Callable[[], object]] = None,
    ) -> None:
        super().__init__("ExampleDirect")
        self._application = application
        self._wait_for_input = wait_for_input or _read_one_char
        self._child: Optional[ExampleChildLayerDirect] = None
        self._pushed = False
        self._popped = False

    @property
    def _app(self) -> Application:
        return self._application or Application.get_instance()

    def on_attach(self) -> None:
        client_logger().info("ExampleDirect attached")

    def on_detach(self) -> None:
        client_logger().info("ExampleDirect detached")

    def on_update(self, delta_time: float) -> None:
        logger = client_logger()
        if not self._pushed:
            child = ExampleChildLayerDirect()
            self._child = child
            logger.info(f"ExampleDirect: PushLayer(child='{child.name}')")
            self._app.layer_stack.push_layer(child)
            self._pushed = True
            return

        if not self._popped:
            if self._child is not None:
                logger.info(f"ExampleDirect: PopLayer(child='{self._child.name}')")
                popped = self._app.layer_stack.pop_layer(self._child)
                if popped is not None:
                    logger.info(f"ExampleDirect Pop result: popped '{popped.name}'")
                else:
                    logger.info("ExampleDirect Pop result: nullptr")
            self._popped = True
            return

        logger.info(
            "ExampleDirect: operations complete. Press Enter to continue and see logs..."
        )
        self._wait_for_input()
        self._pushed = False
        self._popped = False