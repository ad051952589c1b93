import logging
from unittest import mock

import pytest

from rayengine.application import Application
from rayengine.sandbox import (
    ExampleChildLayerDirect,
    ExampleLayer,
    ExampleLayerDirect,
)


@pytest.fixture
def client_caplog(caplog):
    caplog.set_level(logging.INFO, logger="APP")
    return caplog


def test_example_layer_name_and_attach_logs(client_caplog):
    layer = ExampleLayer()
    assert layer.name == "Example"
    layer.on_attach()
    layer.on_detach()
    assert client_caplog.messages == ["ExampleLayer attached", "ExampleLayer detached"]


@mock.patch("rayengine.sandbox.time.sleep")
def test_example_layer_update_logs_and_sleeps(sleep, client_caplog):
    layer = ExampleLayer()
    result = layer.on_update(0.016)
    assert result is None
    assert layer.name == "Example"
    assert client_caplog.messages == ["Application is running"]
    assert sleep.call_args_list == [mock.call(0.5)]


def test_child_layer_logs(client_caplog):
    child = ExampleChildLayerDirect()
    assert child.name == "ExampleChildDirect"
    child.on_update(0.0)
    assert client_caplog.messages == ["ExampleChildDirect OnUpdate"]


def test_direct_layer_push_pop_wait_cycle(client_caplog):
    app = Application()
    waits = []
    direct = ExampleLayerDirect(app, lambda: waits.append(True))
    app.push_layer(direct)
    assert direct.name == "ExampleDirect"

    direct.on_update(0.0)
    names = [layer.name for layer in app.layer_stack]
    assert names == ["ExampleDirect", "ExampleChildDirect"]
    assert "ExampleDirect: PushLayer(child='ExampleChildDirect')" in client_caplog.messages
    assert "ExampleChildDirect attached" in client_caplog.messages

    direct.on_update(0.0)
    assert [layer.name for layer in app.layer_stack] == ["ExampleDirect"]
    assert "ExampleDirect Pop result: popped 'ExampleChildDirect'" in client_caplog.messages
    assert "ExampleChildDirect detached" in client_caplog.messages

    direct.on_update(0.0)
    assert waits == [True]
    assert len(app.layer_stack) == 1

    direct.on_update(0.0)
    assert len(app.layer_stack) == 2


def test_direct_layer_pop_of_missing_child_reports_nullptr(client_caplog):
    app = Application()
    direct = ExampleLayerDirect(app, lambda: None)
    direct.on_update(0.0)
    child = next(iter(app.layer_stack))
    assert child.name == "ExampleChildDirect"
    assert app.layer_stack.remove_layer(child) is True
    direct.on_update(0.0)
    assert client_caplog.messages[-1] == "ExampleDirect Pop result: nullptr"
    assert len(app.layer_stack) == 0


def test_direct_layer_inside_running_application():
    app = Application()
    waits = []
    direct = ExampleLayerDirect(app, lambda: (waits.append(True), app.stop()))
    app.push_layer(direct)
    assert app.run() is True
    assert waits == [True]
    assert [layer.name for layer in app.layer_stack] == ["ExampleDirect"]