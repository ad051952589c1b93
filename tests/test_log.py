import logging

import pytest

from rayengine import log


@pytest.fixture(autouse=True)
def clean_logging():
    log.shutdown()
    yield
    log.shutdown()


def test_core_logger_uses_pattern(capsys):
    log.init("%n|%v")
    log.core_logger().info("hello")
    assert capsys.readouterr().out == f"{log.CORE_LOGGER_NAME}|hello\n"


def test_client_logger_uses_pattern(capsys):
    log.init("%n|%v")
    log.client_logger().info("world")
    assert capsys.readouterr().out == f"{log.CLIENT_LOGGER_NAME}|world\n"


def test_logger_names_match_source():
    assert log.core_logger().name == "RAYENGINE"
    assert log.client_logger().name == "APP"


def test_trace_level_is_enabled_and_named(capsys):
    log.init("%l:%v")
    log.core_logger().log(log.TRACE, "detail")
    assert capsys.readouterr().out == "trace:detail\n"


def test_default_pattern_shape(capsys):
    log.init()
    log.core_logger().info("started")
    out = capsys.readouterr().out.rstrip("\n")
    assert len(out) == 25
    assert out[10:] == " [info] started"
    stamp = out[:10]
    assert stamp[0] == "[" and stamp[-1] == "]"
    assert stamp[3] == ":" and stamp[6] == ":"
    assert stamp[1:3].isdigit() and stamp[4:6].isdigit() and stamp[7:9].isdigit()


def test_percent_literal_and_unknown_flag(capsys):
    log.init("100%% %q %v")
    log.core_logger().info("done")
    assert capsys.readouterr().out == "100% %q done\n"


def test_color_markers_are_dropped_when_not_a_terminal(capsys):
    log.init("%^%v%$")
    log.core_logger().error("boom")
    assert capsys.readouterr().out == "boom\n"


def test_second_init_reports_failure_and_keeps_working(capsys):
    log.init("%v")
    log.init("%n %v")
    out = capsys.readouterr().out
    assert out.startswith("Log init failed: ")
    log.core_logger().info("still")
    assert capsys.readouterr().out == "still\n"


def test_shutdown_detaches_handlers(capsys):
    log.init("%v")
    log.shutdown()
    log.core_logger().info("gone")
    assert capsys.readouterr().out == ""
    assert log.core_logger().propagate is True
    assert log.core_logger().level == logging.NOTSET


def test_init_after_shutdown_works_again(capsys):
    log.init("%v")
    log.shutdown()
    log.init("%n:%v")
    log.client_logger().info("again")
    assert capsys.readouterr().out == f"{log.CLIENT_LOGGER_NAME}:again\n"