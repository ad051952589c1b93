from unittest.mock import patch

import pytest

from rayengine.clock import Timer


def test_fresh_timer_is_zeroed():
    timer = Timer()
    assert timer.delta_seconds == 0.0
    assert timer.elapsed_seconds == 0.0


def test_tick_measures_delta_and_elapsed():
    with patch("time.perf_counter", side_effect=[10.0, 10.5, 12.0]):
        timer = Timer()
        timer.tick()
        first = timer.delta_seconds
        assert first == pytest.approx(0.5)
        assert timer.elapsed_seconds == pytest.approx(first)
        timer.tick()
        assert timer.elapsed_seconds == pytest.approx(first + timer.delta_seconds)
        assert timer.delta_seconds > first


def test_reset_clears_values():
    with patch("time.perf_counter", side_effect=[1.0, 3.0, 4.0]):
        timer = Timer()
        timer.tick()
        assert timer.delta_seconds > 0.0
        timer.reset()
        assert timer.delta_seconds == 0.0
        assert timer.elapsed_seconds == 0.0


def test_elapsed_milliseconds_uses_current_time():
    with patch("time.perf_counter", side_effect=[2.0, 2.25]):
        timer = Timer()
        assert timer.elapsed_milliseconds() == pytest.approx(250.0)


def test_elapsed_milliseconds_does_not_change_tick_values():
    with patch("time.perf_counter", side_effect=[0.0, 1.0, 5.0]):
        timer = Timer()
        timer.tick()
        delta = timer.delta_seconds
        elapsed = timer.elapsed_seconds
        timer.elapsed_milliseconds()
        assert timer.delta_seconds == delta
        assert timer.elapsed_seconds == elapsed


def test_real_clock_invariants():
    timer = Timer()
    timer.tick()
    timer.tick()
    assert timer.delta_seconds >= 0.0
    assert timer.elapsed_seconds >= timer.delta_seconds
    assert timer.elapsed_milliseconds() >= timer.elapsed_seconds * 1000.0