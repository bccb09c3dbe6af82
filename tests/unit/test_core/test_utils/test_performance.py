"""
Unit tests for timing helpers.
"""
# 说明：Timer 与 time_function 的单元测试。

import time

from sdgslib.core.utils import Timer, time_function


def test_timer_records_elapsed() -> None:
    with Timer() as timer:
        time.sleep(0.01)
    assert timer.end is not None
    assert timer.elapsed >= 0.005


def test_time_function_returns_seconds() -> None:
    assert time_function(sum, [1, 2, 3]) >= 0.0
