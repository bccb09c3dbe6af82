"""
Performance measurement helpers.

Responsibilities
  - Provide a timing utility for code blocks and callables, used to report
    how long criterion calibration takes.

Limitations
  - Results depend on system load and Python runtime variability.
"""
# 说明：性能测量工具，用于统计校准等一次性计算的耗时并写入日志。
# 职责：
# - Timer：基于上下文管理器与 ContextDecorator 的计时工具，可用于 with 或函数装饰
# - time_function(...)：测量单次函数调用耗时（秒）

from __future__ import annotations

import time
from contextlib import ContextDecorator
from typing import Any, Callable, Optional


class Timer(ContextDecorator):
    """Context manager for timing code blocks."""
    # 计时上下文管理器：进入时记录起始时间，退出时计算耗时（秒）

    def __init__(self) -> None:
        self.start: float = 0.0
        self.end: Optional[float] = None
        self.elapsed: float = 0.0

    def __enter__(self) -> "Timer":
        self.start = time.perf_counter()
        self.end = None
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.end = time.perf_counter()
        self.elapsed = self.end - self.start


def time_function(func: Callable[..., Any], *args: Any, **kwargs: Any) -> float:
    """Time a callable and return elapsed seconds."""
    with Timer() as timer:
        func(*args, **kwargs)
    return timer.elapsed
