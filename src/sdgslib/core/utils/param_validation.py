"""
Reusable validation helpers.
"""
# 说明：参数验证相关的辅助函数，用于在库内部统一进行轻量级参数检查。
# 职责：
# - ParamValidationError：专门用于参数校验失败的异常类型
# - ensure：基于布尔条件触发参数校验错误的轻量断言工具
# - ensure_type：检查参数是否属于指定类型集合，并在失败时给出带 label 的错误提示
# - ensure_finite：拒绝 NaN / inf 等非有限浮点输入

from __future__ import annotations

import math
import numbers
from typing import Any, Tuple, Type


class ParamValidationError(ValueError):
    """Raised when parameter validation fails."""


def ensure(condition: bool, message: str, *, error: Type[Exception] = ParamValidationError) -> None:
    # 条件不满足时抛出指定的异常类型（默认使用 ParamValidationError）
    if not condition:
        raise error(message)


def ensure_type(
    value: Any,
    expected: Tuple[type, ...],
    *,
    label: str = "value",
    error: Type[Exception] = ParamValidationError,
) -> None:
    # 检查 value 是否为 expected 集合中的任意类型，否则抛出带字段标签的错误
    # bool 是 int 的子类，数值参数处不接受布尔值
    if isinstance(value, bool) and bool not in expected:
        raise error(f"{label} must be instance of {', '.join(t.__name__ for t in expected)}")
    if not isinstance(value, expected):
        names = ", ".join(t.__name__ for t in expected)
        raise error(f"{label} must be instance of {names}")


def ensure_finite(
    value: Any,
    *,
    label: str = "value",
    error: Type[Exception] = ParamValidationError,
) -> float:
    # 校验实数且有限，返回 float 形式，便于后续统一计算
    ensure_type(value, (numbers.Real,), label=label, error=error)
    result = float(value)
    if not math.isfinite(result):
        raise error(f"{label} must be finite")
    return result
