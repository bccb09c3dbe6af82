"""
Unit tests for validation helpers.
"""
# 说明：参数验证工具（ensure / ensure_type / ensure_finite）的单元测试。

import math

import pytest

from sdgslib.core.utils import ParamValidationError, ensure, ensure_finite, ensure_type


class CustomError(ValueError):
    pass


def test_ensure_passes_and_fails() -> None:
    ensure(True, "should not raise")
    with pytest.raises(ParamValidationError):
        ensure(False, "error")
    with pytest.raises(CustomError):
        ensure(False, "error", error=CustomError)


def test_ensure_type_rejects_bool_for_numbers() -> None:
    ensure_type(5, (int,), label="value")
    with pytest.raises(ParamValidationError):
        ensure_type("text", (int,), label="value")
    with pytest.raises(ParamValidationError):
        ensure_type(True, (int,), label="value")
    ensure_type(True, (bool,), label="flag")


def test_ensure_finite() -> None:
    assert ensure_finite(3) == 3.0
    for bad in (math.nan, math.inf, "1.0", None):
        with pytest.raises(ParamValidationError):
            ensure_finite(bad)
