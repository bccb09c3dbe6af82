"""
Unit tests for runtime configuration utilities.
"""
# 说明：RuntimeConfig（运行时配置）及全局配置访问辅助函数的单元测试。
# 覆盖：
# - configure(...)：通过关键字参数更新全局配置实例字段，未知字段报错
# - RuntimeConfig.load_from_env(...)：从环境变量加载并覆写配置选项（含整数与布尔转换）
# - get_config()：返回全局 RuntimeConfig 单例

import pytest

from sdgslib.core.utils import RuntimeConfig, configure, get_config


def test_configure_updates_values() -> None:
    cfg = configure(strict_validation=False, max_calibration_iterations=500)
    assert cfg.strict_validation is False
    assert cfg.max_calibration_iterations == 500


def test_configure_rejects_unknown_option() -> None:
    with pytest.raises(AttributeError):
        configure(not_an_option=True)


def test_runtime_config_env_override(monkeypatch) -> None:
    cfg = RuntimeConfig()
    monkeypatch.setenv("SDGSLIB_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("SDGSLIB_MASK_SENSITIVE_FIELDS", "no")
    monkeypatch.setenv("SDGSLIB_MAX_CALIBRATION_ITERATIONS", "250")
    cfg.load_from_env()
    assert cfg.log_level == "DEBUG"
    assert cfg.mask_sensitive_fields is False
    assert cfg.max_calibration_iterations == 250


def test_get_config_returns_singleton() -> None:
    cfg = get_config()
    cfg.strict_validation = True
    assert get_config() is cfg
    assert get_config().strict_validation is True
