"""Shared pytest configuration and path setup for test modules."""

import sys
from pathlib import Path

import pytest

# Ensure src/ is on sys.path for all tests when the package is not installed
_ROOT = Path(__file__).resolve().parents[1]
_SRC = _ROOT / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from sdgslib.core.utils import get_config  # noqa: E402


@pytest.fixture(autouse=True)
def _restore_runtime_config():
    # 每个测试结束后恢复全局运行时配置，避免测试之间相互影响
    config = get_config()
    snapshot = dict(vars(config))
    yield
    for key, value in snapshot.items():
        setattr(config, key, value)
