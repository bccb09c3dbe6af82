"""
Unit tests for random source helpers.
"""
# 说明：随机源工具的单元测试。
# 覆盖：
# - SecureRandomSource：标量与数组形状、取值范围 [0, 1)
# - create_rng：相同种子可复现，已有 Generator 原样返回
# - resolve_random_source：None 回落到安全随机源，缺少 random 方法的对象被拒绝

import numpy as np
import pytest

from sdgslib.core.utils import RandomSource, SecureRandomSource, create_rng, resolve_random_source


def test_secure_random_source_shapes_and_range() -> None:
    source = SecureRandomSource()
    scalar = source.random()
    assert isinstance(scalar, float) and 0.0 <= scalar < 1.0
    values = source.random(100)
    assert values.shape == (100,)
    assert ((values >= 0.0) & (values < 1.0)).all()
    assert source.random((2, 3)).shape == (2, 3)


def test_secure_random_source_is_not_replayable() -> None:
    # 两个实例不共享随机流（1000 个 53 位浮点数完全相同的概率可忽略）
    first = SecureRandomSource().random(1000)
    second = SecureRandomSource().random(1000)
    assert not np.array_equal(first, second)


def test_create_rng_is_reproducible() -> None:
    assert create_rng(42).random() == pytest.approx(create_rng(42).random())
    rng = np.random.default_rng(1)
    assert create_rng(rng) is rng


def test_resolve_random_source() -> None:
    assert isinstance(resolve_random_source(None), SecureRandomSource)
    rng = create_rng(3)
    assert resolve_random_source(rng) is rng
    assert isinstance(rng, RandomSource)
    with pytest.raises(TypeError):
        resolve_random_source(object())  # type: ignore[arg-type]
