"""
Unit tests for numerical utilities.
"""
# 说明：数值工具函数的单元测试，验证 logsumexp / binomial_log_pmf / binomial_tail 的正确性与数值稳定性。
# 覆盖：
# - logsumexp：与参考实现一致，全部为 -inf 时返回 -inf 而不是 NaN
# - binomial_log_pmf：与组合数公式一致，支持边界与退化概率
# - binomial_tail：小规模与精确求和一致；空求和为 0；大 n、极小 beta 下退化为 0；跨分块求和保持精度；数万规模下与独立参考值一致

import math

import numpy as np
import pytest

from sdgslib.core.utils import ParamValidationError, binomial_log_pmf, binomial_tail, logsumexp


def _exact_tail(n: int, beta: float, start: int) -> float:
    return sum(math.comb(n, j) * beta**j * (1 - beta) ** (n - j) for j in range(start, n + 1))


def test_logsumexp_matches_reference() -> None:
    values = np.array([1000.0, 1001.0, 1002.0])
    expected = np.log(np.sum(np.exp(values - values.max()))) + values.max()
    assert float(logsumexp(values)) == pytest.approx(expected)


def test_logsumexp_handles_all_negative_infinity() -> None:
    # 全部为 -inf 时结果应为 -inf，且不产生 NaN
    result = float(logsumexp([-math.inf, -math.inf]))
    assert result == -math.inf
    assert float(logsumexp([-math.inf, 0.0])) == pytest.approx(0.0)


def test_binomial_log_pmf_matches_formula() -> None:
    assert binomial_log_pmf(4, 0.5, 2) == pytest.approx(math.log(6 / 16))
    assert binomial_log_pmf(4, 0.5, 5) == -math.inf
    assert binomial_log_pmf(3, 0.0, 0) == 0.0
    assert binomial_log_pmf(3, 1.0, 2) == -math.inf


@pytest.mark.parametrize(
    "n, beta, start",
    [(10, 0.3, 4), (25, 0.632, 22), (1, 0.5, 1), (40, 0.05, 3), (7, 0.9, 7)],
)
def test_binomial_tail_matches_exact_sum(n, beta, start) -> None:
    assert binomial_tail(n, beta, start) == pytest.approx(_exact_tail(n, beta, start), rel=1e-9)


def test_binomial_tail_boundaries() -> None:
    # start == n + 1 为空求和；start == 0 覆盖整个支撑集
    assert binomial_tail(10, 0.4, 11) == 0.0
    assert binomial_tail(0, 0.4, 1) == 0.0
    assert binomial_tail(10, 0.4, 0) == 1.0
    assert binomial_tail(5, 0.0, 1) == 0.0
    assert binomial_tail(5, 1.0, 5) == 1.0


def test_binomial_tail_underflows_to_zero() -> None:
    result = binomial_tail(50_000, 1e-6, 1_000)
    assert not math.isnan(result)
    assert result == 0.0


def test_binomial_tail_spanning_several_chunks() -> None:
    # 起点远低于众数时需要跨越多个分块；利用对称性校验 P(X >= m) + P(X >= m + 1) = 1
    n = 20_000
    assert binomial_tail(n, 0.5, 1) == pytest.approx(1.0)
    total = binomial_tail(n, 0.5, n // 2) + binomial_tail(n, 0.5, n // 2 + 1)
    assert total == pytest.approx(1.0, rel=1e-9)


def _log_space_tail(n: int, beta: float, start: int) -> float:
    # 逐项 lgamma 求和的独立参考实现
    log_beta, log_rest = math.log(beta), math.log1p(-beta)
    log_norm = math.lgamma(n + 1)
    return sum(
        math.exp(log_norm - math.lgamma(j + 1) - math.lgamma(n - j + 1) + j * log_beta + (n - j) * log_rest)
        for j in range(start, n + 1)
    )


def test_binomial_tail_large_n_near_the_mean() -> None:
    n, beta = 40_000, 1e-3
    for start in (35, 41, 45):
        # 起点低于均值附近，用精确组合数求补集作参考
        reference = 1.0 - sum(math.comb(n, j) * beta**j * (1 - beta) ** (n - j) for j in range(start))
        assert binomial_tail(n, beta, start) == pytest.approx(reference, rel=1e-9)


def test_binomial_tail_large_n_far_tail() -> None:
    n, beta, start = 40_000, 1e-3, 80
    expected = _log_space_tail(n, beta, start)
    assert 0.0 < expected < 1e-6
    assert binomial_tail(n, beta, start) == pytest.approx(expected, rel=1e-8)


def test_binomial_tail_rejects_invalid_arguments() -> None:
    with pytest.raises(ParamValidationError):
        binomial_tail(10, 0.5, 12)
    with pytest.raises(ParamValidationError):
        binomial_tail(10, 1.5, 3)
    with pytest.raises(ParamValidationError):
        binomial_tail(-1, 0.5, 0)
    with pytest.raises(ParamValidationError):
        binomial_tail(10, 0.5, 2.5)  # type: ignore[arg-type]
