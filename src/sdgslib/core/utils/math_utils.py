"""
Numerical utilities shared across the library.

Responsibilities
  - Provide a numerically stable aggregation in log space (logsumexp).
  - Evaluate binomial probability mass and upper tail sums without overflow
    for large trial counts and tiny success probabilities.

Usage Context
  - The calibration solver evaluates tail sums for every scanned sample size,
    so these helpers must stay cheap and vectorised.

Limitations
  - Tail sums are computed via a log-ratio recurrence; relative error grows
    slowly with the number of summed terms (negligible below 1e6 terms).
"""
# 说明：库内共享的数值工具函数集合，集中实现数值稳定的对数域聚合与二项分布尾部概率计算。
# 职责：
# - logsumexp：使用“减去最大值”技巧计算 log(sum(exp(x)))，避免溢出或下溢
# - binomial_log_pmf：基于 lgamma 计算二项分布单点概率的对数
# - binomial_tail：计算 P(X >= start)，X ~ Binomial(n, beta)，极小概率退化为 0 而不是 NaN
# 约定：
# - start == n + 1 表示空求和，结果为 0.0（边界 k 值的正确性依赖此约定）
# - beta 取 0 或 1 时直接按退化分布精确处理

from __future__ import annotations

import math
import numbers
from typing import Optional, Sequence, Union

import numpy as np

from .param_validation import ParamValidationError, ensure, ensure_type

ArrayLike = Union[Sequence[float], np.ndarray]

# 分块大小与截断阈值（对数域，e^-50 约 2e-22）
_TAIL_CHUNK = 4096
_TAIL_CUTOFF = 50.0


def logsumexp(values: ArrayLike, axis: Optional[int] = None, keepdims: bool = False) -> np.ndarray:
    """Stable log(sum(exp(values)))."""
    arr = np.asarray(values, dtype=np.float64)
    max_val = np.max(arr, axis=axis, keepdims=True)
    # 全部为 -inf 时，max_val 也为 -inf，平移会产生 NaN；此时直接以 0 作平移量
    safe_max = np.where(np.isfinite(max_val), max_val, 0.0)
    shifted = arr - safe_max
    with np.errstate(divide="ignore"):
        out = np.log(np.sum(np.exp(shifted), axis=axis, keepdims=True)) + safe_max
    if not keepdims:
        out = np.squeeze(out, axis=axis) if axis is not None else out.reshape(())
    return out


def _validate_binomial(n: int, beta: float) -> None:
    ensure_type(n, (numbers.Integral,), label="n")
    ensure_type(beta, (numbers.Real,), label="beta")
    ensure(n >= 0, "n must be non-negative")
    ensure(0.0 <= float(beta) <= 1.0, "beta must be in [0, 1]")


def binomial_log_pmf(n: int, beta: float, j: int) -> float:
    """Return ln P(X = j) for X ~ Binomial(n, beta); ``-inf`` outside the support."""
    _validate_binomial(n, beta)
    ensure_type(j, (numbers.Integral,), label="j")
    n, j, beta = int(n), int(j), float(beta)
    if j < 0 or j > n:
        return -math.inf
    if beta == 0.0:
        return 0.0 if j == 0 else -math.inf
    if beta == 1.0:
        return 0.0 if j == n else -math.inf
    log_choose = math.lgamma(n + 1) - math.lgamma(j + 1) - math.lgamma(n - j + 1)
    return log_choose + j * math.log(beta) + (n - j) * math.log1p(-beta)


def binomial_tail(n: int, beta: float, start: int) -> float:
    """
    Sum of P(X = j) for j in [start, n] where X ~ Binomial(n, beta).

    - Args:
        - n: number of trials, ``n >= 0``.
        - beta: success probability in [0, 1].
        - start: first summed value, ``0 <= start <= n + 1``.
    - Returns:
        - The tail probability in [0, 1]; ``0.0`` for ``start == n + 1``.
    """
    _validate_binomial(n, beta)
    ensure_type(start, (numbers.Integral,), label="start")
    n, start, beta = int(n), int(start), float(beta)
    if start < 0 or start > n + 1:
        raise ParamValidationError(f"start must be in [0, {n + 1}], got {start}")
    if start == n + 1:
        return 0.0
    if start == 0:
        return 1.0
    if beta == 0.0:
        return 0.0
    if beta == 1.0:
        return 1.0

    # 递推：ln p(j+1) = ln p(j) + ln((n-j)/(j+1)) + ln(beta/(1-beta))
    # 分块求和：越过众数后各项单调递减，当前项相对累计和足够小时提前停止
    log_odds = math.log(beta) - math.log1p(-beta)
    log_total = -math.inf
    log_term = binomial_log_pmf(n, beta, start)
    j = start
    while True:
        stop = min(n, j + _TAIL_CHUNK)
        steps = np.log(n - np.arange(j, stop, dtype=np.float64))
        steps -= np.log(np.arange(j, stop, dtype=np.float64) + 1.0)
        steps += log_odds
        log_terms = np.empty(stop - j + 1, dtype=np.float64)
        log_terms[0] = log_term
        np.cumsum(steps, out=log_terms[1:])
        log_terms[1:] += log_term
        log_total = float(logsumexp([log_total, float(logsumexp(log_terms))]))
        if stop >= n:
            break
        log_term = float(log_terms[-1])
        past_mode = steps[-1] < 0.0
        if past_mode and log_term < log_total - _TAIL_CUTOFF:
            break
        # 下一块从 stop + 1 开始，首项由本块末项递推得到
        log_term += float(np.log(n - stop) - np.log(stop + 1.0) + log_odds)
        j = stop + 1
    total = math.exp(log_total)
    return min(1.0, max(0.0, total))
