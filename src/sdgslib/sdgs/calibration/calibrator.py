"""
Calibration of (k, beta)-SDGS parameters from an (epsilon, delta) budget.

Implements the reduction of

    Ninghui Li, Wahbeh H. Qardaji, Dong Su: On sampling, anonymization, and
    differential privacy or, k-anonymization meets differential privacy.
    ASIACCS 2012, pp. 32-33.

A dataset sampled with probability ``beta`` and then generalized so that
every equivalence class holds at least ``k`` records satisfies
(epsilon, delta)-DP when ``beta = 1 - e^-epsilon`` and ``k`` is the smallest
integer whose induced delta bound does not exceed the requested delta.

Responsibilities
  - Validate the budget before any numeric scan.
  - Evaluate the per-sample-size terms A(n) (binomial tail) and C(n)
    (analytic, decreasing upper bound).
  - Scan sample sizes for the delta bound of a given k, and scan k for the
    minimal admissible value.

Limitations
  - Both scans are bounded by ``RuntimeConfig.max_calibration_iterations``;
    exhausting the bound raises ``CalibrationError``.
"""
# 说明：根据 (ε, δ) 隐私预算为 (k, β)-SDGS 归约计算采样率 β 与最小等价类大小 k 的校准工具。
# 职责：
# - calculate_beta / calculate_gamma：β = 1 - e^(-ε)，γ = (e^ε - 1 + β) / e^ε
# - calculate_a：A(n) = P(X > floor(nγ))，X ~ Binomial(n, β)
# - calculate_c：C(n) = exp(-n(γ ln(γ/β) - (γ - β)))，随 n 单调递减的解析上界
# - calculate_delta：从 n_m = ceil(k/γ - 1) 开始向上扫描 n，维护 A(n) 的滑动最大值，C(n) 不超过最大值时停止
# - calculate_k：从 k = 1 起扫描，返回第一个满足 Δ(k) <= δ 的 k；各 k 共享 A(n) 缓存，每个 n 只计算一次二项尾概率
# - calibrate：统一入口，返回 CalibratedParameters 并记录耗时
# 约定：
# - Δ(k) 关于 k 单调不增，调用方只能依赖扫描在有限步内终止，不能假设严格递减

from __future__ import annotations

import math
import sys
from typing import Dict, Optional

from sdgslib.core.privacy import CalibratedParameters, CalibrationError, InvalidBudgetError, validate_budget
from sdgslib.core.utils import Timer, binomial_tail, get_config, get_logger
from sdgslib.core.utils.param_validation import ensure

logger = get_logger(__name__)

# 滑动最大值的初值：最小正浮点数，保证 C(n) 趋近 0 时扫描必然终止
_DELTA_FLOOR = sys.float_info.min * sys.float_info.epsilon


def _iteration_limit(max_iterations: Optional[int]) -> int:
    limit = get_config().max_calibration_iterations if max_iterations is None else max_iterations
    ensure(int(limit) > 0, "max_iterations must be positive")
    return int(limit)


def calculate_beta(epsilon: float) -> float:
    """Return beta_max = 1 - e^-epsilon."""
    ensure(epsilon > 0, "epsilon must be positive")
    return -math.expm1(-float(epsilon))


def calculate_gamma(epsilon: float, beta: float) -> float:
    """Return gamma = (e^epsilon - 1 + beta) / e^epsilon."""
    # 等价于 1 - e^(-ε) (1 - β)，避免 e^ε 在大 ε 下溢出
    return -math.expm1(-float(epsilon)) + float(beta) * math.exp(-float(epsilon))


def calculate_a(n: int, epsilon: float, beta: float) -> float:
    """Probability that a Binomial(n, beta) sample exceeds ``n * gamma``."""
    gamma = calculate_gamma(epsilon, beta)
    return binomial_tail(n, beta, int(math.floor(n * gamma)) + 1)


def calculate_c(n: int, epsilon: float, beta: float) -> float:
    """Analytic upper bound on A(n), decreasing in n."""
    gamma = calculate_gamma(epsilon, beta)
    rate = gamma * math.log(gamma / beta) - (gamma - beta)
    return math.exp(-n * rate)


def calculate_delta(
    k: int,
    epsilon: float,
    beta: float,
    *,
    max_iterations: Optional[int] = None,
    cache: Optional[Dict[int, float]] = None,
) -> float:
    """
    Delta bound induced by minimal class size ``k``.

    - Args:
        - k: candidate minimal class size, ``k >= 1``.
        - epsilon: privacy parameter, ``epsilon > 0``.
        - beta: sampling probability in (0, 1).
        - max_iterations: cap on the number of scanned sample sizes.
        - cache: optional mapping n -> A(n) shared between calls with the same
          epsilon and beta; filled with every A(n) this call evaluates.
    - Returns:
        - The running maximum of A(n) at the first n with C(n) <= maximum.
    """
    ensure(k >= 1, "k must be >= 1")
    ensure(0.0 < beta < 1.0, "beta must be in (0,1)")
    limit = _iteration_limit(max_iterations)
    gamma = calculate_gamma(epsilon, beta)
    n_m = max(0, int(math.ceil(k / gamma - 1.0)))

    delta = _DELTA_FLOOR
    for n in range(n_m, n_m + limit):
        if cache is None:
            a_n = calculate_a(n, epsilon, beta)
        else:
            a_n = cache.get(n)
            if a_n is None:
                a_n = cache[n] = calculate_a(n, epsilon, beta)
        delta = max(delta, a_n)
        if calculate_c(n, epsilon, beta) <= delta:
            return delta
    raise CalibrationError(
        f"delta bound for k={k}, epsilon={epsilon} did not converge within {limit} sample sizes"
    )


def calculate_k(
    epsilon: float,
    delta: float,
    beta: Optional[float] = None,
    *,
    max_iterations: Optional[int] = None,
) -> int:
    """Smallest k whose delta bound does not exceed ``delta``."""
    epsilon, delta = validate_budget(epsilon, delta)
    beta = calculate_beta(epsilon) if beta is None else float(beta)
    # ε 过大时 β 在双精度下舍入为 1，γ/β 退化，C(n) 不再递减
    ensure(0.0 < beta < 1.0, f"epsilon={epsilon} yields beta={beta} outside (0,1)", error=InvalidBudgetError)
    limit = _iteration_limit(max_iterations)
    # A(n) 与 k 无关，相邻 k 的扫描区间大量重叠，整个 k 扫描共享一份缓存
    cache: Dict[int, float] = {}
    for k in range(1, limit + 1):
        if calculate_delta(k, epsilon, beta, max_iterations=limit, cache=cache) <= delta:
            return k
    raise CalibrationError(
        f"no k <= {limit} satisfies delta={delta} for epsilon={epsilon}; budget is unsatisfiable in practice"
    )


def calibrate(epsilon: float, delta: float, *, max_iterations: Optional[int] = None) -> CalibratedParameters:
    """Derive (beta, k) for an (epsilon, delta) budget."""
    epsilon, delta = validate_budget(epsilon, delta)
    with Timer() as timer:
        beta = calculate_beta(epsilon)
        k = calculate_k(epsilon, delta, beta, max_iterations=max_iterations)
    logger.debug(
        "calibrated (%s,%s)-DP to k=%d beta=%.6f in %.3fs", epsilon, delta, k, beta, timer.elapsed
    )
    return CalibratedParameters(beta=beta, k=k)
