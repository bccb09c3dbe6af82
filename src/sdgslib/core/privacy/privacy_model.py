"""
Privacy budget and calibrated parameter containers.

The module centralises:
- ``PrivacyBudget``: the user supplied (epsilon, delta) pair, validated once.
- ``CalibratedParameters``: the (beta, k) pair derived from a budget under the
  (k, beta)-SDGS reduction.
"""
# 说明：隐私预算与校准参数的不可变容器。
# 职责：
# - PrivacyBudget：封装 (ε, δ)，构造时校验 ε > 0、0 < δ < 1，非法输入直接拒绝、绝不静默截断
# - CalibratedParameters：封装 (β, k)，由校准器根据预算唯一确定
# - 两者均提供 to_dict / from_dict，便于持久化与审计输出

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple

from sdgslib.core.utils.param_validation import ensure, ensure_finite, ensure_type
from .base_criterion import InvalidBudgetError


def validate_budget(epsilon: Any, delta: Any) -> Tuple[float, float]:
    """Validate an (epsilon, delta) pair and return it as floats."""
    # 预算校验在任何扫描之前执行，保证后续 gamma 等中间量始终为正
    eps = ensure_finite(epsilon, label="epsilon", error=InvalidBudgetError)
    dlt = ensure_finite(delta, label="delta", error=InvalidBudgetError)
    ensure(eps > 0, f"epsilon must be positive, got {eps}", error=InvalidBudgetError)
    ensure(0 < dlt < 1, f"delta must be in (0,1), got {dlt}", error=InvalidBudgetError)
    return eps, dlt


@dataclass(frozen=True)
class PrivacyBudget:
    """Immutable (epsilon, delta) differential-privacy budget."""

    epsilon: float
    delta: float

    def __post_init__(self) -> None:
        eps, dlt = validate_budget(self.epsilon, self.delta)
        object.__setattr__(self, "epsilon", eps)
        object.__setattr__(self, "delta", dlt)

    def to_dict(self) -> Dict[str, float]:
        return {"epsilon": self.epsilon, "delta": self.delta}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PrivacyBudget":
        return cls(epsilon=data["epsilon"], delta=data["delta"])


@dataclass(frozen=True)
class CalibratedParameters:
    """Sampling probability ``beta`` and minimal class size ``k``."""

    beta: float
    k: int

    def __post_init__(self) -> None:
        beta = ensure_finite(self.beta, label="beta")
        ensure(0.0 < beta < 1.0, f"beta must be in (0,1), got {beta}")
        ensure_type(self.k, (numbers.Integral,), label="k")
        ensure(self.k >= 1, f"k must be >= 1, got {self.k}")
        object.__setattr__(self, "beta", beta)
        object.__setattr__(self, "k", int(self.k))

    def to_dict(self) -> Dict[str, Any]:
        return {"beta": self.beta, "k": self.k}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CalibratedParameters":
        return cls(beta=data["beta"], k=data["k"])
