"""
Core abstractions shared by every privacy criterion implementation.

Responsibilities:
    * capability flags a criterion requests from the class aggregator
    * the uniform criterion interface used by the search engine
    * purpose specific exceptions
"""
# 说明：定义本库所有隐私准则共享的抽象基类与异常类型。
# 职责：
# - Requirement：准则向等价类聚合器声明所需计数器的能力标志位
# - PrivacyCriterion：搜索引擎统一调用的准则接口（requirements / initialize / is_anonymous）
# - 特定用途的异常类型（预算非法、校准无法收敛等）

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from sdgslib.core.utils.param_validation import ParamValidationError

if TYPE_CHECKING:  # pragma: no cover
    from sdgslib.core.data.handles import DataManager, EquivalenceClassEntry


# Exceptions -----------------------------------------------------------------
# 准则相关异常类型。
class CriterionError(Exception):
    """Base exception for criterion errors."""


class InvalidBudgetError(CriterionError, ParamValidationError):
    """Raised when epsilon/delta fall outside their valid ranges."""


class CalibrationError(CriterionError):
    """Raised when calibration does not converge within the iteration limit."""


# Capabilities ----------------------------------------------------------------
class Requirement(enum.IntFlag):
    """Counters a criterion needs the equivalence-class aggregator to maintain."""
    # 能力标志位：可按位或组合，多个准则的需求取并集

    NONE = 0
    COUNTER = 1
    SECONDARY_COUNTER = 2


# Base abstraction ------------------------------------------------------------
# 所有准则的抽象基类：
#  - requirements：声明所需计数器（固定声明，非计算得出）
#  - initialize：在引擎挂载数据管理器时调用，默认无操作
#  - is_anonymous：逐等价类判断是否满足准则
class PrivacyCriterion(ABC):
    """Abstract base class for privacy criteria queried by the search engine."""

    def __init__(self, monotonic_with_suppression: bool = False, monotonic: bool = False) -> None:
        self._monotonic_with_suppression = monotonic_with_suppression
        self._monotonic = monotonic

    @property
    def is_monotonic_with_suppression(self) -> bool:
        return self._monotonic_with_suppression

    @property
    def is_monotonic(self) -> bool:
        return self._monotonic

    @abstractmethod
    def requirements(self) -> Requirement:
        """Counters required from the equivalence-class aggregator."""

    def initialize(self, manager: "DataManager") -> None:
        """Hook invoked when the engine attaches a dataset."""

    @abstractmethod
    def is_anonymous(self, entry: "EquivalenceClassEntry") -> bool:
        """Whether the given equivalence class satisfies this criterion."""

    def get_requirements(self) -> Requirement:
        return self.requirements()
