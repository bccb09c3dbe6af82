"""
Bernoulli sampling of research subsets and its re-initialization policy.

Responsibilities
  - Draw a research subset by an independent Bernoulli(beta) trial per record.
  - Track which dataset manager the current subset belongs to, and decide on
    every ``initialize`` call whether to draw, keep or adopt a subset.

State machine
  - UNINITIALIZED: no subset and no manager. ``initialize`` draws and binds.
  - RESTORED_PENDING_MANAGER: a persisted subset without a manager. ``initialize``
    binds the manager and keeps the subset untouched.
  - BOUND: subset drawn against a manager. ``initialize`` with the same manager
    is a no-op; with a different manager a fresh subset is drawn and bound.

Usage Context
  - Owned by ``EDDifferentialPrivacy``; the engine calls ``initialize`` once
    when it builds its data manager and again when the configuration is
    initialized, possibly many times across repeated runs on the same data.

Limitations
  - Subsets drawn with the default source are not reproducible; test them in
    distribution or inject a seeded numpy Generator.
  - The identity of the bound manager is never persisted.
"""
# 说明：研究子集的伯努利抽样与重新初始化策略。
# 职责：
# - draw_subset：对 [0, dataset_size) 中每个下标独立以概率 β 纳入子集（子集大小本身随机，期望为 β·N）
# - InitializationState：显式三态枚举，取代“依赖非持久化字段是否为空”的隐式判断
# - SubsetSampler：持有当前子集、状态与已绑定的数据管理器身份，按状态机决定抽样、保留或接管
# 约定：
# - 每次抽样都生成新的不可变 DataSubset，绝不原地修改旧子集
# - 随机源通过参数注入；默认使用不可播种的 SecureRandomSource

from __future__ import annotations

import enum
import numbers
from typing import Any, Optional

import numpy as np

from sdgslib.core.data import DataManager, DataSubset
from sdgslib.core.utils import RandomSource, get_logger, resolve_random_source
from sdgslib.core.utils.param_validation import ParamValidationError, ensure, ensure_finite, ensure_type

logger = get_logger(__name__)


def draw_subset(dataset_size: int, beta: float, rng: Optional[RandomSource] = None) -> DataSubset:
    """
    Draw a Bernoulli(beta) subset of ``[0, dataset_size)``.

    - Args:
        - dataset_size: number of records, ``>= 0``.
        - beta: inclusion probability in (0, 1).
        - rng: randomness source exposing ``random(size)``; defaults to a
          cryptographically strong, non-seedable source.
    - Returns:
        - A new ``DataSubset``.
    """
    ensure_type(dataset_size, (numbers.Integral,), label="dataset_size")
    ensure(dataset_size >= 0, "dataset_size must be non-negative")
    beta = ensure_finite(beta, label="beta")
    ensure(0.0 < beta < 1.0, f"beta must be in (0,1), got {beta}")
    source = resolve_random_source(rng)
    size = int(dataset_size)
    if size == 0:
        return DataSubset.create(0, ())
    uniforms = np.asarray(source.random(size), dtype=np.float64)
    if uniforms.shape != (size,):
        raise ParamValidationError(f"random source returned shape {uniforms.shape}, expected ({size},)")
    return DataSubset.create(size, np.flatnonzero(uniforms < beta))


class InitializationState(enum.Enum):
    """Lifecycle of a sampler's research subset."""

    UNINITIALIZED = "uninitialized"
    RESTORED_PENDING_MANAGER = "restored_pending_manager"
    BOUND = "bound"


class SubsetSampler:
    """Owns one research subset and the policy deciding when to redraw it."""

    def __init__(self, beta: float, rng: Optional[RandomSource] = None) -> None:
        beta = ensure_finite(beta, label="beta")
        ensure(0.0 < beta < 1.0, f"beta must be in (0,1), got {beta}")
        self._beta = beta
        self._rng = rng
        self._subset: Optional[DataSubset] = None
        self._manager: Optional[Any] = None
        self._state = InitializationState.UNINITIALIZED

    @classmethod
    def restore(
        cls,
        beta: float,
        subset: Optional[DataSubset],
        rng: Optional[RandomSource] = None,
    ) -> "SubsetSampler":
        """Rebuild a sampler from persisted state; no manager is bound yet."""
        sampler = cls(beta, rng)
        if subset is not None:
            if not isinstance(subset, DataSubset):
                raise ParamValidationError("subset must be a DataSubset")
            sampler._subset = subset
            sampler._state = InitializationState.RESTORED_PENDING_MANAGER
        return sampler

    @property
    def beta(self) -> float:
        return self._beta

    @property
    def subset(self) -> Optional[DataSubset]:
        return self._subset

    @property
    def state(self) -> InitializationState:
        return self._state

    def is_bound_to(self, manager: Any) -> bool:
        return self._state is InitializationState.BOUND and self._manager is manager

    def initialize(self, manager: DataManager) -> DataSubset:
        """Apply the re-initialization policy for ``manager`` and return the current subset."""
        if manager is None:
            raise ParamValidationError("manager must not be None")

        if self._state is InitializationState.RESTORED_PENDING_MANAGER:
            # 持久化恢复后的首次绑定：子集权威，只记录管理器身份
            self._manager = manager
            self._state = InitializationState.BOUND
            logger.debug("bound restored subset of %d records to manager", len(self._subset))
            return self._subset

        if self._state is InitializationState.BOUND:
            if self._manager is manager:
                return self._subset
            # TODO: confirm with engine callers whether rebinding to a new manager should resample or fail
            logger.warning("criterion re-initialized with a different data manager; drawing a new subset")

        return self._draw(manager)

    def _draw(self, manager: DataManager) -> DataSubset:
        records = manager.dataset_size
        subset = draw_subset(records, self._beta, self._rng)
        self._subset = subset
        self._manager = manager
        self._state = InitializationState.BOUND
        logger.debug(
            "drew research subset: %d of %d records (beta=%.4f)",
            len(subset),
            records,
            self._beta,
        )
        return subset
