"""
(epsilon, delta)-differential privacy implemented with (k, beta)-SDGS.

The criterion calibrates ``beta`` and ``k`` once at construction, draws its
research subset when the engine attaches a dataset, and declares an
equivalence class anonymous iff it holds at least ``k`` records.
"""
# 说明：基于 (k, β)-SDGS 实现的 (ε, δ)-差分隐私准则。
# 职责：
# - 构造时校验预算并立即计算 β 与 k（校准只执行一次，不进入逐类判断的热路径）
# - initialize：委托 SubsetSampler 的三态状态机，按数据管理器身份决定抽样/保留/接管
# - is_anonymous：entry.count >= k，O(1) 且无副作用
# - to_dict / from_dict / to_json / from_json：持久化 ε、δ、k、β、泛化方案与子集；恢复时不重新校准、不重新抽样
# - to_report：供审计日志使用的结构化摘要（不含子集下标）

from __future__ import annotations

import math
from typing import Any, Dict, Mapping, Optional

from sdgslib.core.data import DataManager, DataSubset, EquivalenceClassEntry, GeneralizationScheme
from sdgslib.core.privacy import (
    CalibratedParameters,
    CriterionError,
    PrivacyBudget,
    PrivacyCriterion,
    Requirement,
)
from sdgslib.core.utils import RandomSource, VersionedPayload, get_logger
from sdgslib.core.utils.param_validation import ParamValidationError
from sdgslib.sdgs.calibration import calculate_beta, calibrate
from sdgslib.sdgs.sampling import InitializationState, SubsetSampler

logger = get_logger(__name__)

SERIALIZATION_VERSION = "1.0"


class EDDifferentialPrivacy(PrivacyCriterion):
    """
    (e,d)-Differential Privacy implemented with (k,b)-SDGS as proposed in:

    Ninghui Li, Wahbeh H. Qardaji, Dong Su:
    On sampling, anonymization, and differential privacy or,
    k-anonymization meets differential privacy.
    Proceedings of ASIACCS 2012. pp. 32-33
    """

    def __init__(
        self,
        epsilon: float,
        delta: float,
        generalization: GeneralizationScheme,
        *,
        rng: Optional[RandomSource] = None,
        max_iterations: Optional[int] = None,
    ) -> None:
        super().__init__(monotonic_with_suppression=False, monotonic=False)
        self._budget = PrivacyBudget(epsilon, delta)
        self._generalization = _check_scheme(generalization)
        self._parameters = calibrate(self._budget.epsilon, self._budget.delta, max_iterations=max_iterations)
        self._sampler = SubsetSampler(self._parameters.beta, rng)
        logger.info("created %s with k=%d, beta=%.6f", self, self.k, self.beta)

    # Accessors -------------------------------------------------------------------
    @property
    def budget(self) -> PrivacyBudget:
        return self._budget

    @property
    def parameters(self) -> CalibratedParameters:
        return self._parameters

    @property
    def epsilon(self) -> float:
        return self._budget.epsilon

    @property
    def delta(self) -> float:
        return self._budget.delta

    @property
    def k(self) -> int:
        return self._parameters.k

    @property
    def beta(self) -> float:
        return self._parameters.beta

    @property
    def generalization_scheme(self) -> GeneralizationScheme:
        return self._generalization

    @property
    def subset(self) -> Optional[DataSubset]:
        """The research subset; ``None`` until the first ``initialize``."""
        return self._sampler.subset

    @property
    def state(self) -> InitializationState:
        return self._sampler.state

    def get_epsilon(self) -> float:
        return self.epsilon

    def get_delta(self) -> float:
        return self.delta

    def get_k(self) -> int:
        return self.k

    def get_beta(self) -> float:
        return self.beta

    def get_generalization_scheme(self) -> GeneralizationScheme:
        return self._generalization

    def get_subset(self) -> Optional[DataSubset]:
        return self.subset

    # Criterion interface ---------------------------------------------------------
    def requirements(self) -> Requirement:
        # 需要主计数器与次计数器
        return Requirement.COUNTER | Requirement.SECONDARY_COUNTER

    def initialize(self, manager: DataManager) -> None:
        """Create (or keep) the research subset for ``manager``."""
        self._sampler.initialize(manager)

    def is_anonymous(self, entry: EquivalenceClassEntry) -> bool:
        return entry.count >= self._parameters.k

    # Persistence -----------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        subset = self._sampler.subset
        return {
            "epsilon": self.epsilon,
            "delta": self.delta,
            "k": self.k,
            "beta": self.beta,
            "generalization": self._generalization.to_dict(),
            "subset": subset.to_dict() if subset is not None else None,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, rng: Optional[RandomSource] = None) -> "EDDifferentialPrivacy":
        """Restore a criterion without re-running calibration or resampling."""
        missing = [key for key in ("epsilon", "delta", "k", "beta", "generalization") if key not in data]
        if missing:
            raise ParamValidationError(f"serialized criterion missing fields: {', '.join(missing)}")
        budget = PrivacyBudget(data["epsilon"], data["delta"])
        parameters = CalibratedParameters(beta=data["beta"], k=data["k"])
        if not math.isclose(parameters.beta, calculate_beta(budget.epsilon), rel_tol=1e-12):
            raise CriterionError(
                f"persisted beta={parameters.beta} does not match epsilon={budget.epsilon}"
            )
        subset_data = data.get("subset")
        subset = DataSubset.from_dict(subset_data) if subset_data is not None else None

        criterion = cls.__new__(cls)
        PrivacyCriterion.__init__(criterion, monotonic_with_suppression=False, monotonic=False)
        criterion._budget = budget
        criterion._parameters = parameters
        criterion._generalization = GeneralizationScheme.from_dict(data["generalization"])
        criterion._sampler = SubsetSampler.restore(parameters.beta, subset, rng)
        return criterion

    def to_json(self) -> str:
        return VersionedPayload(version=SERIALIZATION_VERSION, payload=self.to_dict()).to_json()

    @classmethod
    def from_json(cls, text: str, *, rng: Optional[RandomSource] = None) -> "EDDifferentialPrivacy":
        stored = VersionedPayload.from_json(text)
        if stored.version != SERIALIZATION_VERSION:
            raise ParamValidationError(f"unsupported serialization version '{stored.version}'")
        return cls.from_dict(stored.payload, rng=rng)

    def to_report(self) -> Dict[str, Any]:
        """Structured summary for logging or audit sinks."""
        subset = self._sampler.subset
        parameters = {"epsilon": self.epsilon, "delta": self.delta, "k": self.k, "beta": self.beta}
        return {
            "criterion": str(self),
            "model": "(k,beta)-SDGS",
            "parameters": parameters,
            "summary": ", ".join(f"{key}={value}" for key, value in parameters.items()),
            "requirements": [flag.name for flag in Requirement if flag and flag in self.requirements()],
            "state": self._sampler.state.value,
            "subset_size": len(subset) if subset is not None else None,
            "dataset_size": subset.size if subset is not None else None,
        }

    def __str__(self) -> str:
        return f"({self.epsilon!r},{self.delta!r})-DP"

    def __repr__(self) -> str:
        return f"EDDifferentialPrivacy(epsilon={self.epsilon!r}, delta={self.delta!r}, k={self.k}, beta={self.beta!r})"


def _check_scheme(generalization: Any) -> GeneralizationScheme:
    if not isinstance(generalization, GeneralizationScheme):
        raise ParamValidationError("generalization must be a GeneralizationScheme")
    return generalization
