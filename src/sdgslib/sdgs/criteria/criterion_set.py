"""
Ordered collection of privacy criteria applied together by the search engine.
"""
# 说明：搜索引擎持有的一组隐私准则，按加入顺序依次应用。
# 职责：
# - requirements：各准则所需计数器按位或合并
# - initialize：向所有准则分发数据管理器
# - is_anonymous：依次询问各准则，任一不满足即判定为非匿名
# - __str__：生成 {c1, c2} 形式的隐私模型摘要，用于基准与日志输出

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Type, TypeVar

from sdgslib.core.data import DataManager, EquivalenceClassEntry
from sdgslib.core.privacy import PrivacyCriterion, Requirement
from sdgslib.core.utils.param_validation import ParamValidationError

C = TypeVar("C", bound=PrivacyCriterion)


class CriterionSet:
    """Holds several criteria and applies them sequentially."""

    def __init__(self, criteria: Optional[Iterable[PrivacyCriterion]] = None) -> None:
        self._criteria: List[PrivacyCriterion] = []
        for criterion in criteria or ():
            self.add(criterion)

    def add(self, criterion: PrivacyCriterion) -> "CriterionSet":
        if not isinstance(criterion, PrivacyCriterion):
            raise ParamValidationError("criterion must implement PrivacyCriterion")
        self._criteria.append(criterion)
        return self

    def get(self, kind: Type[C]) -> Optional[C]:
        """First criterion of type ``kind``, if any."""
        for criterion in self._criteria:
            if isinstance(criterion, kind):
                return criterion
        return None

    def requirements(self) -> Requirement:
        result = Requirement.NONE
        for criterion in self._criteria:
            result |= criterion.requirements()
        return result

    def initialize(self, manager: DataManager) -> None:
        for criterion in self._criteria:
            criterion.initialize(manager)

    def is_anonymous(self, entry: EquivalenceClassEntry) -> bool:
        return all(criterion.is_anonymous(entry) for criterion in self._criteria)

    def __iter__(self) -> Iterator[PrivacyCriterion]:
        return iter(self._criteria)

    def __len__(self) -> int:
        return len(self._criteria)

    def __str__(self) -> str:
        return "{" + ", ".join(str(criterion) for criterion in self._criteria) + "}"
