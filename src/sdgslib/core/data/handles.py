"""
Handles exchanged with the surrounding anonymization engine.

Responsibilities:
    * describe the minimal surface of the engine's dataset manager, data
      definition and equivalence-class entries as structural protocols
    * provide small in-memory implementations for embedding and testing
"""
# 说明：与外部匿名化引擎交互时使用的句柄接口。
# 职责：
# - DataManager：暴露泛化后记录数 dataset_size，按对象身份（is）在 initialize 调用间比较
# - DataDefinition：按属性暴露是否存在层次结构及最小/最大泛化级别
# - EquivalenceClassEntry：仅暴露 count（本库唯一读取的字段）
# - InMemoryDataManager / StaticDataDefinition / ClassEntry：上述接口的轻量内存实现

from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Optional, Protocol, runtime_checkable

from sdgslib.core.utils.param_validation import ParamValidationError, ensure, ensure_type


@runtime_checkable
class DataManager(Protocol):
    """Engine-side dataset handle; only the generalized record count is read."""

    @property
    def dataset_size(self) -> int:  # pragma: no cover - protocol
        ...


@runtime_checkable
class DataDefinition(Protocol):
    """Per-attribute hierarchy information supplied by the engine."""

    def is_hierarchy_available(self, attribute: str) -> bool:  # pragma: no cover - protocol
        ...

    def get_minimum_generalization(self, attribute: str) -> int:  # pragma: no cover - protocol
        ...

    def get_maximum_generalization(self, attribute: str) -> int:  # pragma: no cover - protocol
        ...


@runtime_checkable
class EquivalenceClassEntry(Protocol):
    """Aggregated equivalence class; ``count`` is its number of records."""

    count: int


@dataclass(frozen=True)
class AttributeHierarchyBounds:
    """Generalization bounds of one attribute's hierarchy."""

    has_hierarchy: bool
    min_level: int = 0
    max_level: int = 0

    def __post_init__(self) -> None:
        ensure_type(self.min_level, (numbers.Integral,), label="min_level")
        ensure_type(self.max_level, (numbers.Integral,), label="max_level")
        ensure(0 <= self.min_level <= self.max_level, "bounds must satisfy 0 <= min_level <= max_level")

    def clamp(self, level: int) -> int:
        # 将级别裁剪到 [min_level, max_level] 区间
        return min(max(level, self.min_level), self.max_level)


class StaticDataDefinition:
    """
    ``DataDefinition`` backed by a fixed mapping of attribute bounds.

    Attributes mapped to ``None`` are treated as having no hierarchy with
    both bounds at zero.
    """

    def __init__(self, bounds: Mapping[str, Optional[AttributeHierarchyBounds]]) -> None:
        self._bounds: Dict[str, AttributeHierarchyBounds] = {}
        for attribute, value in bounds.items():
            self._bounds[attribute] = value if value is not None else AttributeHierarchyBounds(False)

    @property
    def attributes(self) -> Iterable[str]:
        return tuple(self._bounds)

    def bounds(self, attribute: str) -> AttributeHierarchyBounds:
        try:
            return self._bounds[attribute]
        except KeyError as exc:
            raise ParamValidationError(f"no hierarchy bounds defined for attribute '{attribute}'") from exc

    def is_hierarchy_available(self, attribute: str) -> bool:
        return self.bounds(attribute).has_hierarchy

    def get_minimum_generalization(self, attribute: str) -> int:
        return self.bounds(attribute).min_level

    def get_maximum_generalization(self, attribute: str) -> int:
        return self.bounds(attribute).max_level


def bounds_from_definition(attribute: str, definition: DataDefinition) -> AttributeHierarchyBounds:
    """Snapshot the bounds an arbitrary ``DataDefinition`` reports for ``attribute``."""
    if isinstance(definition, StaticDataDefinition):
        return definition.bounds(attribute)
    return AttributeHierarchyBounds(
        has_hierarchy=bool(definition.is_hierarchy_available(attribute)),
        min_level=int(definition.get_minimum_generalization(attribute)),
        max_level=int(definition.get_maximum_generalization(attribute)),
    )


# eq=False：按对象身份比较，数值相同的两个管理器仍视为不同数据集
@dataclass(eq=False)
class InMemoryDataManager:
    """Minimal ``DataManager`` wrapping a record count and optional metadata."""

    dataset_size: int
    name: str = "dataset"
    extras: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        ensure_type(self.dataset_size, (numbers.Integral,), label="dataset_size")
        ensure(self.dataset_size >= 0, "dataset_size must be non-negative")


@dataclass
class ClassEntry:
    """Simple equivalence-class entry with primary and secondary counters."""

    count: int = 0
    secondary_count: int = 0
