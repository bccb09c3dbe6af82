"""
Integration tests driving the DP criterion the way a search engine does.
"""
# 说明：模拟匿名化搜索引擎对 EDDifferentialPrivacy 的完整调用流程。
# 覆盖：
# - 通过数据定义解析各属性的泛化级别
# - 在研究子集上按泛化后的准标识符分组，得到等价类计数并逐类判定
# - 预热 + 多次重复运行共享同一数据管理器时子集保持不变
# - 持久化后在新进程中恢复，继续沿用原子集
from __future__ import annotations

from collections import Counter
from typing import Dict, List

import numpy as np

from sdgslib.core.data import (
    AttributeHierarchyBounds,
    ClassEntry,
    DataSubset,
    GeneralizationDegree,
    GeneralizationScheme,
    InMemoryDataManager,
    StaticDataDefinition,
)
from sdgslib.core.privacy import Requirement
from sdgslib.core.utils import create_rng
from sdgslib.sdgs import CriterionSet, EDDifferentialPrivacy


def _records(size: int, seed: int) -> Dict[str, np.ndarray]:
    rng = np.random.default_rng(seed)
    return {
        "age": rng.integers(18, 90, size=size),
        "zip": rng.integers(10000, 10100, size=size),
        "sex": rng.integers(0, 2, size=size),
    }


def _generalize(values: np.ndarray, level: int) -> np.ndarray:
    # 每升高一级，取值区间宽度翻倍
    return values // (2 ** level)


def _equivalence_classes(
    records: Dict[str, np.ndarray], subset: DataSubset, levels: Dict[str, int]
) -> List[ClassEntry]:
    rows = subset.to_array()
    keys = zip(*(_generalize(records[name][rows], level) for name, level in sorted(levels.items())))
    return [ClassEntry(count=count) for count in Counter(keys).values()]


def test_engine_run_with_generalization_and_subset() -> None:
    records = _records(2_000, seed=11)
    definition = StaticDataDefinition(
        {
            "age": AttributeHierarchyBounds(True, 1, 6),
            "zip": AttributeHierarchyBounds(True, 0, 7),
            "sex": None,
        }
    )
    scheme = GeneralizationScheme.create(records, GeneralizationDegree.HIGH).generalize(
        "zip", GeneralizationDegree.COMPLETE
    )
    criterion = EDDifferentialPrivacy(1.0, 1e-3, scheme, rng=create_rng(2024))
    manager = InMemoryDataManager(2_000, name="patients")

    assert criterion.requirements() & Requirement.SECONDARY_COUNTER
    criterion.initialize(manager)
    levels = {name: scheme.get_generalization_level(name, definition) for name in sorted(scheme.attributes)}
    # HIGH = 0.8 → round(0.8 * 6) = 5；COMPLETE → 7；无层次属性 → 0
    assert levels == {"age": 5, "zip": 7, "sex": 0}

    classes = _equivalence_classes(records, criterion.subset, levels)
    assert sum(entry.count for entry in classes) == len(criterion.subset)
    verdicts = [criterion.is_anonymous(entry) for entry in classes]
    assert verdicts == [entry.count >= criterion.k for entry in classes]


def test_repeated_runs_share_one_subset() -> None:
    scheme = GeneralizationScheme(["age", "zip", "sex"], GeneralizationDegree.MEDIUM)
    criterion = EDDifferentialPrivacy(2.0, 1e-4, scheme, rng=create_rng(3))
    manager = InMemoryDataManager(5_000)

    # 预热一次，再重复运行 5 次
    criterion.initialize(manager)
    warm_up = criterion.subset
    for _ in range(5):
        criterion.initialize(manager)
        assert criterion.subset is warm_up

    other = InMemoryDataManager(5_000)
    criterion.initialize(other)
    assert criterion.subset is not warm_up
    assert criterion.subset.size == 5_000


def test_persisted_criterion_resumes_with_same_subset() -> None:
    scheme = GeneralizationScheme(["age"]).generalize("age", 3)
    original = EDDifferentialPrivacy(1.5, 1e-3, scheme, rng=create_rng(8))
    original.initialize(InMemoryDataManager(800))
    text = original.to_json()

    restored = EDDifferentialPrivacy.from_json(text, rng=create_rng(99))
    models = CriterionSet([restored])
    models.initialize(InMemoryDataManager(800))
    assert restored.subset == original.subset
    assert str(models) == "{(1.5,0.001)-DP}"
    assert models.is_anonymous(ClassEntry(count=restored.k))
