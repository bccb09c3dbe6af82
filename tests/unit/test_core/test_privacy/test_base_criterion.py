"""
Unit tests for the criterion interface and capability flags.
"""
# 说明：PrivacyCriterion 抽象基类与 Requirement 能力标志位的单元测试。

import pytest

from sdgslib.core.data import ClassEntry, InMemoryDataManager
from sdgslib.core.privacy import PrivacyCriterion, Requirement


class MinimumCount(PrivacyCriterion):
    def __init__(self, minimum: int) -> None:
        super().__init__(monotonic_with_suppression=True, monotonic=True)
        self.minimum = minimum

    def requirements(self) -> Requirement:
        return Requirement.COUNTER

    def is_anonymous(self, entry) -> bool:
        return entry.count >= self.minimum


def test_base_criterion_cannot_be_instantiated() -> None:
    with pytest.raises(TypeError):
        PrivacyCriterion()  # type: ignore[abstract]


def test_default_initialize_is_a_no_op() -> None:
    criterion = MinimumCount(2)
    assert criterion.initialize(InMemoryDataManager(5)) is None
    assert criterion.is_monotonic and criterion.is_monotonic_with_suppression
    assert criterion.get_requirements() is Requirement.COUNTER
    assert criterion.is_anonymous(ClassEntry(count=2))


def test_requirements_combine_bitwise() -> None:
    combined = Requirement.COUNTER | Requirement.SECONDARY_COUNTER
    assert Requirement.SECONDARY_COUNTER in combined
    assert int(combined) == 3
    assert Requirement.NONE | Requirement.COUNTER == Requirement.COUNTER
