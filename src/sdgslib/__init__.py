"""
sdgslib: (epsilon, delta)-differential privacy for anonymization engines via
(k, beta)-sampled dataset generalization schemes.
"""

from __future__ import annotations

from .core import (
    ClassEntry,
    DataSubset,
    GeneralizationDegree,
    GeneralizationScheme,
    InMemoryDataManager,
    PrivacyBudget,
    Requirement,
    StaticDataDefinition,
)
from .sdgs import CriterionSet, EDDifferentialPrivacy, InitializationState, calibrate

__version__ = "0.1.0"

__all__: list[str] = [
    "ClassEntry",
    "DataSubset",
    "GeneralizationDegree",
    "GeneralizationScheme",
    "InMemoryDataManager",
    "PrivacyBudget",
    "Requirement",
    "StaticDataDefinition",
    "CriterionSet",
    "EDDifferentialPrivacy",
    "InitializationState",
    "calibrate",
]
