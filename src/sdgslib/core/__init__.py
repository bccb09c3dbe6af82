"""Entry point for the core library components."""

from __future__ import annotations

from .data import (
    AttributeHierarchyBounds,
    ClassEntry,
    DataDefinition,
    DataManager,
    DataSubset,
    EquivalenceClassEntry,
    GeneralizationDegree,
    GeneralizationError,
    GeneralizationScheme,
    InMemoryDataManager,
    InvalidLevelError,
    StaticDataDefinition,
    UnknownAttributeError,
    resolve_level,
)
from .privacy import (
    CalibratedParameters,
    CalibrationError,
    CriterionError,
    InvalidBudgetError,
    PrivacyBudget,
    PrivacyCriterion,
    Requirement,
)
from .utils import ParamValidationError, configure, configure_logging, get_config, get_logger

__all__: list[str] = [
    "AttributeHierarchyBounds",
    "ClassEntry",
    "DataDefinition",
    "DataManager",
    "DataSubset",
    "EquivalenceClassEntry",
    "GeneralizationDegree",
    "GeneralizationError",
    "GeneralizationScheme",
    "InMemoryDataManager",
    "InvalidLevelError",
    "StaticDataDefinition",
    "UnknownAttributeError",
    "resolve_level",
    "CalibratedParameters",
    "CalibrationError",
    "CriterionError",
    "InvalidBudgetError",
    "PrivacyBudget",
    "PrivacyCriterion",
    "Requirement",
    "ParamValidationError",
    "configure",
    "configure_logging",
    "get_config",
    "get_logger",
]
