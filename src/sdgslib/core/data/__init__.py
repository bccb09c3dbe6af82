"""Data model shared by the criteria: subsets, schemes and engine handles."""
from .handles import (
    AttributeHierarchyBounds,
    ClassEntry,
    DataDefinition,
    DataManager,
    EquivalenceClassEntry,
    InMemoryDataManager,
    StaticDataDefinition,
    bounds_from_definition,
)
from .subset import DataSubset
from .generalization import (
    GeneralizationDegree,
    GeneralizationError,
    GeneralizationScheme,
    InvalidLevelError,
    UnknownAttributeError,
    resolve_level,
)

__all__ = [
    "AttributeHierarchyBounds",
    "ClassEntry",
    "DataDefinition",
    "DataManager",
    "EquivalenceClassEntry",
    "InMemoryDataManager",
    "StaticDataDefinition",
    "bounds_from_definition",
    "DataSubset",
    "GeneralizationDegree",
    "GeneralizationError",
    "GeneralizationScheme",
    "InvalidLevelError",
    "UnknownAttributeError",
    "resolve_level",
]
