"""Core privacy abstractions and shared exceptions."""
from .base_criterion import (
    CalibrationError,
    CriterionError,
    InvalidBudgetError,
    PrivacyCriterion,
    Requirement,
)
from .privacy_model import (
    CalibratedParameters,
    PrivacyBudget,
    validate_budget,
)

__all__ = [
    "CalibrationError",
    "CriterionError",
    "InvalidBudgetError",
    "PrivacyCriterion",
    "Requirement",
    "CalibratedParameters",
    "PrivacyBudget",
    "validate_budget",
]
