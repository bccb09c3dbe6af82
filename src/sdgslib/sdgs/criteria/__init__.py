"""Privacy criteria built on (k, beta)-SDGS."""
from .ed_differential_privacy import EDDifferentialPrivacy
from .criterion_set import CriterionSet

__all__ = [
    "EDDifferentialPrivacy",
    "CriterionSet",
]
