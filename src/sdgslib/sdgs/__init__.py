"""Entry point for the (k, beta)-SDGS differential-privacy package."""

from __future__ import annotations

from .calibration import (
    calculate_a,
    calculate_beta,
    calculate_c,
    calculate_delta,
    calculate_gamma,
    calculate_k,
    calibrate,
)
from .sampling import InitializationState, SubsetSampler, draw_subset
from .criteria import CriterionSet, EDDifferentialPrivacy

__all__: list[str] = [
    "calculate_a",
    "calculate_beta",
    "calculate_c",
    "calculate_delta",
    "calculate_gamma",
    "calculate_k",
    "calibrate",
    "InitializationState",
    "SubsetSampler",
    "draw_subset",
    "CriterionSet",
    "EDDifferentialPrivacy",
]
