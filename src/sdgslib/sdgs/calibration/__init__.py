"""Calibration of (k, beta)-SDGS parameters from differential-privacy budgets."""
from .calibrator import (
    calculate_a,
    calculate_beta,
    calculate_c,
    calculate_delta,
    calculate_gamma,
    calculate_k,
    calibrate,
)

__all__ = [
    "calculate_a",
    "calculate_beta",
    "calculate_c",
    "calculate_delta",
    "calculate_gamma",
    "calculate_k",
    "calibrate",
]
