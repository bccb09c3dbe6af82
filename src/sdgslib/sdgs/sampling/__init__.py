"""Research subset sampling for (k, beta)-SDGS."""
from .subset_sampler import (
    InitializationState,
    SubsetSampler,
    draw_subset,
)

__all__ = [
    "InitializationState",
    "SubsetSampler",
    "draw_subset",
]
