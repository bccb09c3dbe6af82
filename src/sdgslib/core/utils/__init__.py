"""Shared utility helpers used across the core library."""

from .math_utils import (
    binomial_log_pmf,
    binomial_tail,
    logsumexp,
)
from .random import (
    RandomSource,
    SecureRandomSource,
    create_rng,
    resolve_random_source,
)
from .config import (
    RuntimeConfig,
    get_config,
    configure,
)
from .serialization import (
    serialize_to_json,
    deserialize_from_json,
    mask_sensitive_data,
    VersionedPayload,
)
from .logging import (
    PrivacyFilter,
    get_logger,
    configure_logging,
)
from .param_validation import (
    ensure,
    ensure_finite,
    ensure_type,
    ParamValidationError,
)
from .performance import (
    Timer,
    time_function,
)

__all__ = [
    "binomial_log_pmf",
    "binomial_tail",
    "logsumexp",
    "RandomSource",
    "SecureRandomSource",
    "create_rng",
    "resolve_random_source",
    "RuntimeConfig",
    "get_config",
    "configure",
    "serialize_to_json",
    "deserialize_from_json",
    "mask_sensitive_data",
    "VersionedPayload",
    "PrivacyFilter",
    "get_logger",
    "configure_logging",
    "ensure",
    "ensure_finite",
    "ensure_type",
    "ParamValidationError",
    "Timer",
    "time_function",
]
