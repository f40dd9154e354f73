r"""Core configuration shared by the sync and async retry executors."""

from __future__ import annotations

__all__ = [
    "DEFAULT_DELAY",
    "DEFAULT_MAX_RETRIES",
    "RetryConfig",
    "default_retry_config",
    "validate_retry_params",
]

from aretry.core.config import (
    DEFAULT_DELAY,
    DEFAULT_MAX_RETRIES,
    RetryConfig,
    default_retry_config,
)
from aretry.core.validation import validate_retry_params
