r"""Parameter validation utilities for retry configurations.

This module provides validation functions for retry parameters to ensure
they meet the required constraints before a retry loop starts.
"""

from __future__ import annotations

__all__ = ["validate_retry_params"]


def validate_retry_params(
    max_retries: int,
    max_total_time: float | None = None,
    max_wait_time: float | None = None,
) -> None:
    """Validate retry parameters.

    Args:
        max_retries: Maximum number of retries. Must be >= 0. A value of 0
            means no retries (only the initial attempt).
        max_total_time: Maximum total time budget for all attempts.
            Must be > 0 if provided. The retry loop stops once the
            elapsed time reaches this value.
        max_wait_time: Maximum backoff delay cap in seconds.
            Must be > 0 if provided.

    Raises:
        ValueError: If max_retries is negative, or if max_total_time or
            max_wait_time are non-positive.

    Example:
        ```pycon
        >>> from aretry.core import validate_retry_params
        >>> validate_retry_params(max_retries=3)
        >>> validate_retry_params(max_retries=0, max_total_time=30.0)
        >>> validate_retry_params(max_retries=3, max_wait_time=5.0)
        >>> validate_retry_params(max_retries=-1)
        Traceback (most recent call last):
        ...
        ValueError: max_retries must be >= 0, got -1

        ```
    """
    if max_retries < 0:
        msg = f"max_retries must be >= 0, got {max_retries}"
        raise ValueError(msg)
    if max_total_time is not None and max_total_time <= 0:
        msg = f"max_total_time must be > 0, got {max_total_time}"
        raise ValueError(msg)
    if max_wait_time is not None and max_wait_time <= 0:
        msg = f"max_wait_time must be > 0, got {max_wait_time}"
        raise ValueError(msg)
