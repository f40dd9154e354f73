r"""Callback types and data structures for observability.

This module provides the hooks that let callers observe a retry loop
for logging, metrics or alerting. The engine never ships its own sinks.

Three lifecycle hooks are supported:
- on_retry: Called once per retry that is scheduled, before the
  backoff sleep. It receives the exception of the attempt being retried
  (``None`` when a success value was rejected) and the 1-based retry
  counter. If cancellation interrupts the backoff sleep, the loop ends
  without making the retry announced by the last on_retry call.
- on_success: Called once when the loop finishes with a successful
  attempt.
- on_failure: Called once when the loop finishes with a failed attempt.

Example:
    ```pycon
    >>> from aretry import RetryConfig, execute_with_result
    >>> from aretry.predicates import never_retry
    >>> seen = []
    >>> config = RetryConfig(
    ...     max_retries=3,
    ...     success_predicates=(never_retry,),
    ...     on_retry=lambda error, retry_count: seen.append(retry_count),
    ... )
    >>> calls = iter([ValueError("boom"), ValueError("boom"), "ok"])
    >>> def operation():
    ...     item = next(calls)
    ...     if isinstance(item, Exception):
    ...         raise item
    ...     return item
    ...
    >>> execute_with_result(operation, config=config)
    'ok'
    >>> seen
    [1, 2]

    ```
"""

from __future__ import annotations

__all__ = [
    "FailureInfo",
    "SuccessInfo",
    "invoke_on_failure",
    "invoke_on_retry",
    "invoke_on_success",
]

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass
class SuccessInfo:
    """Information passed to on_success callback.

    Attributes:
        attempts: The number of attempts made, including the final one.
        max_retries: Maximum number of retry attempts configured.
        value: The value returned by the final attempt.
        total_time: Total time spent on all attempts including backoff (seconds).
    """

    attempts: int
    max_retries: int
    value: Any
    total_time: float


@dataclass
class FailureInfo:
    """Information passed to on_failure callback.

    Attributes:
        attempts: The number of attempts made, including the final one.
        max_retries: Maximum number of retry attempts configured.
        error: The exception that ends the loop.
        total_time: Total time spent on all attempts including backoff (seconds).
    """

    attempts: int
    max_retries: int
    error: Exception
    total_time: float


def invoke_on_retry(
    on_retry: Callable[[Exception | None, int], None] | None,
    *,
    error: Exception | None,
    retry_count: int,
) -> None:
    """Invoke on_retry callback if provided.

    Args:
        on_retry: Optional callback to invoke before each retry.
        error: The exception that triggered the retry, or ``None`` when a
            success value was rejected.
        retry_count: The 1-based number of the retry about to be taken.
    """
    if on_retry is not None:
        on_retry(error, retry_count)


def invoke_on_success(
    on_success: Callable[[SuccessInfo], None] | None,
    *,
    attempts: int,
    max_retries: int,
    value: Any,
    start_time: float,
) -> None:
    """Invoke on_success callback if provided.

    Args:
        on_success: Optional callback to invoke when the loop succeeds.
        attempts: The number of attempts made.
        max_retries: Maximum number of retry attempts.
        value: The value returned by the final attempt.
        start_time: The monotonic timestamp when the loop started.
    """
    if on_success is not None:
        on_success(
            SuccessInfo(
                attempts=attempts,
                max_retries=max_retries,
                value=value,
                total_time=time.monotonic() - start_time,
            )
        )


def invoke_on_failure(
    on_failure: Callable[[FailureInfo], None] | None,
    *,
    attempts: int,
    max_retries: int,
    error: Exception,
    start_time: float,
) -> None:
    """Invoke on_failure callback if provided.

    Args:
        on_failure: Optional callback to invoke when the loop fails.
        attempts: The number of attempts made.
        max_retries: Maximum number of retry attempts.
        error: The exception that ends the loop.
        start_time: The monotonic timestamp when the loop started.
    """
    if on_failure is not None:
        on_failure(
            FailureInfo(
                attempts=attempts,
                max_retries=max_retries,
                error=error,
                total_time=time.monotonic() - start_time,
            )
        )
