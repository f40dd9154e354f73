r"""Contains utility functions for running synchronous operations with
automatic retry logic."""

from __future__ import annotations

__all__ = ["execute_void", "execute_with_result"]

from typing import TYPE_CHECKING, Any, TypeVar

from aretry.retry.executor import RetryExecutor

if TYPE_CHECKING:
    import threading
    from collections.abc import Callable

    from aretry.core.config import RetryConfig

T = TypeVar("T")


def execute_with_result(
    operation: Callable[[], T],
    *,
    config: RetryConfig[T] | None = None,
    cancel_event: threading.Event | None = None,
) -> T:
    """Run a value-returning operation with automatic retry logic.

    Args:
        operation: Zero-argument callable to run.
        config: Retry configuration. Defaults to a fresh ``RetryConfig()``,
            which retries every exception and every value once.
        cancel_event: Optional event stopping the loop once set.

    Returns:
        The value of the last attempt.

    Raises:
        RetryCancelledError: If cancelled and ``raise_on_cancel`` is set.
        Exception: The exception of the last attempt, unchanged, if the
            loop ends on a failure.

    Example:
        ```pycon
        >>> from aretry import RetryConfig, execute_with_result
        >>> from aretry.predicates import retry_if_result_is_none
        >>> results = iter([None, None, 7])
        >>> config = RetryConfig(max_retries=5, success_predicates=(retry_if_result_is_none,))
        >>> execute_with_result(lambda: next(results), config=config)
        7

        ```
    """
    return RetryExecutor(config).execute(operation, cancel_event=cancel_event)


def execute_void(
    operation: Callable[[], Any],
    *,
    config: RetryConfig[Any] | None = None,
    cancel_event: threading.Event | None = None,
) -> None:
    """Run an operation without a meaningful result with automatic retry
    logic.

    Args:
        operation: Zero-argument callable to run. Its return value is
            ignored.
        config: Retry configuration. Defaults to a fresh ``RetryConfig()``.
        cancel_event: Optional event stopping the loop once set.

    Raises:
        RetryCancelledError: If cancelled and ``raise_on_cancel`` is set.
        Exception: The exception of the last attempt, unchanged, if the
            loop ends on a failure.
    """
    RetryExecutor(config).execute_void(operation, cancel_event=cancel_event)
