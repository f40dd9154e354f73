r"""Contains utility functions for awaiting asynchronous operations with
automatic retry logic."""

from __future__ import annotations

__all__ = ["execute_void_async", "execute_with_result_async"]

from typing import TYPE_CHECKING, Any, TypeVar

from aretry.retry.executor_async import AsyncRetryExecutor

if TYPE_CHECKING:
    import asyncio
    from collections.abc import Awaitable, Callable

    from aretry.core.config import RetryConfig

T = TypeVar("T")


async def execute_with_result_async(
    operation: Callable[[], Awaitable[T]],
    *,
    config: RetryConfig[T] | None = None,
    cancel_event: asyncio.Event | None = None,
) -> T:
    """Await a value-returning coroutine function with automatic retry
    logic.

    Args:
        operation: Zero-argument coroutine function.
        config: Retry configuration. Defaults to a fresh ``RetryConfig()``.
        cancel_event: Optional event stopping the loop once set.

    Returns:
        The value of the last attempt.

    Raises:
        RetryCancelledError: If cancelled and ``raise_on_cancel`` is set.
        Exception: The exception of the last attempt, unchanged, if the
            loop ends on a failure.
    """
    return await AsyncRetryExecutor(config).execute(operation, cancel_event=cancel_event)


async def execute_void_async(
    operation: Callable[[], Awaitable[Any]],
    *,
    config: RetryConfig[Any] | None = None,
    cancel_event: asyncio.Event | None = None,
) -> None:
    """Await a coroutine function without a meaningful result with
    automatic retry logic.

    Args:
        operation: Zero-argument coroutine function. Its result is ignored.
        config: Retry configuration. Defaults to a fresh ``RetryConfig()``.
        cancel_event: Optional event stopping the loop once set.

    Raises:
        RetryCancelledError: If cancelled and ``raise_on_cancel`` is set.
        Exception: The exception of the last attempt, unchanged, if the
            loop ends on a failure.
    """
    await AsyncRetryExecutor(config).execute_void(operation, cancel_event=cancel_event)
