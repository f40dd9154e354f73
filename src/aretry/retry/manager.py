r"""Callback manager for orchestrating retry lifecycle events.

This module provides the CallbackManager class that handles invocation
of user-defined callbacks at various points in the retry lifecycle.
"""

from __future__ import annotations

__all__ = ["CallbackManager"]

from typing import TYPE_CHECKING, Any

from aretry.callbacks import invoke_on_failure, invoke_on_retry, invoke_on_success

if TYPE_CHECKING:
    from aretry.core.config import RetryConfig


class CallbackManager:
    """Manages callback invocations during the retry lifecycle.

    Attributes:
        config: Configuration holding the callback functions.
    """

    def __init__(self, config: RetryConfig[Any]) -> None:
        self.config = config

    def on_retry(self, error: Exception | None, retry_count: int) -> None:
        """Invoke on_retry callback.

        Args:
            error: Exception that triggered the retry, if any.
            retry_count: The 1-based number of the retry about to be taken.
        """
        invoke_on_retry(self.config.on_retry, error=error, retry_count=retry_count)

    def on_success(self, attempts: int, value: Any, start_time: float) -> None:
        """Invoke on_success callback.

        Args:
            attempts: The number of attempts made.
            value: The value of the final attempt.
            start_time: Monotonic timestamp when the loop started.
        """
        invoke_on_success(
            self.config.on_success,
            attempts=attempts,
            max_retries=self.config.max_retries,
            value=value,
            start_time=start_time,
        )

    def on_failure(self, attempts: int, error: Exception, start_time: float) -> None:
        """Invoke on_failure callback.

        Args:
            attempts: The number of attempts made.
            error: The error that ends the loop.
            start_time: Monotonic timestamp when the loop started.
        """
        invoke_on_failure(
            self.config.on_failure,
            attempts=attempts,
            max_retries=self.config.max_retries,
            error=error,
            start_time=start_time,
        )
