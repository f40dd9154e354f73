r"""Asynchronous retry executor.

This module provides the AsyncRetryExecutor class that awaits a
coroutine function with automatic retry logic, backoff and cooperative
cancellation.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import logging
import time
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from aretry.core.config import RetryConfig
from aretry.retry.classifier import ResultClassifier, VoidClassifier
from aretry.retry.executor_core import decide_retry, finish
from aretry.retry.manager import CallbackManager
from aretry.retry.outcome import Outcome
from aretry.retry.strategy import RetryStrategy
from aretry.utils.sleep import asleep
from aretry.utils.structured_logging import log_structured

if TYPE_CHECKING:
    import asyncio
    from collections.abc import Awaitable, Callable

    from aretry.retry.classifier import BaseOutcomeClassifier

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRetryExecutor(Generic[T]):
    """Executes a coroutine function with automatic retry logic.

    This is the asynchronous counterpart of ``RetryExecutor``: the same
    configuration drives both, and the retry decisions are identical. The
    backoff delay is awaited with ``asyncio``, so other tasks run while a
    retry is pending.

    Note:
        Classifiers, the backoff provider and callbacks are invoked
        synchronously in the running task and should be fast operations.

    Args:
        config: Retry configuration. Defaults to a fresh
            ``RetryConfig()``.

    Attributes:
        config: Retry configuration.
        strategy: Strategy for calculating retry delays.
        callbacks: Manager for invoking callbacks.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry.core.config import RetryConfig
        >>> from aretry.retry import AsyncRetryExecutor
        >>> async def main():
        ...     executor = AsyncRetryExecutor(RetryConfig(max_retries=2))
        ...     calls = []
        ...
        ...     async def ping():
        ...         calls.append(1)
        ...
        ...     await executor.execute_void(ping)
        ...     return len(calls)
        ...
        >>> asyncio.run(main())
        1

        ```
    """

    def __init__(self, config: RetryConfig[T] | None = None) -> None:
        self.config: RetryConfig[T] = config if config is not None else RetryConfig()
        self.strategy: RetryStrategy = RetryStrategy(
            self.config.backoff, self.config.max_wait_time
        )
        self.callbacks: CallbackManager = CallbackManager(self.config)

    async def execute(
        self,
        operation: Callable[[], Awaitable[T]],
        cancel_event: asyncio.Event | None = None,
    ) -> T:
        """Await ``operation()`` until its outcome is acceptable.

        Args:
            operation: Zero-argument coroutine function to await.
            cancel_event: Optional event. Once set, no further attempt is
                started and a pending backoff sleep is interrupted.

        Returns:
            The value of the last attempt.

        Raises:
            RetryCancelledError: If cancelled and ``raise_on_cancel`` is set.
            Exception: The exception of the last attempt, unchanged, if the
                loop ends on a failure.
        """
        classifier = ResultClassifier(
            self.config.should_handle, self.config.success_predicates
        )
        return await self._run(operation, classifier, cancel_event)

    async def execute_void(
        self,
        operation: Callable[[], Awaitable[Any]],
        cancel_event: asyncio.Event | None = None,
    ) -> None:
        """Await ``operation()`` until it stops raising retry-worthy errors.

        Success predicates are never evaluated in this mode.

        Args:
            operation: Zero-argument coroutine function to await.
            cancel_event: Optional event. Once set, no further attempt is
                started and a pending backoff sleep is interrupted.

        Raises:
            RetryCancelledError: If cancelled and ``raise_on_cancel`` is set.
            Exception: The exception of the last attempt, unchanged, if the
                loop ends on a failure.
        """
        await self._run(operation, VoidClassifier(self.config.should_handle), cancel_event)

    async def _run(
        self,
        operation: Callable[[], Awaitable[Any]],
        classifier: BaseOutcomeClassifier,
        cancel_event: asyncio.Event | None,
    ) -> Any:
        start_time = time.monotonic()
        retry_count = 0

        while True:
            outcome = await Outcome.capture_async(operation)
            attempts = retry_count + 1
            decision = decide_retry(
                outcome,
                classifier=classifier,
                strategy=self.strategy,
                config=self.config,
                retry_count=retry_count,
                start_time=start_time,
                cancel_event=cancel_event,
            )
            if not decision.retry:
                logger.debug(f"Attempt {attempts} is final ({decision.reason})")
                return finish(
                    outcome,
                    attempts=attempts,
                    config=self.config,
                    callbacks=self.callbacks,
                    start_time=start_time,
                    cancelled=decision.cancelled,
                )

            retry_count += 1
            self.callbacks.on_retry(outcome.error, retry_count)
            log_structured(
                logger,
                logging.DEBUG,
                f"Attempt {attempts} will be retried in {decision.delay:.2f}s "
                f"({decision.reason})",
                attempt=attempts,
                retry_count=retry_count,
                delay=decision.delay,
                reason=decision.reason,
            )

            if await asleep(decision.delay, cancel_event):
                logger.debug(f"Cancelled while waiting to retry attempt {attempts}")
                return finish(
                    outcome,
                    attempts=attempts,
                    config=self.config,
                    callbacks=self.callbacks,
                    start_time=start_time,
                    cancelled=True,
                )
