r"""Synchronous retry executor.

This module provides the RetryExecutor class that runs a callable with
automatic retry logic, backoff and cooperative cancellation.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import logging
import time
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from aretry.core.config import RetryConfig
from aretry.retry.classifier import ResultClassifier, VoidClassifier
from aretry.retry.executor_core import decide_retry, finish
from aretry.retry.manager import CallbackManager
from aretry.retry.outcome import Outcome
from aretry.retry.strategy import RetryStrategy
from aretry.utils.sleep import sleep
from aretry.utils.structured_logging import log_structured

if TYPE_CHECKING:
    import threading
    from collections.abc import Callable

    from aretry.retry.classifier import BaseOutcomeClassifier

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class RetryExecutor(Generic[T]):
    """Executes a callable with automatic retry logic.

    The executor orchestrates the following components:
    - ResultClassifier / VoidClassifier: Decide whether an outcome is
      retry-worthy
    - RetryStrategy: Calculates the delay between attempts
    - CallbackManager: Invokes user-defined callbacks at lifecycle events

    The executor keeps no per-execution state: every call owns its own
    attempt counter, so one executor can be shared between threads.

    Args:
        config: Retry configuration. Defaults to a fresh
            ``RetryConfig()``.

    Attributes:
        config: Retry configuration.
        strategy: Strategy for calculating retry delays.
        callbacks: Manager for invoking callbacks.

    Example:
        ```pycon
        >>> from aretry.core.config import RetryConfig
        >>> from aretry.predicates import never_retry
        >>> from aretry.retry import RetryExecutor
        >>> attempts = []
        >>> def flaky():
        ...     attempts.append(1)
        ...     if len(attempts) < 3:
        ...         raise ConnectionError("unreachable")
        ...     return "payload"
        ...
        >>> executor = RetryExecutor(RetryConfig(max_retries=5, success_predicates=(never_retry,)))
        >>> executor.execute(flaky)
        'payload'
        >>> len(attempts)
        3

        ```
    """

    def __init__(self, config: RetryConfig[T] | None = None) -> None:
        self.config: RetryConfig[T] = config if config is not None else RetryConfig()
        self.strategy: RetryStrategy = RetryStrategy(
            self.config.backoff, self.config.max_wait_time
        )
        self.callbacks: CallbackManager = CallbackManager(self.config)

    def execute(
        self,
        operation: Callable[[], T],
        cancel_event: threading.Event | None = None,
    ) -> T:
        """Run ``operation`` until its outcome is acceptable.

        Successful values are validated with the configured success
        predicates.

        Args:
            operation: Zero-argument callable to run.
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
        return self._run(operation, classifier, cancel_event)

    def execute_void(
        self,
        operation: Callable[[], Any],
        cancel_event: threading.Event | None = None,
    ) -> None:
        """Run ``operation`` until it stops raising retry-worthy errors.

        The return value of ``operation`` is ignored and success
        predicates are never evaluated: any attempt that does not raise
        ends the loop.

        Args:
            operation: Zero-argument callable to run.
            cancel_event: Optional event. Once set, no further attempt is
                started and a pending backoff sleep is interrupted.

        Raises:
            RetryCancelledError: If cancelled and ``raise_on_cancel`` is set.
            Exception: The exception of the last attempt, unchanged, if the
                loop ends on a failure.
        """
        self._run(operation, VoidClassifier(self.config.should_handle), cancel_event)

    def _run(
        self,
        operation: Callable[[], Any],
        classifier: BaseOutcomeClassifier,
        cancel_event: threading.Event | None,
    ) -> Any:
        start_time = time.monotonic()
        retry_count = 0

        while True:
            outcome = Outcome.capture(operation)
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

            if sleep(decision.delay, cancel_event):
                logger.debug(f"Cancelled while waiting to retry attempt {attempts}")
                return finish(
                    outcome,
                    attempts=attempts,
                    config=self.config,
                    callbacks=self.callbacks,
                    start_time=start_time,
                    cancelled=True,
                )
