r"""Shared core logic for retry executors.

This module provides the decision and termination helpers used by both
the synchronous and asynchronous executors, so that the two loops only
differ in how they invoke the operation and how they sleep.
"""

from __future__ import annotations

__all__ = [
    "RetryDecision",
    "decide_retry",
    "finish",
    "time_budget_exceeded",
]

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from aretry.exceptions import RetryCancelledError
from aretry.utils.sleep import is_cancelled

if TYPE_CHECKING:
    import asyncio
    import threading

    from aretry.core.config import RetryConfig
    from aretry.retry.classifier import BaseOutcomeClassifier
    from aretry.retry.manager import CallbackManager
    from aretry.retry.outcome import Outcome
    from aretry.retry.strategy import RetryStrategy

logger: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RetryDecision:
    """Verdict reached after one attempt.

    Attributes:
        retry: Whether another attempt should be made.
        reason: Human-readable reason, used in debug logs.
        delay: Delay in seconds before the next attempt.
        cancelled: Whether the loop stops because of cancellation.
    """

    retry: bool
    reason: str
    delay: float = 0.0
    cancelled: bool = False


def time_budget_exceeded(max_total_time: float | None, start_time: float) -> bool:
    """Check if the total time budget is spent.

    Args:
        max_total_time: Optional time budget in seconds.
        start_time: Monotonic timestamp when the loop started.

    Returns:
        ``True`` if a budget is set and the elapsed time reached it.
    """
    if max_total_time is None:
        return False
    return time.monotonic() - start_time >= max_total_time


def decide_retry(
    outcome: Outcome[Any],
    *,
    classifier: BaseOutcomeClassifier,
    strategy: RetryStrategy,
    config: RetryConfig[Any],
    retry_count: int,
    start_time: float,
    cancel_event: threading.Event | asyncio.Event | None,
) -> RetryDecision:
    """Decide whether the loop should make another attempt.

    The checks run in a fixed order: classification, retry budget,
    cancellation, time budget and finally the backoff provider. The
    backoff provider is only queried when every earlier check allows a
    retry.

    Args:
        outcome: The outcome of the last attempt.
        classifier: Classifier of the current execution mode.
        strategy: Strategy computing the delay.
        config: The retry configuration.
        retry_count: Number of retries already taken.
        start_time: Monotonic timestamp when the loop started.
        cancel_event: Optional cancellation event.

    Returns:
        The retry decision.
    """
    should_retry, reason = classifier.classify(outcome)
    if not should_retry:
        return RetryDecision(retry=False, reason=reason)
    if retry_count >= config.max_retries:
        return RetryDecision(retry=False, reason="max retries exhausted")
    if is_cancelled(cancel_event):
        return RetryDecision(retry=False, reason="cancelled", cancelled=True)
    if time_budget_exceeded(config.max_total_time, start_time):
        return RetryDecision(retry=False, reason="max_total_time exceeded")

    delay, proceed = strategy.next_delay(retry_count + 1)
    if not proceed:
        return RetryDecision(retry=False, reason="stopped by backoff provider")
    return RetryDecision(retry=True, reason=reason, delay=delay)


def finish(
    outcome: Outcome[Any],
    *,
    attempts: int,
    config: RetryConfig[Any],
    callbacks: CallbackManager,
    start_time: float,
    cancelled: bool = False,
) -> Any:
    """End the loop with the outcome of the last attempt.

    A failed outcome re-raises the exception of the last attempt
    unchanged. A successful outcome returns its value, even if a success
    predicate still rejected it.

    Args:
        outcome: The outcome of the last attempt.
        attempts: The number of attempts made.
        config: The retry configuration.
        callbacks: Callback manager.
        start_time: Monotonic timestamp when the loop started.
        cancelled: Whether the loop ends because of cancellation.

    Returns:
        The value of the last attempt.

    Raises:
        RetryCancelledError: If the loop was cancelled and the
            configuration sets ``raise_on_cancel``.
        Exception: The exception of the last attempt, if it failed.
    """
    if cancelled and config.raise_on_cancel:
        cancel_error = RetryCancelledError(
            attempts=attempts, last_error=outcome.error, last_value=outcome.value
        )
        callbacks.on_failure(attempts, cancel_error, start_time)
        raise cancel_error from outcome.error

    if outcome.is_failure:
        error = outcome.error
        logger.debug(
            f"Giving up after {attempts} attempt(s): {type(error).__name__}: {error}"
        )
        callbacks.on_failure(attempts, error, start_time)
        raise error

    logger.debug(f"Finished after {attempts} attempt(s)")
    callbacks.on_success(attempts, outcome.value, start_time)
    return outcome.value
