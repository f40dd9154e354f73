r"""Retry strategy for calculating backoff delays.

This module provides the RetryStrategy class that queries the
configured backoff provider and applies the delay cap.
"""

from __future__ import annotations

__all__ = ["RetryStrategy"]

import logging
from typing import TYPE_CHECKING

from aretry.backoff.constant import ConstantBackoff

if TYPE_CHECKING:
    from aretry.backoff.base import BackoffProvider

logger: logging.Logger = logging.getLogger(__name__)


class RetryStrategy:
    """Strategy for calculating the delay before the next attempt.

    Args:
        backoff: Backoff provider. Defaults to a zero ConstantBackoff.
        max_wait_time: Optional maximum wait time cap in seconds.

    Attributes:
        backoff: Backoff provider.
        max_wait_time: Optional maximum wait time cap in seconds.

    Example:
        ```pycon
        >>> from aretry.backoff import ExponentialBackoff
        >>> from aretry.retry.strategy import RetryStrategy
        >>> strategy = RetryStrategy(ExponentialBackoff(base_delay=1.0), max_wait_time=3.0)
        >>> strategy.next_delay(1)
        (1.0, True)
        >>> strategy.next_delay(5)  # Would be 16.0, but capped
        (3.0, True)

        ```
    """

    def __init__(
        self,
        backoff: BackoffProvider | None = None,
        max_wait_time: float | None = None,
    ) -> None:
        self.backoff: BackoffProvider = (
            backoff if backoff is not None else ConstantBackoff(delay=0.0)
        )
        self.max_wait_time = max_wait_time

    def next_delay(self, attempt: int) -> tuple[float, bool]:
        """Calculate the delay before the next attempt.

        Args:
            attempt: The number of the attempt that just completed
                (1-indexed).

        Returns:
            Tuple of (delay, continue). ``continue`` is ``False`` when the
            backoff provider asks to stop retrying.
        """
        delay, proceed = self.backoff(attempt)
        if not proceed:
            logger.debug(f"Backoff provider stopped retrying after attempt {attempt}")
            return (delay, False)

        if delay < 0:
            logger.debug(f"Clamping negative delay {delay:.2f}s to 0.00s")
            delay = 0.0

        if self.max_wait_time is not None and delay > self.max_wait_time:
            logger.debug(
                f"Capping delay from {delay:.2f}s to {self.max_wait_time:.2f}s "
                f"(max_wait_time={self.max_wait_time:.2f}s)"
            )
            delay = self.max_wait_time
        return (delay, True)
