r"""Constant backoff strategy."""

from __future__ import annotations

__all__ = ["ConstantBackoff"]

from aretry.backoff.base import BaseBackoffStrategy


class ConstantBackoff(BaseBackoffStrategy):
    """Constant/fixed backoff strategy.

    Returns the same delay after every attempt, regardless of the attempt number.

    With ``delay=0.0`` this is the default backoff of ``RetryConfig``: retries
    happen back to back and only ``max_retries`` ends the loop.

    Args:
        delay: The fixed delay in seconds to use between attempts (default: 1.0).

    Example:
        ```pycon
        >>> from aretry.backoff import ConstantBackoff
        >>> backoff = ConstantBackoff(delay=2.5)
        >>> backoff.calculate(1)
        2.5
        >>> backoff.calculate(10)
        2.5
        >>> backoff(3)
        (2.5, True)

        ```
    """

    def __init__(self, delay: float = 1.0) -> None:
        if delay < 0:
            msg = f"delay must be non-negative, got {delay}"
            raise ValueError(msg)

        self.delay = delay

    def calculate(self, attempt: int) -> float:  # noqa: ARG002
        """Calculate constant backoff delay.

        Args:
            attempt: The number of the completed attempt (1-indexed, unused).

        Returns:
            The fixed delay value.
        """
        return self.delay
