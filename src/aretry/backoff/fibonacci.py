r"""Fibonacci backoff strategy."""

from __future__ import annotations

__all__ = ["FibonacciBackoff"]

import math

from aretry.backoff.base import BaseBackoffStrategy


class FibonacciBackoff(BaseBackoffStrategy):
    """Fibonacci backoff strategy.

    Calculates delay as: base_delay * fibonacci(attempt), with optional
    max_delay cap.

    The Fibonacci sequence (1, 1, 2, 3, 5, 8, 13, ...) grows more gradually
    than exponential backoff.

    Args:
        base_delay: The base delay in seconds (default: 1.0).
        max_delay: Optional maximum delay cap in seconds.

    Example:
        ```pycon
        >>> from aretry.backoff import FibonacciBackoff
        >>> backoff = FibonacciBackoff(base_delay=1.0)
        >>> [backoff.calculate(attempt) for attempt in range(1, 7)]
        [1.0, 1.0, 2.0, 3.0, 5.0, 8.0]
        >>> backoff = FibonacciBackoff(base_delay=1.0, max_delay=10.0)
        >>> backoff.calculate(11)  # fib(11) = 89, but capped
        10.0

        ```
    """

    def __init__(self, base_delay: float = 1.0, max_delay: float | None = None) -> None:
        if base_delay < 0:
            msg = f"base_delay must be non-negative, got {base_delay}"
            raise ValueError(msg)
        if max_delay is not None and max_delay <= 0:
            msg = f"max_delay must be positive if specified, got {max_delay}"
            raise ValueError(msg)

        self.base_delay = base_delay
        self.max_delay = max_delay

    @staticmethod
    def _fibonacci(n: int) -> int:
        """Calculate the nth Fibonacci number (1-indexed)."""
        if n <= 0:
            return 0
        if n <= 2:
            return 1

        a, b = 1, 1
        for _ in range(n - 2):
            a, b = b, a + b
        return b

    def calculate(self, attempt: int) -> float:
        """Calculate Fibonacci backoff delay.

        Args:
            attempt: The number of the completed attempt (1-indexed).

        Returns:
            The calculated delay: base_delay * fibonacci(attempt), capped at
            max_delay if set. Delays too large for a float become
            ``math.inf`` before the cap is applied.
        """
        if self.base_delay == 0:
            return 0.0
        try:
            delay = self.base_delay * self._fibonacci(max(attempt, 1))
        except OverflowError:
            delay = math.inf
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return float(delay)
