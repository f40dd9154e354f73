r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BackoffProvider", "BaseBackoffStrategy"]

from abc import ABC, abstractmethod
from collections.abc import Callable

# A backoff provider maps the 1-based attempt index to (delay, continue).
BackoffProvider = Callable[[int], tuple[float, bool]]


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy determines how long to wait before retrying a
    failed attempt based on the attempt number. Calling a strategy turns
    it into a backoff provider that never stops the loop on its own, so
    termination is left to ``max_retries``.
    """

    @abstractmethod
    def calculate(self, attempt: int) -> float:
        """Calculate the backoff delay after a given attempt.

        Args:
            attempt: The number of the attempt that just completed
                (1-indexed). For example, attempt=1 is computed before the
                first retry, attempt=2 before the second retry, etc.

        Returns:
            The calculated delay in seconds before the next attempt.
        """

    def __call__(self, attempt: int) -> tuple[float, bool]:
        return self.calculate(attempt), True
