r"""Backoff provider that stops the retry loop after a number of attempts."""

from __future__ import annotations

__all__ = ["AttemptLimitBackoff"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aretry.backoff.base import BackoffProvider


class AttemptLimitBackoff:
    """Stop retrying once a number of attempts has been made.

    The wrapped provider computes the delay. Once ``attempt`` reaches
    ``max_attempts`` the provider answers ``continue=False``, which ends the
    loop even if ``max_retries`` would allow more attempts.

    Args:
        backoff: The wrapped backoff provider.
        max_attempts: The number of attempts after which the loop stops.

    Example:
        ```pycon
        >>> from aretry.backoff import AttemptLimitBackoff, ConstantBackoff
        >>> backoff = AttemptLimitBackoff(ConstantBackoff(delay=0.5), max_attempts=2)
        >>> backoff(1)
        (0.5, True)
        >>> backoff(2)
        (0.5, False)

        ```
    """

    def __init__(self, backoff: BackoffProvider, max_attempts: int) -> None:
        if max_attempts < 1:
            msg = f"max_attempts must be >= 1, got {max_attempts}"
            raise ValueError(msg)

        self.backoff = backoff
        self.max_attempts = max_attempts

    def __call__(self, attempt: int) -> tuple[float, bool]:
        delay, proceed = self.backoff(attempt)
        return delay, proceed and attempt < self.max_attempts
