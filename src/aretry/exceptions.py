r"""Exceptions raised by the retry engine itself.

The engine never wraps the exceptions raised by the retried operation:
they are re-raised unchanged when the retry loop gives up. The classes
below only cover conditions produced by the engine.
"""

from __future__ import annotations

__all__ = ["RetryCancelledError", "RetryError"]

from typing import Any


class RetryError(Exception):
    """Base class for errors raised by the retry engine."""


class RetryCancelledError(RetryError):
    """Raised when a retry loop is stopped by its cancellation event.

    It is only raised when the configuration opts in with
    ``raise_on_cancel=True``. Otherwise a cancelled loop finishes with the
    outcome of the last attempt.

    Args:
        attempts: The number of attempts that were made before the
            cancellation was observed.
        last_error: The exception raised by the last attempt, if any.
        last_value: The value returned by the last attempt, if it
            succeeded.
        message: Optional custom message.

    Example:
        ```pycon
        >>> from aretry.exceptions import RetryCancelledError
        >>> error = RetryCancelledError(attempts=3, last_error=ValueError("boom"))
        >>> error.attempts
        3
        >>> str(error)
        'retry loop cancelled after 3 attempt(s): boom'

        ```
    """

    def __init__(
        self,
        attempts: int,
        last_error: Exception | None = None,
        last_value: Any = None,
        message: str | None = None,
    ) -> None:
        if message is None:
            message = f"retry loop cancelled after {attempts} attempt(s)"
            if last_error is not None:
                message = f"{message}: {last_error}"
        super().__init__(message)
        self.attempts = attempts
        self.last_error = last_error
        self.last_value = last_value
