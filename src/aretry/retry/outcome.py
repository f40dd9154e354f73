r"""Outcome of a single attempt.

An outcome is either a success carrying the value returned by the
operation, or a failure carrying the exception it raised. Outcomes live
for one iteration of the retry loop only.
"""

from __future__ import annotations

__all__ = ["Outcome"]

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Result of one invocation of the retried operation.

    Attributes:
        value: The value returned by a successful attempt.
        error: The exception raised by a failed attempt.

    Example:
        ```pycon
        >>> from aretry.retry.outcome import Outcome
        >>> Outcome.capture(lambda: 42)
        Outcome(value=42, error=None)
        >>> outcome = Outcome.capture(lambda: 1 / 0)
        >>> outcome.is_failure
        True
        >>> type(outcome.error).__name__
        'ZeroDivisionError'

        ```
    """

    value: T | None = None
    error: Exception | None = None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    @classmethod
    def success(cls, value: T) -> Outcome[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: Exception) -> Outcome[T]:
        return cls(error=error)

    @classmethod
    def capture(cls, operation: Callable[[], T]) -> Outcome[T]:
        """Run ``operation`` once and wrap its result.

        Only ``Exception`` subclasses are captured. ``KeyboardInterrupt``
        and ``SystemExit`` propagate to the caller.
        """
        try:
            return cls.success(operation())
        except Exception as exc:  # noqa: BLE001
            return cls.failure(exc)

    @classmethod
    async def capture_async(cls, operation: Callable[[], Awaitable[T]]) -> Outcome[T]:
        """Await ``operation()`` once and wrap its result.

        ``asyncio.CancelledError`` is not an ``Exception`` subclass, so
        cancelling the enclosing task is never mistaken for a failed
        attempt.
        """
        try:
            return cls.success(await operation())
        except Exception as exc:  # noqa: BLE001
            return cls.failure(exc)
