r"""Configuration dataclass and defaults for retry executions.

This module provides configuration constants and the frozen
``RetryConfig`` dataclass shared by the synchronous and asynchronous
executors. A configuration is read-only once built, so the same instance
can drive any number of concurrent executions.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_DELAY",
    "DEFAULT_MAX_RETRIES",
    "RetryConfig",
    "default_retry_config",
]

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from aretry.backoff.constant import ConstantBackoff
from aretry.core.validation import validate_retry_params
from aretry.predicates import always_retry

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.backoff.base import BackoffProvider
    from aretry.callbacks import FailureInfo, SuccessInfo

T = TypeVar("T")

# Default maximum number of retries
# Total attempts = max_retries + 1 (initial attempt)
DEFAULT_MAX_RETRIES = 1

# Default delay in seconds between two attempts
# A zero delay still yields to other threads or tasks before retrying
DEFAULT_DELAY = 0.0


def _default_backoff() -> ConstantBackoff:
    return ConstantBackoff(delay=DEFAULT_DELAY)


@dataclass(frozen=True)
class RetryConfig(Generic[T]):
    """Configuration for retry behavior.

    The defaults are deliberately aggressive: every exception and every
    successful value is retry-worthy, so a plain ``RetryConfig()`` runs
    the operation ``max_retries + 1`` times unless it raises a
    non-handled exception. Supply ``success_predicates`` that return
    ``False`` for acceptable values to stop on success.

    Args:
        should_handle: Predicate over the exception raised by an attempt.
            Returns ``True`` if the attempt should be retried.
        success_predicates: Predicates over the value returned by a
            successful attempt. The attempt is retried if any of them
            returns ``True``. An empty tuple accepts every value. Only the
            value-returning execution mode evaluates them.
        max_retries: Maximum number of retries. Must be >= 0.
        on_retry: Optional callback invoked before each retry with the
            exception being retried (``None`` for a rejected value) and the
            1-based retry counter. It fires before the backoff sleep, so a
            cancellation during that sleep ends the loop without making the
            announced retry.
        backoff: Backoff provider mapping the 1-based attempt index to a
            ``(delay, continue)`` pair.
        max_total_time: Optional maximum total time budget in seconds. No
            retry is started once the budget is spent. Must be > 0 if
            provided.
        max_wait_time: Optional maximum delay in seconds between two
            attempts. Must be > 0 if provided.
        raise_on_cancel: If ``True``, a cancelled loop raises
            ``RetryCancelledError`` instead of finishing with the outcome of
            its last attempt.
        on_success: Optional callback invoked when the loop finishes with a
            successful attempt.
        on_failure: Optional callback invoked when the loop finishes with a
            failed attempt.

    Example:
        ```pycon
        >>> from aretry.core.config import RetryConfig
        >>> config = RetryConfig()  # Use defaults
        >>> config.max_retries
        1
        >>> config = RetryConfig(max_retries=5)
        >>> merged = config.merge(max_retries=10)  # Override specific parameters
        >>> merged.max_retries
        10
        >>> config.max_retries  # Original unchanged
        5

        ```
    """

    should_handle: Callable[[Exception], bool] = always_retry
    success_predicates: tuple[Callable[[T], bool], ...] = (always_retry,)
    max_retries: int = DEFAULT_MAX_RETRIES
    on_retry: Callable[[Exception | None, int], None] | None = None
    backoff: BackoffProvider = field(default_factory=_default_backoff)
    max_total_time: float | None = None
    max_wait_time: float | None = None
    raise_on_cancel: bool = False
    on_success: Callable[[SuccessInfo], None] | None = None
    on_failure: Callable[[FailureInfo], None] | None = None

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            ValueError: If any parameter fails validation.
            TypeError: If a predicate or the backoff provider is not
                callable.
        """
        validate_retry_params(
            max_retries=self.max_retries,
            max_total_time=self.max_total_time,
            max_wait_time=self.max_wait_time,
        )
        if not callable(self.should_handle):
            msg = f"should_handle must be callable, got {self.should_handle!r}"
            raise TypeError(msg)
        if not callable(self.backoff):
            msg = f"backoff must be callable, got {self.backoff!r}"
            raise TypeError(msg)
        # Lists are accepted for convenience but stored as a tuple.
        object.__setattr__(self, "success_predicates", tuple(self.success_predicates))

    def merge(self, **overrides: Any) -> RetryConfig[T]:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new RetryConfig instance with overrides applied.

        Example:
            ```pycon
            >>> from aretry.core.config import RetryConfig
            >>> config = RetryConfig(max_retries=3)
            >>> config.merge(max_retries=5, max_wait_time=None).max_retries
            5

            ```
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)


def default_retry_config(**overrides: Any) -> RetryConfig[Any]:
    """Build a fresh default configuration.

    Every call returns a new instance, so customizing the result never
    leaks into other callers.

    Args:
        **overrides: Keyword arguments for parameters to override.
            ``None`` values are ignored.

    Returns:
        A new RetryConfig.

    Example:
        ```pycon
        >>> from aretry.core.config import default_retry_config
        >>> default_retry_config().max_retries
        1
        >>> default_retry_config(max_retries=4).max_retries
        4
        >>> default_retry_config() is default_retry_config()
        False

        ```
    """
    return RetryConfig().merge(**overrides)
