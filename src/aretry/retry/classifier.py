r"""Outcome classification for deciding whether to retry.

This module provides the classifiers used by the executors. The
value-returning mode validates successful values against the configured
success predicates, while the void mode treats every success as final.
Both modes share the same handling of failed attempts.
"""

from __future__ import annotations

__all__ = ["BaseOutcomeClassifier", "ResultClassifier", "VoidClassifier"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from aretry.retry.outcome import Outcome

T = TypeVar("T")


class BaseOutcomeClassifier(ABC):
    """Decides whether an attempt outcome is retry-worthy.

    Args:
        should_handle: Predicate over the exception of a failed attempt.
    """

    def __init__(self, should_handle: Callable[[Exception], bool]) -> None:
        self.should_handle = should_handle

    def classify(self, outcome: Outcome[Any]) -> tuple[bool, str]:
        """Determine if an outcome should trigger a retry.

        Args:
            outcome: The outcome of the last attempt.

        Returns:
            Tuple of (should_retry, reason).
        """
        if outcome.is_failure:
            return self.classify_error(outcome.error)  # type: ignore[arg-type]
        return self.classify_value(outcome.value)

    def classify_error(self, error: Exception) -> tuple[bool, str]:
        """Determine if an exception should trigger a retry.

        Args:
            error: The exception raised by the attempt.

        Returns:
            Tuple of (should_retry, reason).
        """
        if self.should_handle(error):
            return (True, type(error).__name__)
        return (False, f"{type(error).__name__} not handled")

    @abstractmethod
    def classify_value(self, value: Any) -> tuple[bool, str]:
        """Determine if a successful value should trigger a retry.

        Args:
            value: The value returned by the attempt.

        Returns:
            Tuple of (should_retry, reason).
        """


class ResultClassifier(BaseOutcomeClassifier, Generic[T]):
    """Classifier for operations whose return value is validated.

    A success is retry-worthy if at least one success predicate returns
    ``True`` for its value. Predicates run in order and evaluation stops
    at the first ``True``.

    Args:
        should_handle: Predicate over the exception of a failed attempt.
        success_predicates: Predicates over the value of a successful
            attempt.

    Example:
        ```pycon
        >>> from aretry.predicates import always_retry, retry_if_result_is_none
        >>> from aretry.retry.classifier import ResultClassifier
        >>> from aretry.retry.outcome import Outcome
        >>> classifier = ResultClassifier(always_retry, (retry_if_result_is_none,))
        >>> classifier.classify(Outcome.success(None))
        (True, 'success predicate')
        >>> classifier.classify(Outcome.success(1))
        (False, 'accepted')
        >>> classifier.classify(Outcome.failure(TimeoutError()))
        (True, 'TimeoutError')

        ```
    """

    def __init__(
        self,
        should_handle: Callable[[Exception], bool],
        success_predicates: Iterable[Callable[[T], bool]],
    ) -> None:
        super().__init__(should_handle)
        self.success_predicates = tuple(success_predicates)

    def classify_value(self, value: T) -> tuple[bool, str]:
        for predicate in self.success_predicates:
            if predicate(value):
                return (True, "success predicate")
        return (False, "accepted")


class VoidClassifier(BaseOutcomeClassifier):
    """Classifier for operations without a meaningful return value.

    A success is always final: success predicates are never evaluated in
    this mode.

    Example:
        ```pycon
        >>> from aretry.predicates import always_retry
        >>> from aretry.retry.classifier import VoidClassifier
        >>> from aretry.retry.outcome import Outcome
        >>> VoidClassifier(always_retry).classify(Outcome.success(None))
        (False, 'success')

        ```
    """

    def classify_value(self, value: Any) -> tuple[bool, str]:  # noqa: ARG002
        return (False, "success")
