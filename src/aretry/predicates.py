r"""Stock predicates for error handling and success validation.

Two kinds of predicates are used by ``RetryConfig``:

- ``should_handle`` receives the exception raised by an attempt and
  returns ``True`` if the attempt should be retried.
- each entry of ``success_predicates`` receives the value returned by a
  successful attempt and returns ``True`` if the value is still
  unacceptable and the attempt should be retried.

Example:
    ```pycon
    >>> from aretry.predicates import retry_on_exception_types
    >>> should_handle = retry_on_exception_types(TimeoutError, ConnectionError)
    >>> should_handle(TimeoutError())
    True
    >>> should_handle(KeyError("missing"))
    False

    ```
"""

from __future__ import annotations

__all__ = [
    "always_retry",
    "never_retry",
    "retry_if_result_is_none",
    "retry_on_exception_types",
]

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable


def always_retry(value: Any) -> bool:  # noqa: ARG001
    """Predicate that always asks for a retry.

    This is the default for both ``should_handle`` and
    ``success_predicates``.
    """
    return True


def never_retry(value: Any) -> bool:  # noqa: ARG001
    """Predicate that never asks for a retry.

    Use ``success_predicates=(never_retry,)`` to accept any successful
    value.
    """
    return False


def retry_if_result_is_none(value: Any) -> bool:
    """Success predicate that rejects ``None`` results.

    Example:
        ```pycon
        >>> from aretry.predicates import retry_if_result_is_none
        >>> retry_if_result_is_none(None)
        True
        >>> retry_if_result_is_none(0)
        False

        ```
    """
    return value is None


def retry_on_exception_types(*types: type[Exception]) -> Callable[[Exception], bool]:
    """Build a ``should_handle`` predicate from exception types.

    Args:
        *types: The exception types that are retry-worthy. Subclasses
            match too.

    Returns:
        A predicate returning ``True`` for instances of ``types``.

    Raises:
        ValueError: If no exception type is given.
    """
    if not types:
        msg = "at least one exception type is required"
        raise ValueError(msg)

    def should_handle(error: Exception) -> bool:
        return isinstance(error, types)

    return should_handle
