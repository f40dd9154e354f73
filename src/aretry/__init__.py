r"""aretry - Configurable retry execution engine.

This package runs an operation that may fail, or return an unsatisfactory
result, and decides per attempt whether to retry, how long to wait and
when to give up. It is meant as a building block for network clients and
job runners that need resilience without hand-written retry loops.

Key Features:
    - Separate classification of raised exceptions and rejected values
    - Bounded retry budget (``max_retries``) and optional time budget
    - Pluggable backoff providers: Exponential, Linear, Fibonacci, Constant,
      jitter, or any callable returning ``(delay, continue)``
    - Cooperative cancellation with interruptible backoff sleeps
    - Callbacks for observability (on_retry, on_success, on_failure)
    - Sync and async executors sharing the same configuration

Example:
    ```pycon
    >>> from aretry import RetryConfig, execute_void
    >>> from aretry.predicates import retry_on_exception_types
    >>> calls = []
    >>> def send():
    ...     calls.append(1)
    ...     if len(calls) < 2:
    ...         raise TimeoutError
    ...
    >>> config = RetryConfig(
    ...     max_retries=3, should_handle=retry_on_exception_types(TimeoutError)
    ... )
    >>> execute_void(send, config=config)
    >>> len(calls)
    2

    ```
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_MAX_RETRIES",
    "AsyncRetryExecutor",
    "RetryCancelledError",
    "RetryConfig",
    "RetryError",
    "RetryExecutor",
    "__version__",
    "default_retry_config",
    "execute_void",
    "execute_void_async",
    "execute_with_result",
    "execute_with_result_async",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.core.config import DEFAULT_MAX_RETRIES, RetryConfig, default_retry_config
from aretry.exceptions import RetryCancelledError, RetryError
from aretry.execute import execute_void, execute_with_result
from aretry.execute_async import execute_void_async, execute_with_result_async
from aretry.retry.executor import RetryExecutor
from aretry.retry.executor_async import AsyncRetryExecutor

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
