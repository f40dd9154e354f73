r"""Backoff providers for retry delays.

A backoff provider is any callable mapping the 1-based attempt index to
a ``(delay, continue)`` pair. This package provides exponential, linear,
Fibonacci and constant strategies, plus wrappers adding jitter or an
attempt limit.
"""

from __future__ import annotations

__all__ = [
    "AttemptLimitBackoff",
    "BackoffProvider",
    "BaseBackoffStrategy",
    "ConstantBackoff",
    "ExponentialBackoff",
    "FibonacciBackoff",
    "JitterBackoff",
    "LinearBackoff",
]

from aretry.backoff.base import BackoffProvider, BaseBackoffStrategy
from aretry.backoff.constant import ConstantBackoff
from aretry.backoff.exponential import ExponentialBackoff
from aretry.backoff.fibonacci import FibonacciBackoff
from aretry.backoff.jitter import JitterBackoff
from aretry.backoff.limit import AttemptLimitBackoff
from aretry.backoff.linear import LinearBackoff
