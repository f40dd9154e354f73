r"""Retry package implementing class-based composition pattern.

This package provides the retry orchestrator and the components it
composes.

Public API:
    - Outcome: Result of a single attempt
    - ResultClassifier / VoidClassifier: Logic for deciding whether to retry
    - RetryStrategy: Strategy for calculating retry delays
    - CallbackManager: Manager for callback invocations
    - RetryExecutor: Synchronous retry executor
    - AsyncRetryExecutor: Asynchronous retry executor
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "BaseOutcomeClassifier",
    "CallbackManager",
    "Outcome",
    "ResultClassifier",
    "RetryExecutor",
    "RetryStrategy",
    "VoidClassifier",
]

from aretry.retry.classifier import BaseOutcomeClassifier, ResultClassifier, VoidClassifier
from aretry.retry.executor import RetryExecutor
from aretry.retry.executor_async import AsyncRetryExecutor
from aretry.retry.manager import CallbackManager
from aretry.retry.outcome import Outcome
from aretry.retry.strategy import RetryStrategy
