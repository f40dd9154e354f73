r"""Utility functions for the retry executors.

This package provides the cancellation-aware sleep helpers and the
opt-in structured logging tools.
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "asleep",
    "clear_execution_id",
    "get_execution_id",
    "is_cancelled",
    "log_structured",
    "set_execution_id",
    "sleep",
]

from aretry.utils.sleep import asleep, is_cancelled, sleep
from aretry.utils.structured_logging import (
    StructuredFormatter,
    clear_execution_id,
    get_execution_id,
    log_structured,
    set_execution_id,
)
