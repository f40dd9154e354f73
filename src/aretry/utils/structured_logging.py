r"""Structured logging utilities for machine-readable log output.

The executors emit their retry decisions through ``log_structured``, so
each record carries fields such as ``attempt``, ``retry_count``,
``delay`` and ``reason`` as record extras. Nothing is printed unless the
application configures a handler: the JSON formatter below is opt-in.

Example:
    Enable structured logging for aretry:

    ```python
    import logging
    from aretry.utils.structured_logging import StructuredFormatter

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())

    logger = logging.getLogger("aretry")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    ```

    Tag every record of one execution with an identifier:

    ```python
    from aretry import execute_with_result
    from aretry.utils.structured_logging import clear_execution_id, set_execution_id

    set_execution_id("job-42")
    try:
        execute_with_result(fetch_report)
    finally:
        clear_execution_id()
    ```
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "clear_execution_id",
    "get_execution_id",
    "log_structured",
    "set_execution_id",
]

import contextvars
import json
import logging
import time
from typing import Any

# Context variable, so concurrent threads and tasks keep their own id
_execution_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "execution_id", default=None
)

# Attributes every LogRecord has; anything else was passed through `extra`
_RESERVED_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)


def get_execution_id() -> str | None:
    """Get the execution ID of the current context.

    Example:
        ```pycon
        >>> from aretry.utils.structured_logging import (
        ...     clear_execution_id,
        ...     get_execution_id,
        ...     set_execution_id,
        ... )
        >>> clear_execution_id()
        >>> get_execution_id() is None
        True
        >>> set_execution_id("job-1")
        >>> get_execution_id()
        'job-1'
        >>> clear_execution_id()

        ```
    """
    return _execution_id.get()


def set_execution_id(execution_id: str) -> None:
    """Set the execution ID for the current context.

    Args:
        execution_id: Identifier attached to every structured record
            (e.g. a job ID or a trace ID).
    """
    _execution_id.set(execution_id)


def clear_execution_id() -> None:
    """Clear the execution ID for the current context."""
    _execution_id.set(None)


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Standard fields in the JSON output:
        - timestamp: ISO 8601 timestamp (UTC, millisecond precision)
        - level: Log level name
        - logger: Logger name
        - message: Log message
        - execution_id: Optional execution ID
        - module, function, line: Origin of the record

    Fields passed through the ``extra`` parameter are copied as-is.

    Example:
        ```pycon
        >>> import json
        >>> import logging
        >>> from aretry.utils.structured_logging import StructuredFormatter
        >>> record = logging.LogRecord(
        ...     "aretry", logging.DEBUG, __file__, 1, "retrying", None, None
        ... )
        >>> record.retry_count = 2
        >>> data = json.loads(StructuredFormatter().format(record))
        >>> data["message"], data["retry_count"]
        ('retrying', 2)

        ```
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        execution_id = get_execution_id()
        if execution_id is not None:
            log_data["execution_id"] = execution_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_data[key] = value

        return json.dumps(log_data, default=str)

    def formatTime(  # noqa: N802
        self, record: logging.LogRecord, datefmt: str | None = None  # noqa: ARG002
    ) -> str:
        return (
            time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
            + f".{int(record.msecs):03d}Z"
        )


def log_structured(
    logger: logging.Logger,
    level: int,
    message: str,
    **extra: Any,
) -> None:
    """Log a message with structured data.

    Args:
        logger: Logger to use.
        level: Log level (e.g., logging.DEBUG).
        message: Log message.
        **extra: Additional structured fields to include in the record.
    """
    if logger.isEnabledFor(level):
        logger.log(level, message, extra=extra)
