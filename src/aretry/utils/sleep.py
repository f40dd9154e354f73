r"""Cancellation-aware sleep helpers.

The backoff sleep is the only suspension point of a retry loop. Both
helpers race the delay against the cancellation event so that a cancelled
loop does not wait out a long backoff.
"""

from __future__ import annotations

__all__ = ["asleep", "is_cancelled", "sleep"]

import asyncio
import time
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import threading


def is_cancelled(cancel_event: threading.Event | asyncio.Event | None) -> bool:
    """Return ``True`` if the cancellation event is set.

    Example:
        ```pycon
        >>> import threading
        >>> from aretry.utils.sleep import is_cancelled
        >>> event = threading.Event()
        >>> is_cancelled(event)
        False
        >>> event.set()
        >>> is_cancelled(event)
        True
        >>> is_cancelled(None)
        False

        ```
    """
    return cancel_event is not None and cancel_event.is_set()


def sleep(delay: float, cancel_event: threading.Event | None = None) -> bool:
    """Block for ``delay`` seconds unless cancelled first.

    A zero delay still calls ``time.sleep(0)`` so that other threads get a
    chance to run.

    Args:
        delay: The delay in seconds.
        cancel_event: Optional event interrupting the sleep when set.

    Returns:
        ``True`` if the event was set when the sleep ended.
    """
    if cancel_event is None or delay <= 0:
        time.sleep(max(delay, 0.0))
        return is_cancelled(cancel_event)
    return cancel_event.wait(delay)


async def asleep(delay: float, cancel_event: asyncio.Event | None = None) -> bool:
    """Suspend for ``delay`` seconds unless cancelled first.

    A zero delay still awaits ``asyncio.sleep(0)`` so that other tasks get
    a chance to run.

    Args:
        delay: The delay in seconds.
        cancel_event: Optional event interrupting the sleep when set.

    Returns:
        ``True`` if the event was set when the sleep ended.
    """
    if cancel_event is None or delay <= 0:
        await asyncio.sleep(max(delay, 0.0))
        return is_cancelled(cancel_event)
    try:
        await asyncio.wait_for(cancel_event.wait(), timeout=delay)
    except asyncio.TimeoutError:
        return False
    return True
