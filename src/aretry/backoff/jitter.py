r"""Random jitter applied on top of another backoff provider."""

from __future__ import annotations

__all__ = ["JitterBackoff"]

import logging
import random
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aretry.backoff.base import BackoffProvider

logger: logging.Logger = logging.getLogger(__name__)


class JitterBackoff:
    """Backoff provider adding random jitter to another provider.

    The jitter is calculated as ``random.uniform(0, jitter_factor) * delay``
    and ADDED to the delay of the wrapped provider. The ``continue`` flag
    of the wrapped provider is forwarded unchanged.

    Args:
        backoff: The wrapped backoff provider.
        jitter_factor: Factor for adding random jitter. Recommended value is
            0.1 to add up to 10% additional random delay.

    Example:
        ```pycon
        >>> from aretry.backoff import ExponentialBackoff, JitterBackoff
        >>> backoff = JitterBackoff(ExponentialBackoff(base_delay=1.0), jitter_factor=0.1)
        >>> delay, proceed = backoff(1)
        >>> 1.0 <= delay <= 1.1
        True
        >>> proceed
        True

        ```
    """

    def __init__(self, backoff: BackoffProvider, jitter_factor: float = 0.1) -> None:
        if jitter_factor < 0:
            msg = f"jitter_factor must be >= 0, got {jitter_factor}"
            raise ValueError(msg)

        self.backoff = backoff
        self.jitter_factor = jitter_factor

    def __call__(self, attempt: int) -> tuple[float, bool]:
        delay, proceed = self.backoff(attempt)
        if self.jitter_factor == 0 or not proceed:
            return delay, proceed

        jitter = random.uniform(0, self.jitter_factor) * delay  # noqa: S311
        logger.debug(f"Adding {jitter:.2f}s of jitter to a {delay:.2f}s delay")
        return delay + jitter, proceed
