r"""Unit tests for AttemptLimitBackoff provider."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from aretry.backoff import AttemptLimitBackoff, ConstantBackoff


def test_attempt_limit_backoff_stops_at_limit() -> None:
    """Test the provider stops once the attempt limit is reached."""
    backoff = AttemptLimitBackoff(ConstantBackoff(delay=0.5), max_attempts=3)
    assert backoff(1) == (0.5, True)
    assert backoff(2) == (0.5, True)
    assert backoff(3) == (0.5, False)
    assert backoff(4) == (0.5, False)


def test_attempt_limit_backoff_forwards_stop() -> None:
    """Test a stop from the wrapped provider is kept."""
    backoff = AttemptLimitBackoff(Mock(return_value=(1.0, False)), max_attempts=10)
    assert backoff(1) == (1.0, False)


def test_attempt_limit_backoff_invalid_limit() -> None:
    """Test that max_attempts < 1 raises ValueError."""
    with pytest.raises(ValueError, match=r"max_attempts must be >= 1"):
        AttemptLimitBackoff(ConstantBackoff(), max_attempts=0)
