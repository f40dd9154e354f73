r"""Unit tests for FibonacciBackoff strategy."""

from __future__ import annotations

import math

import pytest

from aretry.backoff.fibonacci import FibonacciBackoff


def test_fibonacci_backoff_sequence() -> None:
    """Test Fibonacci backoff follows the Fibonacci sequence."""
    backoff = FibonacciBackoff(base_delay=1.0)
    assert [backoff.calculate(attempt) for attempt in range(1, 9)] == [
        1.0,
        1.0,
        2.0,
        3.0,
        5.0,
        8.0,
        13.0,
        21.0,
    ]


def test_fibonacci_backoff_base_delay() -> None:
    """Test base_delay scales the sequence."""
    backoff = FibonacciBackoff(base_delay=0.5)
    assert backoff.calculate(5) == 2.5
    assert backoff(6) == (4.0, True)


def test_fibonacci_backoff_max_delay() -> None:
    """Test max_delay caps the delay."""
    backoff = FibonacciBackoff(base_delay=1.0, max_delay=10.0)
    assert backoff.calculate(6) == 8.0
    assert backoff.calculate(11) == 10.0


@pytest.mark.parametrize(("n", "expected"), [(-1, 0), (0, 0), (1, 1), (2, 1), (10, 55)])
def test_fibonacci_number(n: int, expected: int) -> None:
    """Test the Fibonacci helper."""
    assert FibonacciBackoff._fibonacci(n) == expected


def test_fibonacci_backoff_invalid_base_delay() -> None:
    """Test that negative base_delay raises ValueError."""
    with pytest.raises(ValueError, match=r"base_delay must be non-negative"):
        FibonacciBackoff(base_delay=-1.0)


def test_fibonacci_backoff_invalid_max_delay() -> None:
    """Test that non-positive max_delay raises ValueError."""
    with pytest.raises(ValueError, match=r"max_delay must be positive"):
        FibonacciBackoff(max_delay=-2.0)


def test_fibonacci_backoff_large_attempt_with_max_delay() -> None:
    """Test a delay too large for a float is capped by max_delay."""
    backoff = FibonacciBackoff(base_delay=1.0, max_delay=30.0)
    assert backoff.calculate(2000) == 30.0
    assert backoff(2000) == (30.0, True)


def test_fibonacci_backoff_large_attempt_without_max_delay() -> None:
    assert FibonacciBackoff(base_delay=1.0).calculate(2000) == math.inf


@pytest.mark.parametrize("max_delay", [None, 1.0])
def test_fibonacci_backoff_large_attempt_zero_base_delay(max_delay: float | None) -> None:
    assert FibonacciBackoff(base_delay=0.0, max_delay=max_delay).calculate(2000) == 0.0
