r"""Unit tests for asynchronous retry executor."""

from __future__ import annotations

import asyncio
import time
from unittest.mock import AsyncMock, Mock, call

import pytest

from aretry.backoff import ConstantBackoff, LinearBackoff
from aretry.core.config import RetryConfig
from aretry.exceptions import RetryCancelledError
from aretry.predicates import never_retry
from aretry.retry import AsyncRetryExecutor, RetryStrategy


def test_async_retry_executor_creation() -> None:
    """Test AsyncRetryExecutor initialization."""
    config = RetryConfig(max_retries=3, max_wait_time=2.0)
    executor = AsyncRetryExecutor(config)

    assert executor.config is config
    assert isinstance(executor.strategy, RetryStrategy)
    assert executor.strategy.max_wait_time == 2.0
    assert executor.callbacks.config is config


@pytest.mark.asyncio
async def test_async_execute_successful_operation(mock_asleep: Mock) -> None:
    """Test an accepted value is returned after one attempt."""
    operation = AsyncMock(return_value="value")
    executor = AsyncRetryExecutor(RetryConfig(success_predicates=(never_retry,)))

    assert await executor.execute(operation) == "value"
    operation.assert_awaited_once()
    mock_asleep.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("max_retries", [0, 1, 5])
async def test_async_execute_retries_as_much_as_configured(
    max_retries: int, mock_asleep: Mock, mock_callback: Mock
) -> None:
    """Test an always failing coroutine runs max_retries + 1 times."""
    error = ConnectionError("fail")
    operation = AsyncMock(side_effect=error)
    executor = AsyncRetryExecutor(RetryConfig(max_retries=max_retries, on_retry=mock_callback))

    with pytest.raises(ConnectionError) as exc_info:
        await executor.execute(operation)

    assert exc_info.value is error
    assert operation.await_count == max_retries + 1
    assert mock_callback.call_args_list == [
        call(error, retry_count) for retry_count in range(1, max_retries + 1)
    ]


@pytest.mark.asyncio
async def test_async_execute_should_handle_false(mock_asleep: Mock) -> None:
    """Test a non-handled error stops the loop after one attempt."""
    operation = AsyncMock(side_effect=KeyError("missing"))
    executor = AsyncRetryExecutor(RetryConfig(max_retries=5, should_handle=lambda exc: False))

    with pytest.raises(KeyError):
        await executor.execute(operation)

    operation.assert_awaited_once()


@pytest.mark.asyncio
async def test_async_execute_succeeds_on_third_call(mock_asleep: Mock) -> None:
    """Test a coroutine succeeding on its third call."""
    operation = AsyncMock(side_effect=[TimeoutError(), TimeoutError(), "ok"])
    executor = AsyncRetryExecutor(
        RetryConfig(max_retries=5, success_predicates=(never_retry,))
    )

    assert await executor.execute(operation) == "ok"
    assert operation.await_count == 3


@pytest.mark.asyncio
async def test_async_execute_rejected_value_returned_on_exhaustion(mock_asleep: Mock) -> None:
    """Test the default predicate retries values until the budget is
    spent."""
    operation = AsyncMock(side_effect=[1, 2])

    assert await AsyncRetryExecutor().execute(operation) == 2
    assert operation.await_count == 2


@pytest.mark.asyncio
async def test_async_execute_void_ignores_predicates(mock_asleep: Mock) -> None:
    """Test the void form never evaluates success predicates."""
    predicate = Mock(return_value=True)
    operation = AsyncMock(return_value=None)
    executor = AsyncRetryExecutor(RetryConfig(max_retries=5, success_predicates=(predicate,)))

    assert await executor.execute_void(operation) is None
    operation.assert_awaited_once()
    predicate.assert_not_called()


@pytest.mark.asyncio
async def test_async_execute_void_retries_errors(mock_asleep: Mock) -> None:
    """Test the void form retries failing coroutines."""
    operation = AsyncMock(side_effect=ConnectionError("fail"))

    with pytest.raises(ConnectionError):
        await AsyncRetryExecutor(RetryConfig(max_retries=3)).execute_void(operation)

    assert operation.await_count == 4


@pytest.mark.asyncio
async def test_async_sleep_uses_backoff_delay(mock_asleep: Mock) -> None:
    """Test the loop awaits the delays of the backoff provider."""
    operation = AsyncMock(side_effect=ConnectionError("fail"))
    executor = AsyncRetryExecutor(
        RetryConfig(max_retries=3, backoff=LinearBackoff(base_delay=0.5))
    )

    with pytest.raises(ConnectionError):
        await executor.execute(operation)

    assert mock_asleep.call_args_list == [call(0.5), call(1.0), call(1.5)]


@pytest.mark.asyncio
async def test_async_backoff_continue_false_stops_retries(mock_asleep: Mock) -> None:
    """Test the backoff provider can stop the loop before the budget."""
    operation = AsyncMock(side_effect=ConnectionError("fail"))
    backoff = Mock(side_effect=[(0.0, True), (0.0, False)])
    executor = AsyncRetryExecutor(RetryConfig(max_retries=10, backoff=backoff))

    with pytest.raises(ConnectionError):
        await executor.execute(operation)

    assert operation.await_count == 2
    assert backoff.call_args_list == [call(1), call(2)]


@pytest.mark.asyncio
async def test_async_cancellation_stops_retries(mock_asleep: Mock) -> None:
    """Test cancelling inside the third attempt stops the loop."""
    cancel_event = asyncio.Event()
    calls = []

    async def operation() -> None:
        calls.append(1)
        if len(calls) >= 3:
            cancel_event.set()
        msg = "fail"
        raise ConnectionError(msg)

    backoff = Mock(return_value=(0.0, True))
    executor = AsyncRetryExecutor(RetryConfig(max_retries=5, backoff=backoff))

    with pytest.raises(ConnectionError):
        await executor.execute_void(operation, cancel_event=cancel_event)

    assert len(calls) == 3
    assert backoff.call_count == 2


@pytest.mark.asyncio
async def test_async_cancellation_raises_when_configured(mock_asleep: Mock) -> None:
    """Test raise_on_cancel turns cancellation into RetryCancelledError."""
    cancel_event = asyncio.Event()
    cancel_event.set()
    operation = AsyncMock(return_value="partial")
    executor = AsyncRetryExecutor(RetryConfig(max_retries=5, raise_on_cancel=True))

    with pytest.raises(RetryCancelledError) as exc_info:
        await executor.execute(operation, cancel_event=cancel_event)

    assert exc_info.value.attempts == 1
    assert exc_info.value.last_value == "partial"
    assert exc_info.value.last_error is None


@pytest.mark.asyncio
async def test_async_cancellation_interrupts_backoff_sleep() -> None:
    """Test setting the event wakes a pending backoff sleep."""
    cancel_event = asyncio.Event()
    operation = AsyncMock(side_effect=ConnectionError("fail"))
    executor = AsyncRetryExecutor(
        RetryConfig(max_retries=5, backoff=ConstantBackoff(delay=30.0))
    )

    loop = asyncio.get_running_loop()
    loop.call_later(0.05, cancel_event.set)
    start = time.monotonic()
    with pytest.raises(ConnectionError):
        await executor.execute(operation, cancel_event=cancel_event)

    assert time.monotonic() - start < 10.0
    operation.assert_awaited_once()


@pytest.mark.asyncio
async def test_async_task_cancellation_propagates() -> None:
    """Test cancelling the enclosing task is not treated as a failure."""
    started = asyncio.Event()

    async def operation() -> None:
        started.set()
        await asyncio.Event().wait()

    task = asyncio.create_task(AsyncRetryExecutor(RetryConfig(max_retries=5)).execute(operation))
    await started.wait()
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task


@pytest.mark.asyncio
async def test_async_on_success_and_on_failure(mock_asleep: Mock) -> None:
    """Test terminal callbacks fire once per execution."""
    on_success = Mock()
    on_failure = Mock()
    config = RetryConfig(
        max_retries=1,
        success_predicates=(never_retry,),
        on_success=on_success,
        on_failure=on_failure,
    )
    executor = AsyncRetryExecutor(config)

    await executor.execute(AsyncMock(side_effect=[TimeoutError(), "ok"]))
    with pytest.raises(TimeoutError):
        await executor.execute(AsyncMock(side_effect=TimeoutError()))

    on_success.assert_called_once()
    assert on_success.call_args[0][0].attempts == 2
    on_failure.assert_called_once()
    assert on_failure.call_args[0][0].attempts == 2
