r"""Unit tests for asynchronous retry executor."""

from __future__ import annotations

import asyncio
import itertools
import logging
from unittest.mock import AsyncMock, Mock, call

import pytest

from aretry.delays import ConstantDelays
from aretry.outcome import Failure, Success
from aretry.retry import AsyncRetryExecutor, RetryConfig


def test_async_retry_executor_creation() -> None:
    """Test AsyncRetryExecutor initialization."""
    config = RetryConfig(delays=[0.1])

    executor = AsyncRetryExecutor(config)

    assert executor.config is config
    assert executor.decider is not None


def test_async_retry_executor_rejects_mixed_policies() -> None:
    """Test AsyncRetryExecutor validates its configuration."""
    config = RetryConfig(stop_when=Mock(), on_failure=Mock())

    with pytest.raises(ValueError, match="stop_when cannot be combined"):
        AsyncRetryExecutor(config)


@pytest.mark.asyncio
async def test_async_retry_executor_success_first_attempt(mock_asleep: Mock) -> None:
    """Test first-attempt success returns immediately without sleeping."""
    action = AsyncMock(return_value="Hello world!")
    executor = AsyncRetryExecutor(RetryConfig(delays=[1.0, 1.0]))

    result = await executor.execute(action)

    assert result == "Hello world!"
    action.assert_awaited_once_with(1)
    mock_asleep.assert_not_called()


@pytest.mark.asyncio
async def test_async_retry_executor_runs_once_without_delays() -> None:
    """Test empty delays means one attempt, even if not accepted."""
    action = AsyncMock(return_value=1)
    executor = AsyncRetryExecutor(RetryConfig(stop_when=lambda outcome: False, fallback="fb"))

    result = await executor.execute(action)

    assert result == "fb"
    action.assert_awaited_once_with(1)


@pytest.mark.asyncio
async def test_async_retry_executor_exhausts_delays(mock_asleep: Mock) -> None:
    """Test always-failing action runs once plus once per delay."""
    action = AsyncMock(side_effect=RuntimeError("Oops"))
    executor = AsyncRetryExecutor(RetryConfig(delays=[0.1, 0.2, 0.3], fallback="Fallback value"))

    result = await executor.execute(action)

    assert result == "Fallback value"
    assert action.await_args_list == [call(1), call(2), call(3), call(4)]
    assert mock_asleep.await_args_list == [call(0.1), call(0.2), call(0.3)]


@pytest.mark.asyncio
async def test_async_retry_executor_default_fallback_is_none() -> None:
    """Test the default fallback is None."""
    action = AsyncMock(side_effect=RuntimeError("Oops"))

    assert await AsyncRetryExecutor(RetryConfig(delays=[0])).execute(action) is None


@pytest.mark.asyncio
async def test_async_retry_executor_retry_on_failure_disabled(mock_asleep: Mock) -> None:
    """Test retry_on_failure=False returns the fallback after one failure."""
    action = AsyncMock(side_effect=RuntimeError("Oops"))
    on_failure = Mock(return_value=False)
    executor = AsyncRetryExecutor(
        RetryConfig(delays=[1.0, 1.0], retry_on_failure=False, fallback=False, on_failure=on_failure)
    )

    result = await executor.execute(action)

    assert result is False
    action.assert_awaited_once_with(1)
    on_failure.assert_not_called()
    mock_asleep.assert_not_called()


@pytest.mark.asyncio
async def test_async_retry_executor_retry_on_failure_disabled_skips_stop_when() -> None:
    """Test retry_on_failure=False does not consult stop_when on
    failure."""
    stop_when = Mock(return_value=False)
    executor = AsyncRetryExecutor(
        RetryConfig(delays=[0, 0], retry_on_failure=False, stop_when=stop_when, fallback="fb")
    )

    result = await executor.execute(AsyncMock(side_effect=RuntimeError("Oops")))

    assert result == "fb"
    stop_when.assert_not_called()


@pytest.mark.asyncio
async def test_async_retry_executor_stop_when_on_second_attempt() -> None:
    """Test stop_when can abandon the loop on a given attempt."""
    action = AsyncMock(side_effect=RuntimeError("Oops"))
    executor = AsyncRetryExecutor(
        RetryConfig(delays=[0, 0, 0], stop_when=lambda outcome: outcome.attempt == 2, fallback="fb")
    )

    result = await executor.execute(action)

    assert result == "fb"
    assert action.await_count == 2


@pytest.mark.asyncio
async def test_async_retry_executor_stop_when_receives_outcomes() -> None:
    """Test stop_when receives one outcome per attempt, in order."""
    error = RuntimeError("Oops")
    action = AsyncMock(side_effect=[error, "ok"])
    stop_when = Mock(side_effect=lambda outcome: outcome.succeeded)
    executor = AsyncRetryExecutor(RetryConfig(delays=[0, 0, 0], stop_when=stop_when))

    result = await executor.execute(action)

    assert result == "ok"
    assert stop_when.call_args_list == [
        call(Failure(attempt=1, error=error)),
        call(Success(attempt=2, value="ok")),
    ]


@pytest.mark.asyncio
async def test_async_retry_executor_stop_when_false_on_success_retries() -> None:
    """Test a success not accepted by stop_when is retried."""
    action = AsyncMock(side_effect=[1, 2, 3])
    executor = AsyncRetryExecutor(
        RetryConfig(delays=[0, 0, 0], stop_when=lambda outcome: outcome.value == 3)
    )

    assert await executor.execute(action) == 3
    assert action.await_count == 3


@pytest.mark.asyncio
async def test_async_retry_executor_polls_until_on_success_accepts(mock_asleep: Mock) -> None:
    """Test polling with unbounded delays stops on the 5th attempt."""

    async def action(attempt: int) -> int:
        return attempt

    on_success = Mock(side_effect=lambda value, attempt: value == 5)
    executor = AsyncRetryExecutor(RetryConfig(delays=ConstantDelays(0.1), on_success=on_success))

    result = await executor.execute(action)

    assert result == 5
    assert on_success.call_count == 5
    assert on_success.call_args_list[-1] == call(5, 5)
    assert mock_asleep.await_count == 4


@pytest.mark.asyncio
async def test_async_retry_executor_polls_with_itertools_repeat() -> None:
    """Test any unbounded iterable works as a delay sequence."""
    action = AsyncMock(side_effect=["pending", "pending", "done"])
    executor = AsyncRetryExecutor(
        RetryConfig(
            delays=itertools.repeat(0),
            on_success=lambda value, attempt: value == "done",
        )
    )

    assert await executor.execute(action) == "done"
    assert action.await_count == 3


@pytest.mark.asyncio
async def test_async_retry_executor_on_success_none_accepts() -> None:
    """Test on_success returning None accepts the value."""
    action = AsyncMock(return_value="value")
    executor = AsyncRetryExecutor(RetryConfig(delays=[0], on_success=Mock(return_value=None)))

    assert await executor.execute(action) == "value"
    action.assert_awaited_once()


@pytest.mark.asyncio
async def test_async_retry_executor_on_failure_stops() -> None:
    """Test on_failure returning True returns the fallback."""
    error = RuntimeError("Oops")
    action = AsyncMock(side_effect=[None, error])
    on_success = Mock(return_value=False)
    on_failure = Mock(return_value=True)
    executor = AsyncRetryExecutor(
        RetryConfig(
            delays=[0, 0, 0],
            on_success=on_success,
            on_failure=on_failure,
            fallback="fb",
        )
    )

    result = await executor.execute(action)

    assert result == "fb"
    assert action.await_count == 2
    on_success.assert_called_once_with(None, 1)
    on_failure.assert_called_once_with(error, 2)


@pytest.mark.asyncio
async def test_async_retry_executor_on_failure_false_retries() -> None:
    """Test on_failure returning False retries."""
    action = AsyncMock(side_effect=[RuntimeError("Oops"), "ok"])
    executor = AsyncRetryExecutor(RetryConfig(delays=[0], on_failure=Mock(return_value=False)))

    assert await executor.execute(action) == "ok"


@pytest.mark.asyncio
async def test_async_retry_executor_returns_fallback_on_exhaustion_after_success() -> None:
    """Test the fallback wins over non-accepted successes by default."""
    action = AsyncMock(side_effect=[1, 2])
    executor = AsyncRetryExecutor(
        RetryConfig(delays=[0], on_success=Mock(return_value=False), fallback="fb")
    )

    assert await executor.execute(action) == "fb"


@pytest.mark.asyncio
async def test_async_retry_executor_keep_last_success() -> None:
    """Test keep_last_success returns the latest success on
    exhaustion."""
    action = AsyncMock(side_effect=[1, 2, RuntimeError("Oops")])
    executor = AsyncRetryExecutor(
        RetryConfig(
            delays=[0, 0],
            on_success=Mock(return_value=False),
            fallback="fb",
            keep_last_success=True,
        )
    )

    assert await executor.execute(action) == 2


@pytest.mark.asyncio
async def test_async_retry_executor_keep_last_success_without_success() -> None:
    """Test keep_last_success falls back when nothing succeeded."""
    action = AsyncMock(side_effect=RuntimeError("Oops"))
    executor = AsyncRetryExecutor(RetryConfig(delays=[0], fallback="fb", keep_last_success=True))

    assert await executor.execute(action) == "fb"


@pytest.mark.asyncio
async def test_async_retry_executor_zero_delay_does_not_sleep(mock_asleep: Mock) -> None:
    """Test zero delays skip the sleep, positive delays do not."""
    action = AsyncMock(side_effect=RuntimeError("Oops"))
    executor = AsyncRetryExecutor(RetryConfig(delays=[0, 0.5, 0]))

    await executor.execute(action)

    assert action.await_count == 4
    mock_asleep.assert_awaited_once_with(0.5)


@pytest.mark.asyncio
async def test_async_retry_executor_sleeps_before_next_attempt() -> None:
    """Test the sleep happens between attempts, never before the
    first."""
    events = []

    async def action(attempt: int) -> None:
        events.append(f"attempt {attempt}")
        raise RuntimeError("Oops")

    async def fake_sleep(delay: float) -> None:
        events.append(f"sleep {delay}")

    executor = AsyncRetryExecutor(RetryConfig(delays=[0.1, 0.2]))
    with pytest.MonkeyPatch.context() as monkeypatch:
        monkeypatch.setattr(asyncio, "sleep", fake_sleep)
        await executor.execute(action)

    assert events == ["attempt 1", "sleep 0.1", "attempt 2", "sleep 0.2", "attempt 3"]


@pytest.mark.asyncio
async def test_async_retry_executor_policy_error_propagates() -> None:
    """Test exceptions raised by a policy abort the loop."""
    action = AsyncMock(return_value="ok")
    executor = AsyncRetryExecutor(
        RetryConfig(delays=[0, 0], on_success=Mock(side_effect=KeyError("bad policy")))
    )

    with pytest.raises(KeyError, match="bad policy"):
        await executor.execute(action)
    action.assert_awaited_once()


@pytest.mark.asyncio
async def test_async_retry_executor_cancellation_propagates() -> None:
    """Test cancellation raised by the action is not captured as a
    failure."""
    action = AsyncMock(side_effect=asyncio.CancelledError())
    executor = AsyncRetryExecutor(RetryConfig(delays=[0, 0]))

    with pytest.raises(asyncio.CancelledError):
        await executor.execute(action)
    action.assert_awaited_once()


@pytest.mark.asyncio
async def test_async_retry_executor_negative_delay() -> None:
    """Test a negative delay raises when it is reached."""
    action = AsyncMock(side_effect=RuntimeError("Oops"))
    executor = AsyncRetryExecutor(RetryConfig(delays=[0, -1]))

    with pytest.raises(ValueError, match="delays must be non-negative"):
        await executor.execute(action)
    assert action.await_count == 2


@pytest.mark.asyncio
async def test_async_retry_executor_reusable_config() -> None:
    """Test each execution owns its attempt counter and delay cursor."""
    executor = AsyncRetryExecutor(RetryConfig(delays=ConstantDelays(0, count=2), fallback="fb"))
    first = AsyncMock(side_effect=RuntimeError("Oops"))
    second = AsyncMock(side_effect=RuntimeError("Oops"))

    assert await executor.execute(first) == "fb"
    assert await executor.execute(second) == "fb"
    assert first.await_args_list == [call(1), call(2), call(3)]
    assert second.await_args_list == [call(1), call(2), call(3)]


@pytest.mark.asyncio
async def test_async_retry_executor_concurrent_runs_are_independent() -> None:
    """Test concurrent executions do not share attempt counters."""
    seen: dict[str, list[int]] = {"a": [], "b": []}

    def make_action(name: str, succeed_on: int):
        async def action(attempt: int) -> str:
            seen[name].append(attempt)
            await asyncio.sleep(0)
            if attempt < succeed_on:
                raise RuntimeError("Oops")
            return name

        return action

    executor = AsyncRetryExecutor(RetryConfig(delays=[0.001] * 5))
    results = await asyncio.gather(
        executor.execute(make_action("a", 2)),
        executor.execute(make_action("b", 4)),
    )

    assert results == ["a", "b"]
    assert seen == {"a": [1, 2], "b": [1, 2, 3, 4]}


@pytest.mark.asyncio
async def test_async_retry_executor_logs_failures(caplog: pytest.LogCaptureFixture) -> None:
    """Test failed attempts and exhaustion are logged at debug level."""
    action = AsyncMock(side_effect=RuntimeError("Oops"))
    executor = AsyncRetryExecutor(RetryConfig(delays=[0]))

    with caplog.at_level(logging.DEBUG, logger="aretry"):
        await executor.execute(action)

    assert "Attempt 1 failed: RuntimeError: Oops" in caplog.text
    assert "Delay sequence exhausted after 2 attempt(s)" in caplog.text
