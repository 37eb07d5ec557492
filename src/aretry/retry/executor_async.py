r"""Asynchronous retry executor.

This module provides the AsyncRetryExecutor class that runs an async
action until the stop policy accepts an outcome or the delay sequence
runs out.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from aretry.outcome import Failure, Success
from aretry.retry.decider import StopDecider
from aretry.retry.executor_core import exhausted_result, stopped_result
from aretry.retry.strategy import DelaySchedule

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from aretry.outcome import Outcome
    from aretry.retry.config import RetryConfig

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRetryExecutor:
    """Executes an async action with automatic retry logic.

    The executor holds no per-run state: every call to ``execute`` owns
    its attempt counter and delay cursor, so one executor can run several
    actions concurrently.

    Attributes:
        config: Retry configuration.
        decider: Logic for deciding whether to stop after an outcome.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry.retry import AsyncRetryExecutor, RetryConfig
        >>> async def action(attempt):
        ...     if attempt < 3:
        ...         raise RuntimeError("not yet")
        ...     return attempt
        ...
        >>> executor = AsyncRetryExecutor(RetryConfig(delays=[0, 0, 0]))
        >>> asyncio.run(executor.execute(action))
        3

        ```
    """

    def __init__(self, config: RetryConfig) -> None:
        """Initialize async retry executor.

        Args:
            config: Configuration for retry behavior.

        Raises:
            ValueError: If the configuration mixes stop policy conventions.
            TypeError: If the configuration has invalid field types.
        """
        config.validate()
        self.config = config
        self.decider: StopDecider = StopDecider.from_config(config)

    async def execute(self, action: Callable[[int], Awaitable[Any]]) -> Any:
        """Execute the action with automatic retry logic.

        The first attempt runs immediately. Each retry draws the next
        delay and sleeps with ``asyncio.sleep`` when the delay is
        positive; a zero delay does not yield to the event loop.

        Exceptions raised by the action are recorded as failures and
        never escape. Exceptions raised by a stop policy propagate.

        Args:
            action: Async callable receiving the attempt number
                (1-indexed).

        Returns:
            The accepted success value, or the fallback.
        """
        schedule = DelaySchedule(self.config.delays)
        last_success: Success | None = None
        attempt = 0

        while True:
            if attempt > 0:
                delay = schedule.next_delay()
                if delay is None:
                    return exhausted_result(self.config, attempt, last_success)
                if delay > 0:
                    logger.debug(f"Waiting {delay:.3f}s before attempt {attempt + 1}")
                    await asyncio.sleep(delay)

            attempt += 1
            outcome: Outcome
            try:
                value = await action(attempt)
            except Exception as exc:  # noqa: BLE001
                logger.debug(f"Attempt {attempt} failed: {type(exc).__name__}: {exc}")
                outcome = Failure(attempt=attempt, error=exc)
            else:
                outcome = last_success = Success(attempt=attempt, value=value)

            if self.decider.should_stop(outcome):
                return stopped_result(self.config, outcome)
            if outcome.succeeded:
                logger.debug(f"Attempt {attempt} succeeded but was not accepted")
