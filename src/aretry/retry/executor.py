r"""Synchronous retry executor.

This module provides the RetryExecutor class, the blocking counterpart
of AsyncRetryExecutor.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import logging
import time
from typing import TYPE_CHECKING, Any

from aretry.outcome import Failure, Success
from aretry.retry.decider import StopDecider
from aretry.retry.executor_core import exhausted_result, stopped_result
from aretry.retry.strategy import DelaySchedule

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.outcome import Outcome
    from aretry.retry.config import RetryConfig

logger: logging.Logger = logging.getLogger(__name__)


class RetryExecutor:
    """Executes an action with automatic retry logic.

    Attributes:
        config: Retry configuration.
        decider: Logic for deciding whether to stop after an outcome.

    Example:
        ```pycon
        >>> from aretry.retry import RetryConfig, RetryExecutor
        >>> executor = RetryExecutor(RetryConfig(delays=[0, 0], fallback="gave up"))
        >>> def action(attempt):
        ...     raise RuntimeError(f"attempt {attempt} failed")
        ...
        >>> executor.execute(action)
        'gave up'

        ```
    """

    def __init__(self, config: RetryConfig) -> None:
        config.validate()
        self.config = config
        self.decider: StopDecider = StopDecider.from_config(config)

    def execute(self, action: Callable[[int], Any]) -> Any:
        """Execute the action with automatic retry logic.

        Args:
            action: Callable receiving the attempt number (1-indexed).

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
                    time.sleep(delay)

            attempt += 1
            outcome: Outcome
            try:
                value = action(attempt)
            except Exception as exc:  # noqa: BLE001
                logger.debug(f"Attempt {attempt} failed: {type(exc).__name__}: {exc}")
                outcome = Failure(attempt=attempt, error=exc)
            else:
                outcome = last_success = Success(attempt=attempt, value=value)

            if self.decider.should_stop(outcome):
                return stopped_result(self.config, outcome)
            if outcome.succeeded:
                logger.debug(f"Attempt {attempt} succeeded but was not accepted")
