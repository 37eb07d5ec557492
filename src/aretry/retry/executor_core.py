r"""Shared core logic for retry executors.

This module provides helper functions used by both the synchronous and
asynchronous retry executors to turn the end of the retry loop into a
final result.
"""

from __future__ import annotations

__all__ = ["exhausted_result", "stopped_result"]

import logging
from typing import TYPE_CHECKING, Any

from aretry.outcome import Success

if TYPE_CHECKING:
    from aretry.outcome import Outcome
    from aretry.retry.config import RetryConfig

logger: logging.Logger = logging.getLogger(__name__)


def stopped_result(config: RetryConfig, outcome: Outcome) -> Any:
    """Return the final result after the stop policy ended the loop.

    Args:
        config: The retry configuration.
        outcome: The outcome that stopped the loop.

    Returns:
        The value of an accepted success, or the fallback for an
        accepted failure.
    """
    if isinstance(outcome, Success):
        logger.debug(f"Attempt {outcome.attempt} succeeded and was accepted")
        return outcome.value
    logger.debug(
        f"Giving up after attempt {outcome.attempt}: "
        f"{type(outcome.error).__name__}: {outcome.error}"
    )
    return config.fallback


def exhausted_result(config: RetryConfig, attempt: int, last_success: Success | None) -> Any:
    """Return the final result after the delay sequence ran out.

    Args:
        config: The retry configuration.
        attempt: Number of attempts made.
        last_success: The latest successful outcome, if any.

    Returns:
        The last successful value when ``keep_last_success`` is enabled
        and an attempt succeeded, otherwise the fallback.
    """
    logger.debug(f"Delay sequence exhausted after {attempt} attempt(s)")
    if config.keep_last_success and last_success is not None:
        return last_success.value
    return config.fallback
