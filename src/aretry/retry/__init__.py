r"""Retry package implementing class-based composition pattern.

Public API:
    - RetryConfig: Configuration for retry behavior
    - StopDecider: Logic for deciding whether to stop after an outcome
    - DelaySchedule: Cursor over the delay sequence of one run
    - RetryExecutor: Synchronous retry executor
    - AsyncRetryExecutor: Asynchronous retry executor
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "DelaySchedule",
    "RetryConfig",
    "RetryExecutor",
    "StopDecider",
]

from aretry.retry.config import RetryConfig
from aretry.retry.decider import StopDecider
from aretry.retry.executor import RetryExecutor
from aretry.retry.executor_async import AsyncRetryExecutor
from aretry.retry.strategy import DelaySchedule
