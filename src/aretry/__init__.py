r"""aretry - Retry an action between caller-supplied delays.

This package runs an action (sync or async) repeatedly until a stop
policy accepts one of its outcomes, waiting a caller-supplied sequence
of delays between attempts. Failures raised by the action are captured
and handed to the policy; when retries end without an accepted success,
a fallback value is returned instead of an error.

Key Features:
    - Sync and async executors sharing one retry loop design
    - Finite or unbounded delay sequences (any iterable of seconds)
    - Combined ``stop_when`` policy or split ``on_success``/``on_failure``
    - Polling support: keep retrying after a success until a target state
    - Fallback value instead of raised errors
    - httpx request adapters

Example:
    ```pycon
    >>> import asyncio
    >>> from aretry import retry_async
    >>> async def flaky(attempt):
    ...     if attempt == 1:
    ...         raise ConnectionError("first call fails")
    ...     return "ok"
    ...
    >>> asyncio.run(retry_async(flaky, delays=[0]))
    'ok'

    ```
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "Failure",
    "Outcome",
    "OutcomeStatus",
    "RetryConfig",
    "RetryExecutor",
    "Success",
    "__version__",
    "retry",
    "retry_async",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.execute import retry
from aretry.execute_async import retry_async
from aretry.outcome import Failure, Outcome, OutcomeStatus, Success
from aretry.retry import AsyncRetryExecutor, RetryConfig, RetryExecutor

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
