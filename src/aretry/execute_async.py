r"""Contains the function to run an async action with automatic retry
logic."""

from __future__ import annotations

__all__ = ["retry_async"]

from typing import TYPE_CHECKING, Any

from aretry.core.config import DEFAULT_DELAYS, DEFAULT_FALLBACK, DEFAULT_RETRY_ON_FAILURE
from aretry.retry import AsyncRetryExecutor, RetryConfig

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterable

    from aretry.outcome import Outcome


async def retry_async(
    action: Callable[[int], Awaitable[Any]],
    *,
    delays: Iterable[float] = DEFAULT_DELAYS,
    fallback: Any = DEFAULT_FALLBACK,
    retry_on_failure: bool = DEFAULT_RETRY_ON_FAILURE,
    stop_when: Callable[[Outcome], bool] | None = None,
    on_success: Callable[[Any, int], bool | None] | None = None,
    on_failure: Callable[[Exception, int], bool | None] | None = None,
    keep_last_success: bool = False,
) -> Any:
    """Run an async action, retrying it between delays until a stop
    policy accepts an outcome.

    The action is called with the attempt number (1, 2, 3, ...). The
    first attempt runs immediately; each retry waits for the next value
    of ``delays``. When ``delays`` runs out, the fallback is returned.

    Stop policies (``stop_when`` cannot be combined with the others):
    - ``stop_when(outcome)``: called after every attempt with a
      ``Success`` or ``Failure``. Return ``True`` to stop; a stopped
      success returns its value, a stopped failure returns the fallback.
    - ``on_success(value, attempt)``: return ``False`` to keep retrying
      after a success (e.g. when polling for a target state).
    - ``on_failure(error, attempt)``: return ``True`` to stop retrying
      and return the fallback.

    Exceptions raised by the action never escape this function; use a
    policy closure to capture the last error if needed.

    Args:
        action: The async callable to run.
        delays: Delays in seconds between attempts. May be unbounded,
            e.g. ``ConstantDelays(1.0)`` or ``itertools.repeat(1.0)``.
        fallback: Value returned when no success ends the loop.
        retry_on_failure: If ``False``, the first failure returns the
            fallback without consulting any policy.
        stop_when: Optional combined stop policy.
        on_success: Optional success policy.
        on_failure: Optional failure policy.
        keep_last_success: If ``True``, running out of delays returns the
            last successful value (if any) instead of the fallback.

    Returns:
        The accepted success value, or the fallback.

    Raises:
        ValueError: If ``stop_when`` is combined with ``on_success`` or
            ``on_failure``, or if a delay is negative.
        TypeError: If a policy is not callable or a delay is not a number.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry import retry_async
        >>> from aretry.delays import ConstantDelays
        >>> async def poll(attempt):
        ...     return "ready" if attempt >= 3 else "pending"
        ...
        >>> asyncio.run(
        ...     retry_async(
        ...         poll,
        ...         delays=ConstantDelays(0),
        ...         on_success=lambda status, attempt: status == "ready",
        ...     )
        ... )
        'ready'

        ```
    """
    config = RetryConfig(
        delays=delays,
        fallback=fallback,
        retry_on_failure=retry_on_failure,
        stop_when=stop_when,
        on_success=on_success,
        on_failure=on_failure,
        keep_last_success=keep_last_success,
    )
    executor = AsyncRetryExecutor(config)
    return await executor.execute(action)
