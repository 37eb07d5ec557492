r"""Contains the function to run an action with automatic retry logic."""

from __future__ import annotations

__all__ = ["retry"]

from typing import TYPE_CHECKING, Any

from aretry.core.config import DEFAULT_DELAYS, DEFAULT_FALLBACK, DEFAULT_RETRY_ON_FAILURE
from aretry.retry import RetryConfig, RetryExecutor

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from aretry.outcome import Outcome


def retry(
    action: Callable[[int], Any],
    *,
    delays: Iterable[float] = DEFAULT_DELAYS,
    fallback: Any = DEFAULT_FALLBACK,
    retry_on_failure: bool = DEFAULT_RETRY_ON_FAILURE,
    stop_when: Callable[[Outcome], bool] | None = None,
    on_success: Callable[[Any, int], bool | None] | None = None,
    on_failure: Callable[[Exception, int], bool | None] | None = None,
    keep_last_success: bool = False,
) -> Any:
    """Run an action, retrying it between delays until a stop policy
    accepts an outcome.

    This is the blocking version of ``retry_async``: delays are waited
    with ``time.sleep``. See ``retry_async`` for the meaning of each
    argument.

    Args:
        action: The callable to run, called with the attempt number.
        delays: Delays in seconds between attempts.
        fallback: Value returned when no success ends the loop.
        retry_on_failure: If ``False``, the first failure returns the
            fallback.
        stop_when: Optional combined stop policy.
        on_success: Optional success policy.
        on_failure: Optional failure policy.
        keep_last_success: If ``True``, running out of delays returns the
            last successful value instead of the fallback.

    Returns:
        The accepted success value, or the fallback.

    Example:
        ```pycon
        >>> from aretry import retry
        >>> errors = []
        >>> def action(attempt):
        ...     raise ValueError(f"attempt {attempt}")
        ...
        >>> retry(
        ...     action,
        ...     delays=[0, 0, 0],
        ...     fallback="fallback",
        ...     on_failure=lambda error, attempt: errors.append(error) and False,
        ... )
        'fallback'
        >>> len(errors)
        4

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
    executor = RetryExecutor(config)
    return executor.execute(action)
