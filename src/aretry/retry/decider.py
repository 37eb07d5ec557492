r"""Stop decision logic for the retry loop.

This module provides the StopDecider class that turns either public
stop policy convention into one decision function over outcomes.
"""

from __future__ import annotations

__all__ = ["StopDecider"]

import logging
from typing import TYPE_CHECKING

from aretry.outcome import Success

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.outcome import Outcome
    from aretry.retry.config import RetryConfig

logger: logging.Logger = logging.getLogger(__name__)


class StopDecider:
    """Decides whether the retry loop stops after an outcome.

    Args:
        stop_when: Policy called with every outcome, returning ``True``
            to stop.
        retry_on_failure: If ``False``, every failure stops the loop
            before ``stop_when`` is consulted.

    Example:
        ```pycon
        >>> from aretry.outcome import Failure, Success
        >>> from aretry.retry import StopDecider
        >>> decider = StopDecider(lambda outcome: outcome.attempt >= 2)
        >>> decider.should_stop(Failure(attempt=1, error=ValueError()))
        False
        >>> decider.should_stop(Success(attempt=2, value="ok"))
        True

        ```
    """

    def __init__(
        self,
        stop_when: Callable[[Outcome], bool],
        retry_on_failure: bool = True,
    ) -> None:
        self.stop_when = stop_when
        self.retry_on_failure = retry_on_failure

    @classmethod
    def from_config(cls, config: RetryConfig) -> StopDecider:
        """Create a decider from a retry configuration.

        The combined ``stop_when`` policy is used as is. Otherwise the
        split ``on_success``/``on_failure`` policies are wrapped into an
        equivalent combined policy.

        Args:
            config: The retry configuration.

        Returns:
            The stop decider.
        """
        if config.stop_when is not None:
            return cls(config.stop_when, config.retry_on_failure)
        return cls(
            split_policy(on_success=config.on_success, on_failure=config.on_failure),
            config.retry_on_failure,
        )

    def should_stop(self, outcome: Outcome) -> bool:
        """Determine if the loop stops after this outcome.

        Args:
            outcome: The outcome of the latest attempt.

        Returns:
            ``True`` to stop the loop, ``False`` to go on with the next
            delay.
        """
        if not outcome.succeeded and not self.retry_on_failure:
            logger.debug(f"Attempt {outcome.attempt} failed and retry_on_failure is disabled")
            return True
        return bool(self.stop_when(outcome))


def split_policy(
    on_success: Callable | None = None,
    on_failure: Callable | None = None,
) -> Callable[[Outcome], bool]:
    """Combine split success/failure policies into one stop policy.

    Args:
        on_success: Optional policy called with ``(value, attempt)``.
            Only an explicit ``False`` keeps the loop going.
        on_failure: Optional policy called with ``(error, attempt)``.
            Only a truthy result stops the loop.

    Returns:
        A policy taking an outcome and returning ``True`` to stop.
    """

    def stop_when(outcome: Outcome) -> bool:
        if isinstance(outcome, Success):
            if on_success is None:
                return True
            return on_success(outcome.value, outcome.attempt) is not False
        if on_failure is None:
            return False
        return bool(on_failure(outcome.error, outcome.attempt))

    return stop_when
