r"""Configuration dataclass for retry behavior.

This module provides the configuration object consumed by the retry
executors.
"""

from __future__ import annotations

__all__ = ["RetryConfig"]

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from aretry.core.config import DEFAULT_DELAYS, DEFAULT_FALLBACK, DEFAULT_RETRY_ON_FAILURE

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.outcome import Outcome


@dataclass
class RetryConfig:
    """Configuration for retry behavior.

    Two stop policy conventions are supported and cannot be mixed: a
    combined ``stop_when`` policy called for every outcome, or the split
    ``on_success``/``on_failure`` policies. Without any policy, the first
    success is accepted and every failure is retried.

    A one-shot iterator (e.g. a generator) in ``delays`` is consumed by
    the first run; use a list, a tuple, or a ``BaseDelays`` instance to
    reuse a configuration.

    Attributes:
        delays: Delays in seconds between attempts. One delay is used per
            retry, so the action runs at most ``len(delays) + 1`` times.
        fallback: Value returned when no success ends the loop.
        retry_on_failure: If ``False``, the first failure ends the loop
            without consulting any failure policy.
        stop_when: Optional combined policy called with every outcome.
            Returns ``True`` to stop.
        on_success: Optional policy called with ``(value, attempt)`` after
            a success. Returns ``False`` to keep retrying; ``True`` or
            ``None`` accepts the value.
        on_failure: Optional policy called with ``(error, attempt)`` after
            a failure. Returns ``True`` to stop and return the fallback;
            ``False`` or ``None`` retries.
        keep_last_success: If ``True``, a loop that runs out of delays
            returns the last successful value instead of the fallback.
    """

    delays: Iterable[float] = DEFAULT_DELAYS
    fallback: Any = DEFAULT_FALLBACK
    retry_on_failure: bool = DEFAULT_RETRY_ON_FAILURE
    stop_when: Callable[[Outcome], bool] | None = None
    on_success: Callable[[Any, int], bool | None] | None = None
    on_failure: Callable[[Exception, int], bool | None] | None = None
    keep_last_success: bool = False

    def validate(self) -> None:
        """Validate the configuration.

        Raises:
            ValueError: If ``stop_when`` is combined with ``on_success``
                or ``on_failure``.
            TypeError: If ``delays`` is not iterable or a policy is not
                callable.

        Example:
            ```pycon
            >>> from aretry.retry import RetryConfig
            >>> RetryConfig(delays=[0.1, 0.2]).validate()
            >>> RetryConfig(stop_when=lambda outcome: True, on_success=lambda v, a: True).validate()
            Traceback (most recent call last):
            ...
            ValueError: stop_when cannot be combined with on_success or on_failure

            ```
        """
        if not isinstance(self.delays, Iterable):
            msg = f"delays must be iterable, got {type(self.delays).__name__}"
            raise TypeError(msg)
        for name in ("stop_when", "on_success", "on_failure"):
            policy = getattr(self, name)
            if policy is not None and not callable(policy):
                msg = f"{name} must be callable, got {type(policy).__name__}"
                raise TypeError(msg)
        if self.stop_when is not None and (
            self.on_success is not None or self.on_failure is not None
        ):
            msg = "stop_when cannot be combined with on_success or on_failure"
            raise ValueError(msg)
