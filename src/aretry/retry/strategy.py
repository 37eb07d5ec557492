r"""Delay schedule consumed between retry attempts.

This module provides the DelaySchedule class, the per-run cursor over a
caller-supplied delay sequence.
"""

from __future__ import annotations

__all__ = ["DelaySchedule"]

import math
from numbers import Real
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class DelaySchedule:
    """Cursor yielding one delay per retry.

    The underlying sequence is read lazily, so unbounded sequences are
    never materialized. Each delay is validated when it is drawn.

    Args:
        delays: The delay sequence in seconds.

    Attributes:
        retries: Number of delays drawn so far.

    Example:
        ```pycon
        >>> from aretry.retry import DelaySchedule
        >>> schedule = DelaySchedule([0.5, 0])
        >>> schedule.next_delay()
        0.5
        >>> schedule.next_delay()
        0
        >>> schedule.next_delay() is None
        True
        >>> schedule.retries
        2

        ```
    """

    def __init__(self, delays: Iterable[float]) -> None:
        self._iterator = iter(delays)
        self._exhausted = False
        self.retries = 0

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def next_delay(self) -> float | None:
        """Draw the delay before the next retry.

        Returns:
            The delay in seconds, or ``None`` once the sequence is
            exhausted.

        Raises:
            TypeError: If the drawn delay is not a real number.
            ValueError: If the drawn delay is negative or NaN.
        """
        if self._exhausted:
            return None
        try:
            delay = next(self._iterator)
        except StopIteration:
            self._exhausted = True
            return None

        if isinstance(delay, bool) or not isinstance(delay, Real):
            msg = f"delays must be real numbers, got {type(delay).__name__}"
            raise TypeError(msg)
        if math.isnan(delay) or delay < 0:
            msg = f"delays must be non-negative, got {delay}"
            raise ValueError(msg)

        self.retries += 1
        return delay
